"""Loader for pluggable systems.

The SystemLoader handles:
1. Importing the modules listed in INSTALLED_SYSTEMS to trigger registration
2. Ordering systems so that dependencies come first
3. Instantiating systems and driving their lifecycle (setup, reset, cleanup)
4. Dispatching key events in the same order
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from brickfall.conf import settings
from brickfall.systems.registry import SystemRegistry

if TYPE_CHECKING:
    from brickfall.systems.base import BaseSystem
    from brickfall.systems.game_context import GameContext

logger = logging.getLogger(__name__)


class MissingDependencyError(Exception):
    """Raised when a system depends on a system that is not installed."""


class CircularDependencyError(Exception):
    """Raised when system dependencies form a cycle."""


class SystemLoader:
    """Loads and manages system instances.

    Attributes:
        installed_systems: Module paths imported to register systems.
    """

    def __init__(self, installed_systems: list[str] | None = None) -> None:
        """Initialize the system loader.

        Args:
            installed_systems: Module paths to import. Defaults to settings.INSTALLED_SYSTEMS.
        """
        self.installed_systems = list(installed_systems or settings.INSTALLED_SYSTEMS)
        self._instances: dict[str, BaseSystem] = {}
        self._load_order: list[str] = []

    def load_modules(self) -> None:
        """Import all configured system modules to trigger registration."""
        for module_path in self.installed_systems:
            try:
                importlib.import_module(module_path)
                logger.debug("Loaded system module: %s", module_path)
            except ImportError:
                logger.exception("Could not load system module '%s'", module_path)
                raise

    def instantiate_all(self) -> dict[str, BaseSystem]:
        """Create instances of every registered system from an installed module.

        Returns:
            Dictionary mapping system names to their instances, in load order.

        Raises:
            MissingDependencyError: If a dependency is not installed.
            CircularDependencyError: If dependencies form a cycle.
        """
        self.load_modules()

        installed = {
            name: system_class
            for name, system_class in SystemRegistry.get_all().items()
            if self._is_installed(system_class.__module__)
        }
        if not installed:
            logger.warning("No systems registered")
            return {}

        self._load_order = self._resolve_order(installed)

        for name in self._load_order:
            self._instances[name] = installed[name]()
            logger.debug("Instantiated system: %s", name)

        logger.info("Instantiated %d systems", len(self._instances))
        return dict(self._instances)

    def _is_installed(self, module_name: str) -> bool:
        return any(
            module_name == module_path or module_name.startswith(f"{module_path}.")
            for module_path in self.installed_systems
        )

    @staticmethod
    def _resolve_order(systems: dict[str, type[BaseSystem]]) -> list[str]:
        """Depth-first topological sort; declaration order breaks ties."""
        order: list[str] = []
        visiting: set[str] = set()

        def visit(name: str, path: list[str]) -> None:
            if name in order:
                return
            if name in visiting:
                cycle = " -> ".join([*path, name])
                msg = f"Circular system dependency: {cycle}"
                raise CircularDependencyError(msg)
            visiting.add(name)
            for dependency in systems[name].dependencies:
                if dependency not in systems:
                    msg = f"System '{name}' depends on '{dependency}', which is not installed"
                    raise MissingDependencyError(msg)
                visit(dependency, [*path, name])
            visiting.discard(name)
            order.append(name)

        for name in systems:
            visit(name, [])
        return order

    def setup_all(self, context: GameContext) -> None:
        """Call setup() on every system in load order."""
        for name in self._load_order:
            self._instances[name].setup(context)
            logger.debug("Set up system: %s", name)

    def reset_all(self, context: GameContext) -> None:
        """Call reset() on every system in load order (start of every game)."""
        for name in self._load_order:
            self._instances[name].reset(context)

    def cleanup_all(self) -> None:
        """Call cleanup() on every system in reverse load order."""
        for name in reversed(self._load_order):
            self._instances[name].cleanup()
        logger.debug("Cleaned up %d systems", len(self._load_order))

    def on_key_press_all(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Dispatch a key press until a system consumes it."""
        return any(
            self._instances[name].on_key_press(symbol, modifiers, context) for name in self._load_order
        )

    def on_key_release_all(self, symbol: int, modifiers: int, context: GameContext) -> bool:
        """Dispatch a key release until a system consumes it."""
        return any(
            self._instances[name].on_key_release(symbol, modifiers, context) for name in self._load_order
        )

    def get_system(self, name: str) -> BaseSystem | None:
        """Get a system instance by name."""
        return self._instances.get(name)

    @property
    def load_order(self) -> list[str]:
        """System names in setup order."""
        return list(self._load_order)
