"""Unit tests for SystemRegistry, SystemLoader and GameContext."""

import random
import unittest
from typing import ClassVar
from unittest.mock import MagicMock

import pytest

from brickfall.events import EventBus
from brickfall.systems.base import BaseSystem
from brickfall.systems.game_context import GameContext
from brickfall.systems.loader import CircularDependencyError, MissingDependencyError, SystemLoader
from brickfall.systems.registry import SystemRegistry


class NeedsMissing(BaseSystem):
    name: ClassVar[str] = "test_needs_missing"
    dependencies: ClassVar[list[str]] = ["test_not_installed"]

    def setup(self, context: object) -> None:
        pass


class CycleA(BaseSystem):
    name: ClassVar[str] = "test_cycle_a"
    dependencies: ClassVar[list[str]] = ["test_cycle_b"]

    def setup(self, context: object) -> None:
        pass


class CycleB(BaseSystem):
    name: ClassVar[str] = "test_cycle_b"
    dependencies: ClassVar[list[str]] = ["test_cycle_a"]

    def setup(self, context: object) -> None:
        pass


class TestSystemRegistry(unittest.TestCase):
    """Unit test class for SystemRegistry."""

    def tearDown(self) -> None:
        """Remove test systems from the registry."""
        SystemRegistry.unregister("test_needs_missing")

    def test_register_and_get(self) -> None:
        """Test that a registered class can be looked up by name."""
        SystemRegistry.register(NeedsMissing)

        assert SystemRegistry.is_registered("test_needs_missing")
        assert SystemRegistry.get("test_needs_missing") is NeedsMissing

    def test_register_without_name(self) -> None:
        """Test that a system class must have a name."""

        class Unnamed(BaseSystem):
            def setup(self, context: object) -> None:
                pass

        with pytest.raises(ValueError, match="must define a 'name'"):
            SystemRegistry.register(Unnamed)


class TestSystemLoader(unittest.TestCase):
    """Unit test class for SystemLoader."""

    def tearDown(self) -> None:
        """Remove test systems from the registry."""
        for name in ("test_needs_missing", "test_cycle_a", "test_cycle_b"):
            SystemRegistry.unregister(name)

    def test_default_systems_in_dependency_order(self) -> None:
        """Test that every installed system is created after its dependencies."""
        loader = SystemLoader()

        systems = loader.instantiate_all()

        assert set(systems) == {"bricks", "particle", "session", "physics", "input"}
        order = loader.load_order
        for name, system in systems.items():
            for dependency in system.dependencies:
                assert order.index(dependency) < order.index(name)

    def test_only_installed_modules_are_loaded(self) -> None:
        """Test that registered systems outside INSTALLED_SYSTEMS are ignored."""
        SystemRegistry.register(NeedsMissing)

        systems = SystemLoader().instantiate_all()

        assert "test_needs_missing" not in systems

    def test_missing_dependency(self) -> None:
        """Test that a dependency on an uninstalled system is an error."""
        SystemRegistry.register(NeedsMissing)
        loader = SystemLoader([NeedsMissing.__module__])

        with pytest.raises(MissingDependencyError, match="test_not_installed"):
            loader.instantiate_all()

    def test_circular_dependency(self) -> None:
        """Test that a dependency cycle is an error."""
        SystemRegistry.register(CycleA)
        SystemRegistry.register(CycleB)
        loader = SystemLoader([CycleA.__module__])

        with pytest.raises(CircularDependencyError):
            loader.instantiate_all()

    def test_unknown_module(self) -> None:
        """Test that a system module that cannot be imported is re-raised."""
        loader = SystemLoader(["brickfall.systems.does_not_exist"])

        with pytest.raises(ImportError):
            loader.load_modules()

    def test_lifecycle_and_key_dispatch(self) -> None:
        """Test that lifecycle calls and key events reach every system."""
        loader = SystemLoader()
        systems = loader.instantiate_all()
        for name in systems:
            loader._instances[name] = MagicMock()
            loader._instances[name].on_key_press.return_value = name == "input"
        context = MagicMock()

        loader.setup_all(context)
        loader.reset_all(context)
        handled = loader.on_key_press_all(1, 0, context)
        loader.cleanup_all()

        assert handled
        for mock_system in loader._instances.values():
            mock_system.setup.assert_called_once_with(context)
            mock_system.reset.assert_called_once_with(context)
            mock_system.cleanup.assert_called_once()


class TestGameContext(unittest.TestCase):
    """Unit test class for GameContext."""

    def test_register_system(self) -> None:
        """Test that systems are found by name and exposed by role."""
        context = GameContext(event_bus=EventBus(), rng=random.Random(1), width=400, height=800)
        systems = SystemLoader().instantiate_all()

        for name, system in systems.items():
            context.register_system(name, system)

        assert context.get_system("bricks") is systems["bricks"]
        assert context.brick_manager is systems["bricks"]
        assert context.session_manager is systems["session"]
        assert context.get_system("missing") is None
