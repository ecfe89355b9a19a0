"""Read-only copy of the simulation handed to the renderer after every tick."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brickfall.systems.bricks.base import Brick
    from brickfall.systems.game_context import GameContext
    from brickfall.systems.particle.base import Particle, Shard
    from brickfall.systems.physics.base import Ball, Paddle
    from brickfall.types import GameMode


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything a renderer needs to draw one frame.

    Entities are copies; mutating them does not affect the running game.

    Attributes:
        width: Surface width.
        height: Surface height.
        ball: The ball.
        paddle: The paddle.
        bricks: Column-major brick grid; empty cells are None.
        row_offset: Vertical offset to add to every brick while the field slides down.
        particles: Live square particles.
        shards: Live triangular shards.
        score: Current score.
        lives: Lives left.
        mode: Session mode.
        debug_mode: Whether debug mode is on.
        speed_multiplier: Ball speed multiplier in effect.
        rows_advanced: Rows the field advanced this game.
        launch_timer: Ticks left before the parked ball launches.
        tick: Ticks simulated since the game started.
    """

    width: float
    height: float
    ball: Ball
    paddle: Paddle
    bricks: tuple[tuple[Brick | None, ...], ...]
    row_offset: float
    particles: tuple[Particle, ...]
    shards: tuple[Shard, ...]
    score: int
    lives: int
    mode: GameMode
    debug_mode: bool
    speed_multiplier: float
    rows_advanced: int
    launch_timer: int
    tick: int

    @classmethod
    def capture(cls, context: GameContext, tick: int) -> FrameSnapshot:
        """Copy the current state of every system in the context."""
        physics = context.physics_manager
        bricks = context.brick_manager
        particles = context.particle_manager
        state = context.session_manager.state
        return cls(
            width=context.width,
            height=context.height,
            ball=replace(physics.ball),
            paddle=replace(physics.paddle),
            bricks=tuple(
                tuple(replace(brick) if brick is not None else None for brick in column) for column in bricks.grid
            ),
            row_offset=bricks.row_offset,
            particles=tuple(replace(particle) for particle in particles.particles),
            shards=tuple(replace(shard) for shard in particles.shards),
            score=state.score,
            lives=state.lives,
            mode=state.mode,
            debug_mode=state.debug_mode,
            speed_multiplier=state.speed_multiplier,
            rows_advanced=bricks.rows_advanced,
            launch_timer=state.launch_timer,
            tick=tick,
        )
