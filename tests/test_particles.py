"""Unit tests for ParticleManager and the effect entities."""

import math
import random
import unittest
from unittest.mock import MagicMock

import pytest

from brickfall.conf import settings
from brickfall.systems.bricks.base import DestroyedBrick
from brickfall.systems.particle.base import Particle, Shard
from brickfall.systems.particle.manager import ParticleManager


def make_particle(**overrides: float) -> Particle:
    values = {"x": 0.0, "y": 0.0, "velocity_x": 1.0, "velocity_y": 0.0, "life": 2.0, "size": 2.0}
    values.update(overrides)
    return Particle(color="#ffffff", **values)


def make_shard(**overrides: float) -> Shard:
    values = {
        "x": 0.0,
        "y": 0.0,
        "velocity_x": 0.0,
        "velocity_y": 0.0,
        "angle": 0.0,
        "angular_velocity": 0.1,
        "gravity": 0.2,
    }
    values.update(overrides)
    return Shard(vertices=((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0)), color="#ffffff", **values)


class TestParticleManager(unittest.TestCase):
    """Unit test class for ParticleManager."""

    def setUp(self) -> None:
        """Set up ParticleManager with a seeded mock context."""
        self.mock_context = MagicMock()
        self.mock_context.height = 800
        self.mock_context.rng = random.Random(3)

        self.manager = ParticleManager()
        self.manager.setup(self.mock_context)

    def test_emit_particles(self) -> None:
        """Test the count and random ranges of emitted particles."""
        self.manager.emit_particles(100, 200, "#e74c3c")

        assert len(self.manager.particles) == 10
        for particle in self.manager.particles:
            assert (particle.x, particle.y) == (100, 200)
            assert -2 <= particle.velocity_x < 2
            assert -2 <= particle.velocity_y < 2
            assert 30 <= particle.life < 40
            assert 2 <= particle.size < 3
            assert particle.color == "#e74c3c"

    def test_emit_shards(self) -> None:
        """Test the count and random ranges of emitted shards."""
        self.manager.emit_shards(100, 200, 45, 20, "#3498db")

        assert len(self.manager.shards) == 5
        for shard in self.manager.shards:
            assert -2 <= shard.velocity_x < 2
            assert -1.25 <= shard.velocity_y < 1.25
            assert 0 <= shard.angle < 2 * math.pi
            assert -0.15 <= shard.angular_velocity < 0.15
            assert 0.175 <= shard.gravity < 0.225
            assert len(shard.vertices) == 3
            # Radii are bounded by 0.75 of the smaller brick side
            assert all(math.hypot(vx, vy) <= 15 + 1e-9 for vx, vy in shard.vertices)

    def test_emit_brick_break_emits_both(self) -> None:
        """Test that a broken brick spawns particles and shards at its center."""
        destroyed = DestroyedBrick(0, 0, 40.5, 70.0, 45, 20, "#2ecc71")

        self.manager.emit_brick_break(destroyed)

        assert len(self.manager.particles) == 10
        assert len(self.manager.shards) == 5
        assert all((s.x, s.y) == (40.5, 70.0) for s in self.manager.shards)

    def test_same_seed_same_effects(self) -> None:
        """Test that effects are reproducible with a seeded random source."""
        self.manager.emit_particles(0, 0, "#fff")
        other = ParticleManager()
        self.mock_context.rng = random.Random(3)
        other.setup(self.mock_context)
        other.emit_particles(0, 0, "#fff")

        assert other.particles == self.manager.particles

    def test_particle_update(self) -> None:
        """Test that particles move, fall and expire."""
        particle = make_particle()
        self.manager.particles = [particle]

        self.manager.update()

        assert particle.x == 1.0
        assert particle.y == 0.0
        assert particle.velocity_y == pytest.approx(0.06)
        assert particle.life == 1.0
        assert self.manager.particles == [particle]

        self.manager.update()
        assert self.manager.particles == []

    def test_shard_update(self) -> None:
        """Test that gravity applies before the shard moves."""
        shard = make_shard()
        self.manager.shards = [shard]

        self.manager.update()

        assert shard.velocity_y == pytest.approx(0.2)
        assert shard.y == pytest.approx(0.2)
        assert shard.angle == pytest.approx(0.1)

    def test_shard_removed_below_surface(self) -> None:
        """Test that shards are culled once they fall past the bottom margin."""
        kept = make_shard(y=849.0, gravity=0.0, velocity_y=1.0)
        dropped = make_shard(y=850.0, gravity=0.0, velocity_y=0.5)
        self.manager.shards = [kept, dropped]

        self.manager.update()

        assert self.manager.shards == [kept]

    def test_population_cap_drops_oldest(self) -> None:
        """Test that the cap keeps the newest effects."""
        settings.configure(EFFECT_POPULATION_CAP=15)
        self.manager.setup(self.mock_context)

        self.manager.emit_particles(0, 0, "#111")
        self.manager.emit_particles(0, 0, "#222")

        assert len(self.manager.particles) == 15
        assert [p.color for p in self.manager.particles].count("#222") == 10

    def test_clear(self) -> None:
        """Test that clear empties both swarms."""
        self.manager.emit_brick_break(DestroyedBrick(0, 0, 0.0, 0.0, 45, 20, "#fff"))

        self.manager.reset(self.mock_context)

        assert self.manager.particles == []
        assert self.manager.shards == []


class TestEffectEntities(unittest.TestCase):
    """Unit test class for Particle and Shard."""

    def test_particle_alpha_is_clamped(self) -> None:
        """Test that alpha follows the remaining life within 0-1."""
        assert make_particle(life=15.0).alpha == pytest.approx(0.5)
        assert make_particle(life=40.0).alpha == 1.0
        assert make_particle(life=-1.0).alpha == 0.0

    def test_shard_world_vertices(self) -> None:
        """Test that vertices are rotated then translated."""
        shard = make_shard(x=10.0, y=20.0, angle=math.pi / 2)

        vertices = shard.world_vertices()

        assert vertices[0] == pytest.approx((10.0, 21.0))
        assert vertices[1] == pytest.approx((9.0, 20.0))
