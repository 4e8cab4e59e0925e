"""Unit tests for player kinematics."""

import itertools
import math
import random

import pytest

from engine.input import InputIntent
from world.level import Level
from world.player import PLAYER_SPEED, Player
from world.vector import Vector2


class TestPlayerConstruction:
    """Test player initial state."""

    def test_defaults(self, level):
        """Direction and velocity default to zero."""
        player = Player(level, position=Vector2(1.0, 1.0))
        assert player.direction == Vector2.zero()
        assert player.velocity == Vector2.zero()
        assert player.speed == PLAYER_SPEED
        assert player.level is level

    def test_direction_normalized(self, level):
        """A non-unit starting direction is normalized."""
        player = Player(level, position=Vector2(1.0, 1.0), direction=Vector2(0.0, -4.0))
        assert player.direction == Vector2(0.0, -1.0)


class TestPlayerUpdate:
    """Test the per-tick update."""

    def test_idle_tick_changes_nothing(self, player, intent):
        """No keys held leaves position and direction unchanged."""
        player.update(intent)

        assert player.position == Vector2(2.5, 6.5)
        assert player.direction == Vector2(0.0, -1.0)
        assert player.velocity == Vector2.zero()

    def test_idle_tick_with_zero_direction(self, level, intent):
        """A zero direction stays zero on an idle tick."""
        player = Player(level, position=Vector2(1.0, 1.0))
        player.update(intent)
        assert player.direction == Vector2.zero()
        assert player.position == Vector2(1.0, 1.0)

    def test_right_from_facing_up(self, player):
        """Holding right while facing up turns halfway and steps right."""
        player.update(InputIntent(right=True))

        assert player.direction.x == pytest.approx(math.sqrt(0.5))
        assert player.direction.y == pytest.approx(-math.sqrt(0.5))
        assert player.position.x == pytest.approx(2.5 + PLAYER_SPEED)
        assert player.position.y == pytest.approx(6.5)

    def test_velocity_resets_every_tick(self, player):
        """Velocity is an accumulator reset after each tick."""
        player.update(InputIntent(up=True))
        assert player.velocity == Vector2.zero()

        player.update(InputIntent())
        assert player.position.y == pytest.approx(6.5 - PLAYER_SPEED)

    def test_up_moves_negative_y(self, player):
        """Up decreases y, down increases y."""
        player.update(InputIntent(up=True))
        assert player.position.y == pytest.approx(6.5 - PLAYER_SPEED)

        player.update(InputIntent(down=True))
        player.update(InputIntent(down=True))
        assert player.position.y == pytest.approx(6.5 + PLAYER_SPEED)

    def test_direction_converges_while_held(self, player):
        """Holding a direction turns the facing toward it over several ticks."""
        intent = InputIntent(right=True)
        for _ in range(50):
            player.update(intent)

        assert player.direction.x == pytest.approx(1.0, abs=1e-3)
        assert player.direction.y == pytest.approx(0.0, abs=0.05)
        assert player.direction.magnitude() == pytest.approx(1.0)

    def test_opposite_keys_cancel(self, player):
        """Left and right together do not move the player."""
        player.update(InputIntent(left=True, right=True))
        assert player.position == Vector2(2.5, 6.5)
        assert player.direction == Vector2(0.0, -1.0)

    def test_diagonal_is_faster(self, level):
        """Two keys step speed along each axis, speed*sqrt(2) overall."""
        start = Vector2(5.0, 5.0)
        player = Player(level, position=start)

        player.update(InputIntent(up=True, right=True))

        assert player.position.distance_to(start) == pytest.approx(PLAYER_SPEED * math.sqrt(2))

    def test_custom_speed(self, level):
        """The step size comes from the player's speed."""
        player = Player(level, position=Vector2(5.0, 5.0), speed=0.5)
        player.update(InputIntent(left=True))
        assert player.position == Vector2(4.5, 5.0)

    def test_direction_always_unit_or_zero(self, player):
        """Direction stays unit length across arbitrary input."""
        rng = random.Random(7)
        for _ in range(500):
            intent = InputIntent(
                up=rng.random() < 0.3,
                down=rng.random() < 0.3,
                left=rng.random() < 0.3,
                right=rng.random() < 0.3,
            )
            player.update(intent)
            magnitude = player.direction.magnitude()
            assert magnitude == 0.0 or magnitude == pytest.approx(1.0)


class TestPlayerBounds:
    """Test that the player stays inside the level."""

    def test_clamped_at_corner(self, level):
        """Pushing into a corner stops exactly on the boundary."""
        player = Player(level, position=Vector2(9.99, 0.01), speed=0.5)
        intent = InputIntent(up=True, right=True)
        for _ in range(10):
            player.update(intent)

        assert player.position == Vector2(10, 0)

    def test_clamped_at_origin(self, level):
        """Pushing up-left ends at the origin."""
        player = Player(level, position=Vector2(0.5, 0.5), speed=1.0)
        for _ in range(5):
            player.update(InputIntent(up=True, left=True))
        assert player.position == Vector2(0, 0)

    def test_never_leaves_level(self, level):
        """No sequence of intents moves the player outside [0,W] x [0,H]."""
        player = Player(level, position=Vector2(5.0, 4.0), speed=0.75)
        combos = list(itertools.product([False, True], repeat=4))
        rng = random.Random(42)

        for _ in range(2000):
            up, down, left, right = rng.choice(combos)
            player.update(InputIntent(up=up, down=down, left=left, right=right))
            assert 0 <= player.position.x <= level.width
            assert 0 <= player.position.y <= level.height

    def test_bounds_follow_level_size(self):
        """The clamp uses the owning level's dimensions."""
        tiny = Level([[None]], width=1, height=1)
        player = Player(tiny, position=Vector2(0.5, 0.5), speed=2.0)

        player.update(InputIntent(down=True, right=True))

        assert player.position == Vector2(1, 1)
