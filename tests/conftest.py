"""Pytest configuration and shared fixtures."""

import pytest

from engine.config import GridcasterConfig
from engine.frame import create_game_state
from engine.input import InputIntent
from world import Level, Player, Vector2, demo_level


class RecordingSurface:
    """Surface that records every drawing call as a tuple."""

    def __init__(self):
        self.calls = []

    def clear_rect(self, x, y, width, height):
        self.calls.append(("clear_rect", x, y, width, height))

    def stroke_path(self, points, color, line_width):
        self.calls.append(("stroke_path", list(points), color, line_width))

    def fill_rect(self, x, y, width, height, color):
        self.calls.append(("fill_rect", x, y, width, height, color))

    def fill_circle(self, center, radius, color):
        self.calls.append(("fill_circle", center, radius, color))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def level():
    """Create the 10x8 demo level."""
    return demo_level()


@pytest.fixture
def small_level():
    """Create a 3x2 level with one tile."""
    return Level(
        [
            [None, "red", None],
            [None, None, None],
        ],
        width=3,
        height=2,
    )


@pytest.fixture
def player(level):
    """Create a player at the demo start, facing up."""
    return Player(level, position=Vector2(2.5, 6.5), direction=Vector2(0.0, -1.0))


@pytest.fixture
def intent():
    """Create an intent with nothing held."""
    return InputIntent()


@pytest.fixture
def game_config():
    """Create a configuration with default values."""
    return GridcasterConfig()


@pytest.fixture
def game_state(game_config):
    """Create a full game state on the demo level."""
    return create_game_state(game_config)


@pytest.fixture
def surface():
    """Create a recording surface."""
    return RecordingSurface()
