# world/level.py

"""Tile-grid level model."""

import math
from typing import Iterator, Optional, Sequence

from engine.exceptions import (
    ColumnOutOfBoundsError,
    InvalidMapHeightError,
    InvalidMapWidthError,
    RowOutOfBoundsError,
)
from engine.logging import get_logger

from .vector import Vector2

# A tile is a colour/material label; None marks empty, passable space.
TileLabel = Optional[str]

logger = get_logger(__name__)


DEMO_MAP: tuple[tuple[TileLabel, ...], ...] = (
    (None, None, None, None, None,     None,   None,     None, None, None),
    (None, None, None, None, None,     None,   None,     None, None, None),
    (None, None, None, None, None,     None,   None,     None, None, None),
    (None, None, None, None, "yellow", "blue", "purple", None, None, None),
    (None, None, None, None, "pink",   None,   "green",  None, None, None),
    (None, None, None, None, None,     None,   "red",    None, None, None),
    (None, None, None, None, None,     None,   None,     None, None, None),
    (None, None, None, None, None,     None,   None,     None, None, None),
)

DEMO_WIDTH = 10
DEMO_HEIGHT = 8


class Level:
    """Fixed-size rectangular grid of optional tile labels.

    Rows are indexed by y and columns by x. The grid is copied into tuples at
    construction and never changes afterwards.
    """

    def __init__(self, tiles: Sequence[Sequence[TileLabel]], width: int, height: int):
        """Build and validate a level.

        Args:
            tiles: Row-major grid, ``tiles[y][x]``
            width: Declared number of columns
            height: Declared number of rows

        Raises:
            InvalidMapHeightError: If the row count differs from height
            InvalidMapWidthError: If any row's length differs from width
        """
        if len(tiles) != height:
            raise InvalidMapHeightError(
                f"Map has {len(tiles)} rows, expected height {height}"
            )

        bad_rows = [y for y, row in enumerate(tiles) if len(row) != width]
        if bad_rows:
            raise InvalidMapWidthError(
                f"Rows {bad_rows} do not have the expected width {width}"
            )

        self._tiles: tuple[tuple[TileLabel, ...], ...] = tuple(tuple(row) for row in tiles)
        self._width = width
        self._height = height

        logger.debug("level.created", width=width, height=height)

    @classmethod
    def from_rows(cls, tiles: Sequence[Sequence[TileLabel]]) -> "Level":
        """Build a level whose dimensions are taken from the grid itself."""
        height = len(tiles)
        width = len(tiles[0]) if height else 0
        return cls(tiles, width=width, height=height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def tile(self, position: Vector2) -> TileLabel:
        """Look up the tile under a position.

        The position is truncated to its grid cell: ``y`` selects the row and
        ``x`` the column.

        Args:
            position: Point in grid units

        Returns:
            The tile label, or None for an empty cell

        Raises:
            RowOutOfBoundsError: If the row is outside the grid
            ColumnOutOfBoundsError: If the row exists but the column does not
        """
        row_index = math.floor(position.y)
        if not 0 <= row_index < self._height:
            raise RowOutOfBoundsError(
                f"Row {row_index} is outside the level (height {self._height})"
            )

        col_index = math.floor(position.x)
        row = self._tiles[row_index]
        if not 0 <= col_index < len(row):
            raise ColumnOutOfBoundsError(
                f"Column {col_index} is outside the level (width {self._width})"
            )

        return row[col_index]

    def is_empty(self, position: Vector2) -> bool:
        """Whether the cell under position holds no tile."""
        return self.tile(position) is None

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield (x, y, label) for every occupied cell in row-major order."""
        for y, row in enumerate(self._tiles):
            for x, label in enumerate(row):
                if label is not None:
                    yield x, y, label

    def __repr__(self) -> str:
        return f"Level(width={self._width}, height={self._height})"


def demo_level() -> Level:
    """The 10x8 prototype level with a small ring of coloured tiles."""
    return Level(DEMO_MAP, width=DEMO_WIDTH, height=DEMO_HEIGHT)
