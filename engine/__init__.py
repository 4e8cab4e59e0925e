"""Frame plumbing and ambient stack for GRIDCASTER."""

from .exceptions import (
    ColumnOutOfBoundsError,
    FrameLoopException,
    FrameLoopStateError,
    GridcasterException,
    InvalidMapHeightError,
    InvalidMapWidthError,
    LevelConstructionError,
    LevelException,
    RowOutOfBoundsError,
    TileLookupError,
    VectorDivisionByZeroError,
    VectorException,
)
from .input import KEY_BINDINGS, InputIntent, KeyEventType, handle_key_event

__all__ = [
    # Input
    "InputIntent",
    "KeyEventType",
    "KEY_BINDINGS",
    "handle_key_event",
    # Exceptions
    "GridcasterException",
    "VectorException",
    "VectorDivisionByZeroError",
    "LevelException",
    "LevelConstructionError",
    "InvalidMapHeightError",
    "InvalidMapWidthError",
    "TileLookupError",
    "RowOutOfBoundsError",
    "ColumnOutOfBoundsError",
    "FrameLoopException",
    "FrameLoopStateError",
]
