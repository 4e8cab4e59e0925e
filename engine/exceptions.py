# engine/exceptions.py

"""Exception hierarchy for the GRIDCASTER prototype core."""


class GridcasterException(Exception):
    """Base exception for all GRIDCASTER errors."""

    pass


# Vector Exceptions
class VectorException(GridcasterException):
    """Base exception for vector math operations."""

    pass


class VectorDivisionByZeroError(VectorException, ZeroDivisionError):
    """Raised when a vector is divided by a zero scalar."""

    pass


# Level Exceptions
class LevelException(GridcasterException):
    """Base exception for level operations."""

    pass


class LevelConstructionError(LevelException):
    """Raised when a level cannot be built from the given map."""

    pass


class InvalidMapHeightError(LevelConstructionError):
    """Raised when the declared height does not match the number of rows."""

    pass


class InvalidMapWidthError(LevelConstructionError):
    """Raised when a row's length does not match the declared width."""

    pass


class TileLookupError(LevelException, IndexError):
    """Base exception for tile lookups outside the grid."""

    pass


class RowOutOfBoundsError(TileLookupError):
    """Raised when a tile lookup addresses a row that does not exist."""

    pass


class ColumnOutOfBoundsError(TileLookupError):
    """Raised when a tile lookup addresses a column that does not exist."""

    pass


# Frame Loop Exceptions
class FrameLoopException(GridcasterException):
    """Base exception for frame loop operations."""

    pass


class FrameLoopStateError(FrameLoopException):
    """Raised when the frame loop is in an invalid state for the requested operation."""

    pass
