"""Exceptions raised by grids and maze generators."""


class MazeError(Exception):
    """Base class for all maze errors."""


class InvalidLinkError(MazeError, ValueError):
    """Raised when linking cells that are not neighbors or are masked out."""


class UnsupportedTopologyError(MazeError):
    """Raised when an algorithm cannot run on the grid's topology."""


class MaskedUnsupportedError(MazeError):
    """Raised when an algorithm that needs a full grid gets a masked one."""


class MalformedMaskError(MazeError, ValueError):
    """Raised when a mask does not fit the grid it is applied to."""


class DegenerateGridError(MazeError, ValueError):
    """Raised when grid dimensions leave no usable cell."""


__all__ = [
    "MazeError",
    "InvalidLinkError",
    "UnsupportedTopologyError",
    "MaskedUnsupportedError",
    "MalformedMaskError",
    "DegenerateGridError",
]
