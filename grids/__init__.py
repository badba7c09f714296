"""Maze grids for four cell topologies.

Available grids:
- RectangularGrid: square cells, optional mask
- CircularGrid: concentric rings of sectors, never masked
- HexagonalGrid: flat-topped hexagons, optional mask
- TriangularGrid: alternating up/down triangles, optional mask
"""

from .base import Cell, Grid, GridCapabilities, Topology
from .circular import CircDirection, CircularGrid, ring_sizes
from .errors import (
    DegenerateGridError,
    InvalidLinkError,
    MalformedMaskError,
    MaskedUnsupportedError,
    MazeError,
    UnsupportedTopologyError,
)
from .hexagonal import HexDirection, HexagonalGrid
from .mask import Mask
from .rectangular import RectangularGrid, RectDirection
from .triangular import TriangularCell, TriangularGrid, TriDirection, is_upward

__all__ = [
    # Base classes
    "Cell",
    "Grid",
    "GridCapabilities",
    "Topology",
    "Mask",
    # Grids
    "RectangularGrid",
    "RectDirection",
    "CircularGrid",
    "CircDirection",
    "ring_sizes",
    "HexagonalGrid",
    "HexDirection",
    "TriangularGrid",
    "TriangularCell",
    "TriDirection",
    "is_upward",
    # Errors
    "MazeError",
    "InvalidLinkError",
    "UnsupportedTopologyError",
    "MaskedUnsupportedError",
    "MalformedMaskError",
    "DegenerateGridError",
]


TOPOLOGIES = {
    Topology.RECTANGULAR: {
        "grid": RectangularGrid,
        "description": "Square cells, north/south/east/west passages",
    },
    Topology.CIRCULAR: {
        "grid": CircularGrid,
        "description": "Concentric rings around a center cell",
    },
    Topology.HEXAGONAL: {
        "grid": HexagonalGrid,
        "description": "Hexagonal cells with six neighbors",
    },
    Topology.TRIANGULAR: {
        "grid": TriangularGrid,
        "description": "Alternating up/down triangles",
    },
}


def make_grid(
    topology: Topology | str,
    rows: int | None = None,
    cols: int | None = None,
    rings: int | None = None,
    mask: Mask | None = None,
) -> Grid:
    """Create an unlinked grid of the given topology.

    Args:
        topology: Topology or its name (e.g. "hexagonal").
        rows: Row count (rectangular, hexagonal, triangular).
        cols: Column count (rectangular, hexagonal, triangular).
        rings: Ring count (circular).
        mask: Optional mask; rows/cols default to the mask shape.

    Returns:
        Freshly built grid with no links.

    Raises:
        ValueError: If topology is unknown or a required dimension is missing.
        MalformedMaskError: If a mask is given for a circular grid or does
            not match rows/cols.
    """
    if not isinstance(topology, Topology):
        try:
            topology = Topology(topology)
        except ValueError:
            available = ", ".join(t.value for t in Topology)
            raise ValueError(f"Unknown topology: {topology}. Available: {available}") from None

    if topology is Topology.CIRCULAR:
        if mask is not None:
            raise MalformedMaskError("Circular grids do not accept a mask")
        if rings is None:
            raise ValueError("Circular grids need a ring count")
        return CircularGrid(rings)

    if mask is not None:
        rows = mask.rows if rows is None else rows
        cols = mask.cols if cols is None else cols
    if rows is None or cols is None:
        raise ValueError(f"{topology.value} grids need rows and cols")

    grid_cls = TOPOLOGIES[topology]["grid"]
    return grid_cls(rows, cols, mask)
