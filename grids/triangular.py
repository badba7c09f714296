"""Triangular grid: alternating up- and down-pointing triangles.

Cell (row, col) points up when row + col is even and down otherwise. Up
triangles share edges with their northwest, northeast and south neighbors;
down triangles with their north, southwest and southeast neighbors.
"""

from enum import Enum
from typing import Iterable

from .base import Cell, Coord, Grid, GridCapabilities, Topology
from .errors import DegenerateGridError, MalformedMaskError
from .mask import Mask


class TriDirection(Enum):
    """Edges of a triangular cell."""

    NORTHWEST = "nw"
    NORTHEAST = "ne"
    SOUTH = "s"
    NORTH = "n"
    SOUTHWEST = "sw"
    SOUTHEAST = "se"

    @property
    def opposite(self) -> "TriDirection":
        return _OPPOSITES[self]


_OPPOSITES = {
    TriDirection.NORTHWEST: TriDirection.SOUTHEAST,
    TriDirection.SOUTHEAST: TriDirection.NORTHWEST,
    TriDirection.NORTHEAST: TriDirection.SOUTHWEST,
    TriDirection.SOUTHWEST: TriDirection.NORTHEAST,
    TriDirection.SOUTH: TriDirection.NORTH,
    TriDirection.NORTH: TriDirection.SOUTH,
}

_UP_OFFSETS = {
    TriDirection.NORTHWEST: (0, -1),
    TriDirection.NORTHEAST: (0, 1),
    TriDirection.SOUTH: (1, 0),
}
_DOWN_OFFSETS = {
    TriDirection.NORTH: (-1, 0),
    TriDirection.SOUTHWEST: (0, -1),
    TriDirection.SOUTHEAST: (0, 1),
}


def is_upward(row: int, col: int) -> bool:
    """Return True if the triangle at (row, col) points up."""
    return (row + col) % 2 == 0


class TriangularCell(Cell):
    """Cell that also records its orientation."""

    __slots__ = ("upward",)

    def __init__(self, index: int, coord: Coord, masked: bool = False) -> None:
        super().__init__(index, coord, masked)
        self.upward = is_upward(*coord)


class TriangularGrid(Grid):
    """rows x cols grid of triangles, optionally masked."""

    topology = Topology.TRIANGULAR
    capabilities = GridCapabilities(
        supports_mask=True,
        has_privileged_corner_bias=False,
        supports_row_iteration=False,
    )

    def __init__(self, rows: int, cols: int, mask: Mask | None = None) -> None:
        """Initialize grid.

        Args:
            rows: Number of rows.
            cols: Number of triangles per row.
            mask: Optional mask of shape (rows, cols).

        Raises:
            DegenerateGridError: If rows or cols is not positive.
            MalformedMaskError: If the mask shape differs from (rows, cols).
        """
        if rows <= 0 or cols <= 0:
            raise DegenerateGridError(f"Grid size must be positive, got {rows}x{cols}")
        if mask is not None and mask.shape != (rows, cols):
            raise MalformedMaskError(
                f"Mask shape {mask.shape} does not match grid {rows}x{cols}"
            )
        self.rows = rows
        self.cols = cols
        super().__init__(mask)

    @classmethod
    def from_mask(cls, mask: Mask) -> "TriangularGrid":
        return cls(mask.rows, mask.cols, mask)

    def _make_cell(self, index: int, coord: Coord, masked: bool) -> TriangularCell:
        return TriangularCell(index, coord, masked)

    def _layout(self) -> Iterable[Coord]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def _adjacent(self, coord: Coord) -> Iterable[tuple[TriDirection, Coord]]:
        row, col = coord
        offsets = _UP_OFFSETS if is_upward(row, col) else _DOWN_OFFSETS
        for direction, (dr, dc) in offsets.items():
            yield direction, (row + dr, col + dc)

    def dimensions(self) -> dict[str, int]:
        return {"rows": self.rows, "cols": self.cols}
