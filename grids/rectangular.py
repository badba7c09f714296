"""Rectangular grid: square cells addressed by (row, col), row 0 at the north."""

from enum import Enum
from typing import Iterable

from .base import Cell, Coord, Grid, GridCapabilities, Topology
from .errors import DegenerateGridError, MalformedMaskError
from .mask import Mask


class RectDirection(Enum):
    """Compass directions of a square cell."""

    NORTH = "n"
    SOUTH = "s"
    EAST = "e"
    WEST = "w"

    @property
    def opposite(self) -> "RectDirection":
        return _OPPOSITES[self]


_OPPOSITES = {
    RectDirection.NORTH: RectDirection.SOUTH,
    RectDirection.SOUTH: RectDirection.NORTH,
    RectDirection.EAST: RectDirection.WEST,
    RectDirection.WEST: RectDirection.EAST,
}

# (row delta, col delta)
_OFFSETS = {
    RectDirection.NORTH: (-1, 0),
    RectDirection.SOUTH: (1, 0),
    RectDirection.EAST: (0, 1),
    RectDirection.WEST: (0, -1),
}


class RectangularGrid(Grid):
    """rows x cols grid of square cells, optionally masked."""

    topology = Topology.RECTANGULAR
    capabilities = GridCapabilities(
        supports_mask=True,
        has_privileged_corner_bias=True,
        supports_row_iteration=True,
    )

    def __init__(self, rows: int, cols: int, mask: Mask | None = None) -> None:
        """Initialize grid.

        Args:
            rows: Number of rows.
            cols: Number of columns.
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
    def from_mask(cls, mask: Mask) -> "RectangularGrid":
        return cls(mask.rows, mask.cols, mask)

    def _layout(self) -> Iterable[Coord]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def _adjacent(self, coord: Coord) -> Iterable[tuple[RectDirection, Coord]]:
        row, col = coord
        for direction, (dr, dc) in _OFFSETS.items():
            yield direction, (row + dr, col + dc)

    def dimensions(self) -> dict[str, int]:
        return {"rows": self.rows, "cols": self.cols}

    def row_next(self, cell: Cell) -> Cell | None:
        return self.neighbor(cell, RectDirection.EAST)

    def row_below(self, cell: Cell) -> list[Cell]:
        below = self.neighbor(cell, RectDirection.SOUTH)
        return [below] if below is not None else []
