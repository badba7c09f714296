"""Hexagonal grid: flat-topped hexagons in columns, odd columns shifted down.

Cells are addressed by (row, col). A cell always touches its north and south
neighbors in the same column; which rows its four side neighbors sit in
depends on the column parity.
"""

from enum import Enum
from typing import Iterable

from .base import Cell, Coord, Grid, GridCapabilities, Topology
from .errors import DegenerateGridError, MalformedMaskError
from .mask import Mask


class HexDirection(Enum):
    """The six edges of a hexagonal cell."""

    NORTH = "n"
    NORTHEAST = "ne"
    SOUTHEAST = "se"
    SOUTH = "s"
    SOUTHWEST = "sw"
    NORTHWEST = "nw"

    @property
    def opposite(self) -> "HexDirection":
        return _OPPOSITES[self]


_OPPOSITES = {
    HexDirection.NORTH: HexDirection.SOUTH,
    HexDirection.SOUTH: HexDirection.NORTH,
    HexDirection.NORTHEAST: HexDirection.SOUTHWEST,
    HexDirection.SOUTHWEST: HexDirection.NORTHEAST,
    HexDirection.SOUTHEAST: HexDirection.NORTHWEST,
    HexDirection.NORTHWEST: HexDirection.SOUTHEAST,
}

# (row delta, col delta) for even and odd columns
_EVEN_COLUMN_OFFSETS = {
    HexDirection.NORTH: (-1, 0),
    HexDirection.NORTHEAST: (-1, 1),
    HexDirection.SOUTHEAST: (0, 1),
    HexDirection.SOUTH: (1, 0),
    HexDirection.SOUTHWEST: (0, -1),
    HexDirection.NORTHWEST: (-1, -1),
}
_ODD_COLUMN_OFFSETS = {
    HexDirection.NORTH: (-1, 0),
    HexDirection.NORTHEAST: (0, 1),
    HexDirection.SOUTHEAST: (1, 1),
    HexDirection.SOUTH: (1, 0),
    HexDirection.SOUTHWEST: (1, -1),
    HexDirection.NORTHWEST: (0, -1),
}


class HexagonalGrid(Grid):
    """rows x cols grid of hexagonal cells, optionally masked."""

    topology = Topology.HEXAGONAL
    capabilities = GridCapabilities(
        supports_mask=True,
        has_privileged_corner_bias=False,
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
    def from_mask(cls, mask: Mask) -> "HexagonalGrid":
        return cls(mask.rows, mask.cols, mask)

    def _layout(self) -> Iterable[Coord]:
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def _adjacent(self, coord: Coord) -> Iterable[tuple[HexDirection, Coord]]:
        row, col = coord
        offsets = _ODD_COLUMN_OFFSETS if col % 2 else _EVEN_COLUMN_OFFSETS
        for direction, (dr, dc) in offsets.items():
            yield direction, (row + dr, col + dc)

    def dimensions(self) -> dict[str, int]:
        return {"rows": self.rows, "cols": self.cols}

    def row_next(self, cell: Cell) -> Cell | None:
        # (row, col + 1) is the southeast neighbor of an even column, northeast of an odd one
        direction = HexDirection.NORTHEAST if cell.col % 2 else HexDirection.SOUTHEAST
        return self.neighbor(cell, direction)

    def row_below(self, cell: Cell) -> list[Cell]:
        below = self.neighbor(cell, HexDirection.SOUTH)
        return [below] if below is not None else []
