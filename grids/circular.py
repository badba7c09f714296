"""Circular (polar) grid: concentric rings of sectors around a single center cell.

Ring 0 is one cell. Ring i holds prev * round(2*pi*i / prev) sectors, where
prev is the size of ring i - 1, so each ring splits its inner ring's sectors
by a whole factor and sector widths stay close to the ring spacing. This
reproduces the sequence 1, 6, 12, 24, 24, 24, 48, ...

Cells are addressed by (ring, sector); sector 0 starts at angle zero and
sectors advance clockwise.
"""

import math
from enum import Enum
from typing import Iterable

from .base import Cell, Coord, Grid, GridCapabilities, Topology
from .errors import DegenerateGridError


class CircDirection(Enum):
    """Directions of a ring sector."""

    INWARD = "in"
    CLOCKWISE = "cw"
    COUNTERCLOCKWISE = "ccw"
    OUTWARD = "out"

    @property
    def opposite(self) -> "CircDirection":
        return _OPPOSITES[self]


_OPPOSITES = {
    CircDirection.INWARD: CircDirection.OUTWARD,
    CircDirection.OUTWARD: CircDirection.INWARD,
    CircDirection.CLOCKWISE: CircDirection.COUNTERCLOCKWISE,
    CircDirection.COUNTERCLOCKWISE: CircDirection.CLOCKWISE,
}


def ring_sizes(rings: int) -> list[int]:
    """Number of sectors in each ring.

    Args:
        rings: Number of rings, center included.

    Returns:
        List of sector counts, one per ring.
    """
    sizes = [1] if rings > 0 else []
    for ring in range(1, rings):
        prev = sizes[-1]
        factor = max(1, round(2 * math.pi * ring / prev))
        sizes.append(prev * factor)
    return sizes


class CircularGrid(Grid):
    """Polar grid with a fixed number of rings. Never masked."""

    topology = Topology.CIRCULAR
    capabilities = GridCapabilities(
        supports_mask=False,
        has_privileged_corner_bias=False,
        supports_row_iteration=True,
    )

    def __init__(self, rings: int) -> None:
        """Initialize grid.

        Args:
            rings: Number of rings including the center cell.

        Raises:
            DegenerateGridError: If rings is not positive.
        """
        if rings <= 0:
            raise DegenerateGridError(f"Ring count must be positive, got {rings}")
        self.rings = rings
        self.sizes = ring_sizes(rings)
        super().__init__(None)

    def ring_size(self, ring: int) -> int:
        return self.sizes[ring]

    def _layout(self) -> Iterable[Coord]:
        for ring, size in enumerate(self.sizes):
            for sector in range(size):
                yield (ring, sector)

    def _adjacent(self, coord: Coord) -> Iterable[tuple[CircDirection, Coord]]:
        ring, sector = coord
        size = self.sizes[ring]
        if ring > 0:
            ratio = size // self.sizes[ring - 1]
            yield CircDirection.INWARD, (ring - 1, sector // ratio)
            yield CircDirection.CLOCKWISE, (ring, (sector + 1) % size)
            yield CircDirection.COUNTERCLOCKWISE, (ring, (sector - 1) % size)
        if ring + 1 < self.rings:
            ratio = self.sizes[ring + 1] // size
            for outer in range(sector * ratio, (sector + 1) * ratio):
                yield CircDirection.OUTWARD, (ring + 1, outer)

    def dimensions(self) -> dict[str, int]:
        return {"rings": self.rings}

    def row_next(self, cell: Cell) -> Cell | None:
        return self.neighbor(cell, CircDirection.CLOCKWISE)

    def row_below(self, cell: Cell) -> list[Cell]:
        return [self.cells[index] for direction, index in cell.neighbors
                if direction is CircDirection.OUTWARD]
