"""Base grid abstraction shared by all maze topologies.

A grid owns every cell in a flat list (canonical order) and a coordinate to
index lookup. Cells refer to their neighbors by index, never by reference, so
the grid is the only owner. Neighbor tables are computed once when the grid
is built; afterwards only the link sets change.
"""

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator
import random

from .errors import DegenerateGridError, InvalidLinkError, UnsupportedTopologyError
from .mask import Mask

Coord = tuple[int, int]


class Topology(Enum):
    """Cell tilings a grid can use."""

    RECTANGULAR = "rectangular"
    CIRCULAR = "circular"
    HEXAGONAL = "hexagonal"
    TRIANGULAR = "triangular"


@dataclass(frozen=True)
class GridCapabilities:
    """Features a grid variant offers to the generation algorithms."""

    supports_mask: bool
    has_privileged_corner_bias: bool
    supports_row_iteration: bool


class Cell:
    """A single grid cell.

    neighbors holds (direction, neighbor index) pairs in a fixed order and
    is empty for masked-out cells. links holds the indices of the neighbors
    this cell has an open passage to.
    """

    __slots__ = ("index", "coord", "masked", "neighbors", "links")

    def __init__(self, index: int, coord: Coord, masked: bool = False) -> None:
        self.index = index
        self.coord = coord
        self.masked = masked
        self.neighbors: tuple[tuple[Enum, int], ...] = ()
        self.links: set[int] = set()

    @property
    def row(self) -> int:
        return self.coord[0]

    @property
    def col(self) -> int:
        return self.coord[1]

    def linked_directions(self) -> list[Enum]:
        """Directions of the neighbors this cell is linked to."""
        return [direction for direction, index in self.neighbors if index in self.links]

    def __repr__(self) -> str:
        state = " masked" if self.masked else ""
        return f"<{type(self).__name__} {self.coord}{state} links={len(self.links)}>"


class Grid(ABC):
    """Abstract base class for maze grids.

    Subclasses supply the coordinate layout and the adjacency rule; this
    class builds the cells, applies the mask and implements linking,
    enumeration and connectivity queries on top of them.
    """

    topology: Topology
    capabilities: GridCapabilities

    def __init__(self, mask: Mask | None = None) -> None:
        """Build all cells and neighbor tables.

        Args:
            mask: Optional mask; positions that are off become masked-out cells.

        Raises:
            DegenerateGridError: If no cell survives the mask.
        """
        self.mask = mask
        self.cells: list[Cell] = []
        self._index: dict[Coord, int] = {}

        for coord in self._layout():
            masked = mask is not None and not mask(*coord)
            cell = self._make_cell(len(self.cells), coord, masked)
            self._index[coord] = cell.index
            self.cells.append(cell)

        self._open = [cell for cell in self.cells if not cell.masked]
        if not self._open:
            raise DegenerateGridError(f"{type(self).__name__} has no unmasked cells")

        for cell in self._open:
            cell.neighbors = tuple(
                (direction, self._index[coord])
                for direction, coord in self._adjacent(cell.coord)
                if coord in self._index and not self.cells[self._index[coord]].masked
            )

    @abstractmethod
    def _layout(self) -> Iterable[Coord]:
        """Yield every coordinate in canonical order."""

    @abstractmethod
    def _adjacent(self, coord: Coord) -> Iterable[tuple[Enum, Coord]]:
        """Yield (direction, coordinate) candidates; out-of-range ones are dropped."""

    @abstractmethod
    def dimensions(self) -> dict[str, int]:
        """Construction parameters, e.g. {"rows": 4, "cols": 6}."""

    def _make_cell(self, index: int, coord: Coord, masked: bool) -> Cell:
        return Cell(index, coord, masked)

    # Enumeration

    @property
    def is_masked(self) -> bool:
        """True if at least one cell is masked out."""
        return len(self._open) != len(self.cells)

    def size(self) -> int:
        """Number of non-masked cells."""
        return len(self._open)

    def __len__(self) -> int:
        return len(self._open)

    def __getitem__(self, coord: Coord) -> Cell:
        return self.cells[self._index[tuple(coord)]]

    def __contains__(self, coord: object) -> bool:
        return isinstance(coord, tuple) and coord in self._index

    def each_cell(self) -> Iterator[Cell]:
        """Iterate non-masked cells in canonical order."""
        return iter(self._open)

    def each_row(self) -> Iterator[list[Cell]]:
        """Yield the non-masked cells of each row, rows in canonical order.

        Rows that are entirely masked are skipped. Calling again restarts.
        """
        row: list[Cell] = []
        current = None
        for cell in self._open:
            if cell.coord[0] != current and row:
                yield row
                row = []
            current = cell.coord[0]
            row.append(cell)
        if row:
            yield row

    def random_cell(self, rng: random.Random) -> Cell:
        """Pick a non-masked cell uniformly at random."""
        return rng.choice(self._open)

    # Neighborhood

    def neighbors(self, cell: Cell) -> list[tuple[Enum, Cell]]:
        return [(direction, self.cells[index]) for direction, index in cell.neighbors]

    def neighbor_cells(self, cell: Cell) -> list[Cell]:
        return [self.cells[index] for _, index in cell.neighbors]

    def neighbor(self, cell: Cell, direction: Enum) -> Cell | None:
        """First neighbor of cell in direction, or None at a border or mask edge."""
        for neighbor_direction, index in cell.neighbors:
            if neighbor_direction == direction:
                return self.cells[index]
        return None

    def unvisited_neighbor_count(self, cell: Cell, visited: set[int]) -> int:
        return sum(1 for _, index in cell.neighbors if index not in visited)

    def edges(self) -> Iterator[tuple[Cell, Cell]]:
        """Yield every pair of geometric neighbors once, in canonical order."""
        for cell in self._open:
            for _, index in cell.neighbors:
                if index > cell.index:
                    yield cell, self.cells[index]

    def row_next(self, cell: Cell) -> Cell | None:
        """Next cell along the same row, for row-by-row algorithms."""
        raise UnsupportedTopologyError(
            f"{self.topology.value} grids do not support row iteration"
        )

    def row_below(self, cell: Cell) -> list[Cell]:
        """Neighbors of cell in the following row, for row-by-row algorithms."""
        raise UnsupportedTopologyError(
            f"{self.topology.value} grids do not support row iteration"
        )

    # Links

    def _check_pair(self, a: Cell, b: Cell) -> None:
        if a.masked or b.masked:
            raise InvalidLinkError(f"Cannot link masked cell: {a.coord} - {b.coord}")
        if all(index != b.index for _, index in a.neighbors):
            raise InvalidLinkError(f"Cells {a.coord} and {b.coord} are not neighbors")

    def link(self, a: Cell, b: Cell) -> None:
        """Open a passage between two neighboring cells (idempotent).

        Raises:
            InvalidLinkError: If the cells are not neighbors or one is masked.
        """
        self._check_pair(a, b)
        a.links.add(b.index)
        b.links.add(a.index)

    def unlink(self, a: Cell, b: Cell) -> None:
        """Close the passage between two neighboring cells."""
        self._check_pair(a, b)
        a.links.discard(b.index)
        b.links.discard(a.index)

    def is_linked(self, a: Cell, b: Cell) -> bool:
        return b.index in a.links

    def links(self) -> Iterator[tuple[Cell, Cell]]:
        """Yield every linked pair once, lower index first."""
        for cell in self._open:
            for index in sorted(cell.links):
                if index > cell.index:
                    yield cell, self.cells[index]

    def link_count(self) -> int:
        return sum(len(cell.links) for cell in self._open) // 2

    def link_all(self) -> None:
        """Link every pair of neighbors."""
        for a, b in self.edges():
            self.link(a, b)

    # Connectivity

    def components(self) -> list[list[Cell]]:
        """Group non-masked cells by geometric connectivity.

        Returns:
            Components ordered by their first cell, each in canonical order.
        """
        seen: set[int] = set()
        groups: list[list[Cell]] = []
        for start in self._open:
            if start.index in seen:
                continue
            seen.add(start.index)
            queue = deque([start.index])
            members = []
            while queue:
                index = queue.popleft()
                members.append(index)
                for _, neighbor in self.cells[index].neighbors:
                    if neighbor not in seen:
                        seen.add(neighbor)
                        queue.append(neighbor)
            groups.append([self.cells[index] for index in sorted(members)])
        return groups

    def __repr__(self) -> str:
        dims = ", ".join(f"{key}={value}" for key, value in self.dimensions().items())
        return f"{type(self).__name__}({dims}, cells={self.size()}, links={self.link_count()})"
