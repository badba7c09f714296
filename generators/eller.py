"""Eller's maze generator.

Builds the maze one row at a time while remembering only which cells of
the current row are already connected (a row-local disjoint set):

1. Randomly link neighboring cells of the row that belong to different sets.
2. Give every set at least one passage down into the next row; the cells
   reached that way inherit the set, all others start a set of their own.
3. In the last row, link every neighboring pair still in different sets.

On circular grids the rows are the rings, walked clockwise, and passages
lead outward.
"""

from dataclasses import dataclass
import random

from grids import Cell, Grid, Topology

from .base import BaseMazeGenerator, GeneratorParams, Support
from .disjoint_set import DisjointSet


@dataclass
class EllerParams(GeneratorParams):
    """Parameters for Eller's generation."""

    join_chance: float = 0.5  # Chance of linking two row neighbors in different sets
    extra_drop_chance: float = 0.33  # Chance of each passage down beyond the required one

    def __post_init__(self) -> None:
        for name in ("join_chance", "extra_drop_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")


class EllerGenerator(BaseMazeGenerator):
    """Generates mazes row by row with a row-local disjoint set."""

    name = "eller"
    compatibility = {
        Topology.RECTANGULAR: Support.UNMASKED_ONLY,
        Topology.CIRCULAR: Support.FULL,
        Topology.HEXAGONAL: Support.UNMASKED_ONLY,
    }
    required_capabilities = ("supports_row_iteration",)

    def __init__(self, params: EllerParams | None = None) -> None:
        super().__init__(params if params is not None else EllerParams())
        self.eller_params = self.params

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        rows = list(grid.each_row())
        sets = DisjointSet(cell.index for cell in rows[0])

        for depth, row in enumerate(rows):
            last_row = depth == len(rows) - 1
            self._join_row(grid, row, sets, last_row, rng)
            if last_row:
                break
            sets = self._drop_down(grid, row, rows[depth + 1], sets, rng)

    def _join_row(
        self,
        grid: Grid,
        row: list[Cell],
        sets: DisjointSet,
        force: bool,
        rng: random.Random,
    ) -> None:
        for cell in row:
            following = grid.row_next(cell)
            if following is None or sets.connected(cell.index, following.index):
                continue
            if force or rng.random() < self.eller_params.join_chance:
                grid.link(cell, following)
                sets.union(cell.index, following.index)

    def _drop_down(
        self,
        grid: Grid,
        row: list[Cell],
        next_row: list[Cell],
        sets: DisjointSet,
        rng: random.Random,
    ) -> DisjointSet:
        """Link every set of row down at least once and seed the next row's sets."""
        by_cell = {cell.index: cell for cell in row}
        next_sets = DisjointSet()

        for members in sets.groups():
            drops = [
                (by_cell[index], below)
                for index in members
                for below in grid.row_below(by_cell[index])
            ]
            rng.shuffle(drops)
            chosen = drops[:1] + [
                drop for drop in drops[1:] if rng.random() < self.eller_params.extra_drop_chance
            ]
            anchor = None
            for cell, below in chosen:
                grid.link(cell, below)
                next_sets.make_set(below.index)
                if anchor is None:
                    anchor = below.index
                else:
                    next_sets.union(anchor, below.index)

        for cell in next_row:
            next_sets.make_set(cell.index)
        return next_sets
