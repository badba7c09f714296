"""Kruskal's maze generator.

Lists every pair of neighboring cells once, shuffles the list and links
each pair whose cells are not yet connected, tracking connectivity with a
disjoint set. Disconnected parts of a masked grid simply end up as separate
trees.
"""

import random

from grids import Grid

from .base import ALL_TOPOLOGIES, BaseMazeGenerator
from .disjoint_set import DisjointSet


class KruskalGenerator(BaseMazeGenerator):
    """Generates mazes by randomized Kruskal's algorithm."""

    name = "kruskal"
    compatibility = ALL_TOPOLOGIES

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        edges = list(grid.edges())
        rng.shuffle(edges)
        sets = DisjointSet(cell.index for cell in grid.each_cell())

        for a, b in edges:
            if sets.union(a.index, b.index):
                grid.link(a, b)
