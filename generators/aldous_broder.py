"""Aldous-Broder maze generator.

Performs a plain random walk and links every cell the first time the walk
enters it. The result is a uniformly random spanning tree, at the cost of
many wasted steps on large grids.
"""

import random

from grids import Cell, Grid

from .base import ComponentGenerator


class AldousBroderGenerator(ComponentGenerator):
    """Generates unbiased mazes with a random walk."""

    name = "aldous_broder"

    def _carve_component(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        current = rng.choice(cells)
        visited = {current.index}
        remaining = len(cells) - 1

        while remaining > 0:
            neighbor = rng.choice(grid.neighbor_cells(current))
            if neighbor.index not in visited:
                grid.link(current, neighbor)
                visited.add(neighbor.index)
                remaining -= 1
            current = neighbor
