"""Recursive Backtracker maze generator.

Depth-first search with an explicit stack: keep stepping to a random
unvisited neighbor, and back up when the current cell has none left. Makes
long winding corridors with few dead ends.
"""

import random

from grids import Cell, Grid

from .base import ComponentGenerator


class RecursiveBacktrackerGenerator(ComponentGenerator):
    """Generates mazes by randomized depth-first search."""

    name = "recursive_backtracker"

    def _carve_component(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        start = rng.choice(cells)
        visited = {start.index}
        stack = [start]

        while stack:
            current = stack[-1]
            if not grid.unvisited_neighbor_count(current, visited):
                stack.pop()
                continue
            options = [
                neighbor
                for neighbor in grid.neighbor_cells(current)
                if neighbor.index not in visited
            ]
            neighbor = rng.choice(options)
            grid.link(current, neighbor)
            visited.add(neighbor.index)
            stack.append(neighbor)
