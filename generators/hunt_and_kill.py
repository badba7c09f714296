"""Hunt-and-Kill maze generator.

Random-walks through unvisited cells, linking as it goes. When the walk
gets stuck, the grid is scanned in canonical order for the first unvisited
cell touching the visited region; that cell is linked to a random visited
neighbor and the walk resumes from it.
"""

import random

from grids import Cell, Grid

from .base import ComponentGenerator


class HuntAndKillGenerator(ComponentGenerator):
    """Generates mazes by alternating random walks and scans."""

    name = "hunt_and_kill"

    def _carve_component(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        current: Cell | None = rng.choice(cells)
        visited = {current.index}
        # Every cell before the cursor is visited, so scans start there
        cursor = 0

        while current is not None:
            if grid.unvisited_neighbor_count(current, visited):
                options = [
                    neighbor
                    for neighbor in grid.neighbor_cells(current)
                    if neighbor.index not in visited
                ]
                neighbor = rng.choice(options)
                grid.link(current, neighbor)
                visited.add(neighbor.index)
                current = neighbor
            else:
                current, cursor = self._hunt(grid, cells, visited, cursor, rng)

    @staticmethod
    def _hunt(
        grid: Grid, cells: list[Cell], visited: set[int], cursor: int, rng: random.Random
    ) -> tuple[Cell | None, int]:
        """Find and attach the first unvisited cell next to the visited region.

        Returns:
            Tuple of (attached cell or None when every cell is visited,
            advanced scan cursor).
        """
        while cursor < len(cells) and cells[cursor].index in visited:
            cursor += 1
        for cell in cells[cursor:]:
            if cell.index in visited:
                continue
            anchors = [
                neighbor
                for neighbor in grid.neighbor_cells(cell)
                if neighbor.index in visited
            ]
            if anchors:
                grid.link(cell, rng.choice(anchors))
                visited.add(cell.index)
                return cell, cursor
        return None, cursor
