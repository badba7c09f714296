"""Wilson's maze generator.

Builds a uniformly random spanning tree from loop-erased random walks: each
walk starts at a cell outside the tree and wanders until it touches the
tree; any loop the walk makes is cut out as soon as it closes. The finished
walk is then linked into the tree.
"""

import random

from grids import Cell, Grid

from .base import ComponentGenerator


class WilsonGenerator(ComponentGenerator):
    """Generates unbiased mazes with loop-erased random walks."""

    name = "wilson"

    def _carve_component(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        first = rng.choice(cells)
        in_tree = {first.index}
        pending = [cell for cell in cells if cell.index != first.index]
        # Cell index -> position in pending, for swap-removal
        slot = {cell.index: position for position, cell in enumerate(pending)}

        while pending:
            path = self._loop_erased_walk(grid, rng.choice(pending), in_tree, rng)
            for a, b in zip(path, path[1:]):
                grid.link(a, b)
            for cell in path[:-1]:
                in_tree.add(cell.index)
                position = slot.pop(cell.index)
                last = pending.pop()
                if last.index != cell.index:
                    pending[position] = last
                    slot[last.index] = position

    @staticmethod
    def _loop_erased_walk(
        grid: Grid, start: Cell, in_tree: set[int], rng: random.Random
    ) -> list[Cell]:
        """Walk from start until the tree is hit, erasing loops on the way.

        Returns:
            Path from start to the first tree cell reached, without repeats.
        """
        path = [start]
        position = {start.index: 0}
        current = start

        while current.index not in in_tree:
            step = rng.choice(grid.neighbor_cells(current))
            if step.index in position:
                # Loop closed: cut the path back to the first visit of step
                cut = position[step.index]
                for erased in path[cut + 1:]:
                    del position[erased.index]
                del path[cut + 1:]
            else:
                position[step.index] = len(path)
                path.append(step)
            current = step

        return path
