"""Growing Tree maze generator.

Keeps a list of active cells. Each step picks one of them, links it to a
random unvisited neighbor and makes that neighbor active; cells with no
unvisited neighbor left are retired. The pick policy decides the texture:
always the newest cell behaves like the Recursive Backtracker, a random cell
like Prim's algorithm, and anything in between mixes the two.
"""

from dataclasses import dataclass
import random

from grids import Cell, Grid

from .base import ComponentGenerator, GeneratorParams


@dataclass
class GrowingTreeParams(GeneratorParams):
    """Parameters for Growing Tree generation."""

    newest_weight: float = 0.5  # Chance of picking the newest active cell, else a random one

    def __post_init__(self) -> None:
        if not 0.0 <= self.newest_weight <= 1.0:
            raise ValueError(f"newest_weight must be within [0, 1], got {self.newest_weight}")


class GrowingTreeGenerator(ComponentGenerator):
    """Generates mazes from an active cell set with a tunable pick policy."""

    name = "growing_tree"

    def __init__(self, params: GrowingTreeParams | None = None) -> None:
        super().__init__(params if params is not None else GrowingTreeParams())
        self.gt_params = self.params

    def _select(self, active: list[Cell], rng: random.Random) -> int:
        if rng.random() < self.gt_params.newest_weight:
            return len(active) - 1
        return rng.randrange(len(active))

    def _carve_component(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        start = rng.choice(cells)
        visited = {start.index}
        active = [start]

        while active:
            position = self._select(active, rng)
            current = active[position]
            if not grid.unvisited_neighbor_count(current, visited):
                del active[position]
                continue
            options = [
                neighbor
                for neighbor in grid.neighbor_cells(current)
                if neighbor.index not in visited
            ]
            neighbor = rng.choice(options)
            grid.link(current, neighbor)
            visited.add(neighbor.index)
            active.append(neighbor)
