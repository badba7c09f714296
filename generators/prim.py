"""Prim's maze generator.

Grows a single tree outward from a random start. The frontier holds every
(tree cell, outside neighbor) pair; the simple variant picks a frontier
pair uniformly at random, the weighted variant gives each cell a random cost
once and always grows into the cheapest frontier cell. Both produce many
short dead ends radiating from the start.
"""

from dataclasses import dataclass
import heapq
import random

from grids import Cell, Grid

from .base import ComponentGenerator, GeneratorParams


@dataclass
class PrimParams(GeneratorParams):
    """Parameters for Prim's generation."""

    weighted: bool = False  # Grow through the cheapest cell instead of a random one


class PrimGenerator(ComponentGenerator):
    """Generates mazes by randomized Prim's algorithm."""

    name = "prim"

    def __init__(self, params: PrimParams | None = None) -> None:
        super().__init__(params if params is not None else PrimParams())
        self.prim_params = self.params

    def _carve_component(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        if self.prim_params.weighted:
            self._carve_weighted(grid, cells, rng)
        else:
            self._carve_simple(grid, cells, rng)

    def _carve_simple(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        start = rng.choice(cells)
        visited = {start.index}
        frontier = [(start, neighbor) for neighbor in grid.neighbor_cells(start)]

        while frontier:
            # Swap the chosen pair to the end so removal is O(1)
            pick = rng.randrange(len(frontier))
            frontier[pick], frontier[-1] = frontier[-1], frontier[pick]
            inside, outside = frontier.pop()
            if outside.index in visited:
                continue
            grid.link(inside, outside)
            visited.add(outside.index)
            frontier.extend(
                (outside, neighbor)
                for neighbor in grid.neighbor_cells(outside)
                if neighbor.index not in visited
            )

    def _carve_weighted(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        cost = {cell.index: rng.random() for cell in cells}
        start = rng.choice(cells)
        visited = {start.index}
        heap: list[tuple[float, int, int]] = []

        def push_edges(cell: Cell) -> None:
            for neighbor in grid.neighbor_cells(cell):
                if neighbor.index not in visited:
                    heapq.heappush(heap, (cost[neighbor.index], neighbor.index, cell.index))

        push_edges(start)
        while heap:
            _, outside, inside = heapq.heappop(heap)
            if outside in visited:
                continue
            grid.link(grid.cells[inside], grid.cells[outside])
            visited.add(outside)
            push_edges(grid.cells[outside])
