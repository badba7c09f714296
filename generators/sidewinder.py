"""Sidewinder maze generator.

Works row by row. Each row is walked toward the bias' horizontal direction
while a run of linked cells grows; at random the run is closed and one of
its cells opens a passage toward the bias' vertical direction. The row at
the vertical border cannot close runs, so it becomes one long corridor.
"""

from dataclasses import dataclass
import random

from grids import Cell, Grid, RectDirection, Topology

from .base import BaseMazeGenerator, GeneratorParams, Support
from .binary_tree import Diagonal


@dataclass
class SidewinderParams(GeneratorParams):
    """Parameters for Sidewinder generation."""

    bias: Diagonal = Diagonal.NORTHEAST
    close_chance: float = 0.5  # Probability of closing a run at each cell

    def __post_init__(self) -> None:
        if not 0.0 <= self.close_chance <= 1.0:
            raise ValueError(f"close_chance must be within [0, 1], got {self.close_chance}")


class SidewinderGenerator(BaseMazeGenerator):
    """Generates mazes with a horizontal bias, one row at a time."""

    name = "sidewinder"
    compatibility = {Topology.RECTANGULAR: Support.UNMASKED_ONLY}
    required_capabilities = ("has_privileged_corner_bias", "supports_row_iteration")

    def __init__(self, params: SidewinderParams | None = None) -> None:
        super().__init__(params if params is not None else SidewinderParams())
        self.sw_params = self.params

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        bias = Diagonal(self.sw_params.bias)
        for row in grid.each_row():
            if bias.horizontal is RectDirection.WEST:
                row = row[::-1]
            run: list[Cell] = []
            for cell in row:
                run.append(cell)
                ahead = grid.neighbor(cell, bias.horizontal)
                out = grid.neighbor(cell, bias.vertical)
                close_out = ahead is None or (
                    out is not None and rng.random() < self.sw_params.close_chance
                )

                if close_out:
                    member = rng.choice(run)
                    exit_cell = grid.neighbor(member, bias.vertical)
                    if exit_cell is not None:
                        grid.link(member, exit_cell)
                    run = []
                else:
                    grid.link(cell, ahead)
