"""Binary Tree maze generator.

Every cell opens a passage toward one of two fixed directions, for example
north or east. Cells on the far edges have only one choice and the corner
cell has none, which leaves two unbroken corridors along those edges.
"""

from dataclasses import dataclass
from enum import Enum
import random

from grids import Grid, RectDirection, Topology

from .base import BaseMazeGenerator, GeneratorParams, Support


class Diagonal(Enum):
    """Corner the maze is biased toward."""

    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"

    @property
    def horizontal(self) -> RectDirection:
        if self in (Diagonal.NORTHEAST, Diagonal.SOUTHEAST):
            return RectDirection.EAST
        return RectDirection.WEST

    @property
    def vertical(self) -> RectDirection:
        if self in (Diagonal.NORTHEAST, Diagonal.NORTHWEST):
            return RectDirection.NORTH
        return RectDirection.SOUTH


@dataclass
class BinaryTreeParams(GeneratorParams):
    """Parameters for Binary Tree generation."""

    bias: Diagonal = Diagonal.NORTHEAST


class BinaryTreeGenerator(BaseMazeGenerator):
    """Generates heavily biased mazes one cell at a time."""

    name = "binary_tree"
    compatibility = {Topology.RECTANGULAR: Support.UNMASKED_ONLY}
    required_capabilities = ("has_privileged_corner_bias",)

    def __init__(self, params: BinaryTreeParams | None = None) -> None:
        super().__init__(params if params is not None else BinaryTreeParams())
        self.bt_params = self.params

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        bias = Diagonal(self.bt_params.bias)
        for row in grid.each_row():
            for cell in row:
                candidates = [
                    neighbor
                    for neighbor in (
                        grid.neighbor(cell, bias.vertical),
                        grid.neighbor(cell, bias.horizontal),
                    )
                    if neighbor is not None
                ]
                if candidates:
                    grid.link(cell, rng.choice(candidates))
