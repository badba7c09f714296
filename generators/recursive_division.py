"""Recursive Division maze generator.

Starts from a grid with every passage open and adds walls: a region is cut
in two by a straight wall with a single gap, then each half is divided the
same way until regions are one cell wide. Regions are cut across their
longer side; square regions are cut either way at random.
"""

import random

from grids import Grid, RectDirection, Topology

from .base import BaseMazeGenerator, Support


class RecursiveDivisionGenerator(BaseMazeGenerator):
    """Generates mazes by recursively splitting open chambers."""

    name = "recursive_division"
    compatibility = {Topology.RECTANGULAR: Support.UNMASKED_ONLY}
    required_capabilities = ("has_privileged_corner_bias",)

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        grid.link_all()
        # Regions as (top row, left col, height, width); a stack keeps deep splits off the call stack
        regions = [(0, 0, grid.rows, grid.cols)]

        while regions:
            top, left, height, width = regions.pop()
            if height <= 1 or width <= 1:
                continue

            if height > width:
                horizontal = True
            elif width > height:
                horizontal = False
            else:
                horizontal = rng.random() < 0.5

            if horizontal:
                split = rng.randrange(1, height)
                gap = left + rng.randrange(width)
                for col in range(left, left + width):
                    if col != gap:
                        cell = grid[(top + split - 1, col)]
                        grid.unlink(cell, grid.neighbor(cell, RectDirection.SOUTH))
                regions.append((top, left, split, width))
                regions.append((top + split, left, height - split, width))
            else:
                split = rng.randrange(1, width)
                gap = top + rng.randrange(height)
                for row in range(top, top + height):
                    if row != gap:
                        cell = grid[(row, left + split - 1)]
                        grid.unlink(cell, grid.neighbor(cell, RectDirection.EAST))
                regions.append((top, left, height, split))
                regions.append((top, left + split, height, width - split))
