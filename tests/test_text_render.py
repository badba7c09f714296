import random

import pytest

from generators import generate_maze
from grids import HexagonalGrid, Mask, RectangularGrid, UnsupportedTopologyError
from text_render import render_text


def test_ascii_two_cells_linked():
    grid = RectangularGrid(1, 2)
    grid.link(grid[(0, 0)], grid[(0, 1)])
    assert render_text(grid) == "+---+---+\n|       |\n+---+---+"


def test_ascii_two_cells_unlinked():
    grid = RectangularGrid(1, 2)
    assert render_text(grid, "ascii") == "+---+---+\n|   |   |\n+---+---+"


def test_unicode_two_cells_linked():
    grid = RectangularGrid(1, 2)
    grid.link(grid[(0, 0)], grid[(0, 1)])
    assert render_text(grid, "unicode") == "┏━━━┓\n┃   ┃\n┗━━━┛"


def test_masked_position_is_walled_off():
    grid = RectangularGrid(1, 2, Mask([[True, False]]))
    assert render_text(grid) == "+---+\n|   |\n+---+"


def test_rendered_size():
    grid = generate_maze(RectangularGrid(4, 6), "wilson", rng=random.Random(3))
    lines = render_text(grid).splitlines()
    assert len(lines) == 2 * 4 + 1
    assert lines[0] == "+" + "---+" * 6
    assert lines[-1] == "+" + "---+" * 6


def test_rejects_other_topologies():
    with pytest.raises(UnsupportedTopologyError):
        render_text(HexagonalGrid(2, 2))


def test_rejects_unknown_charset():
    with pytest.raises(ValueError):
        render_text(RectangularGrid(1, 1), "ebcdic")
