import random

import pytest

from generators import generate_maze
from grids import CircularGrid, HexagonalGrid, Mask, RectangularGrid, TriangularGrid
from painter import paint_maze, save_picture
from palettes import THEMES, get_theme

CLASSIC = THEMES["Classic"]


def test_rectangular_picture_size():
    img = paint_maze(RectangularGrid(4, 5), cell_size=10, wall_thickness=2)
    assert img.size == (54, 44)
    assert img.mode == "RGB"


def test_circular_picture_size():
    img = paint_maze(CircularGrid(3), cell_size=10, wall_thickness=2)
    assert img.size == (64, 64)


@pytest.mark.parametrize(
    "grid",
    [HexagonalGrid(4, 5), TriangularGrid(4, 6), CircularGrid(6)],
    ids=["hexagonal", "triangular", "circular"],
)
def test_pictures_of_generated_mazes(grid):
    generate_maze(grid, "kruskal", rng=random.Random(1))
    img = paint_maze(grid, cell_size=12, wall_thickness=2, palette="Blueprint")
    assert img.width > 12 and img.height > 12
    colors = {color for _, color in img.getcolors(maxcolors=1 << 16)}
    assert THEMES["Blueprint"].wall in colors


def test_shared_wall_follows_link():
    grid = RectangularGrid(1, 2)
    assert paint_maze(grid, cell_size=10).getpixel((12, 6)) == CLASSIC.wall
    grid.link(grid[(0, 0)], grid[(0, 1)])
    assert paint_maze(grid, cell_size=10).getpixel((12, 6)) == CLASSIC.cell


def test_masked_cells_filled():
    mask = Mask([[True, True, True], [True, False, True], [True, True, True]])
    img = paint_maze(RectangularGrid(3, 3, mask), cell_size=10, wall_thickness=2)
    assert img.getpixel((17, 17)) == CLASSIC.masked
    assert img.getpixel((7, 7)) == CLASSIC.cell


def test_bad_sizes_and_palette():
    grid = RectangularGrid(2, 2)
    with pytest.raises(ValueError):
        paint_maze(grid, cell_size=0)
    with pytest.raises(ValueError):
        paint_maze(grid, palette="Mauve")


def test_random_palette_uses_given_rng():
    assert get_theme("Random", random.Random(4)) in THEMES.values()


def test_save_picture(tmp_path):
    img = paint_maze(RectangularGrid(2, 2), cell_size=8)
    path = save_picture(img, tmp_path / "out" / "maze.png")
    assert path.exists()
