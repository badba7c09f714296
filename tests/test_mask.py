import numpy as np
import pytest
from PIL import Image

from grids import MalformedMaskError, Mask, RectangularGrid, Topology
from mask_loader import check_connected, count_areas, load_image_mask, load_mask, load_text_mask, parse_text_mask


def test_mask_lookup_and_bounds():
    mask = Mask([[True, False], [True, True]])
    assert mask(0, 0) and not mask(0, 1)
    assert not mask(-1, 0) and not mask(2, 1)
    assert mask.shape == (2, 2)
    assert mask.count() == 3
    assert not mask.is_full()
    assert Mask.full(2, 3).is_full()


def test_mask_is_read_only():
    mask = Mask([[True]])
    with pytest.raises(ValueError):
        mask.flags[0, 0] = False


@pytest.mark.parametrize("flags", [[], [[]], [True, False]])
def test_mask_rejects_bad_shapes(flags):
    with pytest.raises(MalformedMaskError):
        Mask(flags)


def test_mask_regions_and_rows():
    mask = Mask.from_predicate(3, 3, lambda r, c: c != 1)
    _, count = mask.regions()
    assert count == 2
    assert mask.to_rows() == ["oxo", "oxo", "oxo"]


def test_parse_text_mask():
    mask = parse_text_mask("o.o\nXx#\n\n\n")
    assert mask.to_rows() == ["ooo", "xxo"]


def test_parse_text_mask_rejects_ragged_rows():
    with pytest.raises(MalformedMaskError, match="row 2"):
        parse_text_mask("ooo\noo\nooo")


def test_parse_text_mask_rejects_empty():
    with pytest.raises(MalformedMaskError):
        parse_text_mask("\n\n")


def test_text_mask_file(tmp_path):
    path = tmp_path / "shape.txt"
    path.write_text("xox\nooo\n", encoding="utf-8")
    mask = load_text_mask(path)
    grid = RectangularGrid.from_mask(mask)
    assert grid.size() == 4
    assert grid[(0, 0)].masked


def _write_image(path, flags):
    arr = np.where(np.array(flags, dtype=bool)[..., None], 255, 0).astype(np.uint8)
    rgba = np.concatenate([arr, arr, arr, np.full(arr.shape, 255, dtype=np.uint8)], axis=2)
    Image.fromarray(rgba).save(path)


def test_image_mask(tmp_path):
    path = tmp_path / "shape.png"
    _write_image(path, [[True, False, True], [True, True, True]])
    mask = load_image_mask(path)
    assert mask.to_rows() == ["oxo", "ooo"]


def test_transparent_black_pixel_is_a_cell(tmp_path):
    path = tmp_path / "clear.png"
    Image.new("RGBA", (2, 1), (0, 0, 0, 0)).save(path)
    assert load_image_mask(path).is_full()


def test_image_mask_connectivity_check(tmp_path):
    path = tmp_path / "split.png"
    _write_image(path, [[True, False, True], [True, False, True]])
    assert load_image_mask(path).count() == 4
    with pytest.raises(MalformedMaskError, match="single connected"):
        load_image_mask(path, require_connected=True)


def test_check_connected_accepts_single_area():
    check_connected(parse_text_mask("oo\nxo"))


def test_load_mask_picks_format(tmp_path):
    text_path = tmp_path / "m.txt"
    text_path.write_text("ox\noo", encoding="utf-8")
    image_path = tmp_path / "m.png"
    _write_image(image_path, [[True, False], [True, True]])
    assert load_mask(text_path) == load_mask(image_path)
    with pytest.raises(ValueError):
        load_mask(text_path, kind="svg")


def test_diagonal_cells_are_split_on_a_rectangular_grid():
    mask = parse_text_mask("xo\nox")
    assert count_areas(mask) == 2
    with pytest.raises(MalformedMaskError, match="rectangular"):
        check_connected(mask)


def test_diagonal_cells_touch_on_a_hexagonal_grid():
    # (1, 0) is the south-west neighbor of the odd column cell (0, 1)
    mask = parse_text_mask("xo\nox")
    assert count_areas(mask, "hexagonal") == 1
    check_connected(mask, "hexagonal")


def test_stacked_cells_are_split_on_a_triangular_grid():
    # (0, 1) points down and has no neighbor below it
    mask = parse_text_mask("xo\nxo")
    assert count_areas(mask) == 1
    assert count_areas(mask, Topology.TRIANGULAR) == 2
    with pytest.raises(MalformedMaskError, match="triangular"):
        check_connected(mask, Topology.TRIANGULAR)


def test_count_areas_of_empty_mask():
    assert count_areas(Mask.from_predicate(2, 2, lambda r, c: False), "hexagonal") == 0


def test_circular_grids_take_no_mask():
    with pytest.raises(MalformedMaskError):
        check_connected(parse_text_mask("oo\noo"), "circular")


def test_load_mask_connectivity_follows_topology(tmp_path):
    path = tmp_path / "diag.txt"
    path.write_text("xo\nox", encoding="utf-8")
    assert load_mask(path, require_connected=True, topology="hexagonal").count() == 2
    with pytest.raises(MalformedMaskError):
        load_mask(path, require_connected=True)
