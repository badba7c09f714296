import json

import generate_maze
from maze_store import read_record


def test_list_prints_compatibility_table(capsys):
    assert generate_maze.main(["--list"]) == 0
    out = capsys.readouterr().out
    assert "recursive_division" in out
    assert "unmasked only" in out


def test_generate_show_save_and_png(tmp_path, capsys):
    save_path = tmp_path / "maze.json"
    png_path = tmp_path / "maze.png"
    code = generate_maze.main([
        "rectangular", "wilson",
        "--rows", "3", "--cols", "4",
        "--seed", "8",
        "--show", "ascii",
        "--save", str(save_path),
        "--png", str(png_path),
        "--scale", "Small",
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "+---+---+---+---+" in out
    assert "Passages: 11" in out
    assert png_path.exists()
    record = read_record(save_path)
    assert record.algorithm == "wilson" and record.seed == 8
    assert len(record.links) == 11


def test_load_saved_maze(tmp_path, capsys):
    save_path = tmp_path / "maze.json"
    assert generate_maze.main(["circular", "eller", "--rings", "4", "--seed", "2", "--save", str(save_path)]) == 0
    capsys.readouterr()
    assert generate_maze.main(["--load", str(save_path)]) == 0
    out = capsys.readouterr().out
    assert "Topology: circular" in out
    assert "Algorithm: eller" in out


def test_config_file_with_flag_override(tmp_path, capsys):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"topology": "hexagonal", "rows": 3, "cols": 3, "algorithm": "prim"}))
    assert generate_maze.main(["--config", str(config), "--cols", "5", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Topology: hexagonal" in out
    assert "Cells: 15" in out


def test_mask_file(tmp_path, capsys):
    mask = tmp_path / "mask.txt"
    mask.write_text("ooo\noxo\nooo\n")
    assert generate_maze.main(["rectangular", "kruskal", "--mask", str(mask), "--seed", "4"]) == 0
    out = capsys.readouterr().out
    assert "Cells: 8" in out
    assert "Passages: 7" in out


def test_incompatible_algorithm_reports_error(capsys):
    assert generate_maze.main(["circular", "binary_tree", "--rings", "3"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_text_view_of_non_rectangular_maze_fails(capsys):
    assert generate_maze.main(["triangular", "kruskal", "--rows", "2", "--cols", "3", "--show", "ascii"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_eller_chance_flags(tmp_path, capsys):
    path = tmp_path / "eller.json"
    argv = [
        "rectangular", "eller", "--rows", "5", "--cols", "6", "--seed", "3",
        "--join-chance", "0.9", "--extra-drop-chance", "0.0", "--save", str(path),
    ]
    assert generate_maze.main(argv) == 0
    assert "Passages: 29" in capsys.readouterr().out
    assert read_record(path).params == {"join_chance": 0.9, "extra_drop_chance": 0.0}


def test_sidewinder_close_chance_flag(tmp_path):
    path = tmp_path / "side.json"
    argv = ["rectangular", "sidewinder", "--rows", "4", "--cols", "4", "--close-chance", "0.2", "--save", str(path)]
    assert generate_maze.main(argv) == 0
    assert read_record(path).params["close_chance"] == 0.2


def test_require_connected_rejects_split_mask(tmp_path, capsys):
    mask = tmp_path / "split.txt"
    mask.write_text("oxo\noxo\n")
    argv = ["rectangular", "kruskal", "--mask", str(mask), "--require-connected"]
    assert generate_maze.main(argv) == 1
    assert "single connected area" in capsys.readouterr().out
    assert generate_maze.main(["rectangular", "kruskal", "--mask", str(mask)]) == 0
