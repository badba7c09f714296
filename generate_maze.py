#!/usr/bin/env python3
"""CLI script to generate perfect mazes.

Usage:
    python generate_maze.py [topology] [algorithm] [options]

Examples:
    python generate_maze.py rectangular wilson --rows 12 --cols 20 --show unicode
    python generate_maze.py circular eller --rings 10 --png out/circle.png
    python generate_maze.py hexagonal prim --weighted --seed 12345 --save out/hex.json
    python generate_maze.py triangular kruskal --mask shapes/star.png
    python generate_maze.py --load out/hex.json --png out/hex.png
    python generate_maze.py --list
"""

import argparse
import logging
from pathlib import Path

from generators import ALGORITHMS, Diagonal, compatibility_table, generate_maze
from grids import TOPOLOGIES, Grid, MazeError, Topology, make_grid
from mask_loader import load_mask
from maze_store import load_maze, save_maze
from painter import paint_maze, save_picture
from palettes import THEME_NAMES
from settings import SCALE_PRESETS, MazeSettings
from text_render import CHARSETS, render_text


def format_compatibility_table() -> str:
    """Render the algorithm x topology support table as text."""
    table = compatibility_table()
    topologies = list(Topology)
    name_width = max(len(algorithm.value) for algorithm in table)
    col_width = max(len("unmasked only"), *(len(t.value) for t in topologies))

    header = " " * name_width + "  " + "  ".join(t.value.ljust(col_width) for t in topologies)
    lines = [header.rstrip()]
    for algorithm, support in table.items():
        cells = [
            (support[t].value if support[t] is not None else "no").ljust(col_width)
            for t in topologies
        ]
        lines.append((algorithm.value.ljust(name_width) + "  " + "  ".join(cells)).rstrip())
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    algorithm_lines = "\n".join(
        f"  {algorithm.value:<22} - {entry['description']}" for algorithm, entry in ALGORITHMS.items()
    )
    parser = argparse.ArgumentParser(
        description="Generate perfect mazes on rectangular, circular, hexagonal or triangular grids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Available algorithms:\n{algorithm_lines}\n",
    )

    parser.add_argument(
        "topology",
        nargs="?",
        choices=[t.value for t in TOPOLOGIES],
        help="Grid topology (default: rectangular)",
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        choices=[a.value for a in ALGORITHMS],
        help="Generation algorithm (default: recursive_backtracker)",
    )
    parser.add_argument("--config", type=Path, help="JSON settings file; flags override it")
    parser.add_argument("--list", action="store_true", help="Print the compatibility table and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    # Grid options
    parser.add_argument("--rows", type=int, help="Row count (default: 10)")
    parser.add_argument("--cols", type=int, help="Column count (default: 10)")
    parser.add_argument("--rings", type=int, help="Ring count for circular grids (default: 8)")
    parser.add_argument("--mask", dest="mask_path", help="Mask file (text or image)")
    parser.add_argument(
        "--mask-kind",
        choices=["text", "image"],
        help="Mask file format (default: by file suffix)",
    )
    parser.add_argument(
        "--require-connected",
        action="store_true",
        default=None,
        help="Reject masks whose cells do not form one area on the chosen grid",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")

    # Algorithm options
    parser.add_argument(
        "--bias",
        choices=[d.value for d in Diagonal],
        help="Corner bias for binary_tree and sidewinder (default: northeast)",
    )
    parser.add_argument(
        "--newest-weight",
        type=float,
        help="Chance growing_tree picks the newest cell (default: 0.5)",
    )
    parser.add_argument(
        "--close-chance",
        type=float,
        help="Chance sidewinder closes a run at each cell (default: 0.5)",
    )
    parser.add_argument(
        "--join-chance",
        type=float,
        help="Chance eller joins two row neighbors (default: 0.5)",
    )
    parser.add_argument(
        "--extra-drop-chance",
        type=float,
        help="Chance of each extra passage down in eller (default: 0.33)",
    )
    parser.add_argument(
        "--weighted",
        action="store_true",
        default=None,
        help="Use weighted cells for prim",
    )

    # Output options
    parser.add_argument("--show", choices=list(CHARSETS), help="Print a rectangular maze as text")
    parser.add_argument("--png", type=Path, help="Write a picture of the maze")
    parser.add_argument("--scale", choices=list(SCALE_PRESETS), help="Picture cell size (default: Medium)")
    parser.add_argument("--wall-thickness", type=int, help="Picture wall width (default: 2)")
    parser.add_argument(
        "--palette",
        choices=THEME_NAMES + ["Random"],
        help="Picture colour theme (default: Classic)",
    )
    parser.add_argument("--save", type=Path, help="Write the maze as JSON")
    parser.add_argument("--load", type=Path, help="Load a maze saved with --save instead of generating")
    return parser


def build_settings(args: argparse.Namespace) -> MazeSettings:
    """Merge the config file (if any) with command line flags."""
    settings = MazeSettings.from_file(args.config) if args.config else MazeSettings()
    settings.update(
        topology=args.topology,
        algorithm=args.algorithm,
        rows=args.rows,
        cols=args.cols,
        rings=args.rings,
        mask_path=args.mask_path,
        mask_kind=args.mask_kind,
        require_connected=args.require_connected,
        seed=args.seed,
        bias=args.bias,
        newest_weight=args.newest_weight,
        close_chance=args.close_chance,
        join_chance=args.join_chance,
        extra_drop_chance=args.extra_drop_chance,
        weighted=args.weighted,
        scale=args.scale,
        wall_thickness=args.wall_thickness,
        palette=args.palette,
    )
    return settings


def create_maze(settings: MazeSettings) -> Grid:
    """Build the grid the settings describe and carve a maze into it."""
    mask = None
    if settings.mask_path:
        mask = load_mask(
            settings.mask_path,
            settings.mask_kind,
            require_connected=settings.require_connected,
            topology=settings.topology,
        )
    if settings.topology == Topology.CIRCULAR.value:
        grid = make_grid(settings.topology, rings=settings.rings, mask=mask)
    elif mask is not None:
        grid = make_grid(settings.topology, mask=mask)
    else:
        grid = make_grid(settings.topology, rows=settings.rows, cols=settings.cols)

    seed = settings.resolve_seed()
    return generate_maze(grid, settings.algorithm, seed=seed, **settings.to_generator_kwargs())


def main(argv: list[str] | None = None) -> int:
    """Main entry point for maze generation CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.list:
        print(format_compatibility_table())
        return 0

    try:
        settings = build_settings(args)
        if args.load:
            print(f"Loading maze from {args.load}...")
            grid, record = load_maze(args.load)
            meta = {"algorithm": record.algorithm, "seed": record.seed, "params": record.params}
        else:
            print(f"Generating {settings.algorithm} maze on a {settings.topology} grid...")
            grid = create_maze(settings)
            meta = {
                "algorithm": settings.algorithm,
                "seed": settings.seed,
                "params": settings.to_generator_kwargs(),
            }

        if args.show:
            print(render_text(grid, args.show))
        if args.png:
            img = paint_maze(
                grid,
                cell_size=settings.get_cell_size(),
                wall_thickness=settings.wall_thickness,
                palette=settings.palette,
            )
            save_picture(img, args.png)
        if args.save:
            save_maze(args.save, grid, meta)
    except (MazeError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    print("\nMaze ready!")
    print(f"  Topology: {grid.topology.value}")
    print(f"  Algorithm: {meta['algorithm']}")
    print(f"  Seed: {meta['seed']}")
    print(f"  Cells: {grid.size()}")
    print(f"  Passages: {grid.link_count()}")
    if args.png:
        print(f"  Picture: {args.png}")
    if args.save:
        print(f"  Saved: {args.save}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
