"""Save and load mazes as JSON.

A saved maze records the grid (topology, dimensions, mask rows), how it was
generated (algorithm, seed, parameters) and its passages as coordinate
pairs, so it can be restored exactly or regenerated from the seed.
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from generators import generate_maze
from grids import Grid, Mask, make_grid
from mask_loader import parse_text_mask

logger = logging.getLogger(__name__)

MAZE_VERSION = 1


@dataclass
class MazeRecord:
    """Serializable description of a maze."""

    topology: str
    dimensions: dict[str, int]
    mask_rows: list[str] | None = None
    algorithm: str | None = None
    seed: int | None = None
    params: dict[str, Any] = field(default_factory=dict)
    links: list[list[list[int]]] = field(default_factory=list)


def _plain(value: Any) -> Any:
    """Convert enum parameter values to their JSON form."""
    return value.value if isinstance(value, Enum) else value


def record_from_grid(
    grid: Grid,
    algorithm: str | Enum | None = None,
    seed: int | None = None,
    params: dict[str, Any] | None = None,
) -> MazeRecord:
    """Describe a linked grid.

    Args:
        grid: Grid to describe.
        algorithm: Algorithm that carved it, if known.
        seed: Seed the algorithm ran with, if known.
        params: Algorithm parameters.

    Returns:
        MazeRecord with the links in canonical order.
    """
    mask_rows = grid.mask.to_rows() if grid.mask is not None else None
    return MazeRecord(
        topology=grid.topology.value,
        dimensions=grid.dimensions(),
        mask_rows=mask_rows,
        algorithm=_plain(algorithm),
        seed=seed,
        params={key: _plain(value) for key, value in (params or {}).items()},
        links=[[list(a.coord), list(b.coord)] for a, b in grid.links()],
    )


def build_grid(record: MazeRecord) -> Grid:
    """Build the unlinked grid a record describes."""
    mask: Mask | None = None
    if record.mask_rows is not None:
        mask = parse_text_mask("\n".join(record.mask_rows))
    return make_grid(record.topology, mask=mask, **record.dimensions)


def save_maze(path: str | Path, grid: Grid, meta: dict[str, Any] | None = None) -> MazeRecord:
    """Write a maze to a JSON file.

    Args:
        path: Output file path; parent directories are created.
        grid: Linked grid to save.
        meta: Optional generation metadata with keys "algorithm", "seed"
            and "params".

    Returns:
        The record that was written.
    """
    meta = meta or {}
    record = record_from_grid(
        grid,
        algorithm=meta.get("algorithm"),
        seed=meta.get("seed"),
        params=meta.get("params"),
    )
    data = {"version": MAZE_VERSION, **asdict(record)}

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.info("saved maze to %s (%d links)", path, len(record.links))
    return record


def read_record(path: str | Path) -> MazeRecord:
    """Read a maze record from a JSON file.

    Raises:
        ValueError: If the version differs or the file is not a maze record.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path} does not hold a maze record")
    version = data.pop("version", 0)
    if version != MAZE_VERSION:
        raise ValueError(f"Maze version mismatch: {version} != {MAZE_VERSION}")

    try:
        return MazeRecord(**data)
    except TypeError as e:
        raise ValueError(f"Malformed maze record in {path}: {e}") from e


def apply_links(grid: Grid, links: list[list[list[int]]]) -> None:
    """Link the coordinate pairs of a record into grid.

    Raises:
        ValueError: If a coordinate is unknown or a pair is not linkable.
    """
    for link in links:
        try:
            a, b = link
            cell_a, cell_b = grid[tuple(a)], grid[tuple(b)]
        except KeyError as e:
            raise ValueError(f"Link refers to unknown cell {e}") from e
        except (TypeError, ValueError) as e:
            raise ValueError(f"Malformed link {link!r}: {e}") from e
        grid.link(cell_a, cell_b)


def load_maze(path: str | Path) -> tuple[Grid, MazeRecord]:
    """Restore a saved maze.

    Args:
        path: JSON file written by save_maze.

    Returns:
        Tuple of (linked grid, record).

    Raises:
        ValueError: If the record is malformed or a stored link is invalid.
    """
    record = read_record(path)
    grid = build_grid(record)
    apply_links(grid, record.links)
    logger.debug("loaded maze %s: %r", path, grid)
    return grid, record


def regenerate(record: MazeRecord) -> Grid:
    """Rebuild a maze from its algorithm and seed alone.

    Raises:
        ValueError: If the record has no algorithm or no seed.
    """
    if record.algorithm is None or record.seed is None:
        raise ValueError("Regenerating a maze needs both its algorithm and seed")
    grid = build_grid(record)
    return generate_maze(grid, record.algorithm, seed=record.seed, **record.params)
