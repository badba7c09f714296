"""Maze generators.

This module provides the maze generation algorithms and a registry for
picking one by name.

Available generators:
- AldousBroderGenerator: uniform spanning trees from a random walk
- WilsonGenerator: uniform spanning trees from loop-erased random walks
- BinaryTreeGenerator: diagonal-biased, one decision per cell
- SidewinderGenerator: row runs closed by a passage up
- RecursiveBacktrackerGenerator: long winding corridors
- HuntAndKillGenerator: random walks restarted by a scan
- GrowingTreeGenerator: tunable mix of backtracker and Prim's
- PrimGenerator: frontier growth, many short dead ends
- KruskalGenerator: random edge order joined by a disjoint set
- EllerGenerator: row by row with a row-local disjoint set
- RecursiveDivisionGenerator: walls added to an open chamber
"""

from enum import Enum
import logging
import random

from grids import Grid, Topology

from .base import ALL_TOPOLOGIES, BaseMazeGenerator, ComponentGenerator, GeneratorParams, Support
from .disjoint_set import DisjointSet
from .aldous_broder import AldousBroderGenerator
from .wilson import WilsonGenerator
from .binary_tree import BinaryTreeGenerator, BinaryTreeParams, Diagonal
from .sidewinder import SidewinderGenerator, SidewinderParams
from .recursive_backtracker import RecursiveBacktrackerGenerator
from .hunt_and_kill import HuntAndKillGenerator
from .growing_tree import GrowingTreeGenerator, GrowingTreeParams
from .prim import PrimGenerator, PrimParams
from .kruskal import KruskalGenerator
from .eller import EllerGenerator, EllerParams
from .recursive_division import RecursiveDivisionGenerator

logger = logging.getLogger(__name__)

__all__ = [
    # Base classes
    "BaseMazeGenerator",
    "ComponentGenerator",
    "GeneratorParams",
    "Support",
    "ALL_TOPOLOGIES",
    "DisjointSet",
    # Generators
    "AldousBroderGenerator",
    "WilsonGenerator",
    "BinaryTreeGenerator",
    "BinaryTreeParams",
    "Diagonal",
    "SidewinderGenerator",
    "SidewinderParams",
    "RecursiveBacktrackerGenerator",
    "HuntAndKillGenerator",
    "GrowingTreeGenerator",
    "GrowingTreeParams",
    "PrimGenerator",
    "PrimParams",
    "KruskalGenerator",
    "EllerGenerator",
    "EllerParams",
    "RecursiveDivisionGenerator",
    # Registry
    "Algorithm",
    "ALGORITHMS",
    "get_generator",
    "generate_maze",
    "compatibility_table",
]


class Algorithm(Enum):
    """Names of the available generation algorithms."""

    ALDOUS_BRODER = "aldous_broder"
    WILSON = "wilson"
    BINARY_TREE = "binary_tree"
    SIDEWINDER = "sidewinder"
    RECURSIVE_BACKTRACKER = "recursive_backtracker"
    HUNT_AND_KILL = "hunt_and_kill"
    GROWING_TREE = "growing_tree"
    PRIM = "prim"
    KRUSKAL = "kruskal"
    ELLER = "eller"
    RECURSIVE_DIVISION = "recursive_division"


# Registry of algorithms, in the order they are listed to users
ALGORITHMS = {
    Algorithm.ALDOUS_BRODER: {
        "generator": AldousBroderGenerator,
        "params": GeneratorParams,
        "description": "Unbiased random walk, slow to finish",
    },
    Algorithm.WILSON: {
        "generator": WilsonGenerator,
        "params": GeneratorParams,
        "description": "Unbiased loop-erased random walks",
    },
    Algorithm.BINARY_TREE: {
        "generator": BinaryTreeGenerator,
        "params": BinaryTreeParams,
        "description": "One choice per cell, strong diagonal bias",
    },
    Algorithm.SIDEWINDER: {
        "generator": SidewinderGenerator,
        "params": SidewinderParams,
        "description": "Horizontal runs with a passage out of each",
    },
    Algorithm.RECURSIVE_BACKTRACKER: {
        "generator": RecursiveBacktrackerGenerator,
        "params": GeneratorParams,
        "description": "Long twisty corridors, few dead ends",
    },
    Algorithm.HUNT_AND_KILL: {
        "generator": HuntAndKillGenerator,
        "params": GeneratorParams,
        "description": "Random walks restarted by scanning the grid",
    },
    Algorithm.GROWING_TREE: {
        "generator": GrowingTreeGenerator,
        "params": GrowingTreeParams,
        "description": "Mix of newest-cell and random-cell growth",
    },
    Algorithm.PRIM: {
        "generator": PrimGenerator,
        "params": PrimParams,
        "description": "Frontier growth from a single start",
    },
    Algorithm.KRUSKAL: {
        "generator": KruskalGenerator,
        "params": GeneratorParams,
        "description": "Random edges merged by a disjoint set",
    },
    Algorithm.ELLER: {
        "generator": EllerGenerator,
        "params": EllerParams,
        "description": "Row by row with a row-local disjoint set",
    },
    Algorithm.RECURSIVE_DIVISION: {
        "generator": RecursiveDivisionGenerator,
        "params": GeneratorParams,
        "description": "Walls added to an open chamber",
    },
}


def _lookup(name: str | Algorithm) -> Algorithm:
    if isinstance(name, Algorithm):
        return name
    try:
        return Algorithm(name)
    except ValueError:
        available = ", ".join(algorithm.value for algorithm in ALGORITHMS)
        raise ValueError(f"Unknown algorithm: {name}. Available: {available}") from None


def get_generator(name: str | Algorithm, **kwargs) -> BaseMazeGenerator:
    """Create a generator instance by algorithm name.

    Args:
        name: Algorithm name (e.g., "wilson") or Algorithm member.
        **kwargs: Parameters to pass to the generator.

    Returns:
        Initialized generator instance.

    Raises:
        ValueError: If name is not recognized.
        TypeError: If a parameter is not accepted by the algorithm.
    """
    entry = ALGORITHMS[_lookup(name)]
    params = entry["params"](**kwargs)
    return entry["generator"](params)


def generate_maze(
    grid: Grid,
    algorithm: str | Algorithm,
    rng: random.Random | None = None,
    seed: int | None = None,
    **params,
) -> Grid:
    """Carve a maze into grid with the named algorithm.

    Args:
        grid: Unlinked grid; it is modified in place.
        algorithm: Algorithm name or Algorithm member.
        rng: Random source. Takes precedence over seed.
        seed: Seed for a fresh random source when rng is not given.
        **params: Algorithm parameters.

    Returns:
        The linked grid.

    Raises:
        UnsupportedTopologyError: If the algorithm cannot run on the topology.
        MaskedUnsupportedError: If the algorithm cannot run on a masked grid.
    """
    generator = get_generator(algorithm, **params)
    if rng is None:
        rng = random.Random(seed)
    logger.info("generating %s maze on %r", generator.name, grid)
    return generator.generate(grid, rng)


def compatibility_table() -> dict[Algorithm, dict[Topology, Support | None]]:
    """Support of every algorithm for every topology.

    Returns:
        Mapping algorithm -> topology -> Support, None where unsupported.
    """
    return {
        algorithm: {
            topology: entry["generator"].compatibility.get(topology)
            for topology in Topology
        }
        for algorithm, entry in ALGORITHMS.items()
    }
