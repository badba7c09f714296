"""Base generator class for maze generation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
import logging
import random

from grids import Cell, Grid, Topology
from grids.errors import MaskedUnsupportedError, UnsupportedTopologyError

logger = logging.getLogger(__name__)


class Support(Enum):
    """How far an algorithm supports a topology."""

    FULL = "yes"
    UNMASKED_ONLY = "unmasked only"


ALL_TOPOLOGIES = {topology: Support.FULL for topology in Topology}


@dataclass
class GeneratorParams:
    """Common parameters for all generators."""


class BaseMazeGenerator(ABC):
    """Abstract base class for maze generators.

    A generator is a stateless strategy: its parameters are fixed at
    construction and every call to generate() receives the grid and the
    random source to use.
    """

    name: str = "base"
    # Topologies this algorithm runs on; missing ones are unsupported.
    compatibility: dict[Topology, Support] = {}
    # GridCapabilities flags that must be set on the grid.
    required_capabilities: tuple[str, ...] = ()

    def __init__(self, params: GeneratorParams | None = None) -> None:
        """Initialize generator with parameters.

        Args:
            params: Algorithm parameters; defaults are used when omitted.
        """
        self.params = params if params is not None else GeneratorParams()

    def check_compatible(self, grid: Grid) -> None:
        """Reject grids this algorithm cannot run on.

        Raises:
            UnsupportedTopologyError: If the topology or a required
                capability is missing.
            MaskedUnsupportedError: If the grid is masked and the algorithm
                only runs on full grids.
        """
        support = self.compatibility.get(grid.topology)
        if support is None:
            raise UnsupportedTopologyError(
                f"{self.name} does not support {grid.topology.value} grids"
            )
        for capability in self.required_capabilities:
            if not getattr(grid.capabilities, capability):
                raise UnsupportedTopologyError(
                    f"{self.name} needs {capability} which {grid.topology.value} grids lack"
                )
        if support is Support.UNMASKED_ONLY and grid.is_masked:
            raise MaskedUnsupportedError(f"{self.name} does not support masked grids")

    def generate(self, grid: Grid, rng: random.Random) -> Grid:
        """Carve a perfect maze into grid.

        Args:
            grid: Unlinked grid; it is modified in place.
            rng: Random source for every random choice.

        Returns:
            The same grid, now linked into a spanning tree (a spanning
            forest if the mask splits the grid into several parts).
        """
        self.check_compatible(grid)
        self._carve(grid, rng)
        logger.debug(
            "generated maze algorithm=%s topology=%s cells=%d links=%d",
            self.name,
            grid.topology.value,
            grid.size(),
            grid.link_count(),
        )
        return grid

    @abstractmethod
    def _carve(self, grid: Grid, rng: random.Random) -> None:
        """Link cells of grid into a maze."""


class ComponentGenerator(BaseMazeGenerator):
    """Generator that grows one tree per connected part of the grid.

    Walk and frontier based algorithms only ever reach cells connected to
    their start, so they are run once for each component.
    """

    compatibility = ALL_TOPOLOGIES

    def _carve(self, grid: Grid, rng: random.Random) -> None:
        components = grid.components()
        if len(components) > 1:
            logger.debug("%s: carving %d separate components", self.name, len(components))
        for cells in components:
            self._carve_component(grid, cells, rng)

    @abstractmethod
    def _carve_component(self, grid: Grid, cells: list[Cell], rng: random.Random) -> None:
        """Link the given connected cells into a spanning tree."""
