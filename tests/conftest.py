import sys
from collections import deque
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from grids import CircularGrid, Grid, HexagonalGrid, RectangularGrid, Topology, TriangularGrid  # noqa: E402

GRID_CLASSES = {
    Topology.RECTANGULAR: RectangularGrid,
    Topology.HEXAGONAL: HexagonalGrid,
    Topology.TRIANGULAR: TriangularGrid,
}


def make_test_grid(topology: Topology, mask=None) -> Grid:
    """Small grid of each topology; a mask sets the row/column counts."""
    if topology is Topology.CIRCULAR:
        return CircularGrid(5)
    grid_cls = GRID_CLASSES[topology]
    if mask is not None:
        return grid_cls.from_mask(mask)
    return grid_cls(6, 7)


def link_reachable(grid: Grid, start) -> set[int]:
    """Indices reachable from start through links only."""
    seen = {start.index}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for index in cell.links:
            if index not in seen:
                seen.add(index)
                queue.append(grid.cells[index])
    return seen


def assert_perfect(grid: Grid) -> None:
    """Check grid is a spanning forest with one tree per geometric component."""
    for cell in grid.cells:
        if cell.masked:
            assert not cell.links, f"masked cell {cell.coord} has links"
            continue
        neighbor_indices = {index for _, index in cell.neighbors}
        for index in cell.links:
            assert index in neighbor_indices, f"{cell.coord} linked to a non-neighbor"
            assert cell.index in grid.cells[index].links, f"link at {cell.coord} is one-sided"

    components = grid.components()
    assert grid.link_count() == grid.size() - len(components)
    for members in components:
        reached = link_reachable(grid, members[0])
        assert reached == {cell.index for cell in members}
