import random

import pytest

from generators import (
    ALGORITHMS,
    Algorithm,
    BinaryTreeGenerator,
    BinaryTreeParams,
    Diagonal,
    EllerGenerator,
    GrowingTreeGenerator,
    GrowingTreeParams,
    RecursiveDivisionGenerator,
    SidewinderGenerator,
    SidewinderParams,
    Support,
    compatibility_table,
    generate_maze,
    get_generator,
)
from grids import (
    CircularGrid,
    HexagonalGrid,
    MaskedUnsupportedError,
    Mask,
    RectangularGrid,
    RectDirection,
    Topology,
    TriangularGrid,
    UnsupportedTopologyError,
)
from mask_loader import parse_text_mask

from conftest import assert_perfect, make_test_grid

SUPPORTED = [
    (algorithm, topology)
    for algorithm, row in compatibility_table().items()
    for topology, support in row.items()
    if support is not None
]
MASK_CAPABLE = [
    (algorithm, topology)
    for algorithm, row in compatibility_table().items()
    for topology, support in row.items()
    if support is Support.FULL and topology is not Topology.CIRCULAR
]
UNSUPPORTED = [
    (algorithm, topology)
    for algorithm, row in compatibility_table().items()
    for topology, support in row.items()
    if support is None
]

RING_MASK = Mask.from_predicate(5, 7, lambda r, c: not (r == 2 and 2 <= c <= 4))


def _id(value):
    return value.value


@pytest.mark.parametrize("algorithm,topology", SUPPORTED, ids=_id)
@pytest.mark.parametrize("seed", [1, 42, 2024])
def test_generates_perfect_maze(algorithm, topology, seed):
    grid = make_test_grid(topology)
    generate_maze(grid, algorithm, seed=seed)
    assert_perfect(grid)
    assert grid.link_count() == grid.size() - 1


@pytest.mark.parametrize("algorithm,topology", MASK_CAPABLE, ids=_id)
def test_generates_perfect_maze_on_masked_grid(algorithm, topology):
    grid = make_test_grid(topology, RING_MASK)
    generate_maze(grid, algorithm, seed=7)
    assert_perfect(grid)
    assert grid.is_masked


@pytest.mark.parametrize("algorithm,topology", MASK_CAPABLE, ids=_id)
def test_disconnected_mask_yields_forest(algorithm, topology):
    mask = Mask.from_predicate(5, 7, lambda r, c: c != 3)
    grid = make_test_grid(topology, mask)
    generate_maze(grid, algorithm, seed=11)
    assert_perfect(grid)
    assert grid.link_count() == grid.size() - len(grid.components())


@pytest.mark.parametrize("algorithm,topology", SUPPORTED, ids=_id)
def test_same_seed_same_maze(algorithm, topology):
    first = generate_maze(make_test_grid(topology), algorithm, seed=99)
    second = generate_maze(make_test_grid(topology), algorithm, rng=random.Random(99))
    assert [(a.coord, b.coord) for a, b in first.links()] == [
        (a.coord, b.coord) for a, b in second.links()
    ]


@pytest.mark.parametrize("algorithm,topology", UNSUPPORTED, ids=_id)
def test_unsupported_topology_leaves_grid_untouched(algorithm, topology):
    grid = make_test_grid(topology)
    with pytest.raises(UnsupportedTopologyError):
        generate_maze(grid, algorithm, seed=1)
    assert grid.link_count() == 0


@pytest.mark.parametrize(
    "algorithm",
    [Algorithm.BINARY_TREE, Algorithm.SIDEWINDER, Algorithm.ELLER, Algorithm.RECURSIVE_DIVISION],
    ids=_id,
)
def test_masked_grid_rejected(algorithm):
    grid = RectangularGrid(5, 7, RING_MASK)
    with pytest.raises(MaskedUnsupportedError):
        generate_maze(grid, algorithm, seed=1)
    assert grid.link_count() == 0


def test_compatibility_table_matches_documented_support():
    table = compatibility_table()
    everywhere = [
        Algorithm.ALDOUS_BRODER,
        Algorithm.GROWING_TREE,
        Algorithm.HUNT_AND_KILL,
        Algorithm.KRUSKAL,
        Algorithm.PRIM,
        Algorithm.RECURSIVE_BACKTRACKER,
        Algorithm.WILSON,
    ]
    for algorithm in everywhere:
        assert set(table[algorithm].values()) == {Support.FULL}
    for algorithm in (Algorithm.BINARY_TREE, Algorithm.RECURSIVE_DIVISION, Algorithm.SIDEWINDER):
        assert table[algorithm] == {
            Topology.RECTANGULAR: Support.UNMASKED_ONLY,
            Topology.CIRCULAR: None,
            Topology.HEXAGONAL: None,
            Topology.TRIANGULAR: None,
        }
    assert table[Algorithm.ELLER] == {
        Topology.RECTANGULAR: Support.UNMASKED_ONLY,
        Topology.CIRCULAR: Support.FULL,
        Topology.HEXAGONAL: Support.UNMASKED_ONLY,
        Topology.TRIANGULAR: None,
    }
    assert list(table) == list(ALGORITHMS)


def test_masked_center_cell_stays_out_of_the_maze():
    grid = RectangularGrid.from_mask(parse_text_mask("ooo\noxo\nooo"))
    generate_maze(grid, "recursive_backtracker", seed=5)
    assert grid.link_count() == 7
    center = grid[(1, 1)]
    assert not center.links
    assert all(center.index not in cell.links for cell in grid.each_cell())
    assert_perfect(grid)


def test_single_cell_grid():
    for algorithm in Algorithm:
        grid = RectangularGrid(1, 1)
        generate_maze(grid, algorithm, seed=3)
        assert grid.link_count() == 0


def test_single_ring_circular_grid():
    grid = CircularGrid(1)
    generate_maze(grid, "eller", seed=3)
    assert grid.link_count() == 0


def test_get_generator_unknown_name():
    with pytest.raises(ValueError, match="Unknown algorithm"):
        get_generator("labyrinth")


def test_get_generator_accepts_enum_and_params():
    generator = get_generator(Algorithm.GROWING_TREE, newest_weight=1.0)
    assert isinstance(generator, GrowingTreeGenerator)
    assert generator.params.newest_weight == 1.0


def test_get_generator_rejects_unknown_param():
    with pytest.raises(TypeError):
        get_generator("kruskal", newest_weight=0.3)


@pytest.mark.parametrize("weight", [-0.1, 1.5])
def test_growing_tree_weight_out_of_range(weight):
    with pytest.raises(ValueError):
        GrowingTreeParams(newest_weight=weight)


@pytest.mark.parametrize("weight", [0.0, 0.5, 1.0])
def test_growing_tree_policies(weight):
    grid = HexagonalGrid(6, 6)
    GrowingTreeGenerator(GrowingTreeParams(newest_weight=weight)).generate(grid, random.Random(8))
    assert_perfect(grid)


def test_prim_weighted_variant():
    grid = TriangularGrid(6, 8)
    generate_maze(grid, "prim", seed=4, weighted=True)
    assert_perfect(grid)
    assert grid.link_count() == grid.size() - 1


@pytest.mark.parametrize("bias", list(Diagonal), ids=_id)
def test_binary_tree_bias_leaves_corridors(bias):
    grid = RectangularGrid(6, 6)
    BinaryTreeGenerator(BinaryTreeParams(bias=bias)).generate(grid, random.Random(2))
    assert_perfect(grid)
    # The row at the vertical border is one unbroken corridor toward the horizontal side
    border_row = 0 if bias.vertical is RectDirection.NORTH else 5
    for col in range(5):
        assert grid.is_linked(grid[(border_row, col)], grid[(border_row, col + 1)])


def test_binary_tree_accepts_bias_name():
    grid = RectangularGrid(4, 4)
    generate_maze(grid, "binary_tree", seed=6, bias="southwest")
    assert_perfect(grid)


@pytest.mark.parametrize("bias", list(Diagonal), ids=_id)
def test_sidewinder_border_row_is_one_corridor(bias):
    grid = RectangularGrid(5, 8)
    SidewinderGenerator(SidewinderParams(bias=bias)).generate(grid, random.Random(10))
    assert_perfect(grid)
    border_row = 0 if bias.vertical is RectDirection.NORTH else 4
    for col in range(7):
        assert grid.is_linked(grid[(border_row, col)], grid[(border_row, col + 1)])


def test_sidewinder_close_chance_validated():
    with pytest.raises(ValueError):
        SidewinderParams(close_chance=2.0)


def test_binary_tree_rejects_circular():
    with pytest.raises(UnsupportedTopologyError):
        BinaryTreeGenerator().generate(CircularGrid(3), random.Random(1))


def test_sidewinder_rejects_masked():
    grid = RectangularGrid(3, 3, Mask([[True, True, True], [True, False, True], [True, True, True]]))
    with pytest.raises(MaskedUnsupportedError):
        SidewinderGenerator().generate(grid, random.Random(1))


def test_recursive_division_four_by_four():
    grid = RectangularGrid(4, 4)
    RecursiveDivisionGenerator().generate(grid, random.Random(12))
    assert grid.link_count() == 15
    assert_perfect(grid)


@pytest.mark.parametrize("shape", [(1, 6), (6, 1), (9, 4), (3, 12)])
def test_recursive_division_shapes(shape):
    grid = RectangularGrid(*shape)
    RecursiveDivisionGenerator().generate(grid, random.Random(5))
    assert_perfect(grid)


@pytest.mark.parametrize(
    "grid_factory_fn",
    [lambda: RectangularGrid(8, 9), lambda: HexagonalGrid(7, 6), lambda: CircularGrid(7)],
    ids=["rectangular", "hexagonal", "circular"],
)
@pytest.mark.parametrize("seed", range(5))
def test_eller_connects_every_row(grid_factory_fn, seed):
    grid = grid_factory_fn()
    EllerGenerator().generate(grid, random.Random(seed))
    assert_perfect(grid)
    assert len(grid.components()) == 1


def test_eller_rejects_triangular():
    with pytest.raises(UnsupportedTopologyError):
        EllerGenerator().generate(TriangularGrid(3, 3), random.Random(1))


def test_generate_returns_same_grid():
    grid = RectangularGrid(3, 3)
    assert generate_maze(grid, "kruskal", seed=1) is grid


@pytest.mark.parametrize("algorithm", ["wilson", "hunt_and_kill"])
@pytest.mark.parametrize("topology", [Topology.RECTANGULAR, Topology.HEXAGONAL], ids=_id)
def test_large_grid_is_perfect(algorithm, topology):
    grid = RectangularGrid(40, 40) if topology is Topology.RECTANGULAR else HexagonalGrid(40, 40)
    generate_maze(grid, algorithm, seed=11)
    assert grid.link_count() == grid.size() - 1
    assert_perfect(grid)


@pytest.mark.parametrize("algorithm", ["wilson", "hunt_and_kill"])
def test_large_split_grid_is_a_forest(algorithm):
    # Two 30x14 halves separated by a masked column
    mask = Mask.from_predicate(30, 29, lambda r, c: c != 14)
    grid = RectangularGrid.from_mask(mask)
    generate_maze(grid, algorithm, seed=8)
    assert len(grid.components()) == 2
    assert_perfect(grid)
