"""Render rectangular mazes as text with ASCII or Unicode box drawing."""

from dataclasses import dataclass

from grids import RectangularGrid, Topology, UnsupportedTopologyError


@dataclass(frozen=True)
class BoxCharset:
    """Characters used to draw a maze.

    corners maps (west, north, east, south) wall arms to the corner glyph.
    """

    horz_wall: str
    horz_empty: str
    vert_wall: str
    vert_empty: str
    corners: dict[tuple[bool, bool, bool, bool], str]

    def corner(self, west: bool, north: bool, east: bool, south: bool) -> str:
        return self.corners[(west, north, east, south)]


def _ascii_corners() -> dict[tuple[bool, bool, bool, bool], str]:
    corners = {}
    for key in range(16):
        arms = tuple(bool(key & (1 << bit)) for bit in range(4))
        corners[arms] = "+" if any(arms) else " "
    return corners


ASCII = BoxCharset(
    horz_wall="---",
    horz_empty="   ",
    vert_wall="|",
    vert_empty=" ",
    corners=_ascii_corners(),
)

UNICODE = BoxCharset(
    horz_wall="━",
    horz_empty=" ",
    vert_wall="┃",
    vert_empty=" ",
    corners={
        (False, False, False, False): " ",
        (True, False, False, False): "╸",
        (False, True, False, False): "╹",
        (False, False, True, False): "╺",
        (False, False, False, True): "╻",
        (True, False, True, False): "━",
        (False, True, False, True): "┃",
        (True, True, False, False): "┛",
        (False, True, True, False): "┗",
        (True, False, False, True): "┓",
        (False, False, True, True): "┏",
        (True, True, False, True): "┫",
        (True, True, True, False): "┻",
        (False, True, True, True): "┣",
        (True, False, True, True): "┳",
        (True, True, True, True): "╋",
    },
)

CHARSETS = {
    "ascii": ASCII,
    "unicode": UNICODE,
}


class _Walls:
    """Wall lookup for a rectangular grid, masked positions included."""

    def __init__(self, grid: RectangularGrid) -> None:
        self.grid = grid

    def _active(self, row: int, col: int) -> bool:
        return (row, col) in self.grid and not self.grid[(row, col)].masked

    def _between(self, a: tuple[int, int], b: tuple[int, int]) -> bool:
        a_active, b_active = self._active(*a), self._active(*b)
        if a_active and b_active:
            return not self.grid.is_linked(self.grid[a], self.grid[b])
        return a_active != b_active

    def horizontal(self, row: int, col: int) -> bool:
        """Wall along the top edge of position (row, col)."""
        return self._between((row - 1, col), (row, col))

    def vertical(self, row: int, col: int) -> bool:
        """Wall along the left edge of position (row, col)."""
        return self._between((row, col - 1), (row, col))


def render_text(grid: RectangularGrid, charset: str = "ascii") -> str:
    """Render a rectangular maze as text.

    Args:
        grid: Rectangular grid, masked or not.
        charset: "ascii" or "unicode".

    Returns:
        Multi-line string, one line per wall row and one per cell row.

    Raises:
        UnsupportedTopologyError: If grid is not rectangular.
        ValueError: If charset is not recognized.
    """
    if grid.topology is not Topology.RECTANGULAR:
        raise UnsupportedTopologyError(
            f"Text rendering needs a rectangular grid, got {grid.topology.value}"
        )
    if charset not in CHARSETS:
        available = ", ".join(CHARSETS)
        raise ValueError(f"Unknown charset: {charset}. Available: {available}")
    box = CHARSETS[charset]
    walls = _Walls(grid)
    rows, cols = grid.rows, grid.cols

    def corner(row: int, col: int) -> str:
        return box.corner(
            col > 0 and walls.horizontal(row, col - 1),
            row > 0 and walls.vertical(row - 1, col),
            col < cols and walls.horizontal(row, col),
            row < rows and walls.vertical(row, col),
        )

    lines = []
    for row in range(rows + 1):
        ceiling = []
        for col in range(cols + 1):
            ceiling.append(corner(row, col))
            if col < cols:
                ceiling.append(box.horz_wall if walls.horizontal(row, col) else box.horz_empty)
        lines.append("".join(ceiling).rstrip())
        if row == rows:
            break

        body = []
        for col in range(cols + 1):
            body.append(box.vert_wall if walls.vertical(row, col) else box.vert_empty)
            if col < cols:
                body.append(box.horz_empty)
        lines.append("".join(body).rstrip())
    return "\n".join(lines)
