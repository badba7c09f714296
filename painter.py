"""Raster rendering of mazes for all four topologies.

Every cell is turned into a filled outline plus a list of edges; an edge
gets a wall stroke unless the cell is linked to the cell on the other side.
Shared walls are therefore stroked from both sides, which draws the same
line twice and keeps the rule local to one cell.
"""

from abc import ABC, abstractmethod
import logging
import math
from pathlib import Path
from typing import Callable

from PIL import Image, ImageDraw

from grids import (
    Cell,
    CircDirection,
    Grid,
    HexDirection,
    RectDirection,
    Topology,
    TriDirection,
)
from palettes import Theme, get_theme

logger = logging.getLogger(__name__)

Point = tuple[float, float]
# (polyline, cell on the other side or None)
Edge = tuple[list[Point], Cell | None]

SQRT_3 = math.sqrt(3)
# Largest angle covered by one straight segment of an arc
ARC_STEP = math.pi / 36


def _arc(cx: float, cy: float, radius: float, start: float, end: float) -> list[Point]:
    steps = max(1, math.ceil((end - start) / ARC_STEP))
    return [
        (cx + radius * math.cos(start + (end - start) * i / steps),
         cy + radius * math.sin(start + (end - start) * i / steps))
        for i in range(steps + 1)
    ]


class _Layout(ABC):
    """Picture geometry of one grid."""

    def __init__(self, grid: Grid, cell_size: int, pad: float) -> None:
        self.grid = grid
        self.cell_size = cell_size
        self.pad = pad

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Picture (width, height) in pixels."""

    @abstractmethod
    def outline(self, cell: Cell) -> list[Point]:
        """Polygon covering the cell."""

    @abstractmethod
    def edges(self, cell: Cell) -> list[Edge]:
        """Every edge of the cell with the cell across it."""


class _RectLayout(_Layout):
    def size(self) -> tuple[int, int]:
        s = self.cell_size
        return (
            math.ceil(self.grid.cols * s + 2 * self.pad),
            math.ceil(self.grid.rows * s + 2 * self.pad),
        )

    def _corners(self, cell: Cell) -> tuple[float, float, float, float]:
        s = self.cell_size
        x0 = self.pad + cell.col * s
        y0 = self.pad + cell.row * s
        return x0, y0, x0 + s, y0 + s

    def outline(self, cell: Cell) -> list[Point]:
        x0, y0, x1, y1 = self._corners(cell)
        return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]

    def edges(self, cell: Cell) -> list[Edge]:
        x0, y0, x1, y1 = self._corners(cell)
        sides = {
            RectDirection.NORTH: [(x0, y0), (x1, y0)],
            RectDirection.EAST: [(x1, y0), (x1, y1)],
            RectDirection.SOUTH: [(x0, y1), (x1, y1)],
            RectDirection.WEST: [(x0, y0), (x0, y1)],
        }
        return [(points, self.grid.neighbor(cell, d)) for d, points in sides.items()]


# Vertex angles (degrees, y axis down) bounding each hexagon edge
_HEX_EDGE_ANGLES = {
    HexDirection.NORTH: (240, 300),
    HexDirection.NORTHEAST: (300, 360),
    HexDirection.SOUTHEAST: (0, 60),
    HexDirection.SOUTH: (60, 120),
    HexDirection.SOUTHWEST: (120, 180),
    HexDirection.NORTHWEST: (180, 240),
}


class _HexLayout(_Layout):
    @property
    def radius(self) -> float:
        return self.cell_size / 2

    def size(self) -> tuple[int, int]:
        r = self.radius
        cols, rows = self.grid.cols, self.grid.rows
        shift = 0.5 if cols > 1 else 0.0
        return (
            math.ceil(r * (1.5 * cols + 0.5) + 2 * self.pad),
            math.ceil(SQRT_3 * r * (rows + shift) + 2 * self.pad),
        )

    def _center(self, cell: Cell) -> Point:
        r = self.radius
        cx = self.pad + r + cell.col * 1.5 * r
        cy = self.pad + (cell.row + 0.5 + 0.5 * (cell.col % 2)) * SQRT_3 * r
        return cx, cy

    def _vertex(self, center: Point, degrees: int) -> Point:
        angle = math.radians(degrees)
        return (center[0] + self.radius * math.cos(angle),
                center[1] + self.radius * math.sin(angle))

    def outline(self, cell: Cell) -> list[Point]:
        center = self._center(cell)
        return [self._vertex(center, degrees) for degrees in range(0, 360, 60)]

    def edges(self, cell: Cell) -> list[Edge]:
        center = self._center(cell)
        return [
            ([self._vertex(center, start), self._vertex(center, end)],
             self.grid.neighbor(cell, direction))
            for direction, (start, end) in _HEX_EDGE_ANGLES.items()
        ]


class _TriLayout(_Layout):
    @property
    def half_width(self) -> float:
        return self.cell_size / SQRT_3

    def size(self) -> tuple[int, int]:
        return (
            math.ceil((self.grid.cols + 1) * self.half_width + 2 * self.pad),
            math.ceil(self.grid.rows * self.cell_size + 2 * self.pad),
        )

    def _vertices(self, cell: Cell) -> tuple[Point, Point, Point]:
        h = self.half_width
        x = self.pad + (cell.col + 1) * h
        top = self.pad + cell.row * self.cell_size
        bottom = top + self.cell_size
        if cell.upward:
            return (x, top), (x - h, bottom), (x + h, bottom)
        return (x - h, top), (x + h, top), (x, bottom)

    def outline(self, cell: Cell) -> list[Point]:
        return list(self._vertices(cell))

    def edges(self, cell: Cell) -> list[Edge]:
        a, b, c = self._vertices(cell)
        if cell.upward:
            sides = {
                TriDirection.NORTHWEST: [a, b],
                TriDirection.NORTHEAST: [a, c],
                TriDirection.SOUTH: [b, c],
            }
        else:
            sides = {
                TriDirection.NORTH: [a, b],
                TriDirection.SOUTHWEST: [a, c],
                TriDirection.SOUTHEAST: [b, c],
            }
        return [(points, self.grid.neighbor(cell, d)) for d, points in sides.items()]


class _CircLayout(_Layout):
    @property
    def center(self) -> float:
        return self.pad + self.grid.rings * self.cell_size

    def size(self) -> tuple[int, int]:
        side = math.ceil(2 * self.center)
        return side, side

    def _span(self, ring: int, sector: int) -> tuple[float, float]:
        theta = 2 * math.pi / self.grid.ring_size(ring)
        return sector * theta, (sector + 1) * theta

    def outline(self, cell: Cell) -> list[Point]:
        c, w = self.center, self.cell_size
        ring, sector = cell.coord
        if ring == 0:
            return _arc(c, c, w, 0, 2 * math.pi)[:-1]
        start, end = self._span(ring, sector)
        return _arc(c, c, (ring + 1) * w, start, end) + _arc(c, c, ring * w, start, end)[::-1]

    def edges(self, cell: Cell) -> list[Edge]:
        grid, c, w = self.grid, self.center, self.cell_size
        ring, sector = cell.coord
        start, end = self._span(ring, sector)
        inner, outer = ring * w, (ring + 1) * w
        edges: list[Edge] = []

        if ring > 0:
            edges.append((_arc(c, c, inner, start, end), grid.neighbor(cell, CircDirection.INWARD)))
            for angle, direction in ((start, CircDirection.COUNTERCLOCKWISE),
                                     (end, CircDirection.CLOCKWISE)):
                points = [(c + inner * math.cos(angle), c + inner * math.sin(angle)),
                          (c + outer * math.cos(angle), c + outer * math.sin(angle))]
                edges.append((points, grid.neighbor(cell, direction)))

        children = grid.row_below(cell)
        if not children:
            edges.append((_arc(c, c, outer, start, end), None))
        for child in children:
            child_start, child_end = self._span(*child.coord)
            edges.append((_arc(c, c, outer, child_start, child_end), child))
        return edges


_LAYOUTS: dict[Topology, Callable[[Grid, int, float], _Layout]] = {
    Topology.RECTANGULAR: _RectLayout,
    Topology.HEXAGONAL: _HexLayout,
    Topology.TRIANGULAR: _TriLayout,
    Topology.CIRCULAR: _CircLayout,
}


def has_wall(grid: Grid, cell: Cell, other: Cell | None) -> bool:
    """True if a wall separates cell from other (None means the outer border)."""
    return other is None or other.masked or not grid.is_linked(cell, other)


def paint_maze(
    grid: Grid,
    cell_size: int = 20,
    wall_thickness: int = 2,
    palette: str | Theme = "Classic",
) -> Image.Image:
    """Draw a maze.

    Args:
        grid: Linked grid of any topology.
        cell_size: Side of a square, height of a triangle, width of a
            hexagon or ring, in pixels.
        wall_thickness: Wall stroke width in pixels.
        palette: Theme name or Theme.

    Returns:
        RGB PIL Image.

    Raises:
        ValueError: If a size is not positive or the palette is unknown.
    """
    if cell_size <= 0 or wall_thickness <= 0:
        raise ValueError(
            f"cell_size and wall_thickness must be positive, got {cell_size}, {wall_thickness}"
        )
    theme = get_theme(palette) if isinstance(palette, str) else palette
    layout = _LAYOUTS[grid.topology](grid, cell_size, float(wall_thickness))

    img = Image.new("RGB", layout.size(), theme.background)
    draw = ImageDraw.Draw(img)

    for cell in grid.cells:
        fill = theme.masked if cell.masked else theme.cell
        draw.polygon(layout.outline(cell), fill=fill)

    for cell in grid.each_cell():
        for points, other in layout.edges(cell):
            if has_wall(grid, cell, other):
                draw.line(points, fill=theme.wall, width=wall_thickness, joint="curve")

    logger.debug("painted %r at %dx%d", grid, img.width, img.height)
    return img


def save_picture(img: Image.Image, path: str | Path) -> Path:
    """Save a maze picture, creating parent directories.

    Args:
        img: Picture from paint_maze.
        path: Output path; the format follows the suffix (PNG normally).

    Returns:
        The output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    img.save(path)
    logger.info("saved maze picture to %s", path)
    return path
