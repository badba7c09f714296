"""Load grid masks from text files and images.

Text masks hold one line per grid row; 'x' or 'X' marks a position with no
cell and any other character marks a cell. Image masks use one pixel per
position; opaque black pixels mark positions with no cell.
"""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from grids import MalformedMaskError, Mask, Topology, make_grid

logger = logging.getLogger(__name__)

CLOSED_CHARS = frozenset("xX")


def parse_text_mask(text: str) -> Mask:
    """Parse a text mask.

    Args:
        text: Mask rows separated by newlines. Trailing blank lines are ignored.

    Returns:
        Mask with one row per line.

    Raises:
        MalformedMaskError: If there are no rows or the rows differ in width.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MalformedMaskError("Text mask is empty")

    width = len(lines[0])
    for number, line in enumerate(lines, start=1):
        if len(line) != width:
            raise MalformedMaskError(
                f"Mask row {number} has width {len(line)}, expected {width}"
            )

    flags = [[char not in CLOSED_CHARS for char in line] for line in lines]
    return Mask(flags)


def load_text_mask(path: str | Path) -> Mask:
    """Load a text mask file.

    Args:
        path: Path to the text file.

    Returns:
        Parsed mask.
    """
    with open(path, "r", encoding="utf-8") as f:
        mask = parse_text_mask(f.read())
    logger.debug("loaded text mask %s: %r", path, mask)
    return mask


def image_to_flags(img: Image.Image) -> np.ndarray:
    """Convert an image to a boolean cell array.

    Args:
        img: Any PIL image; it is converted to RGBA.

    Returns:
        HxW bool array, False at opaque black pixels.
    """
    arr = np.array(img.convert("RGBA"), dtype=np.uint8)
    closed = np.all(arr == np.array([0, 0, 0, 255], dtype=np.uint8), axis=2)
    return ~closed


def load_image_mask(
    path: str | Path,
    require_connected: bool = False,
    topology: Topology | str = Topology.RECTANGULAR,
) -> Mask:
    """Load an image mask, one pixel per grid position.

    Args:
        path: Path to the image file.
        require_connected: Reject masks whose cells form more than one
            connected area on a grid of the given topology.
        topology: Grid the mask is meant for; decides which cells touch.

    Returns:
        Mask with the image's height as rows and width as columns.

    Raises:
        MalformedMaskError: If require_connected is set and the cells are
            split into several areas.
    """
    with Image.open(path) as img:
        flags = image_to_flags(img)
    mask = Mask(flags)
    logger.debug("loaded image mask %s: %r", path, mask)
    if require_connected:
        check_connected(mask, topology)
    return mask


def count_areas(mask: Mask, topology: Topology | str = Topology.RECTANGULAR) -> int:
    """Number of separate areas the mask's cells form on a grid of topology.

    Raises:
        MalformedMaskError: If the topology does not accept masks.
    """
    topology = Topology(topology)
    if mask.count() == 0:
        return 0
    if topology is Topology.RECTANGULAR:
        _, num_regions = mask.regions()
        return num_regions
    return len(make_grid(topology, mask=mask).components())


def check_connected(mask: Mask, topology: Topology | str = Topology.RECTANGULAR) -> None:
    """Raise MalformedMaskError unless the mask's cells form one area on a grid of topology."""
    num_areas = count_areas(mask, topology)
    if num_areas != 1:
        raise MalformedMaskError(
            f"Mask must form a single connected area on a {Topology(topology).value} grid, "
            f"found {num_areas}"
        )


def load_mask(
    path: str | Path,
    kind: str | None = None,
    require_connected: bool = False,
    topology: Topology | str = Topology.RECTANGULAR,
) -> Mask:
    """Load a mask file, picking the format from kind or the file suffix.

    Args:
        path: Path to the mask file.
        kind: "text" or "image"; inferred from the suffix when None
            (.txt and no suffix mean text, anything else image).
        require_connected: Reject masks with isolated areas.
        topology: Grid the mask is meant for, used by the connectivity check.

    Raises:
        ValueError: If kind is not recognized.
    """
    if kind is None:
        kind = "text" if Path(path).suffix.lower() in ("", ".txt") else "image"
    if kind == "text":
        mask = load_text_mask(path)
        if require_connected:
            check_connected(mask, topology)
        return mask
    if kind == "image":
        return load_image_mask(path, require_connected, topology)
    raise ValueError(f"Unknown mask kind: {kind}. Available: text, image")
