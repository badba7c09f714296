"""Colour themes for maze pictures.

Each theme names the colours the painter uses: the page background, the
wall strokes, the fill of open cells and the fill of masked-out positions.
"""

import random
from collections import OrderedDict
from dataclasses import dataclass

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Theme:
    """Colours for one maze picture."""

    background: RGB
    wall: RGB
    cell: RGB
    masked: RGB


THEMES: OrderedDict[str, Theme] = OrderedDict()

THEMES["Classic"] = Theme(
    background=(255, 255, 255),   # White
    wall=(0, 0, 0),               # Black
    cell=(255, 255, 255),         # White
    masked=(200, 200, 200),       # Light gray
)

THEMES["Blueprint"] = Theme(
    background=(16, 52, 99),      # Navy
    wall=(236, 240, 241),         # Off white
    cell=(36, 113, 163),          # Blue
    masked=(16, 52, 99),          # Navy
)

THEMES["Parchment"] = Theme(
    background=(245, 232, 199),   # Parchment
    wall=(92, 64, 51),            # Sepia
    cell=(250, 240, 215),         # Light parchment
    masked=(183, 149, 11),        # Dark yellow
)

THEMES["Pastel"] = Theme(
    background=(255, 255, 255),   # White
    wall=(72, 61, 139),           # Dark slate blue
    cell=(214, 214, 255),         # Pale blue
    masked=(255, 214, 214),       # Blush
)

THEMES["Neon"] = Theme(
    background=(10, 10, 20),      # Near black
    wall=(57, 255, 20),           # Neon green
    cell=(20, 20, 35),            # Dark blue-black
    masked=(255, 16, 240),        # Neon magenta
)

THEMES["Forest"] = Theme(
    background=(220, 230, 210),   # Sage pastel
    wall=(30, 132, 73),           # Dark green
    cell=(236, 240, 230),         # Pale sage
    masked=(118, 84, 53),         # Bark
)

THEME_NAMES: list[str] = list(THEMES.keys())


def get_theme(name: str, rng: random.Random | None = None) -> Theme:
    """Return the named theme.

    Args:
        name: Theme name, or "Random" to pick one at random.
        rng: Random source for "Random"; the module generator when omitted.

    Returns:
        The theme.

    Raises:
        ValueError: If name is not recognized and is not "Random".
    """
    if name == "Random":
        name = (rng or random).choice(THEME_NAMES)

    if name not in THEMES:
        raise ValueError(f"Unknown palette: {name!r}. Available: {THEME_NAMES}")

    return THEMES[name]
