"""Maze generation settings.

Groups everything needed to produce a maze (grid shape, algorithm and its
options, rendering) and reads it from a JSON config file.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any
import json
import random

from generators import Algorithm

# Scale presets: name -> cell size in pixels
SCALE_PRESETS = {
    "Small": 10,
    "Medium": 20,
    "Large": 32,
    "Extra Large": 48,
}

# Algorithm options: settings field -> algorithms that accept it
ALGORITHM_OPTIONS = {
    "bias": (Algorithm.BINARY_TREE, Algorithm.SIDEWINDER),
    "newest_weight": (Algorithm.GROWING_TREE,),
    "weighted": (Algorithm.PRIM,),
    "close_chance": (Algorithm.SIDEWINDER,),
    "join_chance": (Algorithm.ELLER,),
    "extra_drop_chance": (Algorithm.ELLER,),
}


@dataclass
class MazeSettings:
    """Settings for maze generation."""

    topology: str = "rectangular"
    rows: int = 10
    cols: int = 10
    rings: int = 8
    algorithm: str = "recursive_backtracker"
    seed: int | None = None  # None = random
    mask_path: str | None = None
    mask_kind: str | None = None  # "text" or "image"; None = by file suffix
    require_connected: bool = False  # Reject masks that split the grid
    # Algorithm options
    bias: str = "northeast"
    newest_weight: float = 0.5
    weighted: bool = False
    close_chance: float = 0.5
    join_chance: float = 0.5
    extra_drop_chance: float = 0.33
    # Rendering
    scale: str = "Medium"
    wall_thickness: int = 2
    palette: str = "Classic"

    @classmethod
    def from_file(cls, path: str | Path) -> "MazeSettings":
        """Load settings from a JSON file; missing keys keep their defaults.

        Raises:
            ValueError: If the file holds unknown keys or is not a JSON object.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must hold a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MazeSettings":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")
        return cls(**data)

    def update(self, **overrides: Any) -> None:
        """Replace fields with the overrides that are not None."""
        for name, value in overrides.items():
            if value is not None:
                if not hasattr(self, name):
                    raise ValueError(f"Unknown setting: {name}")
                setattr(self, name, value)

    def get_cell_size(self) -> int:
        """Get cell size in pixels based on scale.

        Raises:
            ValueError: If scale is not a preset name.
        """
        if self.scale not in SCALE_PRESETS:
            raise ValueError(
                f"Unknown scale: {self.scale!r}. Available: {list(SCALE_PRESETS)}"
            )
        return SCALE_PRESETS[self.scale]

    def to_generator_kwargs(self) -> dict[str, Any]:
        """Algorithm options accepted by the chosen algorithm."""
        algorithm = Algorithm(self.algorithm)
        return {
            name: getattr(self, name)
            for name, algorithms in ALGORITHM_OPTIONS.items()
            if algorithm in algorithms
        }

    def resolve_seed(self) -> int:
        """Return the seed, drawing and keeping a fresh one when none is set."""
        if self.seed is None:
            self.seed = random.randint(0, 2**31)
        return self.seed
