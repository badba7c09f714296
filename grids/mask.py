"""Boolean cell masks for grids.

A mask marks which (row, col) positions of a row/column grid hold a cell.
Positions that are off in the mask become masked-out cells: they keep their
place in the grid but no algorithm may visit, link or count them.
"""

from typing import Callable, Sequence

import numpy as np
from scipy.ndimage import label

from .errors import MalformedMaskError

# Characters used by to_rows() and by the text mask format.
OPEN_CHAR = "o"
CLOSED_CHAR = "x"

FOUR_CONNECTED = np.array([[0, 1, 0], [1, 1, 1], [0, 1, 0]])


class Mask:
    """Immutable boolean lookup over (row, col) coordinates."""

    def __init__(self, flags: np.ndarray | Sequence[Sequence[bool]]) -> None:
        """Initialize mask from a 2D boolean array.

        Args:
            flags: HxW array, True where a cell exists.

        Raises:
            MalformedMaskError: If flags is not a non-empty 2D array.
        """
        arr = np.array(flags, dtype=bool)
        if arr.ndim != 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
            raise MalformedMaskError(
                f"Mask must be a non-empty 2D array, got shape {arr.shape}"
            )
        arr.setflags(write=False)
        self._flags = arr

    @classmethod
    def full(cls, rows: int, cols: int) -> "Mask":
        """Create a mask where every position is a cell."""
        return cls(np.ones((rows, cols), dtype=bool))

    @classmethod
    def from_predicate(
        cls, rows: int, cols: int, predicate: Callable[[int, int], bool]
    ) -> "Mask":
        """Create a mask by evaluating predicate(row, col) at every position."""
        flags = [[bool(predicate(r, c)) for c in range(cols)] for r in range(rows)]
        return cls(flags)

    @property
    def shape(self) -> tuple[int, int]:
        return (int(self._flags.shape[0]), int(self._flags.shape[1]))

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    @property
    def flags(self) -> np.ndarray:
        """Read-only view of the underlying boolean array."""
        return self._flags

    def __call__(self, row: int, col: int) -> bool:
        """Return True if (row, col) is in bounds and holds a cell."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return bool(self._flags[row, col])
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mask):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._flags, other._flags))

    def __repr__(self) -> str:
        return f"Mask(rows={self.rows}, cols={self.cols}, cells={self.count()})"

    def count(self) -> int:
        """Number of positions holding a cell."""
        return int(np.count_nonzero(self._flags))

    def is_full(self) -> bool:
        return bool(self._flags.all())

    def regions(self) -> tuple[np.ndarray, int]:
        """Label groups of cells that touch on a rectangular grid (4-connected).

        Returns:
            Tuple of (HxW label array with 0 for no cell, number of regions).
        """
        labels, num_regions = label(self._flags, structure=FOUR_CONNECTED)
        return labels, int(num_regions)

    def to_rows(self) -> list[str]:
        """Encode the mask as text rows ('o' = cell, 'x' = no cell)."""
        return [
            "".join(OPEN_CHAR if flag else CLOSED_CHAR for flag in row)
            for row in self._flags
        ]
