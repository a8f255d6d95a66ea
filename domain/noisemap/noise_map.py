"""In-memory noise map: a resizable float32 grid with a border value."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from domain.noisemap.errors import InvalidDimensionsError


class NoiseMap:
    """Resizable 2D grid of float32 values (implements OutputRaster).

    Storage is a numpy array of shape (height, width), indexed [y, x].
    Reads outside the grid return `border_value`; writes outside the grid
    are ignored.

    Parameters
    ----------
    width, height: int
        Initial size. Both must be >= 0.
    border_value: float
        Value reported for coordinates outside the grid.
    """

    def __init__(self, width: int = 0, height: int = 0, border_value: float = 0.0) -> None:
        self.border_value = float(border_value)
        self._data: NDArray[np.float32] = np.zeros((0, 0), dtype=np.float32)
        self.resize(width, height)

    # -----------------------------------------------------------------------
    # Size
    # -----------------------------------------------------------------------
    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width), numpy order."""
        return (self.height, self.width)

    def resize(self, width: int, height: int) -> None:
        """Replace storage with a zero-filled width x height grid."""
        if width < 0 or height < 0:
            raise InvalidDimensionsError(width, height)
        self._data = np.zeros((height, width), dtype=np.float32)

    # -----------------------------------------------------------------------
    # Cell access
    # -----------------------------------------------------------------------
    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_value(self, x: int, y: int) -> float:
        if not self._contains(x, y):
            return self.border_value
        return float(self._data[y, x])

    def set_value(self, x: int, y: int, value: float) -> None:
        if self._contains(x, y):
            self._data[y, x] = value

    def clear(self, value: float = 0.0) -> None:
        """Set every cell to `value`."""
        self._data.fill(value)

    # -----------------------------------------------------------------------
    # Views and statistics
    # -----------------------------------------------------------------------
    @property
    def data(self) -> NDArray[np.float32]:
        """Read-only view of the grid. Mutate through set_value()."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def min_max(self) -> tuple[float, float]:
        """Return (min, max) over all cells, or the border value twice if empty."""
        if self._data.size == 0:
            return (self.border_value, self.border_value)
        return (float(self._data.min()), float(self._data.max()))

    def __repr__(self) -> str:
        return (
            f"NoiseMap(width={self.width}, height={self.height}, "
            f"border_value={self.border_value})"
        )
