"""Concrete builder filters."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from domain.noisemap.value_objects import FilterLevel


class MaskFilter:
    """Shape a noise map with a per-cell weight mask (implements BuilderFilter).

    The mask is indexed [y, x] with weights in [0, 1]:

    - weight 0: CONSTANT, the cell takes `constant_value` and is not sampled
    - weight 1: SOURCE, the sampled value is kept
    - otherwise: FILTER, the sampled value is blended toward `constant_value`

    Cells outside the mask are CONSTANT.
    """

    def __init__(self, mask: ArrayLike, constant_value: float = 0.0) -> None:
        weights = np.array(mask, dtype=np.float32, copy=True)
        if weights.ndim != 2:
            raise ValueError(f"Mask must be 2D, got {weights.ndim}D")
        if np.isnan(weights).any():
            raise ValueError("Mask contains NaN weights")
        if weights.size and (weights.min() < 0.0 or weights.max() > 1.0):
            raise ValueError(
                f"Mask weights must be in [0, 1], got [{weights.min()}, {weights.max()}]"
            )
        weights.flags.writeable = False
        self._mask: NDArray[np.float32] = weights
        self._constant_value = float(constant_value)

    @property
    def constant_value(self) -> float:
        return self._constant_value

    @property
    def mask(self) -> NDArray[np.float32]:
        return self._mask

    def _weight(self, x: int, y: int) -> float:
        height, width = self._mask.shape
        if not (0 <= x < width and 0 <= y < height):
            return 0.0
        return float(self._mask[y, x])

    def classify(self, x: int, y: int) -> FilterLevel:
        weight = self._weight(x, y)
        if weight == 0.0:
            return FilterLevel.CONSTANT
        if weight == 1.0:
            return FilterLevel.SOURCE
        return FilterLevel.FILTER

    def apply(self, x: int, y: int, value: float) -> float:
        weight = self._weight(x, y)
        return self._constant_value + (value - self._constant_value) * weight
