"""Domain Port(s) for noise map builders.

Defines the interfaces (Protocols) of the collaborators a builder consumes.
The builder holds references to them but owns none of them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .value_objects import FilterLevel

# Invoked once per completed row with the row index.
ProgressCallback = Callable[[int], None]


class OutputRaster(Protocol):
    """Port for the destination 2D float grid.

    See `domain.noisemap.noise_map.NoiseMap` for the in-memory implementation.
    """

    def resize(self, width: int, height: int) -> None:
        """Replace backing storage with a width x height grid; prior values are lost."""
        ...

    def set_value(self, x: int, y: int, value: float) -> None:
        """Overwrite the cell at column x, row y."""
        ...


class BuilderFilter(Protocol):
    """Port for per-cell overrides applied while building."""

    @property
    def constant_value(self) -> float:
        """Value written to cells classified as CONSTANT."""
        ...

    def classify(self, x: int, y: int) -> FilterLevel:
        """Return how the cell at (x, y) is to be produced."""
        ...

    def apply(self, x: int, y: int, value: float) -> float:
        """Post-process a sampled value for a cell classified as FILTER."""
        ...
