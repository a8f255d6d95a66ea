"""Root pytest configuration for all tests.

Provides small deterministic noise modules and a ready-to-build cylinder
builder. Domain tests construct value objects directly; no I/O is involved.
"""

from __future__ import annotations

import pytest

from domain.noisemap.noise_map import NoiseMap
from domain.noisemap.services import NoiseMapBuilderCylinder


class LinearField:
    """Noise module returning x + 2y + 3z, so every point gives a distinct value."""

    def get_value(self, x: float, y: float, z: float) -> float:
        return x + 2.0 * y + 3.0 * z


class CountingModule:
    """Noise module that records every point it is asked for."""

    def __init__(self, value: float = 0.25) -> None:
        self.value = value
        self.points: list[tuple[float, float, float]] = []

    def get_value(self, x: float, y: float, z: float) -> float:
        self.points.append((x, y, z))
        return self.value


@pytest.fixture
def linear_field() -> LinearField:
    return LinearField()


@pytest.fixture
def counting_module() -> CountingModule:
    return CountingModule()


@pytest.fixture
def noise_map() -> NoiseMap:
    return NoiseMap()


@pytest.fixture
def builder(linear_field: LinearField, noise_map: NoiseMap) -> NoiseMapBuilderCylinder:
    """4x2 builder over the default bounds (angle [-180, 180], height [-10, 10])."""
    b = NoiseMapBuilderCylinder()
    b.source_module = linear_field
    b.noise_map = noise_map
    b.set_size(4, 2)
    return b
