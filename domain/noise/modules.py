"""Noise Bounded Context - Concrete Modules.

Deterministic generators and combinators implementing the NoiseModule port.
Each module is an immutable Pydantic model; equal parameters give equal
fields everywhere.

Generators:
    Const, Checkerboard, Cylinders, Spheres
Combinators:
    ScaleBias
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Output range of the pattern generators below
MIN_PATTERN_VALUE = -1.0
MAX_PATTERN_VALUE = 1.0


class Const(BaseModel):
    """Outputs the same value at every point."""

    value: float = 0.0

    model_config = ConfigDict(frozen=True)

    def get_value(self, x: float, y: float, z: float) -> float:
        return self.value


class Checkerboard(BaseModel):
    """Unit cubes alternating between -1.0 and +1.0.

    The unit cube [0, 1) x [0, 1) x [0, 1) outputs +1.0.
    """

    model_config = ConfigDict(frozen=True)

    def get_value(self, x: float, y: float, z: float) -> float:
        ix = math.floor(x)
        iy = math.floor(y)
        iz = math.floor(z)
        if (ix ^ iy ^ iz) & 1:
            return MIN_PATTERN_VALUE
        return MAX_PATTERN_VALUE


class Cylinders(BaseModel):
    """Concentric cylinders around the y axis.

    Values are +1.0 on each cylinder surface and fall to -1.0 halfway between
    two neighbouring surfaces. `frequency` is the number of surfaces per unit.
    """

    frequency: float = Field(default=1.0, gt=0)

    model_config = ConfigDict(frozen=True)

    def get_value(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        z *= self.frequency
        return _ring_value(math.sqrt(x * x + z * z))


class Spheres(BaseModel):
    """Concentric spheres around the origin.

    Same profile as Cylinders, measured from the origin instead of the y axis.
    """

    frequency: float = Field(default=1.0, gt=0)

    model_config = ConfigDict(frozen=True)

    def get_value(self, x: float, y: float, z: float) -> float:
        x *= self.frequency
        y *= self.frequency
        z *= self.frequency
        return _ring_value(math.sqrt(x * x + y * y + z * z))


def _ring_value(distance: float) -> float:
    # Distance to the nearest surface, then mapped to [-1, 1]
    dist_from_smaller = distance - math.floor(distance)
    dist_from_larger = 1.0 - dist_from_smaller
    nearest = min(dist_from_smaller, dist_from_larger)
    return MAX_PATTERN_VALUE - nearest * 4.0


class ScaleBias(BaseModel):
    """Applies `value * scale + bias` to the output of a source module."""

    source: Any
    scale: float = 1.0
    bias: float = 0.0

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("source")
    @classmethod
    def validate_source(cls, value: Any) -> Any:
        if not callable(getattr(value, "get_value", None)):
            raise ValueError(
                f"source must implement get_value(x, y, z), got {type(value).__name__}"
            )
        return value

    def get_value(self, x: float, y: float, z: float) -> float:
        return self.source.get_value(x, y, z) * self.scale + self.bias
