"""Noise Map Bounded Context - Value Objects.

Immutable data structures describing what a builder samples.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from enum import Enum

import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ---------------------------------------------------------------------------
# Default Bounds
# ---------------------------------------------------------------------------
DEFAULT_ANGLE_BOUNDS = (-180.0, 180.0)  # degrees, one full turn
DEFAULT_HEIGHT_BOUNDS = (-10.0, 10.0)  # units along the cylinder axis


def to_float32(value: float) -> float:
    """Round a bound to the nearest float32, the precision builders sample in.

    Values beyond the float32 range become +/-inf.
    """
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def axis_is_ordered(lower: float, upper: float) -> bool:
    """Return True if lower < upper after rounding to float32 and the extent is finite.

    Written as a positive comparison so that NaN bounds are rejected.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        lower32 = np.float32(lower)
        upper32 = np.float32(upper)
        extent = upper32 - lower32
    return bool(lower32 < upper32 and np.isfinite(extent))


def bounds_are_ordered(
    lower_angle: float, upper_angle: float, lower_height: float, upper_height: float
) -> bool:
    """Return True if both axes pass axis_is_ordered()."""
    return axis_is_ordered(lower_angle, upper_angle) and axis_is_ordered(
        lower_height, upper_height
    )


class CylinderBounds(BaseModel):
    """Rectangular region of the (angle, height) parameter space (Value Object).

    Invariants:
        CB-1: lower_angle < upper_angle
        CB-2: lower_height < upper_height
        CB-3: every bound is stored rounded to float32
        CB-4: both extents are finite in float32

    Angles are in degrees; heights are in linear units along the cylinder axis.
    """

    lower_angle: float = DEFAULT_ANGLE_BOUNDS[0]
    upper_angle: float = DEFAULT_ANGLE_BOUNDS[1]
    lower_height: float = DEFAULT_HEIGHT_BOUNDS[0]
    upper_height: float = DEFAULT_HEIGHT_BOUNDS[1]

    model_config = ConfigDict(frozen=True)

    @field_validator("lower_angle", "upper_angle", "lower_height", "upper_height")
    @classmethod
    def round_to_float32(cls, value: float) -> float:
        return to_float32(value)

    @model_validator(mode="after")
    def validate_ordering(self) -> "CylinderBounds":
        if not axis_is_ordered(self.lower_angle, self.upper_angle):
            raise ValueError(
                f"Invalid angle ordering: lower_angle={self.lower_angle} "
                f">= upper_angle={self.upper_angle} or extent not finite in float32"
            )
        if not axis_is_ordered(self.lower_height, self.upper_height):
            raise ValueError(
                f"Invalid height ordering: lower_height={self.lower_height} "
                f">= upper_height={self.upper_height} or extent not finite in float32"
            )
        return self

    @property
    def angle_extent(self) -> float:
        return self.upper_angle - self.lower_angle

    @property
    def height_extent(self) -> float:
        return self.upper_height - self.lower_height

    def is_ordered(self) -> bool:
        """Re-check CB-1, CB-2 and CB-4 in float32.

        Instances created through ``model_construct`` skip validation, so the
        builder re-checks before sampling.
        """
        return bounds_are_ordered(
            self.lower_angle, self.upper_angle, self.lower_height, self.upper_height
        )


class FilterLevel(Enum):
    """Per-cell classification returned by a builder filter.

    SOURCE: sample the source module normally.
    CONSTANT: skip sampling and write the filter's constant value.
    FILTER: sample, then pass the value through the filter.
    """

    SOURCE = "source"
    CONSTANT = "constant"
    FILTER = "filter"
