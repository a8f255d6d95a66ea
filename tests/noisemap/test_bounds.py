"""Tests for cylinder bounds: CylinderBounds value object and set_bounds()."""

from __future__ import annotations

import math

import numpy as np
import pytest

from domain.noisemap.errors import InvalidBoundsError, NoiseMapError
from domain.noisemap.services import NoiseMapBuilderCylinder
from domain.noisemap.value_objects import (
    DEFAULT_ANGLE_BOUNDS,
    DEFAULT_HEIGHT_BOUNDS,
    CylinderBounds,
)


# ===========================================================================
# Defaults
# ===========================================================================
def test_builder_default_bounds():
    builder = NoiseMapBuilderCylinder()

    assert builder.lower_angle_bound == -180.0
    assert builder.upper_angle_bound == 180.0
    assert builder.lower_height_bound == -10.0
    assert builder.upper_height_bound == 10.0
    assert (builder.lower_angle_bound, builder.upper_angle_bound) == DEFAULT_ANGLE_BOUNDS
    assert (
        builder.lower_height_bound,
        builder.upper_height_bound,
    ) == DEFAULT_HEIGHT_BOUNDS


def test_builder_accepts_bounds_in_constructor():
    bounds = CylinderBounds(
        lower_angle=0.0, upper_angle=90.0, lower_height=1.0, upper_height=2.0
    )

    builder = NoiseMapBuilderCylinder(bounds)

    assert builder.bounds == bounds
    assert builder.upper_angle_bound == 90.0


# ===========================================================================
# set_bounds: valid input
# ===========================================================================
@pytest.mark.parametrize(
    "la, ua, lh, uh",
    [
        (-180.0, 180.0, -10.0, 10.0),
        (0.0, 0.0009765625, -0.5, 0.0),
        (-720.0, 720.0, 100.0, 1000.5),
        (12.25, 12.5, -3.75, -3.5),
    ],
)
def test_set_bounds_stores_exact_values(la, ua, lh, uh):
    builder = NoiseMapBuilderCylinder()

    builder.set_bounds(la, ua, lh, uh)

    assert builder.lower_angle_bound == la
    assert builder.upper_angle_bound == ua
    assert builder.lower_height_bound == lh
    assert builder.upper_height_bound == uh


def test_set_bounds_replaces_value_object():
    builder = NoiseMapBuilderCylinder()
    before = builder.bounds

    builder.set_bounds(-90.0, 90.0, -1.0, 1.0)

    assert builder.bounds is not before
    assert builder.bounds.angle_extent == 180.0
    assert builder.bounds.height_extent == 2.0


# ===========================================================================
# set_bounds: invalid input leaves previous bounds untouched
# ===========================================================================
@pytest.mark.parametrize(
    "la, ua, lh, uh",
    [
        (10.0, 10.0, -1.0, 1.0),  # equal angles
        (20.0, 10.0, -1.0, 1.0),  # reversed angles
        (-10.0, 10.0, 5.0, 5.0),  # equal heights
        (-10.0, 10.0, 6.0, 5.0),  # reversed heights
        (20.0, 10.0, 6.0, 5.0),  # both reversed
        (math.nan, 10.0, -1.0, 1.0),  # NaN angle
        (-10.0, 10.0, -1.0, math.nan),  # NaN height
        (-1e39, 1e39, -1.0, 1.0),  # beyond float32 range
        (-1.0, 1.0, -math.inf, 1.0),  # infinite height
        (-3e38, 3e38, -1.0, 1.0),  # float32 extent overflows
        (-1.0, 1.0, 1.0, 1.0 + 1e-12),  # equal once rounded to float32
    ],
)
def test_set_bounds_rejects_unordered_bounds(la, ua, lh, uh):
    builder = NoiseMapBuilderCylinder()
    builder.set_bounds(-45.0, 45.0, -2.0, 2.0)

    with pytest.raises(InvalidBoundsError):
        builder.set_bounds(la, ua, lh, uh)

    assert builder.lower_angle_bound == -45.0
    assert builder.upper_angle_bound == 45.0
    assert builder.lower_height_bound == -2.0
    assert builder.upper_height_bound == 2.0


def test_set_bounds_stores_float32_rounded_values():
    builder = NoiseMapBuilderCylinder()

    builder.set_bounds(-0.1, 0.1, 1.0, 1.0 + 1e-6)

    assert builder.lower_angle_bound == float(np.float32(-0.1))
    assert builder.upper_angle_bound == float(np.float32(0.1))
    assert builder.upper_height_bound == float(np.float32(1.0 + 1e-6))
    assert builder.upper_height_bound > builder.lower_height_bound


def test_invalid_bounds_error_carries_values():
    builder = NoiseMapBuilderCylinder()

    with pytest.raises(InvalidBoundsError, match="Incoherent bounds") as exc_info:
        builder.set_bounds(5.0, 1.0, 0.0, 1.0)

    err = exc_info.value
    assert isinstance(err, NoiseMapError)
    assert (err.lower_angle, err.upper_angle) == (5.0, 1.0)
    assert (err.lower_height, err.upper_height) == (0.0, 1.0)


# ===========================================================================
# CylinderBounds value object
# ===========================================================================
def test_cylinder_bounds_rejects_unordered_angles():
    with pytest.raises(ValueError, match="angle ordering"):
        CylinderBounds(lower_angle=1.0, upper_angle=0.0)


def test_cylinder_bounds_rejects_unordered_heights():
    with pytest.raises(ValueError, match="height ordering"):
        CylinderBounds(lower_height=3.0, upper_height=3.0)


def test_cylinder_bounds_rejects_values_collapsing_in_float32():
    with pytest.raises(ValueError, match="height ordering"):
        CylinderBounds(lower_height=1.0, upper_height=1.0 + 1e-12)


def test_cylinder_bounds_rejects_values_beyond_float32_range():
    with pytest.raises(ValueError, match="angle ordering"):
        CylinderBounds(lower_angle=-1e39, upper_angle=1e39)


def test_cylinder_bounds_is_frozen():
    bounds = CylinderBounds()

    with pytest.raises(ValueError):
        bounds.lower_angle = 0.0  # type: ignore[misc]


def test_cylinder_bounds_equality_by_value():
    assert CylinderBounds() == CylinderBounds(
        lower_angle=-180.0, upper_angle=180.0, lower_height=-10.0, upper_height=10.0
    )


def test_cylinder_bounds_is_ordered_detects_unvalidated_instance():
    unchecked = CylinderBounds.model_construct(
        lower_angle=10.0, upper_angle=0.0, lower_height=-1.0, upper_height=1.0
    )

    assert CylinderBounds().is_ordered() is True
    assert unchecked.is_ordered() is False


@pytest.mark.parametrize(
    "la, ua, lh, uh",
    [
        (-1e39, 1e39, -1.0, 1.0),
        (-1.0, 1.0, 1.0, 1.0 + 1e-12),
    ],
)
def test_cylinder_bounds_is_ordered_checks_float32(la, ua, lh, uh):
    unchecked = CylinderBounds.model_construct(
        lower_angle=la, upper_angle=ua, lower_height=lh, upper_height=uh
    )

    assert unchecked.is_ordered() is False
