"""Tests for CylinderModel surface mapping."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from domain.noisemap.models import CylinderModel


@pytest.mark.parametrize(
    "angle, expected_x, expected_z",
    [
        (0.0, 1.0, 0.0),
        (90.0, 0.0, 1.0),
        (180.0, -1.0, 0.0),
        (-90.0, 0.0, -1.0),
        (360.0, 1.0, 0.0),
    ],
)
def test_angle_maps_around_y_axis(angle, expected_x, expected_z):
    module = MagicMock()
    module.get_value.return_value = 0.0

    CylinderModel(module).get_value(angle, 2.5)

    x, y, z = module.get_value.call_args.args
    assert x == pytest.approx(expected_x, abs=1e-12)
    assert y == 2.5
    assert z == pytest.approx(expected_z, abs=1e-12)


def test_points_lie_on_unit_cylinder():
    seen = []

    class Recorder:
        def get_value(self, x, y, z):
            seen.append((x, z))
            return 0.0

    model = CylinderModel(Recorder())
    for angle in range(-180, 180, 15):
        model.get_value(float(angle), 0.0)

    for x, z in seen:
        assert x * x + z * z == pytest.approx(1.0)


def test_returns_module_value():
    module = MagicMock()
    module.get_value.return_value = -0.625

    assert CylinderModel(module).get_value(45.0, 1.0) == -0.625
