"""Geometric models that map 2D builder coordinates onto a noise module's 3D space."""

from __future__ import annotations

import math

from domain.noise.ports import NoiseModule


class CylinderModel:
    """Unit-radius cylinder of infinite height, centered at the origin.

    The cylinder is aligned with the y axis. An (angle, height) pair maps to
    the point (cos(angle), height, sin(angle)), with angle in degrees.
    """

    def __init__(self, module: NoiseModule) -> None:
        self.module = module

    def get_value(self, angle: float, height: float) -> float:
        """Sample the module at the surface point for (angle, height)."""
        radians = math.radians(angle)
        x = math.cos(radians)
        z = math.sin(radians)
        return self.module.get_value(x, height, z)
