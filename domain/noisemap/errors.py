"""Noise Map Bounded Context - Error Hierarchy.

Custom exceptions for noise map builders. All of them are caller-input errors
raised before the destination noise map is touched.
"""

from __future__ import annotations


class NoiseMapError(Exception):
    """Base error for noise map operations."""


class InvalidBoundsError(NoiseMapError):
    """Lower bound is not strictly less than the upper bound on some axis.

    Attributes:
        lower_angle: Requested lower angle bound
        upper_angle: Requested upper angle bound
        lower_height: Requested lower height bound
        upper_height: Requested upper height bound
    """

    def __init__(
        self,
        lower_angle: float,
        upper_angle: float,
        lower_height: float,
        upper_height: float,
    ) -> None:
        self.lower_angle = lower_angle
        self.upper_angle = upper_angle
        self.lower_height = lower_height
        self.upper_height = upper_height
        super().__init__(
            f"Incoherent bounds [angle: {lower_angle} to {upper_angle}, "
            f"height: {lower_height} to {upper_height}]: lower bound must be "
            "strictly less than upper bound"
        )


class InvalidDimensionsError(NoiseMapError):
    """Width or height is negative."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Dimension must be greater or equal 0, got {width}x{height}"
        )


class MissingSourceModuleError(NoiseMapError):
    """No source module was supplied to the builder."""


class MissingOutputRasterError(NoiseMapError):
    """No destination noise map was supplied to the builder."""
