"""Noise Map Bounded Context - Domain Services.

Builders that fill a noise map by sampling a noise module over a
parametrized surface. Pure domain logic: the destination raster, the noise
module, the filter and the progress callback are all supplied by the caller.

Currently provided:
    NoiseMapBuilderCylinder: samples the surface of a unit cylinder
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np

from domain.noise.ports import NoiseModule
from domain.noisemap.errors import (
    InvalidBoundsError,
    InvalidDimensionsError,
    MissingOutputRasterError,
    MissingSourceModuleError,
)
from domain.noisemap.models import CylinderModel
from domain.noisemap.ports import BuilderFilter, OutputRaster, ProgressCallback
from domain.noisemap.value_objects import (
    CylinderBounds,
    FilterLevel,
    bounds_are_ordered,
)

logger = logging.getLogger(__name__)


def _classify_all_as_source(x: int, y: int) -> FilterLevel:
    return FilterLevel.SOURCE


# ---------------------------------------------------------------------------
# Base Builder
# ---------------------------------------------------------------------------
class NoiseMapBuilder(ABC):
    """Shared state of all noise map builders.

    Holds the raster size and non-owning references to the source module,
    the destination noise map, the optional filter and the optional progress
    callback. Subclasses define the coordinate mapping in build().
    """

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self.source_module: NoiseModule | None = None
        self.noise_map: OutputRaster | None = None
        self.filter: BuilderFilter | None = None
        self.callback: ProgressCallback | None = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_size(self, width: int, height: int) -> None:
        """Set the size of the noise map to build.

        Dimensions are checked by build(), not here.
        """
        self._width = width
        self._height = height

    def _check_common_preconditions(self) -> None:
        """Raise the first violated builder precondition, if any."""
        # PRE-2: Non-negative dimensions
        if self._width < 0 or self._height < 0:
            raise InvalidDimensionsError(self._width, self._height)

        # PRE-3: Source module supplied
        if self.source_module is None:
            raise MissingSourceModuleError("A source module must be provided")

        # PRE-4: Destination noise map supplied
        if self.noise_map is None:
            raise MissingOutputRasterError("A noise map must be provided")

    @abstractmethod
    def build(self) -> None:
        """Fill the destination noise map."""


# ---------------------------------------------------------------------------
# Cylinder Builder
# ---------------------------------------------------------------------------
class NoiseMapBuilderCylinder(NoiseMapBuilder):
    """Builds a noise map from the surface of a cylinder.

    The cylinder has a radius of 1.0, infinite height, is aligned with the
    y axis and centered at the origin. The noise map x axis represents the
    angle around the cylinder (degrees); the y axis represents the height
    above the x-z plane.

    Coordinates are stepped by repeated float32 addition of a fixed delta,
    so the sampled points are bit-identical to single-precision reference
    noise maps.

    Example:
        >>> builder = NoiseMapBuilderCylinder()
        >>> builder.source_module = Cylinders(frequency=2.0)
        >>> builder.noise_map = NoiseMap()
        >>> builder.set_size(256, 128)
        >>> builder.set_bounds(-90.0, 90.0, -1.0, 1.0)
        >>> builder.build()
    """

    def __init__(self, bounds: CylinderBounds | None = None) -> None:
        super().__init__()
        self._bounds = bounds if bounds is not None else CylinderBounds()

    # -----------------------------------------------------------------------
    # Bounds
    # -----------------------------------------------------------------------
    @property
    def bounds(self) -> CylinderBounds:
        return self._bounds

    @property
    def lower_angle_bound(self) -> float:
        return self._bounds.lower_angle

    @property
    def upper_angle_bound(self) -> float:
        return self._bounds.upper_angle

    @property
    def lower_height_bound(self) -> float:
        return self._bounds.lower_height

    @property
    def upper_height_bound(self) -> float:
        return self._bounds.upper_height

    def set_bounds(
        self,
        lower_angle: float,
        upper_angle: float,
        lower_height: float,
        upper_height: float,
    ) -> None:
        """Replace all four bounds at once.

        Bounds are stored rounded to float32, so the accessors return exactly
        the values that build() samples from.

        Raises:
            InvalidBoundsError: If, after rounding to float32,
                lower_angle >= upper_angle or lower_height >= upper_height,
                or an extent overflows. The current bounds are kept.
        """
        if not bounds_are_ordered(lower_angle, upper_angle, lower_height, upper_height):
            raise InvalidBoundsError(lower_angle, upper_angle, lower_height, upper_height)

        self._bounds = CylinderBounds(
            lower_angle=lower_angle,
            upper_angle=upper_angle,
            lower_height=lower_height,
            upper_height=upper_height,
        )

    # -----------------------------------------------------------------------
    # Build
    # -----------------------------------------------------------------------
    def build(self) -> None:
        """Fill the destination noise map with values sampled from the cylinder.

        The original contents of the noise map are destroyed.

        Raises:
            InvalidBoundsError: If the stored bounds are not ordered in float32
            InvalidDimensionsError: If width or height is negative
            MissingSourceModuleError: If no source module was supplied
            MissingOutputRasterError: If no noise map was supplied

        Errors raised by the source module or the filter propagate unchanged.
        """
        bounds = self._bounds

        # PRE-1: Bounds still ordered, with finite extents, in float32
        if not bounds.is_ordered():
            raise InvalidBoundsError(
                bounds.lower_angle,
                bounds.upper_angle,
                bounds.lower_height,
                bounds.upper_height,
            )

        self._check_common_preconditions()

        width, height = self._width, self._height
        logger.debug(
            "Building cylinder noise map %dx%d (angle %s..%s, height %s..%s)",
            width,
            height,
            bounds.lower_angle,
            bounds.upper_angle,
            bounds.lower_height,
            bounds.upper_height,
        )

        noise_map = self.noise_map
        noise_map.resize(width, height)

        model = CylinderModel(self.source_module)

        if self.filter is not None:
            builder_filter = self.filter
            classify = builder_filter.classify
        else:
            builder_filter = None
            classify = _classify_all_as_source

        lower_angle = np.float32(bounds.lower_angle)
        lower_height = np.float32(bounds.lower_height)
        angle_extent = np.float32(bounds.upper_angle) - lower_angle
        height_extent = np.float32(bounds.upper_height) - lower_height

        # A zero dimension means zero iterations on that axis; the delta is unused.
        x_delta = np.float32(angle_extent / width) if width else np.float32(0.0)
        y_delta = np.float32(height_extent / height) if height else np.float32(0.0)

        cur_height = lower_height
        for y in range(height):
            cur_angle = lower_angle

            for x in range(width):
                level = classify(x, y)

                if level is FilterLevel.CONSTANT:
                    final_value = builder_filter.constant_value
                else:
                    final_value = model.get_value(float(cur_angle), float(cur_height))
                    if level is FilterLevel.FILTER:
                        final_value = builder_filter.apply(x, y, final_value)

                noise_map.set_value(x, y, final_value)

                cur_angle = np.float32(cur_angle + x_delta)

            cur_height = np.float32(cur_height + y_delta)

            if self.callback is not None:
                self.callback(y)

        logger.debug("Cylinder noise map %dx%d built", width, height)
