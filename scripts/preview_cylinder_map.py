#!/usr/bin/env python3
"""Build a cylindrical noise map in memory and print its statistics.

Useful for eyeballing bounds and module parameters before wiring a builder
into a larger pipeline. Nothing is written to disk.

Usage:
    python scripts/preview_cylinder_map.py --width 256 --height 128 \\
        --module cylinders --frequency 4 --angle -90 90 --height-bounds -1 1

Requirements:
    pip install -e .
"""

from __future__ import annotations

import argparse
import logging

from domain.noise.modules import Checkerboard, Cylinders, ScaleBias, Spheres
from domain.noisemap.errors import NoiseMapError
from domain.noisemap.noise_map import NoiseMap
from domain.noisemap.services import NoiseMapBuilderCylinder
from domain.noisemap.value_objects import DEFAULT_ANGLE_BOUNDS, DEFAULT_HEIGHT_BOUNDS
from infrastructure.progress import TqdmRowProgress

logger = logging.getLogger("preview_cylinder_map")

MODULES = ("checkerboard", "cylinders", "spheres")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--width", type=int, default=256)
    parser.add_argument("--height", type=int, default=128)
    parser.add_argument("--module", choices=MODULES, default="cylinders")
    parser.add_argument("--frequency", type=float, default=1.0)
    parser.add_argument("--scale", type=float, default=1.0)
    parser.add_argument("--bias", type=float, default=0.0)
    parser.add_argument(
        "--angle",
        type=float,
        nargs=2,
        metavar=("LOWER", "UPPER"),
        default=DEFAULT_ANGLE_BOUNDS,
        help="angle bounds in degrees",
    )
    parser.add_argument(
        "--height-bounds",
        type=float,
        nargs=2,
        metavar=("LOWER", "UPPER"),
        default=DEFAULT_HEIGHT_BOUNDS,
        help="height bounds in units",
    )
    parser.add_argument("--no-progress", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def make_module(name: str, frequency: float, scale: float, bias: float):
    if name == "checkerboard":
        module = Checkerboard()
    elif name == "spheres":
        module = Spheres(frequency=frequency)
    else:
        module = Cylinders(frequency=frequency)

    if scale == 1.0 and bias == 0.0:
        return module
    return ScaleBias(source=module, scale=scale, bias=bias)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    noise_map = NoiseMap()
    builder = NoiseMapBuilderCylinder()
    builder.noise_map = noise_map
    builder.set_size(args.width, args.height)

    try:
        builder.source_module = make_module(
            args.module, args.frequency, args.scale, args.bias
        )
        builder.set_bounds(*args.angle, *args.height_bounds)
        if args.no_progress or args.height <= 0:
            builder.build()
        else:
            with TqdmRowProgress(args.height, desc="Cylinder") as progress:
                builder.callback = progress
                builder.build()
    except (NoiseMapError, ValueError) as e:
        logger.error("Build failed: %s", e)
        return 1

    low, high = noise_map.min_max()
    mean = float(noise_map.data.mean()) if noise_map.data.size else noise_map.border_value
    print(f"Size:  {noise_map.width}x{noise_map.height}")
    print(f"Min:   {low:.4f}")
    print(f"Max:   {high:.4f}")
    print(f"Mean:  {mean:.4f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
