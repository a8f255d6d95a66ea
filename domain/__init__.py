"""Noise Map Builder Domain Layer.

This package contains the core logic organized by bounded contexts:
- noise: noise module port and deterministic generator/combinator modules
- noisemap: bounds, noise map storage, filters and builders
"""

# Imports alphabetized per project style (isort)
from domain import noise, noisemap

__all__ = ["noise", "noisemap"]
