"""Domain Port for noise sources.

Every generator or combinator that a builder can sample implements this
interface. No concrete noise math here.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NoiseModule(Protocol):
    """Port for scalar fields defined over 3D space.

    Implementations must be pure functions of the input point: the same
    point always yields the same value.
    """

    def get_value(self, x: float, y: float, z: float) -> float:
        """Return the field value at (x, y, z)."""
        ...
