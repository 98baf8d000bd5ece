"""Axis-aligned cuboids: bounds, collisions, constrained moves and rotations."""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ORIGIN, Boundary, CuboidConfiguration
from .cuboid import Cuboid
from .structure import AxisEnum, Coordinate, CuboidDimension, NeedsRelocation, Rotated
