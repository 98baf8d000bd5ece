"""Structure Module describing cuboids in space."""

from __future__ import annotations

from .cuboid import AxisEnum, Coordinate, CuboidDimension, DimensionEnum
from .outcome import NeedsRelocation, Rotated, RotationOutcome
