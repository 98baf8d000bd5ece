"""Module containing the outcome of a boundary-aware rotation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from .cuboid import Coordinate


@dataclass(frozen=True)
class Rotated:
    """The cuboid was rotated in place."""

    rotated: ClassVar[bool] = True
    """Whether the rotation took place."""


@dataclass(frozen=True)
class NeedsRelocation:
    """The cuboid was left untouched and has to be moved before rotating.

    `center` is the minimum center the cuboid has to be moved to (e.g. with
    `Cuboid.move_to`) for the rotation to clear the boundary.
    """

    center: Coordinate
    """Suggested center for the cuboid."""

    rotated: ClassVar[bool] = False
    """Whether the rotation took place."""


RotationOutcome = Union[Rotated, NeedsRelocation]
"""Result of `Cuboid.rotatex`."""
