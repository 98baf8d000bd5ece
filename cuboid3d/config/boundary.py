"""Module containing the boundary planes a cuboid is checked against."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Union

import numpy as np
import numpy.typing as npt

from cuboid3d.structure import AxisEnum, Coordinate


@dataclass(frozen=True)
class Boundary(Coordinate):
    """One boundary plane per axis.

    A cuboid fits a boundary when its minimum on every axis is not below the
    corresponding plane.
    """

    @classmethod
    def from_mapping(cls, planes: Mapping[AxisEnum | str, float]) -> Boundary:
        """Create a Boundary from a mapping keyed by axis, missing axes default to zero."""
        values = {axis.value: 0.0 for axis in AxisEnum}
        for key, value in planes.items():
            try:
                axis = AxisEnum(key)
            except ValueError:
                raise ValueError(f"Boundary axis {key} not recognized.") from None
            values[axis.value] = value
        return cls(**values)

    @classmethod
    def from_iterable(cls, it_: Sequence[float]) -> Boundary:
        """Create a Boundary from an x, y, z sequence."""
        if len(it_) != 3:
            raise ValueError(f"Cannot create a Boundary from {len(it_)} values: {it_}")
        return cls(*it_)


BoundaryLike = Union[
    Coordinate, Mapping[AxisEnum | str, float], Sequence[float], npt.NDArray[np.float64]
]
"""Accepted inputs for a boundary parameter."""

ORIGIN = Boundary(0.0, 0.0, 0.0)
"""The three planes through the origin."""


def as_boundary(value: BoundaryLike) -> Boundary:
    """Coerce the given value to a Boundary."""
    if isinstance(value, Boundary):
        return value
    if isinstance(value, Coordinate):
        return Boundary(*value)
    if isinstance(value, Mapping):
        return Boundary.from_mapping(value)
    if isinstance(value, np.ndarray):
        if value.shape != (3,):
            raise ValueError(f"Cannot create a Boundary from an array of shape {value.shape}")
        return Boundary(*(float(v) for v in value))
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return Boundary.from_iterable(value)
    raise ValueError(f"Cannot interpret {value!r} as a boundary.")
