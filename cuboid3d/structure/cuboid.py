"""Module containing the value types describing a cuboid in space."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np
import numpy.typing as npt


class AxisEnum(str, Enum):
    """Axis enumeration."""

    x = "x"
    """X axis."""
    y = "y"
    """Y axis."""
    z = "z"
    """Z axis."""

    def get_dimension(self) -> DimensionEnum:
        """Return the corresponding dimension."""
        return AxisDimensionAssociation[self]


class DimensionEnum(str, Enum):
    """Dimension enumeration."""

    height = "height"
    """Height dimension, measured along x."""
    width = "width"
    """Width dimension, measured along y."""
    length = "length"
    """Length dimension, measured along z."""

    def get_axis(self) -> AxisEnum:
        """Return the corresponding axis."""
        return DimensionAxisAssociation[self]


AxisDimensionAssociation: dict[AxisEnum, DimensionEnum] = {
    AxisEnum.x: DimensionEnum.height,
    AxisEnum.y: DimensionEnum.width,
    AxisEnum.z: DimensionEnum.length,
}
"""Dictionary containing the association between axis and dimension."""

DimensionAxisAssociation: dict[DimensionEnum, AxisEnum] = {
    key: value for value, key in AxisDimensionAssociation.items()
}
"""Dictionary containing the association between dimension and axis."""


@dataclass(frozen=True)
class Coordinate(Iterable[float]):
    """Helper class to define a triplet of coordinates.

    The coordinates are stored in the corresponding axis, i.e. x, y, z.
    """

    x: float
    """X coordinate."""
    y: float
    """Y coordinate."""
    z: float
    """Z coordinate."""

    def __getitem__(self, key: AxisEnum | str) -> float:
        """Return the coordinate on the specified axis."""
        try:
            axis = AxisEnum(key)
        except ValueError:
            raise ValueError(f"Key {key} not recognized.") from None
        return getattr(self, axis.value)

    def __iter__(self) -> Iterator[float]:
        """Iterate over the coordinates."""
        return iter(self.to_tuple())

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert coordinates to a tuple."""
        return self.x, self.y, self.z

    def to_array(self) -> npt.NDArray[np.float64]:
        """Convert coordinates to a numpy array."""
        return np.array(self.to_tuple(), dtype=np.float64)

    def merge(self, **axes: float) -> Coordinate:
        """Return a copy with the given axes replaced."""
        return replace(self, **axes)


@dataclass(kw_only=True, frozen=True, order=True)
class CuboidDimension(Iterable[float]):
    """Helper class to define cuboid dimensions."""

    height: float
    """Extent of the cuboid along the x axis."""
    width: float
    """Extent of the cuboid along the y axis."""
    length: float
    """Extent of the cuboid along the z axis."""
    volume: float = field(init=False)
    """Volume of the cuboid."""

    def __post_init__(self) -> None:
        """Initialize the volume attribute of the Dimension."""
        object.__setattr__(self, "volume", self.height * self.width * self.length)

    def __getitem__(self, key: DimensionEnum | AxisEnum) -> float:
        """Return the dimension of the specified type."""
        if isinstance(key, DimensionEnum):
            return self.get_dimension(key)
        elif isinstance(key, AxisEnum):
            return self.get_axis(key)
        else:
            raise ValueError(f"Key {key} not recognized.")

    def __iter__(self) -> Iterator[float]:
        """Return an iterator over the dimensions."""
        yield from (self.get_dimension(dimension=dimension) for dimension in DimensionEnum)

    def get_dimension(self, dimension: DimensionEnum) -> float:
        """Return the value of the specified dimension."""
        if dimension == DimensionEnum.height:
            return self.height
        elif dimension == DimensionEnum.width:
            return self.width
        elif dimension == DimensionEnum.length:
            return self.length
        else:
            raise IndexError(f"Dimension type {dimension} not recognized.")

    def get_axis(self, axis: AxisEnum) -> float:
        """Return the value of the specified axis."""
        return self.get_dimension(axis.get_dimension())
