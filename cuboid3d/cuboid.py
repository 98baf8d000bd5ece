"""Module to represent a movable, rotatable cuboid."""
from __future__ import annotations

import itertools as it
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt
from loguru import logger

from .config import (
    DEFAULT_CONFIGURATION,
    ORIGIN,
    X_ROTATION,
    BoundaryLike,
    CuboidConfiguration,
    as_boundary,
    check_positives,
)
from .structure import (
    AxisEnum,
    Coordinate,
    CuboidDimension,
    NeedsRelocation,
    Rotated,
    RotationOutcome,
)


class Cuboid:
    """Axis-aligned box defined by its center and its extents.

    The height is measured along x, the width along y and the length along z.
    `mins` and `maxes` are recomputed after every change to the center or to
    the dimensions.
    """

    def __init__(
        self,
        x: float,
        y: float,
        z: float,
        height: float | None = None,
        width: float | None = None,
        length: float | None = None,
        *,
        config: CuboidConfiguration = DEFAULT_CONFIGURATION,
    ) -> None:
        """Set center and dimensions, then compute the bounds."""
        defaults = config.default_dimensions
        self.config = config
        self._x, self._y, self._z = x, y, z
        self._height = float(defaults.height if height is None else height)
        self._width = float(defaults.width if width is None else width)
        self._length = float(defaults.length if length is None else length)
        if config.validate_dimensions:
            check_positives(self._height, self._width, self._length)
        elif min(self._height, self._width, self._length) <= 0:
            logger.warning(
                f"Cuboid created with non-positive dimensions "
                f"{self._height} x {self._width} x {self._length}"
            )
        self._set_bounds()

    def __repr__(self) -> str:
        """Return the constructor call rebuilding the cuboid."""
        return (
            f"{type(self).__name__}({self.x!r}, {self.y!r}, {self.z!r}, "
            f"{self._height!r}, {self._width!r}, {self._length!r})"
        )

    @property
    def x(self) -> float:
        """Center coordinate on the x axis."""
        return self._x

    @property
    def y(self) -> float:
        """Center coordinate on the y axis."""
        return self._y

    @property
    def z(self) -> float:
        """Center coordinate on the z axis."""
        return self._z

    @property
    def height(self) -> float:
        """Extent along the x axis."""
        return self._height

    @property
    def width(self) -> float:
        """Extent along the y axis."""
        return self._width

    @property
    def length(self) -> float:
        """Extent along the z axis."""
        return self._length

    @property
    def mins(self) -> Coordinate:
        """Minimum coordinate on each axis."""
        return self._mins

    @property
    def maxes(self) -> Coordinate:
        """Maximum coordinate on each axis."""
        return self._maxes

    @property
    def center(self) -> Coordinate:
        """Return a snapshot of the center of the cuboid."""
        return Coordinate(self.x, self.y, self.z)

    @property
    def dimensions(self) -> CuboidDimension:
        """Return a snapshot of the dimensions of the cuboid."""
        return CuboidDimension(height=self._height, width=self._width, length=self._length)

    @property
    def volume(self) -> float:
        """Return the volume of the cuboid."""
        return self._height * self._width * self._length

    def diag(self) -> float:
        """Distance from the center to a corner of the y/z cross-section.

        Used as the clearance the cuboid needs around its x axis to rotate.
        """
        return float(np.hypot(self._maxes.y - self.y, self._maxes.z - self.z))

    def will_fit(
        self,
        candidate: Coordinate | Sequence[float] | None = None,
        bounds: BoundaryLike = ORIGIN,
    ) -> bool:
        """Check if the cuboid centered in `candidate` would not cross `bounds`.

        Args:
            candidate (Coordinate|Sequence[float]|None, optional): Center to test.
                Defaults to the current center.
            bounds (BoundaryLike, optional): Boundary planes. Defaults to the origin.

        Returns:
            bool: True if the minimum on every axis stays at or above the boundary.
        """
        bounds = as_boundary(bounds)
        if candidate is None:
            candidate = self.center
        elif not isinstance(candidate, Coordinate):
            candidate = Coordinate(*candidate)
        center = self.center
        return all(
            self._mins[axis] - (center[axis] - candidate[axis]) >= bounds[axis]
            for axis in AxisEnum
        )

    def intersects(self, other: Cuboid) -> bool:
        """Check if the two cuboids overlap.

        Cuboids sharing only a face, edge or vertex do not intersect.
        """
        return all(
            other.mins[axis] < self._maxes[axis] and other.maxes[axis] > self._mins[axis]
            for axis in AxisEnum
        )

    def move_to(self, x: float, y: float, z: float, bounds: BoundaryLike = ORIGIN) -> bool:
        """Move the center to the given coordinates if the cuboid fits `bounds` there.

        Returns:
            bool: True if the cuboid was moved, False if it was left in place.
        """
        if not self.will_fit(Coordinate(x, y, z), bounds):
            logger.debug(f"Rejected move of {self!r} to ({x}, {y}, {z})")
            return False
        self.force_move_to(x, y, z)
        return True

    def force_move_to(self, x: float, y: float, z: float) -> Cuboid:
        """Move the center to the given coordinates regardless of any boundary."""
        self._x, self._y, self._z = x, y, z
        self._set_bounds()
        return self

    def rotatex(self, bounds: BoundaryLike = ORIGIN) -> RotationOutcome:
        """Rotate 90 degrees about the x axis if there is room within `bounds`.

        The rotation only happens when the cuboid does not cross the x plane
        and its center clears the y and z planes by at least `diag()`. Otherwise the cuboid is
        left untouched and the center it should be moved to is returned.

        Args:
            bounds (BoundaryLike, optional): Boundary planes. Defaults to the origin.

        Returns:
            RotationOutcome: `Rotated` or `NeedsRelocation` with the suggested center.
        """
        bounds = as_boundary(bounds)
        old_center = self.center
        proposal: dict[str, float] = {}
        if bounds.x > self._mins.x:
            proposal[AxisEnum.x.value] = bounds.x + self._height / 2
        diag = self.diag()
        for axis in (AxisEnum.y, AxisEnum.z):
            proposal[axis.value] = max(old_center[axis], bounds[axis] + diag)
        new_center = old_center.merge(**proposal)
        if new_center != old_center:
            logger.debug(f"Rotation of {self!r} needs relocation to {new_center.to_tuple()}")
            return NeedsRelocation(new_center)
        self.force_rotatex()
        return Rotated()

    def force_rotatex(self) -> Cuboid:
        """Rotate 90 degrees about the x axis, exchanging width and length."""
        rotated = X_ROTATION.get_rotation(self.dimensions)
        self._width, self._length = rotated.width, rotated.length
        self._set_bounds()
        return self

    def vertices(self) -> list[tuple[float, float, float]]:
        """Vertices of the cuboid.

        x varies slowest and z fastest, with the maximum before the minimum on
        every axis.
        """
        return list(
            it.product(
                (self._maxes.x, self._mins.x),
                (self._maxes.y, self._mins.y),
                (self._maxes.z, self._mins.z),
            )
        )

    def vertices_array(self) -> npt.NDArray[np.float64]:
        """Return the vertices as an (8, 3) array, in the order of `vertices`."""
        return np.array(self.vertices(), dtype=np.float64)

    def _set_bounds(self) -> None:
        """Recompute the minimum and maximum coordinates from center and dimensions."""
        half_height, half_width, half_length = self._height / 2, self._width / 2, self._length / 2
        self._maxes = Coordinate(self.x + half_height, self.y + half_width, self.z + half_length)
        self._mins = Coordinate(self.x - half_height, self.y - half_width, self.z - half_length)
