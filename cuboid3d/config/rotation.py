"""Module containing cuboid rotation types."""

from __future__ import annotations

from dataclasses import dataclass

from cuboid3d.structure import CuboidDimension, DimensionEnum


@dataclass(kw_only=True, frozen=True)
class RotationType:
    """Rotation of a cuboid.

    Each field names the dimension of the original cuboid that provides the
    value of that dimension after the rotation.
    """

    height: DimensionEnum = DimensionEnum.height
    """The new cuboid height Dimension after the rotation."""
    width: DimensionEnum = DimensionEnum.width
    """The new cuboid width Dimension after the rotation."""
    length: DimensionEnum = DimensionEnum.length
    """The new cuboid length Dimension after the rotation."""

    def __post_init__(self) -> None:
        """Post initialization."""
        if self.width == self.length or self.height in (self.width, self.length):
            raise ValueError(
                "Rotation impossible, duplicate dimension "
                f"{self.height.value} - {self.width.value} - {self.length.value}."
            )

    @property
    def is_identity(self) -> bool:
        """Return True if the rotation leaves every dimension in place."""
        return (
            self.height == DimensionEnum.height
            and self.width == DimensionEnum.width
            and self.length == DimensionEnum.length
        )

    def get_rotation(self, cuboid: CuboidDimension) -> CuboidDimension:
        """Return the cuboid dimension after the rotation."""
        if self.is_identity:
            return cuboid
        return CuboidDimension(
            height=cuboid.get_dimension(self.height),
            width=cuboid.get_dimension(self.width),
            length=cuboid.get_dimension(self.length),
        )


X_ROTATION = RotationType(width=DimensionEnum.length, length=DimensionEnum.width)
"""Rotation of 90 degrees about the x (height) axis."""
