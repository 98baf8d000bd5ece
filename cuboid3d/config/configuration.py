"""Configuration module for cuboids."""
from __future__ import annotations

from dataclasses import dataclass

from cuboid3d.structure import CuboidDimension

from .common import check_positives


@dataclass(kw_only=True, frozen=True)
class CuboidConfiguration:
    """Class containing the configuration shared by cuboids."""

    default_dimensions: CuboidDimension = CuboidDimension(height=2.0, width=2.0, length=2.0)
    """Dimensions used when a cuboid is created without them."""
    validate_dimensions: bool = False
    """Reject cuboids with zero or negative dimensions."""

    def __post_init__(self) -> None:
        """Check the default dimensions."""
        if self.validate_dimensions:
            check_positives(*self.default_dimensions)


DEFAULT_CONFIGURATION = CuboidConfiguration()
"""Configuration used by cuboids unless told otherwise."""
