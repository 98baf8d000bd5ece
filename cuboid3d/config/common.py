"""Utility functions for the cuboid3d configuration."""
from __future__ import annotations


def check_positives(*value: float) -> None:
    """Check if all the given values are strictly positive.

    Args:
        *value (float): Values to check.

    Raises:
        ValueError: If one of the values is not positive.
    """
    for val in value:
        if val <= 0:
            raise ValueError(f"{val} must be positive.")
