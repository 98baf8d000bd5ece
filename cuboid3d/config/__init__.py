"""Package containing the configuration for cuboids."""

from .boundary import ORIGIN, Boundary, BoundaryLike, as_boundary
from .common import check_positives
from .configuration import DEFAULT_CONFIGURATION, CuboidConfiguration
from .rotation import X_ROTATION, RotationType
