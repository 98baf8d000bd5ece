import numpy as np
import pytest

from cuboid3d.config import (
    ORIGIN,
    X_ROTATION,
    Boundary,
    CuboidConfiguration,
    RotationType,
    as_boundary,
    check_positives,
)
from cuboid3d.structure import AxisEnum, Coordinate, CuboidDimension, DimensionEnum


class TestBoundary:

    def test_origin(self):
        assert ORIGIN.to_tuple() == (0, 0, 0)

    def test_from_partial_mapping(self):
        assert Boundary.from_mapping({"y": 3}) == Boundary(0, 3, 0)
        assert Boundary.from_mapping({AxisEnum.z: -1}) == Boundary(0, 0, -1)

    def test_from_mapping_unknown_axis(self):
        with pytest.raises(ValueError, match="not recognized"):
            Boundary.from_mapping({"w": 1})

    @pytest.mark.parametrize("value", [
        Boundary(1, 2, 3),
        Coordinate(1, 2, 3),
        {"x": 1, "y": 2, "z": 3},
        (1, 2, 3),
        [1, 2, 3],
    ])
    def test_as_boundary(self, value):
        assert as_boundary(value) == Boundary(1, 2, 3)

    def test_as_boundary_from_array(self):
        assert as_boundary(Coordinate(1, 2, 3).to_array()) == Boundary(1, 2, 3)
        with pytest.raises(ValueError, match="shape"):
            as_boundary(np.zeros((2, 3)))

    @pytest.mark.parametrize("value", [(1, 2), "xyz", 3])
    def test_as_boundary_invalid(self, value):
        with pytest.raises(ValueError):
            as_boundary(value)


class TestRotation:

    def test_duplicate_dimension(self):
        with pytest.raises(ValueError, match="duplicate dimension height - length - length"):
            RotationType(width=DimensionEnum.length)

    def test_x_rotation(self):
        dims = CuboidDimension(height=5, width=10, length=4)
        assert X_ROTATION.get_rotation(dims) == CuboidDimension(height=5, width=4, length=10)
        assert RotationType().get_rotation(dims) is dims


class TestConfiguration:

    def test_defaults(self):
        config = CuboidConfiguration()
        assert tuple(config.default_dimensions) == (2, 2, 2)
        assert not config.validate_dimensions

    def test_invalid_default_dimensions(self):
        with pytest.raises(ValueError, match="must be positive"):
            CuboidConfiguration(
                default_dimensions=CuboidDimension(height=0, width=1, length=1),
                validate_dimensions=True,
            )

    def test_check_positives(self):
        check_positives(1, 0.5)
        with pytest.raises(ValueError):
            check_positives(1, -1)
