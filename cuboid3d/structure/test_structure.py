import numpy as np
import pytest

from cuboid3d.structure import (
    AxisEnum,
    Coordinate,
    CuboidDimension,
    DimensionEnum,
    NeedsRelocation,
    Rotated,
)


def test_axis_dimension_association():
    for axis, dimension in zip(AxisEnum, DimensionEnum):
        assert axis.get_dimension() == dimension
        assert dimension.get_axis() == axis


def test_coordinate_indexing():
    coord = Coordinate(1, 2, 3)
    assert coord[AxisEnum.y] == 2
    assert coord["z"] == 3
    assert list(coord) == [1, 2, 3]
    np.testing.assert_array_equal(coord.to_array(), [1.0, 2.0, 3.0])


def test_coordinate_unknown_axis_raises_value_error():
    with pytest.raises(ValueError, match="not recognized"):
        Coordinate(1, 2, 3)["w"]


def test_coordinate_merge():
    coord = Coordinate(1, 2, 3)
    assert coord.merge(y=5) == Coordinate(1, 5, 3)
    assert coord == Coordinate(1, 2, 3)


def test_cuboid_dimension():
    dims = CuboidDimension(height=2, width=3, length=4)
    assert dims.volume == 24
    assert list(dims) == [2, 3, 4]
    assert dims[DimensionEnum.width] == 3
    assert dims[AxisEnum.z] == 4


def test_cuboid_dimension_unknown_key():
    dims = CuboidDimension(height=2, width=3, length=4)
    with pytest.raises(ValueError):
        dims["width"]
    with pytest.raises(IndexError):
        dims.get_dimension("depth")


def test_rotation_outcomes():
    assert Rotated().rotated
    outcome = NeedsRelocation(Coordinate(3, 5, 5))
    assert not outcome.rotated
    assert outcome.center.to_tuple() == (3, 5, 5)
