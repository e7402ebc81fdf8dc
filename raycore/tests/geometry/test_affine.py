'''Unit tests for construction and composition of affine transforms'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import math
import pytest
import numpy as np
from scipy.spatial.transform import Rotation

from raycore.geometry.axes import Axis
from raycore.geometry.tuples import Tuple, point, vector
from raycore.geometry.matrices import Matrix, identity4, multiply
from raycore.geometry.determinants import inverse
from raycore.geometry.transforms.affine import (
    translation,
    scaling,
    rotation,
    rotation_x,
    rotation_y,
    rotation_z,
    shearing,
    chain,
)


# Translation
def test_translation_moves_point() -> None:
    '''Test that translation offsets a point'''
    assert multiply(translation(5, -3, 2), point(-3, 4, 5)) == point(2, 1, 7)

def test_inverse_translation() -> None:
    '''Test that the inverse of a translation moves a point the opposite way'''
    assert multiply(inverse(translation(5, -3, 2)), point(-3, 4, 5)) == point(-8, 7, 3)

@pytest.mark.parametrize('v', [vector(-3, 4, 5), vector(0, 0, 0), vector(1e3, -2.5, 0.1)])
@pytest.mark.parametrize('offset', [(5, -3, 2), (0, 0, 0), (-100, 0.5, 7)])
def test_translation_ignores_vectors(v : Tuple, offset : tuple[float, float, float]) -> None:
    '''Test that translation leaves direction vectors unchanged'''
    assert multiply(translation(*offset), v) == v

def test_translation_cells() -> None:
    '''Test that translation places offsets in the final column'''
    matrix = translation(1, 2, 3)
    assert [matrix.get(row, 3) for row in range(4)] == [1, 2, 3, 1]


# Scaling
def test_scaling_point() -> None:
    '''Test that scaling stretches a point'''
    assert multiply(scaling(2, 3, 4), point(-4, 6, 8)) == point(-8, 18, 32)

def test_scaling_vector() -> None:
    '''Test that scaling stretches a vector'''
    assert multiply(scaling(2, 3, 4), vector(-4, 6, 8)) == vector(-8, 18, 32)

def test_inverse_scaling() -> None:
    '''Test that the inverse of a scaling shrinks'''
    assert multiply(inverse(scaling(2, 3, 4)), vector(-4, 6, 8)) == vector(-2, 2, 2)

def test_reflection() -> None:
    '''Test that scaling by a negative factor reflects across an axis'''
    assert multiply(scaling(-1, 1, 1), point(2, 3, 4)) == point(-2, 3, 4)


# Rotation
@pytest.mark.parametrize(
    'axis, angle_rad, p, expected',
    [
        (Axis.X, math.pi/4, point(0, 1, 0), point(0, math.sqrt(2)/2, math.sqrt(2)/2)),
        (Axis.X, math.pi/2, point(0, 1, 0), point(0, 0, 1)),
        (Axis.Y, math.pi/4, point(0, 0, 1), point(math.sqrt(2)/2, 0, math.sqrt(2)/2)),
        (Axis.Y, math.pi/2, point(0, 0, 1), point(1, 0, 0)),
        (Axis.Z, math.pi/4, point(0, 1, 0), point(-math.sqrt(2)/2, math.sqrt(2)/2, 0)),
        (Axis.Z, math.pi/2, point(0, 1, 0), point(-1, 0, 0)),
    ]
)
def test_rotation(axis : Axis, angle_rad : float, p : Tuple, expected : Tuple) -> None:
    '''Test that rotation about each axis moves points the right-handed way'''
    assert multiply(rotation(axis, angle_rad), p) == expected

def test_inverse_rotation_x() -> None:
    '''Test that the inverse of an x-rotation rotates in the opposite direction'''
    result = multiply(inverse(rotation_x(math.pi/4)), point(0, 1, 0))
    assert result == point(0, math.sqrt(2)/2, -math.sqrt(2)/2)

def test_rotation_y_sign_placement() -> None:
    '''Test that rotation about y has its sines mirrored relative to x and z'''
    s = math.sin(0.3)
    (rot_x, rot_y, rot_z) = (rotation_x(0.3), rotation_y(0.3), rotation_z(0.3))
    assert (rot_x.get(1, 2) == -s) and (rot_x.get(2, 1) == s) \
        and (rot_y.get(0, 2) ==  s) and (rot_y.get(2, 0) == -s) \
        and (rot_z.get(0, 1) == -s) and (rot_z.get(1, 0) == s)

@pytest.mark.parametrize('axis_name', ['x', 'y', 'z'])
@pytest.mark.parametrize('angle_rad', [0.0, 0.3, math.pi/3, -2.0, 5.5])
def test_rotation_matches_scipy(axis_name : str, angle_rad : float) -> None:
    '''Test rotation matrices against scipy's (right-handed, active) elementary rotations'''
    expected = Rotation.from_euler(axis_name, angle_rad).as_matrix()
    assert np.allclose(rotation(axis_name, angle_rad).as_array()[:3, :3], expected)

@pytest.mark.parametrize('axis', ['X', 'y', Axis.z, Axis.Z])
def test_rotation_axis_names(axis) -> None:
    '''Test that axes can be given as enum members or case-insensitive names'''
    assert rotation(axis, 1.0) == rotation(Axis.resolve(axis), 1.0)

@pytest.mark.parametrize('axis', ['w', 'xy', 3, None])
def test_rotation_invalid_axis(axis) -> None:
    '''Test that unknown axes are rejected'''
    with pytest.raises(ValueError):
        _ = rotation(axis, 1.0)

def test_rotation_preserves_vector_length() -> None:
    '''Test that rotations are orthogonal (i.e. inverse equals transpose)'''
    matrix = rotation_y(1.234).as_array()
    assert np.allclose(matrix @ matrix.T, np.eye(4))


# Shearing
@pytest.mark.parametrize(
    'coefficients, expected',
    [
        ((1, 0, 0, 0, 0, 0), point(5, 3, 4)),
        ((0, 1, 0, 0, 0, 0), point(6, 3, 4)),
        ((0, 0, 1, 0, 0, 0), point(2, 5, 4)),
        ((0, 0, 0, 1, 0, 0), point(2, 7, 4)),
        ((0, 0, 0, 0, 1, 0), point(2, 3, 6)),
        ((0, 0, 0, 0, 0, 1), point(2, 3, 7)),
    ]
)
def test_shearing(coefficients : tuple[float, ...], expected : Tuple) -> None:
    '''Test that each shear coefficient moves one coordinate in proportion to another'''
    assert multiply(shearing(*coefficients), point(2, 3, 4)) == expected

def test_shearing_cells() -> None:
    '''Test the placement of all six shear coefficients'''
    matrix = shearing(xy=1, xz=2, yx=3, yz=4, zx=5, zy=6)
    expected = Matrix.from_array([
        [1, 1, 2, 0],
        [3, 1, 4, 0],
        [5, 6, 1, 0],
        [0, 0, 0, 1],
    ])
    assert matrix == expected


# Defaults and immutability
@pytest.mark.parametrize('builder', [translation, scaling, rotation_x, rotation_y, rotation_z, shearing])
def test_default_is_identity(builder) -> None:
    '''Test that every builder called without arguments yields the identity'''
    assert builder() == identity4()

@pytest.mark.parametrize('transform', [translation(1, 2, 3), scaling(2, 2, 2), rotation_z(1.0), shearing(1, 0, 0, 0, 0, 0)])
def test_transforms_frozen(transform : Matrix) -> None:
    '''Test that built transforms cannot be modified afterwards'''
    with pytest.raises(PermissionError):
        transform.set(0, 0, 0.0)


# Composition
def test_individual_transforms_in_sequence() -> None:
    '''Test that transforms applied one at a time give the expected intermediates'''
    p = point(1, 0, 1)
    p2 = multiply(rotation_x(math.pi/2), p)
    p3 = multiply(scaling(5, 5, 5), p2)
    p4 = multiply(translation(10, 5, 7), p3)
    assert (p2 == point(1, -1, 0)) and (p3 == point(5, -5, 0)) and (p4 == point(15, 0, 7))

def test_chained_transforms_reverse_order() -> None:
    '''Test that chained transforms are multiplied in reverse order of application'''
    (rot, scale, shift) = (rotation_x(math.pi/2), scaling(5, 5, 5), translation(10, 5, 7))
    composite = multiply(shift, multiply(scale, rot))
    assert (chain(rot, scale, shift) == composite) and (multiply(composite, point(1, 0, 1)) == point(15, 0, 7))

def test_empty_chain() -> None:
    '''Test that chaining no transforms yields the identity'''
    assert chain() == identity4()

def test_composition_associative() -> None:
    '''Test that grouping of composed transforms does not affect the result on a point'''
    rng = np.random.default_rng(seed=1234)
    p = point(*rng.uniform(-10, 10, size=3))
    for _ in range(5):
        (a, b, c) = (
            chain(rotation_x(rng.uniform(0, 2*math.pi)), translation(*rng.uniform(-5, 5, size=3))),
            chain(shearing(*rng.uniform(-1, 1, size=6)), rotation_y(rng.uniform(0, 2*math.pi))),
            chain(scaling(*rng.uniform(0.5, 3, size=3)), rotation_z(rng.uniform(0, 2*math.pi))),
        )
        grouped_left = multiply(multiply(multiply(c, b), a), p)
        applied_stepwise = multiply(c, multiply(b, multiply(a, p)))
        assert grouped_left == applied_stepwise

def test_inverse_of_composite() -> None:
    '''Test that the inverse of a composite transform undoes it'''
    composite = chain(scaling(2, 0.5, 3), rotation_y(0.7), translation(-1, 4, 2))
    p = point(3, -2, 8)
    assert multiply(inverse(composite), multiply(composite, p)) == p
