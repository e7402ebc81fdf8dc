'''Construction and composition of common 4x4 affine transformations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Union

import math

from ..arraytypes import Scalar
from ..axes import Axis
from ..matrices import Matrix, identity4, multiply


# CONSTRUCTION OF AFFINE MATRICES
def translation(x : Scalar=0.0, y : Scalar=0.0, z : Scalar=0.0) -> Matrix:
    '''
    Generates an affine matrix which translates the origin (and all points in space along with it) to the point (x, y, z)
    Vectors (w=0) are unaffected by translation

    Parameters
    ----------
    x : float, default 0.0
        The x-coordinate of the translation
    y : float, default 0.0
        The y-coordinate of the translation
    z : float, default 0.0
        The z-coordinate of the translation

    Returns
    -------
    translation_matrix : Matrix[4, 4]
        The affine transformation matrix representing the translation
        With no arguments, returns the Identity matrix
    '''
    matrix = identity4()
    matrix.set(0, 3, x)
    matrix.set(1, 3, y)
    matrix.set(2, 3, z)

    return matrix.freeze()

def scaling(x : Scalar=1.0, y : Scalar=1.0, z : Scalar=1.0) -> Matrix:
    '''
    Generates an affine matrix which scales the basis by factors
    of (x, y, z) along the x, y, and z axes, respectively
    Negative factors reflect across the corresponding axis

    Parameters
    ----------
    x : float, default 1.0
        The scaling factor in the x-direction
    y : float, default 1.0
        The scaling factor in the y-direction
    z : float, default 1.0
        The scaling factor in the z-direction

    Returns
    -------
    scaling_matrix : Matrix[4, 4]
        The affine transformation matrix representing the scaling
        With no arguments, returns the Identity matrix
    '''
    matrix = identity4()
    matrix.set(0, 0, x)
    matrix.set(1, 1, y)
    matrix.set(2, 2, z)

    return matrix.freeze()

def rotation(axis : Union[Axis, str], angle_rad : Scalar=0.0) -> Matrix:
    '''
    Generates an affine matrix which rotates about one of the positive coordinate axes by "angle_rad" radians

    The cosine/sine block occupies the 2 rows/columns orthogonal to the axis;
    about Y the signs are mirrored relative to X and Z, which keeps all three rotations right-handed

    Parameters
    ----------
    axis : Axis or str
        The axis about which to rotate; strings "x", "y", "z" (any case) are also accepted
    angle_rad : float, default 0.0
        The angle of rotation, in radians

    Returns
    -------
    rotation_matrix : Matrix[4, 4]
        The affine transformation matrix representing the rotation
        With no angle given, returns the Identity matrix
    '''
    axis = Axis.resolve(axis)
    s = math.sin(angle_rad)
    c = math.cos(angle_rad)

    matrix = identity4()
    if axis == Axis.X:
        matrix.set(1, 1, c)
        matrix.set(1, 2, -s)
        matrix.set(2, 1, s)
        matrix.set(2, 2, c)
    elif axis == Axis.Y:
        matrix.set(0, 0, c)
        matrix.set(0, 2, s)
        matrix.set(2, 0, -s)
        matrix.set(2, 2, c)
    elif axis == Axis.Z:
        matrix.set(0, 0, c)
        matrix.set(0, 1, -s)
        matrix.set(1, 0, s)
        matrix.set(1, 1, c)

    return matrix.freeze()

def rotation_x(angle_rad : Scalar=0.0) -> Matrix:
    '''Generates an affine matrix which rotates about the positive x-axis by "angle_rad" radians'''
    return rotation(Axis.X, angle_rad)

def rotation_y(angle_rad : Scalar=0.0) -> Matrix:
    '''Generates an affine matrix which rotates about the positive y-axis by "angle_rad" radians'''
    return rotation(Axis.Y, angle_rad)

def rotation_z(angle_rad : Scalar=0.0) -> Matrix:
    '''Generates an affine matrix which rotates about the positive z-axis by "angle_rad" radians'''
    return rotation(Axis.Z, angle_rad)

def shearing(
        xy : Scalar=0.0,
        xz : Scalar=0.0,
        yx : Scalar=0.0,
        yz : Scalar=0.0,
        zx : Scalar=0.0,
        zy : Scalar=0.0,
    ) -> Matrix:
    '''
    Generates an affine matrix which shears each coordinate in proportion to the other two

    Parameters
    ----------
    xy : float, default 0.0
        How much x moves in proportion to y
    xz : float, default 0.0
        How much x moves in proportion to z
    yx : float, default 0.0
        How much y moves in proportion to x
    yz : float, default 0.0
        How much y moves in proportion to z
    zx : float, default 0.0
        How much z moves in proportion to x
    zy : float, default 0.0
        How much z moves in proportion to y

    Returns
    -------
    shearing_matrix : Matrix[4, 4]
        The affine transformation matrix representing the shear
        With no arguments, returns the Identity matrix
    '''
    matrix = identity4()
    matrix.set(0, 1, xy)
    matrix.set(0, 2, xz)
    matrix.set(1, 0, yx)
    matrix.set(1, 2, yz)
    matrix.set(2, 0, zx)
    matrix.set(2, 1, zy)

    return matrix.freeze()


# COMPOSITION OF AFFINE MATRICES
def chain(*transforms : Matrix) -> Matrix:
    '''
    Compose transforms in the order they are to be APPLIED, i.e.
    chain(T1, T2, T3) == T3 * T2 * T1, which applies T1 first and T3 last

    With no transforms given, returns the Identity matrix
    '''
    matrix = identity4().freeze()
    for transform in transforms:
        matrix = multiply(transform, matrix) # left-multiply each successive transform onto the running total (in order)

    return matrix
