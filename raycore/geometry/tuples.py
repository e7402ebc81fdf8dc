'''Homogeneous 4-component tuples, representing either points (w=1) or direction vectors (w=0)'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import ClassVar, Iterator
from dataclasses import dataclass

import numpy as np

from .arraytypes import Scalar, Vector4
from .errors import ShapeMismatchError
from .precision import EPSILON, equal


@dataclass(frozen=True, eq=False)
class Tuple:
    '''
    An immutable point or vector in homogeneous coordinates

    The w-component is NOT validated; values other than 0 or 1 can (and do)
    arise as intermediate results of addition and subtraction
    '''
    POINT_W  : ClassVar[float] = 1.0
    VECTOR_W : ClassVar[float] = 0.0

    x : float
    y : float
    z : float
    w : float

    def __post_init__(self) -> None:
        for name in ('x', 'y', 'z', 'w'): # coerce ints and numpy scalars to plain floats
            object.__setattr__(self, name, float(getattr(self, name)))

    # Classification
    @property
    def is_point(self) -> bool:
        '''Whether the tuple is a point, i.e. has w EXACTLY equal to 1'''
        return self.w == self.POINT_W

    @property
    def is_vector(self) -> bool:
        '''Whether the tuple is a vector, i.e. has w EXACTLY equal to 0'''
        return self.w == self.VECTOR_W

    # Comparison
    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return tuples_equal(self, other)
    # DEVNOTE: epsilon-equality is not transitive, so Tuples are deliberately left unhashable

    # Conversion
    def __iter__(self) -> Iterator[float]:
        yield from (self.x, self.y, self.z, self.w)

    def as_array(self) -> Vector4:
        '''Copy of the components as a length-4 float array, in (x, y, z, w) order'''
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    @classmethod
    def from_array(cls, array : Vector4) -> 'Tuple':
        '''Initialize from any length-4 array-like, in (x, y, z, w) order'''
        components = np.asarray(array, dtype=float)
        if components.shape != (4,):
            raise ShapeMismatchError(f'Tuple must be built from exactly 4 components, not array of shape {components.shape}')
        return cls(*components)


# CONSTRUCTORS
def point(x : Scalar, y : Scalar, z : Scalar) -> Tuple:
    '''A position in space (w=1), which is affected by translation'''
    return Tuple(x, y, z, Tuple.POINT_W)

def vector(x : Scalar, y : Scalar, z : Scalar) -> Tuple:
    '''A direction in space (w=0), which is unaffected by translation'''
    return Tuple(x, y, z, Tuple.VECTOR_W)

def is_point(t : Tuple) -> bool:
    return t.is_point

def is_vector(t : Tuple) -> bool:
    return t.is_vector

def tuples_equal(a : Tuple, b : Tuple, tol : float=EPSILON) -> bool:
    '''Component-wise epsilon comparison over all 4 components, INCLUDING w'''
    return all(equal(comp_a, comp_b, tol=tol) for (comp_a, comp_b) in zip(a, b))


# ARITHMETIC
def add(a : Tuple, b : Tuple) -> Tuple:
    '''
    Component-wise sum, including w

    point + vector -> point, vector + vector -> vector;
    point + point yields w=2, which is meaningless but is not rejected
    '''
    return Tuple(a.x + b.x, a.y + b.y, a.z + b.z, a.w + b.w)

def subtract(a : Tuple, b : Tuple) -> Tuple:
    '''
    Component-wise difference, including w

    point - point -> vector, point - vector -> point, vector - vector -> vector
    '''
    return Tuple(a.x - b.x, a.y - b.y, a.z - b.z, a.w - b.w)

def negate(t : Tuple) -> Tuple:
    return Tuple(-t.x, -t.y, -t.z, -t.w)

def scale(t : Tuple, factor : Scalar) -> Tuple:
    '''Multiply every component (including w) by a scalar factor'''
    return Tuple(t.x * factor, t.y * factor, t.z * factor, t.w * factor)

def divide(t : Tuple, divisor : Scalar) -> Tuple:
    '''Divide every component (including w) by a scalar divisor'''
    return Tuple(t.x / divisor, t.y / divisor, t.z / divisor, t.w / divisor)


# PRODUCTS
def dot(a : Tuple, b : Tuple) -> float:
    '''Sum of component-wise products, including w'''
    return a.x*b.x + a.y*b.y + a.z*b.z + a.w*b.w

def cross(a : Tuple, b : Tuple) -> Tuple:
    '''
    3-dimensional cross product of the spatial parts of two tuples (w is ignored)
    Always returns a vector; anti-commutative, i.e. cross(a, b) == negate(cross(b, a))
    '''
    return vector(
        a.y*b.z - a.z*b.y,
        a.z*b.x - a.x*b.z,
        a.x*b.y - a.y*b.x,
    )
