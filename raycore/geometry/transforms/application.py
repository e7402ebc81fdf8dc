'''Utilities for applying affine transformations to other objects (not necessarily just single Tuples!)'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Any, Iterable, Mapping, Sequence, Union
from typing import Protocol, runtime_checkable

from .homogeneous import (
    to_homogeneous_coords,
    from_homogeneous_coords,
    tuples_to_array,
    array_to_tuples,
)
from ..arraytypes import ArrayNx3
from ..errors import DimensionMismatchError
from ..matrices import Matrix, multiply
from ..tuples import Tuple


def _check_affine_shape(transform : Matrix) -> None:
    if transform.shape != (4, 4):
        raise DimensionMismatchError(f'Affine transformations must be 4x4 matrices, not {transform.rows}x{transform.cols}')


@runtime_checkable
class Transformable(Protocol):
    '''Interface for objects that can undergo an affine transformation'''
    def transformed(self, transform : Matrix) -> Any:
        # DEVNOTE: regarding typehints, returned type may be different to type of self, and is not necessarily transformable either
        ...

def apply_transformation_recursive(
        obj : Union[object, Sequence[Any], Mapping[Any, Any]],
        transform : Matrix,
    ) -> Union[object, Sequence[Any], dict[Any, Any]]:
    '''
    Apply an affine transformation to an object, if it supports such a transformation,
    and, if the object is a Sequence or Mapping, attempt to transform its members recursively

    Parameters
    ----------
    obj : Any
        The object to be transformed, which may be a Tuple, a Transformable, a Sequence, or a Mapping
        Objects of any other type are passed through unchanged
    transform : Matrix[4, 4]
        The affine transformation matrix to apply to the object

    Returns
    -------
    Any
        The transformed object, which (depending on the transformability of the input
        and its members and the return type of the transform method of members),
        may or may not be of the same type as the initial object
    '''
    if isinstance(obj, Tuple):
        return multiply(transform, obj)

    if isinstance(obj, Transformable):
        obj = obj.transformed(transform)

    if isinstance(obj, (str, bytes)): # these are Sequences too, but their members can't meaningfully be transformed
        return obj
    elif isinstance(obj, Sequence): # DEVNOTE: specifically opted for Sequence over Iterable here to avoid double-covering Mappings and unpacking generators
        return type(obj)(
            apply_transformation_recursive(value, transform)
                for value in obj
        )
    elif isinstance(obj, Mapping):
        return {
            key : apply_transformation_recursive(value, transform)
                for (key, value) in obj.items()
        }

    return obj

def apply_transformation_to_tuples(tuples : Iterable[Tuple], transform : Matrix) -> list[Tuple]:
    '''Apply one affine transformation to many Tuples at once, as a single array product'''
    _check_affine_shape(transform)
    coords = tuples_to_array(tuples)
    if coords.shape[0] == 0:
        LOGGER.warning('No tuples were provided to transform; returning empty list')
        return []

    return array_to_tuples(coords @ transform.as_array().T)

def apply_transformation_to_points(
        positions : ArrayNx3,
        transform : Matrix,
        as_vectors : bool=False,
    ) -> ArrayNx3:
    '''
    Take an array of 3D coordinates, apply a 4x4 affine transformation,
    then strip back down to 3 dimensions and return the output

    Parameters
    ----------
    positions : Array[[..., 3], float]
        An array of coordinates in 3-dimensional space
        Can be nested to any level of depth, as long as the last dimension is 3
    transform : Matrix[4, 4]
        A 4x4 affine transformation matrix
    as_vectors : bool, default False
        If True, coordinates are treated as direction vectors (w=0) rather than
        as points (w=1), and so are unaffected by any translational part of the transform

    Returns
    -------
    Array[[..., 3], float]
        An array of the transformed coordinates in 3-dimensional space
        Has the same shape as the input
    '''
    _check_affine_shape(transform)
    homog = to_homogeneous_coords(positions, w=(Tuple.VECTOR_W if as_vectors else Tuple.POINT_W))
    if homog.size == 0:
        LOGGER.warning('Empty array of positions provided; nothing will be transformed')

    return from_homogeneous_coords(homog @ transform.as_array().T) # row-vector form of M @ p, applied to every row at once
