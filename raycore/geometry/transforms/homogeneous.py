'''For converting between arrays of 3D coordinates, arrays of homogeneous coordinates, and Tuples'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Iterable

import numpy as np

from ..arraytypes import Shape, N, ArrayNx3, ArrayNx4
from ..errors import DimensionMismatchError, DegenerateVectorError
from ..tuples import Tuple


def to_homogeneous_coords(positions : ArrayNx3, w : float=Tuple.POINT_W) -> ArrayNx4:
    '''
    Append a uniform w-component to an arbitrarily-nested array of 3D coordinates

    By default the coordinates are treated as points (w=1);
    pass w=0.0 to treat them as direction vectors instead
    '''
    positions = np.asarray(positions, dtype=float)
    if positions.shape[-1:] != (3,):
        raise DimensionMismatchError(f'Expected an array of 3D coordinates, i.e. with final axis of length 3, not array of shape {positions.shape}')
    w_column = np.full(positions.shape[:-1] + (1,), w, dtype=float)

    return np.concatenate([positions, w_column], axis=-1)

def from_homogeneous_coords(coords : ArrayNx4, project : bool=False) -> ArrayNx3:
    '''
    Strip the w-component from an arbitrarily-nested array of homogeneous coordinates

    Affine transforms never alter w, so stripping is all that's needed by default;
    with project=True, spatial parts are additionally divided through by w,
    which is only defined when no w-component is zero
    '''
    coords = np.asarray(coords, dtype=float)
    if coords.shape[-1:] != (4,):
        raise DimensionMismatchError(f'Expected an array of homogeneous coordinates, i.e. with final axis of length 4, not array of shape {coords.shape}')

    spatial, w = coords[..., :-1], coords[..., -1:]
    if not project:
        return spatial

    if np.any(w == 0.0):
        raise DegenerateVectorError('Cannot project coordinates with w=0 (i.e. vectors) down by their homogeneous component')
    return spatial / w # broadcasts over the final axis

def tuples_to_array(tuples : Iterable[Tuple]) -> np.ndarray[Shape[N, 4], float]:
    '''Stack Tuples into an Nx4 array, one (x, y, z, w) row per Tuple'''
    rows = [t.as_array() for t in tuples]
    if not rows:
        return np.empty((0, 4), dtype=float)
    return np.vstack(rows)

def array_to_tuples(coords : np.ndarray[Shape[N, 4], float]) -> list[Tuple]:
    '''Unstack an Nx4 array back into a list of Tuples'''
    coords = np.asarray(coords, dtype=float)
    if (coords.ndim != 2) or (coords.shape[-1] != 4):
        raise DimensionMismatchError(f'Expected an Nx4 array of homogeneous coordinates, not array of shape {coords.shape}')
    return [Tuple.from_array(row) for row in coords]
