'''For determining and adjusting the sizes (measures) of tuples'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import math

from .tuples import Tuple, divide
from .errors import DegenerateVectorError
from .precision import EPSILON, is_zero


def magnitude(t : Tuple) -> float:
    '''Euclidean length of a tuple, taken over all 4 components (including w)'''
    return math.sqrt(t.x**2 + t.y**2 + t.z**2 + t.w**2)
length = magnitude

def normalize(t : Tuple, tol : float=EPSILON) -> Tuple:
    '''
    Return a copy of a tuple rescaled to unit magnitude
    The tuple supplied is unchanged (Tuples are immutable)

    Raises DegenerateVectorError for (effectively) zero-length tuples,
    rather than letting NaN or infinite components propagate
    '''
    norm = magnitude(t)
    if is_zero(norm, tol=tol):
        raise DegenerateVectorError(f'Cannot normalize {t!r}, as its magnitude ({norm}) is within {tol} of zero')

    return divide(t, norm)
normalized = normalize
