'''Absolute-tolerance floating-point comparison, shared by every equality check in the kernel'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Any

import numpy as np
import numpy.typing as npt

from .arraytypes import Scalar


EPSILON : float = 1e-5 # absolute (NOT relative) tolerance; rotations and inversions rarely land exactly


def equal(a : Scalar, b : Scalar, tol : float=EPSILON) -> bool:
    '''Whether two scalars differ by strictly less than "tol"'''
    return bool(abs(a - b) < tol)

def is_zero(a : Scalar, tol : float=EPSILON) -> bool:
    '''Whether a scalar lies strictly within "tol" of zero'''
    return equal(a, 0.0, tol=tol)

def all_equal(a : npt.ArrayLike, b : npt.ArrayLike, tol : float=EPSILON) -> bool:
    '''
    Element-wise counterpart to equal() for array-likes

    Parameters
    ----------
    a : ArrayLike
        The first array (or anything numpy can coerce to one)
    b : ArrayLike
        The second array; must have the same shape as "a" to compare equal
    tol : float, default EPSILON
        The absolute tolerance below which two elements are considered equal

    Returns
    -------
    bool
        True only if shapes match and EVERY pair of corresponding elements is equal
        Arrays of mismatched shape are never equal (no broadcasting is performed)
    '''
    arr_a : np.ndarray[Any, np.float64] = np.asarray(a, dtype=float)
    arr_b : np.ndarray[Any, np.float64] = np.asarray(b, dtype=float)
    if arr_a.shape != arr_b.shape:
        return False

    return bool(np.all(np.abs(arr_a - arr_b) < tol))
