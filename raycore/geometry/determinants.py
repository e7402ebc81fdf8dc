'''Determinants, minors, cofactors, and cofactor-based inversion of square matrices'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from .errors import DimensionMismatchError, NotInvertibleError
from .matrices import Matrix, submatrix, zero
from .precision import EPSILON


def _check_square(matrix : Matrix) -> None:
    if not matrix.is_square:
        raise DimensionMismatchError(f'Operation only defined for square matrices, not {matrix.rows}x{matrix.cols} matrix')

def determinant(matrix : Matrix) -> float:
    '''
    Determinant of a square matrix, computed by recursive cofactor expansion along the first row

    Expansion is O(n!), which is fine for the 2x2 - 4x4 matrices of affine transforms;
    anything much larger should be handed to an LU-based determinant instead
    '''
    _check_square(matrix)
    if matrix.rows == 1:
        return matrix.get(0, 0)
    elif matrix.rows == 2:
        return matrix.get(0, 0)*matrix.get(1, 1) - matrix.get(0, 1)*matrix.get(1, 0)

    return sum(
        matrix.get(0, j) * cofactor(matrix, 0, j)
            for j in range(matrix.cols)
    )

def minor(matrix : Matrix, row : int, col : int) -> float:
    '''Determinant of the submatrix left over after deleting the given row and column'''
    return determinant(submatrix(matrix, row, col))

def cofactor(matrix : Matrix, row : int, col : int) -> float:
    '''Minor at (row, col), negated whenever row + col is odd'''
    sign = 1 if (row + col) % 2 == 0 else -1
    return sign * minor(matrix, row, col)

def is_invertible(matrix : Matrix, tol : float=EPSILON) -> bool:
    '''Whether the determinant of a square matrix lies further than "tol" from zero'''
    return abs(determinant(matrix)) > tol

def adjugate(matrix : Matrix) -> Matrix:
    '''Transpose of the cofactor matrix, i.e. the matrix whose (i, j) entry is cofactor(matrix, j, i)'''
    _check_square(matrix)
    adj = zero(matrix.rows, matrix.cols)
    for row in range(matrix.rows):
        for col in range(matrix.cols):
            adj.set(col, row, cofactor(matrix, row, col)) # note the swapped indices; this performs the transposition

    return adj.freeze()

def inverse(matrix : Matrix, tol : float=EPSILON) -> Matrix:
    '''
    Inverse of a square matrix, computed as its adjugate divided by its determinant

    Parameters
    ----------
    matrix : Matrix
        A square matrix
    tol : float, default EPSILON
        Determinants no further than this from zero are treated as singular

    Returns
    -------
    Matrix
        The (frozen) inverse matrix

    Raises
    ------
    NotInvertibleError
        If the matrix is singular (to within tolerance)
    '''
    det = determinant(matrix)
    if not abs(det) > tol: # NOTE: phrased this way (rather than via is_invertible()) to avoid recomputing the determinant
        LOGGER.debug(f'Determinant {det} of {matrix.rows}x{matrix.cols} matrix is within {tol} of zero')
        raise NotInvertibleError(f'Matrix is not invertible, as its determinant ({det}) is within {tol} of zero')

    LOGGER.debug(f'Inverting {matrix.rows}x{matrix.cols} matrix with determinant {det}')
    adj = adjugate(matrix)
    inv = zero(matrix.rows, matrix.cols)
    for row in range(matrix.rows):
        for col in range(matrix.cols):
            inv.set(row, col, adj.get(row, col) / det)

    return inv.freeze()
