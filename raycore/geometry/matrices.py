'''
Size-generic, row-major numeric matrices, and the core operations on them

Matrices are writable only while being built; any matrix returned as the
result of a computation is frozen (its backing array is marked read-only)
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Iterable, Self, Sequence, Union

import numpy as np
import numpy.typing as npt

from .arraytypes import Shape, FlatArray, Scalar, M, N
from .errors import ShapeMismatchError, OutOfBoundsError, DimensionMismatchError
from .precision import EPSILON, all_equal
from .tuples import Tuple


class Matrix:
    '''
    A rectangular grid of floats, stored as a flat row-major array
    alongside its numbers of rows and columns

    Parameters
    ----------
    n_rows : int
        The number of rows in the matrix; must be positive
    n_cols : int
        The number of columns in the matrix; must be positive
    data : ArrayLike, optional
        Flat, row-major sequence of exactly n_rows * n_cols values
        If None, the matrix is zero-filled
    '''
    def __init__(self, n_rows : int, n_cols : int, data : Union[npt.ArrayLike, None]=None) -> None:
        if (n_rows < 1) or (n_cols < 1):
            raise ShapeMismatchError(f'Matrix dimensions must be positive, not ({n_rows}, {n_cols})')
        self._n_rows = int(n_rows)
        self._n_cols = int(n_cols)

        if data is None:
            data = np.zeros(self._n_rows * self._n_cols, dtype=float)
        flat_data : FlatArray = np.array(data, dtype=float) # NOTE: always copies, so later changes to the source can't leak in
        if (flat_data.ndim != 1) or (flat_data.size != self._n_rows * self._n_cols):
            raise ShapeMismatchError(
                f'Expected a flat sequence of {self._n_rows}x{self._n_cols}={self._n_rows * self._n_cols} values, '
                f'received array of shape {flat_data.shape}'
            )
        self._data = flat_data

    # Shape
    @property
    def rows(self) -> int:
        return self._n_rows

    @property
    def cols(self) -> int:
        return self._n_cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._n_rows, self._n_cols)

    @property
    def is_square(self) -> bool:
        return self._n_rows == self._n_cols

    @property
    def data(self) -> FlatArray:
        '''Read-only view of the flat, row-major backing array'''
        view = self._data.view()
        view.setflags(write=False)
        return view

    # Build-phase mutability
    @property
    def is_frozen(self) -> bool:
        '''Whether the matrix has left its build phase and can no longer be modified'''
        return not self._data.flags.writeable

    def freeze(self) -> Self:
        '''Permanently disallow modification of this matrix; returns the matrix itself for chaining'''
        self._data.setflags(write=False)
        return self

    def copy(self) -> 'Matrix':
        '''An independent, writable (i.e. unfrozen) copy of this matrix'''
        return self.__class__(self._n_rows, self._n_cols, self._data)

    # Indexed access
    def _flat_index(self, row : int, col : int) -> int:
        '''Position of the cell at (row, col) within the backing array'''
        if not ((0 <= row < self._n_rows) and (0 <= col < self._n_cols)):
            raise OutOfBoundsError(f'Cell ({row}, {col}) lies outside of {self._n_rows}x{self._n_cols} matrix')
        return row * self._n_cols + col

    def get(self, row : int, col : int) -> float:
        return float(self._data[self._flat_index(row, col)])

    def set(self, row : int, col : int, value : Scalar) -> None:
        '''Assign a single cell; only permitted while the matrix is still being built'''
        index = self._flat_index(row, col) # check bounds before frozenness, so bad indices are always reported as such
        if self.is_frozen:
            raise PermissionError(f'Cannot assign to cell ({row}, {col}); matrix is frozen and may no longer be modified')
        self._data[index] = value

    def __getitem__(self, key : tuple[int, int]) -> float:
        (row, col) = key
        return self.get(row, col)

    # Comparison and conversion
    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return matrices_equal(self, other)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._n_rows}, {self._n_cols}, {self._data.tolist()})'

    def as_array(self) -> np.ndarray[Shape[M, N], float]:
        '''Writable 2D copy of the matrix contents'''
        return self._data.reshape(self._n_rows, self._n_cols).copy()

    @classmethod
    def from_array(cls, array : np.ndarray[Shape[M, N], float]) -> 'Matrix':
        '''Initialize from a 2D array-like'''
        array = np.asarray(array, dtype=float)
        if array.ndim != 2:
            raise ShapeMismatchError(f'Matrix must be built from a 2-dimensional array, not one of shape {array.shape}')
        (n_rows, n_cols) = array.shape

        return cls(n_rows, n_cols, array.ravel())


# CONSTRUCTORS
def zero(n_rows : int, n_cols : int) -> Matrix:
    '''All-zero matrix of the given shape, ready to be built upon'''
    return Matrix(n_rows, n_cols)

def from_data(n_rows : int, n_cols : int, data : Sequence[Scalar]) -> Matrix:
    '''Matrix from a flat, row-major sequence of values, which must fill the shape EXACTLY'''
    return Matrix(n_rows, n_cols, data)

def from_rows(rows : Iterable[Sequence[Scalar]]) -> Matrix:
    '''Matrix from a literal nested sequence of rows, which must all have the same length'''
    rows = [list(row) for row in rows]
    if not rows:
        raise ShapeMismatchError('Cannot build a matrix from zero rows')

    row_lengths = {len(row) for row in rows}
    if len(row_lengths) != 1:
        raise ShapeMismatchError(f'All rows must have the same number of entries, found rows of lengths {sorted(row_lengths)}')
    (n_cols,) = row_lengths

    return Matrix(len(rows), n_cols, [value for row in rows for value in row])

def identity(dimension : int) -> Matrix:
    '''Square identity matrix of arbitrary dimension'''
    return Matrix(dimension, dimension, np.eye(dimension, dtype=float).ravel())

def identity4() -> Matrix:
    '''The 4x4 identity; the starting point for every affine transform'''
    return identity(4)


# CORE OPERATIONS
def get(matrix : Matrix, row : int, col : int) -> float:
    return matrix.get(row, col)

def matrices_equal(a : Matrix, b : Matrix, tol : float=EPSILON) -> bool:
    '''Whether two matrices have the same shape and are component-wise equal within tolerance'''
    return (a.shape == b.shape) and all_equal(a.data, b.data, tol=tol)

def transpose(matrix : Matrix) -> Matrix:
    '''Swap rows and columns, i.e. result[c][r] == matrix[r][c], for a matrix of any shape'''
    return Matrix.from_array(matrix.as_array().T).freeze()

def submatrix(matrix : Matrix, row : int, col : int) -> Matrix:
    '''
    Remove one row and one column from a matrix

    Parameters
    ----------
    matrix : Matrix
        An MxN matrix, with both M and N greater than 1
    row : int
        Index of the row to remove
    col : int
        Index of the column to remove

    Returns
    -------
    Matrix
        The (M - 1)x(N - 1) matrix of all remaining cells, in their original relative order
    '''
    matrix._flat_index(row, col) # validate indices against shape
    if (matrix.rows < 2) or (matrix.cols < 2):
        raise DimensionMismatchError(f'Cannot remove a row and column from a {matrix.rows}x{matrix.cols} matrix')

    reduced = np.delete(np.delete(matrix.as_array(), row, axis=0), col, axis=1)
    return Matrix.from_array(reduced).freeze()

def multiply(matrix : Matrix, other : Union[Matrix, Tuple]) -> Union[Matrix, Tuple]:
    '''
    Left-multiply a matrix or a tuple by a matrix

    Parameters
    ----------
    matrix : Matrix
        An MxK matrix
    other : Matrix or Tuple
        If a Matrix, must be KxN, and the MxN matrix product is returned
        If a Tuple, "matrix" must be 4x4, and the tuple is treated as a column vector

    Returns
    -------
    Matrix or Tuple
        The product, of the same type as "other"

    Raises
    ------
    DimensionMismatchError
        If the operands' shapes are incompatible; no zero-filled substitute is ever returned
    '''
    if not isinstance(matrix, Matrix):
        raise TypeError(f'Left operand of multiplication must be a Matrix, not {type(matrix).__name__}')

    if isinstance(other, Matrix):
        if matrix.cols != other.rows:
            raise DimensionMismatchError(
                f'Cannot multiply {matrix.rows}x{matrix.cols} matrix by {other.rows}x{other.cols} matrix; inner dimensions disagree'
            )
        return Matrix.from_array(matrix.as_array() @ other.as_array()).freeze()
    elif isinstance(other, Tuple):
        if matrix.shape != (4, 4):
            raise DimensionMismatchError(f'Only 4x4 matrices can be applied to tuples, not {matrix.rows}x{matrix.cols} matrix')
        return Tuple.from_array(matrix.as_array() @ other.as_array())
    else:
        raise TypeError(f'Can only multiply a Matrix by another Matrix or a Tuple, not by {type(other).__name__}')
