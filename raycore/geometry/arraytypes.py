'''Typehints specific to numpy and other array-related functionality'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Annotated, TypeVar, Union

import numpy as np
import numpy.typing as npt
from numbers import Number


# Numeric typehints
Numeric = TypeVar('Numeric', bound=Number) # typehint a number-like generic type
Scalar = Union[int, float, np.floating] # anything which can be stored in a single matrix cell or tuple component

# Numpy array type annotations
Shape = tuple # the shape field of a numpy array
DType = TypeVar('DType', bound=np.generic) # the data type of a numpy array

M = TypeVar('M', bound=int) # typehint the size of a given dimension
N = TypeVar('N', bound=int) # typehint the size of a given dimension

# Fixed-size vector and array type annotations
## DEV: this type of hard-coding sucks, but is the best we can do with the current Python type system
Vector4  = Annotated[npt.NDArray[DType], Shape[4]]
ArrayNx3 = Annotated[npt.NDArray[DType], Shape[N, 3]]
ArrayNx4 = Annotated[npt.NDArray[DType], Shape[N, 4]]

FlatArray = Annotated[npt.NDArray[np.float64], Shape[N]] # flat, row-major backing store of a matrix
