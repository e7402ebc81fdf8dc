'''Tuples, matrices, and the numerics which relate them'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .precision import EPSILON, equal, is_zero, all_equal
from .errors import (
    ShapeMismatchError,
    OutOfBoundsError,
    DimensionMismatchError,
    NotInvertibleError,
    DegenerateVectorError,
)
from .axes import Axis
from .tuples import (
    Tuple,
    point,
    vector,
    is_point,
    is_vector,
    tuples_equal,
    add,
    subtract,
    negate,
    scale,
    divide,
    dot,
    cross,
)
from .measure import magnitude, normalize, normalized
from .matrices import (
    Matrix,
    zero,
    from_data,
    from_rows,
    identity,
    identity4,
    get,
    matrices_equal,
    transpose,
    submatrix,
    multiply,
)
from .determinants import (
    determinant,
    minor,
    cofactor,
    is_invertible,
    adjugate,
    inverse,
)
