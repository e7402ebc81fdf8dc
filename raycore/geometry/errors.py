'''Custom Exceptions raised by tuple and matrix operations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from numpy.linalg import LinAlgError


class ShapeMismatchError(ValueError):
    '''Raised when the data supplied to build a matrix does not fill its declared shape'''
    pass

class OutOfBoundsError(IndexError):
    '''Raised when indexing a matrix cell outside of its declared shape'''
    pass

class DimensionMismatchError(ValueError):
    '''Raised when operands have incompatible shapes (e.g. inner dimensions of a matrix product disagree)'''
    pass

class NotInvertibleError(LinAlgError):
    '''Raised when an inverse is requested for a matrix whose determinant lies within tolerance of zero'''
    pass

class DegenerateVectorError(ZeroDivisionError):
    '''Raised when attempting to normalize a tuple with (effectively) zero magnitude'''
    pass
