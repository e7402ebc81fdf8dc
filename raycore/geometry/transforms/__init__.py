'''
Transformations from the affine group (translation, scaling, rotation, and shearing),
as well as utilities for converting to and from homogeneous coordinates and for applying them in bulk
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .affine import (
    translation,
    scaling,
    rotation,
    rotation_x,
    rotation_y,
    rotation_z,
    shearing,
    chain,
)
from .homogeneous import (
    to_homogeneous_coords,
    from_homogeneous_coords,
    tuples_to_array,
    array_to_tuples,
)
from .application import (
    Transformable,
    apply_transformation_recursive,
    apply_transformation_to_tuples,
    apply_transformation_to_points,
)
