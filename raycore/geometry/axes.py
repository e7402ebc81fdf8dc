'''Indicators for coordinate axis-specific operations and indexing'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from enum import Enum
from typing import Union


class Axis(Enum):
    '''
    For making clear when a particular coordinate direction
    is chosen for a task, particularly when rotating
    '''
    X = 0
    Y = 1
    Z = 2

    # lowercase aliases for the lazy
    x = 0
    y = 1
    z = 2

    @classmethod
    def resolve(cls, axis : Union['Axis', str]) -> 'Axis':
        '''Coerce either an Axis or its (case-insensitive) name into an Axis'''
        if isinstance(axis, cls):
            return axis
        try:
            return cls[str(axis).upper()]
        except KeyError:
            raise ValueError(f'Axis must be one of {[member.name for member in cls]}, not {axis!r}') from None
