'''Geometric kernel for a ray tracer: homogeneous points and vectors, matrices, and 4x4 affine transforms'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'
__version__ = '0.1.0'
