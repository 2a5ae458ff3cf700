"""
space3 math package.

- algebra: generic magnitude / distance helpers and the shared tolerance
- vec3: Vector3, mutable 3D vector
- matrix3: Matrix3, dense 3x3 matrix engine
"""

from .algebra import EPSILON, EPSILON2, mag, mag2, dot, dist, dist2
from .vec3 import Vector3
from .matrix3 import Matrix3, SingularMatrixError

__all__ = [
    'EPSILON',
    'EPSILON2',
    'mag',
    'mag2',
    'dot',
    'dist',
    'dist2',
    'Vector3',
    'Matrix3',
    'SingularMatrixError',
]
