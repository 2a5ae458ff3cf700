"""space3 - fixed-size vectors and matrices for 3D graphics and simulation."""

__version__ = "1.1.1"

from space3.space3_config import Trig, DEFAULT_TRIG
from space3.mathutils import (
    EPSILON,
    EPSILON2,
    Vector3,
    Matrix3,
    SingularMatrixError,
)

__all__ = [
    'Trig',
    'DEFAULT_TRIG',
    'EPSILON',
    'EPSILON2',
    'Vector3',
    'Matrix3',
    'SingularMatrixError',
]
