"""
Generic algebra over indexable numeric containers.

Works with Vector3, Matrix3, tuples, lists and numpy arrays alike, so vectors
and matrices share one notion of magnitude, distance and tolerance.
"""
import math

from space3.space3_config import EPSILON, EPSILON2


def _check_dims(u, v):
    if len(u) != len(v):
        raise ValueError(f"Dimension mismatch: {len(u)} != {len(v)}")


def mag2(u):
    """Squared magnitude (avoids sqrt)."""
    s = 0.0
    for x in u:
        s += x * x
    return s


def mag(u):
    """Euclidean magnitude."""
    return math.sqrt(mag2(u))


def dot(u, v):
    """Sum of the products of components."""
    _check_dims(u, v)
    s = 0.0
    for a, b in zip(u, v):
        s += a * b
    return s


def dist2(u, v):
    """Squared distance."""
    _check_dims(u, v)
    s = 0.0
    for a, b in zip(u, v):
        d = a - b
        s += d * d
    return s


def dist(u, v):
    """Distance between two containers seen as points."""
    return math.sqrt(dist2(u, v))


__all__ = ['EPSILON', 'EPSILON2', 'mag', 'mag2', 'dot', 'dist', 'dist2']
