"""
Pure Python 3D vector math - no numpy dependency for hot paths.

This module provides Vector3, a lightweight mutable 3D vector class.
For 3-element vectors, pure Python is much faster than numpy arrays
due to avoiding array creation overhead.

Every operation comes in two forms:
    - a mutating form (`add`, `mul`, ...) that writes into the vector and
      returns it, so calls can be chained without allocating
    - a copying form (`addc`, `mulc`, ...) that clones first and leaves
      the receiver untouched

Vector3 also supports arithmetic operators (+, -, *, /) and indexing;
operators always return new vectors.
"""
import math

from .algebra import EPSILON2


class Vector3:
    """
    A lightweight mutable 3D vector.

    Stores components directly as attributes for fast access.
    Supports indexing like a tuple/list for compatibility.
    """
    __slots__ = ('x', 'y', 'z')

    dim = 3

    def __init__(self, x=0.0, y=0.0, z=0.0):
        # Fast path: x is a plain number
        try:
            self.x = float(x)
            self.y = float(y)
            self.z = float(z)
        except TypeError:
            # x is a sequence (tuple, list, array, Vector3)
            if len(x) != 3:
                raise ValueError(f"Vector3 needs 3 components, got {len(x)}") from None
            self.x = float(x[0])
            self.y = float(x[1])
            self.z = float(x[2])

    def __getitem__(self, i):
        if i == 0: return self.x
        if i == 1: return self.y
        if i == 2: return self.z
        raise IndexError(f"Vector3 index {i} out of range")

    def __setitem__(self, i, value):
        if i == 0: self.x = float(value)
        elif i == 1: self.y = float(value)
        elif i == 2: self.z = float(value)
        else:
            raise IndexError(f"Vector3 index {i} out of range")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def __repr__(self):
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def __str__(self):
        return f"({self.x}, {self.y}, {self.z})"

    def __eq__(self, other):
        if isinstance(other, Vector3):
            return self.equal(other)
        return NotImplemented

    __hash__ = None

    # -------------------------------------------------------------------------
    # Operators (always allocate)
    # -------------------------------------------------------------------------

    def __add__(self, other):
        return Vector3(self.x + other[0], self.y + other[1], self.z + other[2])

    def __radd__(self, other):
        return Vector3(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other):
        return Vector3(self.x - other[0], self.y - other[1], self.z - other[2])

    def __rsub__(self, other):
        return Vector3(other[0] - self.x, other[1] - self.y, other[2] - self.z)

    def __mul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar):
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    # -------------------------------------------------------------------------
    # Metrics
    # -------------------------------------------------------------------------

    def mag2(self):
        """Squared length (avoids sqrt)."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self):
        """Vector length/magnitude."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other):
        """Dot product."""
        return self.x * other[0] + self.y * other[1] + self.z * other[2]

    def dist2(self, other):
        """Squared distance."""
        dx, dy, dz = self.x - other[0], self.y - other[1], self.z - other[2]
        return dx * dx + dy * dy + dz * dz

    def dist(self, other):
        """Distance between two points."""
        return math.sqrt(self.dist2(other))

    def equal(self, other):
        """Fuzzy equality, squared distance below EPSILON2."""
        return self.dist2(other) < EPSILON2

    def zero(self):
        """Fuzzy zero test."""
        return self.mag2() < EPSILON2

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def assign(self, x, y, z):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        return self

    def copy(self, other):
        self.x = float(other[0])
        self.y = float(other[1])
        self.z = float(other[2])
        return self

    def clone(self):
        return Vector3(self.x, self.y, self.z)

    def array(self):
        """Convert to list."""
        return [self.x, self.y, self.z]

    # -------------------------------------------------------------------------
    # In-place arithmetic and copying counterparts
    # -------------------------------------------------------------------------

    def add(self, other):
        self.x += other[0]
        self.y += other[1]
        self.z += other[2]
        return self

    def addc(self, other):
        return self.clone().add(other)

    def sub(self, other):
        self.x -= other[0]
        self.y -= other[1]
        self.z -= other[2]
        return self

    def subc(self, other):
        return self.clone().sub(other)

    def neg(self):
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    def negc(self):
        return self.clone().neg()

    def mul(self, s):
        self.x *= s
        self.y *= s
        self.z *= s
        return self

    def mulc(self, s):
        return self.clone().mul(s)

    def div(self, s):
        # All quotients are computed before the first write
        self.x, self.y, self.z = self.x / s, self.y / s, self.z / s
        return self

    def divc(self, s):
        return self.clone().div(s)

    def lerp(self, other, t):
        self.x += (other[0] - self.x) * t
        self.y += (other[1] - self.y) * t
        self.z += (other[2] - self.z) * t
        return self

    def lerpc(self, other, t):
        return self.clone().lerp(other, t)

    def norm(self):
        """Normalize in place. Raises ZeroDivisionError for a null vector."""
        return self.div(self.mag())

    def normc(self):
        return self.clone().norm()

    def cross(self, other):
        """Cross product, stored in this vector."""
        x, y, z = self.x, self.y, self.z
        ox, oy, oz = other[0], other[1], other[2]
        self.x = y * oz - z * oy
        self.y = z * ox - x * oz
        self.z = x * oy - y * ox
        return self

    def crossc(self, other):
        return self.clone().cross(other)

    # -------------------------------------------------------------------------
    # Generators
    # -------------------------------------------------------------------------

    @staticmethod
    def zeros():
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def ones():
        return Vector3(1.0, 1.0, 1.0)

    @staticmethod
    def ex():
        """First vector of the canonical basis."""
        return Vector3(1.0, 0.0, 0.0)

    @staticmethod
    def ey():
        """Second vector of the canonical basis."""
        return Vector3(0.0, 1.0, 0.0)

    @staticmethod
    def ez():
        """Third vector of the canonical basis."""
        return Vector3(0.0, 0.0, 1.0)

    @staticmethod
    def from_array(arr):
        if len(arr) != 3:
            raise ValueError(f"Expected 3 components, got {len(arr)}")
        return Vector3(arr[0], arr[1], arr[2])
