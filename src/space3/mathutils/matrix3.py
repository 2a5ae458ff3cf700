"""
Matrix3 - dense 3x3 matrices over double precision floats.

Storage is a flat list of 9 floats ordered by columns: index `3 * j + i`
holds the entry at row `i`, column `j`. Eg. `m[2]` is the value at first
column and third row.

Conventions:
    - A row index is always noted `i` and a column index `j`.
    - Constructor and generators take components ordered by rows
      (`xx, xy, xz, yx, ...`), they are stored by columns.
    - Named accessors `.ij` with `i`, `j` in `x`, `y`, `z`.
      Eg. `m.xy == m[3]` and `m.yx == m[1]`.

Like Vector3, every operation comes as a mutating form that writes into the
matrix and returns it (`prod`, `inv`, ...) and a copying form suffixed with
`c` (`prodc`, `invc`, ...) that leaves the receiver untouched.

Usage:
    from space3.mathutils.matrix3 import Matrix3
    from space3.mathutils.vec3 import Vector3

    R = Matrix3.rot_z(math.pi / 2)
    u = R.at(Vector3(1, 0, 0))     # u is modified in place, now (0, 1, 0)
    Rinv = R.invc()                # R unchanged
    R.prod(Rinv)                   # R is now the identity
"""
import logging
import numbers

import numpy as np

from space3.space3_config import DEFAULT_TRIG
from .algebra import EPSILON2, dist, mag, mag2
from .vec3 import Vector3

logger = logging.getLogger(__name__)


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is exactly zero."""


def _component(k, doc):
    def getter(self):
        return self._m[k]

    def setter(self, value):
        self._m[k] = float(value)

    return property(getter, setter, doc=doc)


class Matrix3:
    """
    Dense square matrix of dimension 3.

    Instances are independent values. Operations that take another matrix
    only read it, except for the documented receiver.
    """
    __slots__ = ('_m',)

    dim = 9

    def __init__(self, xx=0.0, xy=0.0, xz=0.0,
                 yx=0.0, yy=0.0, yz=0.0,
                 zx=0.0, zy=0.0, zz=0.0):
        self._m = [
            float(xx), float(yx), float(zx),
            float(xy), float(yy), float(zy),
            float(xz), float(yz), float(zz),
        ]

    # =========================================================================
    # Container protocol
    # =========================================================================

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            if not (0 <= i < 3 and 0 <= j < 3):
                raise IndexError(f"Matrix3 index ({i}, {j}) out of range")
            return self._m[3 * j + i]
        return self._m[key]

    def __setitem__(self, key, value):
        if isinstance(key, tuple):
            i, j = key
            if not (0 <= i < 3 and 0 <= j < 3):
                raise IndexError(f"Matrix3 index ({i}, {j}) out of range")
            self._m[3 * j + i] = float(value)
        elif isinstance(key, slice):
            values = [float(v) for v in value]
            if len(self._m[key]) != len(values):
                raise ValueError("Matrix3 slice assignment cannot change the size")
            self._m[key] = values
        else:
            self._m[key] = float(value)

    def __iter__(self):
        return iter(self._m)

    def __len__(self):
        return 9

    def __repr__(self):
        m = self._m
        return (f"Matrix3({m[0]}, {m[3]}, {m[6]}, "
                f"{m[1]}, {m[4]}, {m[7]}, "
                f"{m[2]}, {m[5]}, {m[8]})")

    def __str__(self):
        m = self._m
        return (f"({m[0]}, {m[3]}, {m[6]})\n"
                f"({m[1]}, {m[4]}, {m[7]})\n"
                f"({m[2]}, {m[5]}, {m[8]})")

    def __eq__(self, other):
        if isinstance(other, Matrix3):
            return self.equal(other)
        return NotImplemented

    # Fuzzy equality cannot be hashed consistently
    __hash__ = None

    # =========================================================================
    # Operators (always allocate)
    # =========================================================================

    def __add__(self, other):
        return self.addc(other)

    def __sub__(self, other):
        return self.subc(other)

    def __neg__(self):
        return self.negc()

    def __mul__(self, s):
        if isinstance(s, numbers.Real):
            return self.mulc(s)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, s):
        if isinstance(s, numbers.Real):
            return self.divc(s)
        return NotImplemented

    def __matmul__(self, other):
        """Matrix product with a Matrix3, or matrix-vector product with a Vector3."""
        if isinstance(other, Matrix3):
            return self.prodc(other)
        if isinstance(other, Vector3):
            return self.atc(other)
        return NotImplemented

    # =========================================================================
    # Accessors
    # =========================================================================

    xx = _component(0, "Entry at row x, column x.")
    yx = _component(1, "Entry at row y, column x.")
    zx = _component(2, "Entry at row z, column x.")
    xy = _component(3, "Entry at row x, column y.")
    yy = _component(4, "Entry at row y, column y.")
    zy = _component(5, "Entry at row z, column y.")
    xz = _component(6, "Entry at row x, column z.")
    yz = _component(7, "Entry at row y, column z.")
    zz = _component(8, "Entry at row z, column z.")

    @property
    def x(self):
        """First row as vector."""
        m = self._m
        return Vector3(m[0], m[3], m[6])

    @x.setter
    def x(self, u):
        m = self._m
        m[0], m[3], m[6] = float(u[0]), float(u[1]), float(u[2])

    @property
    def y(self):
        """Second row as vector."""
        m = self._m
        return Vector3(m[1], m[4], m[7])

    @y.setter
    def y(self, u):
        m = self._m
        m[1], m[4], m[7] = float(u[0]), float(u[1]), float(u[2])

    @property
    def z(self):
        """Third row as vector."""
        m = self._m
        return Vector3(m[2], m[5], m[8])

    @z.setter
    def z(self, u):
        m = self._m
        m[2], m[5], m[8] = float(u[0]), float(u[1]), float(u[2])

    @property
    def xyz(self):
        """Rows of the matrix as vectors."""
        m = self._m
        return [
            Vector3(m[0], m[3], m[6]),
            Vector3(m[1], m[4], m[7]),
            Vector3(m[2], m[5], m[8]),
        ]

    @xyz.setter
    def xyz(self, rows):
        r0, r1, r2 = rows
        self._m[:] = [float(a) for a in (
            r0[0], r1[0], r2[0],
            r0[1], r1[1], r2[1],
            r0[2], r1[2], r2[2],
        )]

    @property
    def xyzt(self):
        """Columns of the matrix as vectors."""
        m = self._m
        return [
            Vector3(m[0], m[1], m[2]),
            Vector3(m[3], m[4], m[5]),
            Vector3(m[6], m[7], m[8]),
        ]

    @xyzt.setter
    def xyzt(self, cols):
        c0, c1, c2 = cols
        self._m[:] = [float(a) for a in (
            c0[0], c0[1], c0[2],
            c1[0], c1[1], c1[2],
            c2[0], c2[1], c2[2],
        )]

    def row(self, i):
        """i-th row of the matrix."""
        if not 0 <= i < 3:
            raise IndexError(f"Matrix3 row {i} out of range")
        m = self._m
        return [m[i], m[3 + i], m[6 + i]]

    def col(self, j):
        """j-th column of the matrix."""
        if not 0 <= j < 3:
            raise IndexError(f"Matrix3 column {j} out of range")
        shift = 3 * j
        return self._m[shift:shift + 3]

    def mag(self):
        """Frobenius norm."""
        return mag(self._m)

    def mag2(self):
        return mag2(self._m)

    def det(self):
        """Determinant, cofactor expansion along the first column."""
        xx, yx, zx, xy, yy, zy, xz, yz, zz = self._m
        return (xx * (yy * zz - yz * zy)
                + yx * (xz * zy - xy * zz)
                + zx * (xy * yz - xz * yy))

    def equal(self, other):
        """Fuzzy equality, squared distance below EPSILON2."""
        return self.dist2(other) < EPSILON2

    def zero(self):
        """Fuzzy test for the zero matrix."""
        return mag2(self._m) < EPSILON2

    def array(self):
        """Components as a flat list ordered by rows."""
        m = self._m
        return [m[0], m[3], m[6], m[1], m[4], m[7], m[2], m[5], m[8]]

    def array2(self):
        """Components as a list of rows."""
        m = self._m
        return [[m[0], m[3], m[6]], [m[1], m[4], m[7]], [m[2], m[5], m[8]]]

    def to_numpy(self):
        """3x3 numpy array, `arr[i, j]` is the entry at row `i`, column `j`."""
        return np.array(self._m, dtype=np.float64).reshape((3, 3), order="F")

    # =========================================================================
    # State
    # =========================================================================

    def assign(self, xx, xy, xz, yx, yy, yz, zx, zy, zz):
        """Explicitly sets all the components, given ordered by rows."""
        self._m[:] = [float(a) for a in (xx, yx, zx, xy, yy, zy, xz, yz, zz)]
        return self

    def copy(self, other):
        self._m[:] = other._m
        return self

    def clone(self):
        m = Matrix3.__new__(Matrix3)
        m._m = self._m[:]
        return m

    def reset0(self):
        """Sets all the components to zero."""
        self._m[:] = [0.0] * 9
        return self

    def reset1(self):
        """Sets matrix to identity."""
        self._m[:] = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
        return self

    # =========================================================================
    # Elementwise arithmetic
    # =========================================================================

    def fill(self, s):
        self._m[:] = [float(s)] * 9
        return self

    def fillc(self, s):
        return self.clone().fill(s)

    def norm(self):
        """Divides by the Frobenius norm. Raises ZeroDivisionError for a null matrix."""
        return self.div(mag(self._m))

    def normc(self):
        return self.clone().norm()

    def add(self, other):
        m = self._m
        m[:] = [a + b for a, b in zip(m, other._m)]
        return self

    def addc(self, other):
        return self.clone().add(other)

    def sub(self, other):
        m = self._m
        m[:] = [a - b for a, b in zip(m, other._m)]
        return self

    def subc(self, other):
        return self.clone().sub(other)

    def neg(self):
        m = self._m
        m[:] = [-a for a in m]
        return self

    def negc(self):
        return self.clone().neg()

    def mul(self, s):
        m = self._m
        m[:] = [a * s for a in m]
        return self

    def mulc(self, s):
        return self.clone().mul(s)

    def div(self, s):
        m = self._m
        m[:] = [a / s for a in m]
        return self

    def divc(self, s):
        return self.clone().div(s)

    def lerp(self, other, t):
        """Linear interpolation towards `other`, `t = 1` lands on `other`."""
        m = self._m
        m[:] = [a + (b - a) * t for a, b in zip(m, other._m)]
        return self

    def lerpc(self, other, t):
        return self.clone().lerp(other, t)

    # =========================================================================
    # Matrix algebra
    # =========================================================================

    def trans(self):
        """Transpose in place."""
        m = self._m
        m[1], m[3] = m[3], m[1]
        m[2], m[6] = m[6], m[2]
        m[5], m[7] = m[7], m[5]
        return self

    def transc(self):
        return self.clone().trans()

    def prod(self, other):
        """
        Right product, `self = self x other`.

        Both operands are read before writing, `m.prod(m)` squares `m`.
        """
        xx, yx, zx, xy, yy, zy, xz, yz, zz = self._m
        oxx, oyx, ozx, oxy, oyy, ozy, oxz, oyz, ozz = other._m
        self._m[:] = [
            xx * oxx + xy * oyx + xz * ozx,
            yx * oxx + yy * oyx + yz * ozx,
            zx * oxx + zy * oyx + zz * ozx,
            xx * oxy + xy * oyy + xz * ozy,
            yx * oxy + yy * oyy + yz * ozy,
            zx * oxy + zy * oyy + zz * ozy,
            xx * oxz + xy * oyz + xz * ozz,
            yx * oxz + yy * oyz + yz * ozz,
            zx * oxz + zy * oyz + zz * ozz,
        ]
        return self

    def prodc(self, other):
        return self.clone().prod(other)

    def adj(self):
        """Adjoint matrix, transpose of the matrix of cofactors."""
        xx, yx, zx, xy, yy, zy, xz, yz, zz = self._m
        self._m[:] = [
            yy * zz - yz * zy,
            yz * zx - yx * zz,
            yx * zy - yy * zx,
            xz * zy - xy * zz,
            xx * zz - xz * zx,
            xy * zx - xx * zy,
            xy * yz - xz * yy,
            xz * yx - xx * yz,
            xx * yy - xy * yx,
        ]
        return self

    def adjc(self):
        return self.clone().adj()

    def inv(self):
        """
        Inverse in place, computed as adjoint over determinant.

        The determinant is compared to zero exactly, nearly singular
        matrices are inverted and may produce huge components.

        Raises:
            SingularMatrixError: If the determinant is zero. The matrix is
                left unchanged.
        """
        xx, yx, zx, xy, yy, zy, xz, yz, zz = self._m
        cxx = yy * zz - yz * zy
        cxy = xz * zy - xy * zz
        cxz = xy * yz - xz * yy

        det = xx * cxx + yx * cxy + zx * cxz
        if det == 0.0:
            logger.debug(f"Attempted to invert singular matrix:\n{self}")
            raise SingularMatrixError(f"Matrix is singular:\n{self}")

        self._m[:] = [
            cxx / det,
            (yz * zx - yx * zz) / det,
            (yx * zy - yy * zx) / det,
            cxy / det,
            (xx * zz - xz * zx) / det,
            (xy * zx - xx * zy) / det,
            cxz / det,
            (xz * yx - xx * yz) / det,
            (xx * yy - xy * yx) / det,
        ]
        return self

    def invc(self):
        return self.clone().inv()

    def _rpow(self, exp):
        # Binary exponentiation: square, recurse on half, fix odd exponents
        if exp > 1:
            base = self.clone()
            self.prod(base)
            if exp % 2 == 0:
                self._rpow(exp // 2)
            else:
                self._rpow((exp - 1) // 2)
                self.prod(base)

    def pow(self, exp):
        """
        Integer power of the matrix.

        Negative exponents invert first, zero gives the identity even for a
        singular matrix.

        Raises:
            TypeError: If `exp` is not an integer.
            SingularMatrixError: If `exp` is negative and the matrix is singular.
        """
        if isinstance(exp, bool) or not isinstance(exp, numbers.Integral):
            raise TypeError(f"Matrix exponent must be an integer, got {exp!r}")
        exp = int(exp)
        logger.debug(f"Matrix power with exponent {exp}")
        if exp < 0:
            self.inv()
        if exp == 0:
            return self.reset1()
        self._rpow(abs(exp))
        return self

    def powc(self, exp):
        return self.clone().pow(exp)

    def dot(self, other):
        """Sum of the products of the components."""
        s = 0.0
        for a, b in zip(self._m, other._m):
            s += a * b
        return s

    def dist(self, other):
        return dist(self._m, other._m)

    def dist2(self, other):
        s = 0.0
        for a, b in zip(self._m, other._m):
            d = a - b
            s += d * d
        return s

    # =========================================================================
    # Vector interop
    # =========================================================================

    def at(self, u):
        """
        Product between matrix and vector.

        The result is stored in `u`.

        Returns:
            Reference to `u`.
        """
        m = self._m
        ux, uy, uz = u[0], u[1], u[2]
        u[0] = m[0] * ux + m[3] * uy + m[6] * uz
        u[1] = m[1] * ux + m[4] * uy + m[7] * uz
        u[2] = m[2] * ux + m[5] * uy + m[8] * uz
        return u

    def atc(self, u):
        return self.at(u.clone())

    @staticmethod
    def affine(m, u, v):
        """
        Affine transformation of the vector, `v = m . v + u`.

        Args:
            m: Matrix of the transformation
            u: Translation of the transformation
            v: Vector parameter of the transformation, receives the result

        Returns:
            Reference to `v`.
        """
        a = m._m
        vx, vy, vz = v[0], v[1], v[2]
        v[0] = a[0] * vx + a[3] * vy + a[6] * vz + u[0]
        v[1] = a[1] * vx + a[4] * vy + a[7] * vz + u[1]
        v[2] = a[2] * vx + a[5] * vy + a[8] * vz + u[2]
        return v

    @staticmethod
    def tensor(u, v=None):
        """Tensor product of two vectors, `u` with itself if `v` is omitted."""
        if v is None:
            v = u
        return Matrix3(
            u[0] * v[0], u[0] * v[1], u[0] * v[2],
            u[1] * v[0], u[1] * v[1], u[1] * v[2],
            u[2] * v[0], u[2] * v[1], u[2] * v[2],
        )

    # =========================================================================
    # Generators
    # =========================================================================

    @staticmethod
    def zeros():
        return Matrix3(0, 0, 0, 0, 0, 0, 0, 0, 0)

    @staticmethod
    def ones():
        return Matrix3(1, 1, 1, 1, 1, 1, 1, 1, 1)

    @staticmethod
    def eye():
        """Identity matrix."""
        return Matrix3(1, 0, 0, 0, 1, 0, 0, 0, 1)

    @staticmethod
    def scalar(s):
        """Diagonal matrix filled with a single value."""
        return Matrix3(s, 0, 0, 0, s, 0, 0, 0, s)

    @staticmethod
    def diag(xx, yy, zz):
        return Matrix3(xx, 0, 0, 0, yy, 0, 0, 0, zz)

    @staticmethod
    def sym(xx, yy, zz, xy, yz, xz=0.0):
        """Symmetric matrix from its diagonal and upper triangle."""
        return Matrix3(xx, xy, xz, xy, yy, yz, xz, yz, zz)

    @staticmethod
    def asym(xx, yy, zz, xy, yz, xz=0.0):
        """Antisymmetric matrix from its diagonal and upper triangle, lower triangle is negated."""
        return Matrix3(xx, xy, xz, -xy, yy, yz, -xz, -yz, zz)

    @staticmethod
    def e(i, j):
        """Canonical matrix, `0` everywhere except a `1` at row `i`, column `j`."""
        if not (0 <= i < 3 and 0 <= j < 3):
            raise IndexError(f"Canonical matrix index ({i}, {j}) out of range")
        eij = Matrix3.zeros()
        eij._m[3 * j + i] = 1.0
        return eij

    @staticmethod
    def rot_x(theta, trig=DEFAULT_TRIG):
        """Anticlockwise rotation of axis (0, ex)."""
        c, s = trig.cos(theta), trig.sin(theta)
        return Matrix3(1, 0, 0, 0, c, -s, 0, s, c)

    @staticmethod
    def rot_y(theta, trig=DEFAULT_TRIG):
        """Anticlockwise rotation of axis (0, ey)."""
        c, s = trig.cos(theta), trig.sin(theta)
        return Matrix3(c, 0, s, 0, 1, 0, -s, 0, c)

    @staticmethod
    def rot_z(theta, trig=DEFAULT_TRIG):
        """Anticlockwise rotation of axis (0, ez)."""
        c, s = trig.cos(theta), trig.sin(theta)
        return Matrix3(c, -s, 0, s, c, 0, 0, 0, 1)

    @staticmethod
    def rot(u, theta, trig=DEFAULT_TRIG):
        """
        Anticlockwise rotation around an axis (Rodrigues formula).

        Args:
            u: Unit vector, axis of rotation
            theta: Angle of rotation
            trig: Cosine and sine used to build the matrix

        Returns:
            New rotation matrix.
        """
        c, s = trig.cos(theta), trig.sin(theta)
        k = 1.0 - c
        ux, uy, uz = u[0], u[1], u[2]
        kxy = k * ux * uy
        kxz = k * ux * uz
        kyz = k * uy * uz
        return Matrix3(
            k * ux * ux + c, kxy - uz * s, kxz + uy * s,
            kxy + uz * s, k * uy * uy + c, kyz - ux * s,
            kxz - uy * s, kyz + ux * s, k * uz * uz + c,
        )

    @staticmethod
    def from_array(arr):
        """Matrix from a flat sequence of 9 components ordered by rows."""
        if len(arr) != 9:
            raise ValueError(f"Expected 9 components, got {len(arr)}")
        return Matrix3(*arr)

    @staticmethod
    def from_array2(arr):
        """Matrix from a sequence of rows, `arr[i]` is the i-th row."""
        if len(arr) != 3 or any(len(r) != 3 for r in arr):
            raise ValueError("Expected 3 rows of 3 components")
        return Matrix3(
            arr[0][0], arr[0][1], arr[0][2],
            arr[1][0], arr[1][1], arr[1][2],
            arr[2][0], arr[2][1], arr[2][2],
        )

    @staticmethod
    def from_xyz(rows):
        """Matrix from three Vector3 rows."""
        r0, r1, r2 = rows
        return Matrix3(
            r0[0], r0[1], r0[2],
            r1[0], r1[1], r1[2],
            r2[0], r2[1], r2[2],
        )

    @staticmethod
    def from_numpy(arr):
        """Matrix from a 3x3 array-like, `arr[i, j]` is the entry at row `i`, column `j`."""
        a = np.asarray(arr, dtype=np.float64)
        if a.shape != (3, 3):
            raise ValueError(f"Expected array of shape (3, 3), got {a.shape}")
        return Matrix3(*a.ravel().tolist())
