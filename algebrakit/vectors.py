# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Vector operations in python
"""
import math
import operator
from typing import Iterator

import numpy as np

from .exceptions import CoordinateIndexError, DimensionMismatchError, ZeroVectorError
from .matrix import Matrix
from .utils import EPS, all_zero, approx_equal, is_zero


class Vector:
    """
    Vector of arbitrary (but fixed) dimension.

    Components are float64; equality is component-wise within `EPS`.
    """

    def __init__(self, *components: float):
        self._components = np.array(components, dtype=float)

    @classmethod
    def zeros(cls, dimension: int) -> "Vector":
        return cls(*([0.0] * dimension))

    @classmethod
    def from_matrix(cls, matrix) -> "Vector":
        """Build a vector from a 1 x n or n x 1 matrix."""
        arr = np.asarray(matrix, dtype=float)
        if arr.ndim != 2 or 1 not in arr.shape:
            raise DimensionMismatchError(
                f"Only a row or column matrix converts to a vector, got {arr.shape}"
            )
        return cls(*arr.ravel())

    @property
    def dimension(self) -> int:
        return self._components.shape[0]

    def _check_index(self, index) -> int:
        index = operator.index(index)
        if not 0 <= index < self.dimension:
            raise CoordinateIndexError(
                f"index must be between 0 and {self.dimension - 1}, got {index}"
            )
        return index

    def __getitem__(self, index) -> float:
        return float(self._components[self._check_index(index)])

    def __setitem__(self, index, value: float) -> None:
        self._components[self._check_index(index)] = value

    def __iter__(self) -> Iterator[float]:
        return (float(c) for c in self._components)

    def __len__(self) -> int:
        return self.dimension

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._components.copy()
        return self._components.astype(dtype, copy=True)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(str(c) for c in self)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if self.dimension != other.dimension:
            return False
        return all(approx_equal(a, b) for a, b in zip(self, other))

    __hash__ = None

    def __add__(self, other: "Vector") -> "Vector":
        return vec_add(self, other)

    def __sub__(self, other: "Vector") -> "Vector":
        return vec_sub(self, other)

    def __mul__(self, s: float) -> "Vector":
        if isinstance(s, Vector):
            return NotImplemented
        return scalar_mul(s, self)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> "Vector":
        return scalar_div(self, s)

    def __neg__(self) -> "Vector":
        return negate(self)

    @property
    def is_zero(self) -> bool:
        return all_zero(self)

    @property
    def magnitude(self) -> float:
        return length(self)

    @property
    def square_magnitude(self) -> float:
        return square_length(self)

    @property
    def is_normalized(self) -> bool:
        return is_normalized(self)

    def copy(self) -> "Vector":
        return Vector(*self)

    def convert(self, dimension: int) -> "Vector":
        """Truncate, or pad with zeros, to the given dimension."""
        result = Vector.zeros(dimension)
        n = min(dimension, self.dimension)
        result._components[:n] = self._components[:n]
        return result

    def as_horizontal_matrix(self) -> Matrix:
        """1 x n row matrix."""
        return Matrix.from_array(self._components[None, :])

    def as_vertical_matrix(self) -> Matrix:
        """n x 1 column matrix."""
        return Matrix.from_array(self._components[:, None])

    def to_latex(self) -> str:
        body = r" \\ ".join(f"{c:g}" for c in self)
        return r"\left( \begin{array}{c} " + body + r" \end{array} \right)"


def _same_dimension(u: Vector, v: Vector) -> None:
    if u.dimension != v.dimension:
        raise DimensionMismatchError(
            f"The dimensions of the vectors do not equal each other "
            f"({u.dimension} != {v.dimension})"
        )


def _require_3d(*vectors: Vector) -> None:
    for v in vectors:
        if v.dimension != 3:
            raise DimensionMismatchError(
                f"Operation is only defined in R^3, got dimension {v.dimension}"
            )


def vec_add(u: Vector, v: Vector) -> Vector:
    _same_dimension(u, v)
    return Vector(*(u._components + v._components))


def vec_sub(u: Vector, v: Vector) -> Vector:
    _same_dimension(u, v)
    return Vector(*(u._components - v._components))


def scalar_mul(s: float, v: Vector) -> Vector:
    return Vector(*(s * v._components))


def scalar_div(v: Vector, s: float) -> Vector:
    return Vector(*(v._components * (1 / s)))


def negate(v: Vector) -> Vector:
    return Vector(*(-v._components))


def dot_product(u: Vector, v: Vector) -> float:
    """
    Implements the scalar (dot) product between two vectors.
    """
    _same_dimension(u, v)
    return float(u._components @ v._components)


def cross_product(u: Vector, v: Vector) -> Vector:
    """
    Implements classical cross product u x v in R^3
    Defines a vector orthogonal to u and v with magnitude
    equal to the parallelogram area.
    """
    _require_3d(u, v)
    return Vector(
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )


def area(u: Vector, v: Vector) -> float:
    """Area of the parallelogram spanned by u and v (R^3)."""
    return length(cross_product(u, v))


def scalar_triple_product(u: Vector, v: Vector, w: Vector) -> float:
    """Volume of the parallelepiped spanned by u, v and w."""
    return abs(dot_product(cross_product(u, v), w))


def square_length(u: Vector) -> float:
    return float(u._components @ u._components)


def length(u: Vector) -> float:
    return math.sqrt(square_length(u))


def normalize(u: Vector) -> Vector:
    u_len = length(u)
    if is_zero(u_len):
        raise ZeroVectorError("Cannot normalize the zero vector")
    return scalar_div(u, u_len)


def distance(u: Vector, v: Vector) -> float:
    return length(vec_sub(v, u))


def angle(u: Vector, v: Vector) -> float:
    _same_dimension(u, v)
    if u.is_zero or v.is_zero:
        raise ZeroVectorError("Angle undefined for zero-length vector")

    cos_theta = dot_product(u, v) / (length(u) * length(v))
    # clamp angle radians between [-1, 1]
    cos_theta = max(-1.0, min(1.0, cos_theta))
    return math.acos(cos_theta)


def lerp_unclamped(source: Vector, target: Vector, fraction: float) -> Vector:
    # source + (target - source) * fraction
    return vec_add(source, scalar_mul(fraction, vec_sub(target, source)))


def lerp(source: Vector, target: Vector, fraction: float) -> Vector:
    fraction = max(0.0, min(1.0, fraction))
    return lerp_unclamped(source, target, fraction)


def move_towards(source: Vector, target: Vector, max_distance_delta: float) -> Vector:
    """Step from source towards target by max_distance_delta (may overshoot)."""
    d = distance(source, target)
    if is_zero(d):
        return source.copy()
    return lerp_unclamped(source, target, max_distance_delta / d)


def is_normalized(u: Vector, eps: float = EPS) -> bool:
    return approx_equal(length(u), 1.0, eps)


def is_orthogonal(u: Vector, v: Vector, eps: float = EPS) -> bool:
    _same_dimension(u, v)
    return (
        not all_zero(u, eps)
        and not all_zero(v, eps)
        and approx_equal(dot_product(u, v), 0.0, eps)
    )


def is_orthonormal(u: Vector, v: Vector, eps: float = EPS) -> bool:
    return is_orthogonal(u, v, eps) and is_normalized(u, eps) and is_normalized(v, eps)


def is_parallel(u: Vector, v: Vector, eps: float = EPS) -> bool:
    """
    True if v is a scalar multiple of u (both non-zero).

    Components that are zero in both vectors carry no information and are
    skipped; a component that is zero in only one of them rules it out.
    """
    _same_dimension(u, v)
    if all_zero(u, eps) or all_zero(v, eps):
        return False

    ratio = None
    for a, b in zip(u, v):
        a_zero, b_zero = is_zero(a, eps), is_zero(b, eps)
        if a_zero and b_zero:
            continue
        if a_zero or b_zero:
            return False
        if ratio is None:
            ratio = b / a
        elif not approx_equal(b / a, ratio, eps):
            return False
    return True


def cosine_similarity(u: Vector, v: Vector) -> float:
    if u.is_zero or v.is_zero:
        raise ZeroVectorError("Cosine similarity undefined for zero-length vector")
    cos_theta = dot_product(u, v) / (length(u) * length(v))
    return max(-1.0, min(1.0, cos_theta))
