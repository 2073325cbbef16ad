# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix algebra over any two-dimensional array-like.

Every function accepts an ndarray, a `Matrix` or nested lists, and returns
a new float64 ndarray (or a scalar). Inputs are never modified.
"""

import logging

import numpy as np

from .elimination import gauss_jordan
from .exceptions import (
    CoordinateIndexError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
)
from .utils import EPS, as_2d, require_square

logger = logging.getLogger(__name__)

# Laplace expansion is O(n!); warn above this dimension.
LAPLACE_WARN_DIMENSION = 8


def _same_shape(A: np.ndarray, B: np.ndarray, what: str) -> None:
    if A.shape != B.shape:
        raise DimensionMismatchError(
            f"Cannot {what} a {A.shape[0]}x{A.shape[1]} and a "
            f"{B.shape[0]}x{B.shape[1]} matrix"
        )


def add(A, B) -> np.ndarray:
    A, B = as_2d(A), as_2d(B, "B")
    _same_shape(A, B, "add")
    return A + B


def subtract(A, B) -> np.ndarray:
    A, B = as_2d(A), as_2d(B, "B")
    _same_shape(A, B, "subtract")
    return A - B


def multiply(A, B) -> np.ndarray:
    """
    Matrix product of an m-by-k matrix A and a k-by-n matrix B.

    Raises
    ------
    IncompatibleDimensionsError : if A.columns != B.rows
    """
    A, B = as_2d(A), as_2d(B, "B")
    if A.shape[1] != B.shape[0]:
        raise IncompatibleDimensionsError(
            "The column count of the first matrix "
            f"({A.shape[1]}) does not match the row count of the second "
            f"matrix ({B.shape[0]})"
        )
    return A @ B


def scale(A, scalar: float) -> np.ndarray:
    return as_2d(A) * scalar


def divide(A, scalar: float) -> np.ndarray:
    return scale(A, 1 / scalar)


def transpose(A) -> np.ndarray:
    return as_2d(A).T.copy()


def negate(A) -> np.ndarray:
    return -as_2d(A)


def identity(n: int) -> np.ndarray:
    return np.eye(n, dtype=float)


def augment_horizontally(A, B) -> np.ndarray:
    """Place B to the right of A: [A | B]."""
    A, B = as_2d(A), as_2d(B, "B")
    if A.shape[0] != B.shape[0]:
        raise DimensionMismatchError(
            "Cannot augment horizontally: row counts "
            f"{A.shape[0]} and {B.shape[0]} differ"
        )
    return np.hstack([A, B])


def augment_vertically(A, B) -> np.ndarray:
    """Place B below A."""
    A, B = as_2d(A), as_2d(B, "B")
    if A.shape[1] != B.shape[1]:
        raise DimensionMismatchError(
            "Cannot augment vertically: column counts "
            f"{A.shape[1]} and {B.shape[1]} differ"
        )
    return np.vstack([A, B])


def submatrix(A, row: int, column: int) -> np.ndarray:
    """Return A without the given row and column."""
    A = as_2d(A)
    m, n = A.shape
    if not (0 <= row < m and 0 <= column < n):
        raise CoordinateIndexError(
            f"({row}, {column}) is outside a {m}x{n} matrix"
        )
    return A[np.arange(m) != row][:, np.arange(n) != column]


def _det(A: np.ndarray) -> float:
    n = A.shape[0]
    if n == 0:
        return 1.0
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])

    # Laplace expansion along the first column
    total = 0.0
    for i in range(n):
        if A[i, 0] == 0.0:
            continue
        minor = A[np.arange(n) != i][:, 1:]
        total += ((-1) ** i) * A[i, 0] * _det(minor)
    return total


def det(A) -> float:
    """
    Determinant of an n-by-n matrix A.

    Dimensions 1 and 2 use the closed forms; anything larger is expanded
    recursively along the first column (Laplace), which costs O(n!).
    """
    A = as_2d(A)
    n = require_square(A, "The determinant")
    if n > LAPLACE_WARN_DIMENSION:
        logger.warning(
            "det(): Laplace expansion on a %dx%d matrix is O(n!)", n, n
        )
    return _det(A)


def cofactor(A, row: int, column: int) -> float:
    """(-1)^(row+column) times the minor at (row, column)."""
    A = as_2d(A)
    require_square(A, "A cofactor")
    return ((-1) ** (row + column)) * _det(submatrix(A, row, column))


def cofactor_matrix(A) -> np.ndarray:
    A = as_2d(A)
    n = require_square(A, "The cofactor matrix")
    C = np.empty_like(A)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor(A, i, j)
    return C


def adj(A) -> np.ndarray:
    """
    Adjugate (classical adjoint) of a square matrix A: the transpose of
    its cofactor matrix. Defined for singular matrices as well.
    """
    return cofactor_matrix(A).T.copy()


def trace(A) -> float:
    A = as_2d(A)
    require_square(A, "The trace")
    return float(np.trace(A))


def inverse(A) -> np.ndarray:
    """
    Inverse of a square matrix, computed by Gauss-Jordan elimination
    against the identity.

    Raises
    ------
    EquationNotSolvableError : if A is singular.
    """
    A = as_2d(A)
    n = require_square(A, "The inverse")
    return gauss_jordan(A, identity(n), copy=False)


# ---------------------------------------------------------------------
# Predicates. None of these are cached; all use the epsilon comparator.
# ---------------------------------------------------------------------


def approx_equal_matrices(A, B, eps: float = EPS) -> bool:
    A, B = as_2d(A), as_2d(B, "B")
    if A.shape != B.shape:
        return False
    return bool(np.all(np.abs(A - B) <= eps))


def is_square(A) -> bool:
    m, n = as_2d(A).shape
    return m == n


def is_symmetric(A, eps: float = EPS) -> bool:
    A = as_2d(A)
    return approx_equal_matrices(A, A.T, eps)


def is_skew_symmetric(A, eps: float = EPS) -> bool:
    A = as_2d(A)
    return approx_equal_matrices(-A, A.T, eps)


def is_diagonal(A, eps: float = EPS) -> bool:
    """
    True if A is square with dimension > 1, has no zero on its diagonal and
    only zeros off it.
    """
    A = as_2d(A)
    m, n = A.shape
    if m != n or n <= 1:
        return False
    on_diag = np.eye(n, dtype=bool)
    if np.any(np.abs(A[on_diag]) < eps):
        return False
    return bool(np.all(np.abs(A[~on_diag]) < eps))


def is_triangular(A, eps: float = EPS) -> bool:
    """True if every entry above, or every entry below, the diagonal is zero."""
    A = as_2d(A)
    m, n = A.shape
    if m != n or n <= 1:
        return False
    upper = A[np.triu_indices(n, k=1)]
    lower = A[np.tril_indices(n, k=-1)]
    return bool(np.all(np.abs(upper) < eps) or np.all(np.abs(lower) < eps))


def is_orthogonal(A, eps: float = EPS) -> bool:
    A = as_2d(A)
    m, n = A.shape
    if m != n:
        return False
    return approx_equal_matrices(A @ A.T, identity(n), eps)


def is_singular(A, eps: float = EPS) -> bool:
    return abs(det(A)) < eps
