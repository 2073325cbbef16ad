# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

import numpy as np

from .exceptions import DimensionMismatchError, EquationNotSolvableError
from .utils import EPS

logger = logging.getLogger(__name__)


def _prepare(M, name: str, copy: bool) -> np.ndarray:
    if copy:
        M = np.array(M, dtype=float, copy=True)
    elif not isinstance(M, np.ndarray) or M.dtype != np.float64:
        raise TypeError(f"{name} must be a float64 ndarray when copy=False")
    if M.ndim == 1:
        if not copy:
            raise DimensionMismatchError(f"{name} must be two-dimensional")
        M = M[:, None]
    if M.ndim != 2:
        raise DimensionMismatchError(f"{name} must be two-dimensional")
    return M


def gauss_jordan(
    left,
    right,
    copy: bool = True,
    eps: float = EPS,
) -> np.ndarray:
    """
    Gauss-Jordan elimination of the system left @ X = right.

    Used both to solve Ax = b (right is b as a column) and to invert a
    matrix (right is the identity).

    Parameters
    ----------
    left : (m, n) array-like, m >= n
        Coefficient matrix.
    right : (m, k) array-like
        Right-hand side(s); a 1-D input is treated as one column.
    copy : bool
        If True (default) both inputs are copied first and left untouched.
        If False both must be float64 ndarrays and are reduced in place;
        treat them as consumed after the call.
    eps : float
        Pivots and entries with magnitude below eps count as zero.

    Returns
    -------
    X : (n, k) ndarray
        The transformed right side: the solution(s), or the inverse. For
        m > n the eliminated extra rows are dropped.

    Raises
    ------
    EquationNotSolvableError : if some column has no usable pivot
        (singular or underdetermined system), or if the extra rows of an
        overdetermined system contradict the solution.
    """
    L = _prepare(left, "left", copy)
    R = _prepare(right, "right", copy)

    m, n = L.shape
    if R.shape[0] != m:
        raise DimensionMismatchError(
            f"left has {m} rows but right has {R.shape[0]}"
        )
    if m < n:
        raise EquationNotSolvableError(
            f"A {m}x{n} system is underdetermined and cannot be solved clearly."
        )

    for x in range(n):
        # Pivot search: walk down from x until a non-zero entry turns up,
        # then bring that row up to position x in both matrices.
        next_x = x
        while abs(L[x, x]) < eps:
            next_x += 1
            if next_x >= m:
                raise EquationNotSolvableError(
                    "The linear equation system cannot be solved clearly."
                )
            if abs(L[next_x, x]) < eps:
                continue
            logger.debug("gauss_jordan: interchanging rows %d and %d", x, next_x)
            L[[x, next_x]] = L[[next_x, x]]
            R[[x, next_x]] = R[[next_x, x]]

        # Eliminate the pivot column from every other row
        for y in range(m):
            if y != x and abs(L[y, x]) >= eps:
                factor = L[y, x] / L[x, x]
                L[y] -= factor * L[x]
                R[y] -= factor * R[x]

    # Rows below n are fully eliminated; an inconsistent system leaves a
    # non-zero right side there.
    if m > n and np.any(np.abs(R[n:]) >= eps):
        raise EquationNotSolvableError(
            f"The overdetermined {m}x{n} system is inconsistent."
        )

    # Scale each pivot row so the left side becomes the identity
    for i in range(n):
        factor = 1 / L[i, i]
        L[i] *= factor
        R[i] *= factor

    return R[:n]
