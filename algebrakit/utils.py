# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Iterable

import numpy as np

from .exceptions import DimensionMismatchError

# Shared absolute tolerance for every comparison-based predicate.
EPS: float = 1.6234133e-9


def approx_equal(a: float, b: float, eps: float = EPS) -> bool:
    """Return True if |a - b| <= eps."""
    return abs(a - b) <= eps


def is_zero(value: float, eps: float = EPS) -> bool:
    return abs(value) < eps


def all_zero(values: Iterable[float], eps: float = EPS) -> bool:
    return all(is_zero(v, eps) for v in values)


def as_2d(A, name: str = "A") -> np.ndarray:
    """
    Convert any matrix-like input (ndarray, Matrix, nested lists) into a
    fresh float64 array with exactly two dimensions.
    """
    arr = np.array(A, dtype=float, copy=True)
    if arr.ndim != 2:
        raise DimensionMismatchError(
            f"{name} must be two-dimensional, got {arr.ndim} dimension(s)"
        )
    return arr


def require_square(A: np.ndarray, what: str) -> int:
    """Return the dimension of A or raise if A is not square."""
    m, n = A.shape
    if m != n:
        raise DimensionMismatchError(
            f"{what} is undefined for non-square matrices ({m}x{n})"
        )
    return n
