# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Matrix types.

`Matrix` is a fixed-shape grid of doubles backed by a float64 ndarray.
`SquareMatrix` adds determinant, trace, inverse and the cofactor family.
All algebra is delegated to `matrix_functions`, so the same code paths
serve plain ndarrays and these wrappers.
"""

import operator
from typing import Iterable, Sequence, Tuple

import numpy as np

from . import matrix_functions as mf
from .exceptions import CoordinateIndexError, DimensionMismatchError
from .utils import EPS, as_2d


class Matrix:
    """
    Rectangular matrix with a shape fixed at construction.

    Elements are addressed as ``M[row, column]``; indices outside
    ``[0, row_count)`` x ``[0, column_count)`` raise `CoordinateIndexError`.
    Equality is element-wise within `EPS`.
    """

    def __init__(self, row_count: int, column_count: int) -> None:
        if row_count < 0 or column_count < 0:
            raise DimensionMismatchError("Matrix dimensions must be non-negative")
        self._fields = np.zeros((row_count, column_count), dtype=float)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> "Matrix":
        return cls.from_array(rows)

    @classmethod
    def from_array(cls, A) -> "Matrix":
        arr = as_2d(A)
        obj = cls.__new__(cls)
        obj._init_from(arr)
        return obj

    def _init_from(self, arr: np.ndarray) -> None:
        self._fields = arr

    def _wrap(self, arr: np.ndarray) -> "Matrix":
        """Wrap a computed result, keeping the square type when it still fits."""
        if isinstance(self, SquareMatrix) and arr.shape[0] == arr.shape[1]:
            return SquareMatrix.from_array(arr)
        return Matrix.from_array(arr)

    # -----------------------------------------------------------------
    # Shape and element access
    # -----------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._fields.shape[0]

    @property
    def column_count(self) -> int:
        return self._fields.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._fields.shape

    def _check_index(self, key) -> Tuple[int, int]:
        try:
            row, column = key
            row, column = operator.index(row), operator.index(column)
        except (TypeError, ValueError):
            raise TypeError(
                "Matrix indices must be a (row, column) pair of ints"
            ) from None
        if not (0 <= row < self.row_count and 0 <= column < self.column_count):
            raise CoordinateIndexError(
                f"({row}, {column}) is outside a "
                f"{self.row_count}x{self.column_count} matrix"
            )
        return row, column

    def __getitem__(self, key) -> float:
        return float(self._fields[self._check_index(key)])

    def __setitem__(self, key, value: float) -> None:
        self._fields[self._check_index(key)] = value

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._fields.copy()
        return self._fields.astype(dtype, copy=True)

    def to_numpy(self) -> np.ndarray:
        return self._fields.copy()

    def to_list(self) -> list:
        return self._fields.tolist()

    def copy(self) -> "Matrix":
        return type(self).from_array(self._fields)

    def get_row_vector(self, index: int):
        from .vectors import Vector

        self._check_index((index, 0))
        return Vector(*self._fields[index, :])

    def get_column_vector(self, index: int):
        from .vectors import Vector

        self._check_index((0, index))
        return Vector(*self._fields[:, index])

    # -----------------------------------------------------------------
    # Derived matrices
    # -----------------------------------------------------------------

    @property
    def transpose(self) -> "Matrix":
        return self._wrap(mf.transpose(self._fields))

    @property
    def negate(self) -> "Matrix":
        return self._wrap(mf.negate(self._fields))

    def submatrix(self, row: int, column: int) -> "Matrix":
        return self._wrap(mf.submatrix(self._fields, row, column))

    def augment_horizontally(self, other) -> "Matrix":
        return Matrix.from_array(mf.augment_horizontally(self._fields, other))

    def augment_vertically(self, other) -> "Matrix":
        return Matrix.from_array(mf.augment_vertically(self._fields, other))

    # -----------------------------------------------------------------
    # Predicates
    # -----------------------------------------------------------------

    @property
    def is_square(self) -> bool:
        return self.row_count == self.column_count

    @property
    def is_symmetric(self) -> bool:
        return mf.is_symmetric(self._fields)

    @property
    def is_skew_symmetric(self) -> bool:
        return mf.is_skew_symmetric(self._fields)

    @property
    def is_diagonal(self) -> bool:
        return mf.is_diagonal(self._fields)

    @property
    def is_triangular(self) -> bool:
        return mf.is_triangular(self._fields)

    # -----------------------------------------------------------------
    # Operators
    # -----------------------------------------------------------------

    def __add__(self, other) -> "Matrix":
        return self._wrap(mf.add(self._fields, other))

    def __sub__(self, other) -> "Matrix":
        return self._wrap(mf.subtract(self._fields, other))

    def __neg__(self) -> "Matrix":
        return self.negate

    def __mul__(self, scalar) -> "Matrix":
        if not isinstance(scalar, (int, float, np.number)):
            return NotImplemented
        return self._wrap(mf.scale(self._fields, scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar) -> "Matrix":
        return self._wrap(mf.divide(self._fields, scalar))

    def __matmul__(self, other) -> "Matrix":
        return self._wrap(mf.multiply(self._fields, other))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return mf.approx_equal_matrices(self._fields, other._fields, EPS)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.from_rows({self._fields.tolist()})"

    def __str__(self) -> str:
        rows = [
            "\t" + ", ".join(repr(float(v)) for v in row) for row in self._fields
        ]
        return "{\n" + "\n".join(rows) + "\n}"


class SquareMatrix(Matrix):
    """An n-by-n `Matrix`."""

    def __init__(self, dimension: int) -> None:
        super().__init__(dimension, dimension)

    def _init_from(self, arr: np.ndarray) -> None:
        if arr.shape[0] != arr.shape[1]:
            raise DimensionMismatchError(
                "Cannot create a square matrix as the row count "
                f"({arr.shape[0]}) does not match the column count ({arr.shape[1]})"
            )
        super()._init_from(arr)

    @classmethod
    def from_matrix(cls, matrix) -> "SquareMatrix":
        return cls.from_array(matrix)

    @classmethod
    def identity(cls, dimension: int) -> "SquareMatrix":
        return cls.from_array(mf.identity(dimension))

    @property
    def dimension(self) -> int:
        return self.row_count

    @property
    def determinant(self) -> float:
        return mf.det(self._fields)

    @property
    def trace(self) -> float:
        return mf.trace(self._fields)

    @property
    def inverse(self) -> "SquareMatrix":
        return SquareMatrix.from_array(mf.inverse(self._fields))

    def cofactor(self, row: int, column: int) -> float:
        return mf.cofactor(self._fields, row, column)

    @property
    def cofactor_matrix(self) -> "SquareMatrix":
        return SquareMatrix.from_array(mf.cofactor_matrix(self._fields))

    @property
    def adjugate(self) -> "SquareMatrix":
        return SquareMatrix.from_array(mf.adj(self._fields))

    @property
    def is_singular(self) -> bool:
        return mf.is_singular(self._fields)

    @property
    def is_orthogonal(self) -> bool:
        return mf.is_orthogonal(self._fields)
