# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import numpy as np
import pytest

from algebrakit.exceptions import (
    CoordinateIndexError,
    DimensionMismatchError,
    EquationNotSolvableError,
    IncompatibleDimensionsError,
)
from algebrakit.matrix_functions import (
    LAPLACE_WARN_DIMENSION,
    add,
    adj,
    approx_equal_matrices,
    augment_horizontally,
    augment_vertically,
    cofactor,
    cofactor_matrix,
    det,
    identity,
    inverse,
    is_diagonal,
    is_orthogonal,
    is_singular,
    is_skew_symmetric,
    is_symmetric,
    is_triangular,
    multiply,
    submatrix,
    subtract,
    trace,
    transpose,
)
from algebrakit.utils import EPS

logger = logging.getLogger(__name__)

THIRD = [[2, 5, 2], [3, -3, 1], [1, 4, -4]]
FOURTH = [[-4, 2.5, 3], [5, 6, 4], [9, 10, -9]]


@pytest.mark.parametrize(
    "A, expected",
    [
        ([[2]], 2.0),
        ([[8, 3], [4, 2]], 4.0),
        (THIRD, 111.0),
        (FOURTH, 566.5),
        ([[1, 0, 0, 1], [1, 2, 3, 2], [2, 3, 4, 0], [1, 2, -1, -2]], -24.0),
    ],
)
def test_known_determinants(A, expected):
    assert det(A) == pytest.approx(expected, abs=1e-9)


def test_determinants():
    A = np.random.randn(6, 6)
    our_det = det(A)
    numpy_det = np.linalg.det(A)
    assert math.isclose(our_det, numpy_det, abs_tol=1e-8)


def test_det_of_empty_matrix_is_one():
    assert det(np.zeros((0, 0))) == 1.0


def test_det_rejects_non_square():
    with pytest.raises(DimensionMismatchError):
        det([[1, 2, 3], [4, 5, 6]])


def test_det_warns_on_large_laplace_expansion(caplog):
    n = LAPLACE_WARN_DIMENSION + 1
    with caplog.at_level(logging.WARNING, logger="algebrakit.matrix_functions"):
        assert det(np.eye(n)) == pytest.approx(1.0)
    assert "O(n!)" in caplog.text


def test_adjugate():
    A = np.random.randn(5, 5)

    our_adj = adj(A)
    numpy_adj = np.linalg.det(A) * np.linalg.inv(A)
    logger.debug(f"\nOurs:\n{our_adj}\nNumpy:\n{numpy_adj}")
    assert np.allclose(our_adj, numpy_adj, atol=1e-8)


def test_adjugate_of_singular_matrix_is_defined():
    A = [[1, 2], [2, 4]]
    np.testing.assert_allclose(adj(A), [[4, -2], [-2, 1]])


def test_cofactors():
    assert cofactor(THIRD, 0, 0) == pytest.approx(12 - 4)
    assert cofactor(THIRD, 0, 1) == pytest.approx(-(-12 - 1))
    C = cofactor_matrix(THIRD)
    # Laplace along the first row reproduces the determinant
    assert float(np.dot(np.asarray(THIRD)[0], C[0])) == pytest.approx(111.0)


def test_inverse():
    # shifted diagonal keeps the random matrix well conditioned
    A = np.random.randn(5, 5) + 5 * np.eye(5)
    np.testing.assert_allclose(inverse(A), np.linalg.inv(A), rtol=1e-8, atol=1e-8)
    np.testing.assert_allclose(multiply(A, inverse(A)), np.eye(5), atol=1e-8)


def test_inverse_of_singular_matrix_raises():
    with pytest.raises(EquationNotSolvableError):
        inverse([[1, 2], [2, 4]])


def test_multiply_known_products():
    np.testing.assert_allclose(multiply([[1, 2, 3]], [[2], [1], [2]]), [[10]])
    np.testing.assert_allclose(
        multiply([[1, 2, 3], [3, 1, 1]], [[2, 1], [1, 2], [2, 1]]), [[10, 8], [9, 6]]
    )
    np.testing.assert_allclose(
        multiply([[1, 2], [3, 4]], [[2, 0], [1, 2]]), [[4, 4], [10, 8]]
    )
    np.testing.assert_allclose(
        multiply(THIRD, FOURTH),
        [[35, 55, 8], [-18, -0.5, -12], [-20, -13.5, 55]],
    )


def test_multiply_incompatible_shapes():
    with pytest.raises(IncompatibleDimensionsError):
        multiply(np.ones((2, 3)), np.ones((2, 3)))


def test_add_subtract_and_shape_checks():
    A = np.random.randn(3, 4)
    B = np.random.randn(3, 4)
    np.testing.assert_allclose(subtract(add(A, B), B), A)
    with pytest.raises(DimensionMismatchError):
        add(A, B.T)


def test_functions_do_not_modify_inputs():
    A = np.random.randn(4, 4)
    before = A.copy()
    det(A)
    adj(A)
    inverse(A)
    transpose(A)
    np.testing.assert_array_equal(A, before)


def test_transpose_is_an_involution():
    A = np.random.randn(3, 5)
    np.testing.assert_array_equal(transpose(transpose(A)), A)
    assert transpose(A).shape == (5, 3)


def test_trace():
    assert trace(THIRD) == pytest.approx(2 - 3 - 4)
    assert trace(identity(4)) == 4.0


def test_submatrix():
    np.testing.assert_array_equal(submatrix(THIRD, 1, 1), [[2, 2], [1, -4]])
    with pytest.raises(CoordinateIndexError):
        submatrix(THIRD, 3, 0)
    with pytest.raises(CoordinateIndexError):
        submatrix(THIRD, -1, 0)


def test_augment():
    A = np.eye(2)
    assert augment_horizontally(A, np.ones((2, 3))).shape == (2, 5)
    assert augment_vertically(A, np.ones((3, 2))).shape == (5, 2)
    with pytest.raises(DimensionMismatchError):
        augment_horizontally(A, np.ones((3, 1)))
    with pytest.raises(DimensionMismatchError):
        augment_vertically(A, np.ones((1, 3)))


def test_is_diagonal():
    assert is_diagonal(np.eye(3))
    assert is_diagonal(np.eye(4))
    off = np.eye(4)
    off[0, 3] = 1
    assert not is_diagonal(off)
    missing = np.eye(4)
    missing[3, 3] = 0
    assert not is_diagonal(missing)
    assert not is_diagonal([[1]])


def test_is_triangular():
    assert is_triangular([[1, 3, 4], [0, 2, 7], [0, 0, 3]])
    assert is_triangular(
        [[1, 3, 4, 7], [0, 2, 2, 3], [0, 0, 3, 9], [0, 0, 0, 8]]
    )
    assert is_triangular(np.eye(4))
    mixed = np.diag([5.0, 7.0, 4.0, 3.0])
    mixed[0, 3] = 2
    mixed[2, 0] = 9
    assert not is_triangular(mixed)


def test_symmetry_predicates():
    S = np.array([[1, 2], [2, 3]])
    K = np.array([[0, 2], [-2, 0]])
    assert is_symmetric(S) and not is_skew_symmetric(S)
    assert is_skew_symmetric(K) and not is_symmetric(K)


def test_is_orthogonal():
    theta = 0.3
    R = [[math.cos(theta), -math.sin(theta)], [math.sin(theta), math.cos(theta)]]
    assert is_orthogonal(R)
    assert not is_orthogonal([[1, 1], [0, 1]])


def test_is_singular():
    assert is_singular([[1, 2], [2, 4]])
    assert not is_singular([[8, 3], [4, 2]])


def test_approx_equal_tolerates_epsilon():
    A = np.eye(2)
    assert approx_equal_matrices(A, A + EPS / 2)
    assert not approx_equal_matrices(A, A + 2 * EPS)
    assert not approx_equal_matrices(A, np.eye(3))


@pytest.mark.parametrize("delta, expected", [(EPS / 2, True), (2 * EPS, False)])
def test_predicates_tolerate_epsilon(delta, expected):
    S = np.array([[1.0, 2.0], [2.0, 3.0]])
    S[0, 1] += delta
    assert is_symmetric(S) == expected

    Q = np.eye(2)
    Q[0, 1] = delta
    assert is_orthogonal(Q) == expected

    # det = delta
    assert is_singular([[1.0, 2.0], [2.0, 4.0 + delta]]) == expected

    D = np.eye(3)
    D[2, 0] = delta
    assert is_diagonal(D) == expected

    T = np.array([[1.0, 3.0, 4.0], [0.0, 2.0, 7.0], [0.0, 0.0, 3.0]])
    T[2, 0] = delta
    assert is_triangular(T) == expected
