# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Linear equations and square linear equation systems.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .elimination import gauss_jordan
from .exceptions import (
    DimensionMismatchError,
    EquationNotSolvableError,
    NoEquationsError,
)
from .utils import EPS, approx_equal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearEquation:
    """
    c_0 * x_0 + c_1 * x_1 + ... + c_{n-1} * x_{n-1} = result
    """

    coefficients: Tuple[float, ...] = ()
    result: float = 0.0

    def __post_init__(self):
        object.__setattr__(
            self, "coefficients", tuple(float(c) for c in self.coefficients)
        )
        object.__setattr__(self, "result", float(self.result))

    @classmethod
    def of(cls, result: float, *coefficients: float) -> "LinearEquation":
        return cls(coefficients, result)

    @property
    def variable_count(self) -> int:
        return len(self.coefficients)

    def evaluate(self, values: Sequence[float]) -> float:
        """Left-hand side for the given variable values."""
        if len(values) != self.variable_count:
            raise DimensionMismatchError(
                f"Expected {self.variable_count} values, got {len(values)}"
            )
        return float(np.dot(self.coefficients, values))

    def is_satisfied_by(self, values: Sequence[float], eps: float = EPS) -> bool:
        return approx_equal(self.evaluate(values), self.result, eps)


class LinearEquationSystem:
    """Ordered collection of `LinearEquation`s solved together."""

    def __init__(self, equations: Optional[Iterable[LinearEquation]] = None):
        self.equations = list(equations) if equations is not None else []

    def add(self, equation: LinearEquation) -> None:
        self.equations.append(equation)

    def __len__(self) -> int:
        return len(self.equations)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.equations!r})"

    def _check_square(self) -> int:
        n = len(self.equations)
        if n == 0:
            raise NoEquationsError("There must be at least one equation to solve.")
        for i, eq in enumerate(self.equations):
            if eq.variable_count != n:
                raise EquationNotSolvableError(
                    f"This linear equation system cannot be solved: equation {i} "
                    f"has {eq.variable_count} coefficient(s) but the system has "
                    f"{n} equation(s)."
                )
        return n

    def coefficient_matrix(self) -> np.ndarray:
        """The n x n left side."""
        self._check_square()
        return np.array([eq.coefficients for eq in self.equations], dtype=float)

    def result_vector(self) -> np.ndarray:
        """The n x 1 right side."""
        self._check_square()
        return np.array([[eq.result] for eq in self.equations], dtype=float)

    def solve(self) -> List[float]:
        """
        Solve the system with Gauss-Jordan elimination.

        Returns
        -------
        x : list[float]
            Value of each variable, in coefficient order.

        Raises
        ------
        NoEquationsError : if the system is empty.
        EquationNotSolvableError : if it is not square or has no unique
            solution.
        """
        left = self.coefficient_matrix()
        right = self.result_vector()
        logger.debug("solving %d x %d system\n%s", *left.shape, left)
        solution = gauss_jordan(left, right, copy=False)
        return [float(v) for v in solution[:, 0]]


def solve(equations: Iterable[LinearEquation]) -> List[float]:
    return LinearEquationSystem(equations).solve()
