# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
algebrakit
==========

A small linear-algebra and expression-evaluation toolkit built on numpy.

Public API
~~~~~~~~~~
- Matrix types
    - `Matrix`, `SquareMatrix`
- Matrix utilities (accept any 2-D array-like)
    - `det`, `adj`, `inverse`, `cofactor_matrix`, `trace`, `multiply`
- Linear systems
    - `gauss_jordan`, `LinearEquation`, `LinearEquationSystem`, `solve`
- Vectors
    - `Vector`, `dot_product`, `cross_product`, `normalize`, `angle`,
      `lerp`, `distance`, ...
- Expressions
    - `Parser`, `evaluate`, `tokenize`, `shunting_yard`, `evaluate_postfix`
- Errors
    - `AlgebraError` and its subclasses (see `algebrakit.exceptions`)

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import algebrakit as ak
>>> ak.det([[8, 3], [4, 2]])
4.0
>>> ak.evaluate("3*4^2")
48.0
"""

from importlib.metadata import version as _pkg_version

# ---------------------------------------------------------------------
# Re-export the high-level functions users are expected to call.
# Each of these names is implemented in one of the internal sub-modules.
# ---------------------------------------------------------------------
from .elimination import gauss_jordan
from .equations import LinearEquation, LinearEquationSystem, solve
from .exceptions import (
    AlgebraError,
    CoordinateIndexError,
    DimensionMismatchError,
    EmptyExpressionError,
    EquationNotSolvableError,
    EvaluationError,
    IncompatibleDimensionsError,
    InvalidCharacterError,
    InvalidNumberError,
    MalformedExpressionError,
    NoEquationsError,
    ParserError,
    StackUnderflowError,
    UnknownTokenError,
    ZeroVectorError,
)
from .matrix import Matrix, SquareMatrix
from .matrix_functions import (
    adj,
    cofactor_matrix,
    det,
    identity,
    inverse,
    multiply,
    trace,
)
from .parser import Parser, evaluate, evaluate_postfix
from .shunting_yard import shunting_yard
from .tokenizer import tokenize
from .tokens import Token, TokenType
from .utils import EPS, approx_equal
from .vectors import (
    Vector,
    angle,
    area,
    cosine_similarity,
    cross_product,
    distance,
    dot_product,
    lerp,
    move_towards,
    normalize,
    scalar_triple_product,
)

__all__ = [
    "Matrix",
    "SquareMatrix",
    "det",
    "adj",
    "inverse",
    "cofactor_matrix",
    "trace",
    "multiply",
    "identity",
    "gauss_jordan",
    "LinearEquation",
    "LinearEquationSystem",
    "solve",
    "Vector",
    "dot_product",
    "cross_product",
    "area",
    "scalar_triple_product",
    "normalize",
    "distance",
    "angle",
    "lerp",
    "move_towards",
    "cosine_similarity",
    "Token",
    "TokenType",
    "tokenize",
    "shunting_yard",
    "evaluate_postfix",
    "Parser",
    "evaluate",
    "EPS",
    "approx_equal",
    "AlgebraError",
    "DimensionMismatchError",
    "IncompatibleDimensionsError",
    "CoordinateIndexError",
    "ZeroVectorError",
    "EquationNotSolvableError",
    "NoEquationsError",
    "ParserError",
    "EmptyExpressionError",
    "InvalidNumberError",
    "UnknownTokenError",
    "InvalidCharacterError",
    "MalformedExpressionError",
    "StackUnderflowError",
    "EvaluationError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show algebrakit”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library code only logs; applications decide where records go.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
