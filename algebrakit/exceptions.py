# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy.

Every error derives from `AlgebraError`. Most also derive from the
matching built-in (`ValueError`, `IndexError`) so code that already
catches those keeps working.
"""


class AlgebraError(Exception):
    """Base for all algebrakit errors."""


class DimensionMismatchError(AlgebraError, ValueError):
    """Operand shapes are incompatible for the requested operation."""


class IncompatibleDimensionsError(DimensionMismatchError):
    """Column count of the left operand differs from the row count of the right one."""


class CoordinateIndexError(AlgebraError, IndexError):
    """A vector or matrix coordinate outside its declared dimension."""


class ZeroVectorError(AlgebraError, ValueError):
    pass


class EquationNotSolvableError(AlgebraError, ValueError):
    """The system has no unique solution (singular, underdetermined or not square)."""


class NoEquationsError(AlgebraError, ValueError):
    pass


class ParserError(AlgebraError, ValueError):
    """Base for expression tokenizing, conversion and evaluation errors."""


class EmptyExpressionError(ParserError):
    pass


class InvalidNumberError(ParserError):
    pass


class UnknownTokenError(ParserError):
    pass


class InvalidCharacterError(ParserError):
    pass


class MalformedExpressionError(ParserError):
    pass


class StackUnderflowError(ParserError):
    """An operator or function found fewer operands than its arity."""


class EvaluationError(ParserError):
    """A math-domain failure such as sqrt(-1), ln(0) or division by zero."""
