# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Arithmetic expression evaluation.

    tokenize -> shunting_yard -> evaluate_postfix

Example:
    >>> Parser("(-2+3)*(cos(0)*(2/3))").evaluate()
    0.6666666666666666
    >>> evaluate("x*4^2", variables={"x": 3})
    48.0
"""

import logging
from typing import Iterable, List, Mapping, Optional

from .exceptions import (
    EmptyExpressionError,
    MalformedExpressionError,
    StackUnderflowError,
)
from .shunting_yard import shunting_yard
from .tokenizer import merge_constants, tokenize
from .tokens import Token, evaluate_token

logger = logging.getLogger(__name__)


def evaluate_postfix(
    tokens: Iterable[Token], constants: Optional[Mapping[str, float]] = None
) -> float:
    """
    Evaluate a postfix token sequence with a value stack.

    Raises:
        StackUnderflowError: If an operator lacks operands or nothing is left.
        MalformedExpressionError: If more than one value is left.
    """
    stack: List[float] = []
    for token in tokens:
        evaluate_token(token, stack, constants)

    if not stack:
        raise StackUnderflowError("The expression produced no value")
    if len(stack) > 1:
        raise MalformedExpressionError(
            f"The expression left {len(stack)} values instead of one"
        )
    return stack[0]


class Parser:
    """
    Evaluates one arithmetic expression.

    Args:
        expression: Infix term, e.g. ``"3*4^2"``.
        variables: Extra name -> value constants usable in the term.
    """

    def __init__(
        self, expression: str, variables: Optional[Mapping[str, float]] = None
    ):
        if expression is None:
            raise TypeError("expression must be a string, not None")
        self.expression = expression
        self.constants = merge_constants(variables)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.expression!r})"

    def tokens(self) -> List[Token]:
        return list(tokenize(self.expression, self.constants))

    def postfix(self) -> List[Token]:
        return shunting_yard(tokenize(self.expression, self.constants))

    def evaluate(self) -> float:
        if not self.expression.strip():
            raise EmptyExpressionError("The expression is empty")
        result = evaluate_postfix(self.postfix(), self.constants)
        logger.debug("%s = %r", self.expression, result)
        return result


def evaluate(expression: str, variables: Optional[Mapping[str, float]] = None) -> float:
    return Parser(expression, variables).evaluate()
