# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Tokens of an arithmetic expression and the fixed symbol tables.

Tables (process-wide, read-only):
- OPERATORS: symbol -> OperatorSpec(priority, right_associative, arity, action)
- FUNCTIONS: name -> FunctionSpec(arity, action)
- CONSTANTS: name -> value

`!` is the unary negate operator; the tokenizer rewrites a leading or
bracket-initial `-` into it.
"""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Mapping, NamedTuple, Optional, Union

from .exceptions import (
    EvaluationError,
    MalformedExpressionError,
    StackUnderflowError,
)

NUMBER_PRIORITY = 100
NEGATE = "!"
OPENING_BRACKET = "("
CLOSING_BRACKET = ")"
SEPARATOR = ","


class TokenType(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    CONSTANT = "constant"
    BRACKET = "bracket"
    SEPARATOR = "separator"


class OperatorSpec(NamedTuple):
    priority: int
    right_associative: bool
    arity: int
    action: Callable[..., float]


class FunctionSpec(NamedTuple):
    arity: int
    action: Callable[..., float]


def _log(base: float, exponent: float) -> float:
    return math.log(exponent, base)


OPERATORS: Mapping[str, OperatorSpec] = MappingProxyType(
    {
        "+": OperatorSpec(1, False, 2, lambda a, b: a + b),
        "-": OperatorSpec(1, False, 2, lambda a, b: a - b),
        "*": OperatorSpec(2, False, 2, lambda a, b: a * b),
        "/": OperatorSpec(2, False, 2, lambda a, b: a / b),
        "%": OperatorSpec(3, False, 2, math.fmod),
        NEGATE: OperatorSpec(4, False, 1, lambda a: -a),
        "^": OperatorSpec(5, True, 2, math.pow),
    }
)

FUNCTIONS: Mapping[str, FunctionSpec] = MappingProxyType(
    {
        "sin": FunctionSpec(1, math.sin),
        "cos": FunctionSpec(1, math.cos),
        "tan": FunctionSpec(1, math.tan),
        "asin": FunctionSpec(1, math.asin),
        "acos": FunctionSpec(1, math.acos),
        "atan": FunctionSpec(1, math.atan),
        "sqrt": FunctionSpec(1, math.sqrt),
        "abs": FunctionSpec(1, abs),
        "ln": FunctionSpec(1, math.log),
        "lg": FunctionSpec(1, math.log10),
        "log": FunctionSpec(2, _log),
    }
)

CONSTANTS: Mapping[str, float] = MappingProxyType({"pi": math.pi, "e": math.e})


@dataclass(frozen=True)
class Token:
    """
    One lexical unit: a number, operator, function, constant, bracket or
    argument separator.

    Attributes:
        type: Which kind of token this is.
        value: The float literal for numbers, the symbol otherwise.
        priority: Precedence rank (operators 1-5, numbers/constants 100).
        right_associative: Only true for `^`.
    """

    type: TokenType
    value: Union[float, str]
    priority: int = 0
    right_associative: bool = False

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(TokenType.NUMBER, float(value), NUMBER_PRIORITY)

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        spec = OPERATORS[symbol]
        return cls(TokenType.OPERATOR, symbol, spec.priority, spec.right_associative)

    @classmethod
    def function(cls, name: str) -> "Token":
        return cls(TokenType.FUNCTION, name)

    @classmethod
    def constant(cls, name: str) -> "Token":
        return cls(TokenType.CONSTANT, name, NUMBER_PRIORITY)

    @classmethod
    def bracket(cls, symbol: str) -> "Token":
        return cls(TokenType.BRACKET, symbol)

    @classmethod
    def separator(cls) -> "Token":
        return cls(TokenType.SEPARATOR, SEPARATOR)

    @property
    def is_opening_bracket(self) -> bool:
        return self.type is TokenType.BRACKET and self.value == OPENING_BRACKET

    @property
    def is_closing_bracket(self) -> bool:
        return self.type is TokenType.BRACKET and self.value == CLOSING_BRACKET

    @property
    def is_prefix_operator(self) -> bool:
        return self.type is TokenType.OPERATOR and OPERATORS[self.value].arity == 1

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"{self.value:g}"
        return str(self.value)


def _pop_operands(stack: List[float], arity: int, symbol) -> List[float]:
    if len(stack) < arity:
        raise StackUnderflowError(
            f"'{symbol}' needs {arity} operand(s) but only {len(stack)} "
            "value(s) are available"
        )
    # first popped is the right-most operand
    operands = stack[len(stack) - arity :]
    del stack[len(stack) - arity :]
    return operands


def _apply(action: Callable[..., float], operands: List[float], symbol) -> float:
    try:
        return float(action(*operands))
    except ZeroDivisionError:
        raise EvaluationError(f"Division by zero in '{symbol}'") from None
    except (ValueError, OverflowError) as e:
        raise EvaluationError(
            f"'{symbol}' is undefined for {', '.join(f'{v:g}' for v in operands)}: {e}"
        ) from None


def evaluate_token(
    token: Token,
    stack: List[float],
    constants: Optional[Mapping[str, float]] = None,
) -> None:
    """
    Apply one postfix token to the value stack.

    Args:
        token: The token to apply.
        stack: Value stack; operands are popped from and the result pushed to
            its end.
        constants: Name -> value table for constant tokens; defaults to
            `CONSTANTS`.

    Raises:
        StackUnderflowError: If an operator or function lacks operands.
        EvaluationError: On a math-domain failure.
    """
    if token.type is TokenType.NUMBER:
        stack.append(token.value)
    elif token.type is TokenType.CONSTANT:
        table = CONSTANTS if constants is None else constants
        stack.append(float(table[token.value]))
    elif token.type is TokenType.OPERATOR:
        spec = OPERATORS[token.value]
        operands = _pop_operands(stack, spec.arity, token.value)
        stack.append(_apply(spec.action, operands, token.value))
    elif token.type is TokenType.FUNCTION:
        spec = FUNCTIONS[token.value]
        operands = _pop_operands(stack, spec.arity, token.value)
        stack.append(_apply(spec.action, operands, token.value))
    else:
        raise MalformedExpressionError(
            f"Unexpected {token.type.value} token '{token.value}' in postfix sequence"
        )
