# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Splits an arithmetic expression into infix tokens.

Whitespace is ignored and names are case-insensitive. A `+` or `-` at the
start of the expression, after `(`, `,` or another operator is a sign: `-`
becomes the negate operator and `+` is dropped.
"""

import re
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from .exceptions import (
    InvalidCharacterError,
    InvalidNumberError,
    UnknownTokenError,
)
from .tokens import (
    CLOSING_BRACKET,
    CONSTANTS,
    FUNCTIONS,
    NEGATE,
    OPENING_BRACKET,
    OPERATORS,
    SEPARATOR,
    Token,
    TokenType,
)

_WHITESPACE = re.compile(r"\s+")
_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | {"."}
_BRACKETS = frozenset((OPENING_BRACKET, CLOSING_BRACKET))
_OPERATOR_CHARS = frozenset(OPERATORS)


def merge_constants(variables: Optional[Mapping[str, float]]) -> Mapping[str, float]:
    """
    Return the built-in constants extended by caller-defined variables.

    Variable names must be alphabetic and may not shadow a function name.
    """
    if not variables:
        return CONSTANTS
    merged = dict(CONSTANTS)
    for name, value in variables.items():
        key = name.lower()
        if not key.isalpha():
            raise ValueError(f"Variable name {name!r} must be alphabetic")
        if key in FUNCTIONS:
            raise ValueError(f"Variable name {name!r} shadows a function")
        merged[key] = float(value)
    return merged


def read_number_token(term: str, index: int) -> Tuple[Token, int]:
    """
    Read a run of digits and decimal points starting at `index`.

    Returns:
        The number token and the index just past it.

    Raises:
        InvalidNumberError: If the run is not a valid decimal literal.
    """
    end = index
    while end < len(term) and term[end] in _NUMBER_CHARS:
        end += 1
    literal = term[index:end]
    if literal.count(".") > 1 or literal == ".":
        raise InvalidNumberError(f"Invalid token: {literal} is not a valid number.")
    try:
        value = float(literal)
    except ValueError:
        raise InvalidNumberError(
            f"Invalid token: {literal} is not a valid number."
        ) from None
    return Token.number(value), end


def read_string_token(
    term: str, index: int, constants: Mapping[str, float] = CONSTANTS
) -> Tuple[Token, int]:
    """
    Read an operator, bracket, function or constant starting at `index`.

    Operators and brackets are single characters. For names the longest
    known prefix of the letter run wins, so `sin(` yields `sin` and `pie`
    yields `pi` followed by `e`.
    """
    current = term[index]
    if current in _OPERATOR_CHARS:
        return Token.operator(current), index + 1
    if current in _BRACKETS:
        return Token.bracket(current), index + 1

    end = index
    while end < len(term) and term[end].isalpha():
        end += 1
    run = term[index:end]

    for stop in range(len(run), 0, -1):
        name = run[:stop]
        if name in FUNCTIONS:
            return Token.function(name), index + stop
        if name in constants:
            return Token.constant(name), index + stop

    raise UnknownTokenError(
        f"Invalid token: {run} is not a valid function/operator, "
        "bracket or number equivalent."
    )


def _is_sign_position(previous: Optional[Token]) -> bool:
    return (
        previous is None
        or previous.is_opening_bracket
        or previous.type in (TokenType.SEPARATOR, TokenType.OPERATOR)
    )


def tokenize(
    expression: str, constants: Optional[Mapping[str, float]] = None
) -> Iterator[Token]:
    """
    Lazily produce the infix tokens of `expression`.

    Args:
        expression: The term to split.
        constants: Name -> value table of known constants; defaults to
            `CONSTANTS` (see `merge_constants` for adding variables).

    Raises:
        InvalidNumberError, UnknownTokenError, InvalidCharacterError
    """
    if constants is None:
        constants = CONSTANTS
    term = _WHITESPACE.sub("", expression).lower()

    i = 0
    previous: Optional[Token] = None
    while i < len(term):
        current = term[i]
        if current in _NUMBER_CHARS:
            token, i = read_number_token(term, i)
        elif current == SEPARATOR:
            token, i = Token.separator(), i + 1
        elif current in ("+", "-") and _is_sign_position(previous):
            i += 1
            if current == "+":
                continue  # redundant sign
            token = Token.operator(NEGATE)
        elif current.isalpha() or current in _OPERATOR_CHARS or current in _BRACKETS:
            token, i = read_string_token(term, i, constants)
        else:
            raise InvalidCharacterError(
                f"Char {current} cannot be interpreted as a valid token."
            )
        previous = token
        yield token


def detokenize(tokens: Iterable[Token]) -> str:
    """Space-separated rendering of a token sequence (infix or postfix)."""
    return " ".join(str(t) for t in tokens)
