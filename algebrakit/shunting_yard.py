# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Infix to postfix conversion (Dijkstra's shunting-yard algorithm).
"""

import logging
from typing import Iterable, List, Optional

from .exceptions import MalformedExpressionError
from .tokenizer import detokenize
from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


def _may_follow_operand(following: Optional[Token]) -> bool:
    # end of input, a binary operator, `)` or `,`
    if following is None or following.is_closing_bracket:
        return True
    if following.type is TokenType.SEPARATOR:
        return True
    return following.type is TokenType.OPERATOR and not following.is_prefix_operator


def _ends_operand(token: Optional[Token]) -> bool:
    if token is None:
        return False
    return token.type in (TokenType.NUMBER, TokenType.CONSTANT) or token.is_closing_bracket


def _validate(
    previous: Optional[Token], token: Token, following: Optional[Token]
) -> None:
    if token.type is TokenType.SEPARATOR:
        # an argument on both sides
        if not _ends_operand(previous):
            raise MalformedExpressionError(
                f"Argument separator must follow an argument, not '{previous}'"
            )
        if (
            following is None
            or following.is_closing_bracket
            or following.type is TokenType.SEPARATOR
        ):
            raise MalformedExpressionError(
                f"Argument separator must be followed by an argument, not '{following}'"
            )
    elif _ends_operand(token):
        if not _may_follow_operand(following):
            raise MalformedExpressionError(
                f"'{token}' must be followed by an operator, a closing bracket "
                f"or the end of the expression, not '{following}'"
            )
    elif token.type is TokenType.FUNCTION:
        if following is None or not following.is_opening_bracket:
            raise MalformedExpressionError(
                f"Function '{token}' must be followed by an opening bracket"
            )


def _pops_before(current: Token, top: Token) -> bool:
    if top.type is not TokenType.OPERATOR:
        return False
    if current.right_associative:
        return current.priority < top.priority
    return current.priority <= top.priority


def _pop_until_opening_bracket(stack: List[Token], output: List[Token]) -> bool:
    """Move operators to the output until `(` is on top; False if none is found."""
    while stack:
        if stack[-1].is_opening_bracket:
            return True
        output.append(stack.pop())
    return False


def shunting_yard(tokens: Iterable[Token]) -> List[Token]:
    """
    Reorder infix tokens into postfix (reverse Polish) order.

    Parameters
    ----------
    tokens : iterable of Token
        Infix tokens, as produced by `tokenize`.

    Returns
    -------
    postfix : list[Token]
        Numbers, constants, operators and functions; brackets and
        separators are consumed.

    Raises
    ------
    MalformedExpressionError
        On unbalanced brackets, a separator outside a function call or
        without an argument on each side, or a token that may not follow
        its predecessor.
    """
    infix = list(tokens)
    logger.debug("infix: %s", detokenize(infix))
    output: List[Token] = []
    stack: List[Token] = []

    for i, token in enumerate(infix):
        previous = infix[i - 1] if i > 0 else None
        following = infix[i + 1] if i + 1 < len(infix) else None
        _validate(previous, token, following)

        if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
            output.append(token)
        elif token.type is TokenType.FUNCTION:
            stack.append(token)
        elif token.type is TokenType.OPERATOR:
            if not token.is_prefix_operator:
                while stack and _pops_before(token, stack[-1]):
                    output.append(stack.pop())
            stack.append(token)
        elif token.is_opening_bracket:
            stack.append(token)
        elif token.is_closing_bracket:
            if not _pop_until_opening_bracket(stack, output):
                raise MalformedExpressionError("Missing opening bracket")
            stack.pop()
            if stack and stack[-1].type is TokenType.FUNCTION:
                output.append(stack.pop())
        elif token.type is TokenType.SEPARATOR:
            if not _pop_until_opening_bracket(stack, output):
                raise MalformedExpressionError(
                    "Argument separator outside of a bracket"
                )
            # the bracket must open a function call
            if len(stack) < 2 or stack[-2].type is not TokenType.FUNCTION:
                raise MalformedExpressionError(
                    "Argument separator outside of a function call"
                )

    while stack:
        token = stack.pop()
        if token.is_opening_bracket:
            raise MalformedExpressionError("Missing closing bracket")
        output.append(token)

    logger.debug("postfix: %s", detokenize(output))
    return output
