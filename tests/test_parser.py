# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
import math

import pytest

from algebrakit.exceptions import (
    EmptyExpressionError,
    EvaluationError,
    InvalidCharacterError,
    MalformedExpressionError,
    ParserError,
    StackUnderflowError,
    UnknownTokenError,
)
from algebrakit.parser import Parser, evaluate, evaluate_postfix
from algebrakit.tokens import Token


def test_parse_term():
    assert Parser("(-2+3)*(cos(0)*(2/3))").evaluate() == 2 / 3
    assert Parser("3*4^2").evaluate() == 48


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("1+2*3", 7),
        ("(1+2)*3", 9),
        ("8-3-2", 3),
        ("8/4/2", 1),
        ("2^3^2", 512),
        ("-2^2", -4),
        ("(-2)^2", 4),
        ("-(3-5)", 2),
        ("2*-3", -6),
        ("2--3", 5),
        ("+4", 4),
        ("7%4", 3),
        ("-7%4", -3),
        ("sqrt(16)+abs(-2)", 6),
        ("lg(1000)", 3),
        ("ln(e)", 1),
        ("log(2, 8)", 3),
        ("log(10, 10^3)", 3),
        ("sin(pi/2)", 1),
        ("cos(pi)", -1),
        ("tan(0)", 0),
        ("asin(1)", math.pi / 2),
        ("acos(1)", 0),
        ("atan(1)*4", math.pi),
        ("2.5*4", 10),
        ("  1 +\t2 ", 3),
        ("SIN(PI)", 0),
    ],
)
def test_evaluate(expression, expected):
    assert evaluate(expression) == pytest.approx(expected, abs=1e-12)


def test_variables():
    assert evaluate("x^2 + 1", {"x": 3}) == 10
    assert evaluate("X*rate", {"x": 4, "Rate": 0.5}) == 2
    assert Parser("r*r*pi", variables={"r": 2}).evaluate() == pytest.approx(4 * math.pi)


def test_variables_can_override_constants():
    assert evaluate("e", {"e": 2}) == 2


def test_none_expression_raises_type_error():
    with pytest.raises(TypeError):
        Parser(None)


@pytest.mark.parametrize("expression", ["", "   ", "\t\n"])
def test_empty_expression(expression):
    with pytest.raises(EmptyExpressionError):
        Parser(expression).evaluate()


@pytest.mark.parametrize("expression", ["2+", "*3", "()", "sqrt()", "log(2)"])
def test_missing_operands(expression):
    with pytest.raises(StackUnderflowError):
        evaluate(expression)


@pytest.mark.parametrize(
    "expression", ["(2,3)", "(1,)", "(,1)", "(1", "1)", "2pi", "sin 1"]
)
def test_malformed_expressions(expression):
    with pytest.raises(MalformedExpressionError):
        evaluate(expression)


@pytest.mark.parametrize(
    "expression",
    ["1/0", "5%0", "sqrt(-1)", "ln(0)", "acos(2)", "10^1000", "log(1, 5)"],
)
def test_math_domain_errors(expression):
    with pytest.raises(EvaluationError):
        evaluate(expression)


def test_token_errors_surface_through_parser():
    with pytest.raises(UnknownTokenError):
        evaluate("2*unknown")
    with pytest.raises(InvalidCharacterError):
        evaluate("2$3")


def test_parser_errors_are_value_errors():
    with pytest.raises(ValueError):
        evaluate("1/0")
    with pytest.raises(ParserError):
        evaluate("")


def test_evaluate_postfix():
    tokens = [Token.number(2), Token.number(3), Token.operator("^")]
    assert evaluate_postfix(tokens) == 8
    assert evaluate_postfix([Token.constant("pi")]) == math.pi
    with pytest.raises(StackUnderflowError):
        evaluate_postfix([])
    with pytest.raises(MalformedExpressionError):
        evaluate_postfix([Token.number(1), Token.number(2)])
    with pytest.raises(MalformedExpressionError):
        evaluate_postfix([Token.bracket("(")])


def test_parser_can_be_reused():
    parser = Parser("1+1")
    assert parser.evaluate() == parser.evaluate() == 2
    assert [str(t) for t in parser.tokens()] == ["1", "+", "1"]
    assert [str(t) for t in parser.postfix()] == ["1", "1", "+"]


def test_result_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="algebrakit.parser"):
        evaluate("6*7")
    assert "6*7 = 42.0" in caplog.text
