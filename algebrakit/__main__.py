#!/usr/bin/env python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Command-line front end.

    python -m algebrakit eval "3*4^2"
    python -m algebrakit eval "x^2 + 1" --var x=3
    python -m algebrakit solve --equation "1 1 1 = 5" --equation "1 2 3 = 12" ...
    python -m algebrakit det --row "8 3" --row "4 2"
    python -m algebrakit --repl
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .equations import LinearEquation, LinearEquationSystem
from .exceptions import AlgebraError
from .matrix import SquareMatrix
from .parser import Parser

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "exit")


def _floats(text: str) -> List[float]:
    try:
        return [float(part) for part in text.split()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a list of numbers: {text!r}") from None


def _equation(text: str) -> LinearEquation:
    left, sep, right = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected 'c1 c2 ... = r', got {text!r}")
    result = _floats(right)
    if len(result) != 1:
        raise argparse.ArgumentTypeError(f"expected one result value, got {right!r}")
    return LinearEquation(tuple(_floats(left)), result[0])


def _variable(text: str) -> Tuple[str, float]:
    name, sep, value = text.partition("=")
    if not sep or not name.strip().isalpha():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="algebrakit",
        description="Evaluate expressions, solve linear systems and compute determinants.",
    )
    ap.add_argument("--repl", action="store_true", help="read expressions from stdin")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = ap.add_subparsers(dest="command")

    p_eval = sub.add_parser("eval", help="evaluate an arithmetic expression")
    p_eval.add_argument("expression", type=str)
    p_eval.add_argument(
        "--var",
        type=_variable,
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="define a variable (repeatable)",
    )

    p_solve = sub.add_parser("solve", help="solve a square linear equation system")
    p_solve.add_argument(
        "--equation",
        type=_equation,
        action="append",
        default=[],
        metavar='"c1 c2 ... = r"',
        help="one equation per flag",
    )

    p_det = sub.add_parser("det", help="determinant of a square matrix")
    p_det.add_argument(
        "--row",
        type=_floats,
        action="append",
        default=[],
        metavar='"a b c"',
        help="one matrix row per flag",
    )
    return ap


def run_eval(args) -> None:
    print(Parser(args.expression, dict(args.var)).evaluate())


def run_solve(args) -> None:
    solution = LinearEquationSystem(args.equation).solve()
    print(" ".join(repr(x) for x in solution))


def run_det(args) -> None:
    print(SquareMatrix.from_rows(args.row).determinant)


def repl() -> None:
    print("algebrakit REPL, type an expression, 'quit' or Ctrl+D to exit.")
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("\nbye")
            break
        if not line.strip():
            continue
        if line.strip().lower() in QUIT_COMMANDS:
            break
        try:
            print(Parser(line).evaluate())
        except AlgebraError as e:
            print(f"error: {e}")


COMMANDS = {"eval": run_eval, "solve": run_solve, "det": run_det}


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "det" and len({len(r) for r in args.row}) > 1:
        ap.error("all --row values must have the same length")

    try:
        if args.command:
            COMMANDS[args.command](args)
        if args.repl:
            repl()
    except (AlgebraError, ValueError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if not args.command and not args.repl:
        print("Nothing to do. Pass a command or --repl.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
