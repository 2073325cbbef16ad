# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import io

import pytest

from algebrakit.__main__ import main


def test_eval(capsys):
    assert main(["eval", "3*4^2"]) == 0
    assert capsys.readouterr().out.strip() == "48.0"


def test_eval_with_variables(capsys):
    assert main(["eval", "x*y", "--var", "x=3", "--var", "y=0.5"]) == 0
    assert capsys.readouterr().out.strip() == "1.5"


def test_eval_error_goes_to_stderr(capsys):
    assert main(["eval", "1/0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Division by zero" in captured.err


def test_solve(capsys):
    argv = [
        "solve",
        "--equation", "1 -1 2 = 6",
        "--equation", "2 3 2 = 11",
        "--equation", "3 2 1 = 8",
    ]
    assert main(argv) == 0
    values = [float(v) for v in capsys.readouterr().out.split()]
    assert values == pytest.approx([1.0, 1.0, 3.0])


def test_solve_unsolvable(capsys):
    assert main(["solve", "--equation", "0 = 0"]) == 1
    assert "cannot be solved" in capsys.readouterr().err


def test_solve_rejects_malformed_equation():
    with pytest.raises(SystemExit) as excinfo:
        main(["solve", "--equation", "1 2 3"])
    assert excinfo.value.code == 2


def test_det(capsys):
    assert main(["det", "--row", "8 3", "--row", "4 2"]) == 0
    assert float(capsys.readouterr().out) == pytest.approx(4.0)


def test_det_ragged_rows():
    with pytest.raises(SystemExit):
        main(["det", "--row", "1 2", "--row", "3"])


def test_det_non_square(capsys):
    assert main(["det", "--row", "1 2 3", "--row", "4 5 6"]) == 1
    assert "square matrix" in capsys.readouterr().err


def test_repl(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1+1\n\nsqrt(-1)\nquit\n2+2\n"))
    assert main(["--repl"]) == 0
    out = capsys.readouterr().out
    assert "2.0" in out
    assert "error:" in out
    assert "4.0" not in out


def test_repl_stops_at_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6*7\n"))
    assert main(["--repl"]) == 0
    out = capsys.readouterr().out
    assert "42.0" in out
    assert "bye" in out


def test_nothing_to_do(capsys):
    assert main([]) == 0
    assert "Nothing to do" in capsys.readouterr().out
