import io
import sys
from pathlib import Path

import pytest

from arith.cli import main


def test_expression_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-color", "-e", "succ 0; iszero 0"]) == 0
    assert capsys.readouterr().out == (
        "succ 0\n" "=> succ 0 : Nat\n" "iszero 0\n" "=> true : Bool\n"
    )


def test_quiet_prints_results_only(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-q", "-e", "succ 0; iszero 0"]) == 0
    assert capsys.readouterr().out == "succ 0 : Nat\ntrue : Bool\n"


def test_file_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    program = tmp_path / "prog.arith"
    program.write_text("# identity\n(lambda x: Nat. succ x) 1;\n", encoding="utf-8")
    assert main([str(program)]) == 0
    assert capsys.readouterr().out == (
        "((lambda x. succ x) succ 0)\n" "=> succ succ 0 : Nat\n"
    )


def test_stdin_input(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("pred 0"))
    assert main(["-q", "-"]) == 0
    assert capsys.readouterr().out == "0 : Nat\n"


def test_untyped_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--untyped", "-e", "(lambda x. x) (lambda y. y)"]) == 0
    assert capsys.readouterr().out == (
        "((lambda x. x) (lambda y. y))\n" "=> (lambda y. y)\n"
    )


def test_full_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-q", "--full", "-e", "lambda a: Bool. (lambda b: Bool. a) a"]) == 0
    assert capsys.readouterr().out == "(lambda a. a) : Bool -> Bool\n"


def test_type_error_exits_nonzero(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-color", "-e", "iszero true"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == (
        "type error at 1:8\n" "iszero true\n" "       ^^^^ argument must be a Nat\n"
    )


def test_no_typecheck_prints_stuck_term(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-q", "--no-typecheck", "-e", "iszero true"]) == 0
    assert capsys.readouterr().out == "iszero true\n"


def test_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.arith")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_large_literal_runs(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-e", "5000"]) == 0
    numeral = "succ " * 5000 + "0"
    assert capsys.readouterr().out == f"{numeral}\n=> {numeral} : Nat\n"


def test_pred_of_large_literal(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-q", "-e", "pred 20000"]) == 0
    assert capsys.readouterr().out == "succ " * 19999 + "0 : Nat\n"


def test_deep_term_reports_recursion(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-e", "iszero " * 20000 + "0"]) == 1
    assert "maximum recursion depth" in capsys.readouterr().err
