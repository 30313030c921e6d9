# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import pathlib

import pytest

from click.testing import CliRunner

from unary.semantics.__main__ import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.parametrize("executor", ["direct", "inference"])
def test_eval(runner: CliRunner, executor: str) -> None:
    result = runner.invoke(main, ["eval", "--executor", executor, "--", "-4 / 3 + P2"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "1"


def test_eval_show_numeral(runner: CliRunner) -> None:
    result = runner.invoke(main, ["eval", "--show-numeral", "neg(2)"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["-2", "Pred(Pred(Zero))"]


@pytest.mark.parametrize(
    "expression", ["7 / 0", "halve(3)", "1 +", "sqrt(2)"]
)
def test_eval_errors(runner: CliRunner, expression: str) -> None:
    result = runner.invoke(main, ["eval", expression])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_inference_division_by_zero(runner: CliRunner) -> None:
    result = runner.invoke(main, ["eval", "--executor", "inference", "1 / 0"])
    assert result.exit_code == 1
    assert "NoDerivationError" in result.output


def test_derive(runner: CliRunner) -> None:
    result = runner.invoke(main, ["derive", "--no-color", "decr(0)"])
    assert result.exit_code == 0, result.output
    assert "decr-zero" in result.output
    assert "decr(0) ⇓ -1" in result.output
    assert "Result: -1" in result.output


def test_convert(runner: CliRunner) -> None:
    result = runner.invoke(main, ["convert", "--type", "u8", "15 * 17"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "255u8"
    result = runner.invoke(main, ["convert", "--type", "u8", "16 * 16"])
    assert result.exit_code == 1
    assert "ConversionOverflowError" in result.output
    result = runner.invoke(main, ["convert", "--type", "u32", "--", "-1"])
    assert result.exit_code == 1
    assert "SignConversionError" in result.output


def test_system_print(runner: CliRunner) -> None:
    result = runner.invoke(
        main, ["system", "print", "--no-color", "--group", "halving"]
    )
    assert result.exit_code == 0, result.output
    assert "halve-succ" in result.output
    assert "add-succ" not in result.output
    assert "Total Number of Rules: 3" in result.output


def test_system_latexify(runner: CliRunner, tmp_path: pathlib.Path) -> None:
    directory = tmp_path / "rules"
    result = runner.invoke(main, ["system", "latexify", str(directory)])
    assert result.exit_code == 0, result.output
    assert (directory / "all-rules.tex").exists()
    assert (directory / "mul-pred.tex").read_text(encoding="utf-8").startswith(
        "\\begin{prooftree}"
    )
