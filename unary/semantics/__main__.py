# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import typing as t

import contextlib

import click

from ..core import inference
from ..data import arithmetic, numerals
from ..pretty import console
from ..utils import parser as parser_utils

from . import cli, judgements, parser, rules
from .executors import direct, engine, interface


_EXPECTED_ERRORS = (
    parser.ExpressionSyntaxError,
    parser_utils.UnexpectedTokenError,
    arithmetic.UndefinedOperationError,
    numerals.ConversionError,
    inference.NoDerivationError,
    interface.UnsupportedExpressionError,
)


@contextlib.contextmanager
def _report_errors() -> t.Iterator[None]:
    try:
        yield
    except _EXPECTED_ERRORS as error:
        raise click.ClickException(f"{type(error).__name__}: {error}") from error


def _create_executor(name: str) -> interface.Executor:
    if name == "inference":
        return engine.Executor(rules.system)
    return direct.Executor()


@click.group()
def main() -> None:
    """
    Signed integer arithmetic on unary numerals.

    Negative expressions have to be separated from the options by `--`, e.g.,
    `unary eval -- -4 / 3`.
    """


@main.command("eval")
@click.argument("expression")
@click.option(
    "--executor",
    type=click.Choice(["direct", "inference"], case_sensitive=False),
    default="direct",
    help="Evaluate with the arithmetic functions or by proof search.",
)
@click.option("--show-numeral", default=False, is_flag=True)
def evaluate(expression: str, executor: str, show_numeral: bool) -> None:
    """
    Evaluate an arithmetic expression.
    """
    with _report_errors():
        term = parser.parse_expression(expression)
        evaluation = _create_executor(executor.lower()).evaluate(term)
    print(numerals.to_int(evaluation.result))
    if show_numeral:
        print(repr(evaluation.result))


@main.command("derive")
@click.argument("expression")
@click.option("--hollow", default=False, is_flag=True)
@click.option("--no-color", "no_color", default=False, is_flag=True)
def derive(expression: str, hollow: bool, no_color: bool) -> None:
    """
    Print the derivation tree of the evaluation of an expression.
    """
    with _report_errors():
        term = parser.parse_expression(expression)
        evaluation = engine.Executor(rules.system).evaluate(term)
    assert evaluation.tree is not None
    print(
        console.format_tree(
            evaluation.tree,
            judgements.default_renderer,
            colorize=not no_color,
            hollow=hollow,
        )
    )
    print()
    print("Result:", numerals.to_int(evaluation.result))
    print("Size:", evaluation.tree.size, "Height:", evaluation.tree.height)


@main.command("convert")
@click.argument("expression")
@click.option(
    "--type",
    "typ",
    type=click.Choice([typ.label for typ in numerals.IntegerType]),
    default=numerals.IntegerType.I64.label,
    help="The fixed-width integer type to convert to.",
)
def convert(expression: str, typ: str) -> None:
    """
    Convert the value of an expression into a fixed-width integer.
    """
    with _report_errors():
        term = parser.parse_expression(expression)
        result = direct.Executor().evaluate(term).result
        value = numerals.convert(result, numerals.IntegerType.from_label(typ))
    print(f"{value}{typ}")


cli.add_system_commands(main, rules.system, judgements.default_renderer)


if __name__ == "__main__":
    main()
