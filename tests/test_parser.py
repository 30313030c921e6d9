# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import pytest

from unary.data import numerals
from unary.semantics import judgements, parser
from unary.semantics.executors import direct
from unary.utils import parser as parser_utils


def _evaluate(code: str) -> int:
    expression = parser.parse_expression(code)
    return numerals.to_int(direct.Executor().evaluate(expression).result)


def test_literals() -> None:
    assert parser.parse_expression("3") == numerals.P3
    assert parser.parse_expression("-3") == numerals.N3
    assert parser.parse_expression("0") == numerals.ZERO
    assert parser.parse_expression("N7") == numerals.N7
    assert parser.parse_expression("Zero") == numerals.ZERO


def test_structure() -> None:
    assert parser.parse_expression("1 + 2 * 3") == judgements.apply(
        judgements.ADD,
        numerals.P1,
        judgements.apply(judgements.MUL, numerals.P2, numerals.P3),
    )
    assert parser.parse_expression("neg(P2)") == judgements.apply(
        judgements.NEG, numerals.P2
    )
    assert parser.parse_expression("-(1)") == judgements.apply(
        judgements.NEG, numerals.P1
    )


@pytest.mark.parametrize(
    "code, value",
    [
        ("1 + 2 * 3", 7),
        ("(1 + 2) * 3", 9),
        ("10 - 4 - 3", 3),
        ("12 / 3 / 2", 2),
        ("-4 / 3", -1),
        ("4 / -3", -1),
        ("2 - -3", 5),
        ("-(2 * 3) + 1", -5),
        ("halve(P8) * N2", -8),
        ("incr(decr(neg(5)))", -5),
        ("P9 + N9", 0),
    ],
)
def test_evaluation(code: str, value: int) -> None:
    assert _evaluate(code) == value


_SYNTAX_ERRORS = (parser.ExpressionSyntaxError, parser_utils.UnexpectedTokenError)


@pytest.mark.parametrize(
    "code", ["", "1 +", "(1 + 2", "1 2", "P10", "sqrt(4)", "1 % 2"]
)
def test_syntax_errors(code: str) -> None:
    with pytest.raises(_SYNTAX_ERRORS):
        parser.parse_expression(code)


def test_error_location() -> None:
    with pytest.raises(parser_utils.UnexpectedTokenError) as info:
        parser.parse_expression("1 + 2)")
    assert info.value.token is not None
    assert info.value.token.column == 6
