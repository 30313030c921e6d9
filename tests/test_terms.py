# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

from unary.core import terms
from unary.data.numerals import Pred, Succ, ZERO


def test_variables() -> None:
    x, y = terms.variables("x", "y")
    term = terms.sequence("add", Succ(x), Pred(y))
    assert term.variables == {x, y}
    assert not term.is_closed
    assert terms.sequence("add", Succ(ZERO), ZERO).is_closed


def test_substitute() -> None:
    x = terms.variable("x")
    pattern = Succ(Succ(x))
    assert pattern.substitute({x: ZERO}) == Succ(Succ(ZERO))
    closed = Succ(ZERO)
    assert closed.substitute({x: ZERO}) is closed


def test_variables_are_compared_by_identity() -> None:
    x = terms.variable("x")
    assert x != terms.variable("x")
    assert x.clone().name == "x"
    assert x.clone("'").name == "x'"
