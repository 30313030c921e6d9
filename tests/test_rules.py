# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import pytest

from unary.core import inference, terms
from unary.data import arithmetic, numerals
from unary.semantics import judgements, rules
from unary.semantics.executors import direct, engine


VALUES = range(-3, 4)

UNARY = {
    judgements.NEG: arithmetic.negate,
    judgements.INCR: arithmetic.increment,
    judgements.DECR: arithmetic.decrement,
}

BINARY = {
    judgements.ADD: arithmetic.add,
    judgements.SUB: arithmetic.subtract,
    judgements.MUL: arithmetic.multiply,
}


@pytest.fixture
def executor() -> engine.Executor:
    return engine.Executor(rules.system)


def _expression(operator: terms.Symbol, *values: int) -> terms.Term:
    return judgements.apply(operator, *map(numerals.create, values))


def test_rule_names_are_unique() -> None:
    names = [rule.name for rule in rules.system.rules]
    assert len(names) == len(set(names)) == 29
    assert rules.system.get_rule("div-succ-succ-less").premises
    with pytest.raises(KeyError):
        rules.system.get_rule("div-zero-zero")


@pytest.mark.parametrize("operator", list(UNARY))
def test_unary_operations(executor: engine.Executor, operator: terms.Symbol) -> None:
    for value in VALUES:
        evaluation = executor.evaluate(_expression(operator, value))
        assert evaluation.result == UNARY[operator](numerals.create(value))


@pytest.mark.parametrize("operator", list(BINARY))
def test_binary_operations(executor: engine.Executor, operator: terms.Symbol) -> None:
    for left in VALUES:
        for right in VALUES:
            evaluation = executor.evaluate(_expression(operator, left, right))
            expected = BINARY[operator](numerals.create(left), numerals.create(right))
            assert evaluation.result == expected


def test_division(executor: engine.Executor) -> None:
    for left in range(-7, 8):
        for right in (-3, -2, -1, 1, 2, 3):
            evaluation = executor.evaluate(_expression(judgements.DIV, left, right))
            assert evaluation.result == arithmetic.divide(
                numerals.create(left), numerals.create(right)
            )


def test_halving(executor: engine.Executor) -> None:
    for value in (-6, -2, 0, 4, 8):
        evaluation = executor.evaluate(_expression(judgements.HALVE, value))
        assert evaluation.result == numerals.create(value // 2)


@pytest.mark.parametrize("dividend", [-2, 0, 2])
def test_no_derivation_for_division_by_zero(
    executor: engine.Executor, dividend: int
) -> None:
    with pytest.raises(inference.NoDerivationError):
        executor.evaluate(_expression(judgements.DIV, dividend, 0))


@pytest.mark.parametrize("value", [-3, -1, 1, 5])
def test_no_derivation_for_odd_halving(executor: engine.Executor, value: int) -> None:
    with pytest.raises(inference.NoDerivationError):
        executor.evaluate(_expression(judgements.HALVE, value))


def test_determinism() -> None:
    executor = engine.Executor(rules.system, check_determinism=True)
    for expression in (
        _expression(judgements.DIV, 5, -2),
        _expression(judgements.DIV, -1, -3),
        _expression(judgements.MUL, -2, 3),
        judgements.apply(
            judgements.ADD,
            _expression(judgements.HALVE, 4),
            _expression(judgements.SUB, 1, 3),
        ),
    ):
        result = direct.Executor().evaluate(expression).result
        assert executor.evaluate(expression).result == result


def test_breadth_first_search() -> None:
    executor = engine.Executor(rules.system, depth_first=False)
    evaluation = executor.evaluate(_expression(judgements.ADD, 2, -1))
    assert evaluation.result == numerals.P1


def test_derivation_tree(executor: engine.Executor) -> None:
    evaluation = executor.evaluate(_expression(judgements.NEG, 2))
    tree = evaluation.tree
    assert tree is not None
    assert tree.instance.rule.name == "eval-unary"
    assert [premise.instance.rule.name for premise in tree.premises] == [
        "eval-numeral",
        "neg-succ",
    ]
    assert tree.conclusion == judgements.evaluation(
        _expression(judgements.NEG, 2), numerals.N2
    )
    # eval-unary, eval-numeral, and three negation steps
    assert tree.size == 5
    assert tree.height == 4


def test_nested_expression(executor: engine.Executor) -> None:
    expression = judgements.apply(
        judgements.MUL,
        _expression(judgements.INCR, 1),
        _expression(judgements.DIV, -7, 2),
    )
    assert executor.evaluate(expression).result == numerals.create(-6)
