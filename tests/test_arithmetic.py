# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import pytest

from hypothesis import given, strategies as st

from unary.core import terms
from unary.data import arithmetic, numerals
from unary.data.numerals import Pred, Succ, ZERO


small = st.integers(min_value=-30, max_value=30)
non_zero = small.filter(lambda value: value != 0)

tiny = st.integers(min_value=-12, max_value=12)
tiny_non_zero = tiny.filter(lambda value: value != 0)


def _create(value: int) -> numerals.Numeral:
    return numerals.create(value)


def _value(numeral: numerals.Numeral) -> int:
    assert numerals.is_well_formed(numeral)
    return numerals.to_int(numeral)


def _truncating_division(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def test_unit_steps() -> None:
    assert arithmetic.negate(ZERO) == ZERO
    assert arithmetic.negate(numerals.P2) == numerals.N2
    assert arithmetic.increment(numerals.N1) == ZERO
    assert arithmetic.increment(ZERO) == numerals.P1
    assert arithmetic.decrement(numerals.P1) == ZERO
    assert arithmetic.decrement(numerals.N2) == numerals.N3


def test_concrete_scenarios() -> None:
    assert arithmetic.add(numerals.P3, numerals.N5) == numerals.N2
    assert arithmetic.subtract(numerals.P2, numerals.P7) == numerals.N5
    assert arithmetic.multiply(numerals.N3, numerals.P4) == _create(-12)
    assert arithmetic.multiply(numerals.N3, numerals.N3) == numerals.P9
    assert arithmetic.halve(_create(-8)) == numerals.N4
    assert arithmetic.divide(_create(12), numerals.P4) == numerals.P3
    assert arithmetic.divide(_create(-12), numerals.P4) == numerals.N3
    assert arithmetic.divide(_create(12), numerals.N4) == numerals.N3
    assert arithmetic.divide(_create(-12), numerals.N4) == numerals.P3


@pytest.mark.parametrize(
    "dividend, divisor, quotient",
    [(4, 3, 1), (-4, 3, -1), (4, -3, -1), (1, 3, 0), (-1, -3, 0), (0, -3, 0)],
)
def test_truncating_division(dividend: int, divisor: int, quotient: int) -> None:
    result = arithmetic.divide(_create(dividend), _create(divisor))
    assert result == _create(quotient)


@pytest.mark.parametrize("dividend", [-3, 0, 3])
def test_division_by_zero(dividend: int) -> None:
    with pytest.raises(arithmetic.DivisionByZeroError):
        arithmetic.divide(_create(dividend), ZERO)
    with pytest.raises(ZeroDivisionError):
        arithmetic.divide(_create(dividend), ZERO)


@pytest.mark.parametrize("value", [1, -1, 7, -7])
def test_halve_odd(value: int) -> None:
    with pytest.raises(arithmetic.OddMagnitudeError):
        arithmetic.halve(_create(value))
    with pytest.raises(arithmetic.UndefinedOperationError):
        arithmetic.halve(_create(value))


def test_ill_formed_operands() -> None:
    with pytest.raises(numerals.IllFormedNumeralError):
        arithmetic.negate(Succ(Pred(ZERO)))
    with pytest.raises(numerals.IllFormedNumeralError):
        arithmetic.add(numerals.P1, Pred(Succ(ZERO)))
    with pytest.raises(numerals.NotANumeralError):
        arithmetic.increment(Succ(terms.variable("x")))


@given(small)
def test_negate(value: int) -> None:
    numeral = _create(value)
    assert _value(arithmetic.negate(numeral)) == -value
    assert arithmetic.negate(arithmetic.negate(numeral)) == numeral


@given(small)
def test_increment_decrement(value: int) -> None:
    numeral = _create(value)
    assert _value(arithmetic.increment(numeral)) == value + 1
    assert _value(arithmetic.decrement(numeral)) == value - 1
    assert arithmetic.decrement(arithmetic.increment(numeral)) == numeral
    assert arithmetic.increment(arithmetic.decrement(numeral)) == numeral


@given(small, small)
def test_add(left: int, right: int) -> None:
    result = arithmetic.add(_create(left), _create(right))
    assert _value(result) == left + right
    assert result == arithmetic.add(_create(right), _create(left))


@given(small, small, small)
def test_add_associative(a: int, b: int, c: int) -> None:
    x, y, z = _create(a), _create(b), _create(c)
    assert arithmetic.add(arithmetic.add(x, y), z) == arithmetic.add(
        x, arithmetic.add(y, z)
    )


@given(small)
def test_add_identity_and_inverse(value: int) -> None:
    numeral = _create(value)
    assert arithmetic.add(ZERO, numeral) == numeral
    assert arithmetic.add(numeral, ZERO) == numeral
    assert arithmetic.add(numeral, arithmetic.negate(numeral)) == ZERO


@given(small, small)
def test_subtract(left: int, right: int) -> None:
    x, y = _create(left), _create(right)
    assert _value(arithmetic.subtract(x, y)) == left - right
    assert arithmetic.subtract(x, x) == ZERO


@given(small)
def test_halve(value: int) -> None:
    assert _value(arithmetic.halve(_create(2 * value))) == value


@given(small, small)
def test_multiply(left: int, right: int) -> None:
    x, y = _create(left), _create(right)
    result = arithmetic.multiply(x, y)
    assert _value(result) == left * right
    assert _value(arithmetic.multiply(y, x)) == left * right


@given(small)
def test_multiply_neutral_and_absorbing(value: int) -> None:
    numeral = _create(value)
    assert arithmetic.multiply(numeral, numerals.P1) == numeral
    assert arithmetic.multiply(numerals.P1, numeral) == numeral
    assert arithmetic.multiply(numeral, ZERO) == ZERO
    assert arithmetic.multiply(ZERO, numeral) == ZERO


@given(small, non_zero)
def test_divide(dividend: int, divisor: int) -> None:
    result = arithmetic.divide(_create(dividend), _create(divisor))
    assert _value(result) == _truncating_division(dividend, divisor)


@given(tiny, tiny_non_zero)
def test_divide_exact(quotient: int, divisor: int) -> None:
    product = arithmetic.multiply(_create(quotient), _create(divisor))
    assert _value(arithmetic.divide(product, _create(divisor))) == quotient


@given(small, small)
def test_ordering_agrees_with_integers(left: int, right: int) -> None:
    assert (_create(left) < _create(right)) == (left < right)
    assert (_create(left) == _create(right)) == (left == right)
