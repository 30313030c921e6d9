# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Arithmetic on unary numerals by structural recursion.

Only the unit-step operations `negate`, `increment`, and `decrement` inspect
the structure of numerals directly, all other operations are defined in terms
of them. The public functions check their operands once and then delegate to
the recursive implementations which assume well-formed operands.
"""

from __future__ import annotations

import typing as t

from ..core import terms

from . import numerals
from .numerals import Numeral, Pred, Succ, Zero, ZERO


class UndefinedOperationError(Exception):
    pass


class OddMagnitudeError(UndefinedOperationError):
    pass


class DivisionByZeroError(UndefinedOperationError, ZeroDivisionError):
    pass


def _operand(numeral: Numeral) -> Numeral:
    assert isinstance(numeral, (Succ, Pred))
    return t.cast(Numeral, numeral.operand)


def _negate(numeral: Numeral) -> Numeral:
    if isinstance(numeral, Succ):
        return Pred(_negate(_operand(numeral)))
    elif isinstance(numeral, Pred):
        return Succ(_negate(_operand(numeral)))
    return ZERO


def _increment(numeral: Numeral) -> Numeral:
    if isinstance(numeral, Pred):
        return _operand(numeral)
    return Succ(numeral)


def _decrement(numeral: Numeral) -> Numeral:
    if isinstance(numeral, Succ):
        return _operand(numeral)
    return Pred(numeral)


def _add(left: Numeral, right: Numeral) -> Numeral:
    # add(S(a), b) = add(a, incr(b)) and add(P(a), b) = add(a, decr(b))
    while not isinstance(left, Zero):
        if isinstance(left, Succ):
            right = _increment(right)
        else:
            right = _decrement(right)
        left = _operand(left)
    return right


def _subtract(left: Numeral, right: Numeral) -> Numeral:
    return _add(left, _negate(right))


def _halve(numeral: Numeral) -> Numeral:
    if isinstance(numeral, Zero):
        return ZERO
    inner = _operand(numeral)
    if type(inner) is not type(numeral):
        raise OddMagnitudeError("halving is undefined for odd magnitudes")
    if isinstance(numeral, Succ):
        return Succ(_halve(_operand(inner)))
    return Pred(_halve(_operand(inner)))


def _multiply(left: Numeral, right: Numeral) -> Numeral:
    if isinstance(left, Zero):
        return ZERO
    elif isinstance(left, Succ):
        return _add(right, _multiply(_operand(left), right))
    return _add(_negate(right), _multiply(_operand(left), right))


def _divide_positive(dividend: Succ, divisor: Succ) -> Numeral:
    remainder = _subtract(_operand(dividend), _operand(divisor))
    if isinstance(remainder, Pred):
        # the dividend is smaller than the divisor
        return ZERO
    return Succ(_divide(remainder, divisor))


def _divide(dividend: Numeral, divisor: Numeral) -> Numeral:
    if isinstance(divisor, Zero):
        raise DivisionByZeroError("division by zero")
    if isinstance(dividend, Zero):
        return ZERO
    if isinstance(dividend, Succ):
        if isinstance(divisor, Succ):
            return _divide_positive(dividend, divisor)
        assert isinstance(divisor, Pred)
        return _negate(
            _divide_positive(dividend, Succ(_negate(_operand(divisor))))
        )
    assert isinstance(dividend, Pred)
    positive_dividend = Succ(_negate(_operand(dividend)))
    if isinstance(divisor, Pred):
        return _divide_positive(
            positive_dividend, Succ(_negate(_operand(divisor)))
        )
    assert isinstance(divisor, Succ)
    return _negate(_divide_positive(positive_dividend, divisor))


def negate(operand: terms.Term) -> Numeral:
    """
    Computes `-operand`.
    """
    return _negate(numerals.check(operand))


def increment(operand: terms.Term) -> Numeral:
    """
    Computes `operand + 1` without ever wrapping a successor around a
    predecessor, i.e., `increment(Pred(a))` is `a`.
    """
    return _increment(numerals.check(operand))


def decrement(operand: terms.Term) -> Numeral:
    """
    Computes `operand - 1`, the mirror image of `increment`.
    """
    return _decrement(numerals.check(operand))


def add(left: terms.Term, right: terms.Term) -> Numeral:
    return _add(numerals.check(left), numerals.check(right))


def subtract(left: terms.Term, right: terms.Term) -> Numeral:
    return _subtract(numerals.check(left), numerals.check(right))


def halve(operand: terms.Term) -> Numeral:
    """
    Computes `operand / 2` for numerals of even magnitude.

    Raises `OddMagnitudeError` for numerals of odd magnitude. The recursion
    depth is half of the magnitude which makes this operation preferable to
    dividing by two.
    """
    return _halve(numerals.check(operand))


def multiply(left: terms.Term, right: terms.Term) -> Numeral:
    """
    Computes `left * right` by repeated addition, the recursion depth is the
    magnitude of `left`.
    """
    return _multiply(numerals.check(left), numerals.check(right))


def divide(dividend: terms.Term, divisor: terms.Term) -> Numeral:
    """
    Computes `dividend / divisor` rounding toward zero.

    All sign combinations are reduced to dividing positive numerals by
    repeated subtraction. Raises `DivisionByZeroError` if `divisor` is zero.
    """
    return _divide(numerals.check(dividend), numerals.check(divisor))
