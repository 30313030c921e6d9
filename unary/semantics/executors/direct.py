# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
An executor evaluating expressions directly with the arithmetic functions.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

from ...core import terms
from ...data import arithmetic, numerals

from .. import judgements

from . import interface


_UNARY: t.Mapping[terms.Term, t.Callable[[terms.Term], numerals.Numeral]] = {
    judgements.NEG: arithmetic.negate,
    judgements.INCR: arithmetic.increment,
    judgements.DECR: arithmetic.decrement,
    judgements.HALVE: arithmetic.halve,
}

_BINARY: t.Mapping[
    terms.Term, t.Callable[[terms.Term, terms.Term], numerals.Numeral]
] = {
    judgements.ADD: arithmetic.add,
    judgements.SUB: arithmetic.subtract,
    judgements.MUL: arithmetic.multiply,
    judgements.DIV: arithmetic.divide,
}


@d.dataclass(eq=False)
class Executor(interface.Executor):
    def _evaluate(self, expression: terms.Term) -> numerals.Numeral:
        if isinstance(expression, numerals.Numeral):
            return numerals.check(expression)
        if isinstance(expression, terms.Sequence) and expression.length in {2, 3}:
            operator, *operands = expression.elements
            arguments = [self._evaluate(operand) for operand in operands]
            if len(arguments) == 1 and operator in _UNARY:
                return _UNARY[operator](arguments[0])
            elif len(arguments) == 2 and operator in _BINARY:
                return _BINARY[operator](arguments[0], arguments[1])
        raise interface.UnsupportedExpressionError(
            f"unable to evaluate expression {expression!r}"
        )

    def evaluate(self, expression: terms.Term) -> interface.Evaluation:
        return interface.Evaluation(expression, self._evaluate(expression))
