# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
An executor based on the inference engine.
"""

from __future__ import annotations

import dataclasses as d

from ...core import inference, terms, unification
from ...data import numerals

from .. import judgements

from . import interface


class NonDeterminismError(Exception):
    expression: terms.Term

    def __init__(self, expression: terms.Term) -> None:
        super().__init__(expression)
        self.expression = expression


@d.dataclass(eq=False)
class Executor(interface.Executor):
    system: inference.System

    check_determinism: bool = False
    depth_first: bool = True

    def evaluate(self, expression: terms.Term) -> interface.Evaluation:
        question = judgements.evaluation(expression, judgements.some_result)
        answers = self.system.iter_answers(question, depth_first=self.depth_first)
        answer = next(answers, None)
        if answer is None:
            raise inference.NoDerivationError(
                f"no derivation for the evaluation of {expression!r}"
            )
        if self.check_determinism and next(answers, None) is not None:
            raise NonDeterminismError(expression)
        result = unification.get_solution(
            answer.substitution, judgements.some_result
        )
        assert isinstance(result, numerals.Numeral) and numerals.is_numeral(result)
        return interface.Evaluation(expression, result, tree=answer.tree)
