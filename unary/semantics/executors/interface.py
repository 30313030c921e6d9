# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import dataclasses as d
import typing as t

import abc

from ...core import inference, terms
from ...data import numerals


@d.dataclass(frozen=True)
class Evaluation:
    expression: terms.Term
    result: numerals.Numeral

    tree: t.Optional[inference.Tree] = None


class UnsupportedExpressionError(Exception):
    pass


class Executor(abc.ABC):
    @abc.abstractmethod
    def evaluate(self, expression: terms.Term) -> Evaluation:
        raise NotImplementedError()
