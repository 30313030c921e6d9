# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Judgement forms and expression terms of the unary arithmetic semantics.

Expressions are sequences in prefix form, e.g., `(add e₁ e₂)` or `(neg e)`,
where the leaves are numerals. There are two kinds of judgements:

- evaluation judgements `e ⇓ r` stating that expression `e` evaluates to the
  numeral `r`, and
- operation judgements `o(a₁, …, aₙ) ⇓ r` stating that applying the operation
  `o` to the numerals `a₁, …, aₙ` results in `r`.
"""

from __future__ import annotations

import typing as t

from ..core import terms
from ..pretty import define, render


EVALUATES_TO = terms.symbol("⇓")


NEG = terms.symbol("neg")
INCR = terms.symbol("incr")
DECR = terms.symbol("decr")
HALVE = terms.symbol("halve")

ADD = terms.symbol("add")
SUB = terms.symbol("sub")
MUL = terms.symbol("mul")
DIV = terms.symbol("div")


UNARY_OPERATORS: t.FrozenSet[terms.Symbol] = frozenset({NEG, INCR, DECR, HALVE})
BINARY_OPERATORS: t.FrozenSet[terms.Symbol] = frozenset({ADD, SUB, MUL, DIV})


def apply(operator: terms.Term, *operands: terms.Term) -> terms.Term:
    """
    Builds the expression applying `operator` to the given operands.
    """
    return terms.sequence(operator, *operands)


def evaluation(expression: terms.Term, result: terms.Term) -> terms.Term:
    return terms.sequence(expression, EVALUATES_TO, result)


def operation(
    operator: terms.Term, operands: t.Sequence[terms.Term], result: terms.Term
) -> terms.Term:
    return terms.sequence(operator, *operands, EVALUATES_TO, result)


some_result = define.variable("some_result", text="r", math="r")


_match_operator = terms.variable("match_operator")
_match_left = terms.variable("match_left")
_match_right = terms.variable("match_right")
_match_result = terms.variable("match_result")


def _render_evaluation(
    builder: render.BoxBuilder, expression: render.Box, result: render.Box
) -> None:
    builder.append_box(expression)
    builder.append_chunk(" ⇓ ", math="\\Downarrow")
    builder.append_box(result)


def _render_application(
    builder: render.BoxBuilder, operator: render.Box, *operands: render.Box
) -> None:
    builder.append_box(operator)
    builder.append_chunk("(", math="\\left(")
    for index, operand in enumerate(operands):
        if index:
            builder.append_chunk(", ", math=",\\ ")
        builder.append_box(operand)
    builder.append_chunk(")", math="\\right)")


def _render_unary_operation(
    builder: render.BoxBuilder,
    operator: render.Box,
    operand: render.Box,
    result: render.Box,
) -> None:
    _render_application(builder, operator, operand)
    builder.append_chunk(" ⇓ ", math="\\Downarrow")
    builder.append_box(result)


def _render_binary_operation(
    builder: render.BoxBuilder,
    operator: render.Box,
    left: render.Box,
    right: render.Box,
    result: render.Box,
) -> None:
    _render_application(builder, operator, left, right)
    builder.append_chunk(" ⇓ ", math="\\Downarrow")
    builder.append_box(result)


# The order matters: evaluation judgements have to be tried before binary
# applications which have the same length.
NOTATIONS = (
    render.Notation(
        evaluation(_match_left, _match_result),
        (_match_left, _match_result),
        _render_evaluation,
    ),
    render.Notation(
        operation(_match_operator, (_match_left,), _match_result),
        (_match_operator, _match_left, _match_result),
        _render_unary_operation,
    ),
    render.Notation(
        operation(_match_operator, (_match_left, _match_right), _match_result),
        (_match_operator, _match_left, _match_right, _match_result),
        _render_binary_operation,
    ),
    render.Notation(
        apply(_match_operator, _match_left),
        (_match_operator, _match_left),
        _render_application,
    ),
    render.Notation(
        apply(_match_operator, _match_left, _match_right),
        (_match_operator, _match_left, _match_right),
        _render_application,
    ),
)


def create_renderer() -> render.Renderer:
    renderer = render.Renderer()
    for notation in NOTATIONS:
        renderer.add_notation(notation)
    for operator in UNARY_OPERATORS | BINARY_OPERATORS:
        renderer.add_math_symbol(operator.symbol, f"\\mathsf{{{operator.symbol}}}")
    renderer.add_math_symbol(EVALUATES_TO.symbol, "\\Downarrow")
    return renderer


default_renderer = create_renderer()
