# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import dataclasses as d
import typing as t

import abc
import functools

from mxu.itertools import iter_lookahead

from ..core import inference, terms, unification
from ..data import numerals

from . import define


class Element(abc.ABC):
    pass


@d.dataclass(frozen=True)
class Chunk(Element):
    text: str
    math: t.Optional[str] = None


@d.dataclass(frozen=True)
class Box(Element):
    elements: t.Tuple[Element, ...]
    term: t.Optional[terms.Term] = None

    @property
    def text(self) -> str:
        chunks: t.List[str] = []
        stack: t.List[Element] = [self]
        while stack:
            element = stack.pop()
            if isinstance(element, Chunk):
                chunks.append(element.text)
            else:
                assert isinstance(element, Box)
                stack.extend(reversed(element.elements))
        return "".join(chunks)


class RenderNotation(t.Protocol):
    def __call__(self, builder: BoxBuilder, *args: Box) -> None:
        pass


@d.dataclass(frozen=True)
class Notation:
    """
    A custom notation for terms matching `pattern`.

    The terms bound to `variables` are rendered first and then passed in the
    given order to `render`.
    """

    pattern: terms.Term
    variables: t.Tuple[terms.Variable, ...]
    render: RenderNotation

    def apply(self, term: terms.Term, builder: BoxBuilder) -> bool:
        substitution = unification.match(self.pattern, term)
        if substitution is None:
            return False
        self.render(
            builder,
            *(
                builder.renderer.render_term(substitution[variable])
                for variable in self.variables
            ),
        )
        return True


@d.dataclass(eq=False)
class BoxBuilder:
    renderer: Renderer
    elements: t.List[Element] = d.field(default_factory=list)

    def build(self, term: t.Optional[terms.Term] = None) -> Box:
        return Box(tuple(self.elements), term=term)

    def append_chunk(self, text: str, *, math: t.Optional[str] = None) -> None:
        self.elements.append(Chunk(text, math=math))

    def append_box(self, box: Box) -> None:
        self.elements.append(box)

    def append_term(self, term: terms.Term) -> None:
        self.elements.append(self.renderer.render_term(term))


@d.dataclass(eq=False)
class Renderer:
    _notations: t.List[Notation] = d.field(default_factory=list)
    _symbol_to_math: t.Dict[str, str] = d.field(default_factory=dict)

    def add_notation(self, notation: Notation) -> None:
        self._notations.append(notation)

    def add_math_symbol(self, symbol: str, math: str) -> None:
        self._symbol_to_math[symbol] = math

    def render_condition(
        self,
        condition: inference.Condition,
        substitution: t.Optional[terms.Substitution] = None,
    ) -> Box:
        builder = BoxBuilder(self)
        render_condition(condition, builder, substitution)
        return builder.build()

    def render_term(self, term: terms.Term) -> Box:
        builder = BoxBuilder(self)
        if not any(notation.apply(term, builder) for notation in self._notations):
            self._render_term(term, builder)
        return builder.build(term=term)

    @functools.singledispatchmethod
    def _render_term(self, term: terms.Term, builder: BoxBuilder) -> None:
        raise NotImplementedError(f"`_render_term` not implemented for {type(term)}")

    @_render_term.register
    def _render_variable(self, term: terms.Variable, builder: BoxBuilder) -> None:
        info = define.get_variable_info(term)
        text = term.name
        math = term.name
        if info is not None:
            text = info.text or term.name
            math = info.math
        builder.append_chunk(text or "unnamed", math=math)

    @_render_term.register
    def _render_symbol(self, term: terms.Symbol, builder: BoxBuilder) -> None:
        builder.append_chunk(
            term.symbol, math=self._symbol_to_math.get(term.symbol, None)
        )

    @_render_term.register
    def _render_sequence(self, term: terms.Sequence, builder: BoxBuilder) -> None:
        builder.append_chunk("(", math="\\left(")
        for child, lookahead in iter_lookahead(term.elements):
            builder.append_term(child)
            if lookahead:
                builder.append_chunk(" ", math="\\ ")
        builder.append_chunk(")", math="\\right)")

    @_render_term.register(numerals.Pred)
    @_render_term.register(numerals.Succ)
    @_render_term.register(numerals.Zero)
    def _render_numeral(self, term: numerals.Numeral, builder: BoxBuilder) -> None:
        if numerals.is_numeral(term):
            value = str(numerals.to_int(term))
            builder.append_chunk(value, math=value)
        else:
            assert isinstance(term, (numerals.Succ, numerals.Pred))
            name = "S" if isinstance(term, numerals.Succ) else "P"
            builder.append_chunk(name, math=f"\\mathsf{{{name}}}")
            builder.append_chunk("(", math="\\left(")
            builder.append_term(term.operand)
            builder.append_chunk(")", math="\\right)")


@functools.singledispatch
def render_condition(
    condition: inference.Condition,
    builder: BoxBuilder,
    substitution: t.Optional[terms.Substitution] = None,
) -> None:
    raise NotImplementedError(f"`render_condition` not implemented for {condition}")


_REQUIREMENT_NOTATION = {
    numerals.Requirement.NUMERAL: (" ∈ ℤ", "\\in \\mathbb{Z}"),
    numerals.Requirement.NON_NEGATIVE: (" ≥ 0", "\\geq 0"),
    numerals.Requirement.NON_POSITIVE: (" ≤ 0", "\\leq 0"),
}


@render_condition.register
def render_numeral_condition(
    condition: numerals.NumeralCondition,
    builder: BoxBuilder,
    substitution: t.Optional[terms.Substitution] = None,
) -> None:
    builder.append_term(condition.term.substitute(substitution or {}))
    text, math = _REQUIREMENT_NOTATION[condition.requirement]
    builder.append_chunk(text, math=math)


default_renderer = Renderer()
