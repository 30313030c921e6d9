# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Module for pretty printing inference rules and derivation trees on the console.

Layouts are built from rectangular blocks of lines which are stacked either
beside or above each other. The width of a line is tracked separately from
its text such that color codes do not disturb the alignment.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import enum

import colorama

from ..core import inference, terms
from ..data import numerals

from . import render


colorama.just_fix_windows_console()


class Color(enum.Enum):
    RED = colorama.Fore.RED
    GREEN = colorama.Fore.GREEN
    YELLOW = colorama.Fore.YELLOW
    BLUE = colorama.Fore.BLUE
    MAGENTA = colorama.Fore.MAGENTA
    CYAN = colorama.Fore.CYAN

    RESET = colorama.Fore.RESET


class Alignment(enum.Enum):
    START = "start"
    CENTER = "center"
    END = "end"


@d.dataclass(frozen=True)
class Line:
    text: str
    width: int

    def pad(self, width: int, alignment: Alignment = Alignment.START) -> Line:
        missing = width - self.width
        if missing <= 0:
            return self
        if alignment is Alignment.START:
            left = 0
        elif alignment is Alignment.CENTER:
            left = missing // 2
        else:
            left = missing
        return Line(
            " " * left + self.text + " " * (missing - left), width
        )


EMPTY_LINE = Line("", 0)


@d.dataclass(frozen=True)
class Block:
    lines: t.Tuple[Line, ...] = ()

    @property
    def width(self) -> int:
        return max((line.width for line in self.lines), default=0)

    @property
    def rows(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(line.text.rstrip() for line in self.lines)


def fragment(
    text: str, *, color: t.Optional[Color] = None, colorize: bool = True
) -> Block:
    if color is not None and colorize:
        return Block((Line(color.value + text + Color.RESET.value, len(text)),))
    return Block((Line(text, len(text)),))


def beside(blocks: t.Sequence[Block], *, spacing: int = 0) -> Block:
    """
    Places the blocks next to each other aligning them at their last row.
    """
    rows = max((block.rows for block in blocks), default=0)
    lines: t.List[Line] = []
    for row in range(rows):
        text: t.List[str] = []
        width = 0
        for index, block in enumerate(blocks):
            if index:
                text.append(" " * spacing)
                width += spacing
            offset = row - (rows - block.rows)
            line = block.lines[offset] if offset >= 0 else EMPTY_LINE
            text.append(line.pad(block.width).text)
            width += block.width
        lines.append(Line("".join(text), width))
    return Block(tuple(lines))


def above(
    blocks: t.Sequence[Block], *, alignment: Alignment = Alignment.CENTER
) -> Block:
    width = max((block.width for block in blocks), default=0)
    return Block(
        tuple(
            line.pad(width, alignment) for block in blocks for line in block.lines
        )
    )


def get_term_color(term: terms.Term) -> t.Optional[Color]:
    if isinstance(term, numerals.Numeral):
        return Color.GREEN
    elif isinstance(term, terms.Symbol):
        return Color.CYAN
    elif isinstance(term, terms.Variable):
        return Color.MAGENTA
    return None


def block_from_box(
    box: render.Box, term: t.Optional[terms.Term] = None, *, colorize: bool = True
) -> Block:
    text: t.List[str] = []
    width = 0
    stack: t.List[t.Tuple[render.Element, t.Optional[terms.Term]]] = [(box, term)]
    while stack:
        element, term = stack.pop()
        if isinstance(element, render.Chunk):
            color = None if term is None else get_term_color(term)
            chunk = fragment(element.text, color=color, colorize=colorize)
            text.append(chunk.lines[0].text)
            width += len(element.text)
            continue
        assert isinstance(element, render.Box), f"unexpected element {element}"
        stack.extend(
            (child, element.term or term) for child in reversed(element.elements)
        )
    return Block((Line("".join(text), width),))


def block_from_term(
    term: terms.Term, renderer: render.Renderer, *, colorize: bool = True
) -> Block:
    return block_from_box(renderer.render_term(term), term, colorize=colorize)


def block_from_condition(
    condition: inference.Condition,
    renderer: render.Renderer,
    substitution: t.Optional[terms.Substitution] = None,
    *,
    colorize: bool = True,
) -> Block:
    return block_from_box(
        renderer.render_condition(condition, substitution), colorize=colorize
    )


def _inference(
    name: t.Optional[str], premises: t.Sequence[Block], conclusion: Block
) -> Block:
    hypotheses = beside(premises, spacing=3)
    line = fragment("—" * (max(hypotheses.width, conclusion.width) + 2))
    body = above((hypotheses, line, conclusion))
    label = Block(
        fragment(name or "unnamed").lines + (EMPTY_LINE,) * conclusion.rows
    )
    return beside((label, body), spacing=1)


def block_from_rule(
    rule: inference.Rule, renderer: render.Renderer, *, colorize: bool = True
) -> Block:
    premises = [
        block_from_term(premise, renderer, colorize=colorize)
        for premise in rule.premises
    ]
    premises.extend(
        block_from_condition(condition, renderer, colorize=colorize)
        for condition in rule.conditions
    )
    conclusion = block_from_term(rule.conclusion, renderer, colorize=colorize)
    return _inference(rule.name, premises, conclusion)


def block_from_tree(
    tree: inference.Tree,
    renderer: render.Renderer,
    *,
    colorize: bool = True,
    hollow: bool = False,
) -> Block:
    premises = [
        block_from_tree(premise, renderer, colorize=colorize, hollow=hollow)
        for premise in tree.premises
    ]
    for condition in tree.instance.rule.conditions:
        if hollow:
            premises.append(fragment(" ⋯ "))
        else:
            premises.append(
                block_from_condition(
                    condition,
                    renderer,
                    tree.instance.substitution,
                    colorize=colorize,
                )
            )
    if hollow:
        conclusion = fragment(" ⋯ ")
    else:
        conclusion = block_from_term(tree.conclusion, renderer, colorize=colorize)
    return _inference(tree.instance.rule.name, premises, conclusion)


def _indent(block: Block, indent: int) -> str:
    if indent:
        block = beside((fragment(" " * indent), block))
    return block.text


def format_term(
    term: terms.Term, renderer: render.Renderer, *, colorize: bool = True
) -> str:
    return block_from_term(term, renderer, colorize=colorize).text


def format_rule(
    rule: inference.Rule,
    renderer: render.Renderer,
    *,
    colorize: bool = True,
    indent: int = 0,
) -> str:
    return _indent(block_from_rule(rule, renderer, colorize=colorize), indent)


def format_tree(
    tree: inference.Tree,
    renderer: render.Renderer,
    *,
    colorize: bool = True,
    indent: int = 0,
    hollow: bool = False,
) -> str:
    return _indent(
        block_from_tree(tree, renderer, colorize=colorize, hollow=hollow), indent
    )
