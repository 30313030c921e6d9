# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Export of terms, rules, and derivation trees to LaTeX.

Rules and trees are typeset with the `ebproof` package and terms are colored
with the colors `term-symbol`, `term-variable`, and `term-numeral` which have
to be defined by the including document.
"""

from __future__ import annotations

import typing as t

import re

from ..core import inference, terms
from ..data import numerals

from . import render


_LATEX_ESCAPE = {
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "\\": r"\textbackslash{}",
}

_latex_escape_pattern = re.compile(
    "|".join(re.escape(source) for source in _LATEX_ESCAPE)
)


def latex_escape(source: str) -> str:
    return _latex_escape_pattern.sub(lambda match: _LATEX_ESCAPE[match[0]], source)


def get_term_color(term: terms.Term) -> t.Optional[str]:
    if isinstance(term, numerals.Numeral):
        return "term-numeral"
    elif isinstance(term, terms.Symbol):
        return "term-symbol"
    elif isinstance(term, terms.Variable):
        return "term-variable"
    return None


def latexify_box(box: render.Box) -> str:
    chunks: t.List[str] = []
    stack: t.List[t.Union[str, render.Element]] = [box]
    while stack:
        top = stack.pop()
        if isinstance(top, str):
            chunks.append(top)
        elif isinstance(top, render.Chunk):
            chunks.append(top.math or f"\\texttt{{{latex_escape(top.text)}}}")
        else:
            assert isinstance(top, render.Box), f"unexpected element {top}"
            color = top.term and get_term_color(top.term)
            if color is not None:
                chunks.append(f"{{\\color{{{color}}}")
                stack.append("}")
            stack.extend(reversed(top.elements))
    return " ".join(chunks)


def latexify_term(term: terms.Term, renderer: render.Renderer) -> str:
    return latexify_box(renderer.render_term(term))


def _latexify_inference(
    name: t.Optional[str], hypotheses: int, conclusion: str
) -> t.List[str]:
    if name:
        return [
            f"\\infer{hypotheses}[\\textsc{{{latex_escape(name)}}}]{{{conclusion}}}"
        ]
    return [f"\\infer{hypotheses}{{{conclusion}}}"]


def latexify_rule(rule: inference.Rule, renderer: render.Renderer) -> str:
    buffer: t.List[str] = ["\\begin{prooftree}"]
    hypotheses = [latexify_term(premise, renderer) for premise in rule.premises]
    hypotheses.extend(
        latexify_box(renderer.render_condition(condition))
        for condition in rule.conditions
    )
    buffer.extend(f"\\hypo{{{hypothesis}}}" for hypothesis in hypotheses)
    buffer.extend(
        _latexify_inference(
            rule.name, len(hypotheses), latexify_term(rule.conclusion, renderer)
        )
    )
    buffer.append("\\end{prooftree}")
    return "\n".join(buffer)


def _latexify_tree(
    tree: inference.Tree, renderer: render.Renderer, buffer: t.List[str]
) -> None:
    for premise in tree.premises:
        _latexify_tree(premise, renderer, buffer)
    conditions = [
        latexify_box(renderer.render_condition(condition, tree.instance.substitution))
        for condition in tree.instance.rule.conditions
    ]
    buffer.extend(f"\\hypo{{{condition}}}" for condition in conditions)
    buffer.extend(
        _latexify_inference(
            tree.instance.rule.name,
            len(tree.premises) + len(conditions),
            latexify_term(tree.conclusion, renderer),
        )
    )


def latexify_tree(tree: inference.Tree, renderer: render.Renderer) -> str:
    buffer: t.List[str] = ["\\begin{prooftree}"]
    _latexify_tree(tree, renderer, buffer)
    buffer.append("\\end{prooftree}")
    return "\n".join(buffer)


def latexify_display(source: str, *, scale: float = 0.8) -> str:
    """
    Wraps a prooftree such that it is scaled down to the width of the page.
    """
    return "\n".join(
        (
            f"\\begin{{adjustbox}}{{scale={scale},max width=.98\\textwidth,center}}",
            f"$\\displaystyle {source}$",
            "\\end{adjustbox}",
        )
    )
