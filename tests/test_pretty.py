# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

from unary.data import numerals
from unary.data.numerals import Succ
from unary.pretty import console, latex
from unary.semantics import judgements, parser, rules
from unary.semantics.executors import engine


renderer = judgements.default_renderer


def test_render_terms() -> None:
    expression = parser.parse_expression("neg(3) + -2")
    assert renderer.render_term(expression).text == "add(neg(3), -2)"
    judgement = judgements.evaluation(expression, numerals.N5)
    assert renderer.render_term(judgement).text == "add(neg(3), -2) ⇓ -5"


def test_render_patterns() -> None:
    rule = rules.system.get_rule("neg-succ")
    assert renderer.render_term(rule.conclusion).text == "neg(S(a)) ⇓ P(b)"
    (condition,) = rule.conditions
    assert renderer.render_condition(condition).text == "a ≥ 0"
    assert renderer.render_term(Succ(numerals.P1)).text == "2"


def test_format_rule() -> None:
    rule = rules.system.get_rule("add-succ")
    text = console.format_rule(rule, renderer, colorize=False)
    premises, line, conclusion = text.splitlines()
    assert premises.strip() == "incr(b) ⇓ c   add(a, c) ⇓ r   a ≥ 0"
    assert line.startswith("add-succ —")
    assert conclusion.strip() == "add(S(a), b) ⇓ r"


def test_format_tree() -> None:
    expression = parser.parse_expression("incr(1)")
    tree = engine.Executor(rules.system).evaluate(expression).tree
    assert tree is not None
    text = console.format_tree(tree, renderer, colorize=False)
    lines = text.splitlines()
    assert lines[-1].strip() == "incr(1) ⇓ 2"
    assert "eval-unary" in lines[-2]
    assert "1 ≥ 0" not in text
    assert "0 ≥ 0" in text
    hollow = console.format_tree(tree, renderer, colorize=False, hollow=True)
    assert "incr(1)" not in hollow
    assert "⋯" in hollow


def test_colorize() -> None:
    colored = console.format_term(numerals.P1, renderer)
    assert colored != "1"
    assert "1" in colored
    assert console.format_term(numerals.P1, renderer, colorize=False) == "1"


def test_latex() -> None:
    assert latex.latex_escape("a_b & c") == "a\\_b \\& c"
    source = latex.latexify_rule(rules.system.get_rule("div-succ-succ"), renderer)
    assert source.startswith("\\begin{prooftree}")
    assert source.count("\\hypo") == 3
    assert "\\infer3[\\textsc{div-succ-succ}]" in source
    assert "\\geq 0" in source
    tree = engine.Executor(rules.system).evaluate(numerals.P1).tree
    assert tree is not None
    assert "\\infer1[\\textsc{eval-numeral}]" in latex.latexify_tree(tree, renderer)
