# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>
#
# fmt: off

"""
Inference rules for unary arithmetic.

Every case of the structurally recursive operations is stated as an
inference rule. Sign requirements on operands, e.g., that the numeral wrapped
by a successor must be non-negative, are conditions of the respective rules.
Proof search in the resulting system is deterministic: for well-formed
operands at most one rule applies to every judgement.
"""

from __future__ import annotations

from ..core import inference
from ..data import numerals
from ..data.numerals import Pred, Succ, ZERO
from ..pretty import define

from .judgements import (
    ADD,
    DECR,
    DIV,
    HALVE,
    INCR,
    MUL,
    NEG,
    SUB,
    apply,
    evaluation,
    operation,
)


a, b, c, m, q, r = define.variables("a", "b", "c", "m", "q", "r")

some_operator = define.variable("operator", text="○", math="\\circ")

left_expr = define.variable("left_expr", text="e₁", math="e_1")
right_expr = define.variable("right_expr", text="e₂", math="e_2")


# Negation

negation = define.group("negation", description="r = -a")

negation.define_rule(
    name="neg-zero",
    conclusion=operation(NEG, (ZERO,), ZERO),
)

negation.define_rule(
    name="neg-succ",
    premises=(operation(NEG, (a,), b),),
    conditions=(numerals.non_negative(a),),
    conclusion=operation(NEG, (Succ(a),), Pred(b)),
)

negation.define_rule(
    name="neg-pred",
    premises=(operation(NEG, (a,), b),),
    conditions=(numerals.non_positive(a),),
    conclusion=operation(NEG, (Pred(a),), Succ(b)),
)


# Increment

incrementation = define.group("incrementation", description="r = a + 1")

incrementation.define_rule(
    name="incr-zero",
    conclusion=operation(INCR, (ZERO,), Succ(ZERO)),
)

incrementation.define_rule(
    name="incr-succ",
    conditions=(numerals.non_negative(a),),
    conclusion=operation(INCR, (Succ(a),), Succ(Succ(a))),
)

incrementation.define_rule(
    name="incr-pred",
    conditions=(numerals.non_positive(a),),
    conclusion=operation(INCR, (Pred(a),), a),
)


# Decrement

decrementation = define.group("decrementation", description="r = a - 1")

decrementation.define_rule(
    name="decr-zero",
    conclusion=operation(DECR, (ZERO,), Pred(ZERO)),
)

decrementation.define_rule(
    name="decr-succ",
    conditions=(numerals.non_negative(a),),
    conclusion=operation(DECR, (Succ(a),), a),
)

decrementation.define_rule(
    name="decr-pred",
    conditions=(numerals.non_positive(a),),
    conclusion=operation(DECR, (Pred(a),), Pred(Pred(a))),
)


# Addition

addition = define.group("addition", description="r = a + b")

addition.define_rule(
    name="add-zero",
    conclusion=operation(ADD, (ZERO, b), b),
)

addition.define_rule(
    name="add-succ",
    premises=(
        operation(INCR, (b,), c),
        operation(ADD, (a, c), r),
    ),
    conditions=(numerals.non_negative(a),),
    conclusion=operation(ADD, (Succ(a), b), r),
)

addition.define_rule(
    name="add-pred",
    premises=(
        operation(DECR, (b,), c),
        operation(ADD, (a, c), r),
    ),
    conditions=(numerals.non_positive(a),),
    conclusion=operation(ADD, (Pred(a), b), r),
)


# Subtraction

subtraction = define.group("subtraction", description="r = a - b")

subtraction.define_rule(
    name="sub",
    premises=(
        operation(NEG, (b,), c),
        operation(ADD, (a, c), r),
    ),
    conclusion=operation(SUB, (a, b), r),
)


# Halving

halving = define.group("halving", description="r = a / 2 for even a")

halving.define_rule(
    name="halve-zero",
    conclusion=operation(HALVE, (ZERO,), ZERO),
)

halving.define_rule(
    name="halve-succ",
    premises=(operation(HALVE, (a,), b),),
    conditions=(numerals.non_negative(a),),
    conclusion=operation(HALVE, (Succ(Succ(a)),), Succ(b)),
)

halving.define_rule(
    name="halve-pred",
    premises=(operation(HALVE, (a,), b),),
    conditions=(numerals.non_positive(a),),
    conclusion=operation(HALVE, (Pred(Pred(a)),), Pred(b)),
)


# Multiplication

multiplication = define.group("multiplication", description="r = a · b")

multiplication.define_rule(
    name="mul-zero",
    conclusion=operation(MUL, (ZERO, b), ZERO),
)

multiplication.define_rule(
    name="mul-succ",
    premises=(
        operation(MUL, (a, b), c),
        operation(ADD, (b, c), r),
    ),
    conditions=(numerals.non_negative(a),),
    conclusion=operation(MUL, (Succ(a), b), r),
)

multiplication.define_rule(
    name="mul-pred",
    premises=(
        operation(MUL, (a, b), c),
        operation(NEG, (b,), m),
        operation(ADD, (m, c), r),
    ),
    conditions=(numerals.non_positive(a),),
    conclusion=operation(MUL, (Pred(a), b), r),
)


# Division

division = define.group("division", description="r = a / b rounded toward zero")

division.define_rule(
    name="div-zero-succ",
    conclusion=operation(DIV, (ZERO, Succ(b)), ZERO),
)

division.define_rule(
    name="div-zero-pred",
    conclusion=operation(DIV, (ZERO, Pred(b)), ZERO),
)

division.define_rule(
    name="div-succ-succ",
    premises=(
        operation(SUB, (a, b), c),
        operation(DIV, (c, Succ(b)), q),
    ),
    conditions=(numerals.non_negative(c),),
    conclusion=operation(DIV, (Succ(a), Succ(b)), Succ(q)),
)

division.define_rule(
    name="div-succ-succ-less",
    premises=(operation(SUB, (a, b), Pred(c)),),
    conclusion=operation(DIV, (Succ(a), Succ(b)), ZERO),
    description="the dividend is smaller than the divisor",
)

division.define_rule(
    name="div-pred-pred",
    premises=(
        operation(NEG, (a,), c),
        operation(NEG, (b,), m),
        operation(DIV, (Succ(c), Succ(m)), q),
    ),
    conditions=(numerals.non_positive(a), numerals.non_positive(b)),
    conclusion=operation(DIV, (Pred(a), Pred(b)), q),
)

division.define_rule(
    name="div-succ-pred",
    premises=(
        operation(NEG, (b,), m),
        operation(DIV, (Succ(a), Succ(m)), q),
        operation(NEG, (q,), r),
    ),
    conditions=(numerals.non_positive(b),),
    conclusion=operation(DIV, (Succ(a), Pred(b)), r),
)

division.define_rule(
    name="div-pred-succ",
    premises=(
        operation(NEG, (a,), c),
        operation(DIV, (Succ(c), Succ(b)), q),
        operation(NEG, (q,), r),
    ),
    conditions=(numerals.non_positive(a),),
    conclusion=operation(DIV, (Pred(a), Succ(b)), r),
)


# Evaluation of expressions

expressions = define.group("expressions", description="e ⇓ r")

expressions.define_rule(
    name="eval-numeral",
    conditions=(numerals.numeral(r),),
    conclusion=evaluation(r, r),
    description="numerals evaluate to themselves",
)

expressions.define_rule(
    name="eval-unary",
    premises=(
        evaluation(left_expr, a),
        operation(some_operator, (a,), r),
    ),
    conclusion=evaluation(apply(some_operator, left_expr), r),
)

expressions.define_rule(
    name="eval-binary",
    premises=(
        evaluation(left_expr, a),
        evaluation(right_expr, b),
        operation(some_operator, (a, b), r),
    ),
    conclusion=evaluation(apply(some_operator, left_expr, right_expr), r),
)


GROUPS = (
    negation,
    incrementation,
    decrementation,
    addition,
    subtraction,
    halving,
    multiplication,
    division,
    expressions,
)


def create_system() -> inference.System:
    system = inference.System()
    for group in GROUPS:
        group.add_to_system(system)
    return system


system = create_system()
