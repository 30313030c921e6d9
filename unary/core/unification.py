# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
First-order syntactic unification.

The solver processes equations lazily, i.e., only when the state of the solver
is queried. Bindings are kept fully substituted such that looking up the
solution of a variable never requires chasing chains of bindings.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import collections

from . import terms


Equation = t.Tuple[terms.Term, terms.Term]


class NoSolutionError(Exception):
    pass


def _resolve(term: terms.Term, bindings: terms.Substitution) -> terms.Term:
    if term.variables.isdisjoint(bindings.keys()):
        return term
    return term.substitute(bindings)


@d.dataclass(eq=False)
class Solver:
    _inconsistent: bool = False
    _equations: t.Deque[Equation] = d.field(default_factory=collections.deque)
    # shared between clones, never modified in place
    _bindings: t.Dict[terms.Variable, terms.Term] = d.field(default_factory=dict)

    def add_equation(self, equation: Equation) -> None:
        self._equations.append(equation)

    def add_equations(self, equations: t.Iterable[Equation]) -> None:
        self._equations.extend(equations)

    @property
    def has_no_solutions(self) -> bool:
        self.solve()
        return self._inconsistent

    @property
    def is_solved(self) -> bool:
        return not self.has_no_solutions

    @property
    def solution(self) -> t.Mapping[terms.Variable, terms.Term]:
        self.solve()
        return self._bindings

    def clone(self) -> Solver:
        return Solver(
            self._inconsistent, collections.deque(self._equations), self._bindings
        )

    def _bind(self, variable: terms.Variable, term: terms.Term) -> None:
        if variable in term.variables:
            # occurs check
            self._inconsistent = True
            return
        update = {variable: term}
        bindings = {
            other: _resolve(value, update) for other, value in self._bindings.items()
        }
        bindings[variable] = term
        self._bindings = bindings

    def _unify(self, left: terms.Term, right: terms.Term) -> None:
        if left is right:
            return
        if isinstance(right, terms.Variable) and not isinstance(left, terms.Variable):
            left, right = right, left
        if isinstance(left, terms.Variable):
            self._bind(left, right)
        elif isinstance(left, terms.Compound):
            if left.has_same_shape(right):
                self._equations.extend(zip(left.children, right.children))
            else:
                self._inconsistent = True
        elif left != right:
            self._inconsistent = True

    def solve(self) -> None:
        while self._equations and not self._inconsistent:
            left, right = self._equations.popleft()
            self._unify(
                _resolve(left, self._bindings), _resolve(right, self._bindings)
            )


def get_solution(
    solution: terms.Substitution, variable: terms.Variable
) -> terms.Term:
    try:
        return solution[variable]
    except KeyError:
        raise NoSolutionError(f"no solution for variable {variable}") from None


def match(
    pattern: terms.Term, term: terms.Term
) -> t.Optional[terms.Substitution]:
    """
    Matches `term` against `pattern` and returns the bindings of the variables
    of `pattern` or `None` if the term does not match.
    """
    solver = Solver()
    solver.add_equation((pattern, term))
    if solver.has_no_solutions or solver.solution.keys() != pattern.variables:
        return None
    return solver.solution


def may_unify(left: terms.Term, right: terms.Term, *, depth: int = 2) -> bool:
    """
    Cheap and conservative check whether two terms may be unifiable.

    Only the outermost `depth` levels of both terms are inspected. A return
    value of `False` guarantees that unification fails.
    """
    if isinstance(left, terms.Variable) or isinstance(right, terms.Variable):
        return True
    if isinstance(left, terms.Compound):
        if not left.has_same_shape(right):
            return False
        return depth <= 0 or all(
            may_unify(left_child, right_child, depth=depth - 1)
            for left_child, right_child in zip(left.children, right.children)
        )
    return left == right
