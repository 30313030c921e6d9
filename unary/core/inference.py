# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Inference rules and proof search.

A question is a term possibly containing variables. Proof search tries to
find substitutions for these variables such that the resulting judgement is
derivable with the rules of a system. Search states keep a list of open
goals which are resolved from left to right against the conclusions of the
rules, i.e., premises are derived in the order in which they are stated.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import abc
import collections
import enum
import functools

import immutables

from . import terms, unification


class Verdict(enum.Enum):
    SATISFIABLE = "satisfiable"
    VIOLATED = "violated"
    SATISFIED = "satisfied"


class Condition(abc.ABC):
    @property
    @abc.abstractmethod
    def variables(self) -> t.AbstractSet[terms.Variable]:
        raise NotImplementedError()

    @abc.abstractmethod
    def get_verdict(self, substitution: terms.Substitution) -> Verdict:
        """
        Decides the condition for the given (partial) substitution.

        Must return `SATISFIABLE` as long as the variables of the condition
        are not sufficiently instantiated to decide it.
        """


class NoDerivationError(Exception):
    pass


Premises = t.Tuple[terms.Term, ...]
Conditions = t.Tuple[Condition, ...]


@d.dataclass(frozen=True)
class Rule:
    conclusion: terms.Term
    premises: Premises = ()
    conditions: Conditions = ()
    name: t.Optional[str] = None

    def __post_init__(self) -> None:
        for condition in self.conditions:
            assert condition.variables <= self.variables, (
                f"condition of rule {self.name!r} refers to unbound variables"
            )

    @functools.cached_property
    def variables(self) -> t.AbstractSet[terms.Variable]:
        result = set(self.conclusion.variables)
        for premise in self.premises:
            result |= premise.variables
        return frozenset(result)

    def freshen(self) -> _FreshRule:
        renaming = {variable: variable.clone() for variable in self.variables}
        return _FreshRule(
            self,
            renaming,
            self.conclusion.substitute(renaming),
            tuple(premise.substitute(renaming) for premise in self.premises),
        )


@d.dataclass(frozen=True)
class Instance:
    rule: Rule
    substitution: terms.Substitution

    @functools.cached_property
    def conclusion(self) -> terms.Term:
        return self.rule.conclusion.substitute(self.substitution)

    @functools.cached_property
    def premises(self) -> t.Sequence[terms.Term]:
        return tuple(
            premise.substitute(self.substitution) for premise in self.rule.premises
        )


@d.dataclass(frozen=True)
class Tree:
    instance: Instance
    premises: t.Tuple[Tree, ...]

    @property
    def conclusion(self) -> terms.Term:
        return self.instance.conclusion

    @property
    def size(self) -> int:
        return 1 + sum(premise.size for premise in self.premises)

    @property
    def height(self) -> int:
        return 1 + max((premise.height for premise in self.premises), default=0)


Question = terms.Term


@d.dataclass(frozen=True)
class Answer:
    substitution: terms.Substitution
    tree: Tree


@d.dataclass(frozen=True, eq=False)
class _FreshRule:
    """
    A copy of a rule where every variable has been replaced by a fresh one.
    """

    rule: Rule
    renaming: terms.Renaming
    conclusion: terms.Term
    premises: Premises

    def instantiate(self, solution: terms.Substitution) -> Instance:
        return Instance(
            self.rule,
            {
                variable: solution.get(fresh, fresh)
                for variable, fresh in self.renaming.items()
            },
        )

    def get_verdict(
        self, condition: Condition, solution: terms.Substitution
    ) -> Verdict:
        return condition.get_verdict(
            {
                variable: solution[fresh]
                for variable, fresh in self.renaming.items()
                if fresh in solution
            }
        )


_Waiting = t.FrozenSet[t.Tuple[_FreshRule, Condition]]


def _decide(
    conditions: t.Iterable[t.Tuple[_FreshRule, Condition]],
    solution: terms.Substitution,
) -> t.Optional[_Waiting]:
    """
    Returns the conditions which cannot be decided yet or `None` if one of the
    conditions is violated.
    """
    waiting: t.Set[t.Tuple[_FreshRule, Condition]] = set()
    for fresh_rule, condition in conditions:
        verdict = fresh_rule.get_verdict(condition, solution)
        if verdict is Verdict.VIOLATED:
            return None
        elif verdict is Verdict.SATISFIABLE:
            waiting.add((fresh_rule, condition))
    return frozenset(waiting)


@d.dataclass(frozen=True, eq=False)
class _State:
    solver: unification.Solver
    goals: t.Tuple[terms.Term, ...]
    waiting: _Waiting = frozenset()
    # the rule used to resolve each of the goals resolved so far
    resolutions: immutables.Map[terms.Term, _FreshRule] = d.field(
        default_factory=immutables.Map
    )

    @property
    def is_final(self) -> bool:
        return not self.goals and not self.waiting

    def build_tree(self, goal: terms.Term) -> Tree:
        fresh_rule = self.resolutions[goal]
        return Tree(
            fresh_rule.instantiate(self.solver.solution),
            tuple(self.build_tree(premise) for premise in fresh_rule.premises),
        )


@d.dataclass(eq=False)
class System:
    _rules: t.List[Rule]

    def __init__(self, rules: t.Optional[t.Iterable[Rule]] = None) -> None:
        self._rules = []
        for rule in rules or ():
            self.add_rule(rule)

    def add_rule(self, rule: Rule) -> None:
        self._rules.append(rule)

    @property
    def rules(self) -> t.Sequence[Rule]:
        return self._rules

    def get_rule(self, name: str) -> Rule:
        for rule in self._rules:
            if rule.name == name:
                return rule
        raise KeyError(name)

    def _iter_successors(self, state: _State) -> t.Iterator[_State]:
        goal, *remaining = state.goals
        resolved = goal.substitute(state.solver.solution)
        for rule in self._rules:
            if not unification.may_unify(resolved, rule.conclusion):
                continue
            fresh_rule = rule.freshen()
            solver = state.solver.clone()
            solver.add_equation((goal, fresh_rule.conclusion))
            if solver.has_no_solutions:
                continue
            waiting = _decide(
                [
                    *state.waiting,
                    *((fresh_rule, condition) for condition in rule.conditions),
                ],
                solver.solution,
            )
            if waiting is None:
                continue
            yield _State(
                solver,
                fresh_rule.premises + tuple(remaining),
                waiting,
                state.resolutions.set(goal, fresh_rule),
            )

    def iter_answers(
        self, question: Question, *, depth_first: bool = False
    ) -> t.Iterator[Answer]:
        variables = question.variables
        frontier = collections.deque([_State(unification.Solver(), (question,))])
        while frontier:
            state = frontier.popleft()
            if state.goals:
                successors = tuple(self._iter_successors(state))
                if depth_first:
                    frontier.extendleft(reversed(successors))
                else:
                    frontier.extend(successors)
            elif state.is_final and variables <= state.solver.solution.keys():
                solution = state.solver.solution
                yield Answer(
                    {variable: solution[variable] for variable in variables},
                    state.build_tree(question),
                )

    def derive(self, question: Question, *, depth_first: bool = True) -> Answer:
        """
        Returns the first answer to `question`.

        Raises `NoDerivationError` if the question is not derivable.
        """
        for answer in self.iter_answers(question, depth_first=depth_first):
            return answer
        raise NoDerivationError("no derivation exists for the given question")
