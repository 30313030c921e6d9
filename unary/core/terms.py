# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Immutable first-order terms.

Terms are either atoms, i.e., symbols, variables, and values, or compound
terms built by a constructor from child terms. Sequences are the generic
compound terms used for judgements and expressions while numerals provide
their own constructors (see :mod:`unary.data.numerals`).
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import abc
import functools


class Term(abc.ABC):
    @property
    @abc.abstractmethod
    def children(self) -> t.Sequence[Term]:
        raise NotImplementedError()

    @abc.abstractmethod
    def substitute(self, substitution: Substitution) -> Term:
        raise NotImplementedError()

    @functools.cached_property
    def variables(self) -> t.AbstractSet[Variable]:
        result: t.Set[Variable] = set()
        for child in self.children:
            result |= child.variables
        return frozenset(result)

    @property
    def is_closed(self) -> bool:
        return not self.variables


class Atom(Term, abc.ABC):
    @property
    def children(self) -> t.Sequence[Term]:
        return ()

    def substitute(self, substitution: Substitution) -> Term:
        return self


class Value(Atom, abc.ABC):
    """
    Atoms carrying a value which are equal if and only if their values are.
    """


@d.dataclass(frozen=True)
class Symbol(Atom):
    symbol: str


@d.dataclass(frozen=True, eq=False)
class Variable(Atom):
    """
    Variables are compared by identity, two variables with the same name are
    different variables.
    """

    name: t.Optional[str] = None

    def __repr__(self) -> str:
        return f"<Variable {self.name!r} at 0x{id(self):X}>"

    @functools.cached_property
    def variables(self) -> t.AbstractSet[Variable]:
        return frozenset({self})

    def clone(self, suffix: t.Optional[str] = None) -> Variable:
        if self.name is None or suffix is None:
            return Variable(self.name)
        return Variable(self.name + suffix)

    def substitute(self, substitution: Substitution) -> Term:
        return substitution.get(self, self)


class Compound(Term, abc.ABC):
    """
    A term built by a constructor from a fixed number of child terms.

    Two compound terms can only be unified if they have the same shape, i.e.,
    they have been built by the same constructor from the same number of
    children. Unification then proceeds pairwise on the children.
    """

    @abc.abstractmethod
    def rebuild(self, children: t.Tuple[Term, ...]) -> Compound:
        raise NotImplementedError()

    def has_same_shape(self, other: Term) -> bool:
        return type(self) is type(other) and len(self.children) == len(
            other.children
        )

    def substitute(self, substitution: Substitution) -> Term:
        if self.variables.isdisjoint(substitution.keys()):
            return self
        children = tuple(child.substitute(substitution) for child in self.children)
        if all(new is old for new, old in zip(children, self.children)):
            return self
        return self.rebuild(children)


@d.dataclass(frozen=True)
class Sequence(Compound):
    elements: t.Tuple[Term, ...]

    @property
    def children(self) -> t.Sequence[Term]:
        return self.elements

    @property
    def length(self) -> int:
        return len(self.elements)

    def rebuild(self, children: t.Tuple[Term, ...]) -> Sequence:
        return Sequence(children)


Substitution = t.Mapping[Variable, Term]
Renaming = t.Mapping[Variable, Variable]


def symbol(symbol: str) -> Symbol:
    return Symbol(symbol)


def sequence(*elements: t.Union[Term, str]) -> Sequence:
    """
    Builds a sequence where strings are turned into symbols.
    """
    return Sequence(
        tuple(
            symbol(element) if isinstance(element, str) else element
            for element in elements
        )
    )


def variable(name: str) -> Variable:
    return Variable(name)


def variables(*names: str) -> t.Tuple[Variable, ...]:
    return tuple(map(Variable, names))
