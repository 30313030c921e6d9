# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

"""
Definition helpers attaching presentation metadata to variables and rules.

Variables and rules are compared by identity, hence, the metadata is kept in
identity maps instead of being stored on the terms and rules themselves.
"""

from __future__ import annotations

import dataclasses as d
import typing as t

import inspect
import pathlib

from mxu.maps import IdentityMap

from ..core import inference, terms


@d.dataclass(frozen=True)
class LocationInfo:
    filename: str
    lineno: int

    @classmethod
    def of_caller(cls, depth: int = 1) -> LocationInfo:
        # one additional frame for this method itself
        frame_info = inspect.stack()[depth + 1]
        return cls(frame_info.filename, frame_info.lineno)

    def __str__(self) -> str:
        filename = "/".join(pathlib.Path(self.filename).parts[-2:])
        return f"{filename}:{self.lineno}"


@d.dataclass(eq=False)
class VariableInfo:
    variable: terms.Variable
    text: t.Optional[str] = None
    math: t.Optional[str] = None
    location: t.Optional[LocationInfo] = None


@d.dataclass(eq=False)
class Group:
    """
    A named group of rules, e.g., all rules defining an operation.
    """

    name: str
    description: t.Optional[str] = None
    location: t.Optional[LocationInfo] = None

    rules: t.List[inference.Rule] = d.field(default_factory=list)

    def define_rule(
        self,
        name: str,
        conclusion: terms.Term,
        premises: inference.Premises = (),
        conditions: inference.Conditions = (),
        *,
        description: t.Optional[str] = None,
    ) -> inference.Rule:
        result = inference.Rule(conclusion, premises, conditions, name=name)
        _register_rule(result, self, description, LocationInfo.of_caller())
        return result

    def add_to_system(self, system: inference.System) -> None:
        for rule in self.rules:
            system.add_rule(rule)


@d.dataclass(eq=False)
class RuleInfo:
    rule: inference.Rule
    group: t.Optional[Group] = None
    description: t.Optional[str] = None
    location: t.Optional[LocationInfo] = None


_variable_info: IdentityMap[terms.Variable, VariableInfo] = IdentityMap()
_rule_info: IdentityMap[inference.Rule, RuleInfo] = IdentityMap()


def _register_rule(
    rule: inference.Rule,
    group: t.Optional[Group],
    description: t.Optional[str],
    location: LocationInfo,
) -> None:
    if group is not None:
        group.rules.append(rule)
    _rule_info[rule] = RuleInfo(rule, group, description, location)


def variable(
    name: str, *, text: t.Optional[str] = None, math: t.Optional[str] = None
) -> terms.Variable:
    result = terms.variable(name)
    _variable_info[result] = VariableInfo(
        result, text=text, math=math, location=LocationInfo.of_caller()
    )
    return result


def variables(*names: str) -> t.Tuple[terms.Variable, ...]:
    """
    Defines variables which are displayed by their names.
    """
    location = LocationInfo.of_caller()
    result = terms.variables(*names)
    for name, each in zip(names, result):
        _variable_info[each] = VariableInfo(each, name, name, location)
    return result


def get_variable_info(variable: terms.Variable) -> t.Optional[VariableInfo]:
    return _variable_info.get(variable, None)


def get_rule_info(rule: inference.Rule) -> t.Optional[RuleInfo]:
    return _rule_info.get(rule, None)


def group(name: str, *, description: t.Optional[str] = None) -> Group:
    return Group(name, description, LocationInfo.of_caller())
