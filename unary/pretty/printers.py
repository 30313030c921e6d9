# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import typing as t

from ..core import inference

from . import console, define, render


def print_rule(
    rule: inference.Rule, renderer: render.Renderer, *, colorize: bool = True
) -> None:
    info = define.get_rule_info(rule)
    if info and info.location:
        print(f"Rule {rule.name!r} ({info.location}):\n")
    else:
        print(f"Rule {rule.name!r}:\n")
    if info and info.description:
        print(f"  {info.description}\n")
    print(console.format_rule(rule, renderer, colorize=colorize, indent=2))


def print_system(
    system: inference.System,
    renderer: render.Renderer,
    *,
    groups: t.Optional[t.AbstractSet[str]] = None,
    colorize: bool = True,
) -> int:
    """
    Prints the rules of `system` and returns the number of printed rules.

    If `groups` is given only rules defined in one of the named groups are
    printed. A header is printed whenever a new group begins.
    """
    count = 0
    current: t.Optional[define.Group] = None
    for rule in system.rules:
        info = define.get_rule_info(rule)
        group = None if info is None else info.group
        if groups is not None and (group is None or group.name not in groups):
            continue
        if group is not None and group is not current:
            current = group
            print()
            if group.description:
                print(f"== {group.name.title()}: {group.description}")
            else:
                print(f"== {group.name.title()}")
        print()
        print_rule(rule, renderer, colorize=colorize)
        print()
        count += 1
    return count
