# -*- coding:utf-8 -*-
#
# Copyright (C) 2020, Maximilian Köhl <mail@koehlma.de>

from __future__ import annotations

import typing as t

import pathlib

import click

from ..core import inference
from ..pretty import define, latex, printers, render


def add_system_commands(
    group: click.Group, system: inference.System, renderer: render.Renderer
) -> None:
    @group.group("system")
    def _system() -> None:
        """
        Inference rule system specific commands.
        """

    @_system.command("print")
    @click.option(
        "--group",
        "group_names",
        type=str,
        multiple=True,
        help="Only print the rules of the given group.",
    )
    @click.option("--no-color", "no_color", default=False, is_flag=True)
    def _print(group_names: t.Tuple[str, ...], no_color: bool) -> None:
        """
        Print the inference rule system.
        """
        count = printers.print_system(
            system,
            renderer,
            groups=frozenset(group_names) if group_names else None,
            colorize=not no_color,
        )
        print()
        print("Total Number of Rules:", count)
        print()

    @_system.command("latexify")
    @click.argument(
        "directory", type=click.Path(file_okay=False, path_type=pathlib.Path)
    )
    def _latexify(directory: pathlib.Path) -> None:
        """
        Export the inference rule system to LaTeX.
        """
        directory.mkdir(parents=True, exist_ok=True)

        displays: t.List[str] = []
        for rule in system.rules:
            source = latex.latexify_rule(rule, renderer)
            (directory / f"{rule.name}.tex").write_text(source, encoding="utf-8")
            info = define.get_rule_info(rule)
            if info is not None and info.group is not None:
                displays.append(f"% {info.group.name}: {rule.name}")
            displays.append(latex.latexify_display(source))

        (directory / "all-rules.tex").write_text(
            "\n\n".join(displays), encoding="utf-8"
        )
        print(f"Exported {len(system.rules)} rules to {directory}.")
