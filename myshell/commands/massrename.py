"""MyShell — massrename: batch renaming/moving of files selected by a regular expression."""
from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, List

from myshell.commands.base_command import ShellCommand
from myshell.errors import ShellUsageError
from myshell.rename import NameBuilder, select_files, build_plan, first_problem
from myshell.tools import file_rename

if TYPE_CHECKING:
    from myshell.environment import Environment

SUBCOMMANDS = ("filter", "groups", "show", "execute")


def _massrename(env: "Environment", args: List[str]):
    usage = MassrenameCommand.usage
    sub = args[2].lower()
    if sub not in SUBCOMMANDS:
        raise ShellUsageError(usage, f"unknown subcommand '{args[2]}'")
    needs_expr = sub in ("show", "execute")
    if needs_expr and len(args) != 5:
        raise ShellUsageError(usage, f"'{sub}' needs a name expression")
    if not needs_expr and len(args) != 4:
        raise ShellUsageError(usage, f"'{sub}' takes no name expression")

    src_dir, dst_dir = env.resolve(args[0]), env.resolve(args[1])
    files = select_files(src_dir, args[3])

    if sub == "filter":
        for fm in files: env.writeln(fm.name)
        return
    if sub == "groups":
        for fm in files:
            env.writeln(fm.name + "".join(f" {i}: {g}" for i, g in enumerate(fm.groups())))
        return

    plan = build_plan(files, NameBuilder.parse(args[4]), dst_dir)
    if sub == "show":
        for e in plan.entries: env.writeln(f"{e.source.name} => {e.target.name}")
        return

    if not dst_dir.is_dir():
        raise ValueError(f"'{args[1]}' is not a directory")
    problem = first_problem(plan)
    if problem: raise ValueError(problem)
    for e in plan.entries:
        shown = f"{Path(args[0]) / e.source.name} => {Path(args[1]) / e.target.name}"
        if e.target == e.source:
            env.writeln(shown); continue
        r = file_rename(e.source, e.target)
        if not r.success: env.error(r.error); return
        env.writeln(shown)


MassrenameCommand = ShellCommand(
    name="massrename", usage="massrename <dir1> <dir2> <filter|groups|show|execute> <mask> [expr]",
    min_args=4, max_args=5, handler=_massrename,
    description=[
        "Renames or moves files of <dir1> whose whole name matches the regular expression <mask>.",
        "filter  - prints the matching names",
        "groups  - prints every match with its capturing groups",
        "show    - previews the new names built from <expr>",
        "execute - moves each file to <dir2> under its new name",
        "In <expr>, ${n} inserts group n and ${n,w} pads it to width w (zeros if w starts with 0).",
        "The mask is case-insensitive.",
    ],
)
