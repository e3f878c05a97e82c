"""MyShell — session commands: symbol, exit, help."""
from __future__ import annotations
from typing import TYPE_CHECKING, List

from rich import box
from rich.markup import escape
from rich.table import Table

from myshell.commands.base_command import ShellCommand, ShellStatus
from myshell.environment import PROMPT, MULTILINE, MORELINES
from myshell.errors import ShellUsageError

if TYPE_CHECKING:
    from myshell.environment import Environment

CYAN  = "#00f5ff"
WHITE = "#e8eaf6"
DIM   = "#3d4a5c"

SYMBOL_NAMES = (PROMPT, MORELINES, MULTILINE)


def _symbol(env: "Environment", args: List[str]):
    name = args[0].upper()
    if name not in SYMBOL_NAMES:
        raise ValueError(f"Unknown symbol '{args[0]}'. Known: {', '.join(SYMBOL_NAMES)}")
    current = env.get_symbol(name)
    if len(args) == 1:
        env.writeln(f"Symbol for {name} is '{current}'"); return
    if len(args[1]) != 1:
        raise ShellUsageError(SymbolCommand.usage, "a symbol is exactly one character")
    env.set_symbol(name, args[1])
    env.writeln(f"Symbol for {name} changed from '{current}' to '{args[1]}'")


def _exit(env: "Environment", args: List[str]):
    return ShellStatus.TERMINATE


def _help(env: "Environment", args: List[str]):
    commands = env.commands()
    if args:
        cmd = commands.get(args[0])
        if cmd is None: raise ValueError(f"Unknown command: {args[0]}")
        env.writeln(cmd.name)
        env.writeln(f"  usage: {cmd.usage}")
        for line in cmd.description: env.writeln(f"  {line}")
        return
    t = Table(box=box.SIMPLE_HEAD, border_style=DIM, header_style=f"bold {CYAN}",
              show_edge=False, padding=(0,2))
    t.add_column("COMMAND", style=f"bold {CYAN}", no_wrap=True)
    t.add_column("DESCRIPTION", style=WHITE)
    for name, cmd in commands.items():
        t.add_row(name, escape(cmd.summary()))
    env.writeln(t)
    env.writeln("Type 'help <command>' for usage.")


SymbolCommand = ShellCommand(
    name="symbol", usage="symbol <PROMPT|MORELINES|MULTILINE> [char]",
    min_args=1, max_args=2, handler=_symbol,
    description=[
        "Prints or changes one of the shell symbols.",
        "PROMPT ends the prompt, MORELINES at the end of a line continues it,",
        "MULTILINE starts every continuation line.",
    ],
)

ExitCommand = ShellCommand(
    name="exit", usage="exit", handler=_exit,
    description=["Ends the session."],
)

HelpCommand = ShellCommand(
    name="help", usage="help [command]", min_args=0, max_args=1, handler=_help,
    description=[
        "Lists all commands.",
        "With a command name prints its usage and description.",
    ],
)
