"""MyShell — built-in commands. The registry is fixed."""
from myshell.commands.base_command import ShellCommand, ShellStatus
from myshell.commands.filesystem import (
    LsCommand, CopyCommand, CatCommand, TreeCommand, CharsetsCommand, MkdirCommand, HexdumpCommand,
)
from myshell.commands.navigation import (
    CdCommand, PwdCommand, PushdCommand, PopdCommand, ListdCommand, DropdCommand, CD_STACK,
)
from myshell.commands.session import SymbolCommand, ExitCommand, HelpCommand
from myshell.commands.massrename import MassrenameCommand

COMMAND_REGISTRY = [
    LsCommand, CopyCommand, CatCommand, TreeCommand, CharsetsCommand, SymbolCommand,
    ExitCommand, HelpCommand, MkdirCommand, HexdumpCommand, CdCommand, PwdCommand,
    PushdCommand, PopdCommand, ListdCommand, DropdCommand, MassrenameCommand,
]
COMMANDS = {c.name: c for c in COMMAND_REGISTRY}

__all__ = ["ShellCommand", "ShellStatus", "COMMAND_REGISTRY", "COMMANDS", "CD_STACK"]
