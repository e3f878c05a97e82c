"""
MyShell — base_command.py
ShellCommand dataclass and the status a handler hands back to the loop.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional

from myshell.errors import ShellUsageError
from myshell.parsing import split_arguments

if TYPE_CHECKING:
    from myshell.environment import Environment


class ShellStatus(Enum):
    CONTINUE = "continue"
    TERMINATE = "terminate"


Handler = Callable[["Environment", List[str]], Optional[ShellStatus]]


@dataclass
class ShellCommand:
    name: str
    handler: Handler
    usage: str = ""
    description: List[str] = field(default_factory=list)
    min_args: int = 0
    max_args: Optional[int] = 0

    def execute(self, env: "Environment", arguments: str) -> ShellStatus:
        args = split_arguments(arguments, self.usage)
        if len(args) < self.min_args or (self.max_args is not None and len(args) > self.max_args):
            raise ShellUsageError(self.usage, f"{self.name}: wrong number of arguments ({len(args)})")
        return self.handler(env, args) or ShellStatus.CONTINUE

    def summary(self) -> str:
        return self.description[0] if self.description else ""
