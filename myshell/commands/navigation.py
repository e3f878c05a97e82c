"""MyShell — working directory and directory stack: cd, pwd, pushd, popd, listd, dropd."""
from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, List

from myshell.commands.base_command import ShellCommand

if TYPE_CHECKING:
    from myshell.environment import Environment

CD_STACK = "cdstack"


def _stack(env: "Environment") -> List[Path]:
    stack = env.get_shared_data(CD_STACK)
    if stack is None:
        stack = []
        env.set_shared_data(CD_STACK, stack)
    return stack


def _cd(env: "Environment", args: List[str]):
    env.current_directory = env.resolve(args[0])


def _pwd(env: "Environment", args: List[str]):
    env.writeln(str(env.current_directory))


def _pushd(env: "Environment", args: List[str]):
    previous = env.current_directory
    env.current_directory = env.resolve(args[0])
    _stack(env).append(previous)


def _popd(env: "Environment", args: List[str]):
    stack = _stack(env)
    if not stack: raise ValueError("Directory stack is empty.")
    target = stack.pop()
    try:
        env.current_directory = target
    except ValueError:
        env.error(f"'{target}' no longer exists; removed from the stack.")


def _listd(env: "Environment", args: List[str]):
    stack = _stack(env)
    if not stack: env.writeln("No stored directories."); return
    for path in reversed(stack): env.writeln(str(path))


def _dropd(env: "Environment", args: List[str]):
    stack = _stack(env)
    if not stack: raise ValueError("Directory stack is empty.")
    stack.pop()


CdCommand = ShellCommand(
    name="cd", usage="cd <dir>", min_args=1, max_args=1, handler=_cd,
    description=["Changes the current directory. Relative paths start from the current one."],
)

PwdCommand = ShellCommand(
    name="pwd", usage="pwd", handler=_pwd,
    description=["Prints the current directory."],
)

PushdCommand = ShellCommand(
    name="pushd", usage="pushd <dir>", min_args=1, max_args=1, handler=_pushd,
    description=[
        "Saves the current directory on the stack and changes to <dir>.",
        "Nothing is saved when <dir> is not a directory.",
    ],
)

PopdCommand = ShellCommand(
    name="popd", usage="popd", handler=_popd,
    description=[
        "Removes the top of the stack and makes it the current directory.",
        "A directory that no longer exists is removed without changing directory.",
    ],
)

ListdCommand = ShellCommand(
    name="listd", usage="listd", handler=_listd,
    description=["Prints the directory stack, most recent first."],
)

DropdCommand = ShellCommand(
    name="dropd", usage="dropd", handler=_dropd,
    description=["Removes the top of the stack without changing directory."],
)
