"""
MyShell — shell.py
Read-eval loop: prompt, multi-line continuation, dispatch, error reporting.
"""
from __future__ import annotations

import logging
from typing import Optional

from myshell.commands import ShellStatus
from myshell.environment import Environment
from myshell.errors import ShellIOError, ShellUsageError
from myshell.parsing import split_command

log = logging.getLogger("myshell")


def read_logical_line(env: Environment) -> str:
    """
    Prompt and read one logical line. While a physical line ends with the
    morelines symbol, that one character is dropped and the next line is
    appended after a single space.
    """
    env.write_prompt()
    line = env.read_line()
    while line.endswith(env.morelines_symbol):
        env.write_multiline()
        line = line[:-1] + " " + env.read_line()
    return line


def dispatch(env: Environment, line: str) -> Optional[ShellStatus]:
    """Run one logical line. Returns None for a blank line; never raises for command failures."""
    name, arguments = split_command(line)
    if not name: return None
    cmd = env.commands().get(name)
    if cmd is None:
        env.error(f"Unknown command: {name}")
        env.writeln("Type 'help' for the list of commands.")
        return ShellStatus.CONTINUE
    log.debug("dispatch %s %r", name, arguments)
    try:
        return cmd.execute(env, arguments)
    except ShellUsageError as exc:
        if exc.detail: env.error(exc.detail)
        env.error(f"Usage: {exc.usage}")
    except ShellIOError as exc:
        env.error(f"I/O error: {exc}")
    except (ValueError, OSError) as exc:
        env.error(str(exc))
    except Exception as exc:
        log.debug("command %s failed", name, exc_info=True)
        env.error(f"{name} failed: {exc}")
    return ShellStatus.CONTINUE


def run(env: Environment) -> None:
    """
    Loop until a command returns TERMINATE or I/O fails. End of input ends
    the session quietly, any other read or write failure is logged as a warning.
    """
    while True:
        try:
            status = dispatch(env, read_logical_line(env))
        except KeyboardInterrupt:
            env.writeln()
            env.writeln("Ctrl+C - type exit to quit")
            continue
        except ShellIOError as exc:
            if isinstance(exc.__cause__, EOFError):
                log.debug("input closed: %s", exc)
            else:
                log.warning("session ended on I/O error: %s", exc)
            return
        if status is ShellStatus.TERMINATE:
            log.debug("session terminated")
            return
