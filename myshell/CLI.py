#!/usr/bin/env python3
"""
MyShell — interactive file-system command shell

  myshell                  — start in the current directory
  myshell --directory DIR  — start in DIR
  myshell --verbose        — debug logging on stderr
"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from myshell import VERSION
from myshell.config import cfg
from myshell.environment import Environment
from myshell.readers import PromptReader, StreamReader
from myshell.shell import run

# ── Console & palette ──────────────────────────────────────────────────────────
console = Console(highlight=False)

CYAN  = "#00f5ff"
GREEN = "#00ff9f"
RED   = "#ff4444"


def ok(m):   console.print(f"  [{GREEN}]✔[/]  {m}")
def err(m):  console.print(f"  [{RED}]✖[/]  [{RED}]{escape(m)}[/]", soft_wrap=True)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, cfg.get("log_level", "WARNING"))
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)],
        force=True,
    )


def make_reader():
    if sys.stdin.isatty():
        return PromptReader()
    return StreamReader(sys.stdin)


# ── Entry point ────────────────────────────────────────────────────────────────

@click.command(context_settings={"help_option_names": ["--help"]})
@click.option("--version", is_flag=True, help="Show version.")
@click.option("--directory", default=None, metavar="PATH", help="Start in PATH (default: current dir).")
@click.option("--verbose", is_flag=True, default=False, help="Debug logging on stderr.")
def main(version, directory, verbose):
    """MyShell — list, copy, dump and rename files from one prompt.

    \b
    Type 'help' at the prompt for the commands.
    End a line with '\\' to continue it on the next one.
    """
    if version:
        console.print(f"[bold {CYAN}]MyShell v{VERSION}[/]"); return
    setup_logging(verbose)

    try:
        env = Environment(reader=make_reader(), console=console, directory=directory)
    except ValueError as e:
        err(str(e)); sys.exit(1)
    logging.getLogger("myshell").debug("starting in %s", env.current_directory)

    if cfg.get("banner", True):
        console.print(f"[bold {CYAN}]Welcome to MyShell v {VERSION}[/]")
    run(env)
    console.print(); ok("Goodbye.")


if __name__ == "__main__":
    main()
