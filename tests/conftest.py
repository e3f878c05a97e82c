from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Optional, Tuple

import pytest
from rich.console import Console

from myshell.config import ShellConfig
from myshell.environment import Environment
from myshell.readers import StreamReader
from myshell.shell import dispatch


@pytest.fixture
def make_env(tmp_path: Path) -> Callable[..., Tuple[Environment, io.StringIO]]:
    def _make(text: str = "", directory: Optional[Path] = None) -> Tuple[Environment, io.StringIO]:
        out = io.StringIO()
        console = Console(file=out, width=200, highlight=False, color_system=None)
        env = Environment(
            reader=StreamReader(io.StringIO(text)),
            console=console,
            directory=directory or tmp_path,
            config=ShellConfig(environ={}),
        )
        return env, out

    return _make


@pytest.fixture
def env(make_env) -> Environment:
    return make_env()[0]


def output_of(env: Environment) -> str:
    return env.console.file.getvalue()


def run_line(env: Environment, line: str) -> str:
    """Dispatch one line and return only the output it produced."""
    before = len(output_of(env))
    dispatch(env, line)
    return output_of(env)[before:]
