"""
MyShell — environment.py
Session context handed to every command: I/O, registry, symbols,
current directory and the shared key/value store.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from rich.console import Console, RenderableType
from rich.markup import escape

from myshell.config import ShellConfig, cfg as default_cfg
from myshell.errors import ShellIOError
from myshell.readers import StreamReader

PROMPT    = "PROMPT"
MULTILINE = "MULTILINE"
MORELINES = "MORELINES"

RED = "#ff4444"


class Environment:
    def __init__(self, reader=None, console: Optional[Console] = None,
                 directory: Union[str, Path, None] = None,
                 config: Optional[ShellConfig] = None):
        from myshell.commands import COMMANDS

        self.cfg = config or default_cfg
        self.reader = reader or StreamReader(sys.stdin)
        self.console = console or Console(highlight=False)
        self._commands = MappingProxyType({name: COMMANDS[name] for name in sorted(COMMANDS)})
        self._symbols: Dict[str, str] = {
            PROMPT:    self.cfg.get("prompt_symbol"),
            MULTILINE: self.cfg.get("multiline_symbol"),
            MORELINES: self.cfg.get("morelines_symbol"),
        }
        self._current_directory = Path(os.path.abspath("."))
        self._shared: Dict[str, Any] = {}
        if directory is not None:
            self.current_directory = directory

    # ── I/O ───────────────────────────────────────────────────────────────────

    def read_line(self) -> str:
        try:
            return self.reader.read_line()
        except (EOFError, OSError) as exc:
            raise ShellIOError(str(exc) or "input closed") from exc

    def write(self, text: str) -> None:
        self._put(text)

    def writeln(self, text: Union[str, RenderableType] = "") -> None:
        if isinstance(text, str):
            self._put(text + "\n")
            return
        try:
            self.console.print(text)
        except (OSError, ValueError) as exc:
            raise ShellIOError(str(exc)) from exc

    def error(self, message: str) -> None:
        try:
            self.console.print(f"  [{RED}]✖[/]  [{RED}]{escape(message)}[/]", soft_wrap=True)
        except (OSError, ValueError) as exc:
            raise ShellIOError(str(exc)) from exc

    def _put(self, text: str) -> None:
        # plain text goes to the stream unrendered
        try:
            out = self.console.file
            out.write(text)
            out.flush()
        except (OSError, ValueError) as exc:
            raise ShellIOError(str(exc)) from exc

    def ask(self, question: str) -> str:
        self._emit_prompt(question)
        return self.read_line()

    def write_prompt(self) -> None:
        self._emit_prompt(f"{self._current_directory}{self.prompt_symbol} ")

    def write_multiline(self) -> None:
        self._emit_prompt(f"{self.multiline_symbol} ")

    def _emit_prompt(self, text: str) -> None:
        if getattr(self.reader, "renders_prompt", False): self.reader.stage(text)
        else: self.write(text)

    # ── Registry ──────────────────────────────────────────────────────────────

    def commands(self) -> Mapping[str, Any]:
        return self._commands

    # ── Symbols ───────────────────────────────────────────────────────────────

    def get_symbol(self, name: str) -> str:
        if name not in self._symbols:
            raise ValueError(f"Unknown symbol '{name}'")
        return self._symbols[name]

    def set_symbol(self, name: str, symbol: Optional[str]) -> None:
        if name not in self._symbols:
            raise ValueError(f"Unknown symbol '{name}'")
        if symbol is None:
            raise ValueError(f"Symbol for {name} must not be None")
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"Symbol for {name} must be a single character, got {symbol!r}")
        self._symbols[name] = symbol

    @property
    def prompt_symbol(self) -> str: return self._symbols[PROMPT]

    @prompt_symbol.setter
    def prompt_symbol(self, symbol: str) -> None: self.set_symbol(PROMPT, symbol)

    @property
    def multiline_symbol(self) -> str: return self._symbols[MULTILINE]

    @multiline_symbol.setter
    def multiline_symbol(self, symbol: str) -> None: self.set_symbol(MULTILINE, symbol)

    @property
    def morelines_symbol(self) -> str: return self._symbols[MORELINES]

    @morelines_symbol.setter
    def morelines_symbol(self, symbol: str) -> None: self.set_symbol(MORELINES, symbol)

    # ── Current directory ─────────────────────────────────────────────────────

    @property
    def current_directory(self) -> Path:
        return self._current_directory

    @current_directory.setter
    def current_directory(self, path: Union[str, Path]) -> None:
        if path is None:
            raise ValueError("Directory must not be None")
        target = self.resolve(path)
        # symlinks are not followed
        if target.is_symlink() or not target.is_dir():
            raise ValueError(f"'{path}' is not a valid directory!")
        self._current_directory = target

    def resolve(self, path: Union[str, Path]) -> Path:
        """Absolute, normalized form of ``path`` taken relative to the current directory."""
        return Path(os.path.normpath(os.path.join(self._current_directory, os.fspath(path))))

    # ── Shared data ───────────────────────────────────────────────────────────

    def get_shared_data(self, key: str) -> Any:
        return self._shared.get(key)

    def set_shared_data(self, key: str, value: Any) -> None:
        self._shared[key] = value
