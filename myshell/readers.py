"""
MyShell — readers.py
Line sources for the environment.
  - StreamReader: any text stream (pipes, files, tests)
  - PromptReader: prompt_toolkit session with history and auto-suggest
"""

from __future__ import annotations

from typing import Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style as PTStyle


class StreamReader:
    """Reads newline-terminated lines from a text stream. Prompts are written by the caller."""

    renders_prompt = False

    def __init__(self, stream: TextIO):
        self.stream = stream

    def read_line(self) -> str:
        line = self.stream.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")


class PromptReader:
    """
    Interactive reader. The pending prompt is handed to prompt_toolkit
    so editing keys redraw it together with the input.
    """

    renders_prompt = True

    def __init__(self, session: Optional[PromptSession] = None):
        self.session = session or PromptSession(
            history=InMemoryHistory(), auto_suggest=AutoSuggestFromHistory(),
            style=PTStyle.from_dict({"": "#e8eaf6"}),
        )
        self._pending = ""

    def stage(self, text: str) -> None:
        self._pending += text

    def read_line(self) -> str:
        message, self._pending = self._pending, ""
        return self.session.prompt(message)
