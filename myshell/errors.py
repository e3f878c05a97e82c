"""Exceptions raised by the environment and by commands.

Invalid arguments (a non-directory as current directory, a missing symbol,
an empty directory stack) are plain ``ValueError``.
"""


class ShellIOError(Exception):
    """Reading user input or writing output failed."""


class ShellUsageError(Exception):
    """A command got the wrong number or shape of arguments."""

    def __init__(self, usage: str, detail: str = ""):
        self.usage = usage
        self.detail = detail
        super().__init__(f"{detail} (usage: {usage})" if detail else f"usage: {usage}")
