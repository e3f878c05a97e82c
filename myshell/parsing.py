"""
MyShell — parsing.py
Command-line splitting and argument tokenizing.
"""

from __future__ import annotations

from typing import List, Tuple

from myshell.errors import ShellUsageError


def split_command(line: str) -> Tuple[str, str]:
    """Split a logical line into ``(name, raw arguments)``."""
    parts = line.strip().split(None, 1)
    if not parts: return "", ""
    return parts[0], (parts[1].strip() if len(parts) > 1 else "")


def split_arguments(raw: str, usage: str = "") -> List[str]:
    """
    Tokenize a raw argument string.

    Tokens are separated by whitespace. A token that starts with a double
    quote runs to the closing quote; inside it ``\\"`` stands for ``"`` and
    ``\\\\`` for ``\\``, every other backslash is kept as is. A closing quote
    must be followed by whitespace or the end of the input.
    """
    tokens: List[str] = []
    i, n = 0, len(raw)
    while i < n:
        if raw[i].isspace():
            i += 1; continue
        if raw[i] != '"':
            start = i
            while i < n and not raw[i].isspace(): i += 1
            tokens.append(raw[start:i])
            continue
        i += 1
        buf: List[str] = []
        while True:
            if i >= n:
                raise ShellUsageError(usage, "unterminated quoted argument")
            ch = raw[i]
            if ch == "\\" and i + 1 < n and raw[i + 1] in ('"', "\\"):
                buf.append(raw[i + 1]); i += 2; continue
            if ch == '"':
                i += 1; break
            buf.append(ch); i += 1
        if i < n and not raw[i].isspace():
            raise ShellUsageError(usage, "quoted argument must be followed by whitespace")
        tokens.append("".join(buf))
    return tokens
