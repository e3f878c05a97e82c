"""
MyShell — rename/engine.py
Name-builder expressions and rename plans used by massrename.

An expression mixes literal text with group references:
    ${1}       group 1 as is
    ${1,3}     group 1 left-padded with spaces to width 3
    ${1,03}    group 1 left-padded with zeros to width 3
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from re import Match, Pattern
from typing import List, Optional, Union

_GROUP_REF = re.compile(r"\$\{\s*(\d+)\s*(?:,\s*(\d+)\s*)?\}")


@dataclass
class Literal:
    text: str

    def render(self, match: Match) -> str:
        return self.text


@dataclass
class GroupRef:
    index: int
    width: int = 0
    zero_pad: bool = False

    def render(self, match: Match) -> str:
        try: value = match.group(self.index) or ""
        except IndexError:
            raise ValueError(f"Mask has no group {self.index}")
        if len(value) >= self.width: return value
        return value.rjust(self.width, "0" if self.zero_pad else " ")


@dataclass
class NameBuilder:
    """Compiled expression. ``build(match)`` renders the new file name."""
    source: str
    parts: List[Union[Literal, GroupRef]] = field(default_factory=list)

    @classmethod
    def parse(cls, expression: str) -> "NameBuilder":
        parts: List[Union[Literal, GroupRef]] = []
        pos = 0
        for m in _GROUP_REF.finditer(expression):
            if m.start() > pos: parts.append(Literal(_check_literal(expression[pos:m.start()])))
            width = m.group(2)
            parts.append(GroupRef(int(m.group(1)),
                                  int(width) if width else 0,
                                  bool(width) and len(width) > 1 and width.startswith("0")))
            pos = m.end()
        if pos < len(expression): parts.append(Literal(_check_literal(expression[pos:])))
        return cls(expression, parts)

    def build(self, match: Match) -> str:
        return "".join(p.render(match) for p in self.parts)


def _check_literal(text: str) -> str:
    if "${" in text:
        raise ValueError(f"Malformed group reference near {text[text.index('${'):][:12]!r}")
    return text


def compile_mask(mask: str) -> Pattern:
    try: return re.compile(mask, re.IGNORECASE | re.UNICODE)
    except re.error as exc:
        raise ValueError(f"Invalid mask {mask!r}: {exc}") from exc


# ── Plans ──────────────────────────────────────────────────────────────────────

@dataclass
class FileMatch:
    """A file in the source directory whose whole name matched the mask."""
    path: Path
    match: Match

    @property
    def name(self) -> str: return self.path.name

    def groups(self) -> List[str]:
        return [self.match.group(i) or "" for i in range(self.match.re.groups + 1)]


@dataclass
class RenameEntry:
    source: Path
    target: Path


@dataclass
class RenamePlan:
    entries: List[RenameEntry] = field(default_factory=list)

    def add(self, entry: RenameEntry):
        self.entries.append(entry)

    def __len__(self):
        return len(self.entries)


def select_files(directory: Path, mask: Union[str, Pattern]) -> List[FileMatch]:
    """Regular files of ``directory`` (not recursive) whose full name matches ``mask``."""
    if not directory.is_dir():
        raise ValueError(f"'{directory}' is not a directory")
    pattern = compile_mask(mask) if isinstance(mask, str) else mask
    found = []
    for p in sorted(directory.iterdir(), key=lambda x: x.name):
        if not p.is_file(): continue
        m = pattern.fullmatch(p.name)
        if m: found.append(FileMatch(p, m))
    return found


def build_plan(files: List[FileMatch], builder: NameBuilder, target_dir: Path) -> RenamePlan:
    plan = RenamePlan()
    for fm in files:
        name = builder.build(fm.match)
        if not name or name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError(f"Invalid target name {name!r} for {fm.name}")
        plan.add(RenameEntry(fm.path, target_dir / name))
    return plan


def first_problem(plan: RenamePlan) -> Optional[str]:
    """Reason the plan cannot run cleanly, or None."""
    seen = set()
    for e in plan.entries:
        if e.target.exists() and e.target != e.source:
            return f"Target exists: {e.target}"
        if e.target in seen:
            return f"Two files would be renamed to {e.target.name}"
        seen.add(e.target)
    return None
