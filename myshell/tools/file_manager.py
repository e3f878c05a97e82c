"""
MyShell — tools/file_manager.py
File-system primitives behind the shell commands.
Every tool takes absolute paths and returns a ToolResult; failures
are reported through ``error`` instead of raising.
"""

from __future__ import annotations
import codecs, os, shutil
from dataclasses import dataclass, field
from datetime import datetime
from encodings.aliases import aliases as _codec_aliases
from pathlib import Path
from typing import Any, Dict, List


@dataclass
class ToolResult:
    success: bool
    output: str = ""
    error: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self) -> List[str]:
        return self.output.splitlines() if self.output else []


# ── Listing ────────────────────────────────────────────────────────────────────

def _flags(p: Path) -> str:
    return "".join((
        "d" if p.is_dir() else "-",
        "r" if os.access(p, os.R_OK) else "-",
        "w" if os.access(p, os.W_OK) else "-",
        "x" if os.access(p, os.X_OK) else "-",
    ))


def list_directory(path: Path) -> ToolResult:
    if not path.is_dir(): return ToolResult(False, error=f"'{path}' is not a directory")
    try:
        entries = []
        for item in sorted(path.iterdir(), key=lambda x: x.name):
            st = item.lstat()
            entries.append({
                "name": item.name, "flags": _flags(item), "size": st.st_size,
                "modified": datetime.fromtimestamp(st.st_mtime).strftime("%Y-%m-%d %H:%M:%S"),
            })
        out = "\n".join(f"{e['flags']} {e['size']:>10} {e['modified']} {e['name']}" for e in entries)
        return ToolResult(True, output=out, metadata={"path": str(path), "entries": entries})
    except OSError as exc:
        return ToolResult(False, error=str(exc))


def walk_tree(path: Path, max_depth: int = 32) -> ToolResult:
    """Nested ``{"name", "dir", "children"}`` dicts, directories first."""
    if not path.is_dir(): return ToolResult(False, error=f"'{path}' is not a directory")

    def _node(p: Path, depth: int) -> dict:
        node = {"name": p.name or str(p), "dir": p.is_dir(), "children": []}
        if not node["dir"] or depth >= max_depth or p.is_symlink(): return node
        try:
            items = sorted(p.iterdir(), key=lambda x: (not x.is_dir(), x.name.lower()))
        except PermissionError:
            node["denied"] = True; return node
        node["children"] = [_node(i, depth + 1) for i in items]
        return node

    try:
        root = _node(path, 0)
    except OSError as exc:
        return ToolResult(False, error=str(exc))
    return ToolResult(True, metadata={"tree": root})


# ── Reading ────────────────────────────────────────────────────────────────────

def file_read(path: Path, charset: str = "utf-8") -> ToolResult:
    try: charset = codecs.lookup(charset).name
    except LookupError: return ToolResult(False, error=f"Unsupported charset: {charset}")
    if not path.is_file(): return ToolResult(False, error=f"'{path}' is not a file")
    try:
        with open(path, "r", encoding=charset, errors="replace") as f:
            text = f.read()
        return ToolResult(True, output=text,
                          metadata={"path": str(path), "charset": charset, "size_bytes": path.stat().st_size})
    except OSError as exc:
        return ToolResult(False, error=str(exc))


def hex_dump(path: Path, width: int = 16) -> ToolResult:
    """Rows of ``OFFSET: hex hex|hex hex | text``; bytes below 32 or above 127 print as '.'."""
    if not path.is_file(): return ToolResult(False, error=f"'{path}' is not a file")
    half = width // 2
    rows: List[str] = []
    try:
        with open(path, "rb") as f:
            offset = 0
            while True:
                chunk = f.read(width)
                if not chunk: break
                cells = [f"{b:02X}" for b in chunk] + ["  "] * (width - len(chunk))
                text = "".join(chr(b) if 32 <= b <= 127 else "." for b in chunk)
                rows.append(f"{offset:08X}: {' '.join(cells[:half])}|{' '.join(cells[half:])} | {text}")
                offset += len(chunk)
    except OSError as exc:
        return ToolResult(False, error=str(exc))
    return ToolResult(True, output="\n".join(rows), metadata={"rows": len(rows)})


def list_charsets() -> List[str]:
    names = set()
    for alias in set(_codec_aliases.values()) | set(_codec_aliases):
        try: info = codecs.lookup(alias)
        except LookupError: continue
        if getattr(info, "_is_text_encoding", True): names.add(info.name)
    return sorted(names)


# ── Writing ────────────────────────────────────────────────────────────────────

def copy_target(src: Path, dest: Path) -> Path:
    """Where ``copy src dest`` writes: into ``dest`` when it is a directory."""
    return dest / src.name if dest.is_dir() else dest


def file_copy(src: Path, dest: Path, buffer_size: int = 4096) -> ToolResult:
    """Copy one regular file to ``dest`` (an exact target path)."""
    if not src.is_file(): return ToolResult(False, error=f"'{src}' is not a file")
    if dest.exists() and dest.samefile(src):
        return ToolResult(False, error=f"'{src}' cannot be copied onto itself")
    if not dest.parent.is_dir(): return ToolResult(False, error=f"'{dest.parent}' is not a directory")
    copied = 0
    try:
        with open(src, "rb") as fin, open(dest, "wb") as fout:
            while True:
                buf = fin.read(buffer_size)
                if not buf: break
                fout.write(buf); copied += len(buf)
        shutil.copymode(src, dest)
    except OSError as exc:
        return ToolResult(False, error=str(exc))
    return ToolResult(True, output=f"Copied {src.name} → {dest}", metadata={"bytes": copied})


def create_directory(path: Path) -> ToolResult:
    try:
        existed = path.is_dir()
        path.mkdir(parents=True, exist_ok=True)
        if existed: return ToolResult(True, output=f"Directory {path} already exists")
        return ToolResult(True, output=f"Created {path}", metadata={"path": str(path)})
    except OSError as exc:
        return ToolResult(False, error=str(exc))


def file_rename(src: Path, dest: Path) -> ToolResult:
    """Move a file; an existing target is refused."""
    if not src.exists(): return ToolResult(False, error=f"Not found: {src}")
    if dest.exists(): return ToolResult(False, error=f"Target exists: {dest}")
    try:
        shutil.move(str(src), str(dest))
        return ToolResult(True, output=f"{src} => {dest}")
    except OSError as exc:
        return ToolResult(False, error=str(exc))
