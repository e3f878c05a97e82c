"""MyShell — file commands: ls, copy, cat, tree, charsets, mkdir, hexdump."""
from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, List

from rich.markup import escape
from rich.tree import Tree

from myshell.commands.base_command import ShellCommand
from myshell.tools import (
    list_directory, walk_tree, file_read, hex_dump, list_charsets,
    copy_target, file_copy, create_directory,
)

if TYPE_CHECKING:
    from myshell.environment import Environment

CYAN   = "#00f5ff"
BLUE   = "#0088ff"
PINK   = "#f472b6"
GREEN  = "#00ff9f"
YELLOW = "#ffe600"
ORANGE = "#f97316"
WHITE  = "#e8eaf6"
DIM    = "#3d4a5c"

EXT_COLORS = {
    ".py": CYAN, ".js": YELLOW, ".ts": BLUE, ".go": CYAN, ".rs": ORANGE,
    ".java": ORANGE, ".md": GREEN, ".json": YELLOW, ".yaml": DIM, ".yml": DIM,
    ".html": ORANGE, ".css": PINK, ".sh": GREEN, ".toml": YELLOW, ".txt": WHITE,
}


def _ls(env: "Environment", args: List[str]):
    r = list_directory(env.resolve(args[0]))
    if not r.success: env.error(r.error); return
    for line in r.lines: env.writeln(line)


def _copy(env: "Environment", args: List[str]):
    src, dest = env.resolve(args[0]), env.resolve(args[1])
    if not src.is_file(): env.error(f"'{args[0]}' is not a file"); return
    target = copy_target(src, dest)
    if target.exists() and not target.samefile(src):
        answer = env.ask(f"'{target}' already exists. Overwrite? (y/n) ").strip().lower()
        if answer not in ("y", "yes"):
            env.writeln("Copy cancelled."); return
    r = file_copy(src, target, env.cfg.get("copy_buffer_size", 4096))
    if not r.success: env.error(r.error); return
    env.writeln(r.output)


def _cat(env: "Environment", args: List[str]):
    charset = args[1] if len(args) > 1 else env.cfg.get("default_charset", "utf-8")
    r = file_read(env.resolve(args[0]), charset)
    if not r.success: env.error(r.error); return
    env.write(r.output)
    if r.output and not r.output.endswith("\n"): env.writeln()


def _tree(env: "Environment", args: List[str]):
    root = env.resolve(args[0]) if args else env.current_directory
    r = walk_tree(root, env.cfg.get("tree_max_depth", 32))
    if not r.success: env.error(r.error); return

    def _add(parent, node: dict):
        for child in node["children"]:
            name = escape(child["name"])
            if child["dir"]:
                branch = parent.add(f"[bold {DIM}]{name}/[/]")
                _add(branch, child)
            else:
                color = EXT_COLORS.get(Path(child["name"]).suffix.lower(), WHITE)
                parent.add(f"[{color}]{name}[/]")

    data = r.metadata["tree"]
    tree = Tree(f"[bold {CYAN}]{escape(data['name'])}/[/]")
    _add(tree, data)
    env.writeln(tree)


def _charsets(env: "Environment", args: List[str]):
    for name in list_charsets(): env.writeln(name)


def _mkdir(env: "Environment", args: List[str]):
    r = create_directory(env.resolve(args[0]))
    if not r.success: env.error(r.error); return
    env.writeln(r.output)


def _hexdump(env: "Environment", args: List[str]):
    r = hex_dump(env.resolve(args[0]), env.cfg.get("hexdump_width", 16))
    if not r.success: env.error(r.error); return
    for line in r.lines: env.writeln(line)


LsCommand = ShellCommand(
    name="ls", usage="ls <dir>", min_args=1, max_args=1, handler=_ls,
    description=[
        "Lists the contents of a directory (not recursive).",
        "Each line shows drwx flags, size in bytes, modification time and name.",
    ],
)

CopyCommand = ShellCommand(
    name="copy", usage="copy <source file> <destination>", min_args=2, max_args=2, handler=_copy,
    description=[
        "Copies a file.",
        "If the destination is a directory the file is copied into it under its own name.",
        "An existing destination file is overwritten only after confirmation.",
    ],
)

CatCommand = ShellCommand(
    name="cat", usage="cat <file> [charset]", min_args=1, max_args=2, handler=_cat,
    description=[
        "Prints a file decoded with the given charset.",
        "Without a charset the configured default (utf-8) is used.",
    ],
)

TreeCommand = ShellCommand(
    name="tree", usage="tree [dir]", min_args=0, max_args=1, handler=_tree,
    description=[
        "Prints a directory tree, directories first.",
        "Defaults to the current directory.",
    ],
)

CharsetsCommand = ShellCommand(
    name="charsets", usage="charsets", handler=_charsets,
    description=["Lists the names of all supported charsets."],
)

MkdirCommand = ShellCommand(
    name="mkdir", usage="mkdir <dir>", min_args=1, max_args=1, handler=_mkdir,
    description=["Creates a directory together with any missing parents."],
)

HexdumpCommand = ShellCommand(
    name="hexdump", usage="hexdump <file>", min_args=1, max_args=1, handler=_hexdump,
    description=[
        "Prints a file as hex bytes next to their text form.",
        "Bytes below 32 or above 127 are shown as '.'.",
    ],
)
