from __future__ import annotations

import re
from pathlib import Path

import pytest

from myshell.commands import CD_STACK, ShellStatus
from myshell.shell import dispatch

from conftest import output_of, run_line


# ── ls / mkdir / tree ──────────────────────────────────────────────────────────

def test_ls_lists_entries_sorted_with_flags_size_and_date(env, tmp_path: Path) -> None:
    (tmp_path / "b.txt").write_bytes(b"hello")
    (tmp_path / "a_dir").mkdir()

    lines = run_line(env, "ls .").splitlines()

    assert len(lines) == 2
    assert re.match(r"^d[r-][w-][x-] +\d+ \d{4}-\d\d-\d\d \d\d:\d\d:\d\d a_dir$", lines[0])
    assert re.match(r"^-[r-][w-][x-] {10}5 \d{4}-\d\d-\d\d \d\d:\d\d:\d\d b\.txt$", lines[1])


def test_ls_on_a_file_reports_error(env, tmp_path: Path) -> None:
    (tmp_path / "f").write_text("x", encoding="utf-8")
    assert "is not a directory" in run_line(env, "ls f")


def test_ls_accepts_quoted_path_with_spaces(env, tmp_path: Path) -> None:
    (tmp_path / "my dir").mkdir()
    (tmp_path / "my dir" / "inner.txt").write_text("x", encoding="utf-8")
    assert "inner.txt" in run_line(env, 'ls "my dir"')


def test_mkdir_creates_parents(env, tmp_path: Path) -> None:
    run_line(env, "mkdir one/two/three")
    assert (tmp_path / "one" / "two" / "three").is_dir()


def test_tree_prints_nested_names(env, tmp_path: Path) -> None:
    (tmp_path / "pkg" / "sub").mkdir(parents=True)
    (tmp_path / "pkg" / "mod.py").write_text("", encoding="utf-8")
    (tmp_path / "pkg" / "sub" / "deep.txt").write_text("", encoding="utf-8")

    text = run_line(env, "tree pkg")

    assert "pkg/" in text
    assert "sub/" in text
    assert "mod.py" in text
    assert "deep.txt" in text
    assert text.index("sub/") < text.index("mod.py")


def test_tree_defaults_to_current_directory(env, tmp_path: Path) -> None:
    (tmp_path / "here.txt").write_text("", encoding="utf-8")
    text = run_line(env, "tree")
    assert tmp_path.name + "/" in text
    assert "here.txt" in text


# ── copy ───────────────────────────────────────────────────────────────────────

def test_copy_to_new_file(env, tmp_path: Path) -> None:
    (tmp_path / "src.bin").write_bytes(bytes(range(256)) * 40)
    run_line(env, "copy src.bin dst.bin")
    assert (tmp_path / "dst.bin").read_bytes() == bytes(range(256)) * 40


def test_copy_into_directory_keeps_name(env, tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("data", encoding="utf-8")
    (tmp_path / "out").mkdir()
    run_line(env, "copy a.txt out")
    assert (tmp_path / "out" / "a.txt").read_text(encoding="utf-8") == "data"


@pytest.mark.parametrize("answer,expected", [("y", "new"), ("n", "old")])
def test_copy_asks_before_overwriting(make_env, tmp_path: Path, answer: str, expected: str) -> None:
    env, out = make_env(answer + "\n")
    (tmp_path / "a.txt").write_text("new", encoding="utf-8")
    (tmp_path / "b.txt").write_text("old", encoding="utf-8")

    dispatch(env, "copy a.txt b.txt")

    assert "Overwrite? (y/n)" in out.getvalue()
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == expected


def test_copy_onto_itself_is_refused(env, tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("keep", encoding="utf-8")
    assert "onto itself" in run_line(env, "copy a.txt .")
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "keep"


def test_copy_of_directory_is_refused(env, tmp_path: Path) -> None:
    (tmp_path / "d").mkdir()
    assert "is not a file" in run_line(env, "copy d e")


# ── cat / charsets / hexdump ───────────────────────────────────────────────────

def test_cat_default_charset(env, tmp_path: Path) -> None:
    (tmp_path / "t.txt").write_text("čćž\nline", encoding="utf-8")
    assert run_line(env, "cat t.txt") == "čćž\nline\n"


def test_cat_with_charset(env, tmp_path: Path) -> None:
    (tmp_path / "t.txt").write_bytes("čšž\n".encode("iso-8859-2"))
    assert run_line(env, "cat t.txt ISO-8859-2") == "čšž\n"


def test_cat_keeps_tabs_and_control_characters(env, tmp_path: Path) -> None:
    (tmp_path / "t.txt").write_bytes(b"a\tb\nx\x0cy\x07\n")
    assert run_line(env, "cat t.txt") == "a\tb\nx\x0cy\x07\n"


def test_cat_unknown_charset(env, tmp_path: Path) -> None:
    (tmp_path / "t.txt").write_text("x", encoding="utf-8")
    assert "Unsupported charset: nope" in run_line(env, "cat t.txt nope")


def test_charsets_lists_text_codecs(env) -> None:
    names = run_line(env, "charsets").splitlines()
    assert "utf-8" in names
    assert "iso8859-2" in names
    assert "base64" not in names
    assert names == sorted(names)


def test_hexdump_full_row(env, tmp_path: Path) -> None:
    (tmp_path / "h.txt").write_bytes(b"1. Ovo je prvi r")
    assert run_line(env, "hexdump h.txt") == (
        "00000000: 31 2E 20 4F 76 6F 20 6A|65 20 70 72 76 69 20 72 | 1. Ovo je prvi r\n"
    )


def test_hexdump_partial_row_and_unprintable_bytes(env, tmp_path: Path) -> None:
    (tmp_path / "h.bin").write_bytes(b"A" * 16 + b"B\x00\xff")
    lines = run_line(env, "hexdump h.bin").splitlines()
    assert len(lines) == 2
    assert lines[1].startswith("00000010: 42 00 FF ")
    assert lines[1].endswith("| B..")
    assert len(lines[1]) == len(lines[0]) - 13


# ── cd / pwd / directory stack ─────────────────────────────────────────────────

def test_cd_and_pwd(env, tmp_path: Path) -> None:
    (tmp_path / "x").mkdir()
    run_line(env, "cd x")
    assert run_line(env, "pwd") == f"{tmp_path / 'x'}\n"


def test_pushd_popd_round_trip(env, tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()

    run_line(env, "pushd a")
    run_line(env, "pushd ../b")
    assert env.current_directory == tmp_path / "b"
    assert run_line(env, "listd").splitlines() == [str(tmp_path / "a"), str(tmp_path)]

    run_line(env, "popd")
    assert env.current_directory == tmp_path / "a"
    run_line(env, "popd")
    assert env.current_directory == tmp_path
    assert run_line(env, "listd") == "No stored directories.\n"


def test_pushd_to_non_directory_pushes_nothing(env, tmp_path: Path) -> None:
    assert "is not a valid directory" in run_line(env, "pushd nowhere")
    assert not env.get_shared_data(CD_STACK)
    assert env.current_directory == tmp_path


def test_popd_skips_deleted_directory(env, tmp_path: Path) -> None:
    gone = tmp_path / "gone"
    gone.mkdir()
    run_line(env, "cd gone")
    run_line(env, "pushd ..")
    gone.rmdir()

    text = run_line(env, "popd")

    assert "no longer exists" in text
    assert env.current_directory == tmp_path
    assert env.get_shared_data(CD_STACK) == []


def test_popd_and_dropd_on_empty_stack(env) -> None:
    assert "Directory stack is empty." in run_line(env, "popd")
    assert "Directory stack is empty." in run_line(env, "dropd")


def test_dropd_keeps_current_directory(env, tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()
    run_line(env, "pushd a")
    run_line(env, "dropd")
    assert env.current_directory == tmp_path / "a"
    assert env.get_shared_data(CD_STACK) == []


# ── symbol / help / exit ───────────────────────────────────────────────────────

def test_symbol_show_and_change(env) -> None:
    assert run_line(env, "symbol PROMPT") == "Symbol for PROMPT is '>'\n"
    assert run_line(env, "symbol PROMPT #") == "Symbol for PROMPT changed from '>' to '#'\n"
    assert env.prompt_symbol == "#"
    assert run_line(env, "symbol MULTILINE") == "Symbol for MULTILINE is '|'\n"
    assert run_line(env, "symbol MORELINES") == "Symbol for MORELINES is '\\'\n"


def test_symbol_rejects_bad_input(env) -> None:
    assert "Unknown symbol" in run_line(env, "symbol FOO")
    assert "Usage: symbol" in run_line(env, "symbol PROMPT ab")
    assert env.prompt_symbol == ">"


def test_help_lists_every_command(env) -> None:
    text = run_line(env, "help")
    for name in env.commands():
        assert name in text


def test_help_for_one_command(env) -> None:
    text = run_line(env, "help massrename")
    assert text.startswith("massrename\n")
    assert "usage: massrename <dir1> <dir2>" in text


def test_help_for_unknown_command(env) -> None:
    assert "Unknown command: nope" in run_line(env, "help nope")


def test_exit_terminates_and_rejects_arguments(env) -> None:
    assert dispatch(env, "exit") is ShellStatus.TERMINATE
    assert dispatch(env, "exit now") is ShellStatus.CONTINUE
    assert "Usage: exit" in output_of(env)
