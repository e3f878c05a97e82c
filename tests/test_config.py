from __future__ import annotations

import logging

import pytest

from myshell.config import DEFAULT_CONFIG, ShellConfig
from myshell.environment import Environment


def test_defaults() -> None:
    c = ShellConfig(environ={})
    assert c.all() == DEFAULT_CONFIG


def test_environment_overrides() -> None:
    c = ShellConfig(environ={
        "MYSHELL_PROMPT_SYMBOL": "$",
        "MYSHELL_HEXDUMP_WIDTH": "8",
        "MYSHELL_BANNER": "off",
        "MYSHELL_LOG_LEVEL": "debug",
        "MYSHELL_DEFAULT_CHARSET": "Latin-1",
    })
    assert c.get("prompt_symbol") == "$"
    assert c.get("hexdump_width") == 8
    assert c.get("banner") is False
    assert c.get("log_level") == "DEBUG"
    assert c.get("default_charset") == "iso8859-1"


def test_invalid_overrides_fall_back_to_defaults() -> None:
    c = ShellConfig(environ={
        "MYSHELL_PROMPT_SYMBOL": "$$",
        "MYSHELL_HEXDUMP_WIDTH": "huge",
        "MYSHELL_COPY_BUFFER_SIZE": "0",
        "MYSHELL_DEFAULT_CHARSET": "klingon",
    })
    assert c.get("prompt_symbol") == ">"
    assert c.get("hexdump_width") == 16
    assert c.get("copy_buffer_size") == 4096
    assert c.get("default_charset") == "utf-8"


@pytest.mark.parametrize("key,value", [
    ("hexdump_width", 1),
    ("tree_max_depth", "x"),
    ("log_level", "LOUD"),
    ("multiline_symbol", ""),
    ("no_such_key", 1),
])
def test_set_validates(key: str, value) -> None:
    c = ShellConfig(environ={})
    with pytest.raises(ValueError):
        c.set(key, value)


def test_reset() -> None:
    c = ShellConfig(environ={})
    c.set("hexdump_width", 32)
    c.reset()
    assert c.get("hexdump_width") == 16


def test_environment_takes_symbols_from_config(tmp_path) -> None:
    c = ShellConfig(environ={"MYSHELL_PROMPT_SYMBOL": "%", "MYSHELL_MORELINES_SYMBOL": "&"})
    env = Environment(directory=tmp_path, config=c)
    assert env.prompt_symbol == "%"
    assert env.morelines_symbol == "&"
    assert env.multiline_symbol == "|"


def test_invalid_override_is_logged(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="myshell"):
        ShellConfig(environ={"MYSHELL_HEXDUMP_WIDTH": "huge"})
    assert "MYSHELL_HEXDUMP_WIDTH" in caplog.text
