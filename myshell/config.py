#!/usr/bin/env python3
"""MyShell — config.py"""

import logging
import os
from typing import Any, Mapping, Optional

log = logging.getLogger("myshell")

ENV_PREFIX = "MYSHELL_"

DEFAULT_CONFIG: dict[str, Any] = {
    "prompt_symbol": ">",
    "multiline_symbol": "|",
    "morelines_symbol": "\\",
    "default_charset": "utf-8",
    "copy_buffer_size": 4096,
    "hexdump_width": 16,
    "tree_max_depth": 32,
    "log_level": "WARNING",
    "banner": True,
}

_RULES: dict[str, tuple] = {
    "copy_buffer_size": (int, 1,  1 << 24, None),
    "hexdump_width":    (int, 2,  64,      None),
    "tree_max_depth":   (int, 1,  256,     None),
    "log_level": (str, None, None, ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
}

_BOOL_KEYS = {"banner"}
_SYMBOL_KEYS = {"prompt_symbol", "multiline_symbol", "morelines_symbol"}


class ShellConfig:
    """Session defaults. Environment variables override, nothing is persisted."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._data: dict[str, Any] = {}
        self._load(os.environ if environ is None else environ)

    def _load(self, environ: Mapping[str, str]):
        self._data = DEFAULT_CONFIG.copy()
        for key in DEFAULT_CONFIG:
            raw = environ.get(ENV_PREFIX + key.upper())
            if raw is None:
                continue
            try: self._data[key] = self._validate(key, raw)
            except ValueError as e:
                log.warning("ignoring %s%s: %s", ENV_PREFIX, key.upper(), e)

    def _validate(self, key: str, value: Any) -> Any:
        if key not in DEFAULT_CONFIG:
            raise ValueError(f"Unknown setting '{key}'")
        if key in _BOOL_KEYS:
            if isinstance(value, str):
                return value.lower() in ("true", "1", "yes", "on")
            return bool(value)
        if key in _SYMBOL_KEYS:
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"'{key}' must be a single character")
            return value
        if key == "default_charset":
            import codecs
            try: return codecs.lookup(str(value)).name
            except LookupError: raise ValueError(f"'{key}': unknown charset {value!r}")
        if key not in _RULES:
            return value
        typ, vmin, vmax, allowed = _RULES[key]
        try: value = typ(value)
        except Exception: raise ValueError(f"'{key}' must be {typ.__name__}")
        if isinstance(value, str) and allowed:
            value = value.upper()
        if vmin is not None and value < vmin: raise ValueError(f"'{key}' >= {vmin}")
        if vmax is not None and value > vmax: raise ValueError(f"'{key}' <= {vmax}")
        if allowed and value not in allowed:
            raise ValueError(f"'{key}' must be: {', '.join(str(a) for a in allowed)}")
        return value

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = self._validate(key, value)

    def all(self) -> dict:
        return dict(self._data)

    def reset(self) -> None:
        self._data = DEFAULT_CONFIG.copy()


cfg = ShellConfig()
