"""Rendering of JSON values as plain or coloured, compact or pretty text."""

from __future__ import annotations

import json
import os
import sys
from typing import Any

__all__ = ["JsonFormatter", "colorize_json"]

_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_KEY = "\x1b[1;34m"
_STRING = "\x1b[32m"
_BOOL = "\x1b[33m"
_NULL = "\x1b[36m"


def _paint(text: str, style: str) -> str:
    return f"{style}{text}{_RESET}" if style else text


def _scalar(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


def _emit(value: Any, indent: int | None, depth: int, out: list[str]) -> None:
    if isinstance(value, dict):
        _emit_container(
            [(key, item) for key, item in value.items()], "{", "}", indent, depth, out
        )
    elif isinstance(value, (list, tuple)):
        _emit_container([(None, item) for item in value], "[", "]", indent, depth, out)
    elif isinstance(value, str):
        out.append(_paint(_scalar(value), _STRING))
    elif isinstance(value, bool):
        out.append(_paint(_scalar(value), _BOOL))
    elif value is None:
        out.append(_paint("null", _NULL))
    elif isinstance(value, (int, float)):
        out.append(_scalar(value))
    else:
        raise TypeError(f"value of type {type(value).__name__} is not JSON serialisable")


def _emit_container(
    items: list[tuple[Any, Any]],
    opener: str,
    closer: str,
    indent: int | None,
    depth: int,
    out: list[str],
) -> None:
    out.append(_paint(opener, _BOLD))
    if items:
        for position, (key, item) in enumerate(items):
            if position:
                out.append(",")
            if indent is not None:
                out.append("\n" + " " * (indent * (depth + 1)))
            if key is not None:
                if not isinstance(key, str):
                    raise TypeError("JSON object keys must be strings")
                out.append(_paint(_scalar(key), _KEY))
                out.append(": " if indent is not None else ":")
            _emit(item, indent, depth + 1, out)
        if indent is not None:
            out.append("\n" + " " * (indent * depth))
    out.append(_paint(closer, _BOLD))


def colorize_json(value: Any, indent: int | None = None) -> str:
    """Render a JSON value with ANSI colours; indent None means compact."""
    out: list[str] = []
    _emit(value, indent, 0, out)
    return "".join(out)


def _terminal_wants_color() -> bool:
    if "NO_COLOR" in os.environ:
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


class JsonFormatter:
    """Formats JSON values as compact or pretty text, coloured on a terminal."""

    _INDENT = 2

    def __init__(self, compact: bool = False, color: bool = True) -> None:
        self.compact = compact
        self.color = color

    @classmethod
    def from_args(cls, compact: bool, no_color: bool) -> "JsonFormatter":
        """Build a formatter from the command-line flags."""
        return cls(compact=compact, color=not no_color)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(compact={self.compact!r}, color={self.color!r})"

    def format_json(self, value: Any) -> str:
        """Render value; colours are used only when stdout is a terminal."""
        indent = None if self.compact else self._INDENT
        if self.color and _terminal_wants_color():
            return colorize_json(value, indent)
        if self.compact:
            return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
        return json.dumps(
            value,
            ensure_ascii=False,
            allow_nan=False,
            indent=self._INDENT,
            separators=(",", ": "),
        )