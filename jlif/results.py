"""Results produced by the line buffer and the JSON helpers they rely on."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Union

__all__ = [
    "JsonResult",
    "TextResult",
    "IncompleteResult",
    "BufferResult",
    "could_be_json_start",
    "try_parse_json",
]


@dataclass(frozen=True)
class JsonResult:
    """A parsed JSON value ready for formatting."""

    value: Any


@dataclass(frozen=True)
class TextResult:
    """A non-JSON line to pass through unchanged."""

    text: str


@dataclass(frozen=True)
class IncompleteResult:
    """Lines held back while waiting for more input."""

    lines: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))


BufferResult = Union[JsonResult, TextResult, IncompleteResult]

_JSON_KEYWORDS = ("true", "false", "null")
_DIGITS = "0123456789"


def could_be_json_start(line: str) -> bool:
    """Return True if the trimmed line starts the way a JSON value can."""
    trimmed = line.strip()
    if not trimmed:
        return False
    if trimmed[0] in '"{[':
        return True
    if trimmed.startswith(_JSON_KEYWORDS):
        return True
    return trimmed[0] in _DIGITS or trimmed[0] == "-"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def try_parse_json(text: str) -> JsonResult | None:
    """Parse text as one strict JSON document, or return None if it is not one."""
    try:
        value = _DECODER.decode(text)
    except (ValueError, RecursionError):
        return None
    return JsonResult(value)