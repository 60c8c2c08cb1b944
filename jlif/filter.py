"""Output filters that decide which emitted JSON values and text lines are shown."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Protocol, Union

from jlif.results import BufferResult, IncompleteResult, JsonResult, TextResult

__all__ = [
    "FormatterError",
    "InvalidRegexError",
    "ConversionError",
    "FilterInput",
    "OutputFilter",
    "NoFilter",
    "JsonOnlyFilter",
    "RegexFilter",
    "to_filter_input",
    "build_filter",
]

FilterInput = Union[JsonResult, TextResult]


class FormatterError(Exception):
    """Base error for problems building an output filter."""


class InvalidRegexError(FormatterError):
    """The filter pattern is not a valid regular expression."""

    def __init__(self, pattern: str, source: re.error) -> None:
        super().__init__(f"Invalid regex pattern '{pattern}': {source}")
        self.pattern = pattern
        self.source = source


class ConversionError(ValueError):
    """A buffer result cannot be handed to a filter."""

    def __init__(self) -> None:
        super().__init__("Cannot convert Incomplete buffer result to filter input")


class OutputFilter(Protocol):
    """Anything that can decide whether an item is written out."""

    def matches(self, item: FilterInput) -> bool: ...

    def is_active(self) -> bool: ...


def to_filter_input(result: BufferResult) -> FilterInput:
    """Return the result if it can be output; raise ConversionError if it is incomplete."""
    if isinstance(result, (JsonResult, TextResult)):
        return result
    if isinstance(result, IncompleteResult):
        raise ConversionError()
    raise TypeError(f"unexpected buffer result of type {type(result).__name__}")


@dataclass(frozen=True)
class NoFilter:
    """Passes every item through."""

    def matches(self, item: FilterInput) -> bool:
        return True

    def is_active(self) -> bool:
        return False


@dataclass(frozen=True)
class JsonOnlyFilter:
    """Passes only JSON items, and only those the inner filter accepts."""

    inner: OutputFilter = field(default_factory=NoFilter)

    def __init__(self, inner: OutputFilter) -> None:
        object.__setattr__(self, "inner", inner)

    def matches(self, item: FilterInput) -> bool:
        if isinstance(item, JsonResult):
            return self.inner.matches(item)
        return False

    def is_active(self) -> bool:
        return True


def _compact(value: object) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return ""


class RegexFilter:
    """Matches items whose text, or compact JSON rendering, contains the pattern."""

    def __init__(self, pattern: str, case_sensitive: bool = False) -> None:
        flags = 0 if case_sensitive else re.IGNORECASE
        try:
            self.regex = re.compile(pattern, flags)
        except re.error as exc:
            raise InvalidRegexError(pattern, exc) from exc
        self.pattern = pattern
        self.case_sensitive = case_sensitive

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pattern={self.pattern!r}, "
            f"case_sensitive={self.case_sensitive!r})"
        )

    def matches(self, item: FilterInput) -> bool:
        content = _compact(item.value) if isinstance(item, JsonResult) else item.text
        return self.regex.search(content) is not None

    def is_active(self) -> bool:
        return True


def build_filter(
    pattern: str | None, case_sensitive: bool = False, json_only: bool = False
) -> OutputFilter:
    """Build the output filter described by the command-line options."""
    base: OutputFilter = NoFilter() if pattern is None else RegexFilter(pattern, case_sensitive)
    return JsonOnlyFilter(base) if json_only else base