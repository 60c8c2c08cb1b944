"""Streaming driver that reads lines, buffers them and writes filtered output."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from jlif.buffer import LineBuffer
from jlif.filter import ConversionError, OutputFilter, to_filter_input
from jlif.formatter import JsonFormatter
from jlif.results import BufferResult, JsonResult

__all__ = ["StreamProcessor"]


def _strip_line_ending(line: str) -> str:
    """Remove a trailing newline, and a carriage return just before it."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class StreamProcessor:
    """Feeds lines from a reader through a buffer, a filter and a formatter."""

    def __init__(
        self,
        reader: Iterable[str],
        writer: TextIO,
        buffer: LineBuffer,
        output_filter: OutputFilter,
        formatter: JsonFormatter,
    ) -> None:
        self.reader = reader
        self.writer = writer
        self.buffer = buffer
        self.output_filter = output_filter
        self.formatter = formatter

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(buffer={self.buffer!r}, "
            f"output_filter={self.output_filter!r}, formatter={self.formatter!r})"
        )

    def process(self) -> None:
        """Process the input until it ends, then flush whatever is still buffered."""
        for raw in self.reader:
            self._handle(self.buffer.add_line(_strip_line_ending(raw)))
        self._handle(self.buffer.drain())

    def _handle(self, results: Iterable[BufferResult]) -> None:
        for result in results:
            try:
                item = to_filter_input(result)
            except ConversionError:
                continue
            if not self.output_filter.matches(item):
                continue
            if isinstance(item, JsonResult):
                text = self.formatter.format_json(item.value)
            else:
                text = item.text
            self.writer.write(f"{text}\n")