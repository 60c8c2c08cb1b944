"""Line buffer that picks complete JSON values out of a stream of text lines."""

from __future__ import annotations

from jlif.results import (
    BufferResult,
    IncompleteResult,
    JsonResult,
    TextResult,
    could_be_json_start,
    try_parse_json,
)

__all__ = ["LineBuffer"]


class LineBuffer:
    """Holds back lines that may form JSON until they parse or the buffer overflows.

    While accumulating, the whole buffer is tried as one JSON document. When the
    buffer reaches ``max_lines`` the oldest line is released as text and the
    buffer is drained: prefixes of the remaining lines are tried, growing one
    line at a time, and any JSON found is extracted. Draining continues until
    the buffer stops changing, after which accumulation resumes.
    """

    def __init__(self, max_lines: int = 10) -> None:
        if max_lines < 0:
            raise ValueError(f"max_lines must not be negative, got {max_lines}")
        self.max_lines = max_lines
        self._lines: list[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_lines={self.max_lines!r}, buffered={len(self._lines)})"

    def add_line(self, line: str) -> list[BufferResult]:
        """Feed one line and return whatever can be emitted so far.

        The last element is an ``IncompleteResult`` when lines remain buffered.
        """
        if not self._lines and not could_be_json_start(line):
            return [TextResult(line)]

        self._lines.append(line)
        results: list[BufferResult] = []
        draining = False

        while True:
            changed = False

            if not draining:
                parsed = try_parse_json("\n".join(self._lines))
                if parsed is not None:
                    results.append(parsed)
                    self._lines.clear()
                    changed = True
                elif len(self._lines) >= self.max_lines:
                    results.append(TextResult(self._lines.pop(0)))
                    draining = True
                    changed = True
                elif len(self._lines) == 1 and not could_be_json_start(self._lines[0]):
                    results.append(TextResult(self._lines.pop(0)))
                    changed = True
            else:
                found = self._scan_forward()
                if found is not None:
                    parsed, count = found
                    results.append(parsed)
                    del self._lines[:count]
                    changed = True
                elif not could_be_json_start(self._lines[0]):
                    results.append(TextResult(self._lines.pop(0)))
                    changed = True
                else:
                    draining = False

            if not changed:
                if self._lines:
                    results.append(IncompleteResult(tuple(self._lines)))
                break
            if not self._lines:
                break

        return results

    def drain(self) -> list[BufferResult]:
        """Empty the buffer at end of input, extracting JSON and flushing the rest as text."""
        results: list[BufferResult] = []
        while self._lines:
            found = self._scan_forward()
            if found is not None:
                parsed, count = found
                results.append(parsed)
                del self._lines[:count]
            else:
                results.append(TextResult(self._lines.pop(0)))
        return results

    def _scan_forward(self) -> tuple[JsonResult, int] | None:
        """Find the shortest leading run of lines that parses as JSON."""
        combined = ""
        for count, line in enumerate(self._lines, start=1):
            combined = line if count == 1 else f"{combined}\n{line}"
            parsed = try_parse_json(combined)
            if parsed is not None:
                return parsed, count
        return None