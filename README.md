# jlif

A JSON line formatter for streaming input. `jlif` reads text from standard
input line by line, picks out JSON values (including JSON that spans several
lines) and writes them back pretty-printed or compacted, coloured when the
output is a terminal. Lines that are not JSON pass through unchanged, so it
fits at the end of a pipe of mixed log output.

## Installation

```
pip install .
```

This installs the `jlif` command. It has no dependencies outside the
standard library. To run the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

## Usage

```
some-service 2>&1 | jlif
```

Options:

| Option | Meaning |
| --- | --- |
| `--max-lines N` | Maximum lines to buffer while waiting for multi-line JSON to complete (default 10; must not be negative) |
| `-f, --filter PATTERN` | Only output content matching this regular expression |
| `-s, --case-sensitive` | Make the filter pattern case-sensitive (it is case-insensitive by default) |
| `-j, --json-only` | Show only JSON content; suppress non-JSON lines |
| `-c, --compact` | Output JSON compactly instead of pretty-printed with two-space indentation |
| `--no-color` | Disable coloured output |
| `-V, --version` | Show the version and exit |
| `-h, --help` | Show the help text and exit |

Examples:

```
cat app.log | jlif --json-only --compact --no-color
cat app.log | jlif -f error
cat app.log | jlif -s -f ERROR --max-lines 50
```

An invalid filter pattern is reported on standard error and the command
exits with status 1.

### Filtering

The pattern is searched for anywhere in each item, using Python's `re`
syntax. Text lines are matched as they are; JSON values are matched against
their compact serialization, for example `{"status":"error","code":500}`,
so a pattern such as `"status"\s*:\s*"error"` selects objects by field.
With `--json-only`, text lines are never shown, even if they match.

### Colour

Colour is used only when standard output is a terminal and the `NO_COLOR`
environment variable is not set; `--no-color` turns it off altogether.
Output sent to a file or a pipe is always plain.

## How buffering works

A line that cannot start a JSON value is printed at once. A line that could
(after trimming, it begins with `{`, `[`, `"`, a digit, `-`, `true`, `false`
or `null`) is held in a buffer until the buffered lines, joined with
newlines, parse as a single JSON value. If the buffer reaches `--max-lines`
without that happening, the oldest line is released as text and the
remaining lines are scanned from the front for complete JSON values, which
are extracted; lines that cannot start JSON are released as text. At end of
input everything left is flushed: complete JSON is formatted, the rest is
printed as text.

Key order in JSON objects is kept as it was in the input.

## Library use

The pieces can be used from Python as well:

- `jlif.buffer.LineBuffer(max_lines)` – `add_line(line)` returns a list of
  results (`JsonResult`, `TextResult`, and a trailing `IncompleteResult` when
  lines are still held back); `drain()` empties the buffer at end of input;
  `len()` gives the number of buffered lines.
- `jlif.results` – the result classes, plus `could_be_json_start(line)` and
  `try_parse_json(text)`.
- `jlif.filter.build_filter(pattern, case_sensitive, json_only)` – builds a
  `NoFilter`, `RegexFilter` or `JsonOnlyFilter`; an invalid pattern raises
  `InvalidRegexError` (a `FormatterError`).
- `jlif.formatter.JsonFormatter(compact, color)` or
  `JsonFormatter.from_args(compact, no_color)`, with `format_json(value)`;
  `colorize_json(value, indent)` always renders with ANSI colours.
- `jlif.processor.StreamProcessor(reader, writer, buffer, output_filter, formatter)`
  – `process()` reads every line from `reader` and writes to `writer`.

```python
import io

from jlif.buffer import LineBuffer
from jlif.filter import build_filter
from jlif.formatter import JsonFormatter
from jlif.processor import StreamProcessor

out = io.StringIO()
StreamProcessor(
    io.StringIO('text\n{"a": 1}\n'),
    out,
    LineBuffer(10),
    build_filter(None, False, False),
    JsonFormatter.from_args(compact=True, no_color=True),
).process()
print(out.getvalue())  # text\n{"a":1}\n
```