import pytest

from jlif.buffer import LineBuffer
from jlif.results import IncompleteResult, JsonResult, TextResult


def test_quick_shortcut_non_json():
    buffer = LineBuffer(10)
    results = buffer.add_line("Gul Dukat's therapy session, stardate 51721.3")
    assert results == [TextResult("Gul Dukat's therapy session, stardate 51721.3")]
    assert len(buffer) == 0


def test_single_line_json():
    buffer = LineBuffer(10)
    results = buffer.add_line(
        '{"vedek": "Bareil Antos", "occupation": "Former resistance fighter"}'
    )
    assert results == [
        JsonResult({"vedek": "Bareil Antos", "occupation": "Former resistance fighter"})
    ]
    assert len(buffer) == 0


def test_multi_line_json():
    buffer = LineBuffer(10)
    assert buffer.add_line("{") == [IncompleteResult(("{",))]
    assert buffer.add_line('  "holosuite_program": "Vic Fontaine"') == [
        IncompleteResult(("{", '  "holosuite_program": "Vic Fontaine"'))
    ]
    assert buffer.add_line("}") == [JsonResult({"holosuite_program": "Vic Fontaine"})]
    assert len(buffer) == 0


def test_json_like_text_before_json_non_greedy():
    buffer = LineBuffer(5)
    first = "{Morn speaks for the first time}"
    second = '{"patron": "Morn", "beverage_tab": "astronomical"}'
    third = "Quark closes the bar"

    assert buffer.add_line(first) == [IncompleteResult((first,))]
    assert buffer.add_line(second) == [IncompleteResult((first, second))]
    assert buffer.add_line(third) == [IncompleteResult((first, second, third))]
    assert buffer.add_line("{") == [IncompleteResult((first, second, third, "{"))]

    results = buffer.add_line('  "barkeeper": "Quark"}')
    assert results == [
        TextResult(first),
        JsonResult({"patron": "Morn", "beverage_tab": "astronomical"}),
        TextResult(third),
        JsonResult({"barkeeper": "Quark"}),
    ]
    assert len(buffer) == 0


def test_real_text_before_json():
    buffer = LineBuffer(10)
    assert buffer.add_line("Odo investigates a crime") == [
        TextResult("Odo investigates a crime")
    ]
    assert buffer.add_line('{"suspect": "Quark", "evidence": "none"}') == [
        JsonResult({"suspect": "Quark", "evidence": "none"})
    ]
    assert len(buffer) == 0


def test_buffer_overflow():
    buffer = LineBuffer(2)
    assert buffer.add_line("{") == [IncompleteResult(("{",))]
    assert buffer.add_line("Weyoun-6 contemplating betraying the Dominion") == [
        TextResult("{"),
        TextResult("Weyoun-6 contemplating betraying the Dominion"),
    ]
    assert buffer.add_line("Damar drinking kanar alone") == [
        TextResult("Damar drinking kanar alone")
    ]


@pytest.mark.parametrize(
    ("json_str", "expected"),
    [
        ('["Sisko", "Kira", "Dax"]', ["Sisko", "Kira", "Dax"]),
        ('"The Prophets guide us"', "The Prophets guide us"),
        ("47", 47),
        ("-2375", -2375),
        ("3.14159", 3.14159),
        ("true", True),
        ("false", False),
        ("null", None),
    ],
)
def test_single_line_json_types(json_str, expected):
    buffer = LineBuffer(10)
    results = buffer.add_line(json_str)
    assert results == [JsonResult(expected)]
    assert type(results[0].value) is type(expected)
    assert len(buffer) == 0


@pytest.mark.parametrize(
    "json_like",
    [
        "{invalid json syntax",
        "[incomplete array",
        '"unterminated string',
        "{Garak's mysterious past}",
        "[Odo's investigation, incomplete",
    ],
)
def test_overflow_with_json_like_starts(json_like):
    buffer = LineBuffer(2)
    assert buffer.add_line("{") == [IncompleteResult(("{",))]
    assert buffer.add_line(json_like) == [
        TextResult("{"),
        IncompleteResult((json_like,)),
    ]
    assert buffer.add_line("Rom fixes the replicator") == [
        TextResult(json_like),
        TextResult("Rom fixes the replicator"),
    ]
    assert len(buffer) == 0


@pytest.mark.parametrize(
    ("line1", "line2", "line3", "line4", "expected"),
    [
        ("[", '  "Worf",', '  "Data"', "]", ["Worf", "Data"]),
        (
            "{",
            '  "species": "Klingon",',
            '  "rank": "Lieutenant Commander"',
            "}",
            {"species": "Klingon", "rank": "Lieutenant Commander"},
        ),
    ],
)
def test_multi_line_complete_json_structures(line1, line2, line3, line4, expected):
    buffer = LineBuffer(10)
    assert buffer.add_line(line1) == [IncompleteResult((line1,))]
    assert buffer.add_line(line2) == [IncompleteResult((line1, line2))]
    assert buffer.add_line(line3) == [IncompleteResult((line1, line2, line3))]
    assert buffer.add_line(line4) == [JsonResult(expected)]
    assert len(buffer) == 0


@pytest.mark.parametrize(
    ("open_line", "content", "close_line", "expected"),
    [
        ("[", '"Bashir"', "]", ["Bashir"]),
        ("{", '"doctor": "Julian Bashir"', "}", {"doctor": "Julian Bashir"}),
        ("[", "47", "]", [47]),
        ("{", '"number": 1701', "}", {"number": 1701}),
    ],
)
def test_multi_line_with_valid_json_inside(open_line, content, close_line, expected):
    buffer = LineBuffer(10)
    assert buffer.add_line(open_line) == [IncompleteResult((open_line,))]
    assert buffer.add_line(content) == [IncompleteResult((open_line, content))]
    assert buffer.add_line(close_line) == [JsonResult(expected)]
    assert len(buffer) == 0


@pytest.mark.parametrize(
    ("open_line", "first", "second", "close_line", "expected"),
    [
        (
            "[",
            '{"name": "Quark"},',
            '{"name": "Rom"}',
            "]",
            [{"name": "Quark"}, {"name": "Rom"}],
        ),
        (
            "{",
            '"crew": ["Sisko", "Kira"],',
            '"station": "DS9"',
            "}",
            {"crew": ["Sisko", "Kira"], "station": "DS9"},
        ),
    ],
)
def test_multi_line_with_complex_valid_json_inside(
    open_line, first, second, close_line, expected
):
    buffer = LineBuffer(10)
    assert buffer.add_line(open_line) == [IncompleteResult((open_line,))]
    assert buffer.add_line(first) == [IncompleteResult((open_line, first))]
    assert buffer.add_line(second) == [IncompleteResult((open_line, first, second))]
    assert buffer.add_line(close_line) == [JsonResult(expected)]
    assert len(buffer) == 0


def test_multiple_consecutive_overflows_mixed_json_types():
    buffer = LineBuffer(3)
    kai = "{Kai Winn plots against Sisko}"
    emissary = '"Benjamin Sisko is the Emissary"'
    prophets = "[Prophets communicate through orbs"
    numbers = "[1, 2, 3]"
    garak = "Garak tailors clothes on the promenade"

    assert buffer.add_line(kai) == [IncompleteResult((kai,))]
    assert buffer.add_line(emissary) == [IncompleteResult((kai, emissary))]
    assert buffer.add_line(prophets) == [
        TextResult(kai),
        JsonResult("Benjamin Sisko is the Emissary"),
        IncompleteResult((prophets,)),
    ]
    assert buffer.add_line(numbers) == [IncompleteResult((prophets, numbers))]
    assert buffer.add_line(garak) == [
        TextResult(prophets),
        JsonResult([1, 2, 3]),
        TextResult(garak),
    ]
    assert len(buffer) == 0


def test_empty_buffer_during_draining_state():
    buffer = LineBuffer(2)
    assert buffer.add_line("{invalid json syntax") == [
        IncompleteResult(("{invalid json syntax",))
    ]
    assert buffer.add_line('{"valid": "json"}') == [
        TextResult("{invalid json syntax"),
        JsonResult({"valid": "json"}),
    ]
    assert len(buffer) == 0
    assert buffer.add_line("Normal text after draining") == [
        TextResult("Normal text after draining")
    ]
    assert len(buffer) == 0


def test_drain_mixed_content_with_valid_json():
    buffer = LineBuffer(10)
    assert buffer.add_line("{incomplete json") == [IncompleteResult(("{incomplete json",))]
    assert buffer.add_line('{"valid": "json"}') == [
        IncompleteResult(("{incomplete json", '{"valid": "json"}'))
    ]
    assert buffer.add_line("more text") == [
        IncompleteResult(("{incomplete json", '{"valid": "json"}', "more text"))
    ]
    assert buffer.drain() == [
        TextResult("{incomplete json"),
        JsonResult({"valid": "json"}),
        TextResult("more text"),
    ]
    assert len(buffer) == 0


def test_drain_only_invalid_content():
    buffer = LineBuffer(10)
    assert buffer.add_line("{invalid") == [IncompleteResult(("{invalid",))]
    assert buffer.add_line("[also invalid") == [
        IncompleteResult(("{invalid", "[also invalid"))
    ]
    assert buffer.drain() == [TextResult("{invalid"), TextResult("[also invalid")]
    assert len(buffer) == 0


def test_drain_valid_multiline_json():
    buffer = LineBuffer(10)
    honor = "{Worf's honor code"
    captain = '  "captain": "Sisko"'

    assert buffer.add_line(honor) == [IncompleteResult((honor,))]
    assert buffer.add_line("{") == [IncompleteResult((honor, "{"))]
    assert buffer.add_line(captain) == [IncompleteResult((honor, "{", captain))]
    assert buffer.add_line("}") == [IncompleteResult((honor, "{", captain, "}"))]
    assert buffer.drain() == [TextResult(honor), JsonResult({"captain": "Sisko"})]
    assert len(buffer) == 0


def test_drain_empty_buffer():
    buffer = LineBuffer(10)
    assert buffer.drain() == []
    assert len(buffer) == 0


def test_len_counts_buffered_lines():
    buffer = LineBuffer(10)
    buffer.add_line("{")
    buffer.add_line('"a": 1,')
    assert len(buffer) == 2
    buffer.add_line('"b": 2}')
    assert len(buffer) == 0


def test_object_key_order_preserved():
    buffer = LineBuffer(10)
    results = buffer.add_line('{"z": 1, "a": 2, "m": 3}')
    assert list(results[0].value) == ["z", "a", "m"]


def test_negative_max_lines_rejected():
    with pytest.raises(ValueError):
        LineBuffer(-1)


def test_zero_max_lines_releases_immediately():
    buffer = LineBuffer(0)
    assert buffer.add_line("{unfinished") == [TextResult("{unfinished")]
    assert len(buffer) == 0