"""Tests for parsing the input buffer."""

import pytest

from mixedunits.exceptions import MalformedInputError
from mixedunits.parsing.json_input import OversizedInteger, parse_input


class TestParseInput:
    def test_parses_object(self):
        data = parse_input('{"a": "0.5", "b": 0.25, "c": 300}')
        assert data == {"a": "0.5", "b": 0.25, "c": 300}

    def test_preserves_key_order(self):
        data = parse_input('{"z": 1, "a": 2, "m": 3}')
        assert list(data) == ["z", "a", "m"]

    def test_duplicate_key_keeps_first_position_last_value(self):
        data = parse_input('{"a": 1, "b": 2, "a": 3}')
        assert list(data.items()) == [("a", 3), ("b", 2)]

    def test_empty_object(self):
        assert parse_input("{}") == {}

    def test_surrounding_whitespace(self):
        assert parse_input('\n  {"a": 1}  \n') == {"a": 1}

    def test_accepts_bytes(self):
        assert parse_input(b'{"a": 1}') == {"a": 1}

    def test_invalid_utf8_bytes(self):
        with pytest.raises(MalformedInputError):
            parse_input(b'{"a": "\xff"}')

    def test_integer_literal_too_long_kept_per_entry(self):
        data = parse_input('{"a": ' + "9" * 5000 + ', "b": 2}')
        assert isinstance(data["a"], OversizedInteger)
        assert len(data["a"].literal) == 5000
        assert data["b"] == 2

    @pytest.mark.parametrize(
        "text",
        [
            '{"a": 1,}',
            '{"a": 1',
            "",
            "not json",
            "{'a': 1}",
        ],
    )
    def test_malformed_raises(self, text):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_input(text)
        assert str(exc_info.value) == "Invalid JSON"
        assert exc_info.value.detail

    @pytest.mark.parametrize("text", ['{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(MalformedInputError):
            parse_input(text)

    @pytest.mark.parametrize("text", ["[1, 2]", "5", '"text"', "null", "true"])
    def test_non_object_top_level_rejected(self, text):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_input(text)
        assert "Expected a JSON object" in exc_info.value.detail
