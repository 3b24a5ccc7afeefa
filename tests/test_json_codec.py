"""
Unit tests for the callback_data JSON codec.
"""

import json
from unittest.mock import Mock

import pytest

from json_query.errors import JsonQueryError, PayloadTooLarge, SerializationError
from json_query.utils.json_codec import (
    ABSENT,
    CALLBACK_DATA_MAX_BYTES,
    encode_payload,
    payload_byte_length,
    safe_truncate_payload,
    strict_json_loads,
    try_parse_json,
)


class TestEncodePayload:
    """encode_payload output and limits."""

    def test_compact_output(self):
        assert encode_payload({"action": "test", "id": 1}) == '{"action":"test","id":1}'

    def test_insertion_order_kept(self):
        assert encode_payload({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_empty_object(self):
        assert encode_payload({}) == "{}"

    @pytest.mark.parametrize("value", [
        {"a": [1, 2, {"b": None}]},
        [1, "two", 3.5, True, None],
        "just a string",
        42,
        None,
    ])
    def test_parses_back_to_same_value(self, value):
        assert json.loads(encode_payload(value)) == value

    def test_exactly_64_bytes_allowed(self):
        value = "x" * (CALLBACK_DATA_MAX_BYTES - 2)  # two quote characters
        text = encode_payload(value)
        assert payload_byte_length(text) == CALLBACK_DATA_MAX_BYTES

    def test_65_bytes_rejected(self):
        value = "x" * (CALLBACK_DATA_MAX_BYTES - 1)
        with pytest.raises(PayloadTooLarge) as exc_info:
            encode_payload(value)
        err = exc_info.value
        assert err.byte_length == 65
        assert err.limit == 64
        assert err.payload == json.dumps(value)
        assert "65" in str(err)

    def test_limit_counts_utf8_bytes(self):
        # 21 Cyrillic letters = 42 bytes + 2 quotes fits; 32 letters does not
        assert encode_payload("я" * 21) == '"' + "я" * 21 + '"'
        with pytest.raises(PayloadTooLarge) as exc_info:
            encode_payload("я" * 32)
        assert exc_info.value.byte_length == 66

    def test_non_ascii_not_escaped(self):
        assert encode_payload({"t": "привет"}) == '{"t":"привет"}'

    def test_ensure_ascii_option(self):
        assert encode_payload({"t": "é"}, ensure_ascii=True) == '{"t":"\\u00e9"}'

    def test_custom_lower_limit(self):
        with pytest.raises(PayloadTooLarge):
            encode_payload({"a": 1}, max_bytes=5)

    def test_payload_too_large_is_value_error(self):
        with pytest.raises(ValueError):
            encode_payload("y" * 100)

    def test_cyclic_reference(self):
        data = {}
        data["self"] = data
        with pytest.raises(SerializationError) as exc_info:
            encode_payload(data)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unsupported_type(self):
        with pytest.raises(SerializationError) as exc_info:
            encode_payload({"s": {1, 2}})
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_nan_rejected(self):
        with pytest.raises(SerializationError):
            encode_payload(float("nan"))

    def test_errors_share_base_class(self):
        assert issubclass(PayloadTooLarge, JsonQueryError)
        assert issubclass(SerializationError, JsonQueryError)


class TestTryParseJson:
    """try_parse_json never raises."""

    def test_object(self):
        result = try_parse_json('{"action":"like","id":42}')
        assert result.ok is True
        assert result.value == {"action": "like", "id": 42}

    @pytest.mark.parametrize("text,expected", [
        ("[1,2,3]", [1, 2, 3]),
        ("42", 42),
        ('"str"', "str"),
        ("true", True),
        ("null", None),
    ])
    def test_any_json_value(self, text, expected):
        result = try_parse_json(text)
        assert result.ok is True
        assert result.value == expected

    @pytest.mark.parametrize("text", ["plain-text", "", "{", "{'a': 1}", "NaN", "Infinity"])
    def test_malformed_is_absent(self, text):
        assert try_parse_json(text) == ABSENT

    @pytest.mark.parametrize("value", [None, 42, b'{"a":1}', {"a": 1}])
    def test_non_string_is_absent_without_parsing(self, value):
        loads = Mock()
        assert try_parse_json(value, loads=loads) == ABSENT
        loads.assert_not_called()

    def test_single_argument_loads(self):
        result = try_parse_json('{"a":1}', loads=lambda text: json.loads(text))
        assert result == (True, {"a": 1})

    def test_custom_loads_errors_are_absent(self):
        assert try_parse_json("{", loads=lambda text: json.loads(text)) == ABSENT

    def test_strict_loads_rejects_nan(self):
        with pytest.raises(ValueError):
            strict_json_loads("[NaN]")

    def test_deep_nesting_is_absent(self):
        assert try_parse_json("[" * 100000 + "]" * 100000) == ABSENT


class TestSafeTruncatePayload:

    def test_short_unchanged(self):
        assert safe_truncate_payload("abc") == "abc"

    def test_long_truncated(self):
        out = safe_truncate_payload("a" * 50, max_length=10)
        assert out == "a" * 10 + "... (truncated)"
