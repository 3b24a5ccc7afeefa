"""
JSON codec for Telegram callback_data.
Encoding validates the Bot API size limit; decoding never throws.
"""

import json
import logging
from typing import Any, Callable, NamedTuple

from json_query.errors import PayloadTooLarge, SerializationError

logger = logging.getLogger(__name__)

# Telegram Bot API: callback_data must be 1-64 bytes
CALLBACK_DATA_MAX_BYTES = 64

# No spaces after separators
COMPACT_SEPARATORS = (",", ":")


class ParseResult(NamedTuple):
    """Outcome of try_parse_json: ok=False means "nothing usable here"."""
    ok: bool
    value: Any = None


ABSENT = ParseResult(False, None)


def _reject_constant(name: str) -> Any:
    # NaN / Infinity / -Infinity are not part of the JSON data model
    raise ValueError(f"Non-standard JSON constant: {name}")


def payload_byte_length(text: str) -> int:
    """UTF-8 length of encoded callback_data."""
    return len(text.encode("utf-8"))


def encode_payload(
    data: Any,
    max_bytes: int = CALLBACK_DATA_MAX_BYTES,
    ensure_ascii: bool = False,
) -> str:
    """
    Serialize data to compact JSON suitable for callback_data.

    Args:
        data: Any JSON-representable value
        max_bytes: Upper bound for the UTF-8 length of the result
        ensure_ascii: Escape non-ASCII characters (makes payloads longer)

    Returns:
        Encoded JSON text

    Raises:
        SerializationError: value is cyclic, non-finite or not JSON-serializable
        PayloadTooLarge: encoded text does not fit into max_bytes
    """
    try:
        text = json.dumps(
            data,
            separators=COMPACT_SEPARATORS,
            ensure_ascii=ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            f"Can not encode {type(data).__name__} as JSON: {e}",
            value_type=type(data).__name__,
        ) from e

    byte_length = payload_byte_length(text)
    if byte_length > max_bytes:
        logger.warning(
            "callback_data too long: %d bytes > %d (%s)",
            byte_length, max_bytes, safe_truncate_payload(text, 100),
        )
        raise PayloadTooLarge(text, byte_length, max_bytes)

    return text


def strict_json_loads(text: str) -> Any:
    """json.loads that refuses NaN / Infinity literals."""
    return json.loads(text, parse_constant=_reject_constant)


def try_parse_json(text: Any, loads: Callable[[str], Any] = strict_json_loads) -> ParseResult:
    """
    Parse JSON text without raising.

    Non-string input and malformed JSON both give ABSENT. Any JSON value is
    accepted on success, primitives included. `loads` is called with the
    text only.

    NEVER raises exceptions for bad input.
    """
    if not isinstance(text, str):
        return ABSENT

    try:
        return ParseResult(True, loads(text))
    except (ValueError, RecursionError):
        return ABSENT


def safe_truncate_payload(payload: str, max_length: int = 500) -> str:
    """Shorten a payload for logging."""
    if len(payload) > max_length:
        return payload[:max_length] + "... (truncated)"
    return payload
