"""
Errors raised while building JSON callback buttons.

Decode-side problems are never raised: the middleware normalizes them to an
absent value.
"""

from typing import Optional


class JsonQueryError(Exception):
    """Base class for json_query errors"""


class PayloadTooLarge(JsonQueryError, ValueError):
    """Encoded callback_data does not fit into the Telegram limit"""

    def __init__(self, payload: str, byte_length: int, limit: int):
        self.payload = payload
        self.byte_length = byte_length
        self.limit = limit
        super().__init__(
            f"callback_data is too long: {byte_length} bytes > {limit} bytes "
            f"(payload={payload!r})"
        )


class SerializationError(JsonQueryError, TypeError):
    """Value can not be represented as JSON (cycles, NaN, foreign types)"""

    def __init__(self, message: str, value_type: Optional[str] = None):
        self.value_type = value_type
        super().__init__(message)


__all__ = ["JsonQueryError", "PayloadTooLarge", "SerializationError"]
