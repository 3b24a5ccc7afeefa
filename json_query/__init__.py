"""
json_query - JSON callback buttons and callback data parsing for aiogram
"""

from json_query.buttons import InlineKeyboardBuilderWithJSON, InlineKeyboardWithJSON, json_button
from json_query.config import Settings, get_settings, reset_settings
from json_query.errors import JsonQueryError, PayloadTooLarge, SerializationError
from json_query.filters import JsonQueryFilter
from json_query.middleware import (
    JsonQuery,
    JsonQueryFlavor,
    JsonQueryMiddleware,
    get_callback_data,
    json_query,
    setup_json_query,
)
from json_query.utils.json_codec import CALLBACK_DATA_MAX_BYTES, encode_payload, try_parse_json
from json_query.utils.logging_config import PayloadTruncatingFormatter, setup_logging

__version__ = "0.1.0"

__all__ = [
    "CALLBACK_DATA_MAX_BYTES",
    "InlineKeyboardBuilderWithJSON",
    "InlineKeyboardWithJSON",
    "JsonQuery",
    "JsonQueryError",
    "JsonQueryFilter",
    "JsonQueryFlavor",
    "JsonQueryMiddleware",
    "PayloadTruncatingFormatter",
    "PayloadTooLarge",
    "SerializationError",
    "Settings",
    "encode_payload",
    "get_callback_data",
    "get_settings",
    "json_button",
    "json_query",
    "reset_settings",
    "setup_json_query",
    "setup_logging",
    "try_parse_json",
]
