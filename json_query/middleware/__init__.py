"""JSON query middleware package."""
from json_query.middleware.json_query_middleware import (
    JsonQuery,
    JsonQueryFlavor,
    JsonQueryMiddleware,
    get_callback_data,
    json_query,
    setup_json_query,
)

__all__ = [
    "JsonQuery",
    "JsonQueryFlavor",
    "JsonQueryMiddleware",
    "get_callback_data",
    "json_query",
    "setup_json_query",
]
