"""
Filter for callback queries carrying JSON objects.

    @router.callback_query(JsonQueryFilter(action="like"))
    async def on_like(callback: CallbackQuery, json_query: JsonQuery): ...
"""

import logging
from typing import Any, Mapping, Optional

from aiogram.filters import BaseFilter
from aiogram.types import TelegramObject

from json_query.config import Settings, get_settings
from json_query.middleware.json_query_middleware import JsonQuery

logger = logging.getLogger(__name__)


class JsonQueryFilter(BaseFilter):
    """
    Matches when the decoded payload is an object containing all expected items.

    Items come as keyword arguments or, for keys that clash with the
    constructor arguments or are not valid identifiers, as a mapping:
    JsonQueryFilter({"settings": 1, "page-no": 2}).
    """

    def __init__(
        self,
        expected: Optional[Mapping[str, Any]] = None,
        /,
        *,
        query_settings: Optional[Settings] = None,
        **items: Any,
    ):
        self.query_settings = query_settings
        self.expected = {**(expected or {}), **items}

    async def __call__(self, event: TelegramObject, **kwargs: Any) -> bool:
        settings = self.query_settings or get_settings()
        cell = kwargs.get(settings.data_key)
        if not isinstance(cell, JsonQuery):
            # Middleware not installed: decode here, result is not shared
            cell = JsonQuery.from_event(event, log_malformed=settings.log_malformed)

        value = cell.value
        if not isinstance(value, dict):
            return False

        missing = object()
        return all(value.get(key, missing) == expected for key, expected in self.expected.items())

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.expected.items())
        return f"JsonQueryFilter({{{items}}})"


__all__ = ["JsonQueryFilter"]
