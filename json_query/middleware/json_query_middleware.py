"""
JSON query middleware for aiogram - exposes callback data parsed as JSON.

The middleware puts a JsonQuery cell into handler data. Parsing happens on
first access only and the result is cached for the lifetime of the update.

Example:
    dp.callback_query.outer_middleware(json_query())

    @router.callback_query()
    async def on_button(callback: CallbackQuery, json_query: JsonQuery):
        if json_query.get("action") == "like":
            ...
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Optional, TypedDict

from aiogram import BaseMiddleware

if TYPE_CHECKING:
    # Type hints only - not evaluated at runtime
    from aiogram.types import TelegramObject, Update, CallbackQuery
else:
    # Runtime imports for isinstance checks
    from aiogram.types import TelegramObject, Update, CallbackQuery

from json_query.config import Settings, get_settings
from json_query.utils.json_codec import (
    ABSENT,
    ParseResult,
    safe_truncate_payload,
    strict_json_loads,
    try_parse_json,
)

logger = logging.getLogger(__name__)


def get_callback_data(event: "TelegramObject") -> Optional[str]:
    """
    Extract raw callback_data from event.

    Args:
        event: Telegram event (Update, CallbackQuery, anything else)

    Returns:
        callback_data if it is a string, None otherwise
    """
    if isinstance(event, Update):
        event = event.callback_query
    if isinstance(event, CallbackQuery):
        data = event.data
        return data if isinstance(data, str) else None
    return None


class JsonQuery:
    """
    Lazily decoded callback data of a single update.

    `value` is the parsed JSON (or None), `present` tells a decoded JSON null
    apart from missing or malformed data.
    """

    __slots__ = ("_raw", "_loads", "_log_malformed", "_result")

    def __init__(
        self,
        raw: Optional[str],
        loads: Callable[[str], Any] = strict_json_loads,
        log_malformed: bool = True,
    ):
        self._raw = raw
        self._loads = loads
        self._log_malformed = log_malformed
        self._result: Optional[ParseResult] = None

    @classmethod
    def from_event(cls, event: "TelegramObject", **kwargs: Any) -> "JsonQuery":
        return cls(get_callback_data(event), **kwargs)

    @property
    def raw(self) -> Optional[str]:
        return self._raw

    @property
    def evaluated(self) -> bool:
        return self._result is not None

    def _evaluate(self) -> ParseResult:
        if self._result is None:
            if self._raw is None:
                self._result = ABSENT
            else:
                self._result = try_parse_json(self._raw, loads=self._loads)
                if not self._result.ok and self._log_malformed:
                    logger.debug(
                        "[JSON_QUERY] callback_data is not valid JSON: %s",
                        safe_truncate_payload(self._raw, 100),
                    )
        return self._result

    @property
    def value(self) -> Any:
        return self._evaluate().value

    @property
    def present(self) -> bool:
        return self._evaluate().ok

    def get(self, key: str, default: Any = None) -> Any:
        """Field of an object payload; default for absent or non-object payloads."""
        value = self.value
        if isinstance(value, dict):
            return value.get(key, default)
        return default

    def __bool__(self) -> bool:
        return self.present

    def __repr__(self) -> str:
        if self._result is None:
            return f"JsonQuery(raw={self._raw!r}, <not evaluated>)"
        return f"JsonQuery(raw={self._raw!r}, present={self._result.ok}, value={self._result.value!r})"


class JsonQueryFlavor(TypedDict):
    """Handler data added by JsonQueryMiddleware (static typing only)."""
    json_query: JsonQuery


class JsonQueryMiddleware(BaseMiddleware):
    """
    Middleware that installs a lazy JsonQuery cell into handler data.

    Always calls the next handler exactly once; installing the cell never
    fails the update.
    """

    def __init__(self, settings: Optional[Settings] = None, loads: Callable[[str], Any] = strict_json_loads):
        self.settings = settings or get_settings()
        self.loads = loads
        super().__init__()

    async def __call__(
        self,
        handler: Callable[["TelegramObject", Dict[str, Any]], Awaitable[Any]],
        event: "TelegramObject",
        data: Dict[str, Any],
    ) -> Any:
        key = self.settings.data_key
        # Registered on both update and callback_query observers: keep the first cell
        if not isinstance(data.get(key), JsonQuery):
            data[key] = JsonQuery.from_event(
                event,
                loads=self.loads,
                log_malformed=self.settings.log_malformed,
            )

        return await handler(event, data)


def json_query(settings: Optional[Settings] = None, loads: Callable[[str], Any] = strict_json_loads) -> JsonQueryMiddleware:
    """
    Create middleware that parses callback data as JSON.

    Args:
        settings: Middleware settings (global settings by default)
        loads: JSON parser taking the text only, strict json.loads by default

    Returns:
        JsonQueryMiddleware instance, to be registered once
    """
    return JsonQueryMiddleware(settings=settings, loads=loads)


def setup_json_query(
    router: Any,
    settings: Optional[Settings] = None,
    *,
    observer: str = "callback_query",
) -> JsonQueryMiddleware:
    """
    Register json_query as outer middleware on a Router or Dispatcher.

    Args:
        router: aiogram Router / Dispatcher
        settings: Middleware settings
        observer: Event observer name ("callback_query" or "update")

    Returns:
        Registered middleware
    """
    event_observer = getattr(router, observer, None)
    if event_observer is None or not hasattr(event_observer, "outer_middleware"):
        raise ValueError(f"Router has no event observer {observer!r}")

    middleware = json_query(settings=settings)
    event_observer.outer_middleware(middleware)
    logger.info("[JSON_QUERY] middleware registered on %s.%s", type(router).__name__, observer)
    return middleware


__all__ = [
    "JsonQuery",
    "JsonQueryFlavor",
    "JsonQueryMiddleware",
    "get_callback_data",
    "json_query",
    "setup_json_query",
]
