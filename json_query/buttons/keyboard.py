"""
Inline keyboard builder with JSON callback buttons.

Example:
    keyboard = (
        InlineKeyboardBuilderWithJSON()
        .json("Like", {"action": "like", "id": 42})
        .json("Dislike", {"action": "dislike", "id": 42})
        .as_markup()
    )
"""

import logging
from typing import Any, Optional

from aiogram.types import InlineKeyboardButton
from aiogram.utils.keyboard import InlineKeyboardBuilder

from json_query.config import Settings, get_settings
from json_query.utils.json_codec import encode_payload

logger = logging.getLogger(__name__)

# Default payload marker; an explicit None is encoded as JSON null
_EMPTY: Any = object()


def json_button(text: str, data: Any = _EMPTY, settings: Optional[Settings] = None) -> InlineKeyboardButton:
    """
    Create an inline button whose callback_data is JSON-encoded data.

    Args:
        text: Button label, used verbatim
        data: JSON-representable value; an empty object when omitted
        settings: Encoder settings (global settings by default)

    Returns:
        InlineKeyboardButton with text and callback_data

    Raises:
        PayloadTooLarge: encoded data is longer than the callback_data limit
        SerializationError: data can not be encoded as JSON
    """
    settings = settings or get_settings()
    if data is _EMPTY:
        data = {}

    payload = encode_payload(
        data,
        max_bytes=settings.max_payload_bytes,
        ensure_ascii=settings.ensure_ascii,
    )
    return InlineKeyboardButton(text=text, callback_data=payload)


class InlineKeyboardBuilderWithJSON(InlineKeyboardBuilder):
    """InlineKeyboardBuilder with a chainable .json() method"""

    def __init__(self, markup=None, settings: Optional[Settings] = None):
        super().__init__(markup=markup)
        self._settings = settings
        self._row_break_pending = False

    @classmethod
    def button_json(cls, text: str, data: Any = _EMPTY, settings: Optional[Settings] = None) -> InlineKeyboardButton:
        """Single JSON button, without a builder."""
        return json_button(text, data, settings=settings)

    @classmethod
    def from_json(cls, text: str, data: Any = _EMPTY, settings: Optional[Settings] = None) -> "InlineKeyboardBuilderWithJSON":
        """New builder holding one JSON button."""
        return cls(settings=settings).json(text, data)

    def json(self, text: str, data: Any = _EMPTY) -> "InlineKeyboardBuilderWithJSON":
        """
        Add a JSON-encoded callback button to the current row.

        Args:
            text: Button label
            data: Data to be JSON-encoded as callback data

        Returns:
            self, for chaining
        """
        button = json_button(text, data, settings=self._settings)
        return self.add(button)

    def add(self, *buttons: InlineKeyboardButton) -> "InlineKeyboardBuilderWithJSON":
        if self._row_break_pending and buttons:
            self._row_break_pending = False
            super().row(*buttons)
            return self
        super().add(*buttons)
        return self

    def row(self, *buttons: InlineKeyboardButton, width: Optional[int] = None) -> "InlineKeyboardBuilderWithJSON":
        """
        Add buttons as a new row, or, called without buttons, make the next
        added button start a new row.
        """
        if not buttons:
            # Leading break on an empty keyboard is a no-op
            self._row_break_pending = bool(self.export())
            return self
        self._row_break_pending = False
        super().row(*buttons, width=width)
        return self

    def copy(self) -> "InlineKeyboardBuilderWithJSON":
        """Copy of the builder with the same settings and pending row break."""
        builder = self.__class__(markup=self.export(), settings=self._settings)
        builder._row_break_pending = self._row_break_pending
        return builder


# Compatibility alias: same class, no separate logic
InlineKeyboardWithJSON = InlineKeyboardBuilderWithJSON


__all__ = ["json_button", "InlineKeyboardBuilderWithJSON", "InlineKeyboardWithJSON"]
