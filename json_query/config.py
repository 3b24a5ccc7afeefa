"""
Library configuration - Settings class and get_settings function
Settings are built from keyword arguments; nothing is read from the environment
"""

import logging
from typing import Optional

from json_query.utils.json_codec import CALLBACK_DATA_MAX_BYTES

logger = logging.getLogger(__name__)

# Global settings instance (singleton)
_settings: Optional['Settings'] = None

__all__ = ['Settings', 'get_settings', 'reset_settings', 'DEFAULT_DATA_KEY']

DEFAULT_DATA_KEY = "json_query"


class Settings:
    """Settings shared by the button encoder and the json_query middleware"""

    def __init__(
        self,
        data_key: str = DEFAULT_DATA_KEY,
        max_payload_bytes: int = CALLBACK_DATA_MAX_BYTES,
        ensure_ascii: bool = False,
        log_malformed: bool = True,
        validate: bool = True,
    ):
        # Key under which handlers receive the decoded payload cell
        self.data_key = data_key

        # Telegram accepts at most 64 bytes; a lower limit is allowed
        self.max_payload_bytes = max_payload_bytes

        # Non-ASCII characters stay unescaped, payloads stay short
        self.ensure_ascii = ensure_ascii

        # DEBUG log line for callback data that is not valid JSON
        self.log_malformed = log_malformed

        if validate:
            self.validate()

    def validate(self):
        """Validate settings values"""
        errors = []

        if not isinstance(self.data_key, str) or not self.data_key.isidentifier():
            errors.append(f"data_key must be a valid identifier, got {self.data_key!r}")

        if isinstance(self.max_payload_bytes, bool) or not isinstance(self.max_payload_bytes, int):
            errors.append(f"max_payload_bytes must be int, got {type(self.max_payload_bytes).__name__}")
        elif not 1 <= self.max_payload_bytes <= CALLBACK_DATA_MAX_BYTES:
            errors.append(
                f"max_payload_bytes must be between 1 and {CALLBACK_DATA_MAX_BYTES}, "
                f"got {self.max_payload_bytes}"
            )

        if errors:
            error_msg = "\n".join(f"  - {err}" for err in errors)
            logger.error("json_query configuration validation failed:\n%s", error_msg)
            raise ValueError(f"Configuration validation failed:\n{error_msg}")

    def __repr__(self) -> str:
        return (
            f"Settings(data_key={self.data_key!r}, max_payload_bytes={self.max_payload_bytes}, "
            f"ensure_ascii={self.ensure_ascii}, log_malformed={self.log_malformed})"
        )


def get_settings() -> Settings:
    """
    Return the global Settings instance (singleton)

    Returns:
        Settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings():
    """Reset the global settings instance (for tests)"""
    global _settings
    _settings = None
