"""Shared helpers: JSON codec and logging setup."""

from json_query.utils.logging_config import PayloadTruncatingFormatter, setup_logging

__all__ = ["PayloadTruncatingFormatter", "setup_logging"]
