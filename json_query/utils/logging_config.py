"""
Logging configuration for bots using json_query
Single format, levels, truncation of oversized callback payloads in log lines
"""

import logging
import sys

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Telegram updates can carry long texts; keep log lines readable
MAX_MESSAGE_LENGTH = 1000


def setup_logging(level: int = logging.INFO, max_message_length: int = MAX_MESSAGE_LENGTH) -> None:
    """
    Configure root logging

    Args:
        level: Logging level
        max_message_length: Messages longer than this are truncated
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(PayloadTruncatingFormatter(DEFAULT_FORMAT, max_message_length=max_message_length))
    root_logger.addHandler(console_handler)

    # Levels for external libraries
    logging.getLogger('aiogram').setLevel(logging.WARNING)
    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)


class PayloadTruncatingFormatter(logging.Formatter):
    """Formatter that shortens oversized messages"""

    def __init__(self, fmt: str = DEFAULT_FORMAT, datefmt=None, max_message_length: int = MAX_MESSAGE_LENGTH):
        super().__init__(fmt, datefmt)
        self.max_message_length = max_message_length

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if len(message) <= self.max_message_length:
            return super().format(record)

        # Copy the record so other handlers still see the full message
        record_copy = logging.makeLogRecord(record.__dict__)
        record_copy.msg = message[:self.max_message_length] + "... (truncated)"
        record_copy.args = ()

        return super().format(record_copy)
