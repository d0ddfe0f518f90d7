"""
Log formatters selectable per handler.

Provides structured JSON formatting, console formatting and the bare
message format used with Rich terminal output.
"""

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Callable, Dict, List

from .constants import CONSOLE_DATE_FORMAT, CONSOLE_LOG_FORMAT
from .exceptions.builder import UnknownFormatterError

# Attributes every LogRecord carries; anything else was stamped by a processor
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, channel: str = "monolog"):
        super().__init__()
        self.channel = channel

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "level_value": record.levelno,
            "message": record.getMessage(),
            "channel": self.channel,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Processor output and caller-supplied extra fields
        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        }
        if extra:
            log_entry["extra"] = extra

        if record.exc_info:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info),
            }

        return json.dumps(log_entry, default=str)


def create_console_formatter(channel: str = "monolog") -> logging.Formatter:
    """Create a console formatter for human-readable output."""
    return logging.Formatter(CONSOLE_LOG_FORMAT, datefmt=CONSOLE_DATE_FORMAT)


def create_structured_formatter(channel: str = "monolog") -> StructuredFormatter:
    """Create a structured JSON formatter."""
    return StructuredFormatter(channel)


def create_rich_formatter(channel: str = "monolog") -> logging.Formatter:
    """Rich renders time, level and path itself; only the message is formatted."""
    return logging.Formatter("%(message)s")


FormatterFactory = Callable[[str], logging.Formatter]

FORMATTERS: Dict[str, FormatterFactory] = {
    "line": create_console_formatter,
    "json": create_structured_formatter,
    "rich": create_rich_formatter,
}


def available_formatters() -> List[str]:
    return sorted(FORMATTERS)


def create_formatter(name: str, channel: str) -> logging.Formatter:
    """
    Build a named formatter for a logger channel.

    Raises:
        UnknownFormatterError: If ``name`` is not a known formatter
    """
    factory = FORMATTERS.get(name.strip().lower())
    if factory is None:
        raise UnknownFormatterError(name, available_formatters())
    return factory(channel)
