"""
Built-in handler factories.

Each factory takes its handler's parameters as keyword arguments, applies
the level, installs a default formatter and returns the handler.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from ..formatters import create_console_formatter, create_rich_formatter
from .registry import HandlerFactory

_STREAMS = ("stdout", "stderr")


def _finish(handler: logging.Handler, level: Union[int, str]) -> logging.Handler:
    handler.setLevel(level)
    if handler.formatter is None:
        handler.setFormatter(create_console_formatter())
    return handler


def _prepare_path(filename: Union[str, Path]) -> Path:
    if not filename:
        raise ValueError("filename is required")
    path = Path(filename).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def stream_handler(stream: str = "stderr", level: Union[int, str] = logging.NOTSET) -> logging.Handler:
    """Write records to stdout or stderr."""
    if stream not in _STREAMS:
        raise ValueError(f"stream must be one of {', '.join(_STREAMS)}, got {stream!r}")
    return _finish(logging.StreamHandler(getattr(sys, stream)), level)


def file_handler(
    filename: str,
    mode: str = "a",
    encoding: Optional[str] = "utf-8",
    delay: bool = False,
    level: Union[int, str] = logging.NOTSET,
) -> logging.Handler:
    return _finish(
        logging.FileHandler(_prepare_path(filename), mode=mode, encoding=encoding, delay=delay),
        level,
    )


def rotating_file_handler(
    filename: str,
    mode: str = "a",
    max_bytes: int = 0,
    backup_count: int = 0,
    encoding: Optional[str] = "utf-8",
    delay: bool = False,
    level: Union[int, str] = logging.NOTSET,
) -> logging.Handler:
    """Size-based rotation."""
    handler = logging.handlers.RotatingFileHandler(
        _prepare_path(filename),
        mode=mode,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding=encoding,
        delay=delay,
    )
    return _finish(handler, level)


def timed_rotating_file_handler(
    filename: str,
    when: str = "h",
    interval: int = 1,
    backup_count: int = 0,
    encoding: Optional[str] = "utf-8",
    delay: bool = False,
    utc: bool = False,
    level: Union[int, str] = logging.NOTSET,
) -> logging.Handler:
    """Time-based rotation."""
    handler = logging.handlers.TimedRotatingFileHandler(
        _prepare_path(filename),
        when=when,
        interval=interval,
        backupCount=backup_count,
        encoding=encoding,
        delay=delay,
        utc=utc,
    )
    return _finish(handler, level)


def watched_file_handler(
    filename: str,
    mode: str = "a",
    encoding: Optional[str] = "utf-8",
    delay: bool = False,
    level: Union[int, str] = logging.NOTSET,
) -> logging.Handler:
    handler = logging.handlers.WatchedFileHandler(
        _prepare_path(filename), mode=mode, encoding=encoding, delay=delay
    )
    return _finish(handler, level)


def syslog_handler(
    host: str = "localhost",
    port: int = logging.handlers.SYSLOG_UDP_PORT,
    address: Optional[str] = None,
    facility: str = "user",
    level: Union[int, str] = logging.NOTSET,
) -> logging.Handler:
    """Send records to syslog over UDP, or to a unix socket when ``address`` is set."""
    if not isinstance(facility, str):
        raise ValueError(f"Syslog facility must be a name, got {facility!r}")
    facility_code = logging.handlers.SysLogHandler.facility_names.get(facility.lower())
    if facility_code is None:
        raise ValueError(f"Unknown syslog facility {facility!r}")
    target = address if address else (host, int(port))
    return _finish(logging.handlers.SysLogHandler(address=target, facility=facility_code), level)


def null_handler(level: Union[int, str] = logging.NOTSET) -> logging.Handler:
    return _finish(logging.NullHandler(), level)


def rich_handler(
    level: Union[int, str] = logging.NOTSET,
    show_time: bool = True,
    show_level: bool = True,
    show_path: bool = True,
    markup: bool = False,
    rich_tracebacks: bool = True,
) -> logging.Handler:
    """Create a Rich handler for enhanced terminal output."""
    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        show_time=show_time,
        show_level=show_level,
        show_path=show_path,
        markup=markup,
        rich_tracebacks=rich_tracebacks,
    )
    handler.setFormatter(create_rich_formatter())
    return handler


BUILTIN_HANDLERS: Dict[str, HandlerFactory] = {
    "StreamHandler": stream_handler,
    "FileHandler": file_handler,
    "RotatingFileHandler": rotating_file_handler,
    "TimedRotatingFileHandler": timed_rotating_file_handler,
    "WatchedFileHandler": watched_file_handler,
    "SysLogHandler": syslog_handler,
    "NullHandler": null_handler,
    "RichHandler": rich_handler,
}
