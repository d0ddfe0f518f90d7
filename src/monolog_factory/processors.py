"""
Record processors.

A processor is a ``logging.Filter`` attached to the logger that stamps
extra attributes on every record before handlers see it. Processors never
drop records.
"""

import logging
import os
import socket
from typing import Any, Callable, Dict, List, Mapping, Optional
from uuid import uuid4

from .constants import DEFAULT_UID_LENGTH, MAX_UID_LENGTH
from .exceptions.builder import HandlerConstructionError, UnknownProcessorTypeError


class UidProcessor(logging.Filter):
    """Adds a per-logger unique id as ``record.uid``."""

    def __init__(self, length: int = DEFAULT_UID_LENGTH):
        super().__init__()
        if isinstance(length, bool) or not isinstance(length, int) or not 0 < length <= MAX_UID_LENGTH:
            raise ValueError(f"length must be an integer between 1 and {MAX_UID_LENGTH}")
        self.uid = uuid4().hex[:length]

    def filter(self, record: logging.LogRecord) -> bool:
        record.uid = self.uid
        return True


class ProcessIdProcessor(logging.Filter):
    """Adds the current process id as ``record.process_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.process_id = os.getpid()
        return True


class HostnameProcessor(logging.Filter):
    """Adds the host name as ``record.hostname``."""

    def __init__(self):
        super().__init__()
        self.hostname = socket.gethostname()

    def filter(self, record: logging.LogRecord) -> bool:
        record.hostname = self.hostname
        return True


class ContextProcessor(logging.Filter):
    """Stamps fixed key/value pairs onto every record."""

    def __init__(self, extra: Optional[Mapping[str, Any]] = None):
        super().__init__()
        self.extra = dict(extra or {})

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra.items():
            setattr(record, key, value)
        return True


ProcessorFactory = Callable[..., logging.Filter]

PROCESSORS: Dict[str, ProcessorFactory] = {
    "UidProcessor": UidProcessor,
    "ProcessIdProcessor": ProcessIdProcessor,
    "HostnameProcessor": HostnameProcessor,
    "ContextProcessor": ContextProcessor,
}


def available_processors() -> List[str]:
    return sorted(PROCESSORS)


def create_processor(name: str, parameters: Optional[Mapping[str, Any]] = None) -> logging.Filter:
    """
    Instantiate a processor by class name.

    Raises:
        UnknownProcessorTypeError: If ``name`` is not a known processor
        HandlerConstructionError: If the processor rejects its parameters
    """
    factory = PROCESSORS.get(name)
    if factory is None:
        raise UnknownProcessorTypeError(name, available_processors())
    try:
        return factory(**(parameters or {}))
    except (TypeError, ValueError) as e:
        raise HandlerConstructionError(name, str(e)) from e
