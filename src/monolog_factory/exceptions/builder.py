"""
Logger construction exceptions.

Raised while turning a configuration document into handlers, processors
and formatters. None of these are recovered from: a bad entry aborts the
whole build.
"""

from typing import List, Optional

from .base import ExceptionContext, MonologError


class BuilderError(MonologError):
    """Base class for logger construction errors."""
    pass


class UnknownHandlerTypeError(BuilderError):
    """Raised when a handler class name is not registered."""

    def __init__(self, class_name: str, available: Optional[List[str]] = None):
        self.class_name = class_name
        self.available = available or []
        context = ExceptionContext(
            help_text=f"Known handler types: {', '.join(self.available) or 'none'}",
            error_code="UNKNOWN_HANDLER",
            context={"class": class_name},
        )
        super().__init__(f"Unknown handler type '{class_name}'", context)


class HandlerConstructionError(BuilderError):
    """Raised when a handler factory rejects its parameters."""

    def __init__(self, class_name: str, reason: str):
        self.class_name = class_name
        self.reason = reason
        context = ExceptionContext(
            help_text="Check the handler's 'parameters' names and values",
            error_code="HANDLER_CONSTRUCTION",
            context={"class": class_name},
            technical_details=reason,
        )
        super().__init__(f"Failed to construct handler '{class_name}': {reason}", context)


class UnknownProcessorTypeError(BuilderError):
    """Raised when a processor class name is not registered."""

    def __init__(self, class_name: str, available: Optional[List[str]] = None):
        self.class_name = class_name
        self.available = available or []
        context = ExceptionContext(
            help_text=f"Known processor types: {', '.join(self.available) or 'none'}",
            error_code="UNKNOWN_PROCESSOR",
            context={"class": class_name},
        )
        super().__init__(f"Unknown processor type '{class_name}'", context)


class UnknownFormatterError(BuilderError):
    """Raised when a handler names a formatter that does not exist."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = available or []
        context = ExceptionContext(
            help_text=f"Known formatters: {', '.join(self.available) or 'none'}",
            error_code="UNKNOWN_FORMATTER",
            context={"formatter": name},
        )
        super().__init__(f"Unknown formatter '{name}'", context)
