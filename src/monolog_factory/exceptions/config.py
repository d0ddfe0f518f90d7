"""
Configuration-related exceptions.

All exceptions raised while locating, reading, parsing and validating a
logging configuration document.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from .base import ExceptionContext, MonologError


class JsonErrorKind(str, Enum):
    """Diagnostic classification of a JSON decoding failure."""

    DEPTH = "depth"
    STATE_MISMATCH = "state_mismatch"
    CONTROL_CHAR = "control_char"
    SYNTAX = "syntax"
    ENCODING = "encoding"
    UNKNOWN = "unknown"

    @property
    def description(self) -> str:
        return _KIND_DESCRIPTIONS[self]


_KIND_DESCRIPTIONS = {
    JsonErrorKind.DEPTH: "Max depth reached",
    JsonErrorKind.STATE_MISMATCH: "Underflow or the modes mismatch",
    JsonErrorKind.CONTROL_CHAR: "Unexpected control character found",
    JsonErrorKind.SYNTAX: "Syntax error, malformed JSON",
    JsonErrorKind.ENCODING: "Malformed UTF-8 characters, possibly incorrectly encoded",
    JsonErrorKind.UNKNOWN: "Unknown error",
}


class ConfigurationError(MonologError):
    """Base class for configuration-related errors."""
    pass


class FileUnreadableError(ConfigurationError):
    """Raised when a located configuration file cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        context = ExceptionContext(
            help_text="Check that the file exists and that its permissions allow reading",
            error_code="CONFIG_UNREADABLE",
            context={"path": str(path)},
            technical_details=reason,
        )
        super().__init__(f"Unable to read configuration file {path}: {reason}", context)


class JsonParseError(ConfigurationError):
    """Raised when a configuration file is not a usable JSON document."""

    def __init__(
        self,
        path: Union[str, Path],
        kind: JsonErrorKind,
        details: Optional[str] = None,
    ):
        self.path = Path(path)
        self.kind = kind
        self.details = details
        message = f"Unable to parse configuration {path}. JSON Error: {kind.description}"
        if details:
            message += f" ({details})"
        context = ExceptionContext(
            help_text="Fix the JSON document; it must be an object with a 'handlers' array",
            error_code="CONFIG_JSON",
            context={"path": str(path), "kind": kind.value},
            technical_details=details,
        )
        super().__init__(message, context)


class ConfigValidationError(ConfigurationError):
    """Raised when a configuration document fails schema validation."""

    def __init__(self, errors: List[str], path: Optional[Union[str, Path]] = None):
        self.errors = errors
        self.path = Path(path) if path is not None else None
        message = "Configuration validation failed"
        if path is not None:
            message += f" for {path}"
        message += ":"
        for error in errors:
            message += f"\n  - {error}"
        context = ExceptionContext(
            help_text="Each handler entry needs a 'class' string and an optional 'parameters' object",
            error_code="CONFIG_VALIDATION",
            context={"path": str(path) if path is not None else None},
        )
        super().__init__(message, context)


class ConfigNotFoundError(ConfigurationError):
    """Raised when no configuration candidate yields a valid document."""

    def __init__(
        self,
        last_error: Optional[ConfigurationError] = None,
        candidates: Optional[List[str]] = None,
    ):
        self.last_error = last_error
        self.candidates = candidates or []
        if last_error is not None:
            message = f"Unable to load configuration: {last_error.message}"
        else:
            message = "Unable to load configuration: no configuration candidate found"
        context = ExceptionContext(
            help_text=(
                "Pass a filename, set MONOLOG_CFG, set the 'monolog.config' option "
                "or place monolog.cfg on the include path"
            ),
            error_code="CONFIG_NOT_FOUND",
            context={"candidates": ", ".join(self.candidates) or None},
        )
        super().__init__(message, context)
