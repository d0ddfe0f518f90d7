"""
monolog-factory Exception Hierarchy

Exception Hierarchy:
    MonologError (base)
    ├── ConfigurationError
    │   ├── FileUnreadableError
    │   ├── JsonParseError
    │   ├── ConfigValidationError
    │   └── ConfigNotFoundError
    └── BuilderError
        ├── UnknownHandlerTypeError
        ├── HandlerConstructionError
        ├── UnknownProcessorTypeError
        └── UnknownFormatterError

This package provides focused exception components:
- base: Core MonologError base class
- config: Configuration discovery and parsing exceptions
- builder: Handler, processor and formatter construction exceptions
"""

from .base import ExceptionContext, MonologError

# Builder exceptions
from .builder import (
    BuilderError,
    HandlerConstructionError,
    UnknownFormatterError,
    UnknownHandlerTypeError,
    UnknownProcessorTypeError,
)

# Configuration exceptions
from .config import (
    ConfigNotFoundError,
    ConfigurationError,
    ConfigValidationError,
    FileUnreadableError,
    JsonErrorKind,
    JsonParseError,
)

__all__ = [
    # Base
    "MonologError",
    "ExceptionContext",
    # Configuration
    "ConfigurationError",
    "FileUnreadableError",
    "JsonParseError",
    "JsonErrorKind",
    "ConfigValidationError",
    "ConfigNotFoundError",
    # Builder
    "BuilderError",
    "UnknownHandlerTypeError",
    "HandlerConstructionError",
    "UnknownProcessorTypeError",
    "UnknownFormatterError",
]
