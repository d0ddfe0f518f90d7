"""
monolog-factory: configuration-driven logger construction.

Builds ``logging.Logger`` instances whose handlers are described in a JSON
document. The document is discovered from, in order: an explicit filename,
the MONOLOG_CFG environment variable, the ``monolog.config`` process
option, and ``monolog.cfg`` on the include path.

Example document::

    {
        "handlers": [
            {"class": "StreamHandler", "parameters": {"level": "WARNING"}},
            {"class": "FileHandler", "parameters": {"filename": "logs/app.log"}, "formatter": "json"}
        ]
    }

This package provides focused components:
- config: Configuration discovery, parsing and models
- levels: Severity table and level-name translation
- handlers: Handler registry and built-in handler factories
- processors: Record processors attached as logger filters
- formatters: Line, JSON and Rich formatters
- builder: Logger assembly from a configuration document
- factory: Top-level entry points
"""

__version__ = "0.2.0"

from .builder import LoggerBuilder
from .config import (
    ConfigDocument,
    ConfigResolver,
    HandlerSpec,
    ProcessorSpec,
    runtime_options,
)
from .exceptions import (
    ConfigNotFoundError,
    ConfigurationError,
    ConfigValidationError,
    FileUnreadableError,
    HandlerConstructionError,
    JsonErrorKind,
    JsonParseError,
    MonologError,
    UnknownFormatterError,
    UnknownHandlerTypeError,
    UnknownProcessorTypeError,
)
from .factory import (
    LoggerFactory,
    default_factory,
    get_default_logger,
    get_logger,
    load_config_from_file,
)
from .handlers import HandlerRegistry, get_handler_registry, register_handler
from .levels import SEVERITY_TABLE, Severity, SeverityTable, convert_level

__all__ = [
    "__version__",
    # Entry points
    "LoggerFactory",
    "default_factory",
    "load_config_from_file",
    "get_logger",
    "get_default_logger",
    # Components
    "ConfigResolver",
    "LoggerBuilder",
    "HandlerRegistry",
    "get_handler_registry",
    "register_handler",
    # Models
    "ConfigDocument",
    "HandlerSpec",
    "ProcessorSpec",
    "runtime_options",
    # Levels
    "Severity",
    "SeverityTable",
    "SEVERITY_TABLE",
    "convert_level",
    # Exceptions
    "MonologError",
    "ConfigurationError",
    "FileUnreadableError",
    "JsonParseError",
    "JsonErrorKind",
    "ConfigValidationError",
    "ConfigNotFoundError",
    "UnknownHandlerTypeError",
    "HandlerConstructionError",
    "UnknownProcessorTypeError",
    "UnknownFormatterError",
]
