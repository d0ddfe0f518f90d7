"""
Logger assembly.

Turns a ConfigDocument into a fresh ``logging.Logger`` whose handlers and
processors are attached in document order. Construction is all or
nothing: every entry is built before anything is attached, and handlers
already built are closed when a later entry fails.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from .config.models import ConfigDocument, HandlerSpec
from .config.resolver import format_validation_errors
from .exceptions.config import ConfigValidationError
from .formatters import create_formatter
from .handlers.registry import HandlerRegistry, get_handler_registry
from .levels import SEVERITY_TABLE, SeverityTable
from .processors import create_processor

logger = logging.getLogger(__name__)

ConfigInput = Union[ConfigDocument, Mapping[str, Any]]


class LoggerBuilder:
    """Builds loggers from configuration documents."""

    def __init__(
        self,
        registry: Optional[HandlerRegistry] = None,
        severity_table: SeverityTable = SEVERITY_TABLE,
    ):
        self.registry = registry if registry is not None else get_handler_registry()
        self.severity_table = severity_table

    def convert_level(self, level: Any) -> int:
        return self.severity_table.convert_level(level)

    def _coerce(self, config: ConfigInput) -> ConfigDocument:
        if isinstance(config, ConfigDocument):
            return config
        try:
            return ConfigDocument.model_validate(config)
        except ValidationError as e:
            raise ConfigValidationError(format_validation_errors(e))

    def _parameters(self, spec: HandlerSpec) -> Optional[Dict[str, Any]]:
        if spec.parameters is None:
            return None
        parameters = dict(spec.parameters)
        if "level" in parameters:
            parameters["level"] = self.convert_level(parameters["level"])
        return parameters

    def build_handler(self, spec: HandlerSpec, channel: str) -> logging.Handler:
        """Construct one handler, applying level translation and formatter."""
        handler = self.registry.create(spec.class_name, self._parameters(spec))
        if spec.formatter:
            try:
                handler.setFormatter(create_formatter(spec.formatter, channel))
            except Exception:
                handler.close()
                raise
        return handler

    def build(self, name: str, config: Optional[ConfigInput] = None) -> logging.Logger:
        """
        Build a logger.

        Args:
            name: Logger name (channel)
            config: ConfigDocument or raw mapping; None for a bare logger

        Returns:
            New logger with handlers and processors attached in order

        Raises:
            ConfigValidationError: If a raw mapping is not a valid document
            UnknownHandlerTypeError: If a handler class is not registered
            HandlerConstructionError: If a handler rejects its parameters
            UnknownProcessorTypeError: If a processor class is not registered
            UnknownFormatterError: If a handler names an unknown formatter
        """
        new_logger = logging.Logger(name)
        if config is None:
            return new_logger

        document = self._coerce(config)

        handlers: List[logging.Handler] = []
        try:
            for spec in document.handlers:
                handlers.append(self.build_handler(spec, name))
            processors = [
                create_processor(spec.class_name, spec.parameters)
                for spec in document.processors
            ]
        except Exception:
            for handler in handlers:
                handler.close()
            raise

        for processor in processors:
            new_logger.addFilter(processor)
        for handler in handlers:
            new_logger.addHandler(handler)
            logger.debug(
                f"Attached {type(handler).__name__} to '{name}' "
                f"at level {logging.getLevelName(handler.level)}"
            )

        return new_logger
