"""
Top-level entry points.

``LoggerFactory`` composes a ConfigResolver and a LoggerBuilder. The
module-level functions are bound to a default factory instance, so most
callers only need::

    from monolog_factory import get_default_logger

    log = get_default_logger("app")
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .builder import ConfigInput, LoggerBuilder
from .config.models import ConfigDocument
from .config.resolver import ConfigResolver
from .constants import DEFAULT_LOGGER_NAME


class LoggerFactory:
    """Provides loggers configured from a JSON document."""

    def __init__(
        self,
        resolver: Optional[ConfigResolver] = None,
        builder: Optional[LoggerBuilder] = None,
        config: Optional[ConfigInput] = None,
    ):
        """Initialize the factory.

        Args:
            resolver: Configuration resolver. If None, uses a default resolver.
            builder: Logger builder. If None, uses the global handler registry.
            config: Configuration used by ``get_default_logger`` instead of
                resolving one from disk.
        """
        self.resolver = resolver or ConfigResolver()
        self.builder = builder or LoggerBuilder()
        self.config = config

    def load_config_from_file(self, filename: Optional[Union[str, Path]] = None) -> ConfigDocument:
        """Resolve the configuration; see ConfigResolver.resolve."""
        return self.resolver.resolve(filename)

    def get_logger(self, name: str, config: Optional[ConfigInput] = None) -> logging.Logger:
        """Build a logger named ``name`` from ``config``."""
        return self.builder.build(name, config)

    def get_default_logger(self, name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
        """Build a logger from the constructor config, or from the resolved file."""
        config = self.config if self.config is not None else self.load_config_from_file()
        return self.get_logger(name, config)


# Global factory instance
default_factory = LoggerFactory()


def load_config_from_file(filename: Optional[Union[str, Path]] = None) -> ConfigDocument:
    return default_factory.load_config_from_file(filename)


def get_logger(name: str, config: Optional[ConfigInput] = None) -> logging.Logger:
    return default_factory.get_logger(name, config)


def get_default_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    return default_factory.get_default_logger(name)
