"""
Handler type registry.

Maps handler class names used in configuration files to factories that
know how to unpack a parameter bag into one concrete ``logging.Handler``.
The registry is closed: only explicitly registered names can be built.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..exceptions.builder import HandlerConstructionError, UnknownHandlerTypeError

logger = logging.getLogger(__name__)

HandlerFactory = Callable[..., logging.Handler]


class HandlerRegistry:
    """
    Registry of constructible handler types.

    Handles registration, lookup and instantiation of handlers by the
    class name a configuration file uses.
    """

    def __init__(self, factories: Optional[Mapping[str, HandlerFactory]] = None):
        self._factories: Dict[str, HandlerFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: HandlerFactory):
        """
        Register a handler factory.

        Args:
            name: Class name used in configuration files
            factory: Callable accepting the handler's parameters as keywords

        Raises:
            ValueError: If the name is blank or the factory is not callable
        """
        if not name or not name.strip():
            raise ValueError("Handler name must not be blank")
        if not callable(factory):
            raise ValueError(f"Handler factory for '{name}' must be callable")

        if name in self._factories:
            logger.warning(f"Replacing existing handler factory '{name}'")
        self._factories[name] = factory
        logger.debug(f"Registered handler type '{name}'")

    def unregister(self, name: str):
        if name in self._factories:
            del self._factories[name]
            logger.debug(f"Unregistered handler type '{name}'")

    def get_factory(self, name: str) -> HandlerFactory:
        """
        Get the factory for a handler class name.

        Raises:
            UnknownHandlerTypeError: If no factory is registered under ``name``
        """
        try:
            return self._factories[name]
        except KeyError:
            raise UnknownHandlerTypeError(name, self.list_handlers())

    def list_handlers(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def create(self, name: str, parameters: Optional[Mapping[str, Any]] = None) -> logging.Handler:
        """
        Instantiate a handler.

        Args:
            name: Registered handler class name
            parameters: Keyword arguments for the factory, or None for none

        Returns:
            The constructed handler

        Raises:
            UnknownHandlerTypeError: If the name is not registered
            HandlerConstructionError: If the factory rejects the parameters
        """
        factory = self.get_factory(name)
        try:
            if parameters is None:
                return factory()
            return factory(**parameters)
        except (TypeError, ValueError, OSError) as e:
            raise HandlerConstructionError(name, str(e)) from e


# Global registry instance
_registry = None


def get_handler_registry() -> HandlerRegistry:
    """
    Get the global handler registry, populated with the built-in handlers.

    Returns:
        HandlerRegistry instance (singleton)
    """
    global _registry
    if _registry is None:
        from .builtin import BUILTIN_HANDLERS

        _registry = HandlerRegistry(BUILTIN_HANDLERS)
    return _registry


def register_handler(name: str, factory: HandlerFactory):
    """Register a handler factory with the global registry."""
    get_handler_registry().register(name, factory)
