"""
Handler registry and built-in handler factories.
"""

from .builtin import BUILTIN_HANDLERS
from .registry import (
    HandlerFactory,
    HandlerRegistry,
    get_handler_registry,
    register_handler,
)

__all__ = [
    "BUILTIN_HANDLERS",
    "HandlerFactory",
    "HandlerRegistry",
    "get_handler_registry",
    "register_handler",
]
