"""Command-line interface for monolog-factory."""

from .main import cli, main

__all__ = ["cli", "main"]
