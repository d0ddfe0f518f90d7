"""
Configuration discovery and models.

Usage:
    from monolog_factory.config import ConfigResolver

    resolver = ConfigResolver(include_path=["/etc/myapp"])
    document = resolver.resolve("logging.json")
    for spec in document.handlers:
        print(spec.class_name, spec.parameters)
"""

from .models import ConfigDocument, HandlerSpec, ProcessorSpec
from .resolver import (
    CandidateSource,
    ConfigCandidate,
    ConfigResolver,
    ProbeResult,
    ProbeStatus,
    parse_document,
)
from .settings import MonologSettings, Options, runtime_options

__all__ = [
    # Models
    "ConfigDocument",
    "HandlerSpec",
    "ProcessorSpec",
    # Discovery
    "ConfigResolver",
    "ConfigCandidate",
    "CandidateSource",
    "ProbeResult",
    "ProbeStatus",
    "parse_document",
    # Settings
    "MonologSettings",
    "Options",
    "runtime_options",
]
