"""
Configuration discovery.

Probes an ordered list of candidate sources for a JSON configuration
document and returns the first one that reads, parses and validates.
Per-candidate failures are logged and only the most recent one is kept
for the final error report.

Candidate order:
    1. The filename passed by the caller
    2. The MONOLOG_CFG environment variable
    3. The ``monolog.config`` process option
    4. ``monolog.cfg`` on the include path

Every candidate but the last is tried as a direct path first and then by
basename in each include directory.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError

from ..constants import DEFAULT_CONFIG_FILENAME, MAX_JSON_DEPTH
from ..exceptions.config import (
    ConfigNotFoundError,
    ConfigurationError,
    ConfigValidationError,
    FileUnreadableError,
    JsonErrorKind,
    JsonParseError,
)
from .models import ConfigDocument
from .settings import MonologSettings, Options, runtime_options

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class CandidateSource(str, Enum):
    """Where a configuration candidate came from."""

    EXPLICIT = "explicit"
    ENVIRONMENT = "environment"
    SETTING = "setting"
    DEFAULT = "default"


@dataclass(frozen=True)
class ConfigCandidate:
    """A named configuration source to probe."""

    source: CandidateSource
    value: str
    allow_direct_path: bool = True

    def describe(self) -> str:
        return f"{self.source.value}={self.value}"


class ProbeStatus(str, Enum):
    FOUND = "found"
    ABSENT = "absent"
    INVALID = "invalid"


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of probing a single candidate."""

    status: ProbeStatus
    document: Optional[ConfigDocument] = None
    error: Optional[ConfigurationError] = None
    path: Optional[Path] = None


def _json_depth(payload: Any) -> int:
    """Return the container nesting depth of a decoded JSON value."""
    deepest = 0
    stack = [(payload, 1)]
    while stack:
        value, depth = stack.pop()
        if isinstance(value, dict):
            children = value.values()
        elif isinstance(value, list):
            children = value
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def format_validation_errors(error: ValidationError) -> List[str]:
    return [
        f"{'.'.join(str(part) for part in item['loc']) or '<root>'}: {item['msg']}"
        for item in error.errors()
    ]


def parse_document(data: bytes, path: PathLike) -> ConfigDocument:
    """
    Decode and validate a configuration document.

    Args:
        data: Raw file contents
        path: Where the contents were read from, for diagnostics

    Returns:
        Validated ConfigDocument

    Raises:
        JsonParseError: If the bytes are not a JSON object with a handlers array
        ConfigValidationError: If a handler or processor entry is malformed
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise JsonParseError(path, JsonErrorKind.ENCODING, str(e))

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        if e.msg.startswith("Invalid control character"):
            kind = JsonErrorKind.CONTROL_CHAR
        else:
            kind = JsonErrorKind.SYNTAX
        raise JsonParseError(path, kind, f"{e.msg} at line {e.lineno} column {e.colno}")
    except RecursionError:
        raise JsonParseError(path, JsonErrorKind.DEPTH, "decoder recursion limit exceeded")
    except ValueError as e:
        raise JsonParseError(path, JsonErrorKind.UNKNOWN, str(e))

    depth = _json_depth(payload)
    if depth > MAX_JSON_DEPTH:
        raise JsonParseError(
            path, JsonErrorKind.DEPTH, f"nesting depth {depth} exceeds {MAX_JSON_DEPTH}"
        )

    if not isinstance(payload, dict):
        raise JsonParseError(
            path,
            JsonErrorKind.STATE_MISMATCH,
            f"top-level value must be an object, got {type(payload).__name__}",
        )

    if not isinstance(payload.get("handlers"), list):
        raise JsonParseError(
            path, JsonErrorKind.STATE_MISMATCH, "document has no 'handlers' array"
        )

    try:
        return ConfigDocument.model_validate({**payload, "source": Path(path)})
    except ValidationError as e:
        raise ConfigValidationError(format_validation_errors(e), path)


class ConfigResolver:
    """
    Locates and loads the logging configuration.

    The environment and process options are read on every call to
    ``resolve`` so that each call reflects the current process state.
    """

    def __init__(
        self,
        include_path: Optional[Sequence[PathLike]] = None,
        settings: Optional[MonologSettings] = None,
        options: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the resolver.

        Args:
            include_path: Directories searched by basename. If None, uses
                MONOLOG_INCLUDE_PATH or the current directory.
            settings: Environment settings. If None, read fresh per resolve.
            options: Process option store. If None, uses ``runtime_options``.
        """
        self.include_path = [Path(p) for p in include_path] if include_path is not None else None
        self.settings = settings
        self.options = options

    def _current_settings(self) -> MonologSettings:
        return self.settings if self.settings is not None else MonologSettings()

    def include_dirs(self, settings: Optional[MonologSettings] = None) -> List[Path]:
        if self.include_path is not None:
            return list(self.include_path)
        return (settings or self._current_settings()).include_dirs()

    def candidates(
        self,
        explicit_path: Optional[PathLike] = None,
        settings: Optional[MonologSettings] = None,
    ) -> List[ConfigCandidate]:
        """Build the ordered candidate list for one resolution."""
        settings = settings or self._current_settings()
        options = Options(self.options) if self.options is not None else runtime_options

        candidates = []
        if explicit_path:
            candidates.append(ConfigCandidate(CandidateSource.EXPLICIT, str(explicit_path)))
        if settings.monolog_cfg:
            candidates.append(ConfigCandidate(CandidateSource.ENVIRONMENT, settings.monolog_cfg))
        setting_value = options.config_file
        if setting_value:
            candidates.append(ConfigCandidate(CandidateSource.SETTING, setting_value))
        candidates.append(
            ConfigCandidate(
                CandidateSource.DEFAULT, DEFAULT_CONFIG_FILENAME, allow_direct_path=False
            )
        )
        return candidates

    def locate(self, candidate: ConfigCandidate, include_dirs: Sequence[Path]) -> Optional[Path]:
        """Find the file a candidate refers to, or None."""
        if candidate.allow_direct_path:
            direct = Path(candidate.value).expanduser()
            if direct.is_file():
                return direct

        basename = Path(candidate.value).name
        if not basename:
            return None
        for directory in include_dirs:
            path = Path(directory) / basename
            if path.is_file():
                return path
        return None

    def probe(self, candidate: ConfigCandidate, include_dirs: Sequence[Path]) -> ProbeResult:
        """Try one candidate and report a tagged result."""
        # Over-long names and unknown ~user prefixes raise instead of reporting absent
        try:
            path = self.locate(candidate, include_dirs)
        except (OSError, ValueError, RuntimeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            return self._invalid(candidate, FileUnreadableError(candidate.value, reason))
        if path is None:
            logger.debug(f"Configuration candidate {candidate.describe()} not found")
            return ProbeResult(ProbeStatus.ABSENT)

        try:
            data = path.read_bytes()
        except OSError as e:
            return self._invalid(candidate, FileUnreadableError(path, e.strerror or str(e)), path)

        try:
            document = parse_document(data, path)
        except (JsonParseError, ConfigValidationError) as e:
            return self._invalid(candidate, e, path)

        return ProbeResult(ProbeStatus.FOUND, document=document, path=path)

    def _invalid(
        self,
        candidate: ConfigCandidate,
        error: ConfigurationError,
        path: Optional[Path] = None,
    ) -> ProbeResult:
        error.add_context(candidate=candidate.describe())
        logger.warning(
            f"Skipping configuration candidate {candidate.describe()}: {error.message}",
            extra={"error": error.to_dict()},
        )
        return ProbeResult(ProbeStatus.INVALID, error=error, path=path)

    def resolve(self, explicit_path: Optional[PathLike] = None) -> ConfigDocument:
        """
        Resolve the configuration document.

        Args:
            explicit_path: Optional filename taking priority over every other source

        Returns:
            The first valid ConfigDocument found

        Raises:
            ConfigNotFoundError: If no candidate yields a valid document
        """
        settings = self._current_settings()
        include_dirs = self.include_dirs(settings)
        candidates = self.candidates(explicit_path, settings)

        last_error: Optional[ConfigurationError] = None
        for candidate in candidates:
            result = self.probe(candidate, include_dirs)
            if result.status is ProbeStatus.FOUND:
                logger.info(
                    f"Loaded logging configuration from {result.path} "
                    f"({candidate.source.value}, {len(result.document.handlers)} handlers)"
                )
                return result.document
            if result.error is not None:
                last_error = result.error

        raise ConfigNotFoundError(
            last_error=last_error,
            candidates=[candidate.describe() for candidate in candidates],
        )

