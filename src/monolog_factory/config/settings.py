"""
Environment and process-level settings consulted during discovery.

``MonologSettings`` reads the environment; ``Options`` is the in-process
setting store whose ``monolog.config`` key ranks below the environment.
"""

import os
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, MutableMapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import CONFIG_SETTING_KEY


class MonologSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    monolog_cfg: Optional[str] = Field(None, alias="MONOLOG_CFG")
    monolog_include_path: Optional[str] = Field(None, alias="MONOLOG_INCLUDE_PATH")

    model_config = SettingsConfigDict(
        case_sensitive=False, populate_by_name=True, extra="ignore"
    )

    def include_dirs(self) -> List[Path]:
        """Split ``MONOLOG_INCLUDE_PATH`` into directories, defaulting to the cwd."""
        if not self.monolog_include_path:
            return [Path.cwd()]
        return [
            Path(part) for part in self.monolog_include_path.split(os.pathsep) if part
        ]


class Options(MutableMapping):
    """Process-wide string settings, looked up by dotted key."""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str):
        self._values[key] = str(value)

    def __delitem__(self, key: str):
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    @property
    def config_file(self) -> Optional[str]:
        return self._values.get(CONFIG_SETTING_KEY) or None


# Global options instance
runtime_options = Options()
