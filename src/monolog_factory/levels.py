"""
Severity levels shared by every logger this package builds.

The table extends the standard library levels with the NOTICE, ALERT and
EMERGENCY severities so configuration files written for syslog-style level
names resolve to stable integer ranks.
"""

import logging
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


class Severity(IntEnum):
    """Canonical severities, ordered by rank."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    NOTICE = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    ALERT = 60
    EMERGENCY = 70


class SeverityTable:
    """Immutable bidirectional mapping between level ranks and names."""

    def __init__(self, levels: Mapping[int, str]):
        if not levels:
            raise ValueError("Severity table requires at least one level")
        self._by_rank = MappingProxyType(dict(levels))
        self._by_name = MappingProxyType(
            {name.upper(): rank for rank, name in levels.items()}
        )
        self._lowest = min(self._by_rank)

    @property
    def lowest(self) -> int:
        return self._lowest

    @property
    def ranks(self) -> Tuple[int, ...]:
        return tuple(sorted(self._by_rank))

    def name_for(self, rank: int) -> Optional[str]:
        return self._by_rank.get(rank)

    def rank_for(self, name: str) -> Optional[int]:
        return self._by_name.get(name.strip().upper())

    def items(self):
        """Iterate ``(rank, name)`` pairs in ascending rank order."""
        return sorted(self._by_rank.items())

    def __contains__(self, rank: object) -> bool:
        return rank in self._by_rank

    def __len__(self) -> int:
        return len(self._by_rank)

    def convert_level(self, level: Any) -> int:
        """
        Translate a configured level into an integer rank.

        Known integer ranks pass through unchanged and level names match
        case-insensitively. Anything else resolves to the lowest severity.

        Args:
            level: Integer rank or level name

        Returns:
            Integer rank from this table
        """
        if isinstance(level, int) and not isinstance(level, bool):
            if level in self._by_rank:
                return level
        elif isinstance(level, str):
            rank = self.rank_for(level)
            if rank is not None:
                return rank

        logger.debug(f"Unrecognised level {level!r}, defaulting to {self._by_rank[self._lowest]}")
        return self._lowest


def _register_level_names(table: SeverityTable):
    """Teach the stdlib frontend the names of the extra severities."""
    for rank, name in table.items():
        if logging.getLevelName(rank) != name:
            logging.addLevelName(rank, name)


SEVERITY_TABLE = SeverityTable({member.value: member.name for member in Severity})
_register_level_names(SEVERITY_TABLE)


def convert_level(level: Any, table: SeverityTable = SEVERITY_TABLE) -> int:
    """Translate ``level`` against ``table``; never raises."""
    return table.convert_level(level)
