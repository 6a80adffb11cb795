"""Canned sample values for leaf-like reference types."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType

from .sample_models import ZERO_DECIMAL, SampleValue, TerminalMatch

DATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class TerminalTypeTable:
    """Read-only mapping from type name to sample value."""

    entries: Mapping[str, SampleValue]

    def lookup(self, candidate_names: Iterable[str]) -> TerminalMatch | None:
        """Return the entry of the first candidate name present in the table."""
        for name in candidate_names:
            if name in self.entries:
                return TerminalMatch(type_name=name, value=self.entries[name])
        return None


def build_terminal_type_table(now: datetime | None = None) -> TerminalTypeTable:
    """Build the table with date and time samples taken from ``now``.

    ``now`` defaults to the local wall clock.
    """
    moment = now if now is not None else datetime.now()
    date_time = moment.strftime(DATE_TIME_FORMAT)
    epoch_millis = int(moment.timestamp()) * 1000 + moment.microsecond // 1000
    return TerminalTypeTable(
        entries=MappingProxyType(
            {
                "Boolean": False,
                "Float": ZERO_DECIMAL,
                "Double": ZERO_DECIMAL,
                "BigDecimal": ZERO_DECIMAL,
                "Number": 0,
                "CharSequence": "",
                "Date": date_time,
                "Temporal": epoch_millis,
                "LocalDateTime": date_time,
                "LocalDate": moment.strftime(DATE_FORMAT),
                "LocalTime": moment.strftime(TIME_FORMAT),
            }
        )
    )


# Computed once per process; every resolution sees the same date samples.
TERMINAL_TYPES = build_terminal_type_table()
