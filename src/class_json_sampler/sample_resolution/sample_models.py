"""Sample resolution entities."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypeAlias

SampleValue: TypeAlias = bool | int | Decimal | str | dict[str, Any] | list[Any] | None

ZERO_DECIMAL = Decimal("0.00")


@dataclass(frozen=True)
class TerminalMatch:
    """Terminal table entry selected for a type."""

    type_name: str
    value: SampleValue
