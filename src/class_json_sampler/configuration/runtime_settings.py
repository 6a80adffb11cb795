"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_INDENT = 2


@dataclass(frozen=True)
class CatalogSettings:
    """Type catalog sources."""

    paths: tuple[Path, ...]
    include_builtin_types: bool = True


@dataclass(frozen=True)
class OutputSettings:
    """JSON rendering options."""

    indent: int = DEFAULT_INDENT


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    catalog: CatalogSettings
    output: OutputSettings
