"""Conversion entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CatalogRequest:
    """Where to read type declarations from."""

    catalog_paths: tuple[str, ...] = ()
    config_path: str | None = None


@dataclass(frozen=True)
class ConversionRequest:
    """Input contract for converting one class to sample JSON."""

    type_name: str
    catalog: CatalogRequest
    output_path: str | None = None


@dataclass(frozen=True)
class ConversionOutcome:
    """Output contract for one completed conversion."""

    type_name: str
    json_text: str
    output_path: Path | None
