"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DEFAULT_INDENT, CatalogSettings, Configuration, OutputSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    catalog = _parse_catalog_section(parsed.get("catalog"), path.parent)
    output = _parse_output_section(parsed.get("output"))

    return Configuration(path=path, catalog=catalog, output=output)


def _parse_catalog_section(value: Any, base_path: Path) -> CatalogSettings:
    section = _require_mapping(value, "catalog")
    raw_paths = section.get("paths")
    if isinstance(raw_paths, str):
        raw_paths = [raw_paths]
    if not isinstance(raw_paths, Sequence) or not raw_paths:
        raise ConfigurationError("catalog.paths must list at least one type catalog file.")

    paths = []
    for raw_path in raw_paths:
        path_text = _require_non_empty_string(raw_path, "catalog.paths entry")
        catalog_path = _resolve_path(base_path, path_text)
        if not catalog_path.exists():
            raise ConfigurationError(f"Type catalog file not found: {catalog_path}")
        paths.append(catalog_path)

    include_builtin_types = section.get("include_builtin_types", True)
    if not isinstance(include_builtin_types, bool):
        raise ConfigurationError("catalog.include_builtin_types must be a boolean.")

    return CatalogSettings(paths=tuple(paths), include_builtin_types=include_builtin_types)


def _parse_output_section(value: Any) -> OutputSettings:
    if value is None:
        return OutputSettings()
    section = _require_mapping(value, "output")
    indent = _require_positive_int(section.get("indent", DEFAULT_INDENT), "output.indent")
    return OutputSettings(indent=indent)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
