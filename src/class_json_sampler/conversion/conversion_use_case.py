"""Class-to-JSON conversion use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from class_json_sampler.configuration import (
    ConfigurationError,
    OutputSettings,
    load_configuration,
)
from class_json_sampler.sample_rendering import render_sample_json
from class_json_sampler.sample_resolution import build_class_sample
from class_json_sampler.type_catalog import CatalogError, TypeCatalog, load_type_catalog
from class_json_sampler.type_catalog.builtin_types import BUILTIN_CATALOG_SOURCE

from .conversion_contracts import CatalogRequest, ConversionOutcome, ConversionRequest

_LOGGER = logging.getLogger(__name__)


class ConversionError(Exception):
    """Raised when the inputs of a conversion cannot be loaded or written."""


def execute_class_conversion(request: ConversionRequest) -> ConversionOutcome:
    """Convert one declared class to sample JSON text.

    ``DepthExceededError`` from sample resolution is not wrapped, so callers
    can report it apart from input problems.
    """
    catalog, output_settings = load_request_catalog(request.catalog)
    try:
        class_type = catalog.class_type(request.type_name)
    except CatalogError as exc:
        raise ConversionError(str(exc)) from exc

    sample = build_class_sample(class_type)
    json_text = render_sample_json(sample, indent=output_settings.indent)

    output_path = None
    if request.output_path:
        output_path = Path(request.output_path)
        try:
            output_path.write_text(json_text + "\n", encoding="utf-8")
        except OSError as exc:
            raise ConversionError(f"Failed to write {output_path}: {exc}") from exc
        output_path = output_path.resolve()
        _LOGGER.debug("Wrote sample of %s to %s", request.type_name, output_path)

    return ConversionOutcome(
        type_name=class_type.name, json_text=json_text, output_path=output_path
    )


def list_catalog_types(
    request: CatalogRequest, *, include_builtin_types: bool = False
) -> list[str]:
    """Return declared type names, sorted, optionally with the built-in ones."""
    catalog, _ = load_request_catalog(request)
    return sorted(
        declaration.name
        for declaration in catalog
        if include_builtin_types or declaration.source != BUILTIN_CATALOG_SOURCE
    )


def load_request_catalog(request: CatalogRequest) -> tuple[TypeCatalog, OutputSettings]:
    """Load the catalog named by CLI paths and the optional configuration file."""
    paths: list[Path] = []
    include_builtin_types = True
    output_settings = OutputSettings()
    try:
        if request.config_path:
            configuration = load_configuration(request.config_path)
            paths.extend(configuration.catalog.paths)
            include_builtin_types = configuration.catalog.include_builtin_types
            output_settings = configuration.output
        paths.extend(Path(raw_path) for raw_path in request.catalog_paths)
        if not paths:
            raise ConversionError("Provide --catalog or --config naming at least one type catalog.")
        catalog = load_type_catalog(paths, include_builtin_types=include_builtin_types)
    except (ConfigurationError, CatalogError) as exc:
        raise ConversionError(str(exc)) from exc
    return catalog, output_settings
