"""Type catalog loading service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .builtin_types import BUILTIN_CATALOG_SOURCE, BUILTIN_CATALOG_TEXT
from .catalog_model import CatalogError, TypeCatalog, TypeDeclaration
from .type_expressions import TypeExpression, TypeExpressionError, parse_type_expression

_LOGGER = logging.getLogger(__name__)


def load_type_catalog(
    paths: Sequence[Path | str], *, include_builtin_types: bool = True
) -> TypeCatalog:
    """Load catalog documents into one type catalog.

    Args:
      paths: YAML or JSON catalog documents, read in order.
      include_builtin_types: Whether to start from the built-in JDK types.

    Returns:
      The combined catalog. User declarations replace built-in ones.

    Raises:
      CatalogError: If a document is missing or invalid, or two documents
        declare the same type.
    """
    declarations: dict[str, TypeDeclaration] = {}
    if include_builtin_types:
        for declaration in read_catalog_document(BUILTIN_CATALOG_TEXT, BUILTIN_CATALOG_SOURCE):
            declarations[declaration.name] = declaration

    for raw_path in paths:
        path = Path(raw_path)
        if not path.exists():
            raise CatalogError(f"Type catalog file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogError(f"Failed to read type catalog {path}: {exc}") from exc
        loaded = read_catalog_document(text, str(path))
        for declaration in loaded:
            existing = declarations.get(declaration.name)
            if existing is not None and existing.source != BUILTIN_CATALOG_SOURCE:
                raise CatalogError(
                    f"Type {declaration.name} declared twice: {existing.source} and {path}"
                )
            if existing is not None:
                _LOGGER.debug("%s replaces built-in type %s", path, declaration.name)
            declarations[declaration.name] = declaration
        _LOGGER.debug("Loaded %d type declarations from %s", len(loaded), path)

    return TypeCatalog(declarations)


def read_catalog_document(text: str, source: str) -> list[TypeDeclaration]:
    """Parse one catalog document into declarations, in document order."""
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogError(f"Failed to parse type catalog {source}: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise CatalogError(f"Type catalog root must be a mapping: {source}")

    types = parsed.get("types") or {}
    if not isinstance(types, Mapping):
        raise CatalogError(f"'types' must be a mapping of type names: {source}")

    return [_parse_declaration(name, body, source) for name, body in types.items()]


def _parse_declaration(name: Any, body: Any, source: str) -> TypeDeclaration:
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"Type names must be non-empty strings: {source}")
    name = name.strip().rsplit(".", 1)[-1]
    if body is None:
        body = {}
    if not isinstance(body, Mapping):
        raise CatalogError(f"Declaration of {name} must be a mapping: {source}")

    label = f"{source}: {name}"
    type_parameters = _string_sequence(body.get("type_parameters"), f"{label}.type_parameters")
    supertypes = tuple(
        _parse_expression(text, f"{label}.extends")
        for text in _string_sequence(body.get("extends"), f"{label}.extends")
    )
    fields = _parse_fields(body.get("fields"), label)
    enum_constants = None
    if "enum" in body:
        enum_constants = _string_sequence(body.get("enum"), f"{label}.enum")

    return TypeDeclaration(
        name=name,
        type_parameters=type_parameters,
        supertypes=supertypes,
        fields=fields,
        enum_constants=enum_constants,
        source=source,
    )


def _parse_fields(value: Any, label: str) -> tuple[tuple[str, TypeExpression], ...]:
    if value is None:
        return ()
    if not isinstance(value, Mapping):
        raise CatalogError(f"{label}.fields must be a mapping of field name to type.")
    fields = []
    for field_name, type_text in value.items():
        if not isinstance(field_name, str) or not field_name:
            raise CatalogError(f"{label}.fields keys must be non-empty strings.")
        fields.append((field_name, _parse_expression(type_text, f"{label}.fields.{field_name}")))
    return tuple(fields)


def _parse_expression(value: Any, label: str) -> TypeExpression:
    if not isinstance(value, str):
        raise CatalogError(f"{label} must be a type expression string.")
    try:
        return parse_type_expression(value)
    except TypeExpressionError as exc:
        raise CatalogError(f"{label}: {exc}") from exc


def _string_sequence(value: Any, label: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str) or not item.strip():
                raise CatalogError(f"{label} entries must be non-empty strings.")
            normalized.append(item.strip())
        return tuple(normalized)
    raise CatalogError(f"{label} must be a string or list of strings.")
