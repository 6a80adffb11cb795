"""Conversion domain exports."""

from .conversion_contracts import CatalogRequest, ConversionOutcome, ConversionRequest
from .conversion_use_case import (
    ConversionError,
    execute_class_conversion,
    list_catalog_types,
    load_request_catalog,
)

__all__ = [
    "CatalogRequest",
    "ConversionRequest",
    "ConversionOutcome",
    "ConversionError",
    "execute_class_conversion",
    "list_catalog_types",
    "load_request_catalog",
]
