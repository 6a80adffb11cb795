"""Type catalog exports."""

from .catalog_model import CatalogError, TypeCatalog, TypeDeclaration
from .catalog_reader import load_type_catalog, read_catalog_document
from .type_descriptors import (
    UNKNOWN_ELEMENT_TYPE,
    ArrayType,
    ClassType,
    FieldDescriptor,
    PrimitiveKind,
    PrimitiveType,
    TypeDescriptor,
    TypeVariable,
)
from .type_expressions import TypeExpression, TypeExpressionError, parse_type_expression

__all__ = [
    "ArrayType",
    "CatalogError",
    "ClassType",
    "FieldDescriptor",
    "PrimitiveKind",
    "PrimitiveType",
    "TypeCatalog",
    "TypeDeclaration",
    "TypeDescriptor",
    "TypeExpression",
    "TypeExpressionError",
    "TypeVariable",
    "UNKNOWN_ELEMENT_TYPE",
    "load_type_catalog",
    "parse_type_expression",
    "read_catalog_document",
]
