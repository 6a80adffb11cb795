"""Sample resolution exports."""

from .field_enumerator import enumerate_fields
from .primitive_defaults import primitive_default
from .sample_models import ZERO_DECIMAL, SampleValue, TerminalMatch
from .terminal_types import TERMINAL_TYPES, TerminalTypeTable, build_terminal_type_table
from .type_resolver import (
    MAX_REFERENCE_DEPTH,
    DepthExceededError,
    build_class_sample,
    resolve_type,
)

__all__ = [
    "DepthExceededError",
    "MAX_REFERENCE_DEPTH",
    "SampleValue",
    "TERMINAL_TYPES",
    "TerminalMatch",
    "TerminalTypeTable",
    "ZERO_DECIMAL",
    "build_class_sample",
    "build_terminal_type_table",
    "enumerate_fields",
    "primitive_default",
    "resolve_type",
]
