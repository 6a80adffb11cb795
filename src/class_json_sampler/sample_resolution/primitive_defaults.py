"""Default sample values for primitive types."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from class_json_sampler.type_catalog.type_descriptors import PrimitiveKind

from .sample_models import ZERO_DECIMAL, SampleValue

_PRIMITIVE_DEFAULTS: Mapping[PrimitiveKind, SampleValue] = MappingProxyType(
    {
        PrimitiveKind.BOOLEAN: False,
        PrimitiveKind.BYTE: 0,
        PrimitiveKind.CHAR: "\x00",
        PrimitiveKind.SHORT: 0,
        PrimitiveKind.INT: 0,
        PrimitiveKind.LONG: 0,
        PrimitiveKind.FLOAT: ZERO_DECIMAL,
        PrimitiveKind.DOUBLE: ZERO_DECIMAL,
    }
)


def primitive_default(kind: PrimitiveKind) -> SampleValue:
    """Return the zero-like sample value of a primitive kind."""
    try:
        return _PRIMITIVE_DEFAULTS[kind]
    except KeyError as exc:
        raise ValueError(f"Unsupported primitive kind: {kind!r}") from exc
