"""Sample value resolution for declared types."""

from __future__ import annotations

import logging
from typing import Any

from class_json_sampler.type_catalog.type_descriptors import (
    ArrayType,
    ClassType,
    PrimitiveType,
    TypeDescriptor,
)

from .field_enumerator import enumerate_fields
from .primitive_defaults import primitive_default
from .sample_models import SampleValue
from .terminal_types import TERMINAL_TYPES, TerminalTypeTable

MAX_REFERENCE_DEPTH = 500

# Name prefixes, not capability checks: any type whose name or ancestor name
# starts with one of these is sampled as a sequence.
COLLECTION_NAME_PREFIXES = ("Collection", "Iterable")

_LOGGER = logging.getLogger(__name__)


class DepthExceededError(Exception):
    """Raised when object expansion nests deeper than ``MAX_REFERENCE_DEPTH``."""

    def __init__(self, type_name: str, depth: int) -> None:
        super().__init__(
            "This class reference level exceeds maximum limit or has nested references!"
        )
        self.type_name = type_name
        self.depth = depth


def resolve_type(
    type_descriptor: TypeDescriptor | None,
    depth: int = 0,
    *,
    terminal_types: TerminalTypeTable | None = None,
) -> SampleValue:
    """Return a sample value shaped like ``type_descriptor``.

    Args:
      type_descriptor: Type to sample. ``None`` and unresolvable references
        sample as an empty mapping.
      depth: Nesting depth of the caller; incremented once per call.
      terminal_types: Table override, for deterministic date samples.

    Raises:
      DepthExceededError: If object expansion passes ``MAX_REFERENCE_DEPTH``.
    """
    depth += 1
    table = terminal_types if terminal_types is not None else TERMINAL_TYPES

    if isinstance(type_descriptor, PrimitiveType):
        return primitive_default(type_descriptor.kind)

    if isinstance(type_descriptor, ArrayType):
        return [resolve_type(type_descriptor.deep_component_type(), depth, terminal_types=table)]

    if not isinstance(type_descriptor, ClassType) or type_descriptor.declaration() is None:
        return {}

    if type_descriptor.is_enum():
        constants = type_descriptor.enum_constants()
        return constants[0] if constants else ""

    candidate_names = [type_descriptor.presentable_name]
    candidate_names.extend(supertype.presentable_name for supertype in type_descriptor.supertypes())

    if any(name.startswith(COLLECTION_NAME_PREFIXES) for name in candidate_names):
        element_type = type_descriptor.iterable_element_type()
        return [resolve_type(element_type, depth, terminal_types=table)]

    terminal = table.lookup(candidate_names)
    if terminal is not None:
        return terminal.value

    if depth > MAX_REFERENCE_DEPTH:
        _LOGGER.debug("Reference depth %d exceeded at %s", depth, type_descriptor.presentable_name)
        raise DepthExceededError(type_descriptor.presentable_name, depth)

    sample: dict[str, Any] = {}
    for field in enumerate_fields(type_descriptor):
        sample[field.name] = resolve_type(field.type, depth, terminal_types=table)
    return sample


def build_class_sample(
    class_type: ClassType, *, terminal_types: TerminalTypeTable | None = None
) -> dict[str, Any]:
    """Return the field mapping of a selected class, each field resolved from depth 0."""
    sample: dict[str, Any] = {}
    if class_type.declaration() is None:
        return sample
    for field in enumerate_fields(class_type):
        sample[field.name] = resolve_type(field.type, 0, terminal_types=terminal_types)
    _LOGGER.debug("Sampled %d fields of %s", len(sample), class_type.presentable_name)
    return sample
