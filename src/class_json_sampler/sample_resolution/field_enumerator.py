"""Field enumeration across a composite type's ancestry."""

from __future__ import annotations

from class_json_sampler.type_catalog.type_descriptors import ClassType, FieldDescriptor


def enumerate_fields(class_type: ClassType) -> list[FieldDescriptor]:
    """Return own fields first, then inherited ones depth-first in ``extends`` order.

    Each declaration contributes its fields once, even when it is reached
    through several paths (for example an interface implemented twice).
    """
    fields: list[FieldDescriptor] = []
    visited: set[str] = set()
    pending = [class_type]
    while pending:
        current = pending.pop()
        if current.name in visited or current.declaration() is None:
            continue
        visited.add(current.name)
        fields.extend(current.declared_fields())
        pending.extend(reversed(current.direct_supertypes()))
    return fields
