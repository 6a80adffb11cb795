"""Type descriptor entities handed to sample resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .catalog_model import TypeCatalog, TypeDeclaration


class PrimitiveKind(str, Enum):
    """Language-level primitive types."""

    BOOLEAN = "boolean"
    BYTE = "byte"
    CHAR = "char"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"


@dataclass(frozen=True)
class PrimitiveType:
    """Primitive such as ``int`` or ``boolean``."""

    kind: PrimitiveKind

    @property
    def presentable_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class ArrayType:
    """Array of a component type."""

    component: TypeDescriptor

    @property
    def presentable_name(self) -> str:
        return f"{self.component.presentable_name}[]"

    def deep_component_type(self) -> TypeDescriptor:
        """Return the innermost non-array component."""
        component = self.component
        while isinstance(component, ArrayType):
            component = component.component
        return component


@dataclass(frozen=True)
class TypeVariable:
    """Type parameter or wildcard without a concrete binding."""

    name: str

    @property
    def presentable_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class ClassType:
    """Reference to a declared class, interface or enum with its type arguments.

    Queries are answered by the owning catalog. A reference whose name the
    catalog does not declare is unresolvable and reports no declaration.
    """

    name: str
    arguments: tuple[TypeDescriptor, ...] = ()
    catalog: TypeCatalog | None = field(default=None, compare=False, repr=False)

    @property
    def presentable_name(self) -> str:
        if not self.arguments:
            return self.name
        rendered = ", ".join(argument.presentable_name for argument in self.arguments)
        return f"{self.name}<{rendered}>"

    def declaration(self) -> TypeDeclaration | None:
        if self.catalog is None:
            return None
        return self.catalog.find_declaration(self.name)

    def is_enum(self) -> bool:
        declaration = self.declaration()
        return declaration is not None and declaration.is_enum

    def enum_constants(self) -> tuple[str, ...]:
        declaration = self.declaration()
        if declaration is None or declaration.enum_constants is None:
            return ()
        return declaration.enum_constants

    def direct_supertypes(self) -> tuple[ClassType, ...]:
        if self.catalog is None:
            return ()
        return self.catalog.direct_supertypes(self)

    def supertypes(self) -> tuple[ClassType, ...]:
        """Return every ancestor, nearest first, each presentable name once."""
        if self.catalog is None:
            return ()
        return self.catalog.supertypes(self)

    def declared_fields(self) -> tuple[FieldDescriptor, ...]:
        if self.catalog is None:
            return ()
        return self.catalog.declared_fields(self)

    def iterable_element_type(self) -> TypeDescriptor:
        """Return the argument bound to ``Iterable`` in this type's ancestry."""
        if self.catalog is None:
            return UNKNOWN_ELEMENT_TYPE
        return self.catalog.iterable_element_type(self)


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared member of a composite type."""

    name: str
    type: TypeDescriptor
    declaring_type: str


TypeDescriptor = PrimitiveType | ArrayType | ClassType | TypeVariable

UNKNOWN_ELEMENT_TYPE = TypeVariable("?")
