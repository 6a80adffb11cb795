"""Type catalog entities and type-graph queries."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

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

ITERABLE_TYPE_NAME = "Iterable"

_PRIMITIVE_KINDS = {kind.value: kind for kind in PrimitiveKind}


class CatalogError(Exception):
    """Raised for unreadable, malformed or inconsistent type catalogs."""


@dataclass(frozen=True)
class TypeDeclaration:
    """Declared class, interface or enum."""

    name: str
    type_parameters: tuple[str, ...] = ()
    supertypes: tuple[TypeExpression, ...] = ()
    fields: tuple[tuple[str, TypeExpression], ...] = ()
    enum_constants: tuple[str, ...] | None = None
    source: str = "inline"

    @property
    def is_enum(self) -> bool:
        return self.enum_constants is not None


class TypeCatalog:
    """Read-only set of type declarations that answers descriptor queries."""

    def __init__(self, declarations: Mapping[str, TypeDeclaration]) -> None:
        self._declarations = MappingProxyType(dict(declarations))

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[TypeDeclaration]:
        return iter(self._declarations.values())

    def __len__(self) -> int:
        return len(self._declarations)

    def find_declaration(self, name: str) -> TypeDeclaration | None:
        return self._declarations.get(name)

    def class_type(self, name: str) -> ClassType:
        """Return a raw reference to a declared type.

        Raises:
          CatalogError: If the catalog does not declare ``name``.
        """
        simple_name = name.strip().rsplit(".", 1)[-1]
        if simple_name not in self._declarations:
            raise CatalogError(f"Unknown type: {name}")
        return ClassType(name=simple_name, catalog=self)

    def parse_type(
        self, text: str, bindings: Mapping[str, TypeDescriptor] | None = None
    ) -> TypeDescriptor:
        """Parse a type expression and instantiate it against this catalog."""
        try:
            expression = parse_type_expression(text)
        except TypeExpressionError as exc:
            raise CatalogError(str(exc)) from exc
        return self.instantiate(expression, bindings or {})

    def instantiate(
        self, expression: TypeExpression, bindings: Mapping[str, TypeDescriptor]
    ) -> TypeDescriptor:
        descriptor = self._instantiate_element(expression, bindings)
        for _ in range(expression.array_dimensions):
            descriptor = ArrayType(component=descriptor)
        return descriptor

    def direct_supertypes(self, class_type: ClassType) -> tuple[ClassType, ...]:
        declaration = self.find_declaration(class_type.name)
        if declaration is None:
            return ()
        bindings = _bind_type_parameters(declaration, class_type.arguments)
        supertypes = (
            self.instantiate(expression, bindings) for expression in declaration.supertypes
        )
        return tuple(supertype for supertype in supertypes if isinstance(supertype, ClassType))

    def supertypes(self, class_type: ClassType) -> tuple[ClassType, ...]:
        ordered: list[ClassType] = []
        seen = {class_type.presentable_name}
        pending = deque(self.direct_supertypes(class_type))
        while pending:
            candidate = pending.popleft()
            if candidate.presentable_name in seen:
                continue
            seen.add(candidate.presentable_name)
            ordered.append(candidate)
            pending.extend(self.direct_supertypes(candidate))
        return tuple(ordered)

    def declared_fields(self, class_type: ClassType) -> tuple[FieldDescriptor, ...]:
        declaration = self.find_declaration(class_type.name)
        if declaration is None:
            return ()
        bindings = _bind_type_parameters(declaration, class_type.arguments)
        fields = [
            FieldDescriptor(
                name=name,
                type=self.instantiate(expression, bindings),
                declaring_type=declaration.name,
            )
            for name, expression in declaration.fields
        ]
        if declaration.enum_constants:
            self_type = ClassType(name=declaration.name, catalog=self)
            fields.extend(
                FieldDescriptor(name=constant, type=self_type, declaring_type=declaration.name)
                for constant in declaration.enum_constants
            )
        return tuple(fields)

    def iterable_element_type(self, class_type: ClassType) -> TypeDescriptor:
        for candidate in (class_type, *self.supertypes(class_type)):
            if candidate.name == ITERABLE_TYPE_NAME and candidate.arguments:
                return candidate.arguments[0]
        return UNKNOWN_ELEMENT_TYPE

    def _instantiate_element(
        self, expression: TypeExpression, bindings: Mapping[str, TypeDescriptor]
    ) -> TypeDescriptor:
        if expression.is_wildcard:
            if expression.bound is not None and expression.bound_kind == "extends":
                return self.instantiate(expression.bound, bindings)
            return UNKNOWN_ELEMENT_TYPE
        if expression.name in bindings:
            return bindings[expression.name]
        kind = _PRIMITIVE_KINDS.get(expression.name)
        if kind is not None and not expression.arguments:
            return PrimitiveType(kind=kind)
        arguments = tuple(self.instantiate(argument, bindings) for argument in expression.arguments)
        return ClassType(name=expression.name, arguments=arguments, catalog=self)


def _bind_type_parameters(
    declaration: TypeDeclaration, arguments: Sequence[TypeDescriptor]
) -> dict[str, TypeDescriptor]:
    bindings: dict[str, TypeDescriptor] = {}
    for index, parameter in enumerate(declaration.type_parameters):
        if index < len(arguments):
            bindings[parameter] = arguments[index]
        else:
            bindings[parameter] = TypeVariable(parameter)
    return bindings
