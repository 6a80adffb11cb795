"""Type catalog query tests."""

from __future__ import annotations

import pytest
from class_json_sampler.type_catalog.builtin_types import (
    BUILTIN_CATALOG_SOURCE,
    BUILTIN_CATALOG_TEXT,
)
from class_json_sampler.type_catalog.catalog_model import CatalogError, TypeCatalog
from class_json_sampler.type_catalog.catalog_reader import read_catalog_document
from class_json_sampler.type_catalog.type_descriptors import (
    UNKNOWN_ELEMENT_TYPE,
    ArrayType,
    ClassType,
    PrimitiveKind,
    PrimitiveType,
    TypeVariable,
)


@pytest.fixture(name="catalog")
def _catalog_fixture() -> TypeCatalog:
    declarations = read_catalog_document(BUILTIN_CATALOG_TEXT, BUILTIN_CATALOG_SOURCE)
    declarations += read_catalog_document(
        """
types:
  Cyclic:
    extends: [Loop]
  Loop:
    extends: [Cyclic]
  Strings:
    extends: ["ArrayList<String>"]
""",
        "test",
    )
    return TypeCatalog({declaration.name: declaration for declaration in declarations})


def test_supertypes_are_listed_nearest_first(catalog: TypeCatalog) -> None:
    names = [supertype.presentable_name for supertype in catalog.class_type("String").supertypes()]

    assert names == ["Object", "Serializable", "Comparable<String>", "CharSequence"]


def test_supertypes_carry_substituted_arguments(catalog: TypeCatalog) -> None:
    list_type = catalog.parse_type("ArrayList<Long>")

    names = [supertype.presentable_name for supertype in list_type.supertypes()]

    assert names[:3] == ["List<Long>", "Cloneable", "Serializable"]
    assert "Collection<Long>" in names
    assert names[-1] == "Iterable<Long>"


def test_cyclic_supertypes_terminate(catalog: TypeCatalog) -> None:
    names = [supertype.name for supertype in catalog.class_type("Cyclic").supertypes()]

    assert names == ["Loop"]


def test_iterable_element_type_follows_the_ancestry(catalog: TypeCatalog) -> None:
    assert catalog.class_type("Strings").iterable_element_type() == ClassType("String")
    assert catalog.parse_type("Set<Integer>").iterable_element_type() == ClassType("Integer")
    assert catalog.class_type("List").iterable_element_type() == TypeVariable("E")
    assert catalog.class_type("Object").iterable_element_type() == UNKNOWN_ELEMENT_TYPE
    assert ClassType("Ghost").iterable_element_type() == UNKNOWN_ELEMENT_TYPE


def test_parse_type_builds_descriptors(catalog: TypeCatalog) -> None:
    assert catalog.parse_type("long") == PrimitiveType(PrimitiveKind.LONG)
    assert catalog.parse_type("char[][]") == ArrayType(ArrayType(PrimitiveType(PrimitiveKind.CHAR)))
    assert catalog.parse_type("T", {"T": ClassType("String")}) == ClassType("String")
    assert catalog.parse_type("List<?>") == ClassType("List", (UNKNOWN_ELEMENT_TYPE,))


def test_array_deep_component_type(catalog: TypeCatalog) -> None:
    array_type = catalog.parse_type("String[][][]")

    assert array_type.presentable_name == "String[][][]"
    assert array_type.deep_component_type() == ClassType("String")


def test_class_type_accepts_qualified_names(catalog: TypeCatalog) -> None:
    assert catalog.class_type("java.lang.String") == ClassType("String")


def test_class_type_rejects_unknown_names(catalog: TypeCatalog) -> None:
    with pytest.raises(CatalogError, match="Unknown type: Ghost"):
        catalog.class_type("Ghost")


def test_parse_type_rejects_malformed_expressions(catalog: TypeCatalog) -> None:
    with pytest.raises(CatalogError):
        catalog.parse_type("List<")


def test_enum_queries(catalog: TypeCatalog) -> None:
    assert not catalog.class_type("String").is_enum()
    assert catalog.class_type("String").enum_constants() == ()
