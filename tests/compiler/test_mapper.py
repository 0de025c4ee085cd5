# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for mapping object, input and interface declarations onto models."""

from __future__ import annotations

import pytest

from graphql_models.compiler.fields import resolve_field
from graphql_models.compiler.mapper import TypeMapper
from graphql_models.compiler.parser import parse
from graphql_models.compiler.registry import TypeRegistry
from graphql_models.config import CompileConfig
from graphql_models.model import FieldDeclaration, InterfaceDeclaration, ReferencedKind, SchemaDeclarations
from graphql_models.runtime import ModelType, TypeDescriptor, identifier, string

# ###############
# Helpers
# ###############


class _Harness:
    """A mapper wired to the declarations of one schema, without the driver."""

    def __init__(self, schema: str, config: CompileConfig | None = None) -> None:
        self.declarations: SchemaDeclarations = parse(schema)
        self.registry = TypeRegistry()
        self.mapper = TypeMapper(self.registry, config or CompileConfig(), self._resolve_field, self._find_interface)

    def map(self, name: str) -> TypeDescriptor:
        declaration = self.declarations.find(name)
        assert declaration is not None
        return self.mapper.map(declaration)

    def _resolve_field(self, field: FieldDeclaration) -> TypeDescriptor | None:
        return resolve_field(field, self._resolve_named)

    def _resolve_named(self, name: str, kind: ReferencedKind) -> TypeDescriptor | None:
        declaration = self.declarations.find(name, kind=kind.value)
        if declaration is None or kind not in (ReferencedKind.OBJECT, ReferencedKind.INTERFACE, ReferencedKind.INPUT):
            return None
        return self.mapper.map(declaration)

    def _find_interface(self, name: str) -> InterfaceDeclaration | None:
        declaration = self.declarations.find(name, kind="interface")
        return declaration if isinstance(declaration, InterfaceDeclaration) else None


# ###############
# Mapping
# ###############


class TestTypeMapper:
    def test_model_is_registered_and_sealed(self) -> None:
        harness = _Harness("type Test { foo: String! }")
        test = harness.map("Test")
        assert isinstance(test, ModelType)
        assert test.is_sealed
        assert harness.registry.get("Test") is test

    def test_mapping_twice_returns_cached_model(self) -> None:
        harness = _Harness("type Test { foo: String! }")
        assert harness.map("Test") is harness.map("Test")
        assert len(harness.registry) == 1

    def test_placeholder_is_shared_while_compiling(self) -> None:
        harness = _Harness("type Node { next: Node }")
        node = harness.map("Node")
        assert node.properties["next"].inner is node

    def test_unresolved_field_is_dropped(self) -> None:
        harness = _Harness("type Test { e: SomeEnum a: String } enum SomeEnum { X }")
        assert list(harness.map("Test").properties) == ["a"]

    def test_input_object(self) -> None:
        harness = _Harness("input Filter { q: String! }")
        assert harness.map("Filter").properties["q"] is string


class TestIdentifierClaims:
    def test_inherited_id_is_decided_per_implementer(self) -> None:
        harness = _Harness(
            """
            interface Node { id: ID! }
            type Plain implements Node { name: String }
            type Keyed implements Node { key: ID! }
            """
        )
        keyed = harness.map("Keyed")
        plain = harness.map("Plain")
        assert keyed.identifier_attribute == "key"
        assert keyed.properties["id"] is string
        assert plain.identifier_attribute == "id"
        assert plain.properties["id"] is identifier

    def test_interface_keeps_its_own_identifier(self) -> None:
        harness = _Harness("interface Node { id: ID! } type Keyed implements Node { key: ID! }")
        harness.map("Keyed")
        assert harness.registry.get("Node").identifier_attribute == "id"

    @pytest.mark.parametrize(
        ("configured", "expected"),
        [("a", "a"), ("b", "b"), (None, None)],
    )
    def test_configured_identifier(self, configured: str | None, expected: str | None) -> None:
        config = CompileConfig.from_mapping({"Test": {"identifier": configured}})
        harness = _Harness("type Test { a: ID! b: ID! }", config)
        assert harness.map("Test").identifier_attribute == expected

    def test_config_for_another_type_is_ignored(self) -> None:
        config = CompileConfig.from_mapping({"Other": {"identifier": None}})
        harness = _Harness("type Test { a: ID! }", config)
        assert harness.map("Test").identifier_attribute == "a"

    def test_cyclic_interface_declarations_terminate(self) -> None:
        harness = _Harness(
            """
            interface A implements B { id: ID! }
            interface B implements A { id: ID! }
            type T implements A { x: Int }
            """
        )
        t = harness.map("T")
        assert t.identifier_attribute == "id"
        assert list(t.properties) == ["id", "x"]
