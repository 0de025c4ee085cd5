# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the enum, union and scalar builders."""

from __future__ import annotations

from graphql_models.compiler.builders import build_enum, build_scalar, build_union
from graphql_models.compiler.registry import TypeRegistry
from graphql_models.model import EnumDeclaration, ScalarDeclaration, UnionDeclaration
from graphql_models.runtime import EnumerationType, FrozenType, ModelType, UnionType, maybe_null, model, string


class TestBuildEnum:
    def test_registers_enumeration(self) -> None:
        registry = TypeRegistry()
        descriptor = build_enum(EnumDeclaration(name="Color", values=["RED", "GREEN"]), registry)
        assert isinstance(descriptor, EnumerationType)
        assert descriptor.values == ("RED", "GREEN")
        assert registry.get("Color") is descriptor

    def test_second_build_returns_cached(self) -> None:
        registry = TypeRegistry()
        declaration = EnumDeclaration(name="Color", values=["RED"])
        assert build_enum(declaration, registry) is build_enum(declaration, registry)


class TestBuildUnion:
    def test_members_become_alternatives(self) -> None:
        foo = model("Foo", {"foo": maybe_null(string)})
        bar = model("Bar", {"bar": maybe_null(string)})
        members = {"Foo": foo, "Bar": bar}
        registry = TypeRegistry()

        descriptor = build_union(UnionDeclaration(name="FooBar", members=["Foo", "Bar"]), registry, members.get)

        assert isinstance(descriptor, UnionType)
        assert descriptor.types == (foo, bar)
        assert descriptor.declared_name == "FooBar"
        assert registry.get("FooBar") is descriptor

    def test_unresolved_members_are_skipped(self) -> None:
        foo = model("Foo", {"foo": maybe_null(string)})
        registry = TypeRegistry()
        descriptor = build_union(
            UnionDeclaration(name="U", members=["Missing", "Foo"]), registry, {"Foo": foo}.get
        )
        assert descriptor.types == (foo,)

    def test_union_is_registered_before_members_resolve(self) -> None:
        registry = TypeRegistry()
        seen: list[object] = []

        def resolve(name: str) -> ModelType | None:
            seen.append(registry.get("U"))
            return None

        descriptor = build_union(UnionDeclaration(name="U", members=["A"]), registry, resolve)
        assert seen == [descriptor]


class TestBuildScalar:
    def test_scalar_is_frozen_and_cached(self) -> None:
        registry = TypeRegistry()
        declaration = ScalarDeclaration(name="JSON")
        descriptor = build_scalar(declaration, registry)
        assert isinstance(descriptor, FrozenType)
        assert build_scalar(declaration, registry) is descriptor
