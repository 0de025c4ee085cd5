# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the schema declaration model."""

from graphql_models.model import (
    EnumDeclaration,
    FieldDeclaration,
    InputObjectDeclaration,
    InterfaceDeclaration,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectDeclaration,
    ReferencedKind,
    ScalarDeclaration,
    SchemaDeclarations,
    UnionDeclaration,
)

# ###############
# Field declarations
# ###############


class TestFieldDeclaration:
    def test_defaults(self) -> None:
        field = FieldDeclaration(name="f", type=NamedTypeRef(name="Thing"))
        assert field.referenced_kind is ReferencedKind.UNKNOWN
        assert field.type_name == "Thing"
        assert not field.is_identifier_candidate

    def test_type_tree_round_trips_through_dicts(self) -> None:
        field = FieldDeclaration.model_validate(
            {
                "name": "f",
                "type": {
                    "kind": "list",
                    "item_type": {"kind": "non_null", "inner_type": {"kind": "named", "name": "ID"}},
                },
                "referenced_kind": "identifier",
            }
        )
        assert isinstance(field.type, ListTypeRef)
        assert isinstance(field.type.item_type, NonNullTypeRef)
        assert field.type_name == "ID"
        assert field.item_is_required
        assert not field.is_identifier_candidate

    def test_required_id_is_identifier_candidate(self) -> None:
        field = FieldDeclaration(
            name="id",
            type=NonNullTypeRef(inner_type=NamedTypeRef(name="ID")),
            referenced_kind=ReferencedKind.IDENTIFIER,
        )
        assert field.is_identifier_candidate
        assert field.is_required
        assert not field.list_is_required


# ###############
# Schema declarations
# ###############


class TestSchemaDeclarations:
    def test_add_sorts_by_category(self) -> None:
        schema = SchemaDeclarations()
        schema.add(ScalarDeclaration(name="S"))
        schema.add(ObjectDeclaration(name="O"))
        schema.add(EnumDeclaration(name="E", values=["A"]))
        schema.add(InputObjectDeclaration(name="I"))
        schema.add(InterfaceDeclaration(name="F"))
        schema.add(UnionDeclaration(name="U", members=["O"]))
        assert [d.name for d in schema.all()] == ["O", "I", "F", "U", "E", "S"]

    def test_find_first_match_wins(self) -> None:
        schema = SchemaDeclarations()
        first = ObjectDeclaration(name="Dup")
        schema.add(first)
        schema.add(ObjectDeclaration(name="Dup", interfaces=["X"]))
        assert schema.find("Dup") is first

    def test_kind_of(self) -> None:
        schema = SchemaDeclarations(
            objects=[ObjectDeclaration(name="O")],
            inputs=[InputObjectDeclaration(name="I")],
            scalars=[ScalarDeclaration(name="S")],
        )
        assert schema.kind_of("String") is ReferencedKind.PRIMITIVE
        assert schema.kind_of("ID") is ReferencedKind.IDENTIFIER
        assert schema.kind_of("O") is ReferencedKind.OBJECT
        assert schema.kind_of("I") is ReferencedKind.INPUT
        assert schema.kind_of("S") is ReferencedKind.SCALAR
        assert schema.kind_of("Missing") is ReferencedKind.UNKNOWN

    def test_with_referenced_kinds_fills_only_unknown_fields(self) -> None:
        schema = SchemaDeclarations(
            objects=[
                ObjectDeclaration(
                    name="O",
                    fields=[
                        FieldDeclaration(name="a", type=NamedTypeRef(name="Int")),
                        FieldDeclaration(name="b", type=NamedTypeRef(name="O"), referenced_kind=ReferencedKind.SCALAR),
                    ],
                )
            ],
            interfaces=[
                InterfaceDeclaration(name="F", fields=[FieldDeclaration(name="o", type=NamedTypeRef(name="O"))]),
            ],
        )
        resolved = schema.with_referenced_kinds()
        kinds = [f.referenced_kind for f in resolved.objects[0].fields]
        assert kinds == [ReferencedKind.PRIMITIVE, ReferencedKind.SCALAR]
        assert resolved.interfaces[0].fields[0].referenced_kind is ReferencedKind.OBJECT
        assert schema.objects[0].fields[0].referenced_kind is ReferencedKind.UNKNOWN

    def test_input_has_no_interfaces(self) -> None:
        assert InputObjectDeclaration(name="I").interfaces == []
