# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema parser adapter.

Parses GraphQL SDL with graphql-core and converts the type-system definitions
of the document into a :class:`SchemaDeclarations` model. Syntax errors are
raised by graphql-core as :class:`graphql.GraphQLSyntaxError` and are not
caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from graphql import Source
from graphql import parse as parse_document
from graphql.language import (
    DefinitionNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    InputObjectTypeDefinitionNode,
    InterfaceTypeDefinitionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ScalarTypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
)

from graphql_models.model.declarations import (
    Declaration,
    EnumDeclaration,
    FieldDeclaration,
    InputObjectDeclaration,
    InterfaceDeclaration,
    ListTypeRef,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectDeclaration,
    ScalarDeclaration,
    SchemaDeclarations,
    TypeRef,
    UnionDeclaration,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def parse(source: str | Source | DocumentNode) -> SchemaDeclarations:
    """Parse a GraphQL schema into its declarations.

    Args:
        source: Schema text, a :class:`graphql.Source`, or a document that was
            already parsed with graphql-core.

    Returns:
        The declarations of the document, grouped by category. Definitions that
        do not declare a type (schema definitions, extensions, directives,
        operations) are skipped.

    Raises:
        graphql.GraphQLSyntaxError: If the schema text is malformed.
    """
    document = source if isinstance(source, DocumentNode) else parse_document(source)
    return _DeclarationReader(document).read()


# ################
# Implementation
# ################


class _DeclarationReader:
    """Converts the type definitions of one document into declarations."""

    def __init__(self, document: DocumentNode) -> None:
        self._document = document
        self._readers: dict[str, Callable[[DefinitionNode], Declaration]] = {
            "object_type_definition": self._read_object,
            "input_object_type_definition": self._read_input_object,
            "interface_type_definition": self._read_interface,
            "union_type_definition": self._read_union,
            "enum_type_definition": self._read_enum,
            "scalar_type_definition": self._read_scalar,
        }

    def read(self) -> SchemaDeclarations:
        result = SchemaDeclarations()
        for definition in self._document.definitions:
            reader = self._readers.get(definition.kind)
            if reader is None:
                logger.debug("Skipping unsupported definition '%s'", definition.kind)
                continue
            result.add(reader(definition))
        # Field kinds need every declared name, so they are filled in last.
        return result.with_referenced_kinds()

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    def _read_object(self, node: ObjectTypeDefinitionNode) -> ObjectDeclaration:
        return ObjectDeclaration(
            name=node.name.value,
            fields=[self._read_field(f.name.value, f.type) for f in node.fields or ()],
            interfaces=[i.name.value for i in node.interfaces or ()],
        )

    def _read_interface(self, node: InterfaceTypeDefinitionNode) -> InterfaceDeclaration:
        return InterfaceDeclaration(
            name=node.name.value,
            fields=[self._read_field(f.name.value, f.type) for f in node.fields or ()],
            interfaces=[i.name.value for i in node.interfaces or ()],
        )

    def _read_input_object(self, node: InputObjectTypeDefinitionNode) -> InputObjectDeclaration:
        return InputObjectDeclaration(
            name=node.name.value,
            fields=[self._read_field(f.name.value, f.type) for f in node.fields or ()],
        )

    def _read_union(self, node: UnionTypeDefinitionNode) -> UnionDeclaration:
        return UnionDeclaration(
            name=node.name.value,
            members=[t.name.value for t in node.types or ()],
        )

    def _read_enum(self, node: EnumTypeDefinitionNode) -> EnumDeclaration:
        return EnumDeclaration(
            name=node.name.value,
            values=[v.name.value for v in node.values or ()],
        )

    def _read_scalar(self, node: ScalarTypeDefinitionNode) -> ScalarDeclaration:
        return ScalarDeclaration(name=node.name.value)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def _read_field(self, name: str, type_node: TypeNode) -> FieldDeclaration:
        return FieldDeclaration(name=name, type=_read_type(type_node))


def _read_type(node: TypeNode) -> TypeRef:
    """Convert a graphql-core type node into a TypeRef tree."""
    if isinstance(node, NonNullTypeNode):
        return NonNullTypeRef(inner_type=_read_type(node.type))
    if isinstance(node, ListTypeNode):
        return ListTypeRef(item_type=_read_type(node.type))
    if isinstance(node, NamedTypeNode):
        return NamedTypeRef(name=node.name.value)
    raise TypeError(f"Unexpected type node: {node!r}")
