# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration model for GraphQL schemas (types, interfaces, unions, enums, etc.)."""

from graphql_models.model.declarations import (
    BUILTIN_SCALARS,
    Declaration,
    EnumDeclaration,
    FieldDeclaration,
    InputObjectDeclaration,
    InterfaceDeclaration,
    ListTypeRef,
    ModelDeclaration,
    NamedTypeRef,
    NonNullTypeRef,
    ObjectDeclaration,
    ReferencedKind,
    ScalarDeclaration,
    SchemaDeclarations,
    TypeRef,
    UnionDeclaration,
)

__all__ = [
    # Field types
    "NamedTypeRef",
    "ListTypeRef",
    "NonNullTypeRef",
    "TypeRef",
    "ReferencedKind",
    "BUILTIN_SCALARS",
    "FieldDeclaration",
    # Declarations
    "ObjectDeclaration",
    "InterfaceDeclaration",
    "InputObjectDeclaration",
    "UnionDeclaration",
    "EnumDeclaration",
    "ScalarDeclaration",
    "Declaration",
    "ModelDeclaration",
    "SchemaDeclarations",
]
