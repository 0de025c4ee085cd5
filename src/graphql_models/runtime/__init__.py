# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime type system targeted by the schema compiler."""

from graphql_models.runtime.types import (
    ArrayType,
    ConversionError,
    EnumerationType,
    FrozenType,
    IdentifierType,
    MapType,
    MaybeNullType,
    ModelType,
    PrimitiveType,
    TypeDescriptor,
    UnionType,
    array,
    boolean,
    enumeration,
    frozen,
    get_snapshot,
    identifier,
    map_of,
    maybe_null,
    model,
    number,
    string,
    union,
)

__all__ = [
    # Descriptor classes
    "TypeDescriptor",
    "PrimitiveType",
    "IdentifierType",
    "FrozenType",
    "MaybeNullType",
    "ArrayType",
    "EnumerationType",
    "ModelType",
    "UnionType",
    "MapType",
    "ConversionError",
    # Constructors
    "string",
    "number",
    "boolean",
    "identifier",
    "frozen",
    "maybe_null",
    "array",
    "enumeration",
    "model",
    "union",
    "map_of",
    "get_snapshot",
]
