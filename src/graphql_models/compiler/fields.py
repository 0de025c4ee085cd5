# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Field resolution: a field declaration becomes a (possibly wrapped) descriptor.

The base descriptor of the field's named type is wrapped from the inside out:
every list position becomes ``array`` and every position without ``!`` becomes
``maybe_null``. ``[[String!]]!`` therefore resolves to ``(string[] | null)[]``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from graphql_models.model.declarations import (
    FieldDeclaration,
    ListTypeRef,
    NonNullTypeRef,
    ReferencedKind,
    TypeRef,
)
from graphql_models.runtime.types import TypeDescriptor, array, boolean, maybe_null, number, string

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

PRIMITIVES: dict[str, TypeDescriptor] = {
    "String": string,
    "ID": string,
    "Int": number,
    "Float": number,
    "Boolean": boolean,
}

# Compiles (or fetches) the descriptor of a declared type; None if it is unknown.
NamedTypeResolver = Callable[[str, ReferencedKind], TypeDescriptor | None]


def resolve_field(field: FieldDeclaration, resolve_named: NamedTypeResolver) -> TypeDescriptor | None:
    """Resolve *field* to its final descriptor.

    Args:
        field: The field declaration.
        resolve_named: Callback that compiles declared (non built-in) types.

    Returns:
        The descriptor, or None when the field's type cannot be resolved and
        the field should be dropped.
    """
    base = _base_descriptor(field, resolve_named)
    if base is None:
        logger.debug("Dropping field '%s': unresolved type '%s'", field.name, field.type_name)
        return None
    return _wrap(field.type, base)


def plain_identifier(field: FieldDeclaration) -> TypeDescriptor:
    """The descriptor of an ``ID`` field that is not the model's identifier."""
    return string if field.is_required else maybe_null(string)


# ################
# Implementation
# ################


def _base_descriptor(field: FieldDeclaration, resolve_named: NamedTypeResolver) -> TypeDescriptor | None:
    kind = field.referenced_kind
    if kind in (ReferencedKind.PRIMITIVE, ReferencedKind.IDENTIFIER):
        return PRIMITIVES.get(field.type_name)
    if kind is ReferencedKind.UNKNOWN:
        return None
    return resolve_named(field.type_name, kind)


def _wrap(type_ref: TypeRef, base: TypeDescriptor, nullable: bool = True) -> TypeDescriptor:
    if isinstance(type_ref, NonNullTypeRef):
        return _wrap(type_ref.inner_type, base, nullable=False)
    if isinstance(type_ref, ListTypeRef):
        descriptor = array(_wrap(type_ref.item_type, base))
    else:
        descriptor = base
    return maybe_null(descriptor) if nullable else descriptor
