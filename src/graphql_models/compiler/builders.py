# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Builders for enum, union and scalar declarations."""

from __future__ import annotations

import logging
from collections.abc import Callable

from graphql_models.compiler.registry import TypeRegistry
from graphql_models.model.declarations import EnumDeclaration, ScalarDeclaration, UnionDeclaration
from graphql_models.runtime.types import (
    ModelType,
    TypeDescriptor,
    UnionType,
    enumeration,
    frozen,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def build_enum(declaration: EnumDeclaration, registry: TypeRegistry) -> TypeDescriptor:
    """Compile an enum into a closed set of its member names."""
    cached = registry.get(declaration.name)
    if cached is not None:
        return cached
    descriptor = enumeration(declaration.name, declaration.values)
    registry.set(declaration.name, descriptor)
    return descriptor


def build_union(
    declaration: UnionDeclaration,
    registry: TypeRegistry,
    resolve_member: Callable[[str], ModelType | None],
) -> TypeDescriptor:
    """Compile a union over the models of its object-type members.

    The union is registered before its members are resolved so that a member
    referring back to the union gets this same descriptor.

    Args:
        declaration: The union declaration.
        registry: Registry of the running compilation.
        resolve_member: Compiles an object type by name; returns None for names
            that are not object types. Such members are skipped.
    """
    cached = registry.get(declaration.name)
    if cached is not None:
        return cached

    descriptor = UnionType(name=declaration.name)
    registry.set(declaration.name, descriptor)

    alternatives: list[ModelType] = []
    for member in declaration.members:
        model = resolve_member(member)
        if model is None:
            logger.debug("Skipping member '%s' of union '%s': not an object type", member, declaration.name)
            continue
        alternatives.append(model)

    descriptor.define(alternatives)
    return descriptor.seal()


def build_scalar(declaration: ScalarDeclaration, registry: TypeRegistry) -> TypeDescriptor:
    """Custom scalars are opaque: their values are passed through unchecked."""
    cached = registry.get(declaration.name)
    if cached is not None:
        return cached
    descriptor = frozen()
    registry.set(declaration.name, descriptor)
    return descriptor
