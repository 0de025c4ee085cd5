# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type mapper: object, input and interface declarations become models.

A model is registered as an empty placeholder before any of its fields are
resolved, then filled in place and sealed. Every reference to the type, even
one made while the type is still being compiled, shares that one descriptor.

Implemented interfaces are flattened into the model: interface fields come
first, the type's own fields override them on a name collision. A model has at
most one identifier. Own fields get the first claim on it; the ``ID`` fields of
interfaces are decided again in the context of the implementing type and fall
back to plain strings when the identifier is already taken.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from graphql_models.compiler.fields import plain_identifier
from graphql_models.compiler.registry import TypeRegistry
from graphql_models.config import CompileConfig, TypeConfig
from graphql_models.model.declarations import (
    FieldDeclaration,
    InterfaceDeclaration,
    ModelDeclaration,
)
from graphql_models.runtime.types import ModelType, TypeDescriptor, identifier

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class TypeMapper:
    """Compiles model declarations against one registry and configuration."""

    def __init__(
        self,
        registry: TypeRegistry,
        config: CompileConfig,
        resolve_field: Callable[[FieldDeclaration], TypeDescriptor | None],
        find_interface: Callable[[str], InterfaceDeclaration | None],
    ) -> None:
        self._registry = registry
        self._config = config
        self._resolve_field = resolve_field
        self._find_interface = find_interface

    def map(self, declaration: ModelDeclaration) -> TypeDescriptor:
        """Compile *declaration*, or return the descriptor already registered for it."""
        cached = self._registry.get(declaration.name)
        if cached is not None:
            return cached

        model = ModelType(declaration.name)
        self._registry.set(declaration.name, model)

        claim = _IdentifierClaim(self._config.for_type(declaration.name))
        own = self._resolve_own_fields(declaration, claim)

        properties: dict[str, TypeDescriptor] = {}
        for interface_name in declaration.interfaces:
            interface = self._find_interface(interface_name)
            if interface is None:
                logger.debug("'%s' implements unknown interface '%s'", declaration.name, interface_name)
                continue
            # The interface may still be a placeholder here, so its fields are
            # resolved from the declaration rather than read from its model.
            self.map(interface)
            properties.update(self._inherit(interface, own, claim))
        properties.update(own)

        model.define(properties)
        return model.seal()

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def _resolve_own_fields(
        self, declaration: ModelDeclaration, claim: _IdentifierClaim
    ) -> dict[str, TypeDescriptor]:
        resolved: dict[str, TypeDescriptor] = {}
        for field in declaration.fields:
            if field.is_identifier_candidate:
                resolved[field.name] = _identifier_or_string(field, claim)
                continue
            descriptor = self._resolve_field(field)
            if descriptor is not None:
                resolved[field.name] = descriptor
        return resolved

    def _inherit(
        self,
        interface: InterfaceDeclaration,
        own: dict[str, TypeDescriptor],
        claim: _IdentifierClaim,
    ) -> dict[str, TypeDescriptor]:
        """Resolve the fields of *interface* in the context of the implementing type.

        Fields the type overrides keep their position but take the type's own
        descriptor, so they never compete for the identifier.
        """
        inherited: dict[str, TypeDescriptor] = {}
        for field in self._declared_fields(interface, set()).values():
            if field.name in own:
                inherited[field.name] = own[field.name]
                continue
            if field.is_identifier_candidate:
                descriptor: TypeDescriptor | None = _identifier_or_string(field, claim)
            else:
                descriptor = self._resolve_field(field)
            if descriptor is not None:
                inherited[field.name] = descriptor
        return inherited

    def _declared_fields(self, interface: InterfaceDeclaration, seen: set[str]) -> dict[str, FieldDeclaration]:
        """Fields of *interface* including those of the interfaces it implements."""
        seen.add(interface.name)
        fields: dict[str, FieldDeclaration] = {}
        for parent_name in interface.interfaces:
            parent = self._find_interface(parent_name)
            if parent is not None and parent.name not in seen:
                fields.update(self._declared_fields(parent, seen))
        fields.update((field.name, field) for field in interface.fields)
        return fields


# ################
# Implementation
# ################


class _IdentifierClaim:
    """Tracks which field of the model being compiled holds the identifier."""

    def __init__(self, type_config: TypeConfig | None) -> None:
        self._configured = type_config is not None and type_config.has_identifier_override
        self._configured_name = type_config.identifier if type_config is not None else None
        self.holder: str | None = None

    def take(self, field_name: str) -> bool:
        """Give the identifier to *field_name* if it is still free and allowed."""
        if self.holder is not None:
            return self.holder == field_name
        if self._configured and self._configured_name != field_name:
            return False
        self.holder = field_name
        return True


def _identifier_or_string(field: FieldDeclaration, claim: _IdentifierClaim) -> TypeDescriptor:
    if claim.take(field.name):
        return identifier
    return plain_identifier(field)
