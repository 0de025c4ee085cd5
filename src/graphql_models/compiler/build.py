# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compilation driver: a GraphQL schema becomes a mapping of type descriptors.

Declarations are compiled in a fixed order (input types, object types, unions,
enums). Interfaces and custom scalars are compiled on demand when a field, a
union or an ``implements`` clause reaches them, so the result only holds the
declarations that were reached. Each call owns its registry; nothing is shared
between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from graphql import Source
from graphql.language import DocumentNode

from graphql_models.compiler.builders import build_enum, build_scalar, build_union
from graphql_models.compiler.fields import resolve_field
from graphql_models.compiler.mapper import TypeMapper
from graphql_models.compiler.parser import parse
from graphql_models.compiler.registry import TypeRegistry
from graphql_models.config import CompileConfig, coerce_config
from graphql_models.model.declarations import (
    Declaration,
    EnumDeclaration,
    FieldDeclaration,
    InputObjectDeclaration,
    InterfaceDeclaration,
    ObjectDeclaration,
    ReferencedKind,
    ScalarDeclaration,
    SchemaDeclarations,
    UnionDeclaration,
)
from graphql_models.runtime.types import ModelType, TypeDescriptor

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def compile_schema(
    source: str | Source | DocumentNode,
    config: CompileConfig | Mapping[str, Any] | None = None,
) -> dict[str, TypeDescriptor]:
    """Compile a GraphQL schema into runtime type descriptors.

    Args:
        source: Schema text, a :class:`graphql.Source`, or an already parsed
            document.
        config: Per-type settings, either a :class:`CompileConfig` or a plain
            mapping such as ``{"User": {"identifier": "email"}}``.

    Returns:
        A mapping from declared type name to its descriptor, in compilation
        order.

    Raises:
        graphql.GraphQLSyntaxError: If the schema text is malformed. The error
            is raised before any compilation work starts.
        ConfigError: If *config* is a mapping with the wrong shape.
    """
    declarations = parse(source)
    return compile_declarations(declarations, config)


def compile_declarations(
    declarations: SchemaDeclarations,
    config: CompileConfig | Mapping[str, Any] | None = None,
) -> dict[str, TypeDescriptor]:
    """Compile already extracted declarations. See :func:`compile_schema`.

    Fields whose referenced kind is unknown, as in hand-built declarations, are
    resolved against *declarations* first. The input is not modified.
    """
    resolved = declarations.with_referenced_kinds()
    compiled = _SchemaCompiler(resolved, coerce_config(config)).compile()
    logger.debug("Compiled %d type(s)", len(compiled))
    return compiled


# ################
# Implementation
# ################


class _SchemaCompiler:
    """Holds the registry of one compilation and dispatches on declaration kind."""

    def __init__(self, declarations: SchemaDeclarations, config: CompileConfig) -> None:
        self._declarations = declarations
        self._registry = TypeRegistry()
        self._mapper = TypeMapper(self._registry, config, self._resolve_field, self._find_interface)

    def compile(self) -> dict[str, TypeDescriptor]:
        for input_object in self._declarations.inputs:
            self._compile(input_object)
        for object_type in self._declarations.objects:
            self._compile(object_type)
        for union in self._declarations.unions:
            self._compile(union)
        for enum in self._declarations.enums:
            self._compile(enum)
        return self._registry.as_dict()

    def _compile(self, declaration: Declaration) -> TypeDescriptor:
        if isinstance(declaration, (ObjectDeclaration, InputObjectDeclaration, InterfaceDeclaration)):
            return self._mapper.map(declaration)
        if isinstance(declaration, UnionDeclaration):
            return build_union(declaration, self._registry, self._resolve_union_member)
        if isinstance(declaration, EnumDeclaration):
            return build_enum(declaration, self._registry)
        if isinstance(declaration, ScalarDeclaration):
            return build_scalar(declaration, self._registry)
        raise TypeError(f"Unsupported declaration: {declaration!r}")

    # ------------------------------------------------------------------
    # Lookups handed to the mapper and builders
    # ------------------------------------------------------------------

    def _resolve_field(self, field: FieldDeclaration) -> TypeDescriptor | None:
        return resolve_field(field, self._resolve_named)

    def _resolve_named(self, name: str, kind: ReferencedKind) -> TypeDescriptor | None:
        declaration = self._declarations.find(name, kind=kind.value)
        if declaration is None:
            return None
        return self._compile(declaration)

    def _resolve_union_member(self, name: str) -> ModelType | None:
        declaration = self._declarations.find(name, kind="object")
        if declaration is None:
            return None
        descriptor = self._compile(declaration)
        return descriptor if isinstance(descriptor, ModelType) else None

    def _find_interface(self, name: str) -> InterfaceDeclaration | None:
        declaration = self._declarations.find(name, kind="interface")
        return declaration if isinstance(declaration, InterfaceDeclaration) else None
