# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""GraphQL Models: runtime-checked data models compiled from GraphQL schemas."""

from graphql_models.compiler import GraphQLSyntaxError, compile_declarations, compile_schema
from graphql_models.config import CompileConfig, ConfigError, TypeConfig, load_compile_config
from graphql_models.runtime import ConversionError, TypeDescriptor, get_snapshot

__all__ = [
    "compile_schema",
    "compile_declarations",
    "GraphQLSyntaxError",
    "CompileConfig",
    "TypeConfig",
    "ConfigError",
    "load_compile_config",
    "TypeDescriptor",
    "ConversionError",
    "get_snapshot",
]
