# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema compiler: parsing, field resolution, model mapping and the driver."""

from graphql import GraphQLSyntaxError

from graphql_models.compiler.build import compile_declarations, compile_schema
from graphql_models.compiler.parser import parse
from graphql_models.compiler.registry import RegistryError, TypeRegistry
from graphql_models.compiler.summary import serialize, summarize

__all__ = [
    "parse",
    "GraphQLSyntaxError",
    "compile_schema",
    "compile_declarations",
    "TypeRegistry",
    "RegistryError",
    "summarize",
    "serialize",
]
