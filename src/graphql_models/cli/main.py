# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the graphql-models command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from graphql import GraphQLSyntaxError

from graphql_models.compiler.build import compile_schema
from graphql_models.compiler.summary import serialize
from graphql_models.config import CompileConfig, ConfigError, load_compile_config
from graphql_models.runtime.types import (
    ConversionError,
    EnumerationType,
    ModelType,
    TypeDescriptor,
    UnionType,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the graphql-models CLI."""
    parser = argparse.ArgumentParser(
        prog="graphql-models",
        description="graphql-models: runtime-checked data models compiled from GraphQL schemas",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log compiler diagnostics to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # compile subcommand
    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile a schema and list the resulting types",
        description="Compile a GraphQL schema file and print the compiled type descriptors.",
    )
    compile_parser.add_argument("schema", help="Path to a .graphql schema file")
    compile_parser.add_argument(
        "--config",
        help="YAML file with per-type settings (e.g. identifier fields)",
    )
    compile_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary instead of one line per type",
    )

    # validate subcommand
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a JSON document against a compiled type",
        description="Build an instance of a compiled type from a JSON file and report conversion errors.",
    )
    validate_parser.add_argument("schema", help="Path to a .graphql schema file")
    validate_parser.add_argument("type", help="Name of the type to build")
    validate_parser.add_argument("data", help="Path to a JSON file holding the instance data")
    validate_parser.add_argument(
        "--config",
        help="YAML file with per-type settings (e.g. identifier fields)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "compile":
        return _cmd_compile(args)
    if args.command == "validate":
        return _cmd_validate(args)
    return 0


def _cmd_compile(args: argparse.Namespace) -> int:
    """Handle the compile subcommand."""
    compiled = _compile(args)
    if compiled is None:
        return 1

    if args.json:
        print(serialize(compiled))
        return 0

    if not compiled:
        print("No types found in the schema.")
        return 0

    for name, descriptor in compiled.items():
        print(f"{name}: {_describe(descriptor)}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate subcommand."""
    compiled = _compile(args)
    if compiled is None:
        return 1

    descriptor = compiled.get(args.type)
    if descriptor is None:
        print(f"Error: type '{args.type}' is not defined by the schema.", file=sys.stderr)
        return 1

    data_path = Path(args.data)
    try:
        data = json.loads(data_path.read_text(encoding="utf-8"))
    except OSError as exc:
        print(f"Error: cannot read data file: {exc}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"Error: invalid JSON in '{data_path}': {exc}", file=sys.stderr)
        return 1

    try:
        descriptor.create(data)
    except ConversionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Valid.")
    return 0


def _compile(args: argparse.Namespace) -> dict[str, TypeDescriptor] | None:
    """Load the config and schema named by *args* and compile them.

    Returns None after reporting an error on stderr.
    """
    config = CompileConfig()
    if args.config:
        try:
            config = load_compile_config(Path(args.config))
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None

    schema_path = Path(args.schema)
    try:
        source = schema_path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read schema file: {exc}", file=sys.stderr)
        return None

    try:
        return compile_schema(source, config)
    except GraphQLSyntaxError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return None


def _describe(descriptor: TypeDescriptor) -> str:
    """One-line description of a compiled descriptor."""
    if isinstance(descriptor, ModelType):
        properties = ", ".join(f"{key}: {value.name}" for key, value in descriptor.properties.items())
        return f"model {{{properties}}}"
    if isinstance(descriptor, EnumerationType):
        return f"enum {{{', '.join(descriptor.values)}}}"
    if isinstance(descriptor, UnionType):
        return f"union {descriptor.name}"
    return descriptor.name
