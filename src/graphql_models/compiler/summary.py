# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""JSON summaries of compiled descriptors.

Summaries name the types a descriptor refers to instead of embedding them, so
cyclic type graphs serialize to finite documents. The format is versioned so
future changes can be detected.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from graphql_models.runtime.types import (
    ArrayType,
    EnumerationType,
    MapType,
    MaybeNullType,
    ModelType,
    TypeDescriptor,
    UnionType,
)

# ###############
# Public Interface
# ###############

SUMMARY_FORMAT_VERSION = "1"


def summarize(descriptor: TypeDescriptor) -> dict[str, Any]:
    """Describe *descriptor* as a JSON-ready dict."""
    if isinstance(descriptor, ModelType):
        return _model_to_dict(descriptor)
    if isinstance(descriptor, EnumerationType):
        return {"kind": descriptor.kind, "name": descriptor.name, "values": list(descriptor.values)}
    if isinstance(descriptor, UnionType):
        return _union_to_dict(descriptor)
    if isinstance(descriptor, MaybeNullType):
        return {"kind": descriptor.kind, "name": descriptor.name, "inner": _reference(descriptor.inner)}
    if isinstance(descriptor, ArrayType):
        return {"kind": descriptor.kind, "name": descriptor.name, "item": _reference(descriptor.item)}
    if isinstance(descriptor, MapType):
        return {"kind": descriptor.kind, "name": descriptor.name, "model": descriptor.model.name}
    return {"kind": descriptor.kind, "name": descriptor.name}


def serialize(types: Mapping[str, TypeDescriptor]) -> str:
    """Serialize a compiled schema to an indented JSON string."""
    document = {
        "v": SUMMARY_FORMAT_VERSION,
        "types": {name: summarize(descriptor) for name, descriptor in types.items()},
    }
    return json.dumps(document, indent=2)


# ################
# Implementation
# ################


def _model_to_dict(model: ModelType) -> dict[str, Any]:
    d: dict[str, Any] = {
        "kind": model.kind,
        "name": model.name,
        "properties": {key: value.name for key, value in model.properties.items()},
    }
    if model.identifier_attribute is not None:
        d["identifier"] = model.identifier_attribute
    return d


def _union_to_dict(union: UnionType) -> dict[str, Any]:
    d: dict[str, Any] = {
        "kind": union.kind,
        "name": union.name,
        "types": [t.name for t in union.types],
    }
    if union.declared_name is not None:
        d["declared_name"] = union.declared_name
    return d


def _reference(descriptor: TypeDescriptor) -> dict[str, Any]:
    # Named types are referenced by name; wrappers are expanded.
    if isinstance(descriptor, (ModelType, UnionType, EnumerationType)):
        return {"kind": descriptor.kind, "name": descriptor.name}
    return summarize(descriptor)
