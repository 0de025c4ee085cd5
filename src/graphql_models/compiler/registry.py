# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-compilation cache from declared type names to compiled descriptors."""

from __future__ import annotations

from collections.abc import ItemsView

from graphql_models.runtime.types import TypeDescriptor

# ###############
# Public Interface
# ###############


class RegistryError(Exception):
    """Raised when the registry is used inconsistently (a programming error)."""


class TypeRegistry:
    """Maps declared names to descriptors, each name compiled at most once.

    Builders register a descriptor before resolving the types it refers to,
    so a recursive reference finds the (still incomplete) descriptor instead
    of compiling the declaration again.
    """

    def __init__(self) -> None:
        self._entries: dict[str, TypeDescriptor] = {}

    def get(self, name: str) -> TypeDescriptor | None:
        return self._entries.get(name)

    def set(self, name: str, descriptor: TypeDescriptor) -> None:
        """Register *descriptor* under *name*.

        Raises:
            RegistryError: If *name* is already registered.
        """
        if name in self._entries:
            raise RegistryError(f"Type '{name}' is already registered")
        self._entries[name] = descriptor

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> ItemsView[str, TypeDescriptor]:
        return self._entries.items()

    def as_dict(self) -> dict[str, TypeDescriptor]:
        """Return a copy of the entries in registration order."""
        return dict(self._entries)
