# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Schema declarations extracted from a GraphQL document."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ReferencedKind(Enum):
    """Category of the named type a field refers to."""

    PRIMITIVE = "primitive"
    IDENTIFIER = "identifier"
    OBJECT = "object"
    INPUT = "input"
    INTERFACE = "interface"
    UNION = "union"
    ENUM = "enum"
    SCALAR = "scalar"
    UNKNOWN = "unknown"


# Built-in GraphQL scalars. ``ID`` is tracked separately so that models can
# pick it up as their identifier.
BUILTIN_SCALARS: dict[str, ReferencedKind] = {
    "String": ReferencedKind.PRIMITIVE,
    "Int": ReferencedKind.PRIMITIVE,
    "Float": ReferencedKind.PRIMITIVE,
    "Boolean": ReferencedKind.PRIMITIVE,
    "ID": ReferencedKind.IDENTIFIER,
}


class NamedTypeRef(BaseModel):
    """Reference to a type by name, e.g. ``String`` or ``User``."""

    kind: Literal["named"] = "named"
    name: str


class ListTypeRef(BaseModel):
    """A list position, e.g. ``[T]``."""

    kind: Literal["list"] = "list"
    item_type: TypeRef


class NonNullTypeRef(BaseModel):
    """A non-null position, e.g. ``T!``."""

    kind: Literal["non_null"] = "non_null"
    inner_type: TypeRef


# A field type: a named type wrapped in any number of list and non-null modifiers.
TypeRef = Annotated[
    NamedTypeRef | ListTypeRef | NonNullTypeRef,
    _Field(discriminator="kind"),
]


class FieldDeclaration(BaseModel):
    """A field of an object, input object or interface."""

    name: str
    type: TypeRef
    referenced_kind: ReferencedKind = ReferencedKind.UNKNOWN

    @property
    def type_name(self) -> str:
        """The innermost named type."""
        ref = self.type
        while not isinstance(ref, NamedTypeRef):
            ref = ref.inner_type if isinstance(ref, NonNullTypeRef) else ref.item_type
        return ref.name

    @property
    def is_required(self) -> bool:
        return isinstance(self.type, NonNullTypeRef)

    @property
    def is_list(self) -> bool:
        return self.list_depth > 0

    @property
    def list_depth(self) -> int:
        depth = 0
        ref = self.type
        while not isinstance(ref, NamedTypeRef):
            if isinstance(ref, ListTypeRef):
                depth += 1
                ref = ref.item_type
            else:
                ref = ref.inner_type
        return depth

    @property
    def list_is_required(self) -> bool:
        return self.is_list and self.is_required

    @property
    def item_is_required(self) -> bool:
        """True when the innermost list element is declared non-null."""
        ref = self.type
        non_null = False
        while not isinstance(ref, NamedTypeRef):
            if isinstance(ref, NonNullTypeRef):
                non_null = True
                ref = ref.inner_type
            else:
                non_null = False
                ref = ref.item_type
        return self.is_list and non_null

    @property
    def is_identifier_candidate(self) -> bool:
        """A non-list field of type ``ID`` may become the model's identifier."""
        return self.referenced_kind is ReferencedKind.IDENTIFIER and not self.is_list


class ObjectDeclaration(BaseModel):
    """``type Name implements A & B { ... }``"""

    kind: Literal["object"] = "object"
    name: str
    fields: list[FieldDeclaration] = _Field(default_factory=list)
    interfaces: list[str] = _Field(default_factory=list)


class InterfaceDeclaration(BaseModel):
    """``interface Name implements A { ... }``"""

    kind: Literal["interface"] = "interface"
    name: str
    fields: list[FieldDeclaration] = _Field(default_factory=list)
    interfaces: list[str] = _Field(default_factory=list)


class InputObjectDeclaration(BaseModel):
    """``input Name { ... }``"""

    kind: Literal["input"] = "input"
    name: str
    fields: list[FieldDeclaration] = _Field(default_factory=list)

    @property
    def interfaces(self) -> list[str]:
        return []


class UnionDeclaration(BaseModel):
    """``union Name = A | B``"""

    kind: Literal["union"] = "union"
    name: str
    members: list[str] = _Field(default_factory=list)


class EnumDeclaration(BaseModel):
    """``enum Name { A B }``"""

    kind: Literal["enum"] = "enum"
    name: str
    values: list[str] = _Field(default_factory=list)


class ScalarDeclaration(BaseModel):
    """``scalar Name``"""

    kind: Literal["scalar"] = "scalar"
    name: str


Declaration = Annotated[
    ObjectDeclaration
    | InterfaceDeclaration
    | InputObjectDeclaration
    | UnionDeclaration
    | EnumDeclaration
    | ScalarDeclaration,
    _Field(discriminator="kind"),
]

# Declarations whose fields compile into a model.
ModelDeclaration = ObjectDeclaration | InterfaceDeclaration | InputObjectDeclaration


class SchemaDeclarations(BaseModel):
    """All declarations of a schema document, grouped by category."""

    objects: list[ObjectDeclaration] = _Field(default_factory=list)
    inputs: list[InputObjectDeclaration] = _Field(default_factory=list)
    interfaces: list[InterfaceDeclaration] = _Field(default_factory=list)
    unions: list[UnionDeclaration] = _Field(default_factory=list)
    enums: list[EnumDeclaration] = _Field(default_factory=list)
    scalars: list[ScalarDeclaration] = _Field(default_factory=list)

    def all(self) -> list[Declaration]:
        return [
            *self.objects,
            *self.inputs,
            *self.interfaces,
            *self.unions,
            *self.enums,
            *self.scalars,
        ]

    def kind_of(self, name: str) -> ReferencedKind:
        """Category of the type called *name* as seen by a field that refers to it."""
        if name in BUILTIN_SCALARS:
            return BUILTIN_SCALARS[name]
        declaration = self.find(name)
        if declaration is None:
            return ReferencedKind.UNKNOWN
        return ReferencedKind(declaration.kind)

    def with_referenced_kinds(self) -> SchemaDeclarations:
        """Return a copy in which fields of unknown kind are resolved against these declarations.

        Fields that already carry a kind keep it.
        """
        resolved = self.model_copy(deep=True)
        for declaration in [*resolved.objects, *resolved.inputs, *resolved.interfaces]:
            for field in declaration.fields:
                if field.referenced_kind is ReferencedKind.UNKNOWN:
                    field.referenced_kind = resolved.kind_of(field.type_name)
        return resolved

    def find(self, name: str, *, kind: str | None = None) -> Declaration | None:
        """Return the declaration called *name*, or None.

        Args:
            name: The declared type name.
            kind: Restrict the search to one declaration kind (``"object"``,
                ``"input"``, ``"interface"``, ``"union"``, ``"enum"`` or
                ``"scalar"``).

        Categories are searched in the order of :meth:`all`; the first match wins.
        """
        for declaration in self.all():
            if declaration.name == name and (kind is None or declaration.kind == kind):
                return declaration
        return None

    def add(self, declaration: Declaration) -> None:
        """Append *declaration* to the list of its category."""
        if isinstance(declaration, ObjectDeclaration):
            self.objects.append(declaration)
        elif isinstance(declaration, InputObjectDeclaration):
            self.inputs.append(declaration)
        elif isinstance(declaration, InterfaceDeclaration):
            self.interfaces.append(declaration)
        elif isinstance(declaration, UnionDeclaration):
            self.unions.append(declaration)
        elif isinstance(declaration, EnumDeclaration):
            self.enums.append(declaration)
        elif isinstance(declaration, ScalarDeclaration):
            self.scalars.append(declaration)
        else:
            raise TypeError(f"Unsupported declaration: {declaration!r}")


# Resolve forward references for models that use TypeRef.
ListTypeRef.model_rebuild()
NonNullTypeRef.model_rebuild()
FieldDeclaration.model_rebuild()
