# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime type descriptors backed by pydantic validation.

Each descriptor knows its printable ``name`` and exposes a pydantic-compatible
``annotation``. Construction (``create``) runs pydantic validation and turns
failures into :class:`ConversionError`. Models and unions can be declared empty
and filled in later so that cyclic type graphs share descriptor identity.
"""

from __future__ import annotations

import keyword
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Annotated, Any, ClassVar, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    PlainValidator,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    create_model,
)
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ConversionError(ValueError):
    """Raised when a value cannot be converted into an instance of a descriptor.

    Attributes:
        value: The rejected input value.
        type_name: Name of the descriptor that rejected it.
    """

    def __init__(self, value: Any, type_name: str, detail: object) -> None:
        super().__init__(f"Error while converting {value!r} to `{type_name}`:\n{detail}")
        self.value = value
        self.type_name = type_name


class TypeDescriptor:
    """Base class of every compiled runtime type."""

    kind: str = ""

    def __init__(self) -> None:
        self._type_adapter: TypeAdapter[Any] | None = None

    @property
    def name(self) -> str:
        raise NotImplementedError

    @property
    def annotation(self) -> Any:
        """The pydantic annotation used when this descriptor is embedded in another."""
        raise NotImplementedError

    def create(self, value: Any = None) -> Any:
        """Validate *value* and return the constructed instance.

        Raises:
            ConversionError: If *value* does not satisfy this descriptor.
        """
        try:
            return self._adapter().validate_python(value)
        except ValidationError as exc:
            raise ConversionError(value, self.name, exc) from exc

    def is_valid(self, value: Any) -> bool:
        """Return True if *value* would be accepted by :meth:`create`."""
        try:
            self._adapter().validate_python(value)
        except ValidationError:
            return False
        return True

    def _adapter(self) -> TypeAdapter[Any]:
        if self._type_adapter is None:
            self._type_adapter = TypeAdapter(self._validation_type())
        return self._type_adapter

    def _validation_type(self) -> Any:
        return self.annotation

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class PrimitiveType(TypeDescriptor):
    """A built-in scalar: ``string``, ``number`` or ``boolean``."""

    kind = "primitive"

    def __init__(self, name: str, annotation: Any) -> None:
        super().__init__()
        self._name = name
        self._annotation = annotation

    @property
    def name(self) -> str:
        return self._name

    @property
    def annotation(self) -> Any:
        return self._annotation


class IdentifierType(TypeDescriptor):
    """A string field whose value identifies its model inside a collection."""

    kind = "identifier"

    @property
    def name(self) -> str:
        return "identifier"

    @property
    def annotation(self) -> Any:
        return StrictStr


class FrozenType(TypeDescriptor):
    """An opaque value that is passed through without structural validation."""

    kind = "frozen"

    @property
    def name(self) -> str:
        return "frozen"

    @property
    def annotation(self) -> Any:
        return Any


class MaybeNullType(TypeDescriptor):
    """Accepts ``None`` in addition to the values of the wrapped descriptor."""

    kind = "maybe_null"

    def __init__(self, inner: TypeDescriptor) -> None:
        super().__init__()
        self.inner = inner

    @property
    def name(self) -> str:
        return f"({self.inner.name} | null)"

    @property
    def annotation(self) -> Any:
        return Optional[self.inner.annotation]


class ArrayType(TypeDescriptor):
    """A homogeneous list of values of the item descriptor."""

    kind = "array"

    def __init__(self, item: TypeDescriptor) -> None:
        super().__init__()
        self.item = item

    @property
    def name(self) -> str:
        return f"{self.item.name}[]"

    @property
    def annotation(self) -> Any:
        return List[self.item.annotation]


class EnumerationType(TypeDescriptor):
    """A closed set of strings. Instances are the member strings themselves."""

    kind = "enumeration"

    def __init__(self, name: str, values: Iterable[str]) -> None:
        super().__init__()
        self._name = name
        self.values: tuple[str, ...] = tuple(values)

    @property
    def name(self) -> str:
        return self._name

    @property
    def annotation(self) -> Any:
        if not self.values:
            return Annotated[Any, PlainValidator(self._reject)]
        return Literal[self.values]

    def _reject(self, value: Any) -> Any:
        raise ValueError(f"enumeration '{self._name}' has no members")


class ModelType(TypeDescriptor):
    """A named record with an ordered mapping of property descriptors.

    A model may be created empty and completed later with :meth:`define`;
    it becomes immutable once :meth:`seal` is called. Instances are pydantic
    models built lazily from the sealed properties. Unknown keys are rejected,
    which lets unions tell alternatives apart by shape.
    """

    kind = "model"

    def __init__(self, name: str, properties: Mapping[str, TypeDescriptor] | None = None) -> None:
        super().__init__()
        self._name = name
        self._properties: dict[str, TypeDescriptor] = {}
        self._sealed = False
        self._model_class: type[BaseModel] | None = None
        if properties:
            self.define(properties)

    @property
    def name(self) -> str:
        return self._name

    @property
    def properties(self) -> Mapping[str, TypeDescriptor]:
        return MappingProxyType(self._properties)

    @property
    def identifier_attribute(self) -> str | None:
        """Name of the property typed as ``identifier``, if any."""
        for key, descriptor in self._properties.items():
            if isinstance(descriptor, IdentifierType):
                return key
        return None

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def define(self, properties: Mapping[str, TypeDescriptor]) -> None:
        """Replace the properties of a model that is still under construction.

        Raises:
            RuntimeError: If the model has already been sealed.
            ValueError: If more than one property is typed as ``identifier``.
        """
        if self._sealed:
            raise RuntimeError(f"Model '{self._name}' is sealed and cannot be redefined")
        identifiers = [key for key, d in properties.items() if isinstance(d, IdentifierType)]
        if len(identifiers) > 1:
            raise ValueError(
                f"Model '{self._name}' declares more than one identifier: {', '.join(identifiers)}"
            )
        self._properties = dict(properties)

    def seal(self) -> ModelType:
        self._sealed = True
        return self

    @property
    def model_class(self) -> type[BaseModel]:
        """The pydantic model class that validates instances of this model."""
        if not self._sealed:
            raise RuntimeError(f"Model '{self._name}' is still being compiled")
        if self._model_class is None:
            self._model_class = _build_model_class(self._name, self._properties)
        return self._model_class

    def attribute_name(self, key: str) -> str:
        """Return the instance attribute holding schema field *key*.

        Field names that clash with Python keywords, pydantic internals or
        private names are stored under a suffixed attribute and aliased back.
        """
        return _attribute_names(self._properties)[key]

    @property
    def annotation(self) -> Any:
        return Annotated[Any, PlainValidator(self._validate_embedded)]

    def create(self, value: Any = None) -> Any:
        # An omitted snapshot builds the model from its defaults.
        return super().create({} if value is None else value)

    def _validation_type(self) -> Any:
        return self.model_class

    def _validate_embedded(self, value: Any) -> BaseModel:
        try:
            return self.model_class.model_validate(value)
        except ValidationError as exc:
            raise ValueError(f"not a valid `{self._name}`: {exc}") from exc


class UnionType(TypeDescriptor):
    """Accepts a value of any one of its alternative descriptors.

    An instance of an alternative model is matched by class. Raw data is
    tried against the alternatives in order and the first one that accepts
    it wins.
    """

    kind = "union"

    def __init__(self, types: Iterable[TypeDescriptor] = (), *, name: str | None = None) -> None:
        super().__init__()
        self._declared_name = name
        self._types: tuple[TypeDescriptor, ...] = tuple(types)
        self._sealed = False

    @property
    def name(self) -> str:
        return "(" + " | ".join(t.name for t in self._types) + ")"

    @property
    def declared_name(self) -> str | None:
        """The schema name of the union, when it was compiled from a declaration."""
        return self._declared_name

    @property
    def types(self) -> tuple[TypeDescriptor, ...]:
        return self._types

    def define(self, types: Iterable[TypeDescriptor]) -> None:
        if self._sealed:
            raise RuntimeError(f"Union '{self.name}' is sealed and cannot be redefined")
        self._types = tuple(types)

    def seal(self) -> UnionType:
        self._sealed = True
        return self

    @property
    def annotation(self) -> Any:
        return Annotated[Any, PlainValidator(self._validate_member)]

    def _validate_member(self, value: Any) -> Any:
        for alternative in self._types:
            if isinstance(alternative, ModelType) and isinstance(value, alternative.model_class):
                return value
        for alternative in self._types:
            try:
                return alternative._adapter().validate_python(value)
            except ValidationError:
                continue
        raise ValueError(f"value does not match any alternative of {self.name}")


class MapType(TypeDescriptor):
    """A string-keyed collection of model instances.

    When the model has an identifier, entries are keyed by it: a list of
    snapshots is indexed by identifier, and mapping keys must agree with the
    identifier of their value. Identifiers must be unique in the collection.
    """

    kind = "map"

    def __init__(self, model: ModelType) -> None:
        super().__init__()
        self.model = model

    @property
    def name(self) -> str:
        return f"Map<string, {self.model.name}>"

    @property
    def annotation(self) -> Any:
        return Annotated[Any, PlainValidator(self._build)]

    def _build(self, value: Any) -> dict[str, BaseModel]:
        key_attribute = self.model.identifier_attribute
        if isinstance(value, Mapping):
            entries = [(key, item) for key, item in value.items()]
        elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            if key_attribute is None:
                raise ValueError(f"`{self.model.name}` has no identifier to key a list of items by")
            entries = [(None, item) for item in value]
        else:
            raise ValueError("expected a mapping or a list of items")

        result: dict[str, BaseModel] = {}
        for key, item in entries:
            instance = self.model._validate_embedded(item)
            if key_attribute is not None:
                identifier = getattr(instance, self.model.attribute_name(key_attribute))
                if key is not None and key != identifier:
                    raise ValueError(f"key {key!r} does not match identifier {identifier!r}")
                key = identifier
            if not isinstance(key, str):
                raise ValueError(f"map keys must be strings, got {key!r}")
            if key in result:
                raise ValueError(f"duplicate identifier {key!r}")
            result[key] = instance
        return result


string = PrimitiveType("string", StrictStr)
number = PrimitiveType("number", Union[StrictInt, StrictFloat])
boolean = PrimitiveType("boolean", StrictBool)
identifier = IdentifierType()


def frozen() -> FrozenType:
    return FrozenType()


def maybe_null(inner: TypeDescriptor) -> MaybeNullType:
    return MaybeNullType(inner)


def array(item: TypeDescriptor) -> ArrayType:
    return ArrayType(item)


def enumeration(name: str, values: Iterable[str]) -> EnumerationType:
    return EnumerationType(name, values)


def model(name: str, properties: Mapping[str, TypeDescriptor] | None = None) -> ModelType:
    """Create a sealed model with the given properties."""
    return ModelType(name, properties).seal()


def union(*types: TypeDescriptor, name: str | None = None) -> UnionType:
    return UnionType(types, name=name).seal()


def map_of(model_type: ModelType) -> MapType:
    return MapType(model_type)


def get_snapshot(value: Any) -> Any:
    """Convert a constructed instance back into plain data keyed by schema names."""
    if isinstance(value, BaseModel):
        attributes = getattr(type(value), "__graphql_attributes__", None)
        if attributes is None:
            return value.model_dump(by_alias=True)
        return {key: get_snapshot(getattr(value, attr)) for key, attr in attributes.items()}
    if isinstance(value, Mapping):
        return {key: get_snapshot(item) for key, item in value.items()}
    if isinstance(value, list):
        return [get_snapshot(item) for item in value]
    return value


# ################
# Implementation
# ################


class _Instance(BaseModel):
    """Base class of the pydantic models generated for compiled model types."""

    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    # Schema field name -> attribute name, filled in per generated class.
    __graphql_attributes__: ClassVar[dict[str, str]] = {}


def _is_plain_attribute(key: str) -> bool:
    return (
        key.isidentifier()
        and not key.startswith("_")
        and not keyword.iskeyword(key)
        and not hasattr(_Instance, key)
    )


def _attribute_names(keys: Iterable[str]) -> dict[str, str]:
    """Map schema field names to attribute names usable on a pydantic model."""
    keys = list(keys)
    taken = {key for key in keys if _is_plain_attribute(key)}
    names: dict[str, str] = {}
    for key in keys:
        if _is_plain_attribute(key):
            names[key] = key
            continue
        name = (key.lstrip("_") or "field") + "_"
        while name in taken:
            name += "_"
        taken.add(name)
        names[key] = name
    return names


def _build_model_class(name: str, properties: Mapping[str, TypeDescriptor]) -> type[BaseModel]:
    attributes = _attribute_names(properties)
    fields: dict[str, Any] = {}
    for key, descriptor in properties.items():
        attribute = attributes[key]
        alias = key if attribute != key else None
        if isinstance(descriptor, MaybeNullType):
            fields[attribute] = (descriptor.annotation, _Field(default=None, alias=alias))
        else:
            fields[attribute] = (descriptor.annotation, _Field(alias=alias))
    model_class = create_model(name, __base__=_Instance, **fields)
    model_class.__graphql_attributes__ = attributes
    return model_class
