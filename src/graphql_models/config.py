# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Per-type compilation settings and their YAML loader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, ValidationError
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class ConfigError(Exception):
    """Raised when a compile configuration is invalid or cannot be loaded."""


class TypeConfig(BaseModel):
    """Settings for one declared type.

    Attributes:
        identifier: Name of the field that becomes the model identifier, or
            ``None`` to compile the type without an identifier. When the key is
            left out, the first ``ID`` field of the type is used.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    identifier: str | None = _Field(
        default=None,
        validation_alias=AliasChoices("identifier", "identifier_field_name", "identifierFieldName"),
    )

    @property
    def has_identifier_override(self) -> bool:
        return "identifier" in self.model_fields_set


class CompileConfig(BaseModel):
    """Settings for one compilation, keyed by declared type name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    types: dict[str, TypeConfig] = _Field(default_factory=dict)

    def for_type(self, name: str) -> TypeConfig | None:
        return self.types.get(name)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> CompileConfig:
        """Build a config from ``{type_name: {"identifier": ...}}``.

        Raises:
            ConfigError: If the mapping has the wrong shape.
        """
        try:
            return cls(types={name: TypeConfig.model_validate(entry) for name, entry in mapping.items()})
        except ValidationError as exc:
            raise ConfigError(f"Invalid compile configuration: {exc}") from exc


def coerce_config(config: CompileConfig | Mapping[str, Any] | None) -> CompileConfig:
    """Accept a :class:`CompileConfig`, a plain per-type mapping, or None."""
    if config is None:
        return CompileConfig()
    if isinstance(config, CompileConfig):
        return config
    return CompileConfig.from_mapping(config)


def load_compile_config(path: Path) -> CompileConfig:
    """Load a compile configuration from a YAML file.

    The file holds a ``types`` mapping::

        types:
          Test:
            identifier: bar
          Other:
            identifier: null

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed CompileConfig.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return _parse_compile_config(text, source_label=str(path))


# ################
# Implementation
# ################


def _parse_compile_config(text: str, source_label: str = "<string>") -> CompileConfig:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return CompileConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: compile config must be a YAML mapping")

    types = data.get("types") or {}
    if not isinstance(types, dict):
        raise ConfigError(f"{source_label}: 'types' must be a mapping")
    for name, entry in types.items():
        if not isinstance(entry, dict):
            raise ConfigError(f"{source_label}: types.{name} must be a mapping")

    unknown = set(data) - {"types"}
    if unknown:
        raise ConfigError(f"{source_label}: unknown keys: {', '.join(sorted(unknown))}")

    try:
        return CompileConfig.from_mapping(types)
    except ConfigError as exc:
        raise ConfigError(f"{source_label}: {exc}") from exc
