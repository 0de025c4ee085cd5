# Copyright 2026 GraphQL Models Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for compile configuration loading."""

from pathlib import Path

import pytest

from graphql_models.config import (
    CompileConfig,
    ConfigError,
    TypeConfig,
    coerce_config,
    load_compile_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "graphql-models.yaml"
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# TypeConfig
# ###############


class TestTypeConfig:
    def test_identifier_left_out(self) -> None:
        config = TypeConfig()
        assert config.identifier is None
        assert not config.has_identifier_override

    def test_explicit_null_is_an_override(self) -> None:
        config = TypeConfig.model_validate({"identifier": None})
        assert config.identifier is None
        assert config.has_identifier_override

    @pytest.mark.parametrize("key", ["identifier", "identifier_field_name", "identifierFieldName"])
    def test_key_aliases(self, key: str) -> None:
        config = TypeConfig.model_validate({key: "bar"})
        assert config.identifier == "bar"
        assert config.has_identifier_override

    def test_unknown_key_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            TypeConfig.model_validate({"primary": "bar"})


# ###############
# CompileConfig
# ###############


class TestCompileConfig:
    def test_from_mapping(self) -> None:
        config = CompileConfig.from_mapping({"Test": {"identifier": "bar"}})
        assert config.for_type("Test") == TypeConfig(identifier="bar")
        assert config.for_type("Other") is None

    def test_from_mapping_wraps_validation_errors(self) -> None:
        with pytest.raises(ConfigError, match="Invalid compile configuration"):
            CompileConfig.from_mapping({"Test": {"identifier": 3}})

    def test_coerce(self) -> None:
        config = CompileConfig()
        assert coerce_config(config) is config
        assert coerce_config(None) == CompileConfig()
        assert coerce_config({"Test": {}}).for_type("Test") == TypeConfig()


# ###############
# load_compile_config
# ###############


class TestLoadCompileConfig:
    def test_load_types(self, tmp_path: Path) -> None:
        path = _write_config(
            tmp_path,
            "types:\n  Test:\n    identifier: bar\n  Other:\n    identifier: null\n",
        )
        config = load_compile_config(path)
        assert config.for_type("Test").identifier == "bar"
        assert config.for_type("Other").has_identifier_override
        assert config.for_type("Other").identifier is None

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_compile_config(_write_config(tmp_path, "")) == CompileConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_compile_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_compile_config(_write_config(tmp_path, "types: [unclosed\n"))

    def test_top_level_must_be_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="must be a YAML mapping"):
            load_compile_config(_write_config(tmp_path, "- Test\n"))

    def test_types_must_be_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="'types' must be a mapping"):
            load_compile_config(_write_config(tmp_path, "types:\n  - Test\n"))

    def test_type_entry_must_be_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match=r"types\.Test must be a mapping"):
            load_compile_config(_write_config(tmp_path, "types:\n  Test: bar\n"))

    def test_unknown_top_level_key(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="unknown keys: extra"):
            load_compile_config(_write_config(tmp_path, "types: {}\nextra: 1\n"))

    def test_invalid_entry_names_the_file(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "types:\n  Test:\n    primary: bar\n")
        with pytest.raises(ConfigError, match="graphql-models.yaml"):
            load_compile_config(path)
