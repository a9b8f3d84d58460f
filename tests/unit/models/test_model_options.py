# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for class, directory and namespace options."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from ajaxbridge.errors import BridgeConfigurationError
from ajaxbridge.models import (
    ModelClassOptions,
    ModelControllerNamespaceConfig,
    ModelDirectoryOptions,
    ModelNamespaceRegistration,
    normalize_separator,
)


class TestNormalizeSeparator:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(".", "."), ("_", "_"), (" _ ", "_"), ("-", "."), ("", "."), (None, ".")],
    )
    def test_normalize(self, value: str | None, expected: str) -> None:
        assert normalize_separator(value) == expected


class TestModelClassOptions:
    """Tests for class options parsing and merging."""

    def test_from_mapping(self) -> None:
        options = ModelClassOptions.from_mapping(
            {
                "separator": "_",
                "protected": ["helper"],
                "include": "app/users.py",
                "*": {"mode": "asynchronous"},
                "save": {"mode": "synchronous"},
            }
        )
        assert options.separator == "_"
        assert options.protected == ("helper",)
        assert options.include == Path("app/users.py")
        assert options.methods == {
            "*": {"mode": "asynchronous"},
            "save": {"mode": "synchronous"},
        }

    def test_methods_key(self) -> None:
        options = ModelClassOptions.from_mapping({"methods": {"save": {"a": 1}}})
        assert options.methods == {"save": {"a": 1}}

    def test_unknown_scalar_key_rejected(self) -> None:
        with pytest.raises(BridgeConfigurationError):
            ModelClassOptions.from_mapping({"autoload": True})

    def test_invalid_value_rejected(self) -> None:
        with pytest.raises(BridgeConfigurationError):
            ModelClassOptions.from_mapping({"protected": 5})

    def test_none_is_empty(self) -> None:
        assert ModelClassOptions.from_mapping(None) == ModelClassOptions()

    def test_merge_keeps_unset_fields(self) -> None:
        base = ModelClassOptions(separator="_", protected=("a",), methods={"x": {"k": 1}})
        merged = base.merged_with(ModelClassOptions(methods={"y": {"k": 2}}))
        assert merged.separator == "_"
        assert merged.protected == ("a",)
        assert merged.methods == {"x": {"k": 1}, "y": {"k": 2}}

    def test_merge_override_wins(self) -> None:
        base = ModelClassOptions(separator="_", protected=("a",), methods={"x": {"k": 1}})
        merged = base.merged_with(
            ModelClassOptions(separator=".", protected=("b",), methods={"x": {"j": 2}})
        )
        assert merged.separator == "."
        assert merged.protected == ("b",)
        assert merged.methods == {"x": {"j": 2}}

    def test_frozen(self) -> None:
        options = ModelClassOptions()
        with pytest.raises(ValidationError):
            options.separator = "_"  # type: ignore[misc]


class TestModelDirectoryOptions:
    """Tests for directory option precedence."""

    def test_precedence(self) -> None:
        options = ModelDirectoryOptions.from_mapping(
            {
                "separator": "_",
                "protected": ["dir_level"],
                "*": {"protected": ["wildcard"], "*": {"a": 1, "b": 2}},
                "Users": {"protected": ["specific"], "save": {"b": 3}},
            }
        )
        defaults = ModelClassOptions(separator=".", include=Path("Users.py"))

        users = options.class_options("Users", defaults)
        assert users.separator == "_"
        assert users.protected == ("specific",)
        assert users.include == Path("Users.py")
        assert users.methods == {"*": {"a": 1, "b": 2}, "save": {"b": 3}}

        posts = options.class_options("Posts", defaults)
        assert posts.protected == ("wildcard",)
        assert posts.methods == {"*": {"a": 1, "b": 2}}

    def test_short_name_fallback(self) -> None:
        options = ModelDirectoryOptions.from_mapping({"Users": {"separator": "_"}})
        assert options.class_options("App\\Users", short_name="Users").separator == "_"

    def test_autoload_default(self) -> None:
        assert ModelDirectoryOptions.from_mapping({}).autoload is True
        assert ModelDirectoryOptions.from_mapping({"autoload": False}).autoload is False

    def test_class_options_must_be_mappings(self) -> None:
        with pytest.raises(BridgeConfigurationError):
            ModelDirectoryOptions.from_mapping({"Users": "yes"})


class TestModelNamespaceRegistration:
    """Tests for namespace registrations."""

    def test_defaults(self, tmp_path: Path) -> None:
        registration = ModelNamespaceRegistration.from_mapping(
            {"directory": tmp_path}, namespace="App.Admin"
        )
        assert registration.namespace == "App\\Admin"
        assert registration.separator == "."
        assert registration.directory == tmp_path

    def test_separator_normalized(self, tmp_path: Path) -> None:
        registration = ModelNamespaceRegistration.from_mapping(
            {"directory": tmp_path, "separator": "-"}, namespace="App"
        )
        assert registration.separator == "."

    def test_directory_required(self) -> None:
        with pytest.raises(BridgeConfigurationError):
            ModelNamespaceRegistration.from_mapping({}, namespace="App")


class TestModelControllerNamespaceConfig:
    def test_parsing(self) -> None:
        entry = ModelControllerNamespaceConfig.model_validate(
            {"directory": " app/controllers ", "namespace": " App ", "separator": "_"}
        )
        assert entry.directory == Path("app/controllers")
        assert entry.namespace == "App"
        assert entry.separator == "_"
        assert entry.protected == []
