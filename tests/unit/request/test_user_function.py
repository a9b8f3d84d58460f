# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for UserFunctionDescriptor."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from ajaxbridge.enums import EnumBridgeErrorCode, EnumCallableKind
from ajaxbridge.errors import CallableRegistrationError
from ajaxbridge.request import UserFunctionDescriptor

HELPERS_SOURCE = """
def shout(text):
    return text.upper()


class Greeter:
    def hello(self, name):
        return f"Hello {name}"
"""


def add(a: int, b: int) -> int:
    return a + b


class Calculator:
    def double(self, value: int) -> int:
        return value * 2


@pytest.fixture
def helpers_file(tmp_path: Path, source_writer: Callable[[Path, str, str], Path]) -> Path:
    return source_writer(tmp_path, "helpers.py", HELPERS_SOURCE)


class TestFunctionTarget:
    """Tests for functions given at registration."""

    def test_call(self) -> None:
        descriptor = UserFunctionDescriptor("add", add)
        assert descriptor.kind is EnumCallableKind.FUNCTION
        assert not descriptor.is_loaded
        assert descriptor.call([2, 3]) == 5
        assert descriptor.is_loaded

    def test_alias(self) -> None:
        descriptor = UserFunctionDescriptor("add", add)
        descriptor.configure("alias", "sum")
        assert descriptor.name == "sum"
        assert descriptor.server_name == "add"

    def test_client_options(self) -> None:
        descriptor = UserFunctionDescriptor("add", add)
        descriptor.configure("mode", "synchronous")
        assert descriptor.options == {"mode": "synchronous"}

    def test_generate_request(self) -> None:
        assert UserFunctionDescriptor("add", add).generate_request(2, 3).get_script() == "add(2, 3)"

        descriptor = UserFunctionDescriptor("add", add, prefix="app_")
        descriptor.configure("alias", "sum")
        assert descriptor.generate_request("x").get_script() == "app_sum('x')"
        assert not descriptor.is_loaded


class TestOwnerTarget:
    """Tests for class methods exposed as functions."""

    def test_owner_class(self) -> None:
        descriptor = UserFunctionDescriptor("double")
        descriptor.configure("class", Calculator)
        assert descriptor.call([21]) == 42

    def test_owner_class_name_in_include(self, helpers_file: Path) -> None:
        descriptor = UserFunctionDescriptor("hello")
        descriptor.configure("class", "Greeter")
        descriptor.configure("include", helpers_file)
        assert descriptor.call(["bob"]) == "Hello bob"

    def test_unknown_owner_name(self, helpers_file: Path) -> None:
        descriptor = UserFunctionDescriptor("hello")
        descriptor.configure("class", "Missing")
        descriptor.configure("include", helpers_file)
        assert descriptor.resolve() is None
        assert not descriptor.is_loaded


class TestIncludeTarget:
    """Tests for functions found in include files."""

    def test_function_in_include(self, helpers_file: Path) -> None:
        descriptor = UserFunctionDescriptor("shout")
        descriptor.configure("include", str(helpers_file))
        assert descriptor.include_path == helpers_file
        assert descriptor.call(["hi"]) == "HI"

    def test_missing_include_raises(self, tmp_path: Path) -> None:
        descriptor = UserFunctionDescriptor("shout")
        descriptor.configure("include", tmp_path / "missing.py")
        with pytest.raises(CallableRegistrationError) as exc_info:
            descriptor.resolve()
        assert exc_info.value.error_code is EnumBridgeErrorCode.INCLUDE_NOT_FOUND


class TestLoadState:
    """Tests for the loaded/unloaded state."""

    def test_unresolvable_call_raises(self) -> None:
        descriptor = UserFunctionDescriptor("nothing")
        assert descriptor.resolve() is None
        with pytest.raises(LookupError):
            descriptor.call()

    def test_target_is_fixed_after_load(self) -> None:
        descriptor = UserFunctionDescriptor("add", add)
        descriptor.resolve()
        with pytest.raises(RuntimeError):
            descriptor.configure("class", Calculator)
        descriptor.configure("alias", "plus")
        assert descriptor.name == "plus"
