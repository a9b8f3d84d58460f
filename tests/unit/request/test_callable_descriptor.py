# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for CallableDescriptor."""

from __future__ import annotations

import pytest

from ajaxbridge.enums import EnumCallableKind
from ajaxbridge.models import ModelClassOptions
from ajaxbridge.request import BASE_CONTROLLER_METHODS, CallableController, CallableDescriptor
from ajaxbridge.request.callable_descriptor import public_method_names


class Orders(CallableController):
    created = 0

    def __init__(self) -> None:
        Orders.created += 1

    def save(self, order_id: int) -> str:
        return f"saved {order_id}"

    def cancel(self) -> str:
        return "cancelled"

    def audit(self) -> None:
        return None

    @classmethod
    def count(cls) -> int:
        return 0

    @staticmethod
    def version() -> str:
        return "1"

    def _internal(self) -> None:
        return None


class Plain:
    def run(self) -> str:
        return "ran"


@pytest.fixture
def descriptor() -> CallableDescriptor:
    return CallableDescriptor("Shop\\Orders", Orders)


class TestPublicMethods:
    """Tests for method discovery."""

    def test_public_method_names(self) -> None:
        names = public_method_names(Orders)
        assert "_internal" not in names
        assert {"save", "cancel", "audit", "count", "version"} <= set(names)
        assert names == sorted(names)

    def test_base_controller_methods(self) -> None:
        assert BASE_CONTROLLER_METHODS == frozenset({"call", "init", "paginate"})


class TestExposedMethods:
    """Tests for exposed and protected methods."""

    def test_base_methods_never_exposed(self, descriptor: CallableDescriptor) -> None:
        assert descriptor.exposed_methods == ["audit", "cancel", "count", "save", "version"]
        assert BASE_CONTROLLER_METHODS <= descriptor.protected_methods

    def test_protected_methods_removed(self, descriptor: CallableDescriptor) -> None:
        descriptor.configure("protected", ["audit", "count"])
        assert descriptor.exposed_methods == ["cancel", "save", "version"]
        assert not set(descriptor.exposed_methods) & descriptor.protected_methods

    def test_protected_single_name(self, descriptor: CallableDescriptor) -> None:
        descriptor.configure("protected", "audit")
        assert "audit" not in descriptor.exposed_methods
        assert BASE_CONTROLLER_METHODS <= descriptor.protected_methods

    def test_has_method(self, descriptor: CallableDescriptor) -> None:
        assert descriptor.has_method("save")
        assert not descriptor.has_method("init")
        assert not descriptor.has_method("_internal")


class TestSeparator:
    """Tests for the client separator and client name."""

    def test_default_separator(self, descriptor: CallableDescriptor) -> None:
        assert descriptor.separator == "."
        assert descriptor.js_name == "Shop.Orders"

    def test_underscore_separator(self, descriptor: CallableDescriptor) -> None:
        descriptor.configure("separator", "_")
        assert descriptor.js_name == "Shop_Orders"

    @pytest.mark.parametrize("value", ["-", "::", "", None])
    def test_other_separators_normalize_to_dot(
        self,
        descriptor: CallableDescriptor,
        value: str | None,
    ) -> None:
        descriptor.configure("separator", "_")
        descriptor.configure("separator", value)
        assert descriptor.separator == "."


class TestMethodOptions:
    """Tests for per-method client options."""

    def test_wildcard_merges_under_specific(self, descriptor: CallableDescriptor) -> None:
        descriptor.apply_options(
            ModelClassOptions.from_mapping({"*": {"a": 1, "b": 2}, "save": {"b": 3}})
        )
        assert descriptor.options_for("save") == {"a": 1, "b": 3}
        assert descriptor.options_for("cancel") == {"a": 1, "b": 2}

    def test_added_options_merge(self, descriptor: CallableDescriptor) -> None:
        descriptor.add_method_options("save", {"mode": "synchronous"})
        descriptor.add_method_options("save", {"timeout": 5})
        assert descriptor.method_option_bags == {"save": {"mode": "synchronous", "timeout": 5}}

    def test_no_options(self, descriptor: CallableDescriptor) -> None:
        assert descriptor.options_for("save") == {}

    def test_apply_options_sets_separator_and_protected(self, descriptor: CallableDescriptor) -> None:
        descriptor.apply_options(ModelClassOptions(separator="_", protected=("audit",)))
        assert descriptor.separator == "_"
        assert "audit" not in descriptor.exposed_methods


class TestRegisteredObject:
    """Tests for the instance serving requests."""

    def test_created_once(self, descriptor: CallableDescriptor) -> None:
        before = Orders.created
        assert not descriptor.has_registered_object()
        first = descriptor.get_registered_object()
        second = descriptor.get_registered_object()
        assert first is second
        assert Orders.created == before + 1
        assert descriptor.has_registered_object()

    def test_controller_is_bound_to_descriptor(self, descriptor: CallableDescriptor) -> None:
        instance = descriptor.get_registered_object()
        assert isinstance(instance, Orders)
        assert instance._callable is descriptor

    def test_call_exposed_method(self, descriptor: CallableDescriptor) -> None:
        assert descriptor.call("save", [7]) == "saved 7"

    def test_call_protected_method_raises(self, descriptor: CallableDescriptor) -> None:
        with pytest.raises(AttributeError):
            descriptor.call("init")

    def test_plain_class(self) -> None:
        plain = CallableDescriptor("Plain", Plain)
        assert plain.kind is EnumCallableKind.CLASS
        assert plain.exposed_methods == ["run"]
        assert plain.call("run") == "ran"

    def test_factories_need_a_container(self, descriptor: CallableDescriptor) -> None:
        with pytest.raises(RuntimeError):
            _ = descriptor.request_factory
