# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the ajaxbridge error hierarchy."""

from __future__ import annotations

from uuid import UUID, uuid4

import pytest

from ajaxbridge.enums import EnumBridgeComponent, EnumBridgeErrorCode
from ajaxbridge.errors import (
    BridgeConfigurationError,
    BridgeError,
    CallableRegistrationError,
    ModelBridgeErrorContext,
    TemplateRenderError,
)


class TestBridgeError:
    """Tests for the base error."""

    def test_str_includes_code(self) -> None:
        error = BridgeError("Operation failed")
        assert error.error_code is EnumBridgeErrorCode.OPERATION_FAILED
        assert str(error) == "[BRIDGE_000] Operation failed"
        assert error.message == "Operation failed"

    def test_context_fields(self) -> None:
        correlation_id = uuid4()
        context = ModelBridgeErrorContext(
            component=EnumBridgeComponent.REPOSITORY,
            operation="add_directory",
            target_name="/srv/controllers",
            correlation_id=correlation_id,
        )
        error = BridgeError("failed", context=context, directory="/srv/controllers")

        assert error.correlation_id == correlation_id
        assert error.context == {
            "directory": "/srv/controllers",
            "component": EnumBridgeComponent.REPOSITORY,
            "operation": "add_directory",
            "target_name": "/srv/controllers",
        }

    def test_without_context(self) -> None:
        error = BridgeError("failed")
        assert error.correlation_id is None
        assert error.context == {}

    def test_chaining(self) -> None:
        with pytest.raises(BridgeError) as exc_info:
            try:
                raise OSError("disk")
            except OSError as e:
                raise BridgeError("wrapped") from e
        assert isinstance(exc_info.value.__cause__, OSError)


class TestSubclasses:
    """Tests for the specific error types."""

    def test_configuration_error_code(self) -> None:
        error = BridgeConfigurationError("bad", option="separator")
        assert error.error_code is EnumBridgeErrorCode.INVALID_CONFIGURATION
        assert str(error) == "[BRIDGE_001] bad"
        assert error.context == {"option": "separator"}

    @pytest.mark.parametrize(
        ("error_type", "default_code"),
        [
            (CallableRegistrationError, EnumBridgeErrorCode.DIRECTORY_UNREADABLE),
            (TemplateRenderError, EnumBridgeErrorCode.TEMPLATE_FAILED),
        ],
    )
    def test_default_codes(
        self,
        error_type: type[BridgeError],
        default_code: EnumBridgeErrorCode,
    ) -> None:
        assert error_type("failed").error_code is default_code

    def test_explicit_code(self) -> None:
        error = CallableRegistrationError(
            "missing",
            error_code=EnumBridgeErrorCode.INCLUDE_NOT_FOUND,
        )
        assert error.error_code is EnumBridgeErrorCode.INCLUDE_NOT_FOUND
        assert str(error).startswith("[BRIDGE_012]")

    @pytest.mark.parametrize(
        "error_type",
        [BridgeConfigurationError, CallableRegistrationError, TemplateRenderError],
    )
    def test_all_are_bridge_errors(self, error_type: type[BridgeError]) -> None:
        assert issubclass(error_type, BridgeError)


class TestModelBridgeErrorContext:
    def test_with_correlation_generates_id(self) -> None:
        context = ModelBridgeErrorContext.with_correlation(operation="render")
        assert isinstance(context.correlation_id, UUID)
        assert context.operation == "render"

    def test_with_correlation_keeps_given_id(self) -> None:
        correlation_id = uuid4()
        context = ModelBridgeErrorContext.with_correlation(correlation_id)
        assert context.correlation_id == correlation_id

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValueError):
            ModelBridgeErrorContext(unknown="x")  # type: ignore[call-arg]
