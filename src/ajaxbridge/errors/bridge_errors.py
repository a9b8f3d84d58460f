# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ajaxbridge Error Classes.

Error Hierarchy:
    BridgeError (base error)
    ├── BridgeConfigurationError
    ├── CallableRegistrationError
    └── TemplateRenderError

"Not registered" and "invalid identifier" are not errors: the repository
signals them with ``None`` and the dispatcher with a REJECTED outcome.
Exceptions raised by user callables are never wrapped; they reach the
error hook (or the caller) unchanged.

All errors:
    - Carry an EnumBridgeErrorCode
    - Support proper error chaining with ``raise ... from e``
    - Include structured context for debugging
    - Accept ModelBridgeErrorContext for bundled context parameters
"""

from __future__ import annotations

from uuid import UUID

from ajaxbridge.enums import EnumBridgeErrorCode
from ajaxbridge.errors.model_bridge_error_context import ModelBridgeErrorContext


class BridgeError(Exception):
    """Base error class for ajaxbridge.

    Structured Fields (via ModelBridgeErrorContext):
        component: Component raising the error
        operation: Operation being performed
        target_name: Target resource name
        correlation_id: Correlation ID for tracing

    Example:
        >>> context = ModelBridgeErrorContext(operation="get_script")
        >>> raise BridgeError("Operation failed", context=context, identity="App\\\\Users")
    """

    def __init__(
        self,
        message: str,
        error_code: EnumBridgeErrorCode | None = None,
        context: ModelBridgeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize BridgeError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled error context (component, operation, ...)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message: str = message
        self.error_code: EnumBridgeErrorCode = (
            error_code or EnumBridgeErrorCode.OPERATION_FAILED
        )
        self.correlation_id: UUID | None = None

        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            if context.component is not None:
                structured_context["component"] = context.component
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context: dict[str, object] = structured_context

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"


class BridgeConfigurationError(BridgeError):
    """Raised when configuration validation fails.

    Used for invalid YAML, unknown or mistyped keys, and option values that
    fail pydantic validation.
    """

    def __init__(
        self,
        message: str,
        context: ModelBridgeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumBridgeErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class CallableRegistrationError(BridgeError):
    """Raised when registration hits an environment failure.

    Missing or unreadable directories and missing or broken include files
    are fatal startup conditions, never per-request outcomes.

    Example:
        >>> raise CallableRegistrationError(
        ...     "Directory not found: /srv/app/controllers",
        ...     error_code=EnumBridgeErrorCode.DIRECTORY_NOT_FOUND,
        ...     directory="/srv/app/controllers",
        ... )
    """

    def __init__(
        self,
        message: str,
        error_code: EnumBridgeErrorCode | None = None,
        context: ModelBridgeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumBridgeErrorCode.DIRECTORY_UNREADABLE,
            context=context,
            **extra_context,
        )


class TemplateRenderError(BridgeError):
    """Raised when a named template cannot be found or fails to render."""

    def __init__(
        self,
        message: str,
        error_code: EnumBridgeErrorCode | None = None,
        context: ModelBridgeErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumBridgeErrorCode.TEMPLATE_FAILED,
            context=context,
            **extra_context,
        )


__all__ = [
    "BridgeConfigurationError",
    "BridgeError",
    "CallableRegistrationError",
    "TemplateRenderError",
]
