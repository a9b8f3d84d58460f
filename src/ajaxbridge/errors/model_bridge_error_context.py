# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bridge Error Context Configuration Model.

Bundles the structured fields shared by every ajaxbridge error so that
error constructors stay short while the context remains strongly typed.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from ajaxbridge.enums import EnumBridgeComponent


class ModelBridgeErrorContext(BaseModel):
    """Structured context attached to ajaxbridge errors.

    Attributes:
        component: Pipeline component that raised the error.
        operation: Operation being performed (add_directory, render, ...).
        target_name: Target resource (directory, include file, template name).
        correlation_id: Correlation ID for tracing a registration or request.

    Example:
        >>> context = ModelBridgeErrorContext(
        ...     component=EnumBridgeComponent.REPOSITORY,
        ...     operation="add_directory",
        ...     target_name="/srv/app/controllers",
        ... )
        >>> raise CallableRegistrationError("Directory not found", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    component: EnumBridgeComponent | None = Field(
        default=None,
        description="Pipeline component that raised the error",
    )
    operation: str | None = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: str | None = Field(
        default=None,
        description="Target resource name (directory, file, template)",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **fields: object,
    ) -> ModelBridgeErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **fields)


__all__ = ["ModelBridgeErrorContext"]
