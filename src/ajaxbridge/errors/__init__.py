# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ajaxbridge Errors Module.

Exports:
    ModelBridgeErrorContext: Configuration model for bundled error context
    BridgeError: Base error class
    BridgeConfigurationError: Configuration validation errors
    CallableRegistrationError: Registration-time environment failures
    TemplateRenderError: Template lookup and rendering failures

Propagation policy:
    Registration errors are fatal at startup. Lookups of unregistered
    identifiers return ``None`` and are never raised. Exceptions raised by
    user callables are routed to the dispatcher's error hook, or propagate
    unchanged when no hook is registered.
"""

from ajaxbridge.errors.bridge_errors import (
    BridgeConfigurationError,
    BridgeError,
    CallableRegistrationError,
    TemplateRenderError,
)
from ajaxbridge.errors.model_bridge_error_context import ModelBridgeErrorContext

__all__: list[str] = [
    "ModelBridgeErrorContext",
    "BridgeError",
    "BridgeConfigurationError",
    "CallableRegistrationError",
    "TemplateRenderError",
]
