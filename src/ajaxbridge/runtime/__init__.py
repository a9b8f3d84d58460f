# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ajaxbridge runtime: configuration, registries, dispatch and wiring."""

from ajaxbridge.runtime.callable_repository import CallableRepository
from ajaxbridge.runtime.config import BridgeConfig
from ajaxbridge.runtime.model_bridge_services import ModelBridgeServices
from ajaxbridge.runtime.model_dispatch_outcome import ModelDispatchOutcome
from ajaxbridge.runtime.request_dispatcher import DispatchEndFlag, RequestDispatcher
from ajaxbridge.runtime.service_container import ServiceContainer
from ajaxbridge.runtime.template_renderer import (
    JinjaTemplateRenderer,
    ProtocolTemplateRenderer,
)
from ajaxbridge.runtime.user_function_registry import UserFunctionRegistry
from ajaxbridge.runtime.wiring import register_controllers, wire_bridge

__all__: list[str] = [
    "BridgeConfig",
    "CallableRepository",
    "DispatchEndFlag",
    "JinjaTemplateRenderer",
    "ModelBridgeServices",
    "ModelDispatchOutcome",
    "ProtocolTemplateRenderer",
    "RequestDispatcher",
    "ServiceContainer",
    "UserFunctionRegistry",
    "register_controllers",
    "wire_bridge",
]
