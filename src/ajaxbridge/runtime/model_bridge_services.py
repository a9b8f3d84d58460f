# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Services built by ``wire_bridge``."""

from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict, Field

from ajaxbridge.runtime.callable_repository import CallableRepository
from ajaxbridge.runtime.config import BridgeConfig
from ajaxbridge.runtime.request_dispatcher import RequestDispatcher
from ajaxbridge.runtime.service_container import ServiceContainer
from ajaxbridge.runtime.template_renderer import JinjaTemplateRenderer
from ajaxbridge.runtime.user_function_registry import UserFunctionRegistry


class ModelBridgeServices(BaseModel):
    """The wired collaborators of one bridge instance."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,  # Service objects, not data
    )

    config: BridgeConfig = Field(..., description="Bridge configuration")
    container: ServiceContainer = Field(..., description="Singleton and factory container")
    renderer: JinjaTemplateRenderer = Field(..., description="Template renderer")
    repository: CallableRepository = Field(..., description="Callable class registry")
    functions: UserFunctionRegistry = Field(..., description="User function registry")
    dispatcher: RequestDispatcher = Field(..., description="Request dispatcher")

    def get_script(self) -> str:
        """Client stubs for every registered class and function."""
        return self.repository.get_script() + self.functions.get_script()

    def generate_hash(self) -> str:
        """Digest of the whole registered surface, for cache-busting the stubs."""
        content = self.repository.generate_hash() + self.functions.generate_hash()
        return hashlib.md5(content.encode("utf-8")).hexdigest()


__all__ = ["ModelBridgeServices"]
