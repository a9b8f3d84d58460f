# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ajaxbridge Models.

This module exports the pydantic models shared across the pipeline.
"""

from ajaxbridge.models.model_class_options import ModelClassOptions, normalize_separator
from ajaxbridge.models.model_controller_namespace_config import (
    ModelControllerNamespaceConfig,
)
from ajaxbridge.models.model_directory_options import (
    ModelDirectoryOptions,
    ModelNamespaceRegistration,
)
from ajaxbridge.models.model_dispatch_request import ModelDispatchRequest
from ajaxbridge.models.model_pagination_link import ModelPaginationLink
from ajaxbridge.models.model_response_command import ModelResponseCommand

__all__: list[str] = [
    "ModelClassOptions",
    "ModelControllerNamespaceConfig",
    "ModelDirectoryOptions",
    "ModelDispatchRequest",
    "ModelNamespaceRegistration",
    "ModelPaginationLink",
    "ModelResponseCommand",
    "normalize_separator",
]
