# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error codes carried by BridgeError and its subclasses."""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumBridgeErrorCode(str, Enum):
    """Classification of ajaxbridge errors.

    Attributes:
        OPERATION_FAILED: Generic failure, used when nothing more specific applies.
        INVALID_CONFIGURATION: Configuration values or files failed validation.
        DIRECTORY_NOT_FOUND: A registered directory does not exist or is not a directory.
        DIRECTORY_UNREADABLE: A registered directory could not be scanned.
        INCLUDE_NOT_FOUND: An include file does not exist.
        INCLUDE_FAILED: An include file raised while being loaded.
        TEMPLATE_NOT_FOUND: A named template could not be located.
        TEMPLATE_FAILED: A template raised while rendering.
    """

    OPERATION_FAILED = "BRIDGE_000"
    INVALID_CONFIGURATION = "BRIDGE_001"
    DIRECTORY_NOT_FOUND = "BRIDGE_010"
    DIRECTORY_UNREADABLE = "BRIDGE_011"
    INCLUDE_NOT_FOUND = "BRIDGE_012"
    INCLUDE_FAILED = "BRIDGE_013"
    TEMPLATE_NOT_FOUND = "BRIDGE_020"
    TEMPLATE_FAILED = "BRIDGE_021"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumBridgeErrorCode"]
