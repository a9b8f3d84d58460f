# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Component Enumeration for error context.

Identifies which part of the pipeline raised an error, so structured logs
and error context can be filtered by component.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumBridgeComponent(str, Enum):
    """Pipeline components referenced in error context."""

    CONFIG = "config"
    REPOSITORY = "repository"
    FUNCTIONS = "functions"
    DISPATCHER = "dispatcher"
    TEMPLATE = "template"
    LOADER = "loader"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumBridgeComponent"]
