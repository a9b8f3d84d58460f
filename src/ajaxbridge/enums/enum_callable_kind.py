# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Callable kind enumeration."""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumCallableKind(str, Enum):
    """Kind of server-side entity exposed to the client.

    Attributes:
        CLASS: A class whose exposed methods are callable.
        FUNCTION: A standalone function (or a single aliased class method).
    """

    CLASS = "class"
    FUNCTION = "function"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumCallableKind"]
