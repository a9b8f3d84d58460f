# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Response Command Enumeration.

Names of the built-in commands understood by the client runtime. Plugins
may emit commands with other names; the response stream does not restrict
command names to this set.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumResponseCommand(str, Enum):
    """Built-in response command names."""

    ASSIGN = "as"
    APPEND = "ap"
    PREPEND = "pp"
    REPLACE = "rp"
    CLEAR = "cl"
    REMOVE = "rm"
    CREATE = "ce"
    SCRIPT = "js"
    CALL = "jc"
    ALERT = "al"
    REDIRECT = "rd"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__ = ["EnumResponseCommand"]
