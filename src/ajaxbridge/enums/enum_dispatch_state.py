# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Dispatch State Enumeration.

States of a single request as it moves through the RequestDispatcher:

    IDLE -> VALIDATING -> RESOLVING -> INVOKING -> COMPLETED

with early exits to REJECTED (invalid input, unknown callable, or a
before-hook that ended the request) and FAILED (the invoked method raised).
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumDispatchState(str, Enum):
    """Lifecycle states of a dispatched request."""

    IDLE = "idle"
    VALIDATING = "validating"
    RESOLVING = "resolving"
    INVOKING = "invoking"
    COMPLETED = "completed"
    REJECTED = "rejected"
    FAILED = "failed"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition can happen from this state."""
        return self in (
            EnumDispatchState.COMPLETED,
            EnumDispatchState.REJECTED,
            EnumDispatchState.FAILED,
        )


__all__ = ["EnumDispatchState"]
