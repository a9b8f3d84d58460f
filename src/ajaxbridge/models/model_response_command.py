# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""One response command: a client-side side effect."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, JsonValue


class ModelResponseCommand(BaseModel):
    """A named command with an opaque payload.

    The response stream never interprets the payload; it only preserves the
    order in which commands were appended.

    Attributes:
        name: Command type identifier (``"as"``, ``"js"``, ``"jquery"``, ...).
        payload: Command-specific data, merged into the wire object.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    name: str = Field(..., min_length=1)
    payload: dict[str, JsonValue] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, JsonValue]:
        """Return the command as sent to the client: ``{"cmd": name, **payload}``."""
        return {"cmd": self.name, **self.payload}


__all__ = ["ModelResponseCommand"]
