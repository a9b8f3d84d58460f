# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result of dispatching one request."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ajaxbridge.enums import EnumDispatchState
from ajaxbridge.response import Response


class ModelDispatchOutcome(BaseModel):
    """Terminal state of a dispatched request and the response it produced.

    The response is returned for every terminal state, so the caller can
    always serialize something back to the client.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,  # Response and the raised exception
    )

    state: EnumDispatchState = Field(..., description="Terminal dispatch state")
    response: Response = Field(..., description="Shared response command stream")
    target_name: str | None = Field(default=None, description="Class or function requested")
    method: str | None = Field(default=None, description="Method requested")
    reason: str | None = Field(default=None, description="Why the request was rejected")
    error: BaseException | None = Field(default=None, description="Exception handled by the error hook")
    result: object = Field(default=None, description="Return value of the invoked method")

    @property
    def is_success(self) -> bool:
        return self.state == EnumDispatchState.COMPLETED


__all__ = ["ModelDispatchOutcome"]
