# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""A single link produced by the paginator."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ModelPaginationLink(BaseModel):
    """Pagination link.

    Attributes:
        kind: ``"previous"``, ``"page"`` or ``"next"``.
        number: Page number the link points to.
        label: Text shown for the link.
        call: Client call script loading the page.
        is_current: The link points to the page being displayed.
        is_enabled: The link can be followed.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    kind: Literal["previous", "page", "next"] = Field(default="page")
    number: int = Field(..., ge=1)
    label: str
    call: str
    is_current: bool = Field(default=False)
    is_enabled: bool = Field(default=True)


__all__ = ["ModelPaginationLink"]
