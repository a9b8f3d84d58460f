# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Controller namespace entry of the bridge configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ajaxbridge.models.model_class_options import normalize_separator


class ModelControllerNamespaceConfig(BaseModel):
    """A controller directory declared in configuration.

    Attributes:
        directory: Directory holding the controller modules.
        namespace: Dotted namespace the controllers are exposed under.
        separator: Client separator, ``"."`` or ``"_"``.
        protected: Extra method names excluded from client exposure.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    directory: Path
    namespace: str = Field(..., min_length=1)
    separator: str = Field(default=".")
    protected: list[str] = Field(default_factory=list)

    @field_validator("separator", mode="before")
    @classmethod
    def _normalize_separator(cls, value: object) -> str:
        return normalize_separator(None if value is None else str(value))

    @field_validator("directory", "namespace", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


__all__ = ["ModelControllerNamespaceConfig"]
