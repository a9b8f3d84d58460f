# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed registration options for one callable class.

Replaces free-form option arrays with an explicit structure:

    separator   client-side separator ("." or "_")
    protected   method names never exposed to the client
    include     source file loaded once, before first use
    methods     client option bags keyed by method name, or "*" for all methods

Merge Precedence:
    ``base.merged_with(override)`` keeps the base value of every scalar field
    the override leaves unset. Method option bags merge per key, so an
    override entry for ``"save"`` replaces the base entry for ``"save"``
    while base entries for other methods survive.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError, field_validator

from ajaxbridge.constants import CLIENT_SEPARATORS, DEFAULT_CLIENT_SEPARATOR
from ajaxbridge.enums import EnumBridgeComponent
from ajaxbridge.errors import BridgeConfigurationError, ModelBridgeErrorContext

_SCALAR_KEYS = frozenset({"separator", "protected", "include"})


def normalize_separator(separator: str | None) -> str:
    """Return ``"_"`` for an underscore separator and ``"."`` for anything else."""
    if separator is not None and separator.strip() in CLIENT_SEPARATORS:
        return separator.strip()
    return DEFAULT_CLIENT_SEPARATOR


class ModelClassOptions(BaseModel):
    """Options attached to a registered class.

    Attributes:
        separator: Client-side separator. ``None`` means "not set here".
        protected: Method names excluded from client exposure. ``None``
            means "not set here"; a set value replaces inherited values.
        include: File loaded lazily, exactly once, before first use.
        methods: Client option bags keyed by method name or ``"*"``.

    Example:
        >>> options = ModelClassOptions.from_mapping({
        ...     "separator": "_",
        ...     "protected": ["helper"],
        ...     "*": {"mode": "asynchronous"},
        ...     "save": {"mode": "synchronous"},
        ... })
        >>> options.methods["save"]
        {'mode': 'synchronous'}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    separator: str | None = Field(default=None)
    protected: tuple[str, ...] | None = Field(default=None)
    include: Path | None = Field(default=None)
    methods: dict[str, dict[str, JsonValue]] = Field(default_factory=dict)

    @field_validator("separator", mode="before")
    @classmethod
    def _normalize_separator(cls, value: object) -> object:
        if value is None:
            return None
        return normalize_separator(str(value))

    def merged_with(self, override: ModelClassOptions) -> ModelClassOptions:
        """Return a copy of these options with ``override`` applied on top."""
        return ModelClassOptions(
            separator=(
                override.separator
                if override.separator is not None
                else self.separator
            ),
            protected=(
                override.protected
                if override.protected is not None
                else self.protected
            ),
            include=override.include if override.include is not None else self.include,
            methods={**self.methods, **override.methods},
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> ModelClassOptions:
        """Build options from a flat mapping.

        ``separator``, ``protected`` and ``include`` are read as such. Every
        other key must map to a dict and becomes a method option bag.

        Raises:
            BridgeConfigurationError: If a key is neither a known scalar key
                nor a method option bag, or if validation fails.
        """
        if data is None:
            return cls()
        if isinstance(data, ModelClassOptions):
            return data

        fields: dict[str, object] = {}
        methods: dict[str, object] = {}
        for key, value in data.items():
            if key in _SCALAR_KEYS:
                fields[key] = value
            elif key == "methods" and isinstance(value, Mapping):
                methods.update(value)
            elif isinstance(value, Mapping):
                methods[key] = dict(value)
            else:
                raise BridgeConfigurationError(
                    f"Unknown class option {key!r}: method options must be mappings",
                    context=ModelBridgeErrorContext(
                        component=EnumBridgeComponent.CONFIG,
                        operation="parse_class_options",
                    ),
                    option=key,
                )
        fields["methods"] = methods

        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            raise BridgeConfigurationError(
                f"Invalid class options: {e}",
                context=ModelBridgeErrorContext(
                    component=EnumBridgeComponent.CONFIG,
                    operation="parse_class_options",
                ),
            ) from e


__all__ = ["ModelClassOptions", "normalize_separator"]
