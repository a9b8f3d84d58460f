# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed options for directory and namespace registrations.

Every class discovered under a registered directory gets its effective
options by merging, in increasing priority:

    1. defaults computed by the repository (include file, namespace separator)
    2. directory-wide ``separator`` and ``protected``
    3. wildcard class options (``"*"``)
    4. class-specific options
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ajaxbridge.constants import (
    DEFAULT_CLIENT_SEPARATOR,
    IDENTITY_SEPARATOR,
    WILDCARD_KEY,
)
from ajaxbridge.enums import EnumBridgeComponent
from ajaxbridge.errors import BridgeConfigurationError, ModelBridgeErrorContext
from ajaxbridge.models.model_class_options import ModelClassOptions, normalize_separator


class ModelDirectoryOptions(BaseModel):
    """Options for a directory registration.

    Attributes:
        autoload: Record each discovered file as the class include file.
        separator: Directory-wide client separator.
        protected: Directory-wide protected method names.
        wildcard: Class options applied to every discovered class.
        classes: Class options keyed by class name.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    autoload: bool = Field(default=True)
    separator: str | None = Field(default=None)
    protected: tuple[str, ...] | None = Field(default=None)
    wildcard: ModelClassOptions = Field(default_factory=ModelClassOptions)
    classes: dict[str, ModelClassOptions] = Field(default_factory=dict)

    @field_validator("separator", mode="before")
    @classmethod
    def _normalize_separator(cls, value: object) -> object:
        if value is None:
            return None
        return normalize_separator(str(value))

    def class_options(
        self,
        class_name: str,
        defaults: ModelClassOptions | None = None,
        *,
        short_name: str | None = None,
    ) -> ModelClassOptions:
        """Compute the effective options of one class under this registration.

        Args:
            class_name: Key looked up in ``classes`` first.
            defaults: Lowest-priority options supplied by the caller.
            short_name: Fallback key looked up in ``classes`` when
                ``class_name`` has no entry.
        """
        options = defaults or ModelClassOptions()
        options = options.merged_with(
            ModelClassOptions(separator=self.separator, protected=self.protected)
        )
        options = options.merged_with(self.wildcard)
        specific = self.classes.get(class_name)
        if specific is None and short_name is not None:
            specific = self.classes.get(short_name)
        if specific is not None:
            options = options.merged_with(specific)
        return options

    @classmethod
    def _split_mapping(cls, data: Mapping[str, object], scalar_keys: frozenset[str]) -> dict[str, object]:
        fields: dict[str, object] = {}
        classes: dict[str, ModelClassOptions] = {}
        for key, value in data.items():
            if key in scalar_keys:
                fields[key] = value
            elif key == WILDCARD_KEY:
                fields["wildcard"] = ModelClassOptions.from_mapping(value)  # type: ignore[arg-type]
            elif isinstance(value, Mapping):
                classes[key] = ModelClassOptions.from_mapping(value)
            else:
                raise BridgeConfigurationError(
                    f"Unknown directory option {key!r}: class options must be mappings",
                    context=ModelBridgeErrorContext(
                        component=EnumBridgeComponent.CONFIG,
                        operation="parse_directory_options",
                    ),
                    option=key,
                )
        fields["classes"] = classes
        return fields

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> ModelDirectoryOptions:
        """Build directory options from a flat mapping.

        ``autoload``, ``separator`` and ``protected`` are read as such,
        ``"*"`` holds wildcard class options, and every other key maps a
        class name to its class options.

        Raises:
            BridgeConfigurationError: On unknown scalar keys or invalid values.
        """
        if data is None:
            return cls()
        if isinstance(data, ModelDirectoryOptions):
            return data
        fields = cls._split_mapping(data, frozenset({"autoload", "separator", "protected"}))
        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            raise BridgeConfigurationError(
                f"Invalid directory options: {e}",
                context=ModelBridgeErrorContext(
                    component=EnumBridgeComponent.CONFIG,
                    operation="parse_directory_options",
                ),
            ) from e


class ModelNamespaceRegistration(ModelDirectoryOptions):
    """A directory scanned lazily and grouped under a dotted namespace.

    Exactly one registration exists per distinct namespace. Classes found in
    subdirectories get the subdirectory path appended to the namespace.

    Attributes:
        namespace: Namespace in internal form (``App\\Admin``).
        directory: Filesystem root to scan.
        separator: Client separator for every discovered class (default ".").
    """

    namespace: str = Field(..., min_length=1)
    directory: Path
    separator: str = Field(default=DEFAULT_CLIENT_SEPARATOR)

    @field_validator("namespace", mode="before")
    @classmethod
    def _internal_namespace(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return value.replace(".", IDENTITY_SEPARATOR).strip(IDENTITY_SEPARATOR)

    @classmethod
    def from_mapping(  # type: ignore[override]
        cls,
        data: Mapping[str, object] | None,
        *,
        namespace: str | None = None,
    ) -> ModelNamespaceRegistration:
        """Build a namespace registration from a flat mapping.

        Raises:
            BridgeConfigurationError: If ``directory`` is missing or a value
                fails validation.
        """
        data = dict(data or {})
        if namespace is not None:
            data["namespace"] = namespace
        if data.get("separator") is None:
            data["separator"] = DEFAULT_CLIENT_SEPARATOR
        fields = cls._split_mapping(
            data,
            frozenset({"autoload", "separator", "protected", "namespace", "directory"}),
        )
        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            raise BridgeConfigurationError(
                f"Invalid namespace registration: {e}",
                context=ModelBridgeErrorContext(
                    component=EnumBridgeComponent.CONFIG,
                    operation="parse_namespace_options",
                    target_name=str(data.get("namespace")),
                ),
            ) from e


__all__ = ["ModelDirectoryOptions", "ModelNamespaceRegistration"]
