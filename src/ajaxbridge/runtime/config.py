# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bridge configuration.

A typed, immutable configuration read from a mapping or a YAML file. The
well-known options are model fields; anything else lives in the free-form
``options`` tree and is read with dotted keys.

YAML Layout:
    .. code-block:: yaml

        core:
          prefix:
            class: AjaxBridge
            function: ajaxbridge_
          request:
            uri: /ajax
        controllers:
          - directory: app/controllers
            namespace: App
            separator: "."
            protected: [helper]
        options:
          views:
            default: app

Dotted Keys:
    ``core.prefix.class``, ``core.prefix.function`` and ``core.request.uri``
    map to the typed fields; every other key is looked up in ``options``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError

from ajaxbridge.enums import EnumBridgeComponent
from ajaxbridge.errors import BridgeConfigurationError, ModelBridgeErrorContext
from ajaxbridge.models import ModelControllerNamespaceConfig

logger = logging.getLogger(__name__)

_FIELD_KEYS: dict[str, str] = {
    "core.prefix.class": "prefix_class",
    "core.prefix.function": "prefix_function",
    "core.request.uri": "request_uri",
}

_MISSING = object()


def _lookup(tree: Mapping[str, object], dotted_key: str) -> object:
    node: object = tree
    for part in dotted_key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return node


class BridgeConfig(BaseModel):
    """ajaxbridge configuration.

    Attributes:
        prefix_class: Prefix of the generated class stubs.
        prefix_function: Prefix of the generated function stubs.
        request_uri: URI the client runtime posts requests to.
        controllers: Controller directories registered as namespaces.
        options: Free-form option tree.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    prefix_class: str = Field(default="AjaxBridge")
    prefix_function: str = Field(default="ajaxbridge_")
    request_uri: str = Field(default="ajaxbridge")
    controllers: list[ModelControllerNamespaceConfig] = Field(default_factory=list)
    options: dict[str, JsonValue] = Field(default_factory=dict)

    def get_option(self, key: str, default: object = None) -> object:
        """Read an option by dotted key, or ``default`` when it is not set."""
        field_name = _FIELD_KEYS.get(key)
        if field_name is not None:
            return getattr(self, field_name)
        if key == "controllers":
            return list(self.controllers)
        value = _lookup(self.options, key)
        return default if value is _MISSING else value

    def has_option(self, key: str) -> bool:
        if key in _FIELD_KEYS or key == "controllers":
            return True
        return _lookup(self.options, key) is not _MISSING

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> BridgeConfig:
        """Build a configuration from a (possibly nested) mapping.

        Raises:
            BridgeConfigurationError: If validation fails.
        """
        fields = dict(data or {})
        core = fields.pop("core", None)
        if isinstance(core, Mapping):
            for dotted_key, field_name in _FIELD_KEYS.items():
                value = _lookup({"core": core}, dotted_key)
                if value is not _MISSING:
                    fields.setdefault(field_name, value)
        elif core is not None:
            raise BridgeConfigurationError(
                "The 'core' section must be a mapping",
                context=ModelBridgeErrorContext(
                    component=EnumBridgeComponent.CONFIG,
                    operation="from_mapping",
                ),
            )

        try:
            return cls.model_validate(fields)
        except ValidationError as e:
            error_details = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise BridgeConfigurationError(
                f"Configuration validation failed: {error_details}",
                context=ModelBridgeErrorContext(
                    component=EnumBridgeComponent.CONFIG,
                    operation="from_mapping",
                ),
                validation_errors=[
                    {"loc": err["loc"], "msg": err["msg"], "type": err["type"]}
                    for err in e.errors()
                ],
            ) from e

    @classmethod
    def from_yaml(cls, path: Path | str) -> BridgeConfig:
        """Load a configuration file.

        Raises:
            BridgeConfigurationError: If the file is missing, unreadable,
                not valid YAML, or fails validation.
        """
        path = Path(path)
        context = ModelBridgeErrorContext.with_correlation(
            component=EnumBridgeComponent.CONFIG,
            operation="from_yaml",
            target_name=str(path),
        )
        try:
            with path.open("r", encoding="utf-8") as f:
                raw_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BridgeConfigurationError(
                f"Invalid YAML syntax in configuration: {e}",
                context=context,
            ) from e
        except OSError as e:
            raise BridgeConfigurationError(
                f"Failed to read configuration file: {e}",
                context=context,
            ) from e

        if raw_data is None:
            raw_data = {}
        if not isinstance(raw_data, Mapping):
            raise BridgeConfigurationError(
                "Configuration file must contain a mapping",
                context=context,
            )

        config = cls.from_mapping(raw_data)
        logger.info(
            "Loaded configuration from %s",
            path,
            extra={
                "config_path": str(path),
                "controller_count": len(config.controllers),
            },
        )
        return config


__all__ = ["BridgeConfig"]
