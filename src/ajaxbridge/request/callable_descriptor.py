# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Callable Descriptor.

A CallableDescriptor is the materialized metadata of one registered class:
its identity, client separator, protected and exposed methods, client
option bags and the lazily created instance that serves requests.

Identity:
    Identities use the internal separator (``App\\Admin\\Users``). The client
    name replaces it with the configured separator (``App.Admin.Users`` or
    ``App_Admin_Users``).

Lifecycle:
    Created once per identity by the CallableRepository and cached for the
    life of the process. After the first configuration pass only new method
    option bags may be added.
"""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import JsonValue

from ajaxbridge.constants import (
    FACTORY_SUFFIX_PAGINATOR,
    FACTORY_SUFFIX_REQUEST,
    IDENTITY_SEPARATOR,
    WILDCARD_KEY,
)
from ajaxbridge.enums import EnumCallableKind
from ajaxbridge.models import ModelClassOptions, normalize_separator
from ajaxbridge.request.callable_controller import CallableController

if TYPE_CHECKING:
    from ajaxbridge.request.paginator import Paginator
    from ajaxbridge.request.request_factory import RequestFactory
    from ajaxbridge.runtime.service_container import ServiceContainer

logger = logging.getLogger(__name__)


def public_method_names(cls: type) -> list[str]:
    """Names of the public methods of a class, sorted."""
    return sorted(
        name
        for name, member in inspect.getmembers(cls)
        if not name.startswith("_")
        and (inspect.isfunction(member) or inspect.ismethod(member))
    )


# Lifecycle methods of the base controller are never exposed.
BASE_CONTROLLER_METHODS: frozenset[str] = frozenset(
    public_method_names(CallableController)
)


class CallableDescriptor:
    """Registered, materialized metadata for one callable class."""

    def __init__(
        self,
        identity: str,
        target: type,
        *,
        include_path: Path | None = None,
    ) -> None:
        self._identity = identity
        self._target = target
        self._include_path = include_path
        self._separator = "."
        self._protected: set[str] = set(BASE_CONTROLLER_METHODS)
        self._method_options: dict[str, dict[str, JsonValue]] = {}
        self._registered_object: object | None = None
        self._container: ServiceContainer | None = None

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def kind(self) -> EnumCallableKind:
        return EnumCallableKind.CLASS

    @property
    def target(self) -> type:
        return self._target

    @property
    def include_path(self) -> Path | None:
        return self._include_path

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def protected_methods(self) -> frozenset[str]:
        return frozenset(self._protected)

    @property
    def js_name(self) -> str:
        """Client-side name of the class."""
        return self._identity.replace(IDENTITY_SEPARATOR, self._separator)

    def configure(self, name: str, value: object) -> None:
        """Apply one configuration entry.

        ``separator`` normalizes to ``"."`` or ``"_"``; ``protected`` adds
        to the protected set (the base controller methods always stay in).
        """
        if name == "separator":
            self._separator = normalize_separator(
                None if value is None else str(value)
            )
        elif name == "protected":
            if isinstance(value, str):
                value = [value]
            self._protected.update(str(method) for method in value or ())  # type: ignore[union-attr]
        else:
            logger.debug(
                "Ignoring unknown option %s for %s",
                name,
                self._identity,
                extra={"identity": self._identity, "option": name},
            )

    def apply_options(self, options: ModelClassOptions) -> None:
        """First configuration pass from typed registration options."""
        if options.separator is not None:
            self.configure("separator", options.separator)
        if options.protected is not None:
            self.configure("protected", options.protected)
        for method, bag in options.methods.items():
            self.add_method_options(method, bag)

    def add_method_options(self, method: str, options: dict[str, JsonValue]) -> None:
        """Merge client options for one method (or ``"*"``)."""
        self._method_options.setdefault(method, {}).update(options)

    @property
    def method_option_bags(self) -> dict[str, dict[str, JsonValue]]:
        return {key: dict(bag) for key, bag in self._method_options.items()}

    def options_for(self, method: str) -> dict[str, JsonValue]:
        """Effective client options of a method: wildcard under specific."""
        merged = dict(self._method_options.get(WILDCARD_KEY, {}))
        merged.update(self._method_options.get(method, {}))
        return merged

    @property
    def exposed_methods(self) -> list[str]:
        """Public methods eligible for client invocation, sorted."""
        return [
            name
            for name in public_method_names(self._target)
            if name not in self._protected
        ]

    def has_method(self, method: str) -> bool:
        return method in self.exposed_methods

    def bind_container(self, container: ServiceContainer) -> None:
        self._container = container

    def _factory(self, suffix: str) -> object:
        if self._container is None:
            raise RuntimeError(f"No factory container bound to {self._identity}")
        return self._container.get(self._identity + suffix)

    @property
    def request_factory(self) -> RequestFactory:
        return self._factory(FACTORY_SUFFIX_REQUEST)  # type: ignore[return-value]

    @property
    def paginator_factory(self) -> Paginator:
        return self._factory(FACTORY_SUFFIX_PAGINATOR)  # type: ignore[return-value]

    def has_registered_object(self) -> bool:
        return self._registered_object is not None

    def get_registered_object(self) -> object:
        """Return the instance serving requests, creating it on first use."""
        if self._registered_object is None:
            instance = self._target()
            if isinstance(instance, CallableController):
                instance._callable = self
            self._registered_object = instance
            logger.debug(
                "Created registered object for %s",
                self._identity,
                extra={"identity": self._identity, "class": self._target.__qualname__},
            )
        return self._registered_object

    def call(self, method: str, args: list[object] | tuple[object, ...] = ()) -> object:
        """Invoke an exposed method on the registered object.

        Raises:
            AttributeError: If the method is not exposed.
        """
        if not self.has_method(method):
            raise AttributeError(f"{self._identity} does not expose method {method!r}")
        return getattr(self.get_registered_object(), method)(*args)

    def __repr__(self) -> str:
        return f"CallableDescriptor({self._identity!r}, separator={self._separator!r})"


__all__ = ["BASE_CONTROLLER_METHODS", "CallableDescriptor", "public_method_names"]
