# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registry of user functions exposed to the client.

Functions are registered under their server name and exposed under an alias
(the server name unless configured otherwise). Registration records the
target; the symbol itself is resolved on the first call.
"""

from __future__ import annotations

import hashlib
import json
import logging
import threading
from collections.abc import Callable
from pathlib import Path

from ajaxbridge.constants import (
    JS_RUNTIME_NAMESPACE,
    REQUEST_FIELD_FUNCTION,
    TEMPLATE_USER_FUNCTION,
)
from ajaxbridge.request.parameter import Parameter
from ajaxbridge.request.user_function import UserFunctionDescriptor
from ajaxbridge.runtime.template_renderer import ProtocolTemplateRenderer

logger = logging.getLogger(__name__)


class UserFunctionRegistry:
    """User functions keyed by client alias.

    Args:
        renderer: Renders ``support/function.js``.
        prefix: Prefix of every generated function stub (``core.prefix.function``).

    Example:
        >>> functions = UserFunctionRegistry(JinjaTemplateRenderer(), "ajaxbridge_")
        >>> functions.register("say_hello", say_hello, mode="synchronous")
        >>> functions.get("say_hello").call(["world"])
    """

    def __init__(self, renderer: ProtocolTemplateRenderer, prefix: str = "") -> None:
        self._renderer = renderer
        self._prefix = prefix
        self._functions: dict[str, UserFunctionDescriptor] = {}
        self._lock: threading.Lock = threading.Lock()

    def register(
        self,
        name: str,
        function: Callable[..., object] | None = None,
        *,
        owner: type | str | None = None,
        alias: str | None = None,
        include: Path | str | None = None,
        **options: object,
    ) -> UserFunctionDescriptor:
        """Register a function. Re-registering an alias replaces the earlier entry.

        Args:
            name: Server-side name: the function, or the method of ``owner``.
            function: The function object. Optional when ``include`` or
                ``owner`` locate the target.
            owner: Class (or class name in ``include``) whose method is exposed.
            alias: Client-side name.
            include: Source file loaded before the first call.
            **options: Client options embedded in the generated stub.
        """
        descriptor = UserFunctionDescriptor(name, function, prefix=self._prefix)
        if owner is not None:
            descriptor.configure("class", owner)
        if alias is not None:
            descriptor.configure("alias", alias)
        if include is not None:
            descriptor.configure("include", include)
        for key, value in options.items():
            descriptor.configure(key, value)

        with self._lock:
            if descriptor.name in self._functions:
                logger.warning(
                    "Replacing user function %s",
                    descriptor.name,
                    extra={"function": descriptor.name},
                )
            self._functions[descriptor.name] = descriptor
        logger.debug(
            "Registered user function %s",
            descriptor.name,
            extra={"function": descriptor.name, "server_name": name},
        )
        return descriptor

    def get(self, alias: str) -> UserFunctionDescriptor | None:
        with self._lock:
            return self._functions.get(alias)

    def has(self, alias: str) -> bool:
        with self._lock:
            return alias in self._functions

    @property
    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._functions)

    def generate_hash(self) -> str:
        """Digest of the registered aliases and their client options."""
        with self._lock:
            content = "".join(
                alias + json.dumps(self._functions[alias].options, sort_keys=True, default=str)
                for alias in sorted(self._functions)
            )
        return hashlib.md5(content.encode("utf-8")).hexdigest()

    def get_script(self) -> str:
        """Client stubs for every registered function, in alias order."""
        with self._lock:
            descriptors = [self._functions[alias] for alias in sorted(self._functions)]
        return "".join(
            self._renderer.render(
                TEMPLATE_USER_FUNCTION,
                {
                    "prefix": self._prefix,
                    "alias": descriptor.name,
                    "runtime": JS_RUNTIME_NAMESPACE,
                    "function_field": REQUEST_FIELD_FUNCTION,
                    "config": {
                        key: Parameter.make(value).get_script()
                        for key, value in descriptor.options.items()
                    },
                },
            )
            for descriptor in descriptors
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._functions)


__all__ = ["UserFunctionRegistry"]
