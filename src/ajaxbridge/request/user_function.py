# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""User Function Descriptor.

A standalone function, or a single class method, exposed to the client
under an alias. The target is resolved once, on first use, with an explicit
loaded/unloaded state:

    - a callable given at registration is used as is
    - ``owner`` (a class, or a class name found in the include file) is
      instantiated and its method named ``server_name`` is bound
    - otherwise ``server_name`` is looked up in the include file
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from pydantic import JsonValue

from ajaxbridge.enums import EnumCallableKind
from ajaxbridge.request.client_call import ClientCall
from ajaxbridge.utils.util_module_loader import find_class, load_source_file

logger = logging.getLogger(__name__)


class UserFunctionDescriptor:
    """Registered user function."""

    def __init__(
        self,
        server_name: str,
        function: Callable[..., object] | None = None,
        *,
        prefix: str = "",
    ) -> None:
        self._server_name = server_name
        self._prefix = prefix
        self._alias = server_name
        self._function = function
        self._owner: type | str | None = None
        self._include: Path | None = None
        self._options: dict[str, JsonValue] = {}
        self._resolved: Callable[..., object] | None = None
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Client-side name."""
        return self._alias

    @property
    def server_name(self) -> str:
        return self._server_name

    @property
    def kind(self) -> EnumCallableKind:
        return EnumCallableKind.FUNCTION

    @property
    def include_path(self) -> Path | None:
        return self._include

    @property
    def options(self) -> dict[str, JsonValue]:
        return dict(self._options)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def configure(self, name: str, value: object) -> None:
        """Apply one option: ``class``, ``alias``, ``include`` or a client option."""
        if self._loaded and name in ("class", "include"):
            raise RuntimeError(
                f"Cannot change {name!r} of {self._alias} after it was loaded"
            )
        if name == "class":
            self._owner = value  # type: ignore[assignment]
        elif name == "alias":
            self._alias = str(value)
        elif name == "include":
            self._include = None if value is None else Path(str(value))
        else:
            self._options[name] = value  # type: ignore[assignment]

    def resolve(self) -> Callable[..., object] | None:
        """Return the target callable, loading it on first use.

        Returns None when the target symbol cannot be found.

        Raises:
            CallableRegistrationError: If the include file is missing or fails.
        """
        with self._lock:
            if self._loaded:
                return self._resolved

            module = load_source_file(self._include) if self._include else None
            owner = self._owner
            if isinstance(owner, str):
                owner = find_class(module, owner) if module is not None else None
                if owner is None:
                    logger.warning(
                        "Owner class %s of function %s not found",
                        self._owner,
                        self._alias,
                        extra={"function": self._alias, "owner": str(self._owner)},
                    )
                    return None

            target: object = None
            if owner is not None:
                target = getattr(owner(), self._server_name, None)
            elif self._function is not None:
                target = self._function
            elif module is not None:
                target = getattr(module, self._server_name, None)

            if not callable(target):
                logger.warning(
                    "Function %s cannot be resolved",
                    self._alias,
                    extra={"function": self._alias, "server_name": self._server_name},
                )
                return None

            self._resolved = target
            self._loaded = True
            return target

    def call(self, args: list[object] | tuple[object, ...] = ()) -> object:
        """Invoke the function with positional arguments.

        Raises:
            LookupError: If the target cannot be resolved.
        """
        target = self.resolve()
        if target is None:
            raise LookupError(f"Function {self._alias} cannot be resolved")
        return target(*args)

    def generate_request(self, *args: object) -> ClientCall:
        """Return the client call to this function's stub (``<prefix><alias>(...)``)."""
        return ClientCall(self._prefix + self._alias, args)

    def __repr__(self) -> str:
        return f"UserFunctionDescriptor({self._server_name!r}, alias={self._alias!r})"


__all__ = ["UserFunctionDescriptor"]
