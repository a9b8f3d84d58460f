# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Builds client calls to the methods of one registered class."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ajaxbridge.request.client_call import ClientCall

if TYPE_CHECKING:
    from ajaxbridge.request.callable_descriptor import CallableDescriptor

logger = logging.getLogger(__name__)


class RequestFactory:
    """Request builder bound to a CallableDescriptor.

    Example:
        >>> factory = RequestFactory(descriptor, prefix="AjaxBridge.")
        >>> factory.call("show", 3).get_script()
        'AjaxBridge.App.Users.show(3)'
    """

    def __init__(self, descriptor: CallableDescriptor, prefix: str = "") -> None:
        self._descriptor = descriptor
        self._prefix = prefix

    @property
    def descriptor(self) -> CallableDescriptor:
        return self._descriptor

    def function_name(self, method: str) -> str:
        return f"{self._prefix}{self._descriptor.js_name}.{method}"

    def call(self, method: str, *args: object) -> ClientCall | None:
        """Return the call to an exposed method, or None for any other name."""
        if not self._descriptor.has_method(method):
            logger.debug(
                "No client call for unexposed method %s.%s",
                self._descriptor.identity,
                method,
                extra={"identity": self._descriptor.identity, "method": method},
            )
            return None
        return ClientCall(self.function_name(method), args)


__all__ = ["RequestFactory"]
