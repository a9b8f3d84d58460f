# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base class for callable controllers.

Controllers registered through a namespace usually extend this class. The
public methods defined here are lifecycle helpers and are never exposed to
the client, whatever the registration options say.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ajaxbridge.request.callable_descriptor import CallableDescriptor
    from ajaxbridge.request.client_call import ClientCall
    from ajaxbridge.response.response import Response


class CallableController:
    """Base controller.

    Attributes:
        response: Shared response bound by the dispatcher on first use.
            ``None`` until the controller is initialized.
    """

    response: Response | None = None
    _callable: CallableDescriptor | None = None

    def init(self) -> None:
        """Called once, after the response has been bound."""

    def call(self, method: str, *args: object) -> ClientCall | None:
        """Return the client call to one of this controller's methods."""
        if self._callable is None:
            return None
        return self._callable.request_factory.call(method, *args)

    def paginate(
        self,
        current_page: int,
        items_per_page: int,
        total_items: int,
        method: str,
        *args: object,
    ) -> str:
        """Render pagination links calling one of this controller's methods."""
        if self._callable is None:
            return ""
        return self._callable.paginator_factory.render(
            current_page, items_per_page, total_items, method, *args
        )


__all__ = ["CallableController"]
