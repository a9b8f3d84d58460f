# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pagination links for a registered class method.

Each link carries the client call that loads its page. The page number is
written into the call's PAGE_NUMBER parameter; a call without one gets a
page number appended as its last argument.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ajaxbridge.constants import TEMPLATE_PAGINATION
from ajaxbridge.models import ModelPaginationLink
from ajaxbridge.request.parameter_factory import page

if TYPE_CHECKING:
    from ajaxbridge.request.request_factory import RequestFactory
    from ajaxbridge.runtime.template_renderer import ProtocolTemplateRenderer


class Paginator:
    """Paginator bound to a request factory.

    Args:
        request_factory: Builds the calls to the paginated method.
        renderer: Renders ``pagination/links.html``.
        max_pages: Maximum number of numbered links shown at once.
        previous_text: Label of the previous-page link.
        next_text: Label of the next-page link.
    """

    def __init__(
        self,
        request_factory: RequestFactory,
        renderer: ProtocolTemplateRenderer | None = None,
        *,
        max_pages: int = 10,
        previous_text: str = "&laquo;",
        next_text: str = "&raquo;",
    ) -> None:
        self._request_factory = request_factory
        self._renderer = renderer
        self._max_pages = max(1, max_pages)
        self._previous_text = previous_text
        self._next_text = next_text

    def _page_call(self, page_number: int, method: str, args: tuple[object, ...]) -> str:
        call = self._request_factory.call(method, *args)
        if call is None:
            return ""
        if not call.has_page_number():
            call.add_parameter(page())
        return call.set_page_number(page_number).get_script()

    def links(
        self,
        current_page: int,
        items_per_page: int,
        total_items: int,
        method: str,
        *args: object,
    ) -> list[ModelPaginationLink]:
        """Compute the links for the given page. Empty when there is one page or less."""
        if items_per_page <= 0 or total_items <= 0:
            return []
        total_pages = math.ceil(total_items / items_per_page)
        if total_pages <= 1:
            return []
        current = min(max(1, current_page), total_pages)

        start = max(1, current - self._max_pages // 2)
        end = min(total_pages, start + self._max_pages - 1)
        start = max(1, end - self._max_pages + 1)

        previous_number = max(1, current - 1)
        result = [
            ModelPaginationLink(
                kind="previous",
                number=previous_number,
                label=self._previous_text,
                call=self._page_call(previous_number, method, args),
                is_enabled=current > 1,
            )
        ]
        for number in range(start, end + 1):
            result.append(
                ModelPaginationLink(
                    number=number,
                    label=str(number),
                    call=self._page_call(number, method, args),
                    is_current=number == current,
                )
            )
        next_number = min(total_pages, current + 1)
        result.append(
            ModelPaginationLink(
                kind="next",
                number=next_number,
                label=self._next_text,
                call=self._page_call(next_number, method, args),
                is_enabled=current < total_pages,
            )
        )
        return result

    def render(
        self,
        current_page: int,
        items_per_page: int,
        total_items: int,
        method: str,
        *args: object,
    ) -> str:
        """Render the links with the pagination template."""
        links = self.links(current_page, items_per_page, total_items, method, *args)
        if not links or self._renderer is None:
            return ""
        return self._renderer.render(TEMPLATE_PAGINATION, {"links": links})


__all__ = ["Paginator"]
