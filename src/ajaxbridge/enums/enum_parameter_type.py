# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parameter Type Enumeration.

Defines the type tag carried by every client call parameter. The tag is
decided once, when the raw server-side value enters the system, and drives
how the value is written into client-side call syntax.

Thread Safety:
    All enums in this module are immutable and thread-safe.
"""

from __future__ import annotations

from enum import Enum, unique


@unique
class EnumParameterType(str, Enum):
    """Type tags for client call parameters.

    DOM-read types reference an element by selector and are evaluated on the
    client at call time; every other type embeds a literal value.

    Attributes:
        FORM_VALUES: All values of the form with the given id.
        INPUT_VALUE: The ``value`` of the element with the given id.
        CHECKED_VALUE: The ``checked`` state of the element with the given id.
        INNER_HTML: The ``innerHTML`` of the element with the given id.
        QUOTED_STRING: A string literal.
        BOOLEAN: A ``true``/``false`` literal.
        PAGE_NUMBER: A page number, replaced per link by the paginator.
        NUMERIC: A number literal.
        RAW_JS_VALUE: A raw expression, or a structured value written as an
            object/array literal with single-quoted strings.
    """

    FORM_VALUES = "form"
    INPUT_VALUE = "input"
    CHECKED_VALUE = "checked"
    INNER_HTML = "html"
    QUOTED_STRING = "quoted"
    BOOLEAN = "bool"
    PAGE_NUMBER = "page"
    NUMERIC = "numeric"
    RAW_JS_VALUE = "js"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value

    @property
    def is_dom_read(self) -> bool:
        """Whether the parameter reads its value from the page at call time."""
        return self in _DOM_READ_TYPES


_DOM_READ_TYPES = frozenset(
    {
        EnumParameterType.FORM_VALUES,
        EnumParameterType.INPUT_VALUE,
        EnumParameterType.CHECKED_VALUE,
        EnumParameterType.INNER_HTML,
    }
)


__all__ = ["EnumParameterType"]
