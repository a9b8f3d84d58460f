# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shorthand constructors for typed call parameters."""

from __future__ import annotations

from ajaxbridge.enums import EnumParameterType
from ajaxbridge.request.parameter import Parameter


def form(form_id: str) -> Parameter:
    """All values of the form with the given id."""
    return Parameter(EnumParameterType.FORM_VALUES, form_id)


def input_value(element_id: str) -> Parameter:
    """The value of an input element."""
    return Parameter(EnumParameterType.INPUT_VALUE, element_id)


def checked(element_id: str) -> Parameter:
    """The checked state of a checkbox or radio element."""
    return Parameter(EnumParameterType.CHECKED_VALUE, element_id)


def html(element_id: str) -> Parameter:
    """The inner HTML of an element."""
    return Parameter(EnumParameterType.INNER_HTML, element_id)


def js(value: object) -> Parameter:
    """A raw client expression, or a structured literal."""
    return Parameter(EnumParameterType.RAW_JS_VALUE, value)


def quoted(value: str) -> Parameter:
    return Parameter(EnumParameterType.QUOTED_STRING, value)


def numeric(value: int | float | str) -> Parameter:
    return Parameter(EnumParameterType.NUMERIC, value)


def boolean(value: bool) -> Parameter:
    return Parameter(EnumParameterType.BOOLEAN, bool(value))


def page(number: int = 0) -> Parameter:
    """Placeholder for the page number, filled in by the paginator."""
    return Parameter(EnumParameterType.PAGE_NUMBER, number)


__all__ = [
    "boolean",
    "checked",
    "form",
    "html",
    "input_value",
    "js",
    "numeric",
    "page",
    "quoted",
]
