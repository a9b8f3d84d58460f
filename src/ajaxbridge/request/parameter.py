# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client call parameters.

A Parameter turns a server-side value into an argument expression of the
client-side call language. The type tag is decided when the value enters
the system (``Parameter.make`` or an explicit constructor) and is never
re-derived afterwards.

Encodings:
    QUOTED_STRING   'value' with quotes and backslashes escaped
    BOOLEAN         true / false
    NUMERIC         decimal form, unquoted
    PAGE_NUMBER     decimal form, unquoted
    RAW_JS_VALUE    structured values as an object/array literal using single
                    quotes for every string delimiter; scalars verbatim
    FORM_VALUES     ajaxbridge.getFormValues('<id>')
    INPUT_VALUE     ajaxbridge.$('<id>').value
    CHECKED_VALUE   ajaxbridge.$('<id>').checked
    INNER_HTML      ajaxbridge.$('<id>').innerHTML

Example:
    >>> Parameter.make("hello").get_script()
    "'hello'"
    >>> Parameter.make({"a": 1}).get_script()
    "{'a':1}"
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping

from pydantic import BaseModel

from ajaxbridge.constants import JS_RUNTIME_NAMESPACE
from ajaxbridge.enums import EnumParameterType

# Numeric strings: optional sign, integer or decimal part, optional exponent.
# ASCII digits only; other Unicode digits are not client number literals.
_NUMERIC_STRING_RE = re.compile(
    r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII
)

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\0": "\\0",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def is_numeric(value: object) -> bool:
    """Return True for numbers and numeric strings, never for booleans."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and _NUMERIC_STRING_RE.match(value) is not None


def escape_quotes(value: str) -> str:
    """Backslash-escape quotes, backslashes, NUL and line terminators."""
    return "".join(_ESCAPES.get(char, char) for char in value)


def _single_quoted_string(value: str) -> str:
    # Quotes inside strings are written as unicode escapes so that every
    # remaining double quote is a delimiter that can become a single quote.
    inner = json.dumps(value, ensure_ascii=False)[1:-1]
    inner = inner.replace('\\"', "\\u0022").replace("'", "\\u0027")
    inner = inner.replace("\u2028", "\\u2028").replace("\u2029", "\\u2029")
    return f"'{inner}'"


def to_js_literal(value: object) -> str:
    """Write a structured value as a client literal with single-quoted strings."""
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, str):
        return _single_quoted_string(value)
    if isinstance(value, Mapping):
        items = (
            f"{_single_quoted_string(str(key))}:{to_js_literal(item)}"
            for key, item in value.items()
        )
        return "{" + ",".join(items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(to_js_literal(item) for item in value) + "]"
    return _single_quoted_string(str(value))


class Parameter:
    """A typed parameter of a client call.

    Parameters are immutable apart from ``set_value``, which the paginator
    uses to rewrite page numbers link by link.
    """

    __slots__ = ("_type", "_value")

    def __init__(self, parameter_type: EnumParameterType, value: object) -> None:
        self._type = parameter_type
        self._value = value

    @property
    def type(self) -> EnumParameterType:
        return self._type

    @property
    def value(self) -> object:
        return self._value

    def set_value(self, value: object) -> None:
        """Replace the parameter value, keeping its type."""
        self._value = value

    @classmethod
    def make(cls, value: object) -> Parameter:
        """Classify a raw value.

        Numbers and numeric strings become NUMERIC, booleans BOOLEAN, other
        strings QUOTED_STRING, and everything else RAW_JS_VALUE. An existing
        Parameter is returned unchanged.
        """
        if isinstance(value, Parameter):
            return value
        if isinstance(value, bool):
            return cls(EnumParameterType.BOOLEAN, value)
        if is_numeric(value):
            return cls(EnumParameterType.NUMERIC, value)
        if isinstance(value, str):
            return cls(EnumParameterType.QUOTED_STRING, value)
        return cls(EnumParameterType.RAW_JS_VALUE, value)

    def _dom_call(self, accessor: str) -> str:
        return f"{JS_RUNTIME_NAMESPACE}.{accessor}('{escape_quotes(str(self._value))}')"

    def get_script(self) -> str:
        """Return the argument expression for this parameter."""
        kind = self._type
        if kind is EnumParameterType.FORM_VALUES:
            return self._dom_call("getFormValues")
        if kind is EnumParameterType.INPUT_VALUE:
            return self._dom_call("$") + ".value"
        if kind is EnumParameterType.CHECKED_VALUE:
            return self._dom_call("$") + ".checked"
        if kind is EnumParameterType.INNER_HTML:
            return self._dom_call("$") + ".innerHTML"
        if kind is EnumParameterType.QUOTED_STRING:
            return f"'{escape_quotes(str(self._value))}'"
        if kind is EnumParameterType.BOOLEAN:
            return "true" if self._value else "false"
        if kind in (EnumParameterType.NUMERIC, EnumParameterType.PAGE_NUMBER):
            if isinstance(self._value, float) and not math.isfinite(self._value):
                return to_js_literal(self._value)
            return str(self._value).strip()
        # RAW_JS_VALUE
        if isinstance(self._value, (Mapping, list, tuple, BaseModel)):
            return to_js_literal(self._value)
        if self._value is None or isinstance(self._value, bool):
            return to_js_literal(self._value)
        return str(self._value)

    def __str__(self) -> str:
        return self.get_script()

    def __repr__(self) -> str:
        return f"Parameter(type={self._type.value!r}, value={self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parameter):
            return NotImplemented
        return self._type is other._type and self._value == other._value

    __hash__ = None  # type: ignore[assignment]


__all__ = ["Parameter", "escape_quotes", "is_numeric", "to_js_literal"]
