# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""A client-side call expression to a registered callable."""

from __future__ import annotations

from collections.abc import Iterable

from ajaxbridge.enums import EnumParameterType
from ajaxbridge.request.parameter import Parameter


class ClientCall:
    """Call of a client stub with encoded arguments.

    Example:
        >>> call = ClientCall("AjaxBridge.Users.show", [Parameter.make(3)])
        >>> call.get_script()
        'AjaxBridge.Users.show(3)'
    """

    def __init__(self, name: str, parameters: Iterable[object] = ()) -> None:
        self.name = name
        self.parameters: list[Parameter] = [Parameter.make(p) for p in parameters]

    def add_parameter(self, value: object) -> ClientCall:
        self.parameters.append(Parameter.make(value))
        return self

    def has_page_number(self) -> bool:
        return any(
            p.type is EnumParameterType.PAGE_NUMBER for p in self.parameters
        )

    def set_page_number(self, number: int) -> ClientCall:
        """Set the value of every page number parameter."""
        for parameter in self.parameters:
            if parameter.type is EnumParameterType.PAGE_NUMBER:
                parameter.set_value(number)
        return self

    def get_script(self) -> str:
        arguments = ", ".join(p.get_script() for p in self.parameters)
        return f"{self.name}({arguments})"

    def __str__(self) -> str:
        return self.get_script()

    def __repr__(self) -> str:
        return f"ClientCall({self.name!r}, {self.parameters!r})"


__all__ = ["ClientCall"]
