# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Incoming request model.

The transport layer decodes the HTTP request; this core only needs the
target identifier, the method name and the decoded argument list.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, JsonValue

from ajaxbridge.constants import (
    REQUEST_FIELD_ARGS,
    REQUEST_FIELD_CLASS,
    REQUEST_FIELD_FUNCTION,
    REQUEST_FIELD_METHOD,
)


class ModelDispatchRequest(BaseModel):
    """A decoded call request.

    Exactly one of ``class_name`` (with ``method``) or ``function_name`` is
    expected; the dispatcher rejects requests carrying neither.

    Attributes:
        class_name: Client identifier of the target class (``App.Users``).
        method: Method to invoke on the class.
        function_name: Client alias of a registered user function.
        args: Decoded positional arguments.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    class_name: str | None = Field(default=None)
    method: str | None = Field(default=None)
    function_name: str | None = Field(default=None)
    args: list[JsonValue] = Field(default_factory=list)

    @property
    def is_function_call(self) -> bool:
        return self.function_name is not None and self.class_name is None

    @staticmethod
    def is_bridge_request(data: Mapping[str, object]) -> bool:
        """Whether a decoded form carries a class or function target."""
        return REQUEST_FIELD_CLASS in data or REQUEST_FIELD_FUNCTION in data

    @classmethod
    def from_form(cls, data: Mapping[str, object]) -> ModelDispatchRequest:
        """Build a request from decoded form fields.

        ``abxargs`` may be a list or a JSON-encoded list. A value that does
        not decode to a list is passed as a single argument.
        """
        raw_args = data.get(REQUEST_FIELD_ARGS, [])
        if isinstance(raw_args, str):
            try:
                raw_args = json.loads(raw_args)
            except json.JSONDecodeError:
                raw_args = [raw_args]
        if not isinstance(raw_args, list):
            raw_args = [raw_args]

        def _field(name: str) -> str | None:
            value = data.get(name)
            return None if value is None else str(value)

        return cls(
            class_name=_field(REQUEST_FIELD_CLASS),
            method=_field(REQUEST_FIELD_METHOD),
            function_name=_field(REQUEST_FIELD_FUNCTION),
            args=raw_args,
        )


__all__ = ["ModelDispatchRequest"]
