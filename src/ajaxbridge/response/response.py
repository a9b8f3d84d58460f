# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Response Command Stream.

A Response accumulates the client-side side effects of a request as an
ordered list of commands. Commands are appended, never reordered or
deduplicated, and serialized in exactly the order they were added, since
the client runs them in that order.

Example:
    >>> response = Response()
    >>> response.assign("message", "innerHTML", "Saved")
    >>> response.script("refreshList()")
    >>> response.serialize()
    '{"abxobj":[{"cmd":"as","id":"message","prop":"innerHTML","data":"Saved"},{"cmd":"js","data":"refreshList()"}]}'
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

from pydantic import JsonValue

from ajaxbridge.constants import RESPONSE_PAYLOAD_KEY
from ajaxbridge.enums import EnumResponseCommand
from ajaxbridge.models import ModelResponseCommand
from ajaxbridge.request.parameter import Parameter

logger = logging.getLogger(__name__)


class Response:
    """Ordered, serializable list of response commands."""

    def __init__(self) -> None:
        self._commands: list[ModelResponseCommand] = []

    @property
    def commands(self) -> list[ModelResponseCommand]:
        return list(self._commands)

    def append(self, command: ModelResponseCommand) -> Response:
        """Add a command at the end of the stream."""
        self._commands.append(command)
        return self

    def add_command(self, name: str | EnumResponseCommand, **payload: JsonValue) -> Response:
        return self.append(ModelResponseCommand(name=str(name), payload=payload))

    def append_response(self, other: Response) -> Response:
        """Append every command of another response, keeping its order."""
        self._commands.extend(other._commands)
        return self

    def clear_commands(self) -> None:
        self._commands.clear()

    # -- Element commands ----------------------------------------------------

    def assign(self, target: str, attribute: str, value: JsonValue) -> Response:
        """Set an attribute of an element."""
        return self.add_command(EnumResponseCommand.ASSIGN, id=target, prop=attribute, data=value)

    def append_to(self, target: str, attribute: str, value: JsonValue) -> Response:
        """Append data to an attribute of an element."""
        return self.add_command(EnumResponseCommand.APPEND, id=target, prop=attribute, data=value)

    def prepend(self, target: str, attribute: str, value: JsonValue) -> Response:
        return self.add_command(EnumResponseCommand.PREPEND, id=target, prop=attribute, data=value)

    def replace(self, target: str, attribute: str, search: str, replacement: str) -> Response:
        """Replace text in an attribute of an element."""
        return self.add_command(
            EnumResponseCommand.REPLACE,
            id=target,
            prop=attribute,
            data={"s": search, "r": replacement},
        )

    def clear(self, target: str, attribute: str = "innerHTML") -> Response:
        return self.add_command(EnumResponseCommand.CLEAR, id=target, prop=attribute)

    def remove(self, target: str) -> Response:
        return self.add_command(EnumResponseCommand.REMOVE, id=target)

    def create(self, parent: str, tag: str, element_id: str) -> Response:
        """Create a child element."""
        return self.add_command(EnumResponseCommand.CREATE, id=parent, prop=element_id, data=tag)

    # -- Script commands -----------------------------------------------------

    def script(self, code: str) -> Response:
        """Run a script on the client."""
        return self.add_command(EnumResponseCommand.SCRIPT, data=code)

    def call(self, function: str, *args: object) -> Response:
        """Call a client function; arguments are encoded as call parameters."""
        encoded = [Parameter.make(arg).get_script() for arg in args]
        return self.add_command(EnumResponseCommand.CALL, func=function, data=encoded)

    def alert(self, message: str) -> Response:
        return self.add_command(EnumResponseCommand.ALERT, data=message)

    def redirect(self, url: str, delay: int = 0) -> Response:
        """Load another page, optionally after ``delay`` seconds."""
        return self.add_command(EnumResponseCommand.REDIRECT, data=url, delay=delay)

    def plugin(self, name: str, **payload: JsonValue) -> Response:
        """Add a command handled by a client plugin."""
        return self.add_command(name, **payload)

    # -- Serialization -------------------------------------------------------

    def to_wire(self) -> dict[str, list[dict[str, JsonValue]]]:
        return {RESPONSE_PAYLOAD_KEY: [command.to_wire() for command in self._commands]}

    def serialize(self) -> str:
        """Return the JSON payload, commands in append order."""
        payload = json.dumps(self.to_wire(), separators=(",", ":"), ensure_ascii=False)
        logger.debug(
            "Serialized response with %d commands",
            len(self._commands),
            extra={"command_count": len(self._commands)},
        )
        return payload

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[ModelResponseCommand]:
        return iter(list(self._commands))

    def __repr__(self) -> str:
        return f"Response(commands={len(self._commands)})"


__all__ = ["Response"]
