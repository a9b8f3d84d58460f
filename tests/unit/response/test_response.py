# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the Response command stream."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ajaxbridge.enums import EnumResponseCommand
from ajaxbridge.models import ModelResponseCommand
from ajaxbridge.request.parameter_factory import input_value
from ajaxbridge.response import Response


def _commands(response: Response) -> list[dict[str, object]]:
    return json.loads(response.serialize())["abxobj"]


class TestOrdering:
    """Tests for append order preservation."""

    def test_commands_serialized_in_append_order(self) -> None:
        response = Response()
        for name in ("a", "b", "c"):
            response.append(ModelResponseCommand(name=name))

        assert [command["cmd"] for command in _commands(response)] == ["a", "b", "c"]
        assert response.serialize() == response.serialize()

    def test_no_deduplication(self) -> None:
        response = Response().script("tick()").script("tick()")
        assert len(response) == 2

    def test_append_response_keeps_order(self) -> None:
        first = Response().alert("one")
        second = Response().alert("two").alert("three")
        first.append_response(second)
        assert [command["data"] for command in _commands(first)] == ["one", "two", "three"]

    def test_iteration_and_clear(self) -> None:
        response = Response().alert("one").remove("box")
        assert [command.name for command in response] == ["al", "rm"]
        response.clear_commands()
        assert len(response) == 0
        assert response.serialize() == '{"abxobj":[]}'


class TestCommands:
    """Tests for command payloads."""

    def test_serialize(self) -> None:
        response = Response()
        response.assign("message", "innerHTML", "Saved")
        response.script("refreshList()")
        assert response.serialize() == (
            '{"abxobj":[{"cmd":"as","id":"message","prop":"innerHTML","data":"Saved"},'
            '{"cmd":"js","data":"refreshList()"}]}'
        )

    def test_replace(self) -> None:
        command = Response().replace("title", "innerHTML", "old", "new").commands[0]
        assert command.to_wire() == {
            "cmd": "rp",
            "id": "title",
            "prop": "innerHTML",
            "data": {"s": "old", "r": "new"},
        }

    def test_call_encodes_arguments(self) -> None:
        command = Response().call("showUser", 3, "bob", input_value("name")).commands[0]
        assert command.to_wire() == {
            "cmd": "jc",
            "func": "showUser",
            "data": ["3", "'bob'", "ajaxbridge.$('name').value"],
        }

    def test_element_commands(self) -> None:
        response = (
            Response()
            .append_to("list", "innerHTML", "<li>x</li>")
            .prepend("list", "innerHTML", "<li>y</li>")
            .clear("list")
            .create("list", "li", "item-1")
        )
        assert [command["cmd"] for command in _commands(response)] == ["ap", "pp", "cl", "ce"]
        assert _commands(response)[2] == {"cmd": "cl", "id": "list", "prop": "innerHTML"}

    def test_redirect(self) -> None:
        command = Response().redirect("/login", delay=2).commands[0]
        assert command.to_wire() == {"cmd": "rd", "data": "/login", "delay": 2}

    def test_plugin_command(self) -> None:
        command = Response().plugin("jquery", selector="#box", calls=["show"]).commands[0]
        assert command.to_wire() == {"cmd": "jquery", "selector": "#box", "calls": ["show"]}

    def test_enum_command_name(self) -> None:
        command = Response().add_command(EnumResponseCommand.ALERT, data="hi").commands[0]
        assert command.name == "al"

    def test_non_ascii_kept(self) -> None:
        assert "café" in Response().alert("café").serialize()

    def test_empty_command_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ModelResponseCommand(name="")
