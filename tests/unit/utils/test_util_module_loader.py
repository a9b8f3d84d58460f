# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for load-once include file loading."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from ajaxbridge.enums import EnumBridgeErrorCode
from ajaxbridge.errors import CallableRegistrationError
from ajaxbridge.utils.util_module_loader import find_class, is_loaded, load_source_file

SourceWriter = Callable[[Path, str, str], Path]

COUNTER_SOURCE = """
from pathlib import Path

with Path(__file__).with_suffix(".log").open("a") as log:
    log.write("loaded\\n")


class Users:
    pass


class helper_Thing:
    pass
"""


class TestLoadSourceFile:
    """Tests for loading include files."""

    def test_loaded_once(self, tmp_path: Path, source_writer: SourceWriter) -> None:
        path = source_writer(tmp_path, "users.py", COUNTER_SOURCE)
        first = load_source_file(path)
        second = load_source_file(str(path))

        assert first is second
        assert (tmp_path / "users.log").read_text() == "loaded\n"
        assert is_loaded(path)
        assert first.__name__ in sys.modules

    def test_not_loaded_before_first_use(self, tmp_path: Path, source_writer: SourceWriter) -> None:
        path = source_writer(tmp_path, "users.py", "class Users:\n    pass\n")
        assert not is_loaded(path)

    def test_same_stem_in_different_directories(
        self,
        tmp_path: Path,
        source_writer: SourceWriter,
    ) -> None:
        first = source_writer(tmp_path / "a", "Users.py", "NAME = 'a'\n")
        second = source_writer(tmp_path / "b", "Users.py", "NAME = 'b'\n")
        assert load_source_file(first).NAME == "a"
        assert load_source_file(second).NAME == "b"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CallableRegistrationError) as exc_info:
            load_source_file(tmp_path / "missing.py")
        assert exc_info.value.error_code is EnumBridgeErrorCode.INCLUDE_NOT_FOUND

    def test_syntax_error(self, tmp_path: Path, source_writer: SourceWriter) -> None:
        path = source_writer(tmp_path, "broken.py", "def broken(:\n")
        with pytest.raises(CallableRegistrationError) as exc_info:
            load_source_file(path)
        assert exc_info.value.error_code is EnumBridgeErrorCode.INCLUDE_FAILED
        assert isinstance(exc_info.value.__cause__, SyntaxError)
        assert not is_loaded(path)

    def test_failed_load_can_be_retried(self, tmp_path: Path, source_writer: SourceWriter) -> None:
        path = source_writer(tmp_path, "flaky.py", "raise RuntimeError('not yet')\n")
        with pytest.raises(CallableRegistrationError):
            load_source_file(path)
        source_writer(tmp_path, "flaky.py", "READY = True\n")
        assert load_source_file(path).READY is True


class TestFindClass:
    """Tests for class lookup in loaded modules."""

    def test_exact_and_case_insensitive(self, tmp_path: Path, source_writer: SourceWriter) -> None:
        module = load_source_file(source_writer(tmp_path, "users.py", COUNTER_SOURCE))
        assert find_class(module, "Users") is module.Users
        assert find_class(module, "users") is module.Users
        assert find_class(module, "HELPER_THING") is module.helper_Thing

    def test_missing_class(self, tmp_path: Path, source_writer: SourceWriter) -> None:
        module = load_source_file(source_writer(tmp_path, "users.py", COUNTER_SOURCE))
        assert find_class(module, "Orders") is None

    def test_imported_classes_ignored(self, tmp_path: Path, source_writer: SourceWriter) -> None:
        module = load_source_file(
            source_writer(tmp_path, "paths.py", "from pathlib import Path as path\n")
        )
        assert find_class(module, "Path") is None
