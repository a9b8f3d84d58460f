# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared pytest configuration for all unit tests.

This conftest.py automatically applies the `unit` marker to all tests
in the tests/unit/ directory hierarchy, and provides the fixtures shared
by the repository, dispatcher and wiring tests.

Marker Application:
    All tests under tests/unit/** are automatically marked with:
    - pytest.mark.unit

This enables selective test execution:
    # Run only unit tests
    pytest -m unit
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from textwrap import dedent

import pytest

from ajaxbridge.runtime import CallableRepository, JinjaTemplateRenderer, ServiceContainer
from ajaxbridge.utils.util_module_loader import _reset_loaded_modules

# =============================================================================
# Controller Sources
# =============================================================================

USERS_CONTROLLER = """
from ajaxbridge import CallableController


class Users(CallableController):
    def show(self, user_id):
        self.response.assign("user", "innerHTML", f"User {user_id}")
        return user_id

    def list(self):
        self.response.script("listUsers()")

    def helper(self):
        return "internal"

    def _private(self):
        return None
"""

REPORTS_CONTROLLER = """
class Reports:
    def summary(self):
        return "summary"
"""


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Dynamically add unit marker to all tests in the unit directory."""
    unit_marker = pytest.mark.unit

    for item in items:
        if "tests/unit" in str(item.fspath):
            if not any(marker.name == "unit" for marker in item.iter_markers()):
                item.add_marker(unit_marker)


def write_source(directory: Path, relative: str, source: str) -> Path:
    """Write a dedented source file below ``directory`` and return its path."""
    path = directory / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dedent(source).lstrip())
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_loaded_modules() -> Iterator[None]:
    """Forget include files loaded by a test."""
    yield
    _reset_loaded_modules()


@pytest.fixture
def controllers_dir(tmp_path: Path) -> Path:
    """Create a controller tree.

    Structure:
        tmp_path/controllers/
        |-- Users.py
        |-- user_list.py        (skipped: '_' is a client separator)
        |-- __init__.py         (skipped)
        |-- notes.txt           (skipped)
        |-- Admin/
        |   |-- Reports.py
    """
    root = tmp_path / "controllers"
    write_source(root, "Users.py", USERS_CONTROLLER)
    write_source(root, "user_list.py", REPORTS_CONTROLLER)
    write_source(root, "__init__.py", "")
    write_source(root, "notes.txt", "not a controller")
    write_source(root, "Admin/Reports.py", REPORTS_CONTROLLER)
    return root


@pytest.fixture
def source_writer() -> Callable[[Path, str, str], Path]:
    """The write_source helper, for tests that build their own files."""
    return write_source


@pytest.fixture
def renderer() -> JinjaTemplateRenderer:
    return JinjaTemplateRenderer()


@pytest.fixture
def container() -> ServiceContainer:
    return ServiceContainer()


@pytest.fixture
def repository(
    renderer: JinjaTemplateRenderer,
    container: ServiceContainer,
) -> CallableRepository:
    return CallableRepository(renderer, container, "AjaxBridge")
