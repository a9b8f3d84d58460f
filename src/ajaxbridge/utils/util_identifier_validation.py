# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Syntactic validation of request identifiers.

Class identifiers start with a letter and contain letters, digits and the
separators ``.``, ``_`` and ``\\``. Method and function names start with a
letter and contain letters, digits and ``_``. These checks run before any
lookup so that malformed input never reaches the repository.
"""

from __future__ import annotations

import re

from ajaxbridge.constants import IDENTITY_SEPARATOR

_CLASS_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_.\\]*$")
_METHOD_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")

# Upper bound on identifier length accepted from the client.
MAX_IDENTIFIER_LENGTH = 255


def validate_class_name(name: str | None) -> bool:
    """Return True if ``name`` is an acceptable class identifier."""
    if not name or len(name) > MAX_IDENTIFIER_LENGTH:
        return False
    return _CLASS_RE.match(name) is not None


def validate_method_name(name: str | None) -> bool:
    """Return True if ``name`` is an acceptable method or function name."""
    if not name or len(name) > MAX_IDENTIFIER_LENGTH:
        return False
    return _METHOD_RE.match(name) is not None


def normalize_identity(identifier: str) -> str:
    """Convert a client identifier to internal form.

    Both client separators become the internal separator and separators at
    either end are removed: ``"App.Admin_Users."`` -> ``"App\\Admin\\Users"``.
    """
    converted = str(identifier).replace(".", IDENTITY_SEPARATOR).replace(
        "_", IDENTITY_SEPARATOR
    )
    return converted.strip(IDENTITY_SEPARATOR)


__all__ = [
    "MAX_IDENTIFIER_LENGTH",
    "normalize_identity",
    "validate_class_name",
    "validate_method_name",
]
