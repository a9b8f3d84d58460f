# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ajaxbridge utilities."""

from ajaxbridge.utils.util_identifier_validation import (
    normalize_identity,
    validate_class_name,
    validate_method_name,
)
from ajaxbridge.utils.util_module_loader import find_class, is_loaded, load_source_file

__all__: list[str] = [
    "find_class",
    "is_loaded",
    "load_source_file",
    "normalize_identity",
    "validate_class_name",
    "validate_method_name",
]
