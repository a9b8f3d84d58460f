# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Response command stream."""

from ajaxbridge.response.response import Response

__all__: list[str] = ["Response"]
