# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared constants for the ajaxbridge request/response pipeline.

The request field names are the contract between the generated client stubs
and the request parser. They are emitted by the ``support/*.js`` templates
and read back by ``ModelDispatchRequest.from_form``.
"""

from __future__ import annotations

# Canonical separator used inside callable identities. Client identifiers
# written with "." or "_" are normalized to this form before lookup.
IDENTITY_SEPARATOR: str = "\\"

# Separators accepted on the client side. Anything else normalizes to ".".
CLIENT_SEPARATORS: tuple[str, ...] = (".", "_")
DEFAULT_CLIENT_SEPARATOR: str = "."

# Wildcard key for options that apply to every method (or every class).
WILDCARD_KEY: str = "*"

# Name of the client-side runtime object exposing request helpers.
JS_RUNTIME_NAMESPACE: str = "ajaxbridge"

# Request fields posted by the generated stubs.
REQUEST_FIELD_CLASS: str = "abxcls"
REQUEST_FIELD_METHOD: str = "abxmthd"
REQUEST_FIELD_FUNCTION: str = "abxfun"
REQUEST_FIELD_ARGS: str = "abxargs"

# Top-level key of the serialized response payload.
RESPONSE_PAYLOAD_KEY: str = "abxobj"

# Source files recognized by directory and namespace scans.
SOURCE_FILE_SUFFIX: str = ".py"

# Template names resolved by the template renderer.
TEMPLATE_CALLABLE_OBJECT: str = "support/object.js"
TEMPLATE_USER_FUNCTION: str = "support/function.js"
TEMPLATE_PAGINATION: str = "pagination/links.html"

# Container key suffixes for the per-callable factories.
FACTORY_SUFFIX_REQUEST: str = "_Factory_Rq"
FACTORY_SUFFIX_PAGINATOR: str = "_Factory_Pg"

__all__ = [
    "CLIENT_SEPARATORS",
    "DEFAULT_CLIENT_SEPARATOR",
    "FACTORY_SUFFIX_PAGINATOR",
    "FACTORY_SUFFIX_REQUEST",
    "IDENTITY_SEPARATOR",
    "JS_RUNTIME_NAMESPACE",
    "REQUEST_FIELD_ARGS",
    "REQUEST_FIELD_CLASS",
    "REQUEST_FIELD_FUNCTION",
    "REQUEST_FIELD_METHOD",
    "RESPONSE_PAYLOAD_KEY",
    "SOURCE_FILE_SUFFIX",
    "TEMPLATE_CALLABLE_OBJECT",
    "TEMPLATE_PAGINATION",
    "TEMPLATE_USER_FUNCTION",
    "WILDCARD_KEY",
]
