# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ajaxbridge - Server-side core of an AJAX application bridge.

Registers server-side classes, functions and controller directories,
generates the matching client-side JavaScript stubs, dispatches incoming
requests to the registered callables, and returns the resulting
client-side commands as an ordered response stream.

Key Components:
    - CallableRepository: Registry of callable classes and namespaces
    - UserFunctionRegistry: Registry of standalone functions
    - RequestDispatcher: Request validation, resolution, invocation and hooks
    - Response: Ordered, serializable response command stream
    - wire_bridge: Builds all of the above from a BridgeConfig
"""

from ajaxbridge.request import CallableController, Parameter
from ajaxbridge.response import Response
from ajaxbridge.runtime import (
    BridgeConfig,
    CallableRepository,
    RequestDispatcher,
    UserFunctionRegistry,
    wire_bridge,
)

__version__ = "0.1.0"

__all__: list[str] = [
    "BridgeConfig",
    "CallableController",
    "CallableRepository",
    "Parameter",
    "RequestDispatcher",
    "Response",
    "UserFunctionRegistry",
    "__version__",
    "wire_bridge",
]
