# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ajaxbridge enumerations.

Exports:
    EnumBridgeComponent: Pipeline component named in error context
    EnumBridgeErrorCode: Error classification codes
    EnumCallableKind: Class or function callables
    EnumDispatchState: Request lifecycle states
    EnumParameterType: Client call parameter type tags
    EnumResponseCommand: Built-in response command names
"""

from ajaxbridge.enums.enum_bridge_component import EnumBridgeComponent
from ajaxbridge.enums.enum_bridge_error_code import EnumBridgeErrorCode
from ajaxbridge.enums.enum_callable_kind import EnumCallableKind
from ajaxbridge.enums.enum_dispatch_state import EnumDispatchState
from ajaxbridge.enums.enum_parameter_type import EnumParameterType
from ajaxbridge.enums.enum_response_command import EnumResponseCommand

__all__: list[str] = [
    "EnumBridgeComponent",
    "EnumBridgeErrorCode",
    "EnumCallableKind",
    "EnumDispatchState",
    "EnumParameterType",
    "EnumResponseCommand",
]
