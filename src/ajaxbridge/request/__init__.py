# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Client-facing request pieces: parameters, calls, descriptors, controllers."""

from ajaxbridge.request.callable_controller import CallableController
from ajaxbridge.request.callable_descriptor import (
    BASE_CONTROLLER_METHODS,
    CallableDescriptor,
)
from ajaxbridge.request.client_call import ClientCall
from ajaxbridge.request.paginator import Paginator
from ajaxbridge.request.parameter import Parameter
from ajaxbridge.request.request_factory import RequestFactory
from ajaxbridge.request.user_function import UserFunctionDescriptor

__all__: list[str] = [
    "BASE_CONTROLLER_METHODS",
    "CallableController",
    "CallableDescriptor",
    "ClientCall",
    "Paginator",
    "Parameter",
    "RequestFactory",
    "UserFunctionDescriptor",
]
