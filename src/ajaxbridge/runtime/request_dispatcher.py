# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Request Dispatcher.

Routes a decoded request to a registered class method or user function and
runs the lifecycle hooks around the call.

State Machine:
    IDLE -> VALIDATING -> RESOLVING -> INVOKING -> COMPLETED

    - Identifiers failing syntactic validation, unknown targets and
      unexposed methods end in REJECTED; the invalid hook is notified.
    - A before hook that sets the end flag ends in REJECTED without
      invoking the target.
    - An exception raised while resolving or invoking ends in FAILED when
      an error hook is registered, and propagates unchanged otherwise.

Hooks:
    ``init_hook(response, target)``
        Runs once per controller instance, before its ``init()``.
    ``before_hook(response, target, method, end_flag)``
        Runs before every invocation. ``end_flag.end()`` stops the request.
    ``after_hook(response, target, method)``
        Runs after every successful invocation.
    ``invalid_hook(response, message)``
        Runs when a request is rejected as invalid.
    ``error_hook(response, exception)``
        Runs when resolution or invocation raised.

Response:
    The dispatcher owns one response that every controller is bound to. It
    is emptied at the start of each dispatch and returned in every outcome,
    so one dispatcher serves one request at a time.

Example:
    >>> dispatcher = RequestDispatcher(repository, functions)
    >>> outcome = dispatcher.dispatch({"abxcls": "App.Users", "abxmthd": "show", "abxargs": "[3]"})
    >>> outcome.state
    <EnumDispatchState.COMPLETED: 'completed'>
    >>> outcome.response.serialize()
    '{"abxobj":[...]}'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from ajaxbridge.enums import EnumDispatchState
from ajaxbridge.models import ModelDispatchRequest
from ajaxbridge.request.callable_controller import CallableController
from ajaxbridge.request.callable_descriptor import CallableDescriptor
from ajaxbridge.request.request_factory import RequestFactory
from ajaxbridge.response import Response
from ajaxbridge.runtime.callable_repository import CallableRepository
from ajaxbridge.runtime.model_dispatch_outcome import ModelDispatchOutcome
from ajaxbridge.runtime.user_function_registry import UserFunctionRegistry
from ajaxbridge.utils.util_identifier_validation import (
    validate_class_name,
    validate_method_name,
)

# Module-level logger for fallback when no custom logger is provided
_module_logger = logging.getLogger(__name__)


class DispatchEndFlag:
    """Mutable flag a before hook sets to stop the request."""

    __slots__ = ("ended",)

    def __init__(self) -> None:
        self.ended = False

    def end(self) -> None:
        self.ended = True


InitHook = Callable[[Response, object], None]
BeforeHook = Callable[[Response, object, str, DispatchEndFlag], None]
AfterHook = Callable[[Response, object, str], None]
InvalidHook = Callable[[Response, str], None]
ErrorHook = Callable[[Response, Exception], None]


class RequestDispatcher:
    """Dispatches requests to registered classes and functions.

    Args:
        repository: Resolves class identifiers.
        functions: Resolves user function aliases.
        response: Shared response; a new one is created when omitted.
        logger: Optional custom logger. Defaults to the module logger.
    """

    def __init__(
        self,
        repository: CallableRepository,
        functions: UserFunctionRegistry,
        response: Response | None = None,
        logger: logging.Logger | None = None,
        *,
        init_hook: InitHook | None = None,
        before_hook: BeforeHook | None = None,
        after_hook: AfterHook | None = None,
        invalid_hook: InvalidHook | None = None,
        error_hook: ErrorHook | None = None,
    ) -> None:
        self._repository = repository
        self._functions = functions
        self._response = response if response is not None else Response()
        self._logger: logging.Logger = logger if logger is not None else _module_logger
        self.init_hook = init_hook
        self.before_hook = before_hook
        self.after_hook = after_hook
        self.invalid_hook = invalid_hook
        self.error_hook = error_hook
        self._state = EnumDispatchState.IDLE

    @property
    def response(self) -> Response:
        return self._response

    @property
    def state(self) -> EnumDispatchState:
        """State of the current or last dispatch."""
        return self._state

    @staticmethod
    def can_process_request(data: Mapping[str, object]) -> bool:
        """Whether decoded form fields name a class or function target."""
        return ModelDispatchRequest.is_bridge_request(data)

    # =========================================================================
    # Target access
    # =========================================================================

    def _resolve_descriptor(self, identifier: str) -> CallableDescriptor | None:
        descriptor = self._repository.get_callable_object(identifier)
        if descriptor is None and self._repository.has_symbol(identifier):
            # A class bound with register_symbol only: register it on first use.
            self._repository.add_class(identifier)
            descriptor = self._repository.get_callable_object(identifier)
        return descriptor

    def _init_target(self, target: object) -> None:
        if not isinstance(target, CallableController) or target.response is not None:
            return
        target.response = self._response
        if self.init_hook is not None:
            self.init_hook(self._response, target)
        target.init()

    def controller(self, identifier: str) -> object | None:
        """Return the initialized instance registered for a class, or None."""
        descriptor = self._resolve_descriptor(identifier)
        if descriptor is None:
            return None
        target = descriptor.get_registered_object()
        self._init_target(target)
        return target

    def request(self, identifier: str) -> RequestFactory | None:
        """Return the request factory of a class, or None."""
        descriptor = self._resolve_descriptor(identifier)
        return descriptor.request_factory if descriptor is not None else None

    # =========================================================================
    # Dispatch
    # =========================================================================

    def dispatch(
        self,
        request: ModelDispatchRequest | Mapping[str, object],
    ) -> ModelDispatchOutcome:
        """Dispatch one request.

        Args:
            request: A decoded request, or the form fields to decode it from.

        Returns:
            The terminal outcome, always carrying the shared response.

        Raises:
            Exception: Whatever the resolved target raised, when no error
                hook is registered.
        """
        if not isinstance(request, ModelDispatchRequest):
            request = ModelDispatchRequest.from_form(request)
        self._response.clear_commands()

        if request.is_function_call:
            target_name = request.function_name
            method = None
        else:
            target_name = request.class_name
            method = request.method

        self._state = EnumDispatchState.VALIDATING
        reason = self._validate(request)
        if reason is not None:
            return self._reject(reason, target_name, method)

        try:
            self._state = EnumDispatchState.RESOLVING
            if request.is_function_call:
                return self._dispatch_function(request)
            return self._dispatch_class(request)
        except Exception as e:
            self._logger.error(
                "Dispatch failed: %s",
                e,
                extra={
                    "target_name": target_name,
                    "method": method,
                    "failed_state": str(self._state),
                    "error_type": type(e).__name__,
                },
            )
            if self.error_hook is None:
                self._state = EnumDispatchState.FAILED
                raise
            return self._fail(e, target_name, method)

    @staticmethod
    def _validate(request: ModelDispatchRequest) -> str | None:
        if request.is_function_call:
            if not validate_method_name(request.function_name):
                return f"Invalid function name: {request.function_name!r}"
            return None
        if request.class_name is None:
            return "Request has no class or function target"
        if not validate_class_name(request.class_name):
            return f"Invalid class name: {request.class_name!r}"
        if not validate_method_name(request.method):
            return f"Invalid method name: {request.method!r}"
        return None

    def _dispatch_class(self, request: ModelDispatchRequest) -> ModelDispatchOutcome:
        class_name = request.class_name or ""
        method = request.method or ""

        descriptor = self._resolve_descriptor(class_name)
        if descriptor is None:
            return self._reject(f"Class not registered: {class_name}", class_name, method)
        if not descriptor.has_method(method):
            return self._reject(
                f"Method not exposed: {class_name}.{method}", class_name, method
            )

        target = descriptor.get_registered_object()
        self._init_target(target)

        self._state = EnumDispatchState.INVOKING
        if self._ended_by_before_hook(target, method):
            return self._ended(class_name, method)

        self._logger.debug(
            "Invoking %s.%s",
            descriptor.identity,
            method,
            extra={"identity": descriptor.identity, "method": method, "arg_count": len(request.args)},
        )
        result = descriptor.call(method, request.args)
        self._collect(result)

        if self.after_hook is not None:
            self.after_hook(self._response, target, method)
        return self._complete(class_name, method, result)

    def _dispatch_function(self, request: ModelDispatchRequest) -> ModelDispatchOutcome:
        alias = request.function_name or ""

        function = self._functions.get(alias)
        if function is None or function.resolve() is None:
            return self._reject(f"Function not registered: {alias}", alias, None)

        self._state = EnumDispatchState.INVOKING
        if self._ended_by_before_hook(function, alias):
            return self._ended(alias, None)

        self._logger.debug(
            "Invoking function %s",
            alias,
            extra={"function": alias, "arg_count": len(request.args)},
        )
        result = function.call(request.args)
        self._collect(result)

        if self.after_hook is not None:
            self.after_hook(self._response, function, alias)
        return self._complete(alias, None, result)

    def _ended_by_before_hook(self, target: object, method: str) -> bool:
        if self.before_hook is None:
            return False
        end_flag = DispatchEndFlag()
        self.before_hook(self._response, target, method, end_flag)
        return end_flag.ended

    def _collect(self, result: object) -> None:
        # Targets may build and return their own response.
        if isinstance(result, Response) and result is not self._response:
            self._response.append_response(result)

    # =========================================================================
    # Outcomes
    # =========================================================================

    def _outcome(
        self,
        state: EnumDispatchState,
        target_name: str | None,
        method: str | None,
        **fields: object,
    ) -> ModelDispatchOutcome:
        self._state = state
        return ModelDispatchOutcome(
            state=state,
            response=self._response,
            target_name=target_name,
            method=method,
            **fields,
        )

    def _complete(
        self,
        target_name: str,
        method: str | None,
        result: object,
    ) -> ModelDispatchOutcome:
        self._logger.info(
            "Dispatch completed",
            extra={
                "target_name": target_name,
                "method": method,
                "command_count": len(self._response),
            },
        )
        return self._outcome(EnumDispatchState.COMPLETED, target_name, method, result=result)

    def _ended(self, target_name: str, method: str | None) -> ModelDispatchOutcome:
        self._logger.info(
            "Dispatch ended by before hook",
            extra={"target_name": target_name, "method": method},
        )
        return self._outcome(
            EnumDispatchState.REJECTED,
            target_name,
            method,
            reason="Request ended by before hook",
        )

    def _reject(
        self,
        reason: str,
        target_name: str | None,
        method: str | None,
    ) -> ModelDispatchOutcome:
        self._logger.warning(
            "Dispatch rejected: %s",
            reason,
            extra={"target_name": target_name, "method": method},
        )
        if self.invalid_hook is not None:
            self.invalid_hook(self._response, reason)
        return self._outcome(EnumDispatchState.REJECTED, target_name, method, reason=reason)

    def _fail(
        self,
        error: Exception,
        target_name: str | None,
        method: str | None,
    ) -> ModelDispatchOutcome:
        outcome = self._outcome(EnumDispatchState.FAILED, target_name, method, error=error)
        if self.error_hook is not None:
            self.error_hook(self._response, error)
        return outcome


__all__ = ["DispatchEndFlag", "RequestDispatcher"]
