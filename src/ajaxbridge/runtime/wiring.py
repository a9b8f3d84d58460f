# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bridge wiring.

Builds every collaborator of a bridge instance from its configuration and
registers them in a ServiceContainer. Components receive their
collaborators explicitly; nothing is looked up from global state.

Service Keys:
    - ``ajaxbridge.config``: BridgeConfig
    - ``ajaxbridge.renderer``: JinjaTemplateRenderer
    - ``ajaxbridge.repository``: CallableRepository
    - ``ajaxbridge.functions``: UserFunctionRegistry
    - ``ajaxbridge.dispatcher``: RequestDispatcher

Controllers:
    Each ``controllers`` entry of the configuration is registered as a
    namespace. The base controller methods are added to its protected list.

Example:
    >>> services = wire_bridge(BridgeConfig.from_yaml("ajaxbridge.yaml"))
    >>> script = services.get_script()
    >>> outcome = services.dispatcher.dispatch(form_fields)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ajaxbridge.request.callable_descriptor import BASE_CONTROLLER_METHODS
from ajaxbridge.runtime.callable_repository import CallableRepository
from ajaxbridge.runtime.config import BridgeConfig
from ajaxbridge.runtime.model_bridge_services import ModelBridgeServices
from ajaxbridge.runtime.request_dispatcher import RequestDispatcher
from ajaxbridge.runtime.service_container import ServiceContainer
from ajaxbridge.runtime.template_renderer import JinjaTemplateRenderer
from ajaxbridge.runtime.user_function_registry import UserFunctionRegistry

logger = logging.getLogger(__name__)

SERVICE_CONFIG = "ajaxbridge.config"
SERVICE_RENDERER = "ajaxbridge.renderer"
SERVICE_REPOSITORY = "ajaxbridge.repository"
SERVICE_FUNCTIONS = "ajaxbridge.functions"
SERVICE_DISPATCHER = "ajaxbridge.dispatcher"


def register_controllers(repository: CallableRepository, config: BridgeConfig) -> list[str]:
    """Register the configured controller directories as namespaces.

    Returns:
        The registered namespaces, in configuration order.

    Raises:
        CallableRegistrationError: If a controller directory does not exist.
    """
    namespaces: list[str] = []
    for entry in config.controllers:
        protected = sorted(set(entry.protected) | BASE_CONTROLLER_METHODS)
        repository.add_namespace(
            entry.namespace,
            {
                "directory": entry.directory,
                "separator": entry.separator,
                "protected": protected,
            },
        )
        namespaces.append(entry.namespace)
    return namespaces


def wire_bridge(
    config: BridgeConfig | None = None,
    *,
    template_directories: Iterable[Path | str] = (),
    container: ServiceContainer | None = None,
) -> ModelBridgeServices:
    """Build and register the bridge services.

    Args:
        config: Bridge configuration. Defaults apply when omitted.
        template_directories: Searched before the packaged templates.
        container: Container to register into; a new one when omitted.

    Raises:
        CallableRegistrationError: If a configured controller directory
            does not exist.
    """
    config = config if config is not None else BridgeConfig()
    container = container if container is not None else ServiceContainer()

    renderer = JinjaTemplateRenderer(template_directories)
    repository = CallableRepository(renderer, container, config.prefix_class)
    functions = UserFunctionRegistry(renderer, config.prefix_function)
    dispatcher = RequestDispatcher(repository, functions)

    container.set_instance(SERVICE_CONFIG, config)
    container.set_instance(SERVICE_RENDERER, renderer)
    container.set_instance(SERVICE_REPOSITORY, repository)
    container.set_instance(SERVICE_FUNCTIONS, functions)
    container.set_instance(SERVICE_DISPATCHER, dispatcher)

    namespaces = register_controllers(repository, config)

    logger.info(
        "Bridge services wired successfully",
        extra={
            "controller_namespaces": namespaces,
            "request_uri": config.request_uri,
        },
    )
    return ModelBridgeServices(
        config=config,
        container=container,
        renderer=renderer,
        repository=repository,
        functions=functions,
        dispatcher=dispatcher,
    )


__all__ = [
    "SERVICE_CONFIG",
    "SERVICE_DISPATCHER",
    "SERVICE_FUNCTIONS",
    "SERVICE_RENDERER",
    "SERVICE_REPOSITORY",
    "register_controllers",
    "wire_bridge",
]
