# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Callable Repository.

The registry of every class exposed to the client. Registration inputs are
explicit classes, scanned directories and lazily scanned namespaces; the
repository turns them into CallableDescriptor instances on demand, caches
them by identity, and produces the client stub script and its content hash.

Registration Sources:
    - ``add_class``: a class registered by name, optionally with its class
      object (the explicit symbol table) or an include file.
    - ``add_directory``: every source file found under a directory is
      registered as a class named after the file. Scanned once per process.
    - ``add_namespace``: a directory grouped under a dotted namespace.
      Nothing is scanned until a lookup or a script pass needs it.

Lookup:
    Client identifiers are normalized first (``.`` and ``_`` become the
    internal separator). Explicit classes are matched exactly; otherwise the
    LONGEST registered namespace that prefixes the identity is used, so
    overlapping namespaces resolve the same way regardless of the order
    they were registered in.

Not Found:
    An identifier that matches nothing, or whose class cannot be found,
    yields ``None``. Exceptions are reserved for environment failures:
    missing or unreadable directories and include files that fail to load.

Thread Safety:
    Every registration and every first-time materialization runs under a
    single reentrant lock, so a descriptor and its factories are created
    exactly once even when the first lookups race.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from collections.abc import Iterator, Mapping
from pathlib import Path

from ajaxbridge.constants import (
    FACTORY_SUFFIX_PAGINATOR,
    FACTORY_SUFFIX_REQUEST,
    IDENTITY_SEPARATOR,
    JS_RUNTIME_NAMESPACE,
    REQUEST_FIELD_CLASS,
    REQUEST_FIELD_METHOD,
    SOURCE_FILE_SUFFIX,
    TEMPLATE_CALLABLE_OBJECT,
)
from ajaxbridge.enums import EnumBridgeComponent, EnumBridgeErrorCode
from ajaxbridge.errors import CallableRegistrationError, ModelBridgeErrorContext
from ajaxbridge.models import (
    ModelClassOptions,
    ModelDirectoryOptions,
    ModelNamespaceRegistration,
)
from ajaxbridge.request.callable_descriptor import CallableDescriptor
from ajaxbridge.request.paginator import Paginator
from ajaxbridge.request.parameter import Parameter
from ajaxbridge.request.request_factory import RequestFactory
from ajaxbridge.runtime.service_container import ServiceContainer
from ajaxbridge.runtime.template_renderer import ProtocolTemplateRenderer
from ajaxbridge.utils.util_identifier_validation import normalize_identity
from ajaxbridge.utils.util_module_loader import find_class, load_source_file

logger = logging.getLogger(__name__)


def _short_name(identity: str) -> str:
    return identity.rsplit(IDENTITY_SEPARATOR, 1)[-1]


class CallableRepository:
    """Registry of callable classes.

    Args:
        renderer: Renders ``support/object.js`` for each descriptor.
        container: Receives the per-descriptor request and paginator factories.
        prefix: Prefix of every generated class stub (``core.prefix.class``).

    Example:
        >>> repository = CallableRepository(JinjaTemplateRenderer(), ServiceContainer())
        >>> repository.add_namespace("App", {"directory": "app/controllers"})
        >>> descriptor = repository.get_callable_object("App.Users")
        >>> descriptor.exposed_methods
        ['list', 'show']
    """

    def __init__(
        self,
        renderer: ProtocolTemplateRenderer,
        container: ServiceContainer,
        prefix: str = "",
    ) -> None:
        self._renderer = renderer
        self._container = container
        self._prefix = prefix

        # identity -> options of explicitly registered classes
        self._class_options: dict[str, ModelClassOptions] = {}
        # identity -> class object (explicit symbol table)
        self._symbols: dict[str, type] = {}
        # namespace -> lazy directory registration
        self._namespace_options: dict[str, ModelNamespaceRegistration] = {}
        # every namespace found while scanning, with its client separator
        self._namespaces: dict[str, str] = {}
        self._scanned_namespaces: set[str] = set()
        # resolved directory -> class names registered from it
        self._scanned_directories: dict[Path, list[str]] = {}
        self._descriptors: dict[str, CallableDescriptor] = {}

        self._lock: threading.RLock = threading.RLock()

    @property
    def prefix(self) -> str:
        return self._prefix

    # =========================================================================
    # Registration
    # =========================================================================

    def register_symbol(self, name: str, cls: type) -> None:
        """Bind an identity to its class object."""
        with self._lock:
            self._symbols[normalize_identity(name)] = cls

    def has_symbol(self, name: str) -> bool:
        with self._lock:
            return normalize_identity(name) in self._symbols

    def add_class(
        self,
        name: str,
        options: ModelClassOptions | Mapping[str, object] | None = None,
        *,
        cls: type | None = None,
    ) -> None:
        """Register a class by name. A second call for the same name replaces the first.

        Args:
            name: Class identity, in client or internal form.
            options: Class options (mapping or ModelClassOptions).
            cls: The class object. When omitted the class is looked up in
                the ``include`` file on first use.
        """
        identity = normalize_identity(name)
        class_options = ModelClassOptions.from_mapping(options)
        with self._lock:
            self._class_options[identity] = class_options
            if cls is not None:
                self._symbols[identity] = cls
        logger.debug(
            "Registered class %s",
            identity,
            extra={
                "identity": identity,
                "include": str(class_options.include) if class_options.include else None,
            },
        )

    def add_directory(
        self,
        directory: Path | str,
        options: ModelDirectoryOptions | Mapping[str, object] | None = None,
    ) -> list[str]:
        """Register every class found in a directory tree.

        Each source file registers a class named after the file. A directory
        is scanned once per process; later calls return the cached result.

        Returns:
            Class names registered from the directory, sorted.

        Raises:
            CallableRegistrationError: If the directory is missing or unreadable.
        """
        directory_options = ModelDirectoryOptions.from_mapping(options)
        root = Path(directory).resolve()
        with self._lock:
            cached = self._scanned_directories.get(root)
            if cached is not None:
                logger.debug(
                    "Directory %s already scanned",
                    root,
                    extra={"directory": str(root), "class_count": len(cached)},
                )
                return list(cached)

            class_names: list[str] = []
            for source_file, _ in self._source_files(root, operation="add_directory"):
                class_name = source_file.stem
                defaults = ModelClassOptions(
                    include=source_file if directory_options.autoload else None
                )
                self.add_class(
                    class_name,
                    directory_options.class_options(class_name, defaults),
                )
                if class_name in class_names:
                    logger.warning(
                        "Class %s from %s replaces an earlier file with the same name",
                        class_name,
                        source_file,
                        extra={
                            "class_name": class_name,
                            "source_file": str(source_file),
                            "directory": str(root),
                        },
                    )
                    continue
                class_names.append(class_name)

            class_names.sort()
            self._scanned_directories[root] = class_names

        logger.info(
            "Registered %d classes from %s",
            len(class_names),
            root,
            extra={"directory": str(root), "class_count": len(class_names)},
        )
        return list(class_names)

    def add_namespace(
        self,
        namespace: str,
        options: ModelNamespaceRegistration | Mapping[str, object],
    ) -> None:
        """Record a namespace whose directory is scanned on demand.

        Re-registering a namespace that has already been scanned is a no-op.

        Raises:
            BridgeConfigurationError: If the options are invalid.
            CallableRegistrationError: If the directory does not exist.
        """
        if isinstance(options, ModelNamespaceRegistration):
            registration = options.model_copy(
                update={"namespace": normalize_identity(namespace)}
            )
        else:
            registration = ModelNamespaceRegistration.from_mapping(
                options, namespace=normalize_identity(namespace)
            )
        directory = registration.directory.resolve()
        if not directory.is_dir():
            raise CallableRegistrationError(
                f"Namespace directory not found: {directory}",
                error_code=EnumBridgeErrorCode.DIRECTORY_NOT_FOUND,
                context=ModelBridgeErrorContext.with_correlation(
                    component=EnumBridgeComponent.REPOSITORY,
                    operation="add_namespace",
                    target_name=registration.namespace,
                ),
                directory=str(directory),
            )

        with self._lock:
            if registration.namespace in self._scanned_namespaces:
                logger.debug(
                    "Namespace %s already materialized, ignoring registration",
                    registration.namespace,
                    extra={"namespace": registration.namespace},
                )
                return
            self._namespace_options[registration.namespace] = registration.model_copy(
                update={"directory": directory}
            )
        logger.debug(
            "Registered namespace %s",
            registration.namespace,
            extra={"namespace": registration.namespace, "directory": str(directory)},
        )

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_callable_object(self, identifier: str) -> CallableDescriptor | None:
        """Return the descriptor of a class, creating it on first request.

        Returns:
            The cached descriptor, or None when the identifier is not
            registered or its class cannot be found.

        Raises:
            CallableRegistrationError: If the class include file fails to load.
        """
        identity = normalize_identity(identifier)
        with self._lock:
            descriptor = self._descriptors.get(identity)
            if descriptor is not None:
                return descriptor

            options = self._class_options.get(identity)
            if options is None:
                options = self._options_from_namespace(identity)
            if options is None:
                return None
            return self._create_callable_object(identity, options)

    def get_registered_object(self, identifier: str) -> object | None:
        """Return the instance serving requests for an identifier, or None."""
        descriptor = self.get_callable_object(identifier)
        return descriptor.get_registered_object() if descriptor else None

    def find_namespace(self, identity: str) -> str | None:
        """Longest registered namespace that prefixes ``identity``."""
        matches = [
            namespace
            for namespace in self._namespace_options
            if identity.startswith(namespace + IDENTITY_SEPARATOR)
        ]
        return max(matches, key=len) if matches else None

    def _options_from_namespace(
        self,
        identity: str,
        namespace: str | None = None,
    ) -> ModelClassOptions | None:
        if namespace is None:
            namespace = self.find_namespace(identity)
        if namespace is None:
            return None

        registration = self._namespace_options[namespace]
        include = None
        if registration.autoload:
            include = self._namespace_source_file(registration, identity)
        defaults = ModelClassOptions(separator=registration.separator, include=include)
        return registration.class_options(
            identity, defaults, short_name=_short_name(identity)
        )

    @staticmethod
    def _namespace_source_file(
        registration: ModelNamespaceRegistration,
        identity: str,
    ) -> Path | None:
        relative = identity[len(registration.namespace) + 1 :].split(IDENTITY_SEPARATOR)
        candidate = registration.directory.joinpath(
            *relative[:-1], relative[-1] + SOURCE_FILE_SUFFIX
        )
        return candidate if candidate.is_file() else None

    def _create_callable_object(
        self,
        identity: str,
        options: ModelClassOptions,
    ) -> CallableDescriptor | None:
        symbol = self._symbols.get(identity)
        if symbol is None and options.include is not None:
            module = load_source_file(options.include)
            symbol = find_class(module, _short_name(identity))
            if symbol is not None:
                self._symbols[identity] = symbol
        if symbol is None:
            logger.debug(
                "No class found for %s",
                identity,
                extra={"identity": identity},
            )
            return None

        descriptor = CallableDescriptor(identity, symbol, include_path=options.include)
        descriptor.apply_options(options)
        descriptor.bind_container(self._container)
        self._descriptors[identity] = descriptor

        prefix = self._prefix
        renderer = self._renderer
        self._container.set(
            identity + FACTORY_SUFFIX_REQUEST,
            lambda: RequestFactory(descriptor, prefix),
        )
        self._container.set(
            identity + FACTORY_SUFFIX_PAGINATOR,
            lambda: Paginator(descriptor.request_factory, renderer),
        )

        logger.debug(
            "Created callable object %s",
            identity,
            extra={
                "identity": identity,
                "js_name": descriptor.js_name,
                "method_count": len(descriptor.exposed_methods),
            },
        )
        return descriptor

    # =========================================================================
    # Materialization
    # =========================================================================

    def _source_files(
        self,
        root: Path,
        *,
        operation: str,
    ) -> Iterator[tuple[Path, tuple[str, ...]]]:
        """Yield ``(file, relative directory parts)`` for every class source file.

        Files and directories whose names cannot form a client identifier
        are skipped. Names containing ``_`` are skipped with a warning since
        clients use ``_`` as a separator.
        """
        context = ModelBridgeErrorContext.with_correlation(
            component=EnumBridgeComponent.REPOSITORY,
            operation=operation,
            target_name=str(root),
        )
        if not root.is_dir():
            raise CallableRegistrationError(
                f"Directory not found: {root}",
                error_code=EnumBridgeErrorCode.DIRECTORY_NOT_FOUND,
                context=context,
            )
        try:
            files = sorted(root.rglob("*" + SOURCE_FILE_SUFFIX))
        except OSError as e:
            raise CallableRegistrationError(
                f"Directory cannot be read: {root}: {e}",
                error_code=EnumBridgeErrorCode.DIRECTORY_UNREADABLE,
                context=context,
            ) from e

        for source_file in files:
            if not source_file.is_file():
                continue
            parts = source_file.relative_to(root).with_suffix("").parts
            if any(part.startswith("_") or not part.isidentifier() for part in parts):
                continue
            if any("_" in part for part in parts):
                logger.warning(
                    "Skipping %s: '_' is a client separator",
                    source_file,
                    extra={"source_file": str(source_file), "directory": str(root)},
                )
                continue
            yield source_file, parts[:-1]

    def _create_callable_objects(self) -> None:
        """Materialize every registered class and scan every pending namespace."""
        with self._lock:
            for identity in sorted(self._class_options):
                if identity not in self._descriptors:
                    self._create_callable_object(identity, self._class_options[identity])

            for namespace in sorted(self._namespace_options):
                if namespace in self._scanned_namespaces:
                    continue
                self._scanned_namespaces.add(namespace)
                registration = self._namespace_options[namespace]
                self._namespaces[namespace] = registration.separator

                for source_file, class_path in self._source_files(
                    registration.directory, operation="scan_namespace"
                ):
                    path = IDENTITY_SEPARATOR.join((namespace, *class_path))
                    self._namespaces[path] = registration.separator
                    identity = path + IDENTITY_SEPARATOR + source_file.stem
                    if identity in self._descriptors:
                        continue
                    options = self._options_from_namespace(identity, namespace)
                    if options is not None:
                        self._create_callable_object(identity, options)

                logger.info(
                    "Scanned namespace %s",
                    namespace,
                    extra={
                        "namespace": namespace,
                        "directory": str(registration.directory),
                    },
                )

    @property
    def namespaces(self) -> dict[str, str]:
        """Namespaces found so far, mapped to their client separator."""
        with self._lock:
            return dict(self._namespaces)

    @property
    def registered_classes(self) -> list[str]:
        """Identities registered by ``add_class`` or ``add_directory``, sorted."""
        with self._lock:
            return sorted(self._class_options)

    @property
    def descriptors(self) -> list[CallableDescriptor]:
        """Materialized descriptors, sorted by identity."""
        with self._lock:
            return [self._descriptors[key] for key in sorted(self._descriptors)]

    # =========================================================================
    # Client output
    # =========================================================================

    def generate_hash(self) -> str:
        """Digest of the registered surface: namespaces and exposed methods."""
        self._create_callable_objects()
        with self._lock:
            content = "".join(
                namespace + separator
                for namespace, separator in sorted(self._namespaces.items())
            )
            content += "".join(
                identity + "|".join(self._descriptors[identity].exposed_methods)
                for identity in sorted(self._descriptors)
            )
        return hashlib.md5(content.encode("utf-8")).hexdigest()

    def get_script(self) -> str:
        """Client stubs: namespace objects, then one block per descriptor.

        Raises:
            TemplateRenderError: If ``support/object.js`` cannot be rendered.
        """
        self._create_callable_objects()
        with self._lock:
            code: list[str] = []
            declared: set[str] = set()
            for namespace in sorted(self._namespaces):
                parts = namespace.split(IDENTITY_SEPARATOR)
                for end in range(1, len(parts) + 1):
                    js_class = ".".join(parts[:end])
                    if js_class not in declared:
                        declared.add(js_class)
                        code.append(f"{self._prefix}{js_class} = {{}};\n")

            for descriptor in self.descriptors:
                methods = [
                    {
                        "name": method,
                        "config": {
                            key: Parameter.make(value).get_script()
                            for key, value in descriptor.options_for(method).items()
                        },
                    }
                    for method in descriptor.exposed_methods
                ]
                code.append(
                    self._renderer.render(
                        TEMPLATE_CALLABLE_OBJECT,
                        {
                            "prefix": self._prefix,
                            "class_name": descriptor.js_name,
                            "methods": methods,
                            "runtime": JS_RUNTIME_NAMESPACE,
                            "class_field": REQUEST_FIELD_CLASS,
                            "method_field": REQUEST_FIELD_METHOD,
                        },
                    )
                )
        return "".join(code)


__all__ = ["CallableRepository"]
