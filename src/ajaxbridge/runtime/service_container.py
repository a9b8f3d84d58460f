# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Service Container - explicit singleton registry.

Maps string keys to factories that are constructed on first ``get`` and
memoized afterwards. The container is created by the wiring code and passed
to every component that needs it; nothing reads it from global state.

Thread Safety:
    ``set``, ``get`` and ``has`` are protected by a lock, so a factory runs at
    most once even when the first two lookups race.

Example:
    >>> container = ServiceContainer()
    >>> container.set("clock", lambda: object())
    >>> container.get("clock") is container.get("clock")
    True
"""

from __future__ import annotations

import threading
from collections.abc import Callable


class ServiceContainer:
    """Lazily constructed, memoized services keyed by name."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[[], object]] = {}
        self._instances: dict[str, object] = {}
        self._lock: threading.RLock = threading.RLock()

    def set(self, key: str, factory: Callable[[], object]) -> None:
        """Register a factory. Replaces any earlier factory and instance for the key."""
        with self._lock:
            self._factories[key] = factory
            self._instances.pop(key, None)

    def set_instance(self, key: str, instance: object) -> None:
        with self._lock:
            self._factories.pop(key, None)
            self._instances[key] = instance

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._instances or key in self._factories

    def get(self, key: str) -> object:
        """Return the service for ``key``, constructing it on first use.

        Raises:
            KeyError: If nothing is registered under ``key``.
        """
        with self._lock:
            if key in self._instances:
                return self._instances[key]
            factory = self._factories.get(key)
            if factory is None:
                raise KeyError(f"No service registered under {key!r}")
            instance = factory()
            self._instances[key] = instance
            return instance

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __len__(self) -> int:
        with self._lock:
            return len(set(self._factories) | set(self._instances))


__all__ = ["ServiceContainer"]
