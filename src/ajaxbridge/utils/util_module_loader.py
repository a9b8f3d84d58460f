# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Load-once loading of include files.

Include files are Python source files registered next to a callable. They
are executed the first time the callable is materialized and cached by
resolved path, so a file shared by several callables runs exactly once per
process.

Thread Safety:
    Loading is guarded by a module-level lock; concurrent first loads of the
    same file execute it once.

Security Considerations:
    Loading an include file executes it. Only register directories and
    files from trusted sources.
"""

from __future__ import annotations

import hashlib
import importlib.util
import inspect
import logging
import sys
import threading
from pathlib import Path
from types import ModuleType

from ajaxbridge.enums import EnumBridgeComponent, EnumBridgeErrorCode
from ajaxbridge.errors import CallableRegistrationError, ModelBridgeErrorContext

logger = logging.getLogger(__name__)

_loaded_modules: dict[Path, ModuleType] = {}
_load_lock = threading.Lock()


def _module_name_for(path: Path) -> str:
    digest = hashlib.md5(str(path).encode("utf-8")).hexdigest()[:12]
    return f"ajaxbridge_include_{digest}_{path.stem}"


def load_source_file(path: Path | str) -> ModuleType:
    """Execute a source file once and return its module.

    Raises:
        CallableRegistrationError: If the file does not exist
            (INCLUDE_NOT_FOUND) or raises while executing (INCLUDE_FAILED).
    """
    resolved = Path(path).resolve()
    with _load_lock:
        cached = _loaded_modules.get(resolved)
        if cached is not None:
            return cached

        context = ModelBridgeErrorContext.with_correlation(
            component=EnumBridgeComponent.LOADER,
            operation="load_source_file",
            target_name=str(resolved),
        )
        if not resolved.is_file():
            raise CallableRegistrationError(
                f"Include file not found: {resolved}",
                error_code=EnumBridgeErrorCode.INCLUDE_NOT_FOUND,
                context=context,
            )

        module_name = _module_name_for(resolved)
        spec = importlib.util.spec_from_file_location(module_name, resolved)
        if spec is None or spec.loader is None:
            raise CallableRegistrationError(
                f"Include file cannot be loaded: {resolved}",
                error_code=EnumBridgeErrorCode.INCLUDE_FAILED,
                context=context,
            )
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise CallableRegistrationError(
                f"Include file failed to load: {resolved}: {e}",
                error_code=EnumBridgeErrorCode.INCLUDE_FAILED,
                context=context,
            ) from e

        _loaded_modules[resolved] = module
        logger.debug(
            "Loaded include file %s",
            resolved,
            extra={"include": str(resolved), "module_name": module_name},
        )
        return module


def is_loaded(path: Path | str) -> bool:
    with _load_lock:
        return Path(path).resolve() in _loaded_modules


def find_class(module: ModuleType, name: str) -> type | None:
    """Find the class named ``name`` in a module.

    An exact attribute match wins. Otherwise the classes defined in the
    module itself are compared case-insensitively, so ``users.py`` can
    define ``Users``.
    """
    candidate = getattr(module, name, None)
    if inspect.isclass(candidate):
        return candidate
    lowered = name.lower()
    for attr_name, member in vars(module).items():
        if (
            inspect.isclass(member)
            and member.__module__ == module.__name__
            and attr_name.lower() == lowered
        ):
            return member
    return None


def _reset_loaded_modules() -> None:
    """Forget loaded include files. Test isolation only."""
    with _load_lock:
        for module in _loaded_modules.values():
            sys.modules.pop(module.__name__, None)
        _loaded_modules.clear()


__all__ = ["find_class", "is_loaded", "load_source_file"]
