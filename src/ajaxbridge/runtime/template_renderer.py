# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Template rendering collaborator.

The repository and the user function registry only need "render a template
by name with variables". ProtocolTemplateRenderer is that contract;
JinjaTemplateRenderer implements it with jinja2 over the templates packaged
with ajaxbridge, plus any directories the application adds.

Template Names:
    ``support/object.js`` resolves to ``support/object.js.j2`` in the first
    search directory that has it. Application directories are searched
    before the packaged templates, so applications can override them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, TemplateNotFound

from ajaxbridge.enums import EnumBridgeComponent, EnumBridgeErrorCode
from ajaxbridge.errors import ModelBridgeErrorContext, TemplateRenderError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".j2"

PACKAGED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


@runtime_checkable
class ProtocolTemplateRenderer(Protocol):
    """Render a named template with a variable bag."""

    def render(self, name: str, variables: Mapping[str, object]) -> str:
        ...


class JinjaTemplateRenderer:
    """jinja2-backed template renderer.

    Args:
        extra_directories: Directories searched before the packaged templates.
    """

    def __init__(self, extra_directories: Iterable[Path | str] = ()) -> None:
        self._directories: list[Path] = [Path(d) for d in extra_directories]
        self._directories.append(PACKAGED_TEMPLATE_DIR)
        self._environment = self._build_environment()

    def _build_environment(self) -> Environment:
        return Environment(
            loader=FileSystemLoader([str(d) for d in self._directories]),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def add_directory(self, directory: Path | str) -> None:
        """Search ``directory`` before every directory added so far."""
        self._directories.insert(0, Path(directory))
        self._environment = self._build_environment()

    def render(self, name: str, variables: Mapping[str, object]) -> str:
        """Render ``name`` with ``variables``.

        Raises:
            TemplateRenderError: If the template is missing or fails to render.
        """
        context = ModelBridgeErrorContext(
            component=EnumBridgeComponent.TEMPLATE,
            operation="render",
            target_name=name,
        )
        try:
            template = self._environment.get_template(name + TEMPLATE_SUFFIX)
        except TemplateNotFound as e:
            raise TemplateRenderError(
                f"Template not found: {name}",
                error_code=EnumBridgeErrorCode.TEMPLATE_NOT_FOUND,
                context=context,
                directories=[str(d) for d in self._directories],
            ) from e
        logger.debug(
            "Rendering template %s",
            name,
            extra={"template": name, "template_file": template.filename},
        )
        try:
            return template.render(**variables)
        except TemplateError as e:
            raise TemplateRenderError(
                f"Template {name} failed to render: {e}",
                error_code=EnumBridgeErrorCode.TEMPLATE_FAILED,
                context=context,
            ) from e


__all__ = ["JinjaTemplateRenderer", "PACKAGED_TEMPLATE_DIR", "ProtocolTemplateRenderer"]
