"""Resolve `package.module:function` import strings into renderer overrides."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Mapping
from typing import cast

from .node_types import NodeType
from .registry import RegistryError, RenderFunction

_LOGGER = logging.getLogger("openapi_docs.render_registry")


def load_override(import_string: str) -> RenderFunction:
    """Import the render function named by `package.module:function`."""
    module_name, separator, attribute_path = import_string.partition(":")
    if not separator or not module_name.strip() or not attribute_path.strip():
        raise RegistryError(
            f"Override must use the form 'package.module:function', got: {import_string!r}"
        )
    try:
        target: object = importlib.import_module(module_name.strip())
    except ImportError as exc:
        raise RegistryError(f"Cannot import override module {module_name!r}: {exc}") from exc

    for attribute in attribute_path.strip().split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise RegistryError(
                f"Override {import_string!r} does not resolve: missing attribute {attribute!r}"
            ) from exc

    if not callable(target):
        raise RegistryError(f"Override {import_string!r} is not callable.")
    _LOGGER.debug("Loaded renderer override %s", import_string)
    return cast(RenderFunction, target)


def load_overrides(import_strings: Mapping[str, str]) -> dict[NodeType, RenderFunction]:
    """Resolve a tag-name to import-string mapping."""
    overrides: dict[NodeType, RenderFunction] = {}
    for tag, import_string in import_strings.items():
        try:
            node_type = NodeType(tag)
        except ValueError as exc:
            known = ", ".join(node_type.value for node_type in NodeType)
            raise RegistryError(f"Unknown node type {tag!r}; expected one of: {known}") from exc
        overrides[node_type] = load_override(import_string)
    return overrides
