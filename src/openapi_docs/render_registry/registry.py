"""Render registry mapping node types to render functions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from openapi_docs.api_document.document_models import JSON_MEDIA_TYPE, ApiDocument
from openapi_docs.markup.markup_nodes import Node

from .node_types import NodeType

_LOGGER = logging.getLogger("openapi_docs.render_registry")

RenderFunction = Callable[[Any, "RenderContext"], Node]


class RegistryError(Exception):
    """Raised for render registry wiring errors."""


@dataclass(frozen=True)
class RenderRegistry:
    """Immutable table of render functions keyed by node type."""

    entries: Mapping[NodeType, RenderFunction]

    def __getitem__(self, tag: NodeType | str) -> RenderFunction:
        try:
            return self.entries[_node_type(tag)]
        except KeyError as exc:
            raise RegistryError(f"No render function registered for node type: {tag}") from exc


@dataclass(frozen=True)
class RenderContext:
    """Read-only state shared by every render call of one render pass."""

    document: ApiDocument
    registry: RenderRegistry
    content_type: str = JSON_MEDIA_TYPE

    def render(self, tag: NodeType | str, props: Any) -> Node:
        """Render a child node through the registry."""
        return render(self.registry, tag, props, self)


def build_registry(defaults: Mapping[NodeType | str, RenderFunction]) -> RenderRegistry:
    """Build a registry that must cover every node type."""
    entries = _normalize_entries(defaults)
    missing = [node_type.value for node_type in NodeType if node_type not in entries]
    if missing:
        raise RegistryError(f"Missing render functions for node types: {', '.join(missing)}")
    return RenderRegistry(entries=MappingProxyType(entries))


def with_overrides(
    registry: RenderRegistry, overrides: Mapping[NodeType | str, RenderFunction]
) -> RenderRegistry:
    """Return a new registry with the given node types replaced.

    The base registry is left untouched, so several derived registries can be
    built from one base and used side by side.
    """
    replaced = _normalize_entries(overrides)
    for node_type, function in replaced.items():
        _LOGGER.debug(
            "Overriding %s renderer with %s",
            node_type.value,
            getattr(function, "__qualname__", repr(function)),
        )
    return RenderRegistry(entries=MappingProxyType({**registry.entries, **replaced}))


def render(
    registry: RenderRegistry, tag: NodeType | str, props: Any, context: RenderContext
) -> Node:
    """Look up the render function for `tag` and invoke it."""
    return registry[tag](props, context)


def _normalize_entries(
    entries: Mapping[NodeType | str, RenderFunction],
) -> dict[NodeType, RenderFunction]:
    normalized: dict[NodeType, RenderFunction] = {}
    for tag, function in entries.items():
        if not callable(function):
            raise RegistryError(f"Render function for {tag} must be callable.")
        normalized[_node_type(tag)] = function
    return normalized


def _node_type(tag: NodeType | str) -> NodeType:
    if isinstance(tag, NodeType):
        return tag
    try:
        return NodeType(tag)
    except ValueError as exc:
        raise RegistryError(f"Unknown node type: {tag}") from exc
