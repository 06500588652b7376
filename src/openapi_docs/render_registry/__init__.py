"""Render registry exports."""

from .node_types import NodeType
from .override_loading import load_override, load_overrides
from .registry import (
    RegistryError,
    RenderContext,
    RenderFunction,
    RenderRegistry,
    build_registry,
    render,
    with_overrides,
)

__all__ = [
    "NodeType",
    "RegistryError",
    "RenderContext",
    "RenderFunction",
    "RenderRegistry",
    "build_registry",
    "load_override",
    "load_overrides",
    "render",
    "with_overrides",
]
