"""Node rendering exports."""

from .default_renderers import DEFAULT_RENDERERS, base_registry
from .docs_theme import DOCS_OVERRIDES
from .node_props import (
    DocumentProps,
    OperationProps,
    OperationsProps,
    PropertyProps,
    RequestBodyProps,
    ResponseProps,
    ResponsesProps,
    SchemaProps,
)
from .schema_examples import example_from_schema

__all__ = [
    "DEFAULT_RENDERERS",
    "DOCS_OVERRIDES",
    "DocumentProps",
    "OperationProps",
    "OperationsProps",
    "PropertyProps",
    "RequestBodyProps",
    "ResponseProps",
    "ResponsesProps",
    "SchemaProps",
    "base_registry",
    "example_from_schema",
]
