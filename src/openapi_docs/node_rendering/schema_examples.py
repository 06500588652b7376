"""Derive example payloads from schemas."""

from __future__ import annotations

from typing import Any

from openapi_docs.api_document.document_models import ApiDocument, Schema, SchemaOrReference
from openapi_docs.reference_resolution.reference_resolver import resolve_schema
from openapi_docs.reference_resolution.resolution_outcomes import (
    AbsentSchema,
    CircularReference,
    ResolutionChain,
    ResolvedSchema,
)

_SCALAR_DEFAULTS: dict[str, Any] = {
    "string": "string",
    "integer": 0,
    "number": 0,
    "boolean": False,
    "null": None,
}


def example_from_schema(
    schema: SchemaOrReference | ResolvedSchema | None,
    document: ApiDocument,
    chain: ResolutionChain = (),
) -> Any:
    """Build a JSON-compatible example for a schema.

    References are followed with the same per-branch cycle detection used for
    rendering; a reference back into its own chain becomes a placeholder string.
    """
    if isinstance(schema, (CircularReference, AbsentSchema)):
        resolved: ResolvedSchema = schema
    else:
        resolved, chain = resolve_schema(schema, document, chain)

    if isinstance(resolved, CircularReference):
        return f"<circular: {resolved.name}>"
    if isinstance(resolved, AbsentSchema):
        return None
    return _example_from_concrete(resolved, document, chain)


def _example_from_concrete(schema: Schema, document: ApiDocument, chain: ResolutionChain) -> Any:
    if schema.example is not None:
        return schema.example
    if schema.enum:
        return schema.enum[0]
    if schema.type == "array":
        if schema.items is None:
            return []
        return [example_from_schema(schema.items, document, chain)]
    if schema.type == "object" or schema.properties is not None:
        return {
            name: example_from_schema(child, document, chain)
            for name, child in (schema.properties or {}).items()
        }
    if schema.type is None:
        return None
    return _SCALAR_DEFAULTS.get(schema.type)
