"""Schema reference resolution service."""

from __future__ import annotations

import logging

from openapi_docs.api_document.document_models import (
    ApiDocument,
    SchemaOrReference,
    SchemaReference,
)

from .resolution_outcomes import (
    ABSENT,
    CircularReference,
    ResolutionChain,
    ResolvedSchema,
)

_LOGGER = logging.getLogger("openapi_docs.reference_resolution")


def resolve_schema(
    schema_or_ref: SchemaOrReference | None,
    document: ApiDocument,
    chain: ResolutionChain = (),
) -> tuple[ResolvedSchema, ResolutionChain]:
    """Resolve a schema slot against the document's named schemas.

    `chain` holds the reference names already entered on the current branch,
    root first. It is never mutated: a successful lookup returns a new chain
    with the name appended, so sibling branches cannot see each other's history.
    """
    if schema_or_ref is None:
        return ABSENT, chain
    if not isinstance(schema_or_ref, SchemaReference):
        return schema_or_ref, chain

    name = schema_or_ref.schema_name
    if name is None:
        _LOGGER.debug("Unsupported schema reference %r treated as absent", schema_or_ref.ref)
        return ABSENT, chain
    if name in chain:
        _LOGGER.debug("Circular schema reference %r via %s", name, " -> ".join(chain))
        return CircularReference(name=name), chain

    target = document.schemas.get(name)
    if target is None:
        _LOGGER.debug("Schema reference %r not found", name)
        return ABSENT, chain
    # Named schemas may alias another named schema.
    return resolve_schema(target, document, (*chain, name))
