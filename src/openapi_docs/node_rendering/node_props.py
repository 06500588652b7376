"""Typed props passed to each node renderer."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from openapi_docs.api_document.document_models import (
    ApiDocument,
    HttpMethod,
    Operation,
    PathItem,
    RequestBody,
    Response,
    SchemaOrReference,
)
from openapi_docs.reference_resolution.resolution_outcomes import ResolutionChain, ResolvedSchema


@dataclass(frozen=True)
class DocumentProps:
    """Root of a render pass."""

    document: ApiDocument


@dataclass(frozen=True)
class OperationsProps:
    """All path items of the document, in document order."""

    paths: Mapping[str, PathItem | None]


@dataclass(frozen=True)
class OperationProps:
    """One operation together with its method and path."""

    method: HttpMethod
    path: str
    operation: Operation


@dataclass(frozen=True)
class RequestBodyProps:
    request_body: RequestBody


@dataclass(frozen=True)
class ResponsesProps:
    """Status code to response mapping, in document order."""

    responses: Mapping[str, Response]


@dataclass(frozen=True)
class ResponseProps:
    status: str
    response: Response


@dataclass(frozen=True)
class SchemaProps:
    """An already-resolved schema and the chain that led to it."""

    schema: ResolvedSchema
    chain: ResolutionChain = ()


@dataclass(frozen=True)
class PropertyProps:
    """One property entry of a parent object schema.

    `schema` is the property's own, still unresolved value. `chain` is the
    parent's resolution chain.
    """

    name: str
    schema: SchemaOrReference
    required: bool = False
    chain: ResolutionChain = ()
