"""API document exports."""

from .document_loader import DocumentError, load_api_document, parse_api_document
from .document_models import (
    COMPONENT_SCHEMA_PREFIX,
    JSON_MEDIA_TYPE,
    ApiDocument,
    HttpMethod,
    Operation,
    PathItem,
    RequestBody,
    Response,
    Schema,
    SchemaOrReference,
    SchemaReference,
)

__all__ = [
    "ApiDocument",
    "COMPONENT_SCHEMA_PREFIX",
    "DocumentError",
    "HttpMethod",
    "JSON_MEDIA_TYPE",
    "Operation",
    "PathItem",
    "RequestBody",
    "Response",
    "Schema",
    "SchemaOrReference",
    "SchemaReference",
    "load_api_document",
    "parse_api_document",
]
