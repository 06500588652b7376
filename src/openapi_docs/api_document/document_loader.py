"""API document loading and parsing service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .document_models import (
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

_LOGGER = logging.getLogger("openapi_docs.api_document")
_YAML_SUFFIXES = frozenset({".yaml", ".yml"})
_HTTP_METHODS = {method.value: method for method in HttpMethod}


class DocumentError(Exception):
    """Raised when an API document cannot be read or parsed."""


def load_api_document(document_path: Path | str) -> ApiDocument:
    """Read a JSON or YAML API document from disk."""
    path = Path(document_path)
    if not path.exists():
        raise DocumentError(f"API document not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"Failed to read API document {path}: {exc}") from exc

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            parsed = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentError(f"Invalid YAML API document {path}: {exc}") from exc
    else:
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentError(f"Invalid JSON API document {path}: {exc}") from exc

    document = parse_api_document(parsed)
    _LOGGER.debug(
        "Loaded API document %s with %d paths and %d schemas",
        path,
        len(document.paths),
        len(document.schemas),
    )
    return document


def parse_api_document(raw: Any) -> ApiDocument:
    """Build an ApiDocument from an already-decoded mapping.

    Only the root shape is enforced. Anything of the wrong shape further down is
    treated as absent so that rendering can degrade instead of failing.
    """
    if not isinstance(raw, Mapping):
        raise DocumentError("API document root must be a mapping.")

    info = _mapping(raw.get("info"))
    components = _mapping(raw.get("components"))
    schemas = {
        name: parsed
        for name, value in _mapping(components.get("schemas")).items()
        if (parsed := _parse_schema_or_reference(value)) is not None
    }
    paths = {
        str(path): _parse_path_item(value) for path, value in _mapping(raw.get("paths")).items()
    }

    return ApiDocument(
        title=_string(info.get("title")) or "",
        version=_string(info.get("version")),
        description=_string(info.get("description")),
        paths=MappingProxyType(paths),
        schemas=MappingProxyType(schemas),
    )


def _parse_path_item(value: Any) -> PathItem | None:
    if not isinstance(value, Mapping):
        return None
    operations = {
        _HTTP_METHODS[key]: _parse_operation(operation)
        for key, operation in value.items()
        if key in _HTTP_METHODS and isinstance(operation, Mapping)
    }
    return PathItem(operations=MappingProxyType(operations))


def _parse_operation(value: Mapping[str, Any]) -> Operation:
    request_body = value.get("requestBody")
    responses = value.get("responses")
    return Operation(
        operation_id=_string(value.get("operationId")),
        summary=_string(value.get("summary")),
        description=_string(value.get("description")),
        request_body=(
            RequestBody(
                description=_string(request_body.get("description")),
                content=_parse_content(request_body.get("content")),
            )
            if isinstance(request_body, Mapping)
            else None
        ),
        responses=(
            MappingProxyType(
                {
                    str(status): Response(
                        description=_string(response.get("description")),
                        content=_parse_content(response.get("content")),
                    )
                    for status, response in responses.items()
                    if isinstance(response, Mapping)
                }
            )
            if isinstance(responses, Mapping)
            else None
        ),
    )


def _parse_content(value: Any) -> Mapping[str, SchemaOrReference | None]:
    return MappingProxyType(
        {
            str(media_type): _parse_schema_or_reference(_mapping(media).get("schema"))
            for media_type, media in _mapping(value).items()
        }
    )


def _parse_schema_or_reference(value: Any) -> SchemaOrReference | None:
    if not isinstance(value, Mapping):
        return None
    ref = value.get("$ref")
    if isinstance(ref, str):
        return SchemaReference(ref=ref)

    properties = value.get("properties")
    enum = value.get("enum")
    return Schema(
        description=_string(value.get("description")),
        type=_schema_type(value.get("type")),
        properties=(
            MappingProxyType(
                {
                    str(name): parsed
                    for name, child in properties.items()
                    if (parsed := _parse_schema_or_reference(child)) is not None
                }
            )
            if isinstance(properties, Mapping)
            else None
        ),
        required=frozenset(
            item for item in _list(value.get("required")) if isinstance(item, str)
        ),
        items=_parse_schema_or_reference(value.get("items")),
        example=value.get("example"),
        enum=tuple(enum) if isinstance(enum, list) else (),
    )


def _schema_type(value: Any) -> str | None:
    if isinstance(value, list):
        filtered = [item for item in value if isinstance(item, str) and item != "null"]
        if filtered:
            return filtered[0]
        return "null" if "null" in value else None
    if isinstance(value, str):
        return value
    return None


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _string(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None
