"""API document entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

JSON_MEDIA_TYPE = "application/json"
COMPONENT_SCHEMA_PREFIX = "#/components/schemas/"


class HttpMethod(str, Enum):
    """Operation keys allowed inside a path item."""

    GET = "get"
    PUT = "put"
    POST = "post"
    DELETE = "delete"
    OPTIONS = "options"
    HEAD = "head"
    PATCH = "patch"
    TRACE = "trace"


@dataclass(frozen=True)
class SchemaReference:
    """Pointer to a named schema in `components.schemas`."""

    ref: str

    @property
    def schema_name(self) -> str | None:
        """Return the referenced schema name, or None for non-local pointers."""
        if not self.ref.startswith(COMPONENT_SCHEMA_PREFIX):
            return None
        name = self.ref[len(COMPONENT_SCHEMA_PREFIX) :]
        return name or None


@dataclass(frozen=True)
class Schema:  # pylint: disable=too-many-instance-attributes
    """Concrete schema definition."""

    description: str | None = None
    type: str | None = None
    properties: Mapping[str, SchemaOrReference] | None = None
    required: frozenset[str] = frozenset()
    items: SchemaOrReference | None = None
    example: Any = None
    enum: tuple[Any, ...] = ()


SchemaOrReference = Schema | SchemaReference


@dataclass(frozen=True)
class RequestBody:
    """Operation request body."""

    description: str | None = None
    content: Mapping[str, SchemaOrReference | None] = field(default_factory=dict)

    def schema_for(self, media_type: str) -> SchemaOrReference | None:
        return self.content.get(media_type)


@dataclass(frozen=True)
class Response:
    """Operation response for one status code."""

    description: str | None = None
    content: Mapping[str, SchemaOrReference | None] = field(default_factory=dict)

    def schema_for(self, media_type: str) -> SchemaOrReference | None:
        return self.content.get(media_type)


@dataclass(frozen=True)
class Operation:
    """Single HTTP operation."""

    operation_id: str | None = None
    summary: str | None = None
    description: str | None = None
    request_body: RequestBody | None = None
    responses: Mapping[str, Response] | None = None


@dataclass(frozen=True)
class PathItem:
    """Operations available on one path, in document order."""

    operations: Mapping[HttpMethod, Operation] = field(default_factory=dict)


@dataclass(frozen=True)
class ApiDocument:
    """Top-level API description document."""

    title: str
    version: str | None = None
    description: str | None = None
    paths: Mapping[str, PathItem | None] = field(default_factory=dict)
    schemas: Mapping[str, SchemaOrReference] = field(default_factory=dict)
