"""Reference resolution entities."""

from __future__ import annotations

from dataclasses import dataclass

from openapi_docs.api_document.document_models import Schema

ResolutionChain = tuple[str, ...]


@dataclass(frozen=True)
class CircularReference:
    """Reference whose name already occurs in the active resolution chain."""

    name: str


@dataclass(frozen=True)
class AbsentSchema:
    """No schema given, or a reference that did not resolve."""


ABSENT = AbsentSchema()

ResolvedSchema = Schema | CircularReference | AbsentSchema
