"""Reference resolution exports."""

from .reference_resolver import resolve_schema
from .resolution_outcomes import (
    ABSENT,
    AbsentSchema,
    CircularReference,
    ResolutionChain,
    ResolvedSchema,
)

__all__ = [
    "ABSENT",
    "AbsentSchema",
    "CircularReference",
    "ResolutionChain",
    "ResolvedSchema",
    "resolve_schema",
]
