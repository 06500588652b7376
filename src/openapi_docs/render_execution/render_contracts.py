"""Render execution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from openapi_docs.api_document.document_models import JSON_MEDIA_TYPE
from openapi_docs.configuration.runtime_settings import DEFAULT_THEME, Theme


@dataclass(frozen=True)
class RenderRequest:
    """Input contract for rendering one API document to a file."""

    source_path: Path
    output_path: Path
    theme: Theme = DEFAULT_THEME
    content_type: str = JSON_MEDIA_TYPE
    overrides: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderOutcome:
    """Output contract for one completed render."""

    output_path: Path
    operation_count: int
