"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from openapi_docs.api_document.document_models import JSON_MEDIA_TYPE


class Theme(str, Enum):
    """Renderer set layered over the base registry."""

    PLAIN = "plain"
    DOCS = "docs"


DEFAULT_THEME = Theme.DOCS


@dataclass(frozen=True)
class RenderSettings:
    """Normalized rendering settings."""

    theme: Theme = DEFAULT_THEME
    content_type: str = JSON_MEDIA_TYPE
    overrides: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    source_path: Path
    output_path: Path
    render: RenderSettings
