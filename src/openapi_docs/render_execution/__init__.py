"""Render execution domain exports."""

from .document_render_use_case import (
    THEME_OVERRIDES,
    RenderExecutionError,
    build_session_registry,
    count_operations,
    execute_render,
    render_document,
    render_document_html,
)
from .render_contracts import RenderOutcome, RenderRequest

__all__ = [
    "RenderRequest",
    "RenderOutcome",
    "RenderExecutionError",
    "THEME_OVERRIDES",
    "build_session_registry",
    "count_operations",
    "execute_render",
    "render_document",
    "render_document_html",
]
