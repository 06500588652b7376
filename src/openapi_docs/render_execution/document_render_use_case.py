"""Document render use-case service."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from openapi_docs.api_document import ApiDocument, DocumentError, load_api_document
from openapi_docs.api_document.document_models import JSON_MEDIA_TYPE
from openapi_docs.configuration.runtime_settings import DEFAULT_THEME, Theme
from openapi_docs.markup import Node, serialize_html
from openapi_docs.node_rendering import DOCS_OVERRIDES, DocumentProps, base_registry
from openapi_docs.render_registry import (
    NodeType,
    RegistryError,
    RenderContext,
    RenderFunction,
    RenderRegistry,
    load_overrides,
    with_overrides,
)

from .render_contracts import RenderOutcome, RenderRequest

_LOGGER = logging.getLogger("openapi_docs.render_execution")

THEME_OVERRIDES: Mapping[Theme, Mapping[NodeType, RenderFunction]] = {
    Theme.PLAIN: {},
    Theme.DOCS: DOCS_OVERRIDES,
}


class RenderExecutionError(Exception):
    """Raised when a render use case cannot be completed."""


def build_session_registry(
    theme: Theme = DEFAULT_THEME,
    overrides: Mapping[NodeType | str, RenderFunction] | None = None,
) -> RenderRegistry:
    """Layer the theme and caller overrides, in that order, over the base registry."""
    registry = with_overrides(base_registry(), THEME_OVERRIDES[theme])
    if overrides:
        registry = with_overrides(registry, overrides)
    return registry


def render_document(
    document: ApiDocument,
    registry: RenderRegistry | None = None,
    content_type: str = JSON_MEDIA_TYPE,
) -> Node:
    """Render a document into a markup tree."""
    resolved_registry = registry or base_registry()
    context = RenderContext(
        document=document, registry=resolved_registry, content_type=content_type
    )
    return context.render(NodeType.DOCUMENT, DocumentProps(document=document))


def render_document_html(
    document: ApiDocument,
    registry: RenderRegistry | None = None,
    content_type: str = JSON_MEDIA_TYPE,
) -> str:
    """Render a document and serialize it as an HTML page."""
    return serialize_html(render_document(document, registry, content_type), doctype=True)


def execute_render(request: RenderRequest) -> RenderOutcome:
    """Render one API document file into an HTML file."""
    try:
        document = load_api_document(request.source_path)
        registry = build_session_registry(request.theme, load_overrides(request.overrides))
        markup = render_document_html(document, registry, request.content_type)
    except (DocumentError, RegistryError) as exc:
        raise RenderExecutionError(str(exc)) from exc

    output_path = request.output_path
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(markup, encoding="utf-8")
    except OSError as exc:
        raise RenderExecutionError(f"Failed to write {output_path}: {exc}") from exc
    _LOGGER.debug("Wrote %d characters to %s", len(markup), output_path)

    return RenderOutcome(
        output_path=output_path.resolve(),
        operation_count=count_operations(document),
    )


def count_operations(document: ApiDocument) -> int:
    return sum(
        len(path_item.operations) for path_item in document.paths.values() if path_item is not None
    )
