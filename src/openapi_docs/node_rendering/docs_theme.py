"""Styled documentation renderers layered over the base registry.

The markup mirrors the base renderers but carries utility CSS classes (served
from the Tailwind CDN) and places an example payload next to response schemas.
"""

from __future__ import annotations

import json

from openapi_docs.api_document.document_models import HttpMethod, Schema
from openapi_docs.markup.markup_nodes import EMPTY, Node, class_names, element, fragment, is_empty
from openapi_docs.reference_resolution.reference_resolver import resolve_schema
from openapi_docs.reference_resolution.resolution_outcomes import (
    AbsentSchema,
    CircularReference,
    ResolutionChain,
    ResolvedSchema,
)
from openapi_docs.render_registry.node_types import NodeType
from openapi_docs.render_registry.registry import RenderContext, RenderFunction

from .default_renderers import (
    nested_schema_of,
    request_body_section,
    resolve_content_schema,
    responses_section,
)
from .node_props import (
    DocumentProps,
    OperationProps,
    OperationsProps,
    PropertyProps,
    RequestBodyProps,
    ResponseProps,
    ResponsesProps,
    SchemaProps,
)
from .schema_examples import example_from_schema

TAILWIND_CDN_URL = "https://cdn.tailwindcss.com"

HTTP_METHOD_COLORS: dict[HttpMethod, str] = {
    HttpMethod.GET: "text-green-500",
    HttpMethod.POST: "text-blue-500",
    HttpMethod.PUT: "text-yellow-500",
    HttpMethod.DELETE: "text-red-500",
    HttpMethod.HEAD: "text-gray-500",
    HttpMethod.OPTIONS: "text-purple-500",
    HttpMethod.PATCH: "text-teal-500",
    HttpMethod.TRACE: "text-indigo-500",
}

_SECTION_HEADING_CLASS = "mt-4 text-2xl"


def status_color(status: str) -> str:
    """Map a status code (or range such as `4XX`) to a colour class."""
    if status.startswith("2"):
        return "text-green-600"
    if status.startswith("3"):
        return "text-blue-300"
    if status.startswith(("4", "5")):
        return "text-red-500"
    return "text-gray-500"


def render_docs_document(props: DocumentProps, context: RenderContext) -> Node:
    document = props.document
    return element(
        "html",
        element(
            "head",
            element("meta", charset="utf-8"),
            element("title", document.title),
            element("script", src=TAILWIND_CDN_URL),
        ),
        element(
            "body",
            element(
                "div",
                element(
                    "h1",
                    document.title,
                    " ",
                    element("span", document.version, class_="text-lg italic opacity-50")
                    if document.version
                    else None,
                    class_="mt-16 text-5xl",
                ),
                element("p", document.description, class_="text-lg")
                if document.description
                else None,
                element(
                    "main",
                    context.render(NodeType.OPERATIONS, OperationsProps(paths=document.paths))
                    if document.paths
                    else None,
                ),
                class_="p-4 flex flex-col gap-2 container mx-auto",
            ),
        ),
    )


def render_docs_operation(props: OperationProps, context: RenderContext) -> Node:
    operation = props.operation
    title = operation.summary or operation.operation_id
    return fragment(
        element("hr", class_="mt-8 border-[0.8pt] border-black/70"),
        element(
            "h2",
            element(
                "span",
                props.method.value,
                class_=class_names("font-bold uppercase", HTTP_METHOD_COLORS[props.method]),
            ),
            " ",
            element("span", props.path),
            class_="font-mono text-4xl mt-4",
            id=operation.operation_id or None,
        ),
        element("p", title) if title else None,
        element("p", operation.description, class_="text-black/50")
        if operation.description
        else None,
        context.render(NodeType.REQUEST_BODY, RequestBodyProps(request_body=operation.request_body))
        if operation.request_body is not None
        else None,
        context.render(NodeType.RESPONSES, ResponsesProps(responses=operation.responses))
        if operation.responses
        else None,
    )


def render_docs_request_body(props: RequestBodyProps, context: RenderContext) -> Node:
    return request_body_section(props, context, heading_class=_SECTION_HEADING_CLASS)


def render_docs_responses(props: ResponsesProps, context: RenderContext) -> Node:
    return responses_section(props, context, heading_class=_SECTION_HEADING_CLASS)


def render_docs_response(props: ResponseProps, context: RenderContext) -> Node:
    schema, chain = resolve_content_schema(props.response, context)
    description = props.response.description
    return fragment(
        element(
            "h5",
            element(
                "span",
                props.status,
                class_=class_names("font-mono font-bold", status_color(props.status)),
            ),
            f" {description}" if description else None,
        ),
        None if isinstance(schema, AbsentSchema) else _schema_panel(schema, chain, context),
    )


def render_docs_schema(props: SchemaProps, context: RenderContext) -> Node:
    schema = props.schema
    if isinstance(schema, CircularReference):
        return element(
            "p",
            element("span", "Circular reference", class_="text-red-600"),
            f" to {schema.name}",
        )
    if isinstance(schema, AbsentSchema):
        return EMPTY
    return element(
        "div",
        element("p", schema.description, class_="text-sm") if schema.description else None,
        (
            context.render(
                NodeType.PROPERTY,
                PropertyProps(
                    name=name,
                    schema=child,
                    required=name in schema.required,
                    chain=props.chain,
                ),
            )
            for name, child in (schema.properties or {}).items()
        ),
    )


def render_docs_property(props: PropertyProps, context: RenderContext) -> Node:
    schema, chain = resolve_schema(props.schema, context.document, props.chain)
    type_tag = schema.type if isinstance(schema, Schema) else None
    nested: Node = EMPTY
    if nested_schema_of(schema):
        nested = context.render(NodeType.SCHEMA, SchemaProps(schema=schema, chain=chain))
    return fragment(
        element(
            "p",
            element("span", f"{props.name}:"),
            element("span", type_tag, class_="font-mono font-bold text-emerald-700/80")
            if type_tag
            else None,
            element("span", "*", class_="text-red-600") if props.required else None,
        ),
        None if is_empty(nested) else element("div", nested, class_="pl-4"),
    )


def _schema_panel(schema: ResolvedSchema, chain: ResolutionChain, context: RenderContext) -> Node:
    example = example_from_schema(schema, context.document, chain)
    return element(
        "div",
        element(
            "div",
            element(
                "div",
                context.render(NodeType.SCHEMA, SchemaProps(schema=schema, chain=chain)),
                class_="flex flex-1",
            ),
            element(
                "div",
                element("p", "Example:"),
                element("pre", json.dumps(example, indent=4, ensure_ascii=False, default=str)),
                class_="flex flex-1 flex-col bg-white rounded-md p-4",
            ),
            class_="flex flex-col gap-4 md:flex-row",
        ),
        class_="rounded-xl bg-slate-100 p-4 mb-4",
    )


DOCS_OVERRIDES: dict[NodeType, RenderFunction] = {
    NodeType.DOCUMENT: render_docs_document,
    NodeType.OPERATION: render_docs_operation,
    NodeType.REQUEST_BODY: render_docs_request_body,
    NodeType.RESPONSES: render_docs_responses,
    NodeType.RESPONSE: render_docs_response,
    NodeType.SCHEMA: render_docs_schema,
    NodeType.PROPERTY: render_docs_property,
}
