"""Base render functions for every node type.

Each function takes its typed props plus the render context and returns a
markup node. Child nodes are always rendered through `context.render` so an
override of one node type applies at every call site, nested ones included.
Missing optional data yields `EMPTY` rather than an error.
"""

from __future__ import annotations

from openapi_docs.api_document.document_models import RequestBody, Response, Schema
from openapi_docs.markup.markup_nodes import EMPTY, Node, element, fragment, is_empty
from openapi_docs.reference_resolution.reference_resolver import resolve_schema
from openapi_docs.reference_resolution.resolution_outcomes import (
    AbsentSchema,
    CircularReference,
    ResolutionChain,
    ResolvedSchema,
)
from openapi_docs.render_registry.node_types import NodeType
from openapi_docs.render_registry.registry import (
    RenderContext,
    RenderFunction,
    RenderRegistry,
    build_registry,
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

REQUEST_BODY_HEADING = "Request Body"
RESPONSES_HEADING = "Responses"


def resolve_content_schema(
    owner: RequestBody | Response, context: RenderContext
) -> tuple[ResolvedSchema, ResolutionChain]:
    """Resolve the schema of the context's content type, starting a fresh chain."""
    return resolve_schema(owner.schema_for(context.content_type), context.document, ())


def nested_schema_of(resolved: ResolvedSchema) -> bool:
    """Return True when a property value should be expanded as a nested schema."""
    if isinstance(resolved, CircularReference):
        return True
    return isinstance(resolved, Schema) and resolved.properties is not None


def circular_marker_text(name: str) -> str:
    return f"Circular reference to {name}"


def render_document(props: DocumentProps, context: RenderContext) -> Node:
    document = props.document
    operations = (
        context.render(NodeType.OPERATIONS, OperationsProps(paths=document.paths))
        if document.paths
        else None
    )
    return element(
        "html",
        element(
            "head",
            element("meta", charset="utf-8"),
            element("title", document.title),
        ),
        element(
            "body",
            element(
                "header",
                element(
                    "h1",
                    document.title,
                    element("small", document.version, class_="version")
                    if document.version
                    else None,
                ),
                element("p", document.description) if document.description else None,
            ),
            element("main", operations, class_="operations"),
        ),
    )


def render_operations(props: OperationsProps, context: RenderContext) -> Node:
    return fragment(
        context.render(
            NodeType.OPERATION,
            OperationProps(method=method, path=path, operation=operation),
        )
        for path, path_item in props.paths.items()
        if path_item is not None
        for method, operation in path_item.operations.items()
    )


def render_operation(props: OperationProps, context: RenderContext) -> Node:
    operation = props.operation
    title = operation.summary or operation.operation_id
    return element(
        "section",
        element(
            "h2",
            element("span", props.method.value.upper(), class_="method"),
            " ",
            element("span", props.path, class_="path"),
        ),
        element("p", title) if title else None,
        element("p", operation.description, class_="description")
        if operation.description
        else None,
        context.render(NodeType.REQUEST_BODY, RequestBodyProps(request_body=operation.request_body))
        if operation.request_body is not None
        else None,
        context.render(NodeType.RESPONSES, ResponsesProps(responses=operation.responses))
        if operation.responses
        else None,
        class_="operation",
        id=operation.operation_id or None,
    )


def request_body_section(
    props: RequestBodyProps, context: RenderContext, heading_class: str | None = None
) -> Node:
    """Heading, description and schema of a request body; empty when the schema is absent."""
    schema, chain = resolve_content_schema(props.request_body, context)
    if isinstance(schema, AbsentSchema):
        return EMPTY
    description = props.request_body.description
    return fragment(
        element("h4", REQUEST_BODY_HEADING, class_=heading_class),
        element("p", description) if description else None,
        context.render(NodeType.SCHEMA, SchemaProps(schema=schema, chain=chain)),
    )


def responses_section(
    props: ResponsesProps, context: RenderContext, heading_class: str | None = None
) -> Node:
    """Heading followed by one Response node per status, in document order."""
    return fragment(
        element("h4", RESPONSES_HEADING, class_=heading_class),
        (
            context.render(NodeType.RESPONSE, ResponseProps(status=status, response=response))
            for status, response in props.responses.items()
        ),
    )


def render_request_body(props: RequestBodyProps, context: RenderContext) -> Node:
    return request_body_section(props, context)


def render_responses(props: ResponsesProps, context: RenderContext) -> Node:
    return responses_section(props, context)


def render_response(props: ResponseProps, context: RenderContext) -> Node:
    schema, chain = resolve_content_schema(props.response, context)
    description = props.response.description
    return fragment(
        element(
            "h5",
            element("span", props.status, class_="status"),
            f" {description}" if description else None,
        ),
        None
        if isinstance(schema, AbsentSchema)
        else context.render(NodeType.SCHEMA, SchemaProps(schema=schema, chain=chain)),
    )


def render_schema(props: SchemaProps, context: RenderContext) -> Node:
    schema = props.schema
    if isinstance(schema, CircularReference):
        return element("p", circular_marker_text(schema.name), class_="circular")
    if isinstance(schema, AbsentSchema):
        return EMPTY
    description = element("p", schema.description) if schema.description else None
    if not schema.properties:
        return fragment(description)
    return element(
        "div",
        description,
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
            for name, child in schema.properties.items()
        ),
        class_="schema",
    )


def render_property(props: PropertyProps, context: RenderContext) -> Node:
    schema, chain = resolve_schema(props.schema, context.document, props.chain)
    type_tag = schema.type if isinstance(schema, Schema) else None
    nested: Node | None = None
    if nested_schema_of(schema):
        nested = context.render(NodeType.SCHEMA, SchemaProps(schema=schema, chain=chain))
    return element(
        "div",
        element(
            "p",
            element("span", f"{props.name}:", class_="property-name"),
            element("code", type_tag, class_="property-type") if type_tag else None,
            element("span", "*", class_="required") if props.required else None,
        ),
        element("div", nested, class_="nested") if nested and not is_empty(nested) else None,
        class_="property",
    )


DEFAULT_RENDERERS: dict[NodeType, RenderFunction] = {
    NodeType.DOCUMENT: render_document,
    NodeType.OPERATIONS: render_operations,
    NodeType.OPERATION: render_operation,
    NodeType.REQUEST_BODY: render_request_body,
    NodeType.RESPONSES: render_responses,
    NodeType.RESPONSE: render_response,
    NodeType.SCHEMA: render_schema,
    NodeType.PROPERTY: render_property,
}


def base_registry() -> RenderRegistry:
    """Build the registry holding the base render functions."""
    return build_registry(DEFAULT_RENDERERS)
