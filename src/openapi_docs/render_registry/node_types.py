"""Node type tags known to the render registry."""

from __future__ import annotations

from enum import Enum


class NodeType(str, Enum):
    """Closed set of presentational node types."""

    DOCUMENT = "Document"
    OPERATIONS = "Operations"
    OPERATION = "Operation"
    REQUEST_BODY = "RequestBody"
    RESPONSES = "Responses"
    RESPONSE = "Response"
    SCHEMA = "Schema"
    PROPERTY = "Property"
