"""Markup tree exports."""

from .html_serializer import serialize_html
from .markup_nodes import (
    EMPTY,
    Element,
    Fragment,
    Node,
    Text,
    class_names,
    element,
    fragment,
    is_empty,
)

__all__ = [
    "EMPTY",
    "Element",
    "Fragment",
    "Node",
    "Text",
    "class_names",
    "element",
    "fragment",
    "is_empty",
    "serialize_html",
]
