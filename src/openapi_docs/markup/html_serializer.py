"""HTML serialization of the presentational node tree."""

from __future__ import annotations

import html

from .markup_nodes import Element, Fragment, Node, Text

# Elements that never carry content or a closing tag.
VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"}
)
# Elements whose text content must not be entity-escaped.
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})


def serialize_html(node: Node, *, doctype: bool = False) -> str:
    """Flatten a node tree into an HTML string.

    Escaping happens here and only here; node builders always hold raw text.
    No whitespace is added between nodes.
    """
    parts: list[str] = ["<!DOCTYPE html>"] if doctype else []
    _write(node, parts, raw_text=False)
    return "".join(parts)


def _write(node: Node, parts: list[str], *, raw_text: bool) -> None:
    if isinstance(node, Text):
        parts.append(node.value if raw_text else html.escape(node.value, quote=False))
        return
    if isinstance(node, Fragment):
        for child in node.children:
            _write(child, parts, raw_text=raw_text)
        return
    if isinstance(node, Element):
        _write_element(node, parts)
        return
    raise TypeError(f"Unsupported markup node: {type(node).__name__}")


def _write_element(node: Element, parts: list[str]) -> None:
    parts.append(f"<{node.tag}")
    for name, value in node.attributes:
        if value == "":
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{html.escape(value, quote=True)}"')
    parts.append(">")
    if node.tag in VOID_ELEMENTS:
        return
    raw_text = node.tag in RAW_TEXT_ELEMENTS
    for child in node.children:
        _write(child, parts, raw_text=raw_text)
    parts.append(f"</{node.tag}>")
