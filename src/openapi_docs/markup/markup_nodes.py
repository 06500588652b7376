"""Presentational node tree entities and builders."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Text:
    """Unescaped text content."""

    value: str


@dataclass(frozen=True)
class Element:
    """Markup element with ordered attributes and children."""

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Fragment:
    """Sequence of sibling nodes without a wrapping element."""

    children: tuple[Node, ...] = ()


Node = Text | Element | Fragment
Child = Node | str | None | Iterable["Child"]

EMPTY = Fragment()


def element(tag: str, *children: Child, **attributes: str | bool | None) -> Element:
    """Build an element.

    A trailing underscore is stripped from attribute names (`class_`), other
    underscores become dashes. `None` and `False` attributes are dropped, `True`
    renders as a bare attribute.
    """
    normalized: list[tuple[str, str]] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        attribute_name = name.rstrip("_").replace("_", "-")
        normalized.append((attribute_name, "" if value is True else str(value)))
    return Element(tag=tag, attributes=tuple(normalized), children=_flatten(children))


def fragment(*children: Child) -> Fragment:
    """Build a fragment, dropping `None` and empty children."""
    return Fragment(children=_flatten(children))


def is_empty(node: Node) -> bool:
    """Return True when the node contributes no markup."""
    if isinstance(node, Text):
        return not node.value
    if isinstance(node, Fragment):
        return all(is_empty(child) for child in node.children)
    return False


def class_names(*names: str | None | bool) -> str:
    """Join truthy CSS class names."""
    return " ".join(name for name in names if isinstance(name, str) and name)


def _flatten(children: Iterable[Child]) -> tuple[Node, ...]:
    nodes: list[Node] = []
    for child in children:
        if child is None:
            continue
        if isinstance(child, str):
            if child:
                nodes.append(Text(child))
        elif isinstance(child, (Text, Element)):
            nodes.append(child)
        elif isinstance(child, Fragment):
            if not is_empty(child):
                nodes.append(child)
        else:
            nodes.extend(_flatten(child))
    return tuple(nodes)
