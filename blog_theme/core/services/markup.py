"""
Markup tree - Minimal element tree for server-side rendered theme widgets.

Components build an immutable tree of Element nodes; the tree is serialized
to HTML at the edge (API response, CLI output).

Key behaviors:
- Elements are frozen values, safe to share between cached renders
- None children and None attribute values are dropped at construction
- Nested lists/tuples of children are flattened in order
- Serialization escapes all text and attribute values
"""

from __future__ import annotations

import html
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Union

Node = Union["Element", str]


@dataclass(frozen=True)
class Element:
    """An HTML element with ordered attributes and children."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    def get(self, name: str, default: str | None = None) -> str | None:
        """Get an attribute value by name."""
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    @property
    def class_name(self) -> str | None:
        return self.get("class")

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple((self.class_name or "").split())


def _flatten(children: Iterable[Any]) -> Iterator[Node]:
    for child in children:
        if child is None or child is False:
            continue
        if isinstance(child, (list, tuple)):
            yield from _flatten(child)
        elif isinstance(child, Element):
            yield child
        else:
            yield str(child)


def h(tag: str, attrs: dict[str, Any] | None = None, *children: Any) -> Element:
    """
    Build an element.

    Attribute order follows the dict; None values are dropped.
    """
    pairs = tuple((key, str(value)) for key, value in (attrs or {}).items() if value is not None)
    return Element(tag=tag, attrs=pairs, children=tuple(_flatten(children)))


# --- Serialization ---


def _escape(text: str) -> str:
    """Escape HTML special characters."""
    return html.escape(text)


def render_html(node: Node) -> str:
    """Serialize a node to an HTML string."""
    if isinstance(node, str):
        return _escape(node)

    attrs = "".join(f' {key}="{_escape(value)}"' for key, value in node.attrs)
    inner = "".join(render_html(child) for child in node.children)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


# --- Traversal ---


def iter_elements(node: Node) -> Iterator[Element]:
    """Yield every element depth-first, in document order."""
    if isinstance(node, str):
        return
    yield node
    for child in node.children:
        yield from iter_elements(child)


def find_all(
    node: Node,
    tag: str | None = None,
    class_name: str | None = None,
) -> list[Element]:
    """Find elements by tag and/or a single CSS class."""
    return [
        el
        for el in iter_elements(node)
        if (tag is None or el.tag == tag) and (class_name is None or class_name in el.classes)
    ]


def text_content(node: Node) -> str:
    """Concatenate all text descendants."""
    if isinstance(node, str):
        return node
    return "".join(text_content(child) for child in node.children)
