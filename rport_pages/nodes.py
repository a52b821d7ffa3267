r"""Immutable node values that make up a rendered page tree.

Page modules describe their content with these dataclasses rather than with
HTML strings so that static subtrees can be built once and shared by
reference, while nodes that depend on the render context are allocated per
call. :func:`rport_pages.html.render_html` turns a tree into markup.

Example
-------
>>> from rport_pages.nodes import h, text
>>> node = h("p", None, "Hello ", h("strong", None, "world"))
>>> node.tag, len(node.children)
('p', 2)
>>> node.children[0] == text("Hello ")
True
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .components import Component


@dc.dataclass(frozen=True, slots=True)
class Text:
    """A text node; content is escaped when serialized."""

    content: str


@dc.dataclass(frozen=True, slots=True)
class Element:
    """An element with fixed attributes and ordered children.

    Attributes
    ----------
    tag : str
        Element name, for example ``"p"`` or ``"a"``.
    attrs : tuple[tuple[str, str | None], ...]
        Attribute name/value pairs in authored order. A ``None`` value marks
        the attribute as absent.
    children : tuple[Node, ...]
        Child nodes in document order.
    """

    tag: str
    attrs: tuple[tuple[str, str | None], ...] = ()
    children: tuple[Node, ...] = ()

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of attribute ``name`` or ``default``."""
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    @property
    def classes(self) -> list[str]:
        """Return the whitespace-separated ``class`` attribute as a list."""
        return (self.get("class") or "").split()


@dc.dataclass(frozen=True, slots=True)
class StaticHtml:
    """A pre-serialized run of ``node_count`` sibling elements."""

    html: str
    node_count: int


@dc.dataclass(frozen=True, slots=True)
class ComponentNode:
    """Placeholder for a shared component resolved from the render context."""

    component: Component


@dc.dataclass(frozen=True, slots=True)
class Fragment:
    """Flat ordered list of sibling nodes with no wrapping element."""

    children: tuple[Node, ...] = ()

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> cabc.Iterator[Node]:
        return iter(self.children)

    def __getitem__(self, index: int) -> Node:
        return self.children[index]


Node = Text | Element | StaticHtml | ComponentNode | Fragment


def text(content: str) -> Text:
    """Return a text node for ``content``."""
    return Text(content)


def h(
    tag: str,
    attrs: typ.Mapping[str, str | None] | None = None,
    *children: Node | str,
) -> Element:
    """Build an element, converting string children into :class:`Text` nodes.

    Parameters
    ----------
    tag : str
        Element name.
    attrs : Mapping[str, str | None], optional
        Attributes in authored order; ``None`` produces an attribute-less
        element.
    *children : Node or str
        Child nodes. Plain strings become text nodes.

    Returns
    -------
    Element
        The immutable element node.
    """
    items = tuple(attrs.items()) if attrs else ()
    nodes = tuple(text(child) if isinstance(child, str) else child for child in children)
    return Element(tag=tag, attrs=items, children=nodes)


def fragment(*children: Node) -> Fragment:
    """Group ``children`` into a root :class:`Fragment`."""
    return Fragment(children=tuple(children))


def iter_elements(node: Node) -> cabc.Iterator[Element]:
    """Yield every :class:`Element` within ``node`` in document order."""
    match node:
        case Element():
            yield node
            for child in node.children:
                yield from iter_elements(child)
        case Fragment():
            for child in node.children:
                yield from iter_elements(child)
        case _:
            return


def text_content(node: Node) -> str:
    """Return the concatenated text of ``node``, ignoring components."""
    match node:
        case Text():
            return node.content
        case Element() | Fragment():
            return "".join(text_content(child) for child in node.children)
        case _:
            return ""


__all__ = [
    "ComponentNode",
    "Element",
    "Fragment",
    "Node",
    "StaticHtml",
    "Text",
    "fragment",
    "h",
    "iter_elements",
    "text",
    "text_content",
]
