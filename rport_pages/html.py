"""Serialize node trees into HTML markup."""

from __future__ import annotations

import typing as typ
from html import escape

from .nodes import ComponentNode, Element, Fragment, StaticHtml, Text

if typ.TYPE_CHECKING:
    from .nodes import Node

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def _render_attrs(attrs: tuple[tuple[str, str | None], ...]) -> str:
    return "".join(
        f' {name}="{escape(value, quote=True)}"'
        for name, value in attrs
        if value is not None
    )


def render_html(node: Node) -> str:
    """Return the HTML markup for ``node`` and its descendants.

    Parameters
    ----------
    node : Node
        Root of the tree; usually the :class:`~rport_pages.nodes.Fragment`
        returned by a page's ``render``.

    Returns
    -------
    str
        Markup with text and attribute values escaped. ``StaticHtml`` blocks
        are emitted verbatim and components are expanded through their own
        ``render`` method.
    """
    match node:
        case Text():
            return escape(node.content, quote=False)
        case StaticHtml():
            return node.html
        case ComponentNode():
            return render_html(node.component.render())
        case Fragment():
            return "".join(render_html(child) for child in node.children)
        case Element():
            attrs = _render_attrs(node.attrs)
            if node.tag in VOID_ELEMENTS:
                return f"<{node.tag}{attrs}>"
            inner = "".join(render_html(child) for child in node.children)
            return f"<{node.tag}{attrs}>{inner}</{node.tag}>"
        case _:  # pragma: no cover - exhaustive over Node
            msg = f"Cannot render node of type {type(node).__name__}"
            raise TypeError(msg)


__all__ = ["VOID_ELEMENTS", "render_html"]
