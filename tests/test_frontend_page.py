"""Tests for the compiled "Rport Frontend" page module.

The page module must return its top-level nodes in authored order, reuse the
memoised static subtrees by reference across renders, allocate the nodes that
wrap the outbound-link marker on every call, and refuse to render when the
context lacks the marker component.

Usage
-----
Run ``pytest tests/test_frontend_page.py -v``.
"""

from __future__ import annotations

import pytest

from rport_pages.components import (
    ComponentResolutionError,
    OutboundLink,
    RenderContext,
    default_context,
)
from rport_pages.nodes import (
    ComponentNode,
    Element,
    Fragment,
    StaticHtml,
    iter_elements,
    text_content,
)
from rport_pages.pages import frontend


@pytest.fixture
def context() -> RenderContext:
    """Return a context providing the outbound-link marker."""
    return default_context()


def _kind(node: object) -> str:
    if isinstance(node, Element):
        return node.tag
    return type(node).__name__


def test_descriptor_identity() -> None:
    """The page is registered under its stable key and route."""
    assert frontend.DESCRIPTOR.key == "v-79a3b5bd"
    assert frontend.DESCRIPTOR.path == "/docs/no07-frontend.html"
    assert frontend.PAGE.render is frontend.render


def test_top_level_order(context: RenderContext) -> None:
    """Heading, intro, warning, installation, download steps, closing."""
    tree = frontend.render(context)
    assert isinstance(tree, Fragment)
    assert [_kind(node) for node in tree] == [
        "h1",
        "p",
        "div",
        "StaticHtml",
        "ul",
        "p",
    ]


def test_heading_and_download_steps(context: RenderContext) -> None:
    """The first node is the page title and the download list has 4 steps."""
    tree = frontend.render(context)
    heading = tree[0]
    assert isinstance(heading, Element)
    assert heading.get("id") == "rport-frontend"
    assert text_content(heading).strip("# ") == "Rport Frontend"

    steps = tree[4]
    assert isinstance(steps, Element)
    assert [_kind(item) for item in steps.children] == ["li"] * 4
    assert text_content(steps.children[1]) == "Unpack to the doc_root folder."
    assert text_content(tree[5]) == "You are done."


def test_installation_section_is_static_block(context: RenderContext) -> None:
    """The installation section is a hoisted block of four elements."""
    section = frontend.render(context)[3]
    assert isinstance(section, StaticHtml)
    assert section.node_count == 4
    assert section.html.startswith('<h2 id="installing-the-frontend">')
    assert "doc_root = &quot;/var/lib/rport/docroot&quot;" in section.html


def test_static_fragments_shared_between_renders(context: RenderContext) -> None:
    """Static subtrees are the same objects on every render."""
    first = frontend.render(context)
    second = frontend.render(context)
    for position in (0, 1, 3, 5):
        assert first[position] is second[position]
    warning_a, warning_b = first[2], second[2]
    assert isinstance(warning_a, Element)
    assert isinstance(warning_b, Element)
    assert warning_a.children[0] is warning_b.children[0]
    assert warning_a.children[3] is warning_b.children[3]


def test_dynamic_nodes_fresh_but_equal(context: RenderContext) -> None:
    """Nodes around the marker are rebuilt yet structurally identical."""
    first = frontend.render(context)
    second = frontend.render(context)
    assert first == second
    assert first[2] is not second[2]
    assert first[4] is not second[4]


def test_outbound_links_wrap_resolved_marker(context: RenderContext) -> None:
    """Every external link ends with the marker taken from the context."""
    marker = context.resolve("OutboundLink")
    tree = frontend.render(context)
    links = [el for el in iter_elements(tree) if el.tag == "a" and el.get("target")]
    assert [link.get("href") for link in links] == [
        frontend.LICENSE_URL,
        frontend.LICENSE_URL,
        frontend.DOWNLOAD_URL,
        frontend.API_AUTH_URL,
    ]
    for link in links:
        assert link.get("rel") == "noopener noreferrer"
        tail = link.children[-1]
        assert isinstance(tail, ComponentNode)
        assert tail.component is marker


def test_marker_identity_follows_context() -> None:
    """A different marker instance yields a structurally different tree."""
    first = frontend.render(RenderContext([OutboundLink()]))
    second = frontend.render(RenderContext([OutboundLink()]))
    assert first[0] is second[0]
    assert first != second


def test_missing_marker_raises() -> None:
    """Rendering without the marker fails instead of returning a partial tree."""
    with pytest.raises(ComponentResolutionError) as excinfo:
        frontend.render(RenderContext())
    assert excinfo.value.name == "OutboundLink"
