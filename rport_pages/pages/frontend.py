"""Page module for ``/docs/no07-frontend.html`` ("Rport Frontend").

Content without links to other sites is built once through the module's
:class:`~rport_pages.static_cache.StaticNodeCache`; paragraphs and list items
that carry the outbound-link marker are rebuilt on each ``render`` call
around the component resolved from the context.
"""

from __future__ import annotations

import typing as typ

from rport_pages._constants import EXTERNAL_LINK_ATTRS, OUTBOUND_LINK
from rport_pages.models import HeaderEntry, Page, PageDescriptor
from rport_pages.nodes import ComponentNode, Element, Fragment, StaticHtml, fragment, h
from rport_pages.static_cache import StaticNodeCache

if typ.TYPE_CHECKING:
    from rport_pages.components import Component, RenderContext

LICENSE_URL = "https://downloads.rport.io/frontend/license.html"
DOWNLOAD_URL = "https://downloads.rport.io/frontend/stable/?sort=time&order=desc"
API_AUTH_URL = (
    "https://github.com/cloudradar-monitoring/rport/blob/master/docs/api-auth.md"
)

DESCRIPTOR = PageDescriptor(
    key="v-79a3b5bd",
    path="/docs/no07-frontend.html",
    title="Rport Frontend",
    language="en-DE",
    frontmatter={},
    excerpt="",
    headers=(
        HeaderEntry(
            level=2,
            title="Installing the frontend",
            slug="installing-the-frontend",
        ),
    ),
    source_path="docs/no07-frontend.md",
)

INSTALLATION_HTML = (
    '<h2 id="installing-the-frontend"><a class="header-anchor" '
    'href="#installing-the-frontend">#</a> Installing the frontend</h2>'
    "<p>The frontend comes as a minified and compressed bundle of Javascript "
    "files and all needed assets. The frontend does not require any "
    "server-side scripting support. The rport server provides static file "
    "serving for that purpose.</p>"
    "<p>Make sure you have the below options enabled in <code>[api]</code> "
    "section of the <code>rportd.conf</code>.</p>"
    '<div class="language-text ext-text line-numbers-mode">'
    '<pre class="language-text"><code>doc_root = &quot;/var/lib/rport/docroot&quot;\n'
    '</code></pre><div class="line-numbers"><span class="line-number">1</span>'
    "<br></div></div>"
)


def _heading() -> Element:
    return h(
        "h1",
        {"id": "rport-frontend"},
        h("a", {"class": "header-anchor", "href": "#rport-frontend"}, "#"),
        " Rport Frontend",
    )


def _commercial_uses() -> Element:
    return h(
        "ul",
        None,
        h(
            "li",
            None,
            "Building a SaaS product or offering a hosted version of rport, "
            "either paid or free.",
        ),
        h(
            "li",
            None,
            "Running rport and the UI and granting customers access to it, "
            "either paid or free.",
        ),
    )


def _license_notice() -> Element:
    return h(
        "p",
        None,
        "Only the rport command-line tools – rport server and rport client – are "
        "released under the open-source MIT license. The optional graphical user "
        "interface ",
        h("strong", None, "is NOT open-source"),
        ", and free to use only under certain circumstances.",
    )


def _unpack_step() -> Element:
    return h("li", None, "Unpack to the ", h("code", None, "doc_root"), " folder.")


_STATIC = StaticNodeCache(
    {
        "heading": _heading,
        "intro": lambda: h(
            "p",
            None,
            "Rport comes with a web-based graphical user interface (frontend) "
            "which is distributed as a separate bundle.",
        ),
        "warning-title": lambda: h(
            "p", {"class": "custom-container-title"}, "WARNING"
        ),
        "license-notice": _license_notice,
        "commercial-uses": _commercial_uses,
        "installation": lambda: StaticHtml(INSTALLATION_HTML, node_count=4),
        "unpack-step": _unpack_step,
        "open-step": lambda: h("li", None, "Open the API-URL in a browser."),
        "closing": lambda: h("p", None, "You are done."),
    }
)


def _outbound(href: str, label: str, marker: Component) -> Element:
    """Return an external link followed by the outbound-link marker."""
    return h("a", {"href": href, **EXTERNAL_LINK_ATTRS}, label, ComponentNode(marker))


def _warning(marker: Component) -> Element:
    return h(
        "div",
        {"class": "custom-container warning"},
        _STATIC.get_static("warning-title"),
        _STATIC.get_static("license-notice"),
        h(
            "p",
            None,
            "In short, the following is not covered by the ",
            _outbound(LICENSE_URL, "license", marker),
            " and requires acquiring a commercial license.",
        ),
        _STATIC.get_static("commercial-uses"),
        h(
            "p",
            None,
            "Free usage in a company is allowed, as long as only employees of the "
            "company have access to rport. ",
            _outbound(LICENSE_URL, "Read the full license", marker),
            ". The uncompressed source code is not published.",
        ),
    )


def _download_steps(marker: Component) -> Element:
    return h(
        "ul",
        None,
        h(
            "li",
            None,
            "Download the latest release of the frontend from ",
            _outbound(
                DOWNLOAD_URL, "https://downloads.rport.io/frontend/stable", marker
            ),
            ".",
        ),
        _STATIC.get_static("unpack-step"),
        _STATIC.get_static("open-step"),
        h(
            "li",
            None,
            "Log in with a username and password specified for the ",
            _outbound(API_AUTH_URL, "API authentication", marker),
            ".",
        ),
    )


def render(context: RenderContext) -> Fragment:
    """Return the page's top-level nodes in authored order.

    Parameters
    ----------
    context : RenderContext
        Supplies the ``OutboundLink`` component.

    Returns
    -------
    Fragment
        Heading, intro paragraph, warning container, installation section,
        download steps, and closing paragraph.

    Raises
    ------
    ComponentResolutionError
        If ``context`` does not provide ``OutboundLink``.
    """
    marker = context.resolve(OUTBOUND_LINK)
    return fragment(
        _STATIC.get_static("heading"),
        _STATIC.get_static("intro"),
        _warning(marker),
        _STATIC.get_static("installation"),
        _download_steps(marker),
        _STATIC.get_static("closing"),
    )


PAGE = Page(descriptor=DESCRIPTOR, render=render, static=_STATIC)

__all__ = ["DESCRIPTOR", "PAGE", "render"]
