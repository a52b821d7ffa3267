"""Compiled documentation page modules and the site-wide page index.

Each page module exposes a ``DESCRIPTOR`` (page metadata), a ``render``
function taking a :class:`~rport_pages.components.RenderContext`, and a
``PAGE`` bundle that :class:`PageIndex` registers for navigation.

Examples
--------
>>> from rport_pages.pages import default_index
>>> index = default_index()
>>> index.by_path("/docs/no07-frontend.html").descriptor.title
'Rport Frontend'
"""

from __future__ import annotations

import typing as typ

from rport_pages.models import PageDescriptorError

from . import frontend

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from rport_pages.models import Page, PageDescriptor


class PageIndex:
    """Ordered registry of pages addressable by key or route."""

    def __init__(self, pages: typ.Iterable[Page] = ()) -> None:
        self._by_key: dict[str, Page] = {}
        self._by_path: dict[str, Page] = {}
        for page in pages:
            self.add(page)

    def add(self, page: Page) -> None:
        """Register ``page``; keys and paths must be unique."""
        descriptor = page.descriptor
        if descriptor.key in self._by_key:
            msg = f"Duplicate page key '{descriptor.key}'."
            raise PageDescriptorError(msg)
        if descriptor.path in self._by_path:
            msg = f"Duplicate page path '{descriptor.path}'."
            raise PageDescriptorError(msg)
        self._by_key[descriptor.key] = page
        self._by_path[descriptor.path] = page

    def get(self, key: str) -> Page:
        """Return the page registered under ``key``."""
        try:
            return self._by_key[key]
        except KeyError as exc:
            available = ", ".join(sorted(self._by_key))
            msg = f"Unknown page '{key}'. Known pages: {available}"
            raise KeyError(msg) from exc

    def by_path(self, path: str) -> Page:
        """Return the page served at route ``path``."""
        try:
            return self._by_path[path]
        except KeyError as exc:
            msg = f"No page is served at '{path}'."
            raise KeyError(msg) from exc

    def descriptors(self) -> list[PageDescriptor]:
        """Return page descriptors in registration order."""
        return [page.descriptor for page in self._by_key.values()]

    def __iter__(self) -> cabc.Iterator[Page]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)


def default_index() -> PageIndex:
    """Return an index holding every page module shipped with the package."""
    return PageIndex([frontend.PAGE])


__all__ = ["PageIndex", "default_index", "frontend"]
