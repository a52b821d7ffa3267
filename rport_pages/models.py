"""Typed dataclasses describing documentation pages."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from types import MappingProxyType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .components import RenderContext
    from .nodes import Fragment
    from .static_cache import StaticNodeCache


class PageDescriptorError(ValueError):
    """Raised when page metadata is inconsistent."""


@dc.dataclass(frozen=True, slots=True)
class HeaderEntry:
    """A heading in the page outline.

    Attributes
    ----------
    level : int
        Heading depth (``2`` for ``<h2>``).
    title : str
        Heading text.
    slug : str
        Anchor id, unique within the page.
    children : tuple[HeaderEntry, ...]
        Nested headings in document order.
    """

    level: int
    title: str
    slug: str
    children: tuple[HeaderEntry, ...] = ()

    def walk(self) -> cabc.Iterator[HeaderEntry]:
        """Yield this entry and its descendants depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the entry as a plain mapping."""
        return {
            "level": self.level,
            "title": self.title,
            "slug": self.slug,
            "children": [child.to_dict() for child in self.children],
        }


@dc.dataclass(frozen=True, slots=True)
class PageDescriptor:
    """Build-time metadata for a single page.

    Attributes
    ----------
    key : str
        Stable unique page id.
    path : str
        Route of the rendered page, for example ``/docs/no07-frontend.html``.
    title : str
        Page title.
    language : str
        Content language tag.
    frontmatter : Mapping[str, Any]
        Opaque frontmatter values, exposed read-only.
    excerpt : str
        Optional summary text.
    headers : tuple[HeaderEntry, ...]
        Top-level entries of the page outline.
    source_path : str
        Markdown source path relative to the docs root.
    """

    key: str
    path: str
    title: str
    language: str
    frontmatter: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict)
    excerpt: str = ""
    headers: tuple[HeaderEntry, ...] = ()
    source_path: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "frontmatter", MappingProxyType(dict(self.frontmatter)))
        object.__setattr__(self, "headers", tuple(self.headers))
        seen: set[str] = set()
        for slug in self.slugs():
            if slug in seen:
                msg = f"Page '{self.key}' repeats header slug '{slug}'."
                raise PageDescriptorError(msg)
            seen.add(slug)

    def walk_headers(self) -> cabc.Iterator[HeaderEntry]:
        """Yield every header entry depth first."""
        for header in self.headers:
            yield from header.walk()

    def slugs(self) -> list[str]:
        """Return all header slugs in document order."""
        return [entry.slug for entry in self.walk_headers()]

    def to_dict(self) -> dict[str, typ.Any]:
        """Return the page-data payload consumed by navigation and routing."""
        return {
            "key": self.key,
            "path": self.path,
            "title": self.title,
            "lang": self.language,
            "frontmatter": dict(self.frontmatter),
            "excerpt": self.excerpt,
            "headers": [header.to_dict() for header in self.headers],
            "filePathRelative": self.source_path,
        }


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A page module: descriptor, render entry point, and its static cache."""

    descriptor: PageDescriptor
    render: cabc.Callable[[RenderContext], Fragment]
    static: StaticNodeCache | None = None

    @property
    def key(self) -> str:
        """Return the descriptor key."""
        return self.descriptor.key


__all__ = ["HeaderEntry", "Page", "PageDescriptor", "PageDescriptorError"]
