"""Shared components and the render context that supplies them to pages.

Page modules never import shared components directly. They resolve them by
name from a :class:`RenderContext` handed to ``render`` so the mounting layer
decides which implementation (and which configuration) a page receives.

Example
-------
>>> context = default_context()
>>> context.resolve("OutboundLink").name
'OutboundLink'
>>> "Badge" in context
False
"""

from __future__ import annotations

import typing as typ

from ._constants import OUTBOUND_LINK
from .config.models import DEFAULT_OUTBOUND_LINK_LABEL
from .nodes import Element, h

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .nodes import Node

DEFAULT_SR_LABEL = DEFAULT_OUTBOUND_LINK_LABEL
_ICON_PATH = (
    "M18.8,85.1h56l0,0c2.3,0,4.2-1.9,4.2-4.2l0,0V56.9l0,0c0-2.3-1.9-4.2-4.2-4.2"
    "l0,0c-2.3,0-4.2,1.9-4.2,4.2v24.2H23V28.6h24.2c2.3,0,4.2-1.9,4.2-4.2l0,0"
    "c0-2.3-1.9-4.2-4.2-4.2l0,0H18.8c-2.3,0-4.2,1.9-4.2,4.2v56"
    "C14.6,83.2,16.5,85.1,18.8,85.1z"
)
_ICON_POINTS = (
    "45.7,48.7 51.3,54.3 77.2,28.5 77.2,37.2 85.2,37.2 85.2,14.9 "
    "62.8,14.9 62.8,22.9 71.5,22.9"
)


class ComponentResolutionError(LookupError):
    """Raised when a page asks for a component the context does not provide."""

    def __init__(self, name: str, available: typ.Iterable[str] = ()) -> None:
        self.name = name
        known = ", ".join(sorted(available)) or "none"
        msg = f"Component '{name}' is not registered. Known components: {known}"
        super().__init__(msg)


@typ.runtime_checkable
class Component(typ.Protocol):
    """A named, renderable shared component."""

    name: str

    def render(self) -> Node:
        """Return the component's node tree."""
        ...


class OutboundLink:
    """External-link indicator appended to links that leave the site."""

    name = OUTBOUND_LINK

    def __init__(self, sr_label: str = DEFAULT_SR_LABEL) -> None:
        """Initialize the marker with the screen-reader label it announces."""
        self.sr_label = sr_label

    def render(self) -> Element:
        """Return the icon and its visually hidden label."""
        icon = h(
            "svg",
            {
                "class": "external-link-icon",
                "xmlns": "http://www.w3.org/2000/svg",
                "aria-hidden": "true",
                "focusable": "false",
                "x": "0px",
                "y": "0px",
                "viewBox": "0 0 100 100",
                "width": "15",
                "height": "15",
            },
            h("path", {"fill": "currentColor", "d": _ICON_PATH}),
            h("polygon", {"fill": "currentColor", "points": _ICON_POINTS}),
        )
        label = h("span", {"class": "external-link-icon-sr-only"}, self.sr_label)
        return h("span", None, icon, label)

    def __repr__(self) -> str:
        return f"OutboundLink(sr_label={self.sr_label!r})"


class RenderContext:
    """Registry of shared components looked up by name at render time."""

    def __init__(self, components: typ.Iterable[Component] = ()) -> None:
        self._components: dict[str, Component] = {}
        for component in components:
            self.register(component)

    def register(self, component: Component, name: str | None = None) -> None:
        """Register ``component`` under ``name`` (defaults to its own name)."""
        self._components[name or component.name] = component

    def resolve(self, name: str) -> Component:
        """Return the component registered as ``name``.

        Raises
        ------
        ComponentResolutionError
            If no component is registered under ``name``.
        """
        try:
            return self._components[name]
        except KeyError as exc:
            raise ComponentResolutionError(name, self._components) from exc

    def names(self) -> list[str]:
        """Return registered component names in registration order."""
        return list(self._components)

    def __contains__(self, name: object) -> bool:
        return name in self._components


def default_context(site_config: SiteConfig | None = None) -> RenderContext:
    """Return a context providing the components every page expects."""
    label = site_config.outbound_link_label if site_config else DEFAULT_SR_LABEL
    return RenderContext([OutboundLink(sr_label=label)])


__all__ = [
    "DEFAULT_SR_LABEL",
    "Component",
    "ComponentResolutionError",
    "OutboundLink",
    "RenderContext",
    "default_context",
]
