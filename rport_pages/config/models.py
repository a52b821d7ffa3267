"""Typed dataclasses describing rport docs site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

DEFAULT_OUTBOUND_LINK_LABEL = "open in new window"


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide settings shared by every generated page.

    Attributes
    ----------
    site_name : str
        Suffix appended to each page ``<title>``.
    output_dir : Path
        Directory that page routes are resolved against.
    pages : list[str]
        Page keys to build; empty means every indexed page.
    outbound_link_label : str
        Screen-reader text announced by the outbound-link marker.
    title_separator : str
        Separator placed between page title and site name.
    """

    site_name: str = "Rport"
    output_dir: Path = Path("public")
    pages: list[str] = dc.field(default_factory=list)
    outbound_link_label: str = DEFAULT_OUTBOUND_LINK_LABEL
    title_separator: str = " | "

    def html_title(self, page_title: str) -> str:
        """Return the document title for ``page_title``."""
        if not self.site_name:
            return page_title
        return f"{page_title}{self.title_separator}{self.site_name}"


__all__ = ["DEFAULT_OUTBOUND_LINK_LABEL", "SiteConfig", "SiteConfigError"]
