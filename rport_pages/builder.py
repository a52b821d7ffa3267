"""Mount rendered page trees into standalone HTML documents.

:class:`PageBuilder` is the mounting layer for page modules: it calls a page's
``render`` with a :class:`~rport_pages.components.RenderContext`, serializes
the returned tree, wraps it in the ``page.jinja`` document shell, and writes
the result to the page's route below the configured output directory. The
page descriptor is written alongside as JSON so navigation tooling can build
a site index without importing page modules.

>>> from rport_pages.config import SiteConfig
>>> from rport_pages.pages import frontend
>>> builder = PageBuilder(frontend.PAGE, SiteConfig())  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/docs/no07-frontend.html')
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ._constants import PAGE_DATA_TEMPLATE
from .components import default_context
from .html import render_html

if typ.TYPE_CHECKING:
    from .components import RenderContext
    from .config import SiteConfig
    from .models import Page

logger = logging.getLogger(__name__)


class PageBuilder:
    """Render a page module into an HTML file on disk."""

    def __init__(
        self,
        page: Page,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        context: RenderContext | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        page : Page
            Page module bundle providing the descriptor and ``render``.
        site_config : SiteConfig
            Site-wide settings (output directory, title suffix, marker label).
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``rport_pages/templates``.
        context : RenderContext, optional
            Components handed to ``render``; defaults to
            :func:`~rport_pages.components.default_context` for the site.
        output_dir : Path, optional
            Override for ``site_config.output_dir``.
        """
        self.page = page
        self.site_config = site_config
        self.context = context if context is not None else default_context(site_config)
        self.output_dir = output_dir or site_config.output_dir
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    @property
    def output_path(self) -> Path:
        """Return the file the page route maps to below the output directory."""
        return self.output_dir / self.page.descriptor.path.lstrip("/")

    def render(self) -> str:
        """Return the complete HTML document for the page.

        Raises
        ------
        ComponentResolutionError
            Propagated from the page's ``render`` when the context lacks a
            component the page needs.
        """
        descriptor = self.page.descriptor
        tree = self.page.render(self.context)
        context = {
            "page": descriptor,
            "html_title": self.site_config.html_title(descriptor.title),
            "site_name": self.site_config.site_name,
            "content": Markup(render_html(tree)),
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the page HTML and data, returning the HTML path."""
        html = self.render()
        output_path = self.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        self._write_page_data(output_path.parent)
        logger.info("wrote %s", output_path)
        return output_path

    def _write_page_data(self, directory: Path) -> Path:
        descriptor = self.page.descriptor
        data_path = directory / PAGE_DATA_TEMPLATE.format(key=descriptor.key)
        payload = json.dumps(descriptor.to_dict(), indent=2, ensure_ascii=False)
        data_path.write_text(payload + "\n", encoding="utf-8")
        return data_path


__all__ = ["PageBuilder"]
