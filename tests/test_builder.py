"""End-to-end tests for mounting page modules into HTML files.

These tests run :class:`rport_pages.builder.PageBuilder` against the compiled
frontend page, parse the written document with BeautifulSoup, and decode the
page-data JSON with msgspec to verify the artefacts the docs root serves.
"""

from __future__ import annotations

from pathlib import Path

import msgspec.json as msgspec_json
import pytest
from bs4 import BeautifulSoup

from rport_pages._constants import PAGE_DATA_TEMPLATE
from rport_pages.builder import PageBuilder
from rport_pages.components import ComponentResolutionError, RenderContext
from rport_pages.config import SiteConfig
from rport_pages.pages import frontend


@pytest.fixture
def site_config(tmp_path: Path) -> SiteConfig:
    """Return a site config writing into a temporary directory."""
    return SiteConfig(site_name="Rport", output_dir=tmp_path / "public")


@pytest.fixture
def written_page(site_config: SiteConfig) -> Path:
    """Build the frontend page and return the written HTML path."""
    return PageBuilder(frontend.PAGE, site_config).run()


@pytest.fixture
def soup(written_page: Path) -> BeautifulSoup:
    """Parse the generated document."""
    return BeautifulSoup(written_page.read_text(encoding="utf-8"), "html.parser")


def test_output_follows_route(written_page: Path, site_config: SiteConfig) -> None:
    """The page lands at its route below the output directory."""
    assert written_page == site_config.output_dir / "docs" / "no07-frontend.html"
    assert written_page.read_text(encoding="utf-8").endswith("\n")


def test_document_shell(soup: BeautifulSoup) -> None:
    """Language, title, and the outline come from the descriptor."""
    assert soup.html is not None
    assert soup.html["lang"] == "en-DE"
    assert soup.title is not None
    assert soup.title.string == "Rport Frontend | Rport"
    toc_links = soup.select("nav.toc a.toc-link")
    assert [link["href"] for link in toc_links] == ["#installing-the-frontend"]
    container = soup.select_one("div.theme-container")
    assert container is not None
    assert container["data-page-key"] == "v-79a3b5bd"


def test_document_content(soup: BeautifulSoup) -> None:
    """The mounted tree keeps headings, lists, and external link markers."""
    content = soup.select_one("div.theme-default-content")
    assert content is not None
    heading = content.find("h1")
    assert heading is not None
    assert heading["id"] == "rport-frontend"
    assert heading.get_text().strip("# ") == "Rport Frontend"
    assert content.find("h2", id="installing-the-frontend") is not None
    code = content.select_one("pre.language-text code")
    assert code is not None
    assert code.get_text() == 'doc_root = "/var/lib/rport/docroot"\n'
    external = content.select('a[target="_blank"]')
    assert len(external) == 4
    for link in external:
        assert link["rel"] == ["noopener", "noreferrer"]
        assert link.select_one("span.external-link-icon-sr-only") is not None
    warning = content.select_one("div.custom-container.warning")
    assert warning is not None
    assert warning.select_one("p.custom-container-title").get_text() == "WARNING"


def test_page_data_written(written_page: Path) -> None:
    """The descriptor payload is written next to the page."""
    data_path = written_page.parent / PAGE_DATA_TEMPLATE.format(key="v-79a3b5bd")
    payload = msgspec_json.decode(data_path.read_bytes())
    assert payload["key"] == "v-79a3b5bd"
    assert payload["path"] == "/docs/no07-frontend.html"
    assert payload["headers"][0]["slug"] == "installing-the-frontend"
    assert payload["filePathRelative"] == "docs/no07-frontend.md"


def test_output_dir_override(tmp_path: Path, site_config: SiteConfig) -> None:
    """An explicit output directory wins over the site config."""
    target = tmp_path / "dist"
    written = PageBuilder(frontend.PAGE, site_config, output_dir=target).run()
    assert written == target / "docs" / "no07-frontend.html"


def test_missing_component_writes_nothing(site_config: SiteConfig) -> None:
    """Resolution failures propagate and leave no partial output."""
    builder = PageBuilder(frontend.PAGE, site_config, context=RenderContext())
    with pytest.raises(ComponentResolutionError):
        builder.run()
    assert not builder.output_path.exists()
