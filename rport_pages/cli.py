"""Cyclopts CLI entrypoint for rendering rport documentation pages.

The ``pages`` console script defined here renders the compiled page modules
into static HTML below the configured output directory and lists the page
index used for navigation. Typical usage involves running ``pages generate``
locally or in CI before the docs root is served by the rport server.

Examples
--------
Generate every indexed page for the default configuration:

>>> from rport_pages.cli import main
>>> main()  # doctest: +SKIP

Render a single page into a custom directory:

>>> from rport_pages.cli import app
>>> app(
...     ["generate", "--page", "v-79a3b5bd", "--output-dir", "dist"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import PageBuilder
from .config import SiteConfig, load_site_config
from .pages import default_index

DEFAULT_CONFIG = Path("config/pages.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path) -> SiteConfig:
    """Load ``config`` or fall back to defaults when the default file is absent."""
    if config == DEFAULT_CONFIG and not config.exists():
        return SiteConfig()
    return load_site_config(config)


@app.command(help="Render documentation page modules into static HTML.")
def generate(
    *,
    page: typ.Annotated[
        str | None, Parameter(help="Page key", env_var="INPUT_PAGE")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Render the requested pages and print the written paths.

    Parameters
    ----------
    page : str or None, optional
        Key of the page to render; when ``None`` (default) the pages listed
        in the site config are rendered, or every indexed page when the
        config lists none.
    config : Path, optional
        Path to the ``pages.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the configured output directory.

    Raises
    ------
    KeyError
        If ``page`` (or a key listed in the config) is not in the page index.
    ComponentResolutionError
        If a page needs a component the render context does not provide.
    """
    site_config = _load_config(config)
    index = default_index()

    if page:
        target_pages = [index.get(page)]
    elif site_config.pages:
        target_pages = [index.get(key) for key in site_config.pages]
    else:
        target_pages = list(index)

    for target in target_pages:
        builder = PageBuilder(target, site_config, output_dir=output_dir)
        written = builder.run()
        print(f"wrote {_format_path(written)}")


@app.command(name="list", help="List indexed pages with their routes and titles.")
def list_pages(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print ``key``, ``path`` and ``title`` for each selected page."""
    site_config = _load_config(config)
    index = default_index()
    keys = site_config.pages or [descriptor.key for descriptor in index.descriptors()]
    for key in keys:
        descriptor = index.get(key).descriptor
        print(f"{descriptor.key}\t{descriptor.path}\t{descriptor.title}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
