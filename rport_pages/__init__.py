"""Compiled rport documentation pages and the tooling that mounts them.

This package holds page modules (metadata plus a ``render`` function that
builds the page's node tree), the shared components they resolve from a
render context, and the CLI entry points used by ``uv run pages`` to write the
static HTML served from the rport docs root.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from rport_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
