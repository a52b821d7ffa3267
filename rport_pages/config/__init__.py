"""Load and validate site configuration YAML for rport docs builds.

This subpackage parses the project's ``pages.yaml`` file and produces the
:class:`SiteConfig` dataclass that the page builder and CLI consume. The
primary entry point is :func:`load_site_config`, which applies defaults for
absent keys and rejects malformed values with :class:`SiteConfigError`.

Examples
--------
>>> from pathlib import Path
>>> from rport_pages.config import load_site_config
>>> site = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> site.output_dir  # doctest: +SKIP
PosixPath('public')
"""

from .loader import load_site_config
from .models import DEFAULT_OUTBOUND_LINK_LABEL, SiteConfig, SiteConfigError

__all__ = [
    "DEFAULT_OUTBOUND_LINK_LABEL",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
