"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import DEFAULT_OUTBOUND_LINK_LABEL, SiteConfig, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _page_keys(value: object | None) -> list[str]:
    """Normalize the ``pages`` entry into a list of page keys."""
    match value:
        case None:
            return []
        case str():
            return [key for key in value.split() if key]
        case list():
            keys = [_optional_str(item) for item in value]
            return [key for key in keys if key]
        case _:
            msg = "'pages' must be a list of page keys."
            raise SiteConfigError(msg)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing site-wide page settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pages.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for missing keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a value has the wrong shape (for example, an empty
        ``output_dir``).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from rport_pages.config import load_site_config
    >>> config = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> config.site_name  # doctest: +SKIP
    'Rport'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    site = raw.get("site", {}) or {}
    if not isinstance(site, dict):
        msg = "'site' must be a mapping."
        raise SiteConfigError(msg)

    base = SiteConfig()
    output_dir = site.get("output_dir", base.output_dir)
    if _optional_str(output_dir) is None:
        msg = "'output_dir' must not be empty."
        raise SiteConfigError(msg)

    site_name = site.get("site_name", base.site_name)
    label = _optional_str(site.get("outbound_link_label")) or DEFAULT_OUTBOUND_LINK_LABEL
    separator = site.get("title_separator")
    if separator is None:
        separator = base.title_separator

    return SiteConfig(
        site_name="" if site_name is None else str(site_name).strip(),
        output_dir=Path(output_dir),
        pages=_page_keys(raw.get("pages")),
        outbound_link_label=label,
        title_separator=str(separator),
    )


__all__ = ["load_site_config"]
