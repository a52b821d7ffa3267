"""Lazily built, process-wide cache of static page fragments.

A page module registers one builder per static subtree (content that never
depends on the render context). :meth:`StaticNodeCache.get_static` builds a
fragment on first access and returns the same object on every later call, so
renders share static subtrees by reference.

Example
-------
>>> from rport_pages.nodes import h
>>> cache = StaticNodeCache({"intro": lambda: h("p", None, "Hi")})
>>> cache.get_static("intro") is cache.get_static("intro")
True
"""

from __future__ import annotations

import logging
import threading
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .nodes import Node

logger = logging.getLogger(__name__)


class StaticNodeCache:
    """Memoize static node fragments keyed by fragment id."""

    def __init__(self, builders: typ.Mapping[str, cabc.Callable[[], Node]]) -> None:
        """Initialize the cache with one zero-argument builder per fragment id."""
        self._builders = dict(builders)
        self._fragments: dict[str, Node] = {}
        self._lock = threading.Lock()

    def get_static(self, fragment_id: str) -> Node:
        """Return the fragment for ``fragment_id``, building it on first use.

        Parameters
        ----------
        fragment_id : str
            Identifier assigned when the cache was constructed.

        Returns
        -------
        Node
            The stored fragment; identical (``is``) across calls.

        Raises
        ------
        KeyError
            If no builder is registered for ``fragment_id``.
        """
        cached = self._fragments.get(fragment_id)
        if cached is not None:
            return cached
        try:
            builder = self._builders[fragment_id]
        except KeyError as exc:
            known = ", ".join(sorted(self._builders))
            msg = f"Unknown static fragment '{fragment_id}'. Known fragments: {known}"
            raise KeyError(msg) from exc
        with self._lock:
            # first write wins; another thread may have built it meanwhile
            cached = self._fragments.get(fragment_id)
            if cached is None:
                cached = builder()
                self._fragments[fragment_id] = cached
                logger.debug("built static fragment %s", fragment_id)
        return cached

    def warm(self) -> None:
        """Build every registered fragment eagerly."""
        for fragment_id in self._builders:
            self.get_static(fragment_id)

    def is_built(self, fragment_id: str) -> bool:
        """Return whether ``fragment_id`` has already been constructed."""
        return fragment_id in self._fragments

    @property
    def fragment_ids(self) -> list[str]:
        """Return the registered fragment ids in registration order."""
        return list(self._builders)


__all__ = ["StaticNodeCache"]
