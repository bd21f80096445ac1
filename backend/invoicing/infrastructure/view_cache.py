"""Listing Cache — rendered invoice-listing pages, dropped on every mutation.

Invariants:
    - Entries are grouped by path key; invalidate(path) drops every variant under it
    - Every invalidate(path) bumps that path's generation
    - put() only stores a page computed at the path's current generation, so a
      query that overlapped an invalidation never lands in the cache
    - invalidate() is idempotent and never raises
    - One instance per process (view_cache); handlers only ever see the ViewCache protocol

Design Decisions:
    - Plain dicts, no TTL: entries live until the next successful mutation
      (single-process deployment, same trade-off as the session manager singleton)
    - Generation read before the query and checked at put(): no lock held across awaits
"""

import logging
from typing import Any

from invoicing.core.domain_types import PathKey

logger = logging.getLogger(__name__)


class ListingCache:
    """Path-keyed cache of rendered listing payloads."""

    def __init__(self):
        self._pages: dict[str, dict[str, Any]] = {}
        self._generations: dict[str, int] = {}

    def generation(self, path_key: PathKey) -> int:
        return self._generations.get(path_key, 0)

    def get(self, path_key: PathKey, variant: str) -> Any | None:
        return self._pages.get(path_key, {}).get(variant)

    def put(
        self, path_key: PathKey, variant: str, payload: Any, generation: int,
    ) -> bool:
        """Store payload unless the path was invalidated since `generation` was read."""
        if generation != self.generation(path_key):
            logger.debug(
                f"Dropped stale page {variant}",
                extra={"path": path_key},
            )
            return False
        self._pages.setdefault(path_key, {})[variant] = payload
        return True

    def invalidate(self, path_key: PathKey) -> None:
        self._generations[path_key] = self.generation(path_key) + 1
        dropped = self._pages.pop(path_key, None)
        logger.debug(
            f"Invalidated {len(dropped or {})} cached page(s)",
            extra={"path": path_key},
        )


view_cache = ListingCache()


def get_view_cache() -> ListingCache:
    """FastAPI dependency for the process-wide listing cache."""
    return view_cache
