"""View Cache: in-process cache of rendered read views, keyed by view path.

Invariants:
    - invalidate(path) is idempotent and safe for paths that were never cached
    - get() returns a deep copy, so callers cannot mutate the cached payload
    - Mutations never write here; only read routes populate it

Design Decisions:
    - Module-level singleton: deliberate exception to no-global-state rule
      (ADR: single-process uvicorn; a multi-worker deployment swaps in a shared
      cache that satisfies CacheInvalidator)
"""

import copy
import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class ViewCache:
    """Path → payload map satisfying the CacheInvalidator protocol."""

    def __init__(self):
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Any | None:
        with self._lock:
            payload = self._entries.get(path)
        return copy.deepcopy(payload) if payload is not None else None

    def set(self, path: str, payload: Any) -> None:
        with self._lock:
            self._entries[path] = copy.deepcopy(payload)

    def invalidate(self, path: str) -> None:
        with self._lock:
            removed = self._entries.pop(path, None)
        if removed is not None:
            logger.debug(f"View cache invalidated: {path}", extra={"path": path})

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, path: str) -> bool:
        with self._lock:
            return path in self._entries


view_cache = ViewCache()


def get_view_cache() -> ViewCache:
    """FastAPI dependency for the process-wide view cache."""
    return view_cache
