"""Invalidation Fan-out: drops every cached view that depends on a written resource type.

Invariants:
    - One collaborator call per configured path, in configured order
    - A failing path is logged and skipped; remaining paths are still invalidated
    - Never raises: a stale cache is acceptable, a lost mutation result is not
    - Unknown resource types invalidate nothing

Design Decisions:
    - Paths injected as configuration (Settings.invalidation_paths), not hardcoded
    - Best-effort over transactional: invalidation is cleanup after the write,
      not part of its outcome
"""

import logging
from collections.abc import Mapping, Sequence

from app.core.domain_types import ResourceType
from app.core.repository_protocols import CacheInvalidator

logger = logging.getLogger(__name__)


class InvalidationFanout:
    """Maps resource types to dependent view paths and invalidates them."""

    def __init__(
        self,
        invalidator: CacheInvalidator,
        paths_by_type: Mapping[str, Sequence[str]],
    ):
        self._invalidator = invalidator
        self._paths_by_type = {
            key: tuple(paths) for key, paths in paths_by_type.items()
        }

    def paths_for(self, resource_type: ResourceType) -> tuple[str, ...]:
        return self._paths_by_type.get(resource_type.value, ())

    def invalidate(self, resource_type: ResourceType) -> None:
        self.invalidate_paths(self.paths_for(resource_type))

    def invalidate_paths(self, paths: Sequence[str]) -> None:
        for path in paths:
            try:
                self._invalidator.invalidate(path)
            except Exception as e:
                logger.warning(
                    f"Failed to invalidate cached view {path}: {e}",
                    extra={"path": path},
                    exc_info=True,
                )
