"""Dashboard Cache — per-user dashboard snapshots, evicted on write.

Invariants:
    - mark_stale(user_id) removes the entry; the next read recomputes
    - A snapshot loaded across a mark_stale for the same user is never stored:
      put() only accepts it if no invalidation happened after generation()
    - At most max_entries snapshots and max_entries invalidation records are
      kept; the least recently used are dropped first
    - Snapshots carry no clock-dependent fields (reminder is computed per read)

Design Decisions:
    - In-process dict: single-process uvicorn, state lost on restart is acceptable
      because every entry can be recomputed from the database
    - One global generation counter instead of one per user. Dropping an old
      invalidation record raises a floor, so an unknown user is treated as
      invalidated at that floor and a load that started earlier is rejected
    - Implements core.repository_protocols.DashboardInvalidator structurally
"""

import logging
from collections import OrderedDict

from activity_notes.config import get_settings
from activity_notes.core.domain_types import UserId
from activity_notes.core.dashboard_snapshot import DashboardSnapshot

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 1024


class DashboardCache:
    """Stale-on-write LRU cache of dashboard snapshots keyed by user."""

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        self.max_entries = max_entries
        self._entries: OrderedDict[UserId, DashboardSnapshot] = OrderedDict()
        self._invalidated_at: OrderedDict[UserId, int] = OrderedDict()
        self._generation = 0
        self._floor = 0

    def __len__(self) -> int:
        return len(self._entries)

    def generation(self) -> int:
        """Token to capture before loading a snapshot; hand it back to put()."""
        return self._generation

    def get(self, user_id: UserId) -> DashboardSnapshot | None:
        snapshot = self._entries.get(user_id)
        if snapshot is not None:
            self._entries.move_to_end(user_id)
        return snapshot

    def put(
        self, user_id: UserId, snapshot: DashboardSnapshot, generation: int,
    ) -> bool:
        """Store the snapshot unless the user was invalidated after `generation`."""
        if generation < self._invalidated_at.get(user_id, self._floor):
            logger.debug(
                "Discarded dashboard loaded before a write",
                extra={"user_id": str(user_id)},
            )
            return False
        self._entries[user_id] = snapshot
        self._entries.move_to_end(user_id)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
        return True

    def mark_stale(self, user_id: UserId) -> None:
        self._generation += 1
        self._invalidated_at[user_id] = self._generation
        self._invalidated_at.move_to_end(user_id)
        while len(self._invalidated_at) > self.max_entries:
            _, dropped = self._invalidated_at.popitem(last=False)
            self._floor = max(self._floor, dropped)
        if self._entries.pop(user_id, None) is not None:
            logger.debug("Dashboard marked stale", extra={"user_id": str(user_id)})


dashboard_cache = DashboardCache(get_settings().dashboard_cache_max_entries)


def get_dashboard_cache() -> DashboardCache:
    """FastAPI dependency for the process-wide dashboard cache."""
    return dashboard_cache
