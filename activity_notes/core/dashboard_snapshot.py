"""Dashboard Snapshot — database-derived dashboard state and its per-request rendering.

Invariants:
    - A snapshot holds nothing that depends on the clock
    - render_dashboard adds show_reminder for the given `now`, so a cached
      snapshot still crosses the reminder boundary on time
"""

from dataclasses import dataclass
from datetime import datetime

from activity_notes.core.reminder import (
    REMINDER_THRESHOLD_DAYS, should_show_reminder,
)


@dataclass(frozen=True)
class DashboardSnapshot:
    payload: dict
    last_note_at: datetime | None


def render_dashboard(
    snapshot: DashboardSnapshot,
    now: datetime,
    reminder_threshold_days: int = REMINDER_THRESHOLD_DAYS,
) -> dict:
    """Snapshot payload plus show_reminder evaluated at `now`."""
    return {
        **snapshot.payload,
        "show_reminder": should_show_reminder(
            snapshot.last_note_at, now, reminder_threshold_days,
        ),
    }
