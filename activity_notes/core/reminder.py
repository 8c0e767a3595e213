"""Reminder — decides whether the dashboard nudges the user to add a note."""

from datetime import datetime, timedelta, timezone

REMINDER_THRESHOLD_DAYS = 5


def should_show_reminder(
    last_note_at: datetime | None,
    now: datetime,
    threshold_days: int = REMINDER_THRESHOLD_DAYS,
) -> bool:
    """True when the user never wrote a note or the last one is threshold_days old.

    Naive timestamps (SQLite drops tzinfo) are treated as UTC.
    """
    if last_note_at is None:
        return True
    if last_note_at.tzinfo is None:
        last_note_at = last_note_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now - last_note_at >= timedelta(days=threshold_days)
