"""Dashboard Query — read path composing preferences, filtered notes and the reminder flag.

Invariants:
    - Notes are always scoped to user_id, newest first
    - With selected categories, a note matches when its category CONTAINS any
      selected name (substring, OR-combined); LIKE wildcards in names are escaped
    - With no selected categories, every note of the user is returned
    - show_reminder uses the most recent note regardless of the category filter

Design Decisions:
    - Pure query composition, no writes: safe to cache and recompute at will
    - Reads produce a DashboardSnapshot; show_reminder is added per render
    - Selected names ordered by allow-list position so the payload is stable
"""

from datetime import datetime
from typing import Sequence

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from activity_notes.core.domain_types import (
    ALLOWED_CATEGORIES, FALLBACK_CATEGORY, UserId,
)
from activity_notes.core.dashboard_snapshot import (
    DashboardSnapshot, render_dashboard,
)
from activity_notes.core.reminder import REMINDER_THRESHOLD_DAYS
from activity_notes.models.category import Category
from activity_notes.models.note import Note
from activity_notes.models.user import User
from activity_notes.models.user_category import UserCategory

DESCRIPTION_PREVIEW_CHARS = 150


def _preview(text: str, limit: int = DESCRIPTION_PREVIEW_CHARS) -> str:
    return text[:limit] + ("..." if len(text) > limit else "")


def _serialize_note(note: Note) -> dict:
    return {
        "id": str(note.id),
        "title": note.title,
        "category": note.category,
        "priority": note.priority,
        "summary": note.summary,
        "content": note.content,
        "description_preview": _preview(note.description),
        "created_at": note.created_at.isoformat(),
    }


async def selected_category_names(
    db: AsyncSession, user_id: UserId, allowed_categories: Sequence[str],
) -> list[str]:
    result = await db.execute(
        select(Category.name)
        .join(UserCategory, UserCategory.category_id == Category.id)
        .where(UserCategory.user_id == user_id),
    )
    order = {name: i for i, name in enumerate(allowed_categories)}
    names = [name for name in result.scalars().all() if name]
    return sorted(names, key=lambda n: (order.get(n, len(order)), n))


async def list_notes(
    db: AsyncSession, user_id: UserId, categories: Sequence[str],
) -> list[Note]:
    query = select(Note).where(Note.user_id == user_id)
    if categories:
        query = query.where(or_(*(
            Note.category.contains(name, autoescape=True) for name in categories
        )))
    query = query.order_by(Note.created_at.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


async def last_note_created_at(
    db: AsyncSession, user_id: UserId,
) -> datetime | None:
    result = await db.execute(
        select(Note.created_at)
        .where(Note.user_id == user_id)
        .order_by(Note.created_at.desc())
        .limit(1),
    )
    return result.scalars().first()


async def load_dashboard_snapshot(
    db: AsyncSession,
    user_id: UserId,
    allowed_categories: Sequence[str] = ALLOWED_CATEGORIES,
    fallback_category: str = FALLBACK_CATEGORY,
) -> DashboardSnapshot:
    """Read preferences, filtered notes and the last note time for a user."""
    user = (await db.execute(
        select(User.email, User.default_category).where(User.id == user_id),
    )).one_or_none()

    selected = await selected_category_names(db, user_id, allowed_categories)
    notes = await list_notes(db, user_id, selected)
    last_note_at = await last_note_created_at(db, user_id)

    return DashboardSnapshot(
        payload={
            "email": user.email if user else None,
            "default_category": (
                user.default_category if user and user.default_category
                else fallback_category
            ),
            "selected_categories": selected,
            "allowed_categories": list(allowed_categories),
            "notes": [_serialize_note(n) for n in notes],
        },
        last_note_at=last_note_at,
    )


async def load_dashboard(
    db: AsyncSession,
    user_id: UserId,
    now: datetime,
    allowed_categories: Sequence[str] = ALLOWED_CATEGORIES,
    fallback_category: str = FALLBACK_CATEGORY,
    reminder_threshold_days: int = REMINDER_THRESHOLD_DAYS,
) -> dict:
    """Build the dashboard payload for a signed-in user."""
    snapshot = await load_dashboard_snapshot(
        db, user_id, allowed_categories, fallback_category,
    )
    return render_dashboard(snapshot, now, reminder_threshold_days)
