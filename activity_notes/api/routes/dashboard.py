"""Dashboard — GET /api/v1/dashboard returns the signed-in user's filtered notes.

Invariants:
    - Unauthenticated requests get 401 (UnauthenticatedError envelope)
    - A cached snapshot is served until a write marks it stale
    - show_reminder is evaluated on every request against the current time

Design Decisions:
    - Cache keyed by user id only: the payload has no query parameters
    - Generation captured before loading: a write that commits mid-load makes
      the cache reject the snapshot, the response itself is still served
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from activity_notes.api.dependencies import get_current_user_id
from activity_notes.config import get_settings
from activity_notes.core.dashboard_snapshot import render_dashboard
from activity_notes.core.domain_types import UserId
from activity_notes.core.errors import UnauthenticatedError
from activity_notes.infrastructure.dashboard_cache import (
    DashboardCache, get_dashboard_cache,
)
from activity_notes.infrastructure.database import get_db
from activity_notes.schemas.dashboard import DashboardResponse
from activity_notes.services.dashboard_query import load_dashboard_snapshot

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    user_id: UserId | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
    cache: DashboardCache = Depends(get_dashboard_cache),
):
    """Dashboard payload: preferences, filtered notes, reminder flag."""
    if user_id is None:
        raise UnauthenticatedError()

    settings = get_settings()
    snapshot = cache.get(user_id)
    if snapshot is None:
        generation = cache.generation()
        snapshot = await load_dashboard_snapshot(
            db, user_id,
            allowed_categories=settings.allowed_categories,
            fallback_category=settings.fallback_category,
        )
        cache.put(user_id, snapshot, generation)
    return render_dashboard(
        snapshot, utcnow(), settings.reminder_threshold_days,
    )
