"""Request Dependencies — identity resolution and workflow construction per request.

Invariants:
    - get_current_user_id never raises for a missing/invalid token: it yields None
      and the workflow raises UnauthenticatedError
    - Cookie wins over the Authorization header when both are present

Design Decisions:
    - Identity threaded explicitly into services, never stored in a global
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from activity_notes.config import get_settings
from activity_notes.core.domain_types import UserId
from activity_notes.core.repository_protocols import NoteGenerator
from activity_notes.infrastructure.dashboard_cache import (
    DashboardCache, get_dashboard_cache,
)
from activity_notes.infrastructure.database import get_db
from activity_notes.services.handle_notes import NoteHandlers
from activity_notes.services.handle_preferences import PreferenceHandlers
from activity_notes.services.note_generator import get_note_generator
from activity_notes.services.session_resolver import resolve_user_id

BEARER_PREFIX = "bearer "


def extract_session_token(request: Request) -> str | None:
    """Session token from the configured cookie or an Authorization: Bearer header."""
    token = request.cookies.get(get_settings().session_cookie_name)
    if token:
        return token
    header = request.headers.get("authorization", "")
    if header.lower().startswith(BEARER_PREFIX):
        return header[len(BEARER_PREFIX):].strip() or None
    return None


async def get_current_user_id(
    request: Request, db: AsyncSession = Depends(get_db),
) -> UserId | None:
    return await resolve_user_id(db, extract_session_token(request))


def get_note_handlers(
    db: AsyncSession = Depends(get_db),
    generator: NoteGenerator = Depends(get_note_generator),
    cache: DashboardCache = Depends(get_dashboard_cache),
) -> NoteHandlers:
    settings = get_settings()
    return NoteHandlers(
        db, generator, cache, fallback_category=settings.fallback_category,
    )


def get_preference_handlers(
    db: AsyncSession = Depends(get_db),
    cache: DashboardCache = Depends(get_dashboard_cache),
) -> PreferenceHandlers:
    settings = get_settings()
    return PreferenceHandlers(
        db, cache,
        allowed_categories=settings.allowed_categories,
        max_selected=settings.max_selected_categories,
        fallback_category=settings.fallback_category,
    )
