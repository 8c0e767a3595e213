"""Session Resolver — maps a sign-in session token to the owning user id.

Invariants:
    - Returns None for a missing, unknown, or expired token (never raises on bad input)
    - Read-only: never creates, extends, or deletes sessions

Design Decisions:
    - Returns an optional id instead of raising: the workflows decide that None
      means UnauthenticatedError, the dashboard route reports it the same way
"""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from activity_notes.core.domain_types import UserId
from activity_notes.models.auth_session import AuthSession


async def resolve_user_id(
    db: AsyncSession, token: str | None, now: datetime | None = None,
) -> UserId | None:
    """Resolve the signed-in user for a session token."""
    if not token:
        return None
    result = await db.execute(
        select(AuthSession.user_id, AuthSession.expires)
        .where(AuthSession.session_token == token),
    )
    row = result.one_or_none()
    if row is None:
        return None

    now = now or datetime.now(timezone.utc)
    expires = row.expires
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=timezone.utc)
    if expires <= now:
        return None
    return UserId(row.user_id)
