"""AuthSession ORM — database-backed sign-in session resolving a token to a user.

Invariants:
    - session_token is unique
    - A session past `expires` resolves to no user

Design Decisions:
    - Database session strategy: revoking a sign-in is a row delete, no token crypto
"""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from activity_notes.db.base import Base


class AuthSession(Base):
    """Sign-in session row."""
    __tablename__ = "auth_sessions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    session_token: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    expires: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
