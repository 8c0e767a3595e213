"""User ORM — the signed-in account that owns notes and category preferences.

Invariants:
    - id is UUID primary key (client-default)
    - email is unique
    - default_category is an allow-listed name or "General"; never NULL
    - Never deleted by the note or preference workflows

Design Decisions:
    - Rows are created by the sign-in provider, not by this service
    - Notes, selections and sessions go with the user via ON DELETE CASCADE
      foreign keys; no ORM relationships, queries join explicitly
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from activity_notes.core.domain_types import FALLBACK_CATEGORY
from activity_notes.db.base import Base


class User(Base):
    """User aggregate root."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str | None] = mapped_column(
        String(320), unique=True, nullable=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    default_category: Mapped[str] = mapped_column(
        String(50), nullable=False, default=FALLBACK_CATEGORY,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
