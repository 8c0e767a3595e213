"""Note ORM — an immutable activity note with its generated priority and summary.

Invariants:
    - Always belongs to a User (user_id FK)
    - Immutable after insert: no update or delete path in the services
    - created_at set once at creation; drives ordering and the reminder banner

Design Decisions:
    - category is a denormalized string, not a FK: matched by substring on the dashboard
    - Composite index (user_id, created_at): dashboard lists newest-first per user
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from activity_notes.db.base import Base


class Note(Base):
    """Note entity — one submitted activity note."""
    __tablename__ = "notes"
    __table_args__ = (
        Index("ix_notes_user_id_created_at", "user_id", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    priority: Mapped[str] = mapped_column(String(20), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
