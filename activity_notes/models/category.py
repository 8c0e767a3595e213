"""Category ORM — a named bucket users can select for their dashboard.

Invariants:
    - name is unique across all rows (upsert target)
    - Created lazily on first selection, never deleted
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from activity_notes.db.base import Base


class Category(Base):
    """Category entity — unique by name."""
    __tablename__ = "categories"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
