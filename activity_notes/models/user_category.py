"""UserCategory ORM — join row recording that a user selected a category.

Invariants:
    - Composite primary key (user_id, category_id): no independent identity
    - At most MAX_SELECTED_CATEGORIES rows per user (enforced before persistence)
    - A user's set is replaced wholesale inside one transaction, never patched

Design Decisions:
    - ondelete CASCADE on both FKs: join rows never outlive either side
"""

import uuid

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from activity_notes.db.base import Base


class UserCategory(Base):
    """Selection of a Category by a User."""
    __tablename__ = "user_categories"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    )
