"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root; notes, selections and sign-in sessions scoped by user_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all or Alembic autogenerate runs
"""

from activity_notes.models.user import User  # noqa: F401
from activity_notes.models.category import Category  # noqa: F401
from activity_notes.models.user_category import UserCategory  # noqa: F401
from activity_notes.models.note import Note  # noqa: F401
from activity_notes.models.auth_session import AuthSession  # noqa: F401
