"""Preference Handlers — save_preferences: normalize, upsert categories, replace selection.

Invariants:
    - No resolved user -> UnauthenticatedError before any read or write
    - Category rows are upserted by unique name: concurrent savers of the same new
      name neither fail nor create duplicates
    - default_category update, selection delete, and selection insert commit
      together or not at all; prior selection survives any failure
    - Saving the same normalized input twice leaves the same rows behind

Design Decisions:
    - Upserts commit before the replacement transaction: a Category row is harmless
      on its own and is never deleted
    - Native INSERT .. ON CONFLICT DO NOTHING on PostgreSQL and SQLite; other
      dialects fall back to a SAVEPOINT that absorbs the unique violation
"""

import logging
import uuid
from typing import Iterable, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from activity_notes.core.domain_types import (
    ALLOWED_CATEGORIES, FALLBACK_CATEGORY, MAX_SELECTED_CATEGORIES, UserId,
)
from activity_notes.core.errors import (
    ErrorContext, StorageError, UnauthenticatedError,
)
from activity_notes.core.normalize_preferences import (
    NormalizedPreferences, normalize_preferences,
)
from activity_notes.core.repository_protocols import DashboardInvalidator
from activity_notes.infrastructure.database import to_storage_error
from activity_notes.models.category import Category
from activity_notes.models.user import User
from activity_notes.models.user_category import UserCategory

logger = logging.getLogger(__name__)

_ON_CONFLICT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


class PreferenceHandlers:
    """Category preference workflow."""

    def __init__(
        self,
        db: AsyncSession,
        invalidator: DashboardInvalidator,
        allowed_categories: Sequence[str] = ALLOWED_CATEGORIES,
        max_selected: int = MAX_SELECTED_CATEGORIES,
        fallback_category: str = FALLBACK_CATEGORY,
    ):
        self.db = db
        self.invalidator = invalidator
        self.allowed_categories = allowed_categories
        self.max_selected = max_selected
        self.fallback_category = fallback_category

    async def save_preferences(
        self,
        user_id: UserId | None,
        raw_categories: Iterable[str],
        raw_default: str | None,
    ) -> NormalizedPreferences:
        """Replace the user's selected categories and default category."""
        if user_id is None:
            raise UnauthenticatedError()
        context = ErrorContext(user_id=str(user_id))
        prefs = normalize_preferences(
            raw_categories, raw_default, self.allowed_categories,
            limit=self.max_selected, fallback=self.fallback_category,
        )

        try:
            category_ids = [
                await self._upsert_category(name) for name in prefs.categories
            ]
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e, "upsert") from e

        try:
            await self._set_default_category(user_id, prefs.default_category, context)
            await self.db.execute(
                delete(UserCategory).where(UserCategory.user_id == user_id),
            )
            if category_ids:
                await self._insert_selections(user_id, category_ids)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e, "transaction") from e

        self.invalidator.mark_stale(user_id)
        logger.info(
            f"Preferences saved (default={prefs.default_category})",
            extra={
                "user_id": str(user_id),
                "category_count": len(prefs.categories),
            },
        )
        return prefs

    async def _upsert_category(self, name: str) -> uuid.UUID:
        """Insert the category if absent and return its id."""
        dialect = self.db.get_bind().dialect.name
        dialect_insert = _ON_CONFLICT_INSERTS.get(dialect)
        if dialect_insert is not None:
            await self.db.execute(
                dialect_insert(Category)
                .values(id=uuid.uuid4(), name=name)
                .on_conflict_do_nothing(index_elements=["name"]),
            )
        else:
            try:
                async with self.db.begin_nested():
                    self.db.add(Category(name=name))
            except IntegrityError:
                logger.debug(f"Category '{name}' already exists")

        result = await self.db.execute(
            select(Category.id).where(Category.name == name),
        )
        return result.scalar_one()

    async def _set_default_category(
        self, user_id: UserId, default_category: str, context: ErrorContext,
    ) -> None:
        result = await self.db.execute(
            update(User)
            .where(User.id == user_id)
            .values(default_category=default_category),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise StorageError(f"User '{user_id}' not found", "update", context)

    async def _insert_selections(
        self, user_id: UserId, category_ids: list[uuid.UUID],
    ) -> None:
        await self.db.execute(
            insert(UserCategory),
            [
                {"user_id": user_id, "category_id": category_id}
                for category_id in category_ids
            ],
        )
