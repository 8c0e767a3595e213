"""Note Handlers — submit_note: validate, classify, persist, invalidate.

Invariants:
    - No resolved user -> UnauthenticatedError before any read or write
    - Empty title/category/description -> NoteValidationError, nothing written
    - Persisted category is ALWAYS the user's stored default_category
      (fallback "General"), never the submitted one
    - Single INSERT + commit: a failure leaves no Note row (StorageError)
    - Dashboard invalidated only after a successful commit
    - No transaction is held open while the generator runs

Design Decisions:
    - The submitted category is validated and then dropped. The dashboard form
      lets users pick one that is silently ignored; kept as deployed, listed as a
      known defect in DESIGN.md
    - Generator and invalidator injected: no hard-coded latency, no coupling to
      how the presentation layer caches
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from activity_notes.core.classify_note import NoteInput
from activity_notes.core.domain_types import FALLBACK_CATEGORY, UserId
from activity_notes.core.errors import ErrorContext, UnauthenticatedError
from activity_notes.core.repository_protocols import (
    DashboardInvalidator, NoteGenerator,
)
from activity_notes.core.validate_note import require_note_fields
from activity_notes.infrastructure.database import to_storage_error
from activity_notes.models.note import Note
from activity_notes.models.user import User

logger = logging.getLogger(__name__)


class NoteHandlers:
    """Note submission workflow."""

    def __init__(
        self,
        db: AsyncSession,
        generator: NoteGenerator,
        invalidator: DashboardInvalidator,
        fallback_category: str = FALLBACK_CATEGORY,
    ):
        self.db = db
        self.generator = generator
        self.invalidator = invalidator
        self.fallback_category = fallback_category

    async def submit_note(
        self,
        user_id: UserId | None,
        title: str,
        category: str,
        description: str,
    ) -> Note:
        """Create an immutable Note for the signed-in user."""
        if user_id is None:
            raise UnauthenticatedError()
        context = ErrorContext(user_id=str(user_id))
        title, _, description = require_note_fields(
            title, category, description, context,
        )

        try:
            default_category = await self._stored_default_category(user_id)
            # Release the read transaction before the generator call
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e, "read") from e

        note_input = NoteInput(
            title=title, category=default_category, description=description,
        )
        result = await self.generator.generate(note_input)

        note = Note(
            user_id=user_id,
            title=note_input.title,
            category=note_input.category,
            description=note_input.description,
            priority=result.priority.value,
            summary=result.summary,
            content=result.content,
        )
        try:
            self.db.add(note)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_storage_error(e, "insert") from e

        self.invalidator.mark_stale(user_id)
        logger.info(
            f"Note created ({note.priority})",
            extra={"user_id": str(user_id), "note_id": str(note.id)},
        )
        return note

    async def _stored_default_category(self, user_id: UserId) -> str:
        result = await self.db.execute(
            select(User.default_category).where(User.id == user_id),
        )
        return result.scalar_one_or_none() or self.fallback_category
