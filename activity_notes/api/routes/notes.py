"""Notes — POST /api/v1/notes creates an activity note for the signed-in user."""

from fastapi import APIRouter, Depends, status

from activity_notes.api.dependencies import get_current_user_id, get_note_handlers
from activity_notes.core.domain_types import UserId
from activity_notes.schemas.note import NoteCreate, NoteResponse
from activity_notes.services.handle_notes import NoteHandlers

router = APIRouter(prefix="/api/v1/notes", tags=["notes"])


@router.post(
    "", response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_note(
    body: NoteCreate,
    user_id: UserId | None = Depends(get_current_user_id),
    handlers: NoteHandlers = Depends(get_note_handlers),
):
    """Submit a note. The stored category is the user's default category."""
    note = await handlers.submit_note(
        user_id, body.title, body.category, body.description,
    )
    return NoteResponse.model_validate(note)
