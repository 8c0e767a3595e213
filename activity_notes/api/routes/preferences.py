"""Preferences — PUT /api/v1/preferences replaces category selection and default."""

from fastapi import APIRouter, Depends

from activity_notes.api.dependencies import (
    get_current_user_id, get_preference_handlers,
)
from activity_notes.core.domain_types import UserId
from activity_notes.schemas.preferences import (
    PreferencesResponse, PreferencesUpdate,
)
from activity_notes.services.handle_preferences import PreferenceHandlers

router = APIRouter(prefix="/api/v1/preferences", tags=["preferences"])


@router.put("", response_model=PreferencesResponse)
async def save_preferences(
    body: PreferencesUpdate,
    user_id: UserId | None = Depends(get_current_user_id),
    handlers: PreferenceHandlers = Depends(get_preference_handlers),
):
    """Save up to three categories; extras beyond the first three are dropped."""
    prefs = await handlers.save_preferences(
        user_id, body.categories, body.default_category,
    )
    return PreferencesResponse(
        categories=prefs.categories,
        default_category=prefs.default_category,
    )
