"""Preference Schemas — Pydantic models for the preference endpoint.

Invariants:
    - Unknown or duplicate categories are accepted here and dropped by the normalizer
"""

from pydantic import BaseModel, Field

from activity_notes.core.domain_types import FALLBACK_CATEGORY


class PreferencesUpdate(BaseModel):
    """Preference form: multi-valued categories plus a default."""
    categories: list[str] = Field(default_factory=list, max_length=50)
    default_category: str = FALLBACK_CATEGORY


class PreferencesResponse(BaseModel):
    """Normalized preferences as stored."""
    categories: list[str]
    default_category: str
