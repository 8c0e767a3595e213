"""Note Schemas — Pydantic models for the note submission endpoint.

Invariants:
    - NoteCreate accepts missing fields as "": emptiness is reported by
      NoteValidationError with every missing field named, not by Pydantic
    - NoteResponse mirrors the persisted row

Design Decisions:
    - Length caps only: presence is a workflow rule, shared with non-HTTP callers
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Note submission form."""
    title: str = Field("", max_length=500)
    category: str = Field("", max_length=100)
    description: str = Field("", max_length=20_000)


class NoteResponse(BaseModel):
    """Persisted note."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    category: str
    description: str
    priority: str
    summary: str
    content: str
    created_at: datetime
