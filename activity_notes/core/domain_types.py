"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, CategoryId, NoteId wrap UUIDs — never use bare UUID in domain logic
    - NotePriority values are the exact labels persisted in notes.priority
    - ALLOWED_CATEGORIES has exactly 6 members; FALLBACK_CATEGORY is not one of them

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for priority: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
CategoryId = NewType("CategoryId", UUID)
NoteId = NewType("NoteId", UUID)


# ─── Category Constants ──────────────────────────────────────────

ALLOWED_CATEGORIES: tuple[str, ...] = (
    "Work",
    "Personal",
    "Projects",
    "Learning",
    "Health",
    "Travel",
)
FALLBACK_CATEGORY = "General"
MAX_SELECTED_CATEGORIES = 3


# ─── Enums ───────────────────────────────────────────────────────

class NotePriority(str, Enum):
    """Priority label assigned by the note classifier."""
    HIGH = "High Priority"
    MEDIUM = "Medium Priority"
    LOW = "Low Priority"
