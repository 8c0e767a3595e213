"""Boundary Protocols — contracts between the note workflows and their collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Note generation and view invalidation reached only through these Protocols
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - DashboardInvalidator is synchronous: marking a view stale is an in-process
      signal, never IO
"""

from typing import Protocol

from activity_notes.core.classify_note import NoteInput, NoteResult
from activity_notes.core.domain_types import UserId


class NoteGenerator(Protocol):
    """Turns a validated note into priority/summary/content — implemented by shell."""
    async def generate(self, note: NoteInput) -> NoteResult: ...


class DashboardInvalidator(Protocol):
    """Receives the 'dashboard for user is stale' event after a successful write."""
    def mark_stale(self, user_id: UserId) -> None: ...
