"""Note Generator — async wrapper that turns a validated note into generated fields.

Invariants:
    - HeuristicNoteGenerator awaits its delay exactly once per note, then classifies
    - delay_seconds <= 0 skips the sleep entirely

Design Decisions:
    - The delay stands in for a real generation call: injectable so tests run with
      no latency and a real client can replace the heuristic without touching
      the note workflow
    - sleep is injectable for the same reason (tests pass a recorder)
"""

import asyncio
import logging
from typing import Awaitable, Callable

from activity_notes.config import get_settings
from activity_notes.core.classify_note import NoteInput, NoteResult, classify_note

logger = logging.getLogger(__name__)


class HeuristicNoteGenerator:
    """Word-count heuristic with a fixed placeholder latency."""

    def __init__(
        self,
        delay_seconds: float = 0.3,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    async def generate(self, note: NoteInput) -> NoteResult:
        if self.delay_seconds > 0:
            await self._sleep(self.delay_seconds)
        result = classify_note(note)
        logger.debug(f"Generated note '{note.title}' with {result.priority.value}")
        return result


def get_note_generator() -> HeuristicNoteGenerator:
    """FastAPI dependency — generator configured from settings."""
    settings = get_settings()
    return HeuristicNoteGenerator(settings.note_generation_delay_ms / 1000)
