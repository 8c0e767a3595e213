"""Note Generator — injectable latency around the pure classifier."""

from activity_notes.core.classify_note import NoteInput
from activity_notes.core.domain_types import NotePriority
from activity_notes.services.note_generator import HeuristicNoteGenerator

NOTE = NoteInput(title="T", category="Work", description="urgent thing")


async def test_awaits_configured_delay_once():
    slept = []

    async def _sleep(seconds):
        slept.append(seconds)

    result = await HeuristicNoteGenerator(0.3, sleep=_sleep).generate(NOTE)
    assert slept == [0.3]
    assert result.priority == NotePriority.HIGH


async def test_zero_delay_skips_sleep():
    slept = []

    async def _sleep(seconds):
        slept.append(seconds)

    await HeuristicNoteGenerator(0, sleep=_sleep).generate(NOTE)
    assert slept == []
