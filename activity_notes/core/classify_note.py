"""Note Classifier — deterministic priority, summary and content for an activity note.

Invariants:
    - Pure: no IO, no clock, no randomness
    - Any string is accepted, including empty (callers validate beforehand)
    - priority is High when word count > 100 or "urgent" appears (any case),
      Medium when word count > 50, Low otherwise
    - content embeds at most CONTENT_PREVIEW_CHARS characters of the description

Design Decisions:
    - Placeholder for a real generation call; latency and IO live in
      services/note_generator.py so this stays synchronous and testable
"""

from dataclasses import dataclass

from activity_notes.core.domain_types import NotePriority

HIGH_PRIORITY_WORDS = 100
MEDIUM_PRIORITY_WORDS = 50
URGENT_MARKER = "urgent"
CONTENT_PREVIEW_CHARS = 200


@dataclass(frozen=True)
class NoteInput:
    title: str
    category: str
    description: str


@dataclass(frozen=True)
class NoteResult:
    priority: NotePriority
    summary: str
    content: str


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens."""
    return len(text.split())


def assign_priority(description: str, word_count: int) -> NotePriority:
    if word_count > HIGH_PRIORITY_WORDS or URGENT_MARKER in description.lower():
        return NotePriority.HIGH
    if word_count > MEDIUM_PRIORITY_WORDS:
        return NotePriority.MEDIUM
    return NotePriority.LOW


def classify_note(note: NoteInput) -> NoteResult:
    """Classify a note. Pure, no IO."""
    word_count = count_words(note.description)
    preview = note.description[:CONTENT_PREVIEW_CHARS]
    if len(note.description) > CONTENT_PREVIEW_CHARS:
        preview += "..."

    summary = (
        f'This is a generated summary placeholder for "{note.title}". '
        f"The original description contained {word_count} words."
    )
    content = (
        "This is a generated content placeholder. In a production application, "
        "this would contain a processed and structured version of the user's "
        f'input: "{preview}".'
    )
    return NoteResult(
        priority=assign_priority(note.description, word_count),
        summary=summary,
        content=content,
    )
