"""Note Validation — required-field check for note submissions.

Invariants:
    - Fields are compared after stripping whitespace
    - Every empty field is named, in title, category, description order
"""

from activity_notes.core.errors import ErrorContext, NoteValidationError

REQUIRED_NOTE_FIELDS = ("title", "category", "description")


def require_note_fields(
    title: str, category: str, description: str,
    context: ErrorContext | None = None,
) -> tuple[str, str, str]:
    """Return the stripped fields or raise NoteValidationError naming the empty ones."""
    values = (title.strip(), category.strip(), description.strip())
    missing = [
        name for name, value in zip(REQUIRED_NOTE_FIELDS, values) if not value
    ]
    if missing:
        raise NoteValidationError(missing, context)
    return values
