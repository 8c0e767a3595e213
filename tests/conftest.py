"""Root conftest — shared test configuration."""

import os

# Tests never reach a real database server
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("NOTE_GENERATION_DELAY_MS", "0")
