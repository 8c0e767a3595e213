"""Preference Normalizer — turns raw form input into a bounded, allow-listed selection.

Invariants:
    - categories: unique, first-seen order, each a member of allow_list, at most `limit`
    - default_category: raw_default if allow-listed, else the fallback
    - Never raises — malformed input degrades to empty/fallback values

Design Decisions:
    - Dedup happens before filtering and truncation: input order alone decides which
      three survive when more are submitted
    - allow_list is a parameter, not a module constant: the caller injects the
      configured list (config.Settings.allowed_categories)
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from activity_notes.core.domain_types import (
    FALLBACK_CATEGORY, MAX_SELECTED_CATEGORIES,
)


@dataclass(frozen=True)
class NormalizedPreferences:
    categories: list[str]
    default_category: str


def normalize_preferences(
    raw_categories: Iterable[str],
    raw_default: str | None,
    allow_list: Sequence[str],
    limit: int = MAX_SELECTED_CATEGORIES,
    fallback: str = FALLBACK_CATEGORY,
) -> NormalizedPreferences:
    """Normalize a preference submission. Pure, no IO."""
    allowed = set(allow_list)
    unique = list(dict.fromkeys(str(c) for c in raw_categories))
    categories = [name for name in unique if name in allowed][:limit]

    default_category = raw_default if raw_default in allowed else fallback
    return NormalizedPreferences(
        categories=categories, default_category=default_category,
    )
