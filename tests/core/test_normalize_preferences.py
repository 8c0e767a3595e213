"""Preference Normalizer — dedup, allow-list filter, first-three truncation, default fallback."""

from activity_notes.core.domain_types import ALLOWED_CATEGORIES
from activity_notes.core.normalize_preferences import normalize_preferences


def test_dedups_filters_and_keeps_first_three():
    prefs = normalize_preferences(
        ["Work", "Work", "Bogus", "Travel", "Health"], "Bogus", ALLOWED_CATEGORIES,
    )
    assert prefs.categories == ["Work", "Travel", "Health"]
    assert prefs.default_category == "General"


def test_empty_selection_keeps_valid_default():
    prefs = normalize_preferences([], "Personal", ALLOWED_CATEGORIES)
    assert prefs.categories == []
    assert prefs.default_category == "Personal"


def test_input_order_decides_which_three_survive():
    prefs = normalize_preferences(
        ["Travel", "Learning", "Work", "Personal", "Health"], "Work",
        ALLOWED_CATEGORIES,
    )
    assert prefs.categories == ["Travel", "Learning", "Work"]


def test_missing_default_falls_back_to_general():
    prefs = normalize_preferences(["Work"], None, ALLOWED_CATEGORIES)
    assert prefs.default_category == "General"


def test_general_is_not_an_allowed_default():
    prefs = normalize_preferences([], "General", ALLOWED_CATEGORIES)
    assert prefs.default_category == "General"


def test_category_names_are_case_sensitive():
    prefs = normalize_preferences(["work", "WORK"], "health", ALLOWED_CATEGORIES)
    assert prefs.categories == []
    assert prefs.default_category == "General"


def test_injected_allow_list_and_limit_are_honoured():
    prefs = normalize_preferences(
        ["A", "B", "C"], "B", ["A", "B", "C"], limit=2, fallback="A",
    )
    assert prefs.categories == ["A", "B"]
    assert prefs.default_category == "B"


def test_never_exceeds_three_even_when_all_allowed():
    prefs = normalize_preferences(list(ALLOWED_CATEGORIES), "Work", ALLOWED_CATEGORIES)
    assert len(prefs.categories) == 3
