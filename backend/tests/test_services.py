import pytest

from services.catalog_service import QuestionCatalog
from services.errors import InvalidPreference, QuestionNotFound
from services.preference_service import PreferenceStore
from services.seed_data import SEED_QUESTIONS
from services.storage import MemStorage


def test_ensure_seeded_loads_once():
    catalog = QuestionCatalog(MemStorage())
    assert catalog.ensure_seeded() == len(SEED_QUESTIONS)
    assert catalog.ensure_seeded() == 0
    assert len(catalog.get_all()) == len(SEED_QUESTIONS)


def test_construction_does_not_seed():
    assert QuestionCatalog(MemStorage()).get_all() == []


def test_get_by_id_raises_not_found(catalog):
    assert catalog.get_by_id(1).id == 1
    with pytest.raises(QuestionNotFound):
        catalog.get_by_id(999)


def test_get_by_difficulty_is_case_insensitive(catalog):
    assert len(catalog.get_by_difficulty("EASY")) == 5
    assert len(catalog.get_by_difficulty("Intermediate")) == 4


def test_get_by_difficulty_unknown_level_is_empty(catalog):
    assert catalog.get_by_difficulty("expert") == []


def test_categories_in_first_seen_order(catalog):
    assert catalog.categories() == ["Fundamentals", "ORM", "Performance"]


def test_seed_catalog_difficulties_are_canonical():
    catalog = QuestionCatalog(MemStorage())
    catalog.ensure_seeded()
    assert {q.difficulty.value for q in catalog.get_all()} == {"easy", "medium", "hard"}


def test_upsert_validates_payload(preferences):
    with pytest.raises(InvalidPreference) as exc:
        preferences.upsert({"questionId": 1, "isFavorite": True})
    assert "userId" in str(exc.value)

    with pytest.raises(InvalidPreference):
        preferences.upsert(None)


def test_upsert_partial_updates_keep_other_flag(preferences):
    preferences.upsert({"userId": 1, "questionId": 2, "isFavorite": True})
    pref = preferences.upsert({"userId": 1, "questionId": 2, "isCompleted": True})
    assert pref.is_favorite and pref.is_completed
    assert len(preferences.get_for_user(1)) == 1


def test_lookup_for_user_keys_by_question(preferences):
    preferences.upsert({"userId": 1, "questionId": 2, "isFavorite": True})
    preferences.upsert({"userId": 1, "questionId": 5, "isCompleted": True})
    lookup = preferences.lookup_for_user(1)
    assert set(lookup) == {2, 5}
    assert lookup[2].is_favorite and not lookup[5].is_favorite


def test_preference_store_independent_of_catalog():
    store = PreferenceStore(MemStorage())
    assert store.get_for_user(1) == []


@pytest.mark.parametrize("payload", [
    {"userId": "1", "questionId": 7, "isFavorite": True},
    {"userId": True, "questionId": 7},
    {"userId": 1, "questionId": 7.0},
    {"userId": 1, "questionId": 7, "isFavorite": "no"},
    {"userId": 1, "questionId": 7, "isCompleted": 1},
])
def test_upsert_rejects_values_of_the_wrong_type(preferences, payload):
    with pytest.raises(InvalidPreference):
        preferences.upsert(payload)
    assert preferences.get_for_user(1) == []


def test_seed_catalog_covers_every_level():
    catalog = QuestionCatalog(MemStorage())
    catalog.ensure_seeded()
    assert len(catalog.get_all()) == 98
    assert [len(catalog.get_by_difficulty(level)) for level in ("easy", "medium", "hard")] == [22, 46, 30]
    assert {"API", "Routing", "ActiveRecord", "Security"} <= set(catalog.categories())
