import pytest
from pydantic import ValidationError

from models.question_model import Difficulty, QuestionCreate, QuestionModel, normalize_difficulty
from models.preference_model import PreferenceModel, PreferenceUpdate


@pytest.mark.parametrize("raw, expected", [
    ("easy", Difficulty.EASY),
    ("EASY", Difficulty.EASY),
    ("Beginner", Difficulty.EASY),
    ("intermediate", Difficulty.MEDIUM),
    (" Medium ", Difficulty.MEDIUM),
    ("advanced", Difficulty.HARD),
    ("hard", Difficulty.HARD),
])
def test_normalize_difficulty_maps_aliases(raw, expected):
    assert normalize_difficulty(raw) is expected


@pytest.mark.parametrize("raw", ["expert", "", None, 3, "all"])
def test_normalize_difficulty_rejects_unknown(raw):
    assert normalize_difficulty(raw) is None


def test_question_stores_canonical_difficulty():
    q = QuestionCreate(question="q", answer="a", category="ORM", difficulty="Advanced")
    assert q.difficulty is Difficulty.HARD
    assert q.model_dump(mode="json")["difficulty"] == "hard"


def test_question_with_unknown_difficulty_is_invalid():
    with pytest.raises(ValidationError):
        QuestionCreate(question="q", answer="a", category="ORM", difficulty="expert")


def test_question_bson_uses_integer_id():
    q = QuestionModel(id=4, question="q", answer="a", category="ORM", difficulty="easy")
    doc = q.to_bson()
    assert doc["_id"] == 4 and "id" not in doc
    assert QuestionModel.from_bson(doc) == q


def test_preference_json_uses_camel_case():
    pref = PreferenceModel(id=1, user_id=2, question_id=3, is_favorite=True)
    assert pref.to_json() == {"id": 1, "userId": 2, "questionId": 3, "isFavorite": True, "isCompleted": False}


def test_preference_update_leaves_missing_flags_unset():
    update = PreferenceUpdate.model_validate({"userId": 1, "questionId": 2, "isCompleted": True})
    assert update.is_favorite is None
    assert update.is_completed is True


def test_preference_update_accepts_explicit_null_flags():
    update = PreferenceUpdate.model_validate({"userId": 1, "questionId": 2, "isFavorite": None})
    assert update.is_favorite is None
