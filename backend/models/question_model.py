# models/question_model.py
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


# older snapshots of the catalog used the long labels
DIFFICULTY_ALIASES = {
    "easy": Difficulty.EASY,
    "medium": Difficulty.MEDIUM,
    "hard": Difficulty.HARD,
    "beginner": Difficulty.EASY,
    "intermediate": Difficulty.MEDIUM,
    "advanced": Difficulty.HARD,
}

# options offered by the difficulty selector
DIFFICULTIES = [
    {"value": "all", "label": "All Difficulties"},
    {"value": "easy", "label": "Beginner", "badge": "Easy"},
    {"value": "medium", "label": "Intermediate", "badge": "Medium"},
    {"value": "hard", "label": "Advanced", "badge": "Hard"},
]


def normalize_difficulty(value) -> Optional[Difficulty]:
    """
    Map a raw difficulty label (any case, canonical or legacy) to one of the
    three canonical levels. Returns None for anything unrecognised.
    """
    if isinstance(value, Difficulty):
        return value
    if not isinstance(value, str):
        return None
    return DIFFICULTY_ALIASES.get(value.strip().lower())


class QuestionCreate(BaseModel):
    """A catalog entry before it has been assigned an identifier."""
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    difficulty: Difficulty

    @field_validator("difficulty", mode="before")
    @classmethod
    def _canonical_difficulty(cls, v):
        level = normalize_difficulty(v)
        if level is None:
            raise ValueError(f"unknown difficulty: {v!r}")
        return level


class QuestionModel(QuestionCreate):
    model_config = ConfigDict(frozen=True)

    id: int

    def to_json(self) -> dict:
        return self.model_dump(mode="json")

    def to_bson(self) -> dict:
        """
        Convert to a dict suitable for pymongo insertion.
        The integer id is stored as the document _id.
        """
        d = self.model_dump(mode="json")
        d["_id"] = d.pop("id")
        return d

    @classmethod
    def from_bson(cls, data: dict):
        doc = dict(data)
        doc["id"] = doc.pop("_id")
        return cls(**doc)
