# models/preference_model.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PreferenceUpdate(BaseModel):
    """
    Body of POST /api/user-preferences.
    Flags left as None are "not supplied" and must not overwrite stored values.
    Strict: "1", 7.0 or true are not ids and "no" or 1 are not flags.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    user_id: int = Field(..., alias="userId", ge=1)
    question_id: int = Field(..., alias="questionId", ge=1)
    is_favorite: Optional[bool] = Field(None, alias="isFavorite")
    is_completed: Optional[bool] = Field(None, alias="isCompleted")


class PreferenceModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int = Field(..., alias="userId")
    question_id: int = Field(..., alias="questionId")
    is_favorite: bool = Field(False, alias="isFavorite")
    is_completed: bool = Field(False, alias="isCompleted")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_bson(self) -> dict:
        d = self.model_dump()
        d["_id"] = d.pop("id")
        return d

    @classmethod
    def from_bson(cls, data: dict):
        doc = {k: v for k, v in data.items() if k != "_id"}
        doc["id"] = data["_id"]
        return cls(**doc)
