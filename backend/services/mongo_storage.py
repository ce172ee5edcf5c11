# services/mongo_storage.py
from typing import List, Optional
import logging

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from models.question_model import Difficulty, QuestionCreate, QuestionModel
from models.preference_model import PreferenceModel, PreferenceUpdate
from services.errors import BackendUnavailable
from services.storage import Storage

logger = logging.getLogger(__name__)


class MongoStorage(Storage):
    """
    Storage backed by a pymongo database handle.
    Integer ids come from the `counters` collection so they stay stable and
    ordered like the in-memory backend.
    """
    name = "mongo"

    def __init__(self, db):
        self.db = db

    # --- collection helpers ---
    def _questions(self) -> Collection:
        return self.db.get_collection("questions")

    def _prefs(self) -> Collection:
        return self.db.get_collection("user_preferences")

    def _next_id(self, sequence: str) -> int:
        doc = self.db.get_collection("counters").find_one_and_update(
            {"_id": sequence},
            {"$inc": {"value": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return doc["value"]

    # -------------------------
    # Questions
    # -------------------------
    def get_all_questions(self) -> List[QuestionModel]:
        try:
            docs = list(self._questions().find().sort("_id", ASCENDING))
        except PyMongoError as e:
            raise BackendUnavailable(f"Failed to read questions: {e}") from e
        return [QuestionModel.from_bson(d) for d in docs]

    def get_question_by_id(self, question_id: int) -> Optional[QuestionModel]:
        try:
            doc = self._questions().find_one({"_id": question_id})
        except PyMongoError as e:
            raise BackendUnavailable(f"Failed to read question {question_id}: {e}") from e
        return QuestionModel.from_bson(doc) if doc else None

    def get_questions_by_difficulty(self, level: Difficulty) -> List[QuestionModel]:
        try:
            docs = list(self._questions().find({"difficulty": level.value}).sort("_id", ASCENDING))
        except PyMongoError as e:
            raise BackendUnavailable(f"Failed to read questions: {e}") from e
        return [QuestionModel.from_bson(d) for d in docs]

    def create_question(self, question: QuestionCreate) -> QuestionModel:
        try:
            created = QuestionModel(id=self._next_id("questions"), **question.model_dump())
            self._questions().insert_one(created.to_bson())
        except PyMongoError as e:
            raise BackendUnavailable(f"Failed to insert question: {e}") from e
        return created

    def count_questions(self) -> int:
        try:
            return self._questions().count_documents({})
        except PyMongoError as e:
            raise BackendUnavailable(f"Failed to count questions: {e}") from e

    # -------------------------
    # User preferences
    # -------------------------
    def get_user_preferences(self, user_id: int) -> List[PreferenceModel]:
        try:
            docs = list(self._prefs().find({"user_id": user_id}).sort("_id", ASCENDING))
        except PyMongoError as e:
            raise BackendUnavailable(f"Failed to read preferences for user {user_id}: {e}") from e
        return [PreferenceModel.from_bson(d) for d in docs]

    def update_user_preference(self, update: PreferenceUpdate) -> PreferenceModel:
        key = {"user_id": update.user_id, "question_id": update.question_id}

        set_fields = {}
        if update.is_favorite is not None:
            set_fields["is_favorite"] = update.is_favorite
        if update.is_completed is not None:
            set_fields["is_completed"] = update.is_completed

        try:
            doc = self._update_existing(key, set_fields)
            if doc is None:
                try:
                    doc = self._upsert(key, set_fields)
                except DuplicateKeyError:
                    # a concurrent first insert won; the record exists now
                    logger.info("Preference %s inserted concurrently; updating instead.", key)
                    doc = self._update_existing(key, set_fields)
        except PyMongoError as e:
            raise BackendUnavailable(f"Failed to save preference: {e}") from e

        return PreferenceModel.from_bson(doc)

    def _update_existing(self, key: dict, set_fields: dict) -> Optional[dict]:
        if not set_fields:
            return self._prefs().find_one(key)
        return self._prefs().find_one_and_update(
            key, {"$set": set_fields}, return_document=ReturnDocument.AFTER
        )

    def _upsert(self, key: dict, set_fields: dict) -> dict:
        """
        Create the record in one atomic upsert: supplied flags via $set,
        the id and the remaining defaults via $setOnInsert.
        """
        on_insert = {"_id": self._next_id("user_preferences")}
        for flag in ("is_favorite", "is_completed"):
            if flag not in set_fields:
                on_insert[flag] = False

        ops = {"$setOnInsert": on_insert}
        if set_fields:
            ops["$set"] = set_fields
        return self._prefs().find_one_and_update(
            key, ops, upsert=True, return_document=ReturnDocument.AFTER
        )
