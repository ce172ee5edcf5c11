# services/storage.py
"""
Storage contract for the question catalog and user preferences, the in-memory
implementation, and the factory that picks a backend at startup.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
import itertools
import logging
import threading

from pymongo.errors import PyMongoError

from config import Settings
from models.question_model import Difficulty, QuestionCreate, QuestionModel
from models.preference_model import PreferenceModel, PreferenceUpdate

logger = logging.getLogger(__name__)


class Storage(ABC):
    name = "abstract"

    # -------------------------
    # Questions
    # -------------------------
    @abstractmethod
    def get_all_questions(self) -> List[QuestionModel]:
        """Every question, in insertion order."""

    @abstractmethod
    def get_question_by_id(self, question_id: int) -> Optional[QuestionModel]:
        ...

    def get_questions_by_difficulty(self, level: Difficulty) -> List[QuestionModel]:
        return [q for q in self.get_all_questions() if q.difficulty == level]

    @abstractmethod
    def create_question(self, question: QuestionCreate) -> QuestionModel:
        ...

    @abstractmethod
    def count_questions(self) -> int:
        ...

    # -------------------------
    # User preferences
    # -------------------------
    @abstractmethod
    def get_user_preferences(self, user_id: int) -> List[PreferenceModel]:
        ...

    @abstractmethod
    def update_user_preference(self, update: PreferenceUpdate) -> PreferenceModel:
        """
        Upsert the (user_id, question_id) record. Only flags present on the
        update are written; a new record defaults absent flags to False.
        """


class MemStorage(Storage):
    name = "memory"

    def __init__(self):
        self._questions: Dict[int, QuestionModel] = {}
        self._prefs: Dict[Tuple[int, int], PreferenceModel] = {}
        self._question_ids = itertools.count(1)
        self._pref_ids = itertools.count(1)
        self._write_lock = threading.Lock()
        self._key_locks: Dict[Tuple[int, int], threading.Lock] = {}

    def get_all_questions(self) -> List[QuestionModel]:
        return list(self._questions.values())

    def get_question_by_id(self, question_id: int) -> Optional[QuestionModel]:
        return self._questions.get(question_id)

    def create_question(self, question: QuestionCreate) -> QuestionModel:
        with self._write_lock:
            created = QuestionModel(id=next(self._question_ids), **question.model_dump())
            self._questions[created.id] = created
        return created

    def count_questions(self) -> int:
        return len(self._questions)

    def get_user_preferences(self, user_id: int) -> List[PreferenceModel]:
        return [p for p in list(self._prefs.values()) if p.user_id == user_id]

    def _lock_for(self, key: Tuple[int, int]) -> threading.Lock:
        with self._write_lock:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = self._key_locks[key] = threading.Lock()
            return lock

    def update_user_preference(self, update: PreferenceUpdate) -> PreferenceModel:
        key = (update.user_id, update.question_id)
        with self._lock_for(key):
            existing = self._prefs.get(key)
            if existing is None:
                with self._write_lock:
                    pref_id = next(self._pref_ids)
                existing = PreferenceModel(id=pref_id, user_id=update.user_id, question_id=update.question_id)

            changes = {}
            if update.is_favorite is not None:
                changes["is_favorite"] = update.is_favorite
            if update.is_completed is not None:
                changes["is_completed"] = update.is_completed

            saved = existing.model_copy(update=changes)
            self._prefs[key] = saved
            return saved


# -------------------------
# Backend selection
# -------------------------
def create_storage(settings: Settings, connect=None) -> Storage:
    """
    Pick the storage backend once, at bootstrap.
    Without MONGO_URI the in-memory store is used. If MongoDB is configured but
    cannot be reached, log it and fall back to memory rather than failing to boot.
    """
    if not settings.use_mongo:
        logger.info("MONGO_URI not set; using in-memory storage.")
        return MemStorage()

    from db import connect as default_connect, init_db
    from services.mongo_storage import MongoStorage

    connect = connect or default_connect
    try:
        mongo_db = connect(settings)
        init_db(mongo_db)
    except PyMongoError as e:
        logger.exception("MongoDB unavailable at startup, falling back to in-memory storage: %s", e)
        return MemStorage()

    logger.info("Using MongoDB storage (db=%s).", settings.mongo_db_name)
    return MongoStorage(mongo_db)
