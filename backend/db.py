# db.py
import logging
from pymongo import MongoClient, ASCENDING

from config import Settings

logger = logging.getLogger(__name__)


def connect(settings: Settings):
    """
    Open a client for settings.mongo_uri and return the database handle.
    Pings the server so an unreachable MongoDB fails here, at startup,
    with a PyMongoError instead of on the first request.
    """
    client = MongoClient(settings.mongo_uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms)
    client.admin.command("ping")
    return client[settings.mongo_db_name]


def init_db(db) -> None:
    """
    Ensure collections and indexes exist.
    - questions: index on difficulty and category for the list filters
    - user_preferences: unique (user_id, question_id) so upserts can never duplicate
    create_index is idempotent, so this is safe on every boot.
    """
    questions = db.get_collection("questions")
    questions.create_index([("difficulty", ASCENDING)])
    questions.create_index([("category", ASCENDING)])

    prefs = db.get_collection("user_preferences")
    prefs.create_index([("user_id", ASCENDING), ("question_id", ASCENDING)], unique=True)
    prefs.create_index([("user_id", ASCENDING)])

    logger.info("Initialized DB '%s' indexes.", db.name)
