# config.py
import os
from pydantic import BaseModel, ConfigDict
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()

class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    mongo_uri: Optional[str] = None
    mongo_db_name: str = "interview_questions_db"
    mongo_timeout_ms: int = 3000
    log_level: str = "INFO"
    default_user_id: int = 1

    @property
    def use_mongo(self) -> bool:
        return bool(self.mongo_uri)

def load_settings() -> Settings:
    """
    Read settings from the environment once, at bootstrap.
    MONGO_URI is the only switch that changes behaviour: set it to use MongoDB,
    leave it out to keep everything in memory.
    """
    return Settings(
        mongo_uri=os.getenv("MONGO_URI") or None,
        mongo_db_name=os.getenv("MONGO_DB_NAME", "interview_questions_db"),
        mongo_timeout_ms=int(os.getenv("MONGO_TIMEOUT_MS", "3000")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        default_user_id=int(os.getenv("DEFAULT_USER_ID", "1")),
    )
