# services/preference_service.py
from typing import Dict, List
import logging

from pydantic import ValidationError

from models.preference_model import PreferenceModel, PreferenceUpdate
from services.errors import InvalidPreference
from services.storage import Storage

logger = logging.getLogger(__name__)


def _describe(err: ValidationError) -> str:
    parts = []
    for e in err.errors():
        field = ".".join(str(p) for p in e.get("loc", ()))
        parts.append(f"{field}: {e.get('msg')}" if field else e.get("msg", ""))
    return "Validation error: " + "; ".join(parts)


class PreferenceStore:
    def __init__(self, storage: Storage):
        self.storage = storage

    def get_for_user(self, user_id: int) -> List[PreferenceModel]:
        return self.storage.get_user_preferences(user_id)

    def lookup_for_user(self, user_id: int) -> Dict[int, PreferenceModel]:
        """Preferences for user_id keyed by question id."""
        return {p.question_id: p for p in self.get_for_user(user_id)}

    def upsert(self, payload: dict) -> PreferenceModel:
        """
        Validate a raw request body and save it.
        Raises InvalidPreference with a readable message when identifiers are
        missing or flags are not booleans.
        """
        if not isinstance(payload, dict):
            raise InvalidPreference("Validation error: expected a JSON object")
        try:
            update = PreferenceUpdate.model_validate(payload)
        except ValidationError as e:
            raise InvalidPreference(_describe(e)) from e
        return self.save(update)

    def save(self, update: PreferenceUpdate) -> PreferenceModel:
        pref = self.storage.update_user_preference(update)
        logger.debug("Saved preference user=%s question=%s fav=%s done=%s",
                     pref.user_id, pref.question_id, pref.is_favorite, pref.is_completed)
        return pref
