# services/catalog_service.py
from typing import Iterable, List, Optional
import logging

from models.question_model import QuestionCreate, QuestionModel, normalize_difficulty
from services.errors import QuestionNotFound
from services.seed_data import SEED_QUESTIONS
from services.storage import Storage

logger = logging.getLogger(__name__)


class QuestionCatalog:
    """Read side of the question catalog, plus its one-time seeding."""

    def __init__(self, storage: Storage):
        self.storage = storage

    def get_all(self) -> List[QuestionModel]:
        return self.storage.get_all_questions()

    def get_by_id(self, question_id: int) -> QuestionModel:
        question = self.storage.get_question_by_id(question_id)
        if question is None:
            raise QuestionNotFound(question_id)
        return question

    def get_by_difficulty(self, level: str) -> List[QuestionModel]:
        canonical = normalize_difficulty(level)
        if canonical is None:
            return []
        return self.storage.get_questions_by_difficulty(canonical)

    def categories(self) -> List[str]:
        seen = []
        for q in self.get_all():
            if q.category not in seen:
                seen.append(q.category)
        return seen

    def ensure_seeded(self, questions: Optional[Iterable[dict]] = None) -> int:
        """
        Load the seed catalog if, and only if, the store is empty.
        Returns how many questions were created (0 when seeding was skipped).
        """
        existing = self.storage.count_questions()
        if existing:
            logger.info("Catalog already holds %d questions; skipping seed.", existing)
            return 0

        rows = SEED_QUESTIONS if questions is None else list(questions)
        logger.info("Seeding %d questions into %s storage...", len(rows), self.storage.name)
        for row in rows:
            self.storage.create_question(QuestionCreate(**row))
        return len(rows)
