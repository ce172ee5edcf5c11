import sys
from pathlib import Path

import pytest

# Add backend/ to sys.path so tests import modules the way app.py does
BACKEND_PATH = Path(__file__).resolve().parent.parent
if BACKEND_PATH.as_posix() not in sys.path:
    sys.path.insert(0, BACKEND_PATH.as_posix())

from app import create_app  # noqa: E402
from config import Settings  # noqa: E402
from services.catalog_service import QuestionCatalog  # noqa: E402
from services.preference_service import PreferenceStore  # noqa: E402
from services.storage import MemStorage  # noqa: E402


def make_rows():
    """12 questions: 5 easy, 4 medium, 3 hard."""
    rows = []
    for i in range(5):
        rows.append({"question": f"Easy question {i}", "answer": f"easy answer {i}",
                     "category": "Fundamentals", "difficulty": "easy"})
    for i in range(4):
        rows.append({"question": f"Medium question {i}", "answer": f"medium answer {i}",
                     "category": "ORM", "difficulty": "medium"})
    for i in range(3):
        rows.append({"question": f"Hard question {i}", "answer": f"hard answer {i}",
                     "category": "Performance", "difficulty": "hard"})
    rows[1]["question"] = "What is Ruby on Rails?"
    rows[6]["answer"] = "Eager loading in rails avoids N+1 queries."
    return rows


@pytest.fixture
def storage():
    store = MemStorage()
    QuestionCatalog(store).ensure_seeded(make_rows())
    return store


@pytest.fixture
def catalog(storage):
    return QuestionCatalog(storage)


@pytest.fixture
def preferences(storage):
    return PreferenceStore(storage)


@pytest.fixture
def client(storage):
    app = create_app(settings=Settings(), storage=storage, seed=False)
    app.config["TESTING"] = True
    return app.test_client()
