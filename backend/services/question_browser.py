# services/question_browser.py
"""
Per-client view state for the question list: the active filters, the
annotated list, ephemeral expanded flags and the load status.

Persisted flags (favorite / completed) are flipped locally straight away and
written to the preference store in the background; the view never waits on it.
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from typing import List, Optional
import logging
import threading

from models.preference_model import PreferenceUpdate
from models.view_model import ALL, AnnotatedQuestion, FilterCriteria, QuestionPage
from services import filter_pipeline
from services.catalog_service import QuestionCatalog
from services.errors import StorageError
from services.preference_service import PreferenceStore

logger = logging.getLogger(__name__)

LOADING = "loading"
ERROR = "error"
EMPTY = "empty"
READY = "ready"


class QuestionBrowser:
    def __init__(
        self,
        catalog: QuestionCatalog,
        preferences: PreferenceStore,
        user_id: int,
        page_size: Optional[int] = None,
        executor: Optional[Executor] = None,
    ):
        self.catalog = catalog
        self.preferences = preferences
        self.user_id = user_id
        self.criteria = FilterCriteria() if page_size is None else FilterCriteria(page_size=page_size)
        self.items: List[AnnotatedQuestion] = []
        self.status = LOADING
        self.last_error: Optional[str] = None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="pref-writer")
        self._generation = 0
        self._lock = threading.Lock()
        self._pending: List[Future] = []

    # -------------------------
    # Fetching
    # -------------------------
    def begin_fetch(self) -> int:
        """Start a fetch and return its token; older tokens become stale."""
        with self._lock:
            self._generation += 1
            self.status = LOADING
            return self._generation

    def complete_fetch(self, token: int, questions, preferences) -> bool:
        """
        Install a fetched catalog/preference snapshot. A response for a fetch
        that has since been superseded is dropped and False is returned.
        """
        with self._lock:
            if token != self._generation:
                logger.debug("Discarding stale fetch %d (current %d)", token, self._generation)
                return False
            lookup = {p.question_id: p for p in preferences}
            self.items = filter_pipeline.annotate(questions, lookup, filter_pipeline.expanded_state(self.items))
            self.status = READY
            self.last_error = None
            return True

    def fail_fetch(self, token: int, message: str) -> bool:
        with self._lock:
            if token != self._generation:
                return False
            self.status = ERROR
            self.last_error = message
            return True

    def refresh(self) -> bool:
        """Fetch catalog and preferences synchronously; doubles as the retry action."""
        token = self.begin_fetch()
        try:
            questions = self.catalog.get_all()
            prefs = self.preferences.get_for_user(self.user_id)
        except StorageError as e:
            logger.exception("Failed to load questions: %s", e)
            self.fail_fetch(token, "There was a problem loading the interview questions.")
            return False
        return self.complete_fetch(token, questions, prefs)

    # -------------------------
    # Filters
    # -------------------------
    def set_search(self, search: str) -> None:
        self.criteria = self.criteria.with_filters(search=search)

    def set_category(self, category: str) -> None:
        self.criteria = self.criteria.with_filters(category=category)

    def set_difficulty(self, difficulty: str) -> None:
        self.criteria = self.criteria.with_filters(difficulty=difficulty)

    def toggle_favorites_only(self) -> None:
        self.criteria = self.criteria.with_filters(favorites_only=not self.criteria.favorites_only)

    def set_page(self, page: int) -> None:
        self.criteria = self.criteria.with_page(page)

    def reset_filters(self) -> None:
        self.criteria = self.criteria.with_filters(search="", category=ALL, difficulty=ALL, favorites_only=False)

    # -------------------------
    # View
    # -------------------------
    def view(self) -> QuestionPage:
        page = filter_pipeline.run(self.items, self.criteria)
        if page.page != self.criteria.page:
            self.criteria = self.criteria.with_page(page.page)
        return page

    def display_state(self) -> str:
        """loading / error (offer retry) / empty (offer reset) / ready."""
        if self.status != READY:
            return self.status
        return EMPTY if self.view().total_filtered == 0 else READY

    # -------------------------
    # Toggles
    # -------------------------
    def toggle_expanded(self, question_id: int) -> None:
        with self._lock:
            self.items = filter_pipeline.toggle(self.items, question_id, "expanded")

    def toggle_favorite(self, question_id: int) -> Optional[Future]:
        return self._toggle_persisted(question_id, "favorite")

    def toggle_completed(self, question_id: int) -> Optional[Future]:
        return self._toggle_persisted(question_id, "completed")

    def _toggle_persisted(self, question_id: int, field: str) -> Optional[Future]:
        with self._lock:
            self.items = filter_pipeline.toggle(self.items, question_id, field)
            item = next((i for i in self.items if i.id == question_id), None)
        if item is None:
            return None

        flags = {"is_favorite": item.favorite} if field == "favorite" else {"is_completed": item.completed}
        update = PreferenceUpdate(user_id=self.user_id, question_id=question_id, **flags)
        future = self._executor.submit(self.preferences.save, update)
        future.add_done_callback(self._log_save_failure)
        self._pending = [f for f in self._pending if not f.done()]
        self._pending.append(future)
        return future

    @staticmethod
    def _log_save_failure(future: Future) -> None:
        err = future.exception()
        if err is not None:
            logger.error("Saving preference failed: %s", err)

    def wait_for_saves(self, timeout: Optional[float] = None) -> None:
        """Block until queued preference writes finish; failures are already logged."""
        pending, self._pending = self._pending, []
        wait(pending, timeout=timeout)

    def close(self) -> None:
        self._executor.shutdown(wait=True)
