# services/filter_pipeline.py
"""
Turns a catalog snapshot, the active user's preferences and the current
FilterCriteria into one page of AnnotatedQuestions.

Every function here is pure and total: any input produces a result, and an
empty page is a normal outcome. Catalog order is preserved throughout so page
boundaries stay put between identical calls.
"""

import math
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from models.preference_model import PreferenceModel
from models.question_model import QuestionModel, normalize_difficulty
from models.view_model import ALL, AnnotatedQuestion, FilterCriteria, QuestionPage

TOGGLE_FIELDS = ("favorite", "completed", "expanded")


# -------------------------
# Merge
# -------------------------
def annotate(
    questions: Iterable[QuestionModel],
    preferences: Optional[Mapping[int, PreferenceModel]] = None,
    expanded: Optional[Mapping[int, bool]] = None,
) -> List[AnnotatedQuestion]:
    preferences = preferences or {}
    expanded = expanded or {}
    out = []
    for q in questions:
        pref = preferences.get(q.id)
        out.append(AnnotatedQuestion(
            **q.model_dump(),
            favorite=bool(pref and pref.is_favorite),
            completed=bool(pref and pref.is_completed),
            expanded=bool(expanded.get(q.id, False)),
        ))
    return out


# -------------------------
# Predicates
# -------------------------
def matches_search(item: AnnotatedQuestion, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in item.question.lower() or needle in item.answer.lower()


def matches_category(item: AnnotatedQuestion, category: str) -> bool:
    return category == ALL or item.category == category


def matches_difficulty(item: AnnotatedQuestion, difficulty: str) -> bool:
    if difficulty == ALL:
        return True
    # an unrecognised selector matches nothing
    level = normalize_difficulty(difficulty)
    return level is not None and item.difficulty == level


def matches_favorites(item: AnnotatedQuestion, favorites_only: bool) -> bool:
    return not favorites_only or item.favorite


def filter_questions(items: Sequence[AnnotatedQuestion], criteria: FilterCriteria) -> List[AnnotatedQuestion]:
    return [
        item for item in items
        if matches_search(item, criteria.search)
        and matches_category(item, criteria.category)
        and matches_difficulty(item, criteria.difficulty)
        and matches_favorites(item, criteria.favorites_only)
    ]


# -------------------------
# Pagination
# -------------------------
def total_pages(total: int, page_size: int) -> int:
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), pages)


def paginate(items: Sequence[AnnotatedQuestion], page: int, page_size: int) -> QuestionPage:
    pages = total_pages(len(items), page_size)
    page = clamp_page(page, pages)
    start = (page - 1) * page_size
    return QuestionPage(
        items=list(items[start:start + page_size]),
        total_filtered=len(items),
        total_pages=pages,
        page=page,
        page_size=page_size,
    )


def build_page(
    questions: Iterable[QuestionModel],
    preferences: Optional[Mapping[int, PreferenceModel]],
    criteria: FilterCriteria,
    expanded: Optional[Mapping[int, bool]] = None,
) -> QuestionPage:
    """Merge, filter and paginate in one go."""
    annotated = annotate(questions, preferences, expanded)
    return run(annotated, criteria)


def run(annotated: Sequence[AnnotatedQuestion], criteria: FilterCriteria) -> QuestionPage:
    """Filter and paginate an already annotated list."""
    return paginate(filter_questions(annotated, criteria), criteria.page, criteria.page_size)


# -------------------------
# Toggles
# -------------------------
def toggle(items: Sequence[AnnotatedQuestion], question_id: int, field: str) -> List[AnnotatedQuestion]:
    """
    Return a new list with `field` flipped on the item whose id is question_id.
    Unknown ids leave the list as it was.
    """
    if field not in TOGGLE_FIELDS:
        raise ValueError(f"cannot toggle {field!r}")
    return [
        item.model_copy(update={field: not getattr(item, field)}) if item.id == question_id else item
        for item in items
    ]


def expanded_state(items: Iterable[AnnotatedQuestion]) -> Dict[int, bool]:
    return {item.id: item.expanded for item in items if item.expanded}
