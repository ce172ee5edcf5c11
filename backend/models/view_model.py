# models/view_model.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from models.question_model import QuestionModel

PAGE_SIZE = 5
ALL = "all"


class AnnotatedQuestion(QuestionModel):
    """
    A catalog question joined with the active user's preference flags and the
    client-side expanded state. Built per fetch, never stored.
    """
    favorite: bool = False
    completed: bool = False
    expanded: bool = False


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search: str = ""
    category: str = ALL
    difficulty: str = ALL
    favorites_only: bool = Field(False, alias="favoritesOnly")
    page: int = 1
    page_size: int = Field(PAGE_SIZE, alias="pageSize", ge=1)

    def with_filters(self, **changes) -> "FilterCriteria":
        """Copy with filter fields changed; any filter change sends the view back to page 1."""
        changes.setdefault("page", 1)
        return self.model_copy(update=changes)

    def with_page(self, page: int) -> "FilterCriteria":
        return self.model_copy(update={"page": page})


class QuestionPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[AnnotatedQuestion] = Field(default_factory=list)
    total_filtered: int = Field(0, alias="totalFiltered")
    total_pages: int = Field(1, alias="totalPages")
    page: int = 1
    page_size: int = Field(PAGE_SIZE, alias="pageSize")

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
