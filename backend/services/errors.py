# services/errors.py
"""
Failures that can cross the catalog / preference boundary.
An empty result is never one of these.
"""


class StorageError(Exception):
    """Base class for storage-boundary failures."""


class QuestionNotFound(StorageError):
    def __init__(self, question_id: int):
        super().__init__(f"Question {question_id} not found")
        self.question_id = question_id


class InvalidPreference(StorageError):
    """Malformed preference upsert input."""


class BackendUnavailable(StorageError):
    """The underlying store could not be reached."""
