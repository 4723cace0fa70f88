"""Abstract repository contract for lessons."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from timetable.domain.models.lesson import Lesson


class LessonRepository(ABC):
    """Define persistence operations available for lesson entities."""

    @abstractmethod
    def get_all(self) -> List[Lesson]:
        """Return every stored lesson in insertion order."""

    @abstractmethod
    def get(self, lesson_id: str) -> Optional[Lesson]:
        """Return the lesson identified by ``lesson_id`` if present."""

    @abstractmethod
    def save(self, lesson: Lesson) -> None:
        """Insert ``lesson`` or replace the stored lesson with the same id."""

    @abstractmethod
    def delete(self, lesson_id: str) -> bool:
        """Remove the lesson identified by ``lesson_id`` returning ``True`` when deleted."""
