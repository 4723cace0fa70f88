"""Repository storing the lesson collection as a single JSON document."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from timetable.domain.models.lesson import Lesson, parse_lessons
from timetable.domain.repositories.lesson_repository import LessonRepository
from timetable.infrastructure.repositories.json_documents import (
    read_document,
    write_document,
)


class JsonLessonRepository(LessonRepository):
    """Persist lessons as a JSON list on disk."""

    def __init__(self, file_path: Path) -> None:
        """Initialize the repository with the path where data will be stored."""

        self._file_path = file_path
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

    def get_all(self) -> List[Lesson]:
        """Load every stored lesson, returning an empty list when none exist."""

        data = read_document(self._file_path)
        if data is None:
            return []
        return parse_lessons(data.get("lessons") if isinstance(data, dict) else data)

    def get(self, lesson_id: str) -> Optional[Lesson]:
        """Return the lesson identified by ``lesson_id`` if present."""

        for lesson in self.get_all():
            if lesson.id == lesson_id:
                return lesson
        return None

    def save(self, lesson: Lesson) -> None:
        """Insert or replace ``lesson`` keeping the original position on replace."""

        lessons = self.get_all()
        for index, stored in enumerate(lessons):
            if stored.id == lesson.id:
                lessons[index] = lesson
                break
        else:
            lessons.append(lesson)
        self._write(lessons)

    def delete(self, lesson_id: str) -> bool:
        """Remove the lesson identified by ``lesson_id`` when present."""

        lessons = self.get_all()
        remaining = [lesson for lesson in lessons if lesson.id != lesson_id]
        if len(remaining) == len(lessons):
            return False
        self._write(remaining)
        return True

    def _write(self, lessons: List[Lesson]) -> None:
        write_document(
            self._file_path, {"lessons": [lesson.to_dict() for lesson in lessons]}
        )
