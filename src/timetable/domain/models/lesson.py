"""Domain models describing lessons and per-day lesson tables."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping

from timetable.domain.models.day_of_week import DayOfWeek

MAX_LESSON_NAME_LENGTH = 40


def validate_lesson_name(raw_name: Any) -> str:
    """Return the trimmed lesson name or raise ``ValueError`` when invalid."""

    if not isinstance(raw_name, str):
        raise ValueError("Lesson name must be a string.")
    name = raw_name.strip()
    if not name:
        raise ValueError("Lesson name must not be empty.")
    if len(name) > MAX_LESSON_NAME_LENGTH:
        raise ValueError(
            f"Lesson name must be at most {MAX_LESSON_NAME_LENGTH} characters long."
        )
    return name


@dataclass(frozen=True)
class Lesson:
    """A single lesson that can be scheduled in a lesson table."""

    id: str
    name: str

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation of the lesson."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Lesson:
        """Create a lesson from its serialized representation."""

        if not isinstance(data, Mapping):
            raise ValueError("Lesson data must be a mapping.")

        raw_id = data.get("id")
        if raw_id is None or not str(raw_id).strip():
            raise ValueError("Lesson id is required.")

        return cls(id=str(raw_id).strip(), name=validate_lesson_name(data.get("name")))


@dataclass(frozen=True)
class LessonTable:
    """The ordered lessons scheduled for one day of the week."""

    day_of_week: DayOfWeek
    lessons: List[Lesson] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation of the table."""
        return {
            "dayOfWeek": self.day_of_week.value,
            "lessons": [lesson.to_dict() for lesson in self.lessons],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LessonTable:
        """Create a lesson table from its serialized representation."""

        if not isinstance(data, Mapping):
            raise ValueError("Lesson table data must be a mapping.")

        day_of_week = DayOfWeek.parse(data.get("dayOfWeek"))
        return cls(day_of_week=day_of_week, lessons=parse_lessons(data.get("lessons")))


def parse_lessons(raw_lessons: Any) -> list[Lesson]:
    """Return the lessons described by ``raw_lessons`` preserving their order."""

    if raw_lessons is None:
        return []
    if not isinstance(raw_lessons, Iterable) or isinstance(
        raw_lessons, (str, bytes, Mapping)
    ):
        raise ValueError("Lessons must be provided as a list of objects.")

    lessons: list[Lesson] = []
    for entry in raw_lessons:
        if not isinstance(entry, Mapping):
            raise ValueError("Each lesson must be represented as an object.")
        lessons.append(Lesson.from_dict(entry))
    return lessons
