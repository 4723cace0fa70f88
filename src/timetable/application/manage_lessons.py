"""Use cases for creating, retrieving, updating and deleting lessons."""
from __future__ import annotations

import logging
import secrets
from typing import Any, Callable, Mapping

from timetable.domain.models.lesson import Lesson, validate_lesson_name
from timetable.domain.repositories.lesson_repository import LessonRepository

logger = logging.getLogger(__name__)


def generate_lesson_id() -> str:
    """Return a new 24 character hexadecimal lesson identifier."""

    return secrets.token_hex(12)


def _read_name(payload: Mapping[str, Any]) -> str:
    if not isinstance(payload, Mapping):
        raise ValueError("Lesson payload must be an object.")
    return validate_lesson_name(payload.get("name"))


class LessonNotFoundError(Exception):
    """Signal that the requested lesson does not exist."""


class RetrieveLessonsUseCase:
    """Retrieve every stored lesson."""

    def __init__(self, repository: LessonRepository) -> None:
        self._repository = repository

    def execute(self) -> list[Lesson]:
        """Return all lessons in insertion order."""
        return list(self._repository.get_all())


class CreateLessonUseCase:
    """Validate and persist a new lesson."""

    def __init__(
        self,
        repository: LessonRepository,
        id_factory: Callable[[], str] = generate_lesson_id,
    ) -> None:
        """Initialize the use case with the repository and id generator."""

        self._repository = repository
        self._id_factory = id_factory

    def execute(self, payload: Mapping[str, Any]) -> Lesson:
        """Create the lesson described by ``payload`` and return it."""

        lesson = Lesson(id=self._id_factory(), name=_read_name(payload))
        self._repository.save(lesson)
        logger.info("Lesson %s created", lesson.id)
        return lesson


class UpdateLessonUseCase:
    """Replace the name of an existing lesson."""

    def __init__(self, repository: LessonRepository) -> None:
        self._repository = repository

    def execute(self, lesson_id: str, payload: Mapping[str, Any]) -> Lesson:
        """Apply ``payload`` to the lesson identified by ``lesson_id``.

        The payload is validated before the lesson is looked up, so an invalid
        payload is reported even for unknown identifiers.
        """

        name = _read_name(payload)
        if self._repository.get(lesson_id) is None:
            raise LessonNotFoundError(f"No lesson found with id {lesson_id!r}.")

        updated = Lesson(id=lesson_id, name=name)
        self._repository.save(updated)
        logger.info("Lesson %s updated", lesson_id)
        return updated


class DeleteLessonUseCase:
    """Delete a stored lesson."""

    def __init__(self, repository: LessonRepository) -> None:
        self._repository = repository

    def execute(self, lesson_id: str) -> bool:
        """Return ``True`` when the lesson existed and was removed."""

        deleted = self._repository.delete(lesson_id)
        if deleted:
            logger.info("Lesson %s deleted", lesson_id)
        return deleted
