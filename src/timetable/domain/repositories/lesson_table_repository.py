"""Repository contracts for the primary and backup lesson table partitions."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from timetable.domain.models.day_of_week import DayOfWeek
from timetable.domain.models.lesson import LessonTable


class LessonTableNotFoundError(Exception):
    """Signal that no lesson table is stored for the requested day."""

    def __init__(self, day_of_week: DayOfWeek) -> None:
        super().__init__(f"No lesson table stored for {day_of_week.value}.")
        self.day_of_week = day_of_week


class LessonTableAlreadyExistsError(Exception):
    """Signal that a lesson table already exists for the given day."""

    def __init__(self, day_of_week: DayOfWeek) -> None:
        super().__init__(f"A lesson table already exists for {day_of_week.value}.")
        self.day_of_week = day_of_week


class LessonTableRepository(ABC):
    """Persist the current lesson table of every weekday."""

    @abstractmethod
    def get_by_day_of_week(self, day_of_week: DayOfWeek) -> LessonTable:
        """Return the table for ``day_of_week`` or raise ``LessonTableNotFoundError``."""

    @abstractmethod
    def create(self, lesson_table: LessonTable) -> None:
        """Store a new table, raising ``LessonTableAlreadyExistsError`` on conflict."""

    @abstractmethod
    def update(self, lesson_table: LessonTable) -> None:
        """Replace the stored table for its day, creating it on first write."""


class LessonTableBackupRepository(ABC):
    """Persist one snapshot per weekday, separate from the primary tables."""

    @abstractmethod
    def get_by_day_of_week(self, day_of_week: DayOfWeek) -> Optional[LessonTable]:
        """Return the snapshot for ``day_of_week`` or ``None`` when absent."""

    @abstractmethod
    def create(self, lesson_table: LessonTable) -> None:
        """Store ``lesson_table`` as the snapshot for its day, replacing any previous one."""
