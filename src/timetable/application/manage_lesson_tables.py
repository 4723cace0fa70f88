"""Use cases for reading, updating, backing up and restoring lesson tables."""
from __future__ import annotations

import logging
from typing import Protocol

from timetable.domain.models.day_of_week import DayOfWeek
from timetable.domain.models.lesson import LessonTable
from timetable.domain.repositories.lesson_table_repository import (
    LessonTableBackupRepository,
    LessonTableRepository,
)

logger = logging.getLogger(__name__)


class EventNotifier(Protocol):
    """Represent a channel that pushes change signals to connected clients."""

    async def notify_all_clients_about_update(self) -> None:
        """Tell every connected client that schedule data changed."""


class LessonTableService:
    """Coordinate lesson table persistence, snapshots and client notifications.

    Every change made to the primary tables through this service is followed
    by exactly one broadcast. Reads and backups never notify.
    """

    def __init__(
        self,
        repository: LessonTableRepository,
        backup_repository: LessonTableBackupRepository,
        notifier: EventNotifier,
    ) -> None:
        """Initialize the service with its collaborators."""

        self._repository = repository
        self._backup_repository = backup_repository
        self._notifier = notifier

    async def get_lesson_table_by_day_of_week(self, day_of_week: DayOfWeek) -> LessonTable:
        """Return the table currently stored for ``day_of_week``."""

        return self._repository.get_by_day_of_week(day_of_week)

    async def update_lesson_table(self, lesson_table: LessonTable) -> None:
        """Persist ``lesson_table`` and then broadcast the update."""

        self._repository.update(lesson_table)
        logger.info("Lesson table for %s updated", lesson_table.day_of_week.value)
        await self._notifier.notify_all_clients_about_update()

    async def make_lesson_table_backup(self, day_of_week: DayOfWeek) -> None:
        """Copy the current table for ``day_of_week`` into the backup partition."""

        lesson_table = self._repository.get_by_day_of_week(day_of_week)
        self._backup_repository.create(lesson_table)
        logger.info("Backup created for lesson table %s", day_of_week.value)

    async def restore_lesson_table_from_backup(
        self, day_of_week: DayOfWeek
    ) -> LessonTable | None:
        """Overwrite the table for ``day_of_week`` with its snapshot.

        Returns ``None`` without touching the primary table when no snapshot
        exists for the day.
        """

        backup = self._backup_repository.get_by_day_of_week(day_of_week)
        if backup is None:
            logger.info("No backup available for lesson table %s", day_of_week.value)
            return None

        await self.update_lesson_table(backup)
        return backup
