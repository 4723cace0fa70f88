"""Repositories storing lesson tables as one JSON document per weekday."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from timetable.domain.models.day_of_week import DayOfWeek
from timetable.domain.models.lesson import LessonTable
from timetable.domain.repositories.lesson_table_repository import (
    LessonTableAlreadyExistsError,
    LessonTableBackupRepository,
    LessonTableNotFoundError,
    LessonTableRepository,
)
from timetable.infrastructure.repositories.json_documents import (
    read_document,
    write_document,
)


class _JsonLessonTableStore:
    """Read and write lesson table documents inside a partition directory."""

    def __init__(self, directory_path: Path) -> None:
        """Initialize the store with the directory where documents live."""

        self._directory_path = directory_path
        self._directory_path.mkdir(parents=True, exist_ok=True)

    def load(self, day_of_week: DayOfWeek) -> Optional[LessonTable]:
        """Return the stored table for ``day_of_week`` or ``None``."""

        data = read_document(self._build_file_path(day_of_week))
        if data is None:
            return None
        return LessonTable.from_dict(data)

    def exists(self, day_of_week: DayOfWeek) -> bool:
        """Return ``True`` when a document is stored for ``day_of_week``."""

        return self._build_file_path(day_of_week).exists()

    def save(self, lesson_table: LessonTable) -> None:
        """Write ``lesson_table`` replacing the document for its day."""

        write_document(
            self._build_file_path(lesson_table.day_of_week), lesson_table.to_dict()
        )

    def _build_file_path(self, day_of_week: DayOfWeek) -> Path:
        """Return the path where the table for ``day_of_week`` is stored."""

        return self._directory_path / f"lesson_table_{day_of_week.value}.json"


class JsonLessonTableRepository(LessonTableRepository):
    """Persist the primary lesson tables inside a directory of JSON files."""

    def __init__(self, directory_path: Path) -> None:
        self._store = _JsonLessonTableStore(directory_path)

    def get_by_day_of_week(self, day_of_week: DayOfWeek) -> LessonTable:
        lesson_table = self._store.load(day_of_week)
        if lesson_table is None:
            raise LessonTableNotFoundError(day_of_week)
        return lesson_table

    def create(self, lesson_table: LessonTable) -> None:
        if self._store.exists(lesson_table.day_of_week):
            raise LessonTableAlreadyExistsError(lesson_table.day_of_week)
        self._store.save(lesson_table)

    def update(self, lesson_table: LessonTable) -> None:
        self._store.save(lesson_table)


class JsonLessonTableBackupRepository(LessonTableBackupRepository):
    """Persist one lesson table snapshot per weekday inside a directory of JSON files."""

    def __init__(self, directory_path: Path) -> None:
        self._store = _JsonLessonTableStore(directory_path)

    def get_by_day_of_week(self, day_of_week: DayOfWeek) -> Optional[LessonTable]:
        return self._store.load(day_of_week)

    def create(self, lesson_table: LessonTable) -> None:
        self._store.save(lesson_table)
