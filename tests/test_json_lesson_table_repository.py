"""Tests for the JSON-backed lesson table repositories."""
from __future__ import annotations

from pathlib import Path

import pytest

from timetable.domain.models.day_of_week import DayOfWeek
from timetable.domain.models.lesson import Lesson, LessonTable
from timetable.domain.repositories.lesson_table_repository import (
    LessonTableAlreadyExistsError,
    LessonTableNotFoundError,
)
from timetable.infrastructure.repositories.json_lesson_table_repository import (
    JsonLessonTableBackupRepository,
    JsonLessonTableRepository,
)


def _table(day: DayOfWeek, *names: str) -> LessonTable:
    return LessonTable(
        day_of_week=day,
        lessons=[Lesson(id=f"{index:024x}", name=name) for index, name in enumerate(names)],
    )


def test_update_creates_and_replaces_tables(tmp_path: Path) -> None:
    """The first update creates the document and later ones replace it."""

    repository = JsonLessonTableRepository(tmp_path)

    repository.update(_table(DayOfWeek.MONDAY, "Maths", "Physics"))
    assert repository.get_by_day_of_week(DayOfWeek.MONDAY) == _table(
        DayOfWeek.MONDAY, "Maths", "Physics"
    )

    repository.update(_table(DayOfWeek.MONDAY))
    assert repository.get_by_day_of_week(DayOfWeek.MONDAY).lessons == []
    assert (tmp_path / "lesson_table_monday.json").exists()


def test_get_missing_table_raises(tmp_path: Path) -> None:
    """Reading a day without a document should raise ``LessonTableNotFoundError``."""

    repository = JsonLessonTableRepository(tmp_path)

    with pytest.raises(LessonTableNotFoundError) as excinfo:
        repository.get_by_day_of_week(DayOfWeek.SATURDAY)

    assert excinfo.value.day_of_week is DayOfWeek.SATURDAY


def test_create_refuses_existing_table(tmp_path: Path) -> None:
    """Creating a table twice for the same day should fail."""

    repository = JsonLessonTableRepository(tmp_path)
    repository.create(_table(DayOfWeek.TUESDAY, "Art"))

    with pytest.raises(LessonTableAlreadyExistsError):
        repository.create(_table(DayOfWeek.TUESDAY, "Music"))

    assert repository.get_by_day_of_week(DayOfWeek.TUESDAY) == _table(
        DayOfWeek.TUESDAY, "Art"
    )


def test_backup_repository_overwrites_previous_snapshot(tmp_path: Path) -> None:
    """A new backup for a day replaces the previous snapshot."""

    repository = JsonLessonTableBackupRepository(tmp_path)
    assert repository.get_by_day_of_week(DayOfWeek.FRIDAY) is None

    repository.create(_table(DayOfWeek.FRIDAY, "Chemistry"))
    repository.create(_table(DayOfWeek.FRIDAY, "Geography", "English"))

    assert repository.get_by_day_of_week(DayOfWeek.FRIDAY) == _table(
        DayOfWeek.FRIDAY, "Geography", "English"
    )


def test_partitions_are_independent(tmp_path: Path) -> None:
    """Primary and backup documents live in separate directories."""

    primary = JsonLessonTableRepository(tmp_path / "primary")
    backup = JsonLessonTableBackupRepository(tmp_path / "backup")

    primary.update(_table(DayOfWeek.MONDAY, "Maths"))

    assert backup.get_by_day_of_week(DayOfWeek.MONDAY) is None
    assert not list((tmp_path / "primary").glob("*.tmp"))
