"""Application configuration helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class Settings:
    """Holds configuration values for the application."""

    data_dir: Path = Path("data")
    lessons_filename: str = "lessons.json"
    lesson_tables_directory_name: str = "lesson_tables"
    lesson_tables_backup_directory_name: str = "lesson_tables_backup"
    app_version: str = "0.1.0"
    api_version: str = "v1"
    allowed_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8765

    @property
    def lessons_path(self) -> Path:
        """Return the full path for storing the lesson collection."""

        return self.data_dir / self.lessons_filename

    @property
    def lesson_tables_directory(self) -> Path:
        """Return the directory where the current lesson tables are stored."""

        return self.data_dir / self.lesson_tables_directory_name

    @property
    def lesson_tables_backup_directory(self) -> Path:
        """Return the directory where lesson table snapshots are stored."""

        return self.data_dir / self.lesson_tables_backup_directory_name

    @property
    def api_prefix(self) -> str:
        """Return the URL prefix used for versioned API routes."""

        return f"/api/{self.api_version}"


def get_settings() -> Settings:
    """Provide application settings, adapting storage for Azure deployments."""

    settings = Settings()
    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        settings = replace(settings, log_level=log_level)

    port = os.getenv("PORT")
    if port:
        settings = replace(settings, port=int(port))

    data_dir = os.getenv("TIMETABLE_DATA_DIR")
    if data_dir:
        return replace(settings, data_dir=Path(data_dir).expanduser())

    if os.getenv("WEBSITE_INSTANCE_ID"):
        persistent_dir = Path(
            os.getenv("APP_DATA_DIR", "/home/site/data")
        ).expanduser()
        return replace(settings, data_dir=persistent_dir)

    return settings
