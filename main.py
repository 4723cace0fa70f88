"""Command-line and ASGI entry point for the Timetable API."""
from __future__ import annotations

import sys
from pathlib import Path

import uvicorn


def _add_src_to_path() -> None:
    """Ensure the ``src`` directory is available on ``sys.path``."""

    src_dir_str = str(Path(__file__).resolve().parent / "src")
    if src_dir_str not in sys.path:
        sys.path.insert(0, src_dir_str)


_add_src_to_path()

from timetable.config.settings import get_settings  # noqa: E402  (requires sys.path update)
from timetable.main import app  # noqa: E402  (requires sys.path update)

__all__ = ["app", "main"]


def main() -> None:
    """Run the API server using Uvicorn."""

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
