"""Application entry point defining the HTTP API."""
from __future__ import annotations

from typing import Any

from fastapi import (
    APIRouter,
    Body,
    FastAPI,
    HTTPException,
    Response,
    WebSocket,
    WebSocketDisconnect,
    status,
)
from fastapi.middleware.cors import CORSMiddleware

from timetable.application.manage_lesson_tables import LessonTableService
from timetable.application.manage_lessons import (
    CreateLessonUseCase,
    DeleteLessonUseCase,
    LessonNotFoundError,
    RetrieveLessonsUseCase,
    UpdateLessonUseCase,
)
from timetable.config.logging_config import configure_logging
from timetable.config.settings import get_settings
from timetable.domain.models.day_of_week import DayOfWeek
from timetable.domain.models.lesson import LessonTable, parse_lessons
from timetable.domain.repositories.lesson_repository import LessonRepository
from timetable.domain.repositories.lesson_table_repository import (
    LessonTableBackupRepository,
    LessonTableNotFoundError,
    LessonTableRepository,
)
from timetable.infrastructure.notifications.websocket_event_notifier import (
    WebSocketEventNotifier,
)
from timetable.infrastructure.repositories.json_lesson_repository import (
    JsonLessonRepository,
)
from timetable.infrastructure.repositories.json_lesson_table_repository import (
    JsonLessonTableBackupRepository,
    JsonLessonTableRepository,
)



def create_app(
    lesson_repo: LessonRepository | None = None,
    lesson_table_repo: LessonTableRepository | None = None,
    lesson_table_backup_repo: LessonTableBackupRepository | None = None,
    notifier: WebSocketEventNotifier | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance."""

    settings = get_settings()
    configure_logging(settings.log_level)

    lesson_repository = lesson_repo or JsonLessonRepository(settings.lessons_path)
    lesson_table_repository = (
        lesson_table_repo
        if lesson_table_repo is not None
        else JsonLessonTableRepository(settings.lesson_tables_directory)
    )
    lesson_table_backup_repository = (
        lesson_table_backup_repo
        if lesson_table_backup_repo is not None
        else JsonLessonTableBackupRepository(settings.lesson_tables_backup_directory)
    )
    event_notifier = notifier if notifier is not None else WebSocketEventNotifier()

    lessons_retriever = RetrieveLessonsUseCase(lesson_repository)
    lesson_creator = CreateLessonUseCase(lesson_repository)
    lesson_updater = UpdateLessonUseCase(lesson_repository)
    lesson_deleter = DeleteLessonUseCase(lesson_repository)
    lesson_table_service = LessonTableService(
        lesson_table_repository,
        lesson_table_backup_repository,
        event_notifier,
    )

    app = FastAPI(title="Timetable API", version=settings.app_version)

    @app.get("/", status_code=status.HTTP_200_OK)
    async def get_root() -> dict[str, str]:
        """Return a simple heartbeat response for uptime monitoring."""

        return {"message": "RUNNING TIMETABLE BACK"}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_router = APIRouter(prefix=settings.api_prefix)

    @api_router.get("/status", status_code=status.HTTP_200_OK)
    async def get_status() -> dict:
        """Return the operational status and version of the service."""

        return {"status": "ok", "version": settings.app_version}

    @api_router.get("/lessons", status_code=status.HTTP_200_OK)
    async def get_lessons() -> list[dict]:
        """Retrieve every stored lesson."""

        return [lesson.to_dict() for lesson in lessons_retriever.execute()]

    @api_router.post("/lessons", status_code=status.HTTP_201_CREATED)
    async def create_lesson(
        response: Response, payload: dict[str, Any] = Body(...)
    ) -> dict:
        """Create a lesson from the provided payload."""

        try:
            lesson = lesson_creator.execute(payload)
        except ValueError as error:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(error),
            ) from error

        response.headers["Location"] = f"{settings.api_prefix}/lessons/{lesson.id}"
        return lesson.to_dict()

    @api_router.put("/lessons/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def update_lesson(
        lesson_id: str, payload: dict[str, Any] = Body(...)
    ) -> Response:
        """Replace the data of the lesson identified by ``lesson_id``."""

        try:
            lesson_updater.execute(lesson_id, payload)
        except ValueError as error:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(error),
            ) from error
        except LessonNotFoundError as error:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(error),
            ) from error
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @api_router.delete("/lessons/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_lesson(lesson_id: str) -> Response:
        """Delete the lesson identified by ``lesson_id`` when it exists."""

        if not lesson_deleter.execute(lesson_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="No lesson found for the requested id.",
            )
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @api_router.get("/lesson-tables/{day}", status_code=status.HTTP_200_OK)
    async def get_lesson_table(day: str) -> dict:
        """Retrieve the lesson table stored for ``day``."""

        day_of_week = _parse_day(day)
        try:
            lesson_table = await lesson_table_service.get_lesson_table_by_day_of_week(
                day_of_week
            )
        except LessonTableNotFoundError as error:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(error),
            ) from error
        return lesson_table.to_dict()

    @api_router.put("/lesson-tables/{day}", status_code=status.HTTP_200_OK)
    async def update_lesson_table(
        day: str, payload: dict[str, Any] = Body(...)
    ) -> dict:
        """Replace the lesson table for ``day`` and notify connected clients."""

        day_of_week = _parse_day(day)
        try:
            lesson_table = _build_lesson_table(day_of_week, payload)
        except ValueError as error:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(error),
            ) from error

        await lesson_table_service.update_lesson_table(lesson_table)
        return lesson_table.to_dict()

    @api_router.post(
        "/lesson-tables/{day}/backup", status_code=status.HTTP_204_NO_CONTENT
    )
    async def backup_lesson_table(day: str) -> Response:
        """Snapshot the current lesson table for ``day``."""

        day_of_week = _parse_day(day)
        try:
            await lesson_table_service.make_lesson_table_backup(day_of_week)
        except LessonTableNotFoundError as error:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(error),
            ) from error
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @api_router.post("/lesson-tables/{day}/restore", status_code=status.HTTP_200_OK)
    async def restore_lesson_table(day: str) -> dict:
        """Restore the lesson table for ``day`` from its snapshot."""

        day_of_week = _parse_day(day)
        restored = await lesson_table_service.restore_lesson_table_from_backup(
            day_of_week
        )
        if restored is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No backup available for {day_of_week.value}.",
            )
        return restored.to_dict()

    @api_router.websocket("/events")
    async def lesson_table_events(websocket: WebSocket) -> None:
        """Keep a client subscribed to lesson table update signals."""

        await event_notifier.connect(websocket)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            pass
        finally:
            event_notifier.disconnect(websocket)

    app.include_router(api_router)
    return app


def _parse_day(raw_day: str) -> DayOfWeek:
    """Return the weekday named by ``raw_day`` converting errors to HTTP ``400``."""

    try:
        return DayOfWeek.parse(raw_day)
    except ValueError as error:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(error),
        ) from error


def _build_lesson_table(day_of_week: DayOfWeek, payload: dict[str, Any]) -> LessonTable:
    """Return the table described by ``payload`` for ``day_of_week``."""

    raw_day = payload.get("dayOfWeek")
    if raw_day is not None and DayOfWeek.parse(raw_day) is not day_of_week:
        raise ValueError("The payload day of week does not match the requested day.")
    return LessonTable(day_of_week=day_of_week, lessons=parse_lessons(payload.get("lessons")))


app = create_app()
