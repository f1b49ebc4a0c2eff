"""
Shared fixtures: in-memory SQLite repository and an HTTP client bound to the
FastAPI app with its dependencies pointed at that repository.
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from taskplanner.api.deps import get_task_repository, get_task_service
from taskplanner.core.config import Settings, get_settings
from taskplanner.infrastructure.local.database import Base
from taskplanner.infrastructure.local.task_repository import SqliteTaskRepository
from taskplanner.main import create_app
from taskplanner.services.task_service import TaskService

FIXED_TODAY = date(2024, 2, 1)


@pytest.fixture
async def session_factory():
    """Session factory over a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def task_repo(session_factory):
    """SQLite task repository over the in-memory database."""
    return SqliteTaskRepository(session_factory=session_factory)


@pytest.fixture
def today() -> date:
    """Date the service treats as today."""
    return FIXED_TODAY


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings with auth disabled and no web directory."""
    return Settings(
        TODO_WEB_DIR=str(tmp_path / "no-web"),
        DATABASE_URL="sqlite+aiosqlite:///:memory:",
        TODO_PASSWORD="",
        TODO_MULTI_DAY_RULES=False,
    )


@pytest.fixture
def app(settings, task_repo, today):
    """Application wired to the in-memory repository and a fixed today."""
    application = create_app()

    def _service() -> TaskService:
        return TaskService(
            task_repo=task_repo,
            today=lambda: today,
            allow_multi_day=settings.TODO_MULTI_DAY_RULES,
            list_limit=settings.TODO_TASKS_LIMIT,
        )

    application.dependency_overrides[get_settings] = lambda: settings
    application.dependency_overrides[get_task_repository] = lambda: task_repo
    application.dependency_overrides[get_task_service] = _service
    return application


@pytest.fixture
async def client(app):
    """HTTP client for the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client
