"""
Task Planner - Main Application Entry Point

Personal task scheduler: tasks with optional yearly / every-N-days recurrence.
"""

import os
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskplanner.core.config import get_settings
from taskplanner.core.exceptions import (
    AuthenticationError,
    DateFormatError,
    DateRangeError,
    InvariantViolationError,
    NotFoundError,
    RuleError,
    SchedulerError,
    ValidationError,
)
from taskplanner.core.logger import configure_logging, setup_logger

logger = setup_logger(__name__)

VERSION = "0.1.0"

_ERROR_STATUS = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DateFormatError, status.HTTP_400_BAD_REQUEST),
    (DateRangeError, status.HTTP_400_BAD_REQUEST),
    (RuleError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (InvariantViolationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting Task Planner on port %s...", settings.TODO_PORT)

    from taskplanner.infrastructure.local.database import get_app_engine, init_db

    await init_db()

    yield

    logger.info("Shutting down Task Planner...")
    await get_app_engine().dispose()


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions to ``{"error": ...}`` responses."""

    @app.exception_handler(SchedulerError)
    async def scheduler_error_handler(request: Request, exc: SchedulerError):
        for error_type, status_code in _ERROR_STATUS:
            if isinstance(exc, error_type):
                break
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        if status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error_response(status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "invalid request") if errors else "invalid request"
        return _error_response(status.HTTP_400_BAD_REQUEST, f"invalid request: {message}")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Task Planner",
        description="Personal task scheduler with recurring tasks",
        version=VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    register_exception_handlers(app)

    # Include routers
    from taskplanner.api import auth, nextdate, tasks
    from taskplanner.api.deps import require_auth

    app.include_router(nextdate.router, prefix="/api", tags=["nextdate"])
    app.include_router(auth.router, prefix="/api", tags=["auth"])
    app.include_router(
        tasks.router,
        prefix="/api",
        tags=["tasks"],
        dependencies=[Depends(require_auth)],
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "auth": settings.auth_enabled,
            "version": VERSION,
        }

    # Web client
    web_dir = settings.TODO_WEB_DIR
    if not os.path.isabs(web_dir):
        web_dir = os.path.join(os.getcwd(), web_dir)

    if os.path.isdir(web_dir):
        app.mount("/", StaticFiles(directory=web_dir, html=True), name="web")
    else:
        logger.warning("Web directory %s not found; serving API only", web_dir)

    return app


def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        "taskplanner.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.TODO_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
