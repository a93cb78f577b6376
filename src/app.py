"""Main FastAPI application module.

This module builds the FastAPI application: logging, CORS, the database,
error handlers and all route handlers.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.database import Database
from core.exceptions import BackofficeError
from core.logging_config import setup_logging
from config import (
    CORS_ALLOWED_ORIGINS,
    API_HOST,
    API_PORT,
)
from api.routes import auth, admin_users, students, teachers, subjects, levels
from api.routes import subscriptions, settings, reports

logger = logging.getLogger(__name__)

API_TITLE = "Tutoring Center Back-Office API"
API_VERSION = "1.0.0"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """Map every failure to ``{"error": message}``."""

    @app.exception_handler(BackofficeError)
    async def backoffice_error_handler(request: Request, exc: BackofficeError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(400, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Internal server error")


def create_app(database_url: Optional[str] = None) -> FastAPI:
    """Build the application.

    Args:
        database_url: SQLAlchemy URL overriding ``DATABASE_URL``.

    Returns:
        Configured FastAPI instance.
    """
    setup_logging()

    database = Database(database_url)
    database.init_db()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        database.dispose()

    app = FastAPI(
        title=API_TITLE,
        description="Back-office API for tutoring centers: accounts, students, "
        "teachers, subjects, levels, subscriptions, settings and reports.",
        version=API_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.database = database

    register_exception_handlers(app)

    # Register route handlers
    app.include_router(auth.router)
    app.include_router(admin_users.router)
    app.include_router(students.router)
    app.include_router(teachers.router)
    app.include_router(subjects.router)
    app.include_router(levels.router)
    app.include_router(subscriptions.router)
    app.include_router(settings.router)
    app.include_router(reports.router)

    @app.get("/", summary="API root", tags=["Info"])
    def root() -> dict:
        """API root, returns API information and documentation links."""
        return {
            "name": API_TITLE,
            "version": API_VERSION,
            "docs": {
                "swagger": "/docs",
                "redoc": "/redoc",
            },
            "health": "/api/health",
        }

    @app.get("/api/health", summary="Health check", tags=["Health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


# --- Startup code for direct execution ---
if __name__ == "__main__":
    import uvicorn

    server_url = f"http://{API_HOST}:{API_PORT}"
    logger.info("API docs: %s/docs", server_url)
    uvicorn.run("app:app", host=API_HOST, port=API_PORT, reload=True)
