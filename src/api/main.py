"""
FastAPI app assembly: settings, database wiring, error mapping and router.

Run with e.g. `uvicorn --factory src.api.main:create_app`.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.models import ErrorResponse
from src.api.routes import router
from src.core.config import Settings
from src.core.exceptions import ConflictError, InvalidRequestError, StorageError
from src.db.database import build_engine, build_session_factory

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(status_code=status_code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
    return _error(status.HTTP_409_CONFLICT, str(exc))


async def handle_invalid_request(request: Request, exc: InvalidRequestError) -> JSONResponse:
    logger.warning("Invalid request on %s: %s", request.url.path, exc)
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Schema violation on %s: %s", request.url.path, exc.errors())
    return _error(status.HTTP_400_BAD_REQUEST, "Request does not match the game schema.", str(exc.errors()))


async def handle_storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure while processing %s", request.url.path, exc_info=exc)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal server error occurred. Please try again later.",
        str(exc),
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title="GameHub API", description="API for managing games", version="1.0.0")
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)

    app.add_exception_handler(ConflictError, handle_conflict)
    app.add_exception_handler(InvalidRequestError, handle_invalid_request)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(StorageError, handle_storage_error)

    app.include_router(router)
    logger.info("app_startup: log_level=%s", settings.log_level)
    return app
