import logging
import sys
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from jobby.api.router import api_router
from jobby.core.config import Settings
from jobby.core.database import build_engine, build_session_factory, init_db
from jobby.core.exceptions import JobbyError, ServerMisconfiguredError
from jobby.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def check_settings(settings: Settings) -> None:
    """
    Refuse to run without a database URL and a token-signing secret.

    Raises:
        ServerMisconfiguredError: naming every missing setting
    """
    missing = settings.missing_required()
    if missing:
        raise ServerMisconfiguredError(f"{', '.join(missing)} is not set")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    settings: Settings = app.state.settings

    # Startup
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
    logger.info("Starting up Jobby API...")
    check_settings(settings)

    app.state.engine = build_engine(settings.DATABASE_URL)
    app.state.session_factory = build_session_factory(app.state.engine)

    logger.info("Initializing database...")
    init_db(app.state.engine)
    logger.info("Database initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down Jobby API...")
    app.state.engine.dispose()


async def jobby_error_handler(request: Request, exc: JobbyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Submitted values (passwords included) are never echoed back
    details = [
        {key: value for key, value in err.items() if key in ("type", "loc", "msg")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(details)}
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application around an explicit settings object.

    The database engine and session factory are created at startup and kept on
    app.state, so each app instance owns its own store handles.
    """
    settings = settings or Settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="Job listings, users and feedback API for the Jobby web app",
        lifespan=lifespan
    )
    app.state.settings = settings

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(JobbyError, jobby_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings: Settings = app.state.settings
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)

    try:
        check_settings(settings)
    except ServerMisconfiguredError as e:
        logger.critical(f"Refusing to start: {e.message}")
        sys.exit(1)

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower()
    )
