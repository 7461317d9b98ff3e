# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging
import asyncio
import time

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import (
    auth_router,
    config_router,
    heartbeat_router,
    command_router,
    event_router,
    media_router,
    dashboard_router,
)
from .application.dto.common_dto import ErrorBody, ErrorResponse
from .application.use_cases.command.expire_overdue_commands import ExpireOverdueCommandsUseCase
from .core.config import get_settings
from .core.logging_setup import setup_logging
from .di.container import get_container
from .domain.exceptions import DashcamError
from .utils.datetime_utils import to_iso, utc_now

logger = logging.getLogger(__name__)

_HTTP_STATUS_CODES = {
    400: "VALIDATION_ERROR",
    401: "AUTH_REQUIRED",
    403: "AUTH_INVALID",
    404: "NOT_FOUND",
    405: "NOT_FOUND",
    409: "INVALID_STATE",
}


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorBody(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def sweep_overdue_commands(interval_seconds: float) -> None:
    """
    Background task that expires commands whose timeout has elapsed.

    Runs until cancelled. A failing pass is logged and the loop carries on.
    """
    logger.info(f"Command expiry sweep started (every {interval_seconds}s)")
    while True:
        try:
            await asyncio.sleep(interval_seconds)
            expire_use_case = get_container().get(ExpireOverdueCommandsUseCase)
            expired = await expire_use_case.execute()
            if expired:
                logger.debug(f"Expiry sweep moved {expired} command(s) to expired")
        except asyncio.CancelledError:
            logger.info("Command expiry sweep cancelled")
            break
        except Exception as e:
            logger.error(f"Error during command expiry sweep: {e}", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container eagerly and starts the command expiry sweep.
    """
    settings = get_settings()
    get_container()

    sweep_task: Optional[asyncio.Task] = None
    if settings.command_sweep_interval_seconds > 0:
        sweep_task = asyncio.create_task(
            sweep_overdue_commands(settings.command_sweep_interval_seconds)
        )
    else:
        logger.info("Command expiry sweep disabled")

    logger.info(f"Dashcam backend started ({settings.environment}, v{settings.app_version})")

    yield

    # Shutdown: stop background tasks
    if sweep_task:
        sweep_task.cancel()
        try:
            await sweep_task
        except asyncio.CancelledError:
            pass

    logger.info("Application shutdown complete")


def register_exception_handlers(application: FastAPI) -> None:
    """Translate every failure into the uniform error envelope"""

    @application.exception_handler(DashcamError)
    async def dashcam_error_handler(request: Request, exc: DashcamError) -> JSONResponse:
        if exc.http_status >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return error_response(exc.http_status, exc.code, exc.message)

    @application.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
        else:
            message = "Invalid request"
        return error_response(400, "VALIDATION_ERROR", message)

    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        code = _HTTP_STATUS_CODES.get(exc.status_code, "SERVER_ERROR")
        if exc.status_code == 404:
            message = "Endpoint not found"
        else:
            message = str(exc.detail)
        return error_response(exc.status_code, code, message)

    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
        message = "Internal server error" if get_settings().is_production else str(exc)
        return error_response(500, "SERVER_ERROR", message)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error envelope handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)

    # Create FastAPI app
    application = FastAPI(
        title="Dashcam Backend API",
        version=settings.app_version,
        description="Session and command-dispatch coordinator for dashcam devices",
        lifespan=lifespan
    )

    # Add CORS middleware
    allow_all = settings.allowed_origins == ["*"]
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        client = request.client.host if request.client else "unknown"
        logger.info(
            f"{request.method} {request.url.path} from {client} "
            f"-> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    register_exception_handlers(application)

    # Register API routers
    application.include_router(auth_router, prefix="/api/v1/auth")
    application.include_router(config_router, prefix="/api/v1/config")
    application.include_router(heartbeat_router, prefix="/api/v1/heartbeat")
    application.include_router(command_router, prefix="/api/v1/commands")
    application.include_router(event_router, prefix="/api/v1/events")
    application.include_router(media_router, prefix="/api/v1/media")
    application.include_router(dashboard_router, prefix="/dashboard")

    @application.get("/health", tags=["service"])
    async def health() -> dict:
        return {
            "success": True,
            "data": {"status": "healthy", "version": settings.app_version},
            "timestamp": to_iso(utc_now()),
        }

    @application.get("/", tags=["service"])
    async def root() -> dict:
        return {
            "success": True,
            "data": {
                "service": "Dashcam Backend API",
                "version": settings.app_version,
                "environment": settings.environment,
                "endpoints": {
                    "auth": "/api/v1/auth",
                    "config": "/api/v1/config",
                    "heartbeat": "/api/v1/heartbeat",
                    "commands": "/api/v1/commands",
                    "events": "/api/v1/events",
                    "media": "/api/v1/media",
                    "dashboard": "/dashboard",
                },
            },
            "timestamp": to_iso(utc_now()),
        }

    return application


# Create application instance
app = create_application()
