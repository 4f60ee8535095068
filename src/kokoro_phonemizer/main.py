"""kokoro-phonemizer - rule-based phoneme front end for Kokoro voices.

FastAPI application entry point.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kokoro_phonemizer import __version__
from kokoro_phonemizer.config import get_settings
from kokoro_phonemizer.models.schemas import ErrorDetail, ErrorResponse
from kokoro_phonemizer.phonemizer import (
    CouldNotPhonemizeError,
    LanguageNotFoundError,
    LanguageNotSetError,
    PhonemizerError,
    TextTooLongError,
)
from kokoro_phonemizer.services.audio_session import AudioSessionManager

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# HTTP status for each phonemizer failure
ERROR_STATUS: dict[type[PhonemizerError], int] = {
    LanguageNotFoundError: 404,
    LanguageNotSetError: 409,
    CouldNotPhonemizeError: 422,
    TextTooLongError: 422,
}


def error_details(exc: PhonemizerError) -> dict | None:
    """Extra context carried in the error envelope."""
    if isinstance(exc, LanguageNotFoundError):
        return {"voice": exc.voice}
    if isinstance(exc, TextTooLongError):
        return {"length": exc.length, "max_length": exc.max_length}
    return None


# =============================================================================
# Logging Setup
# =============================================================================


def setup_logging() -> None:
    """Configure structured logging."""
    settings = get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
            if settings.env == "development"
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Also configure standard logging for third-party libs
    logging.basicConfig(
        level=logging.getLevelName(settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# =============================================================================
# Application State
# =============================================================================


class AppState:
    """Application state container."""

    def __init__(self) -> None:
        self.start_time = time.time()
        self.audio_session: AudioSessionManager | None = None

    @property
    def uptime_seconds(self) -> float:
        """Get application uptime in seconds."""
        return time.time() - self.start_time


app_state = AppState()


# =============================================================================
# Lifespan Management
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown of services.
    """
    logger = structlog.get_logger()
    settings = get_settings()

    # --- Startup ---
    logger.info(
        "Starting kokoro-phonemizer",
        version=__version__,
        env=settings.env,
        default_voice=settings.default_voice,
    )

    # No platform backend is bundled; the session stays a no-op unless one is injected
    app_state.audio_session = AudioSessionManager(
        enabled=settings.audio_session.enabled,
        category=settings.audio_session.category,
    )
    app_state.audio_session.setup()

    logger.info(
        "kokoro-phonemizer started",
        host=settings.host,
        port=settings.port,
    )

    yield

    # --- Shutdown ---
    logger.info("Shutting down kokoro-phonemizer")

    if app_state.audio_session:
        app_state.audio_session.deactivate()

    logger.info("kokoro-phonemizer stopped")


# =============================================================================
# FastAPI Application
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    setup_logging()
    settings = get_settings()

    app = FastAPI(
        title="kokoro-phonemizer",
        description="Rule-based grapheme-to-phoneme front end for Kokoro voices",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.env == "development" else None,
        redoc_url="/redoc" if settings.env == "development" else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.env == "development" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request timing middleware
    @app.middleware("http")
    async def add_timing_header(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_ms:.2f}"
        return response

    @app.exception_handler(PhonemizerError)
    async def phonemizer_exception_handler(request: Request, exc: PhonemizerError):
        logger = structlog.get_logger()
        logger.warning(
            "Phonemizer error",
            path=request.url.path,
            code=exc.code,
            error=str(exc),
        )
        return JSONResponse(
            status_code=ERROR_STATUS.get(type(exc), 400),
            content=ErrorResponse(
                error=ErrorDetail(code=exc.code, message=str(exc), details=error_details(exc))
            ).model_dump(mode="json"),
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger = structlog.get_logger()
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error=ErrorDetail(
                    code="INTERNAL_ERROR",
                    message="An unexpected error occurred",
                    details={"error": str(exc)} if settings.debug else None,
                )
            ).model_dump(mode="json"),
        )

    _register_routes(app)

    return app


def _register_routes(app: FastAPI) -> None:
    """Register API routes."""
    from kokoro_phonemizer.api.routes import health, phonemize

    @app.get("/", include_in_schema=False)
    async def root():
        """API info."""
        return {
            "name": "kokoro-phonemizer",
            "version": __version__,
            "description": "Rule-based grapheme-to-phoneme front end for Kokoro voices",
            "endpoints": {
                "health": "/health",
                "docs": "/docs",
                "voices": "/api/v1/voices",
                "phonemize": "/api/v1/phonemize",
            },
        }

    app.include_router(health.router, tags=["Health"])
    app.include_router(phonemize.router, prefix="/api/v1", tags=["Phonemizer"])


# Create app instance
app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================


def main() -> None:
    """Run the application via CLI."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "kokoro_phonemizer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
