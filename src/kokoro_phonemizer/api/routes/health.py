"""Health check API routes."""

from __future__ import annotations

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter

from kokoro_phonemizer import __version__
from kokoro_phonemizer.models.schemas import HealthResponse, ServiceHealth
from kokoro_phonemizer.phonemizer import PhonemizerEngine, PhonemizerError, Voice

router = APIRouter()
logger = structlog.get_logger()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint.

    Returns overall system health and individual service status.
    """
    from kokoro_phonemizer.main import app_state

    services: list[ServiceHealth] = []
    overall_status = "healthy"

    phonemizer_health = _check_phonemizer()
    services.append(phonemizer_health)
    if phonemizer_health.status != "healthy":
        overall_status = "unhealthy"

    audio_health = _check_audio_session()
    services.append(audio_health)
    if audio_health.status != "healthy" and overall_status == "healthy":
        overall_status = "degraded"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        timestamp=datetime.now(UTC),
        uptime_seconds=app_state.uptime_seconds,
        services=services,
    )


@router.get("/health/live")
async def liveness() -> dict:
    """Kubernetes liveness probe.

    Returns 200 if the service is running.
    """
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness() -> dict:
    """Kubernetes readiness probe.

    The phonemizer has no external dependencies, so it is ready once running.
    """
    return {"status": "ready"}


# =============================================================================
# Helper Functions
# =============================================================================


def _check_phonemizer() -> ServiceHealth:
    """Run a one-word phonemization as a smoke test."""
    try:
        engine = PhonemizerEngine()
        engine.set_language(Voice.AF_HEART)
        engine.phonemize("ok")
        return ServiceHealth(name="phonemizer", status="healthy")
    except PhonemizerError as e:
        logger.error("Phonemizer health check failed", error=str(e))
        return ServiceHealth(name="phonemizer", status="unhealthy", message=str(e))


def _check_audio_session() -> ServiceHealth:
    """Report audio session state."""
    from kokoro_phonemizer.main import app_state

    session = app_state.audio_session
    if session is None or not session.enabled:
        return ServiceHealth(name="audio_session", status="healthy", message="disabled")
    if session.active:
        return ServiceHealth(name="audio_session", status="healthy", message="active")
    return ServiceHealth(name="audio_session", status="degraded", message="inactive")
