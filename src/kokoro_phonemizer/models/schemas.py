"""Pydantic models for kokoro-phonemizer API requests and responses."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Health & Status
# =============================================================================


class ServiceHealth(BaseModel):
    """Health status of a single service."""

    name: str
    status: str = Field(..., description="healthy, degraded, or unhealthy")
    message: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="healthy, degraded, or unhealthy")
    version: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    uptime_seconds: float = 0.0
    services: list[ServiceHealth] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "timestamp": "2026-01-17T12:00:00Z",
                "uptime_seconds": 12.5,
                "services": [
                    {"name": "phonemizer", "status": "healthy"},
                    {"name": "audio_session", "status": "healthy", "message": "disabled"},
                ],
            }
        }


# =============================================================================
# Phonemizer
# =============================================================================


class PhonemizeRequest(BaseModel):
    """Request to convert text to phonemes."""

    text: str = Field(..., description="Text to phonemize (may be empty)")
    voice: str | None = Field(default=None, description="Voice ID (default: config)")

    class Config:
        json_schema_extra = {
            "example": {
                "text": "The living room lights are now on.",
                "voice": "af_heart",
            }
        }


class PhonemizeResponse(BaseModel):
    """Phonemes for the requested text."""

    phonemes: str = Field(..., description="Phoneme string for the acoustic model")
    voice: str = Field(..., description="Voice used to select the language")
    language: str = Field(..., description="Language code the text was phonemized in")
    latency_ms: float = Field(..., description="Processing time in milliseconds")

    class Config:
        json_schema_extra = {
            "example": {
                "phonemes": "θɛ kæt",
                "voice": "af_heart",
                "language": "en-us",
                "latency_ms": 0.12,
            }
        }


class VoiceInfo(BaseModel):
    """A voice and the language it speaks."""

    voice: str
    language: str


class VoiceListResponse(BaseModel):
    """All known voices."""

    voices: list[VoiceInfo] = Field(default_factory=list)
    default_voice: str


# =============================================================================
# Errors
# =============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional details")


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: ErrorDetail
    request_id: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    class Config:
        json_schema_extra = {
            "example": {
                "error": {
                    "code": "LANGUAGE_NOT_FOUND",
                    "message": "No language found for voice 'xx_nobody'",
                    "details": {"voice": "xx_nobody"},
                },
                "request_id": "abc123",
            }
        }
