"""kokoro-phonemizer models and schemas."""

from kokoro_phonemizer.models.schemas import (
    # Errors
    ErrorDetail,
    ErrorResponse,
    # Health
    HealthResponse,
    # Phonemizer
    PhonemizeRequest,
    PhonemizeResponse,
    ServiceHealth,
    VoiceInfo,
    VoiceListResponse,
)

__all__ = [
    # Errors
    "ErrorDetail",
    "ErrorResponse",
    # Health
    "HealthResponse",
    "ServiceHealth",
    # Phonemizer
    "PhonemizeRequest",
    "PhonemizeResponse",
    "VoiceInfo",
    "VoiceListResponse",
]
