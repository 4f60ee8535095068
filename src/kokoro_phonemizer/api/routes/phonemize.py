"""Phonemizer API routes."""

from __future__ import annotations

import time

import structlog
from fastapi import APIRouter

from kokoro_phonemizer.config import get_settings
from kokoro_phonemizer.models.schemas import (
    PhonemizeRequest,
    PhonemizeResponse,
    VoiceInfo,
    VoiceListResponse,
)
from kokoro_phonemizer.phonemizer import (
    VOICE_LANGUAGE,
    PhonemizerEngine,
    TextTooLongError,
    language_for_voice,
)

router = APIRouter()
logger = structlog.get_logger()


@router.get("/voices", response_model=VoiceListResponse)
async def list_voices() -> VoiceListResponse:
    """List every voice with the language it speaks."""
    settings = get_settings()
    return VoiceListResponse(
        voices=[
            VoiceInfo(voice=voice.value, language=language.value)
            for voice, language in VOICE_LANGUAGE.items()
        ],
        default_voice=settings.default_voice,
    )


@router.get("/voices/{voice}/language", response_model=VoiceInfo)
async def voice_language(voice: str) -> VoiceInfo:
    """Look up the language of a single voice."""
    language = language_for_voice(voice)
    return VoiceInfo(voice=voice, language=language.value)


@router.post("/phonemize", response_model=PhonemizeResponse)
async def phonemize(request: PhonemizeRequest) -> PhonemizeResponse:
    """Convert text to phonemes for the given voice.

    Each request gets its own engine; engines are not shared between
    concurrent requests.
    """
    settings = get_settings()

    if len(request.text) > settings.max_text_length:
        raise TextTooLongError(len(request.text), settings.max_text_length)

    voice = request.voice or settings.default_voice
    start_time = time.perf_counter()

    engine = PhonemizerEngine()
    engine.set_language(voice)
    phonemes = engine.phonemize(request.text)

    latency_ms = (time.perf_counter() - start_time) * 1000

    logger.info(
        "Phonemization complete",
        voice=voice,
        language=engine.language.value,
        text_length=len(request.text),
        latency_ms=f"{latency_ms:.2f}",
    )

    return PhonemizeResponse(
        phonemes=phonemes,
        voice=voice,
        language=engine.language.value,
        latency_ms=latency_ms,
    )
