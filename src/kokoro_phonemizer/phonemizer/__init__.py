"""Rule-based grapheme-to-phoneme conversion."""

from kokoro_phonemizer.phonemizer.engine import PhonemizerEngine
from kokoro_phonemizer.phonemizer.errors import (
    CouldNotPhonemizeError,
    LanguageNotFoundError,
    LanguageNotSetError,
    PhonemizerError,
    TextTooLongError,
)
from kokoro_phonemizer.phonemizer.languages import (
    VOICE_LANGUAGE,
    LanguageDialect,
    Voice,
    language_for_voice,
)
from kokoro_phonemizer.phonemizer.postprocess import post_process

__all__ = [
    "CouldNotPhonemizeError",
    "LanguageDialect",
    "LanguageNotFoundError",
    "LanguageNotSetError",
    "PhonemizerEngine",
    "PhonemizerError",
    "TextTooLongError",
    "VOICE_LANGUAGE",
    "Voice",
    "language_for_voice",
    "post_process",
]
