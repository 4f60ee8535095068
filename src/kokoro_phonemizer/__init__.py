"""kokoro-phonemizer - rule-based phoneme front end for Kokoro voices."""

from kokoro_phonemizer.phonemizer import (
    LanguageDialect,
    LanguageNotFoundError,
    LanguageNotSetError,
    PhonemizerEngine,
    PhonemizerError,
    Voice,
)

__version__ = "0.1.0"

__all__ = [
    "LanguageDialect",
    "LanguageNotFoundError",
    "LanguageNotSetError",
    "PhonemizerEngine",
    "PhonemizerError",
    "Voice",
    "__version__",
]
