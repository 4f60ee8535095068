"""Phonemizer exceptions."""

from __future__ import annotations

from typing import Any


class PhonemizerError(Exception):
    """Base class for phonemizer failures."""

    code = "PHONEMIZER_ERROR"


class LanguageNotFoundError(PhonemizerError):
    """Raised when a voice has no entry in the voice language table."""

    code = "LANGUAGE_NOT_FOUND"

    def __init__(self, voice: Any) -> None:
        self.voice = getattr(voice, "value", voice)
        super().__init__(f"No language found for voice {self.voice!r}")


class LanguageNotSetError(PhonemizerError):
    """Raised when phonemize is called before a language was selected."""

    code = "LANGUAGE_NOT_SET"

    def __init__(self) -> None:
        super().__init__("Language not set, call set_language() first")


class CouldNotPhonemizeError(PhonemizerError):
    """Reserved for rule application failures."""

    code = "COULD_NOT_PHONEMIZE"


class TextTooLongError(PhonemizerError):
    """Raised when input text exceeds the configured maximum length."""

    code = "TEXT_TOO_LONG"

    def __init__(self, length: int, max_length: int) -> None:
        self.length = length
        self.max_length = max_length
        super().__init__(f"Text exceeds the maximum length ({length} > {max_length})")
