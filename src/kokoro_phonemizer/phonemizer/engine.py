"""Rule-based phonemizer engine.

Converts text to the phoneme strings the Kokoro acoustic model consumes,
without an external G2P backend. An engine holds a single piece of state,
the selected language. It is not thread safe; give each concurrent caller
its own engine.
"""

from __future__ import annotations

import structlog

from kokoro_phonemizer.phonemizer.errors import LanguageNotFoundError, LanguageNotSetError
from kokoro_phonemizer.phonemizer.languages import LanguageDialect, Voice, language_for_voice
from kokoro_phonemizer.phonemizer.postprocess import post_process
from kokoro_phonemizer.phonemizer.rules import apply_rules
from kokoro_phonemizer.phonemizer.tables import RULE_TABLES

logger = structlog.get_logger()


class PhonemizerEngine:
    """Text to phoneme conversion for a selected language."""

    def __init__(self) -> None:
        self._language = LanguageDialect.NONE

    @property
    def language(self) -> LanguageDialect:
        """Currently selected language (NONE until set_language is called)."""
        return self._language

    def set_language(self, voice: Voice | str) -> None:
        """Select the language used by phonemize from a voice.

        Args:
            voice: Voice member or raw voice tag

        Raises:
            LanguageNotFoundError: If the voice has no language
        """
        try:
            language = language_for_voice(voice)
        except LanguageNotFoundError as e:
            logger.warning("Unknown voice, language unchanged", voice=e.voice)
            raise

        self._language = language
        logger.info("Phonemizer language set", voice=Voice(voice).value, language=language.value)

    def language_for_voice(self, voice: Voice | str) -> LanguageDialect:
        """Look up a voice's language without changing the engine state."""
        return language_for_voice(voice)

    def phonemize(self, text: str) -> str:
        """Convert text to phonemes.

        Args:
            text: Text to convert

        Returns:
            Phoneme string, empty for empty text

        Raises:
            LanguageNotSetError: If no language has been selected
        """
        if self._language == LanguageDialect.NONE:
            logger.warning("Phonemize called without a language")
            raise LanguageNotSetError()

        if not text:
            return ""

        phonemes = apply_rules(text.lower(), RULE_TABLES[self._language])

        logger.debug(
            "Text phonemized",
            language=self._language.value,
            text_length=len(text),
        )

        return post_process(phonemes, self._language)
