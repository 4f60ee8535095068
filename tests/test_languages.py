"""Tests for the voice language table."""

from __future__ import annotations

import pytest

from kokoro_phonemizer.phonemizer.errors import LanguageNotFoundError
from kokoro_phonemizer.phonemizer.languages import (
    VOICE_LANGUAGE,
    LanguageDialect,
    Voice,
    language_for_voice,
)

# Voice tag prefix letter -> language
PREFIX_LANGUAGE = {
    "a": LanguageDialect.EN_US,
    "b": LanguageDialect.EN_GB,
    "e": LanguageDialect.ES_ES,
    "f": LanguageDialect.FR_FR,
    "h": LanguageDialect.HI_IN,
    "i": LanguageDialect.IT_IT,
    "j": LanguageDialect.JA_JP,
    "p": LanguageDialect.PT_BR,
    "z": LanguageDialect.ZH_CN,
}


class TestVoiceLanguageTable:
    """Tests for VOICE_LANGUAGE."""

    def test_every_voice_has_a_language(self) -> None:
        """Test the table covers all voices."""
        assert set(VOICE_LANGUAGE) == set(Voice)

    def test_no_voice_maps_to_none(self) -> None:
        """Test NONE is never a voice's language."""
        assert LanguageDialect.NONE not in VOICE_LANGUAGE.values()

    def test_voice_count(self) -> None:
        """Test the number of known voices."""
        assert len(VOICE_LANGUAGE) == 52

    @pytest.mark.parametrize("voice", list(Voice))
    def test_language_matches_tag_prefix(self, voice: Voice) -> None:
        """Test each voice's language follows its tag prefix."""
        assert language_for_voice(voice) == PREFIX_LANGUAGE[voice.value[0]]

    def test_british_voices(self) -> None:
        """Test British voices resolve to en-GB."""
        british = [v for v, lang in VOICE_LANGUAGE.items() if lang == LanguageDialect.EN_GB]
        assert len(british) == 8
        assert Voice.BM_FABLE in british


class TestLanguageForVoice:
    """Tests for language_for_voice."""

    def test_accepts_raw_tag(self) -> None:
        """Test raw string tags resolve."""
        assert language_for_voice("zm_yunyang") == LanguageDialect.ZH_CN

    @pytest.mark.parametrize("voice", ["", "xx_nobody", "AF_HEART", "af heart"])
    def test_unknown_tag_raises(self, voice: str) -> None:
        """Test unknown tags raise LanguageNotFoundError."""
        with pytest.raises(LanguageNotFoundError) as exc_info:
            language_for_voice(voice)
        assert exc_info.value.voice == voice
        assert exc_info.value.code == "LANGUAGE_NOT_FOUND"

    def test_dialect_codes(self) -> None:
        """Test dialect code values."""
        assert LanguageDialect.NONE == ""
        assert LanguageDialect.EN_US == "en-us"
        assert LanguageDialect.EN_GB == "en-gb"
        assert LanguageDialect.PT_BR == "pt-br"
