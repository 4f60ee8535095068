"""Tests for phoneme post-processing."""

from __future__ import annotations

import pytest

from kokoro_phonemizer.phonemizer.languages import LanguageDialect
from kokoro_phonemizer.phonemizer.postprocess import post_process

NON_BRITISH = [lang for lang in LanguageDialect if lang not in (LanguageDialect.NONE, LanguageDialect.EN_GB)]


class TestMerges:
    """Tests for the diphthong and affricate merges."""

    @pytest.mark.parametrize(
        "phonemes,expected",
        [
            ("a^ɪ", "I"),
            ("a^ʊ", "W"),
            ("e^ɪ", "A"),
            ("ɔ^ɪ", "Y"),
            ("d^ʒ", "ʤ"),
            ("t^ʃ", "ʧ"),
            ("ə^l", "ᵊl"),
            ("ɚ", "əɹ"),
            ("ʲo", "jɔ"),
            ("ʲ", ""),
            ("ɬ", "l"),
            ("ç", "k"),
        ],
    )
    def test_merge(self, phonemes: str, expected: str) -> None:
        """Test individual merge rules."""
        assert post_process(phonemes, LanguageDialect.EN_US) == expected

    def test_trims_whitespace(self) -> None:
        """Test surrounding whitespace is removed first."""
        assert post_process(" \n ɪt\t ", LanguageDialect.EN_US) == "ɪt"

    def test_nasal_mark_removed(self) -> None:
        """Test combining tildes are stripped."""
        assert post_process("ɑ\u0303", LanguageDialect.FR_FR) == "ɑ"


class TestSyllabicPromotion:
    """Tests for syllabic mark handling."""

    def test_mark_after_symbol(self) -> None:
        """Test the mark becomes a schwa marker before its symbol."""
        assert post_process("bʌtn\u0329", LanguageDialect.EN_US) == "bʌtᵊn"

    def test_leading_mark_dropped(self) -> None:
        """Test a mark with nothing before it is removed."""
        assert post_process("\u0329n", LanguageDialect.EN_US) == "n"


class TestDialectBranch:
    """Tests for the en-GB and general branches."""

    def test_british_branch(self) -> None:
        """Test en-GB vowel rewrites."""
        assert post_process("iə", LanguageDialect.EN_GB) == "ɪə"
        assert post_process("ə^ʊ", LanguageDialect.EN_GB) == "Q"
        assert post_process("ɑː", LanguageDialect.EN_GB) == "ɑː"

    @pytest.mark.parametrize("language", NON_BRITISH)
    def test_general_branch(self, language: LanguageDialect) -> None:
        """Test every other language takes the general branch."""
        assert post_process("o^ʊ", language) == "O"
        assert post_process("ɜːɹ", language) == "ɜɹ"
        assert post_process("ɜː", language) == "ɜɹ"
        assert post_process("ɪə", language) == "iə"
        assert post_process("ɑː", language) == "ɑ"

    def test_branches_differ(self) -> None:
        """Test the same input diverges between branches."""
        british = post_process("o^ʊ", LanguageDialect.EN_GB)
        american = post_process("o^ʊ", LanguageDialect.EN_US)
        assert british == "ɔʊ"
        assert american == "O"


class TestFinalCleanup:
    """Tests for the final pass."""

    def test_o_becomes_open_o(self) -> None:
        """Test remaining 'o' is rewritten."""
        assert post_process("solo", LanguageDialect.ES_ES) == "sɔlɔ"

    def test_joiners_removed(self) -> None:
        """Test unmatched '^' joiners are stripped."""
        assert post_process("u^ɪ", LanguageDialect.EN_US) == "uɪ"

    def test_runs_for_non_english(self) -> None:
        """Test post-processing applies to every language."""
        assert post_process("xe", LanguageDialect.JA_JP) == "kA"
