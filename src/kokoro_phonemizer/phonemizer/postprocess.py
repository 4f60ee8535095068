"""Normalization from rule output to the acoustic model's symbol set."""

from __future__ import annotations

from kokoro_phonemizer.phonemizer.languages import LanguageDialect
from kokoro_phonemizer.phonemizer.rules import apply_rules
from kokoro_phonemizer.phonemizer.tables import (
    BRITISH_VOWELS,
    FINAL_CLEANUP,
    GENERAL_VOWELS,
    MERGES,
    SYLLABIC_PROMOTION,
)


def post_process(phonemes: str, language: LanguageDialect) -> str:
    """Map cascade output onto the model vocabulary.

    Runs for every language. Only en-GB takes the British vowel branch;
    every other language, including the non-English ones, takes the
    general branch that drops length marks.

    Args:
        phonemes: Output of a per-language rule cascade
        language: Language the text was phonemized in

    Returns:
        Final phoneme string
    """
    result = apply_rules(phonemes.strip(), MERGES)
    result = apply_rules(result, SYLLABIC_PROMOTION)

    if language == LanguageDialect.EN_GB:
        result = apply_rules(result, BRITISH_VOWELS)
    else:
        result = apply_rules(result, GENERAL_VOWELS)

    return apply_rules(result, FINAL_CLEANUP)
