"""Tests for substitution rules and rule tables."""

from __future__ import annotations

import pytest

from kokoro_phonemizer.phonemizer.languages import LanguageDialect
from kokoro_phonemizer.phonemizer.rules import (
    LiteralRule,
    RegexRule,
    apply_rules,
    literal_table,
    sort_longest_first,
)
from kokoro_phonemizer.phonemizer.tables import (
    CHINESE,
    ENGLISH,
    JAPANESE,
    MERGES,
    RULE_TABLES,
    SYLLABIC,
)


def patterns(table) -> list[str]:
    return [rule.pattern for rule in table]


class TestRules:
    """Tests for individual rule variants."""

    def test_literal_replaces_every_occurrence(self) -> None:
        """Test literal rules rewrite all matches."""
        assert LiteralRule("a", "b").apply("banana") == "bbnbnb"

    def test_literal_is_non_overlapping_left_to_right(self) -> None:
        """Test overlapping candidates resolve from the left."""
        assert LiteralRule("aa", "b").apply("aaa") == "ba"

    def test_literal_pattern_is_not_a_regex(self) -> None:
        """Test regex metacharacters are matched literally."""
        assert LiteralRule("^", "").apply("a^ɪ") == "aɪ"
        assert LiteralRule(".", "x").apply("a.b") == "axb"

    def test_regex_rule_with_group(self) -> None:
        """Test regex rules support group references."""
        rule = RegexRule(r"(\S)" + SYLLABIC, r"ᵊ\1")
        assert rule.apply("n" + SYLLABIC + "l" + SYLLABIC) == "ᵊnᵊl"

    def test_rules_are_immutable(self) -> None:
        """Test rules cannot be modified after construction."""
        rule = LiteralRule("a", "b")
        with pytest.raises(AttributeError):
            rule.pattern = "c"  # type: ignore[misc]


class TestCascade:
    """Tests for apply_rules."""

    def test_each_rule_sees_previous_output(self) -> None:
        """Test rules chain in order."""
        table = literal_table([("a", "b"), ("b", "c")])
        assert apply_rules("a", table) == "c"

    def test_order_changes_result(self) -> None:
        """Test reversing a table changes the output."""
        table = literal_table([("b", "c"), ("a", "b")])
        assert apply_rules("a", table) == "b"

    def test_mixed_rule_kinds(self) -> None:
        """Test literal and regex rules share one pipeline."""
        table = (RegexRule(r"[0-9]+", "#"), LiteralRule("#", "n"))
        assert apply_rules("a12b3", table) == "anbn"

    def test_empty_table(self) -> None:
        """Test an empty table returns the input."""
        assert apply_rules("text", ()) == "text"


class TestSortLongestFirst:
    """Tests for sort_longest_first."""

    def test_descending_length(self) -> None:
        """Test longer patterns come first."""
        table = sort_longest_first(literal_table([("a", "1"), ("abc", "3"), ("ab", "2")]))
        assert patterns(table) == ["abc", "ab", "a"]

    def test_stable_for_equal_lengths(self) -> None:
        """Test equal-length patterns keep their order."""
        table = sort_longest_first(literal_table([("x", "1"), ("yy", "2"), ("z", "3")]))
        assert patterns(table) == ["yy", "x", "z"]


class TestTables:
    """Tests for table contents and ordering."""

    def test_every_language_has_a_table(self) -> None:
        """Test all real languages are registered and NONE is not."""
        assert set(RULE_TABLES) == set(LanguageDialect) - {LanguageDialect.NONE}

    def test_english_variants_share_a_table(self) -> None:
        """Test en-US and en-GB use the same cascade."""
        assert RULE_TABLES[LanguageDialect.EN_US] is RULE_TABLES[LanguageDialect.EN_GB]

    @pytest.mark.parametrize(
        "digraph,letter",
        [("th", "t"), ("sh", "s"), ("ch", "c"), ("tion", "t"), ("ough", "o"), ("ng", "n")],
    )
    def test_english_digraphs_before_letters(self, digraph: str, letter: str) -> None:
        """Test multi-letter English rules precede their single letters."""
        names = patterns(ENGLISH)
        assert names.index(digraph) < names.index(letter)

    def test_english_table_not_sorted(self) -> None:
        """Test the English table keeps its authored order."""
        assert patterns(ENGLISH)[:3] == ["th", "sh", "ch"]
        assert patterns(ENGLISH) != patterns(sort_longest_first(ENGLISH))

    def test_chinese_finals_before_initials(self) -> None:
        """Test pinyin vowels are rewritten before consonants."""
        names = patterns(CHINESE)
        assert names.index("ang") < names.index("g")
        assert names.index("zh") < names.index("z")

    def test_japanese_strips_latin_first(self) -> None:
        """Test the Latin strip is the first Japanese rule."""
        assert isinstance(JAPANESE[0], RegexRule)
        assert all(isinstance(rule, LiteralRule) for rule in JAPANESE[1:])

    def test_merges_sorted_longest_first(self) -> None:
        """Test the merge table is ordered by descending length."""
        lengths = [len(rule.pattern) for rule in MERGES]
        assert lengths == sorted(lengths, reverse=True)
        assert MERGES[0].pattern == "ʔˌn" + SYLLABIC

    def test_merges_prefer_longer_match(self) -> None:
        """Test 'e^ɪ' is tried before the bare 'e'."""
        names = patterns(MERGES)
        assert names.index("e^ɪ") < names.index("e")
        assert names.index("ʔn" + SYLLABIC) < names.index("ʔn") < names.index("ʔ")
