"""Substitution rules and the cascade that applies them.

A rule table is an ordered list. Each rule rewrites every non-overlapping
occurrence of its pattern, left to right, and the next rule sees the
rewritten string. Table order is part of the output contract.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LiteralRule:
    """Plain substring substitution."""

    pattern: str
    replacement: str

    def apply(self, text: str) -> str:
        return text.replace(self.pattern, self.replacement)


@dataclass(frozen=True)
class RegexRule:
    """Regular expression substitution (replacement may use group refs)."""

    pattern: str
    replacement: str
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    def apply(self, text: str) -> str:
        return self._compiled.sub(self.replacement, text)


SubstitutionRule = LiteralRule | RegexRule
RuleTable = tuple[SubstitutionRule, ...]


def literal_table(pairs: Iterable[tuple[str, str]]) -> RuleTable:
    """Build a table of literal rules, keeping the given order."""
    return tuple(LiteralRule(pattern, replacement) for pattern, replacement in pairs)


def sort_longest_first(rules: Iterable[SubstitutionRule]) -> RuleTable:
    """Order rules by descending pattern length.

    The sort is stable, so rules with equal-length patterns keep their
    authored order.
    """
    return tuple(sorted(rules, key=lambda rule: len(rule.pattern), reverse=True))


def apply_rules(text: str, rules: Sequence[SubstitutionRule]) -> str:
    """Run the rule cascade over text."""
    result = text
    for rule in rules:
        result = rule.apply(result)
    return result
