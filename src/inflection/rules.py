"""Priority-ordered table of verb suffix patterns.

Rules are tried top to bottom and the first full match wins, so a longer
pattern must sit above any shorter one that matches a prefix of the same
lookahead (e.g. ませ+ん+でし+た above ませ+ん, られ+ない above ない).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

MAX_LOOKAHEAD = 4


@dataclass(frozen=True)
class InflectionRule:
    """Tokens that must follow a verb, and the tag recorded when they do."""

    lookahead: Tuple[str, ...]
    tag: str

    @property
    def arity(self) -> int:
        return len(self.lookahead)

    def matches(self, following: Sequence[str]) -> bool:
        """True when ``following`` starts with every lookahead literal."""
        if len(following) < self.arity:
            return False
        return all(expected == actual for expected, actual in zip(self.lookahead, following))


def _rule(*lookahead: str) -> InflectionRule:
    return InflectionRule(lookahead=tuple(lookahead), tag="".join(lookahead))


INFLECTION_RULES: Tuple[InflectionRule, ...] = (
    _rule("ませ", "ん", "でし", "た"),
    _rule("させ", "られ", "ない"),
    _rule("られ", "ませ", "ん"),
    _rule("させ", "ない"),
    _rule("させ", "られる"),
    _rule("なかっ", "た"),
    _rule("なく", "て"),
    _rule("まし", "た"),
    _rule("せ", "ない"),
    _rule("ませ", "ん"),
    _rule("られ", "ない"),
    _rule("られ", "ます"),
    _rule("れ", "ない"),
    _rule("させる"),
    _rule("せる"),
    _rule("た"),
    _rule("だ"),
    _rule("て"),
    _rule("で"),
    _rule("な"),
    _rule("ない"),
    _rule("ます"),
    _rule("られる"),
    _rule("れる"),
)


def validate_rules(rules: Sequence[InflectionRule]) -> None:
    """Reject tables the merger cannot apply deterministically."""
    seen = set()
    for rank, rule in enumerate(rules, start=1):
        if not 1 <= rule.arity <= MAX_LOOKAHEAD:
            raise ValueError(f"Rule {rank} ({rule.tag}) has arity {rule.arity}; expected 1..{MAX_LOOKAHEAD}.")
        if any(not literal for literal in rule.lookahead):
            raise ValueError(f"Rule {rank} ({rule.tag}) contains an empty lookahead literal.")
        if rule.tag != "".join(rule.lookahead):
            raise ValueError(f"Rule {rank} tag '{rule.tag}' does not spell its lookahead.")
        if rule.lookahead in seen:
            raise ValueError(f"Rule {rank} ({rule.tag}) duplicates an earlier lookahead.")
        seen.add(rule.lookahead)


def inflection_tags(rules: Sequence[InflectionRule] = INFLECTION_RULES) -> Tuple[str, ...]:
    """Tags in priority order."""
    return tuple(rule.tag for rule in rules)


validate_rules(INFLECTION_RULES)


__all__ = [
    "INFLECTION_RULES",
    "InflectionRule",
    "MAX_LOOKAHEAD",
    "inflection_tags",
    "validate_rules",
]
