"""Greedy fold of verb + auxiliary token runs into single surface forms."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from src.morphology.tokens import Token

from .rules import INFLECTION_RULES, MAX_LOOKAHEAD, InflectionRule


@dataclass
class MergeResult:
    """Merged tokens for one fragment plus the tags of every rule that fired."""

    tokens: List[Token] = field(default_factory=list)
    inflections: Counter = field(default_factory=Counter)


def lookahead_surfaces(tokens: Sequence[Token], index: int, width: int = MAX_LOOKAHEAD) -> List[str]:
    """Surfaces of the up to ``width`` tokens after ``index``."""
    return [token.surface for token in tokens[index + 1:index + 1 + width]]


def match_rule(
    tokens: Sequence[Token],
    index: int,
    rules: Sequence[InflectionRule] = INFLECTION_RULES,
) -> Optional[InflectionRule]:
    """First rule, in priority order, matching the tokens after ``index``."""
    following = lookahead_surfaces(tokens, index)
    for rule in rules:
        if rule.matches(following):
            return rule
    return None


def merge_inflections(
    tokens: Sequence[Token],
    rules: Sequence[InflectionRule] = INFLECTION_RULES,
) -> MergeResult:
    """
    Scan ``tokens`` left to right, folding each verb with its matched suffix.

    A verb followed by a rule's lookahead becomes one token whose surface is
    the verb surface plus the rule tag, keeping the verb's pos and lemma, and
    the cursor skips past every consumed token. Everything else passes through
    unchanged. The cursor never moves backwards, so the scan is linear.
    """
    result = MergeResult()
    index = 0
    while index < len(tokens):
        token = tokens[index]
        rule = match_rule(tokens, index, rules) if token.is_verb else None
        if rule is None:
            result.tokens.append(token)
            index += 1
            continue

        result.tokens.append(Token(surface=token.surface + rule.tag, pos=token.pos, lemma=token.lemma))
        result.inflections[rule.tag] += 1
        index += rule.arity + 1

    return result


__all__ = ["MergeResult", "lookahead_surfaces", "match_rule", "merge_inflections"]
