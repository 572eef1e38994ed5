"""Rule table and scanner that fold verb inflections into single tokens."""

from .merger import MergeResult, match_rule, merge_inflections
from .rules import INFLECTION_RULES, MAX_LOOKAHEAD, InflectionRule, inflection_tags

__all__ = [
    "INFLECTION_RULES",
    "InflectionRule",
    "MAX_LOOKAHEAD",
    "MergeResult",
    "inflection_tags",
    "match_rule",
    "merge_inflections",
]
