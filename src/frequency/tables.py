"""Surface and inflection frequency tables with an order-independent merge."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Mapping

from src.morphology.tokens import Token

from .filters import is_japanese_surface
from .records import SurfaceFrequency


@dataclass
class FrequencyTable:
    """
    Counts for one scope (record, shard or whole corpus).

    ``surfaces`` maps a merged surface to its SurfaceFrequency and only ever
    holds surfaces that passed the script filter; ``inflections`` maps a rule
    tag to how often it fired and is never filtered.
    """

    surfaces: Dict[str, SurfaceFrequency] = field(default_factory=dict)
    inflections: Counter = field(default_factory=Counter)

    def record(self, surface: str, pos: str, lemma: str) -> None:
        """Count one occurrence; the first pos/lemma seen for a surface is kept."""
        entry = self.surfaces.get(surface)
        if entry is None:
            self.surfaces[surface] = SurfaceFrequency(pos=pos, lemma=lemma, frequency=1)
        else:
            entry.frequency += 1

    def record_token(self, token: Token) -> bool:
        """Count ``token`` if its surface passes the script filter."""
        if not is_japanese_surface(token.surface):
            return False
        self.record(token.surface, token.pos, token.lemma)
        return True

    def record_inflection(self, tag: str, count: int = 1) -> None:
        self.inflections[tag] += count

    def record_inflections(self, tally: Mapping[str, int]) -> None:
        for tag, count in tally.items():
            self.record_inflection(tag, count)

    @property
    def total_inflections(self) -> int:
        return sum(self.inflections.values())

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready document with ``verbs`` and ``inflections`` in sorted key order."""
        return {
            "verbs": {surface: self.surfaces[surface].to_payload() for surface in sorted(self.surfaces)},
            "inflections": {tag: self.inflections[tag] for tag in sorted(self.inflections)},
        }


def merge_into(target: FrequencyTable, source: FrequencyTable) -> None:
    """
    Fold ``source`` into ``target`` in place.

    Keys are unioned and frequencies summed. A surface already in ``target``
    keeps its pos/lemma. Entries copied across are cloned so ``target`` never
    aliases state owned by ``source``.
    """
    for surface, entry in source.surfaces.items():
        existing = target.surfaces.get(surface)
        if existing is None:
            target.surfaces[surface] = replace(entry)
        else:
            existing.frequency += entry.frequency

    for tag, count in source.inflections.items():
        target.inflections[tag] += count


def reduce_tables(tables: Iterable[FrequencyTable]) -> FrequencyTable:
    """Merge ``tables`` in iteration order into a fresh table."""
    accumulator = FrequencyTable()
    for table in tables:
        merge_into(accumulator, table)
    return accumulator


__all__ = ["FrequencyTable", "merge_into", "reduce_tables"]
