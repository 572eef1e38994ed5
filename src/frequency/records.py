"""Shared data records for frequency tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union


@dataclass
class SurfaceFrequency:
    """Occurrence count of one surface form, with the pos/lemma seen first."""

    pos: str
    lemma: str
    frequency: int = 1

    def to_payload(self) -> Dict[str, Union[str, int]]:
        return {"pos": self.pos, "dictionary_form": self.lemma, "frequency": self.frequency}
