from __future__ import annotations

from src.corpus.segment import segment_text
from src.frequency.tables import FrequencyTable
from src.inflection.merger import merge_inflections
from src.morphology.tagger import TokenizerAdapter


def process_fragment(fragment: str, adapter: TokenizerAdapter, table: FrequencyTable) -> None:
    """Tokenize, merge and count one fragment into ``table``."""
    merged = merge_inflections(adapter.parse(fragment))
    for token in merged.tokens:
        table.record_token(token)
    table.record_inflections(merged.inflections)


def process_record(text: str, adapter: TokenizerAdapter) -> FrequencyTable:
    """Build the local frequency table for one corpus record."""
    table = FrequencyTable()
    for fragment in segment_text(text):
        process_fragment(fragment, adapter, table)
    return table


__all__ = ["process_fragment", "process_record"]
