from dataclasses import dataclass


@dataclass(frozen=True)
class CorpusEntry:
    """One Syosetu711K record. Metadata fields are not read; only ``text`` is counted."""

    text: str
