"""Corpus configuration, segmentation and shard IO."""

from .config import RunConfig
from .io import CorpusFormatError, read_shard, resolve_shard_paths, write_frequency_json
from .records import CorpusEntry
from .segment import is_boundary, segment_text

__all__ = [
    "CorpusEntry",
    "CorpusFormatError",
    "RunConfig",
    "is_boundary",
    "read_shard",
    "resolve_shard_paths",
    "segment_text",
    "write_frequency_json",
]
