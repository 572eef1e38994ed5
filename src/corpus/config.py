"""Static configuration for the corpus frequency run."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal, Optional, TypedDict

DictionaryName = Literal["ipadic", "unidic"]


class ShardSetConfig(TypedDict):
    folder_name: str
    prefix: str
    count: int
    suffix: str


# Default corpus location used by the Typer CLI; callers may override these.
SYOSETU_711K: ShardSetConfig = {
    "folder_name": "Syosetu711K",
    "prefix": "syosetu711k",
    "count": 21,
    "suffix": ".jsonl",
}

DEFAULT_INPUT_DIR = Path(SYOSETU_711K["folder_name"])
DEFAULT_SHARD_PREFIX = SYOSETU_711K["prefix"]
DEFAULT_SHARD_COUNT = SYOSETU_711K["count"]
DEFAULT_WORKERS = 32
DEFAULT_DICTIONARY: DictionaryName = "ipadic"


def default_output_path(dictionary: str) -> Path:
    """Output file named after the dictionary that produced the counts."""
    return Path(f"frequency_list_{dictionary}.json")


@dataclass(frozen=True)
class RunConfig:
    """Every knob of one corpus run."""

    input_dir: Path = DEFAULT_INPUT_DIR
    shard_prefix: str = DEFAULT_SHARD_PREFIX
    shard_count: int = DEFAULT_SHARD_COUNT
    workers: int = DEFAULT_WORKERS
    dictionary: DictionaryName = DEFAULT_DICTIONARY
    output_path: Optional[Path] = None

    def validate(self) -> None:
        if self.workers < 1:
            raise ValueError("workers must be at least 1.")
        if self.shard_count < 1:
            raise ValueError("shard_count must be at least 1.")
        if not self.shard_prefix:
            raise ValueError("shard_prefix must not be empty.")

    @property
    def resolved_output_path(self) -> Path:
        return self.output_path or default_output_path(self.dictionary)

    def shard_path(self, index: int) -> Path:
        """Path of shard ``index``, e.g. ``Syosetu711K/syosetu711k-03.jsonl``."""
        if not 0 <= index < self.shard_count:
            raise ValueError(f"Shard index {index} outside 0..{self.shard_count - 1}.")
        return self.input_dir / f"{self.shard_prefix}-{index:02d}{SYOSETU_711K['suffix']}"

    def with_overrides(self, **changes: object) -> "RunConfig":
        """Return a copy with the non-None ``changes`` applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)  # type: ignore[arg-type]


__all__ = [
    "DEFAULT_DICTIONARY",
    "DEFAULT_INPUT_DIR",
    "DEFAULT_SHARD_COUNT",
    "DEFAULT_SHARD_PREFIX",
    "DEFAULT_WORKERS",
    "DictionaryName",
    "RunConfig",
    "SYOSETU_711K",
    "ShardSetConfig",
    "default_output_path",
]
