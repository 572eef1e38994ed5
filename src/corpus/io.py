"""Helpers for reading JSONL shards and writing the frequency document."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, List, Mapping

from .config import RunConfig
from .records import CorpusEntry


class CorpusFormatError(ValueError):
    """A shard line that cannot be turned into a CorpusEntry."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        super().__init__(f"{path}:{line_number}: {reason}")
        self.path = path
        self.line_number = line_number
        self.reason = reason


def resolve_shard_paths(config: RunConfig) -> List[Path]:
    """Return every shard path in order, failing fast if any is missing."""
    paths = [config.shard_path(index) for index in range(config.shard_count)]
    missing = [path for path in paths if not path.is_file()]
    if missing:
        listed = ", ".join(str(path) for path in missing)
        raise FileNotFoundError(f"Missing corpus shard(s): {listed}")
    return paths


def parse_record(line: str, *, path: Path, line_number: int) -> CorpusEntry:
    """Decode one JSONL line; any defect is reported as CorpusFormatError."""
    try:
        data = json.loads(line)
    except json.JSONDecodeError as exc:
        raise CorpusFormatError(path, line_number, f"invalid JSON ({exc.msg})") from exc
    if not isinstance(data, Mapping):
        raise CorpusFormatError(path, line_number, f"expected a JSON object, got {type(data).__name__}")
    text = data.get("text")
    if not isinstance(text, str):
        raise CorpusFormatError(path, line_number, "record has no string 'text' field")
    return CorpusEntry(text=text)


def read_shard(path: Path) -> List[CorpusEntry]:
    """Load every record of a shard into memory. Blank lines are skipped."""
    entries: List[CorpusEntry] = []
    with path.open("rb") as handle:
        for line_number, raw in enumerate(handle, start=1):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise CorpusFormatError(path, line_number, f"invalid UTF-8 ({exc.reason})") from exc
            if not line.strip():
                continue
            entries.append(parse_record(line, path=path, line_number=line_number))
    return entries


def write_frequency_json(path: Path, payload: Mapping[str, Any]) -> None:
    """Serialize the frequency document atomically with stable key order."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        "w", encoding="utf-8", delete=False, dir=path.parent, suffix=".tmp"
    ) as tmp:
        try:
            json.dump(payload, tmp, ensure_ascii=False, sort_keys=True)
        except BaseException:
            tmp.close()
            os.unlink(tmp.name)
            raise
    os.replace(tmp.name, path)


__all__ = [
    "CorpusFormatError",
    "parse_record",
    "read_shard",
    "resolve_shard_paths",
    "write_frequency_json",
]
