"""Tests for corpus configuration, segmentation and shard IO."""

from __future__ import annotations

import json
from pathlib import Path
import sys
from types import GeneratorType

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.corpus.config import RunConfig, default_output_path
from src.corpus.io import (
    CorpusFormatError,
    parse_record,
    read_shard,
    resolve_shard_paths,
    write_frequency_json,
)
from src.corpus.segment import NON_WHITESPACE_SEPARATORS, is_boundary, segment_text


# ---------------------------------------------------------------------------
# Segmenter


def test_segment_splits_on_every_boundary_kind() -> None:
    text = "猫が走った。犬は見た！本当？はい，そう…ええ‥うん\n次 行\t終わり!end"
    assert list(segment_text(text)) == [
        "猫が走った",
        "犬は見た",
        "本当",
        "はい",
        "そう",
        "ええ",
        "うん",
        "次",
        "行",
        "終わり",
        "end",
    ]


def test_segment_drops_empty_spans() -> None:
    assert list(segment_text("。。！？  猫…‥,,犬  ")) == ["猫", "犬"]


def test_segment_only_boundaries_yields_nothing() -> None:
    assert list(segment_text("。！？ 　…")) == []
    assert list(segment_text("")) == []


def test_segment_is_lazy() -> None:
    assert isinstance(segment_text("猫。犬"), GeneratorType)


@pytest.mark.parametrize("char", [" ", "　", "\n", ".", "!", "~", "，", "…", "‥", "。", "！", "？"])
def test_is_boundary_true(char: str) -> None:
    assert is_boundary(char)


@pytest.mark.parametrize("char", ["猫", "カ", "a", "1", "、", "「", "ー"])
def test_is_boundary_false(char: str) -> None:
    assert not is_boundary(char)


@pytest.mark.parametrize("char", sorted(NON_WHITESPACE_SEPARATORS))
def test_information_separators_are_not_boundaries(char: str) -> None:
    assert char.isspace()
    assert not is_boundary(char)
    assert list(segment_text(f"猫{char}犬")) == [f"猫{char}犬"]


# ---------------------------------------------------------------------------
# Configuration


def test_shard_path_is_zero_padded(tmp_path: Path) -> None:
    config = RunConfig(input_dir=tmp_path, shard_prefix="syosetu711k", shard_count=21)
    assert config.shard_path(3) == tmp_path / "syosetu711k-03.jsonl"
    assert config.shard_path(20) == tmp_path / "syosetu711k-20.jsonl"
    with pytest.raises(ValueError):
        config.shard_path(21)


def test_default_config_matches_corpus_layout() -> None:
    config = RunConfig()
    assert config.shard_count == 21
    assert config.workers == 32
    assert config.resolved_output_path == Path("frequency_list_ipadic.json")
    assert default_output_path("unidic") == Path("frequency_list_unidic.json")


@pytest.mark.parametrize("changes", [{"workers": 0}, {"shard_count": 0}, {"shard_prefix": ""}])
def test_validate_rejects_bad_values(changes: dict) -> None:
    with pytest.raises(ValueError):
        RunConfig().with_overrides(**changes).validate()


def test_with_overrides_ignores_none() -> None:
    config = RunConfig().with_overrides(workers=4, output_path=None)
    assert config.workers == 4
    assert config.output_path is None


# ---------------------------------------------------------------------------
# Shard IO


def _write_shard(path: Path, lines: list[str]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_read_shard_keeps_only_text(tmp_path: Path) -> None:
    shard = _write_shard(
        tmp_path / "shard-00.jsonl",
        [
            json.dumps({"text": "猫が走った。", "title": "猫", "userid": 7, "keywords": ["猫", "犬"], "q": 0.5}, ensure_ascii=False),
            "",
            json.dumps({"text": "見られないだ", "genre": None, "userid": "seven"}, ensure_ascii=False),
        ],
    )

    entries = read_shard(shard)

    assert [entry.text for entry in entries] == ["猫が走った。", "見られないだ"]
    assert not hasattr(entries[0], "title")


def test_read_shard_reports_malformed_line(tmp_path: Path) -> None:
    shard = _write_shard(tmp_path / "shard-00.jsonl", [json.dumps({"text": "ok"}), "{not json"])

    with pytest.raises(CorpusFormatError) as excinfo:
        read_shard(shard)

    assert excinfo.value.line_number == 2
    assert excinfo.value.path == shard
    assert "shard-00.jsonl:2" in str(excinfo.value)


@pytest.mark.parametrize("line", ['["text"]', '{"title": "no text"}', '{"text": 3}'])
def test_parse_record_rejects_non_records(line: str) -> None:
    with pytest.raises(CorpusFormatError):
        parse_record(line, path=Path("x.jsonl"), line_number=1)


def test_resolve_shard_paths_requires_every_shard(tmp_path: Path) -> None:
    config = RunConfig(input_dir=tmp_path, shard_prefix="part", shard_count=3)
    for index in (0, 2):
        _write_shard(config.shard_path(index), ['{"text": "猫"}'])

    with pytest.raises(FileNotFoundError) as excinfo:
        resolve_shard_paths(config)
    assert "part-01.jsonl" in str(excinfo.value)

    _write_shard(config.shard_path(1), ['{"text": "猫"}'])
    assert resolve_shard_paths(config) == [config.shard_path(i) for i in range(3)]


def test_write_frequency_json_is_utf8_and_sorted(tmp_path: Path) -> None:
    target = tmp_path / "out" / "frequency.json"
    payload = {"verbs": {"見る": {"pos": "動詞"}, "走る": {"pos": "動詞"}}, "inflections": {"た": 1}}

    write_frequency_json(target, payload)

    raw = target.read_text(encoding="utf-8")
    assert "見る" in raw
    assert raw.index('"inflections"') < raw.index('"verbs"')
    assert json.loads(raw) == payload
    assert [path.name for path in target.parent.iterdir()] == ["frequency.json"]


def test_write_frequency_json_removes_temp_file_on_failure(tmp_path: Path) -> None:
    target = tmp_path / "frequency.json"

    with pytest.raises(TypeError):
        write_frequency_json(target, {"verbs": {"見る": object()}, "inflections": {}})

    assert list(tmp_path.iterdir()) == []


def test_read_shard_reports_invalid_utf8(tmp_path: Path) -> None:
    shard = tmp_path / "shard-00.jsonl"
    shard.write_bytes(b'{"text": "ok"}\n\xff\xfe\n')

    with pytest.raises(CorpusFormatError) as excinfo:
        read_shard(shard)

    assert excinfo.value.line_number == 2
    assert "invalid UTF-8" in str(excinfo.value)
