"""High-level orchestration for counting a whole sharded corpus."""

from __future__ import annotations

from typing import Optional

from src.corpus.config import RunConfig
from src.corpus.io import read_shard, resolve_shard_paths, write_frequency_json
from src.frequency.tables import FrequencyTable, merge_into
from src.morphology.pool import AdapterFactory, TaggerPool
from src.morphology.tagger import TokenizerAdapter

from .shard_runner import run_shard


def default_adapter_factory(config: RunConfig) -> AdapterFactory:
    """Factory building one MeCab-backed adapter for the configured dictionary."""
    return lambda: TokenizerAdapter.from_dictionary(config.dictionary)


def run_corpus(
    config: RunConfig,
    adapter_factory: Optional[AdapterFactory] = None,
    *,
    write_output: bool = True,
    show_progress: bool = True,
) -> FrequencyTable:
    """
    Count every shard in order and write the combined document once.

    All shard paths are checked before any work starts. Each shard is loaded
    sequentially, processed in parallel, then folded into the global table
    while no workers are running. Nothing is written unless every shard
    succeeds.
    """
    config.validate()
    shard_paths = resolve_shard_paths(config)
    pool = TaggerPool(config.workers, adapter_factory or default_adapter_factory(config))
    global_table = FrequencyTable()

    print(
        f"[corpus] Counting {len(shard_paths)} shard(s) from {config.input_dir} "
        f"with {config.workers} worker(s), dictionary={config.dictionary}"
    )
    total = len(shard_paths)
    for index, path in enumerate(shard_paths):
        entries = read_shard(path)
        print(f"[corpus] Shard {index:02d}/{total - 1:02d}: {len(entries)} records from {path}")
        shard_table = run_shard(
            entries,
            pool,
            config.workers,
            desc=f"[{index:02d}/{total - 1:02d}]",
            show_progress=show_progress,
        )
        merge_into(global_table, shard_table)
        print(
            f"[corpus] Shard {index:02d} done: {len(shard_table.surfaces)} surfaces, "
            f"{shard_table.total_inflections} inflections"
        )

    if write_output:
        output_path = config.resolved_output_path
        write_frequency_json(output_path, global_table.to_payload())
        print(
            f"[corpus] Saved {len(global_table.surfaces)} surfaces and "
            f"{len(global_table.inflections)} inflection tags → {output_path}"
        )
    return global_table


__all__ = ["default_adapter_factory", "run_corpus"]
