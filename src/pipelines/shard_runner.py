from __future__ import annotations

import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from tqdm import tqdm

from src.corpus.records import CorpusEntry
from src.frequency.tables import FrequencyTable, reduce_tables
from src.morphology.pool import TaggerPool

from .record_runner import process_record


def _drain_records(
    worker_id: int,
    entries: Sequence[CorpusEntry],
    pending: "queue.SimpleQueue[int]",
    results: List[Optional[FrequencyTable]],
    pool: TaggerPool,
    on_record: Callable[[], None],
    abort: threading.Event,
) -> None:
    """Worker loop: hold one adapter and process records until the queue runs dry."""
    with pool.lease(worker_id) as adapter:
        while not abort.is_set():
            try:
                index = pending.get_nowait()
            except queue.Empty:
                return
            try:
                results[index] = process_record(entries[index].text, adapter)
            except BaseException:
                # Stop the other workers; the exception surfaces through the future.
                abort.set()
                raise
            on_record()


def run_shard(
    entries: Sequence[CorpusEntry],
    pool: TaggerPool,
    workers: Optional[int] = None,
    *,
    desc: str = "Records",
    show_progress: bool = True,
) -> FrequencyTable:
    """
    Count every record of one shard on a fixed-size worker pool.

    Worker ``k`` leases tagger slot ``k`` for the whole shard and pulls record
    indices from a shared queue. Per-record tables are reduced in record order
    once every worker has finished, so the result does not depend on the
    number of workers or on scheduling.
    """
    worker_count = workers or pool.size
    if not 1 <= worker_count <= pool.size:
        raise ValueError(f"workers must be within 1..{pool.size}, got {worker_count}.")

    pending: "queue.SimpleQueue[int]" = queue.SimpleQueue()
    for index in range(len(entries)):
        pending.put(index)
    results: List[Optional[FrequencyTable]] = [None] * len(entries)
    abort = threading.Event()

    with tqdm(total=len(entries), desc=desc, leave=False, disable=not show_progress) as bar:
        bar_lock = threading.Lock()

        def on_record() -> None:
            with bar_lock:
                bar.update(1)

        with ThreadPoolExecutor(max_workers=worker_count) as executor:
            futures = [
                executor.submit(_drain_records, worker_id, entries, pending, results, pool, on_record, abort)
                for worker_id in range(worker_count)
            ]
            for future in futures:
                future.result()

    if any(table is None for table in results):
        raise RuntimeError("Shard finished with unprocessed records.")
    return reduce_tables(table for table in results if table is not None)


__all__ = ["run_shard"]
