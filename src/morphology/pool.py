"""Worker-keyed pool of tokenizer adapters."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Set

from .tagger import TokenizerAdapter

AdapterFactory = Callable[[], TokenizerAdapter]


class TaggerPool:
    """
    One TokenizerAdapter per worker slot, created on first lease.

    Slot ``k`` belongs to worker ``k`` for as long as the lease is held; a
    second concurrent lease of the same slot is a programming error.
    """

    def __init__(self, size: int, factory: AdapterFactory) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._factory = factory
        self._adapters: Dict[int, TokenizerAdapter] = {}
        self._leased: Set[int] = set()
        self._lock = threading.Lock()

    def _checkout(self, worker_id: int) -> TokenizerAdapter:
        if not 0 <= worker_id < self.size:
            raise ValueError(f"worker_id {worker_id} outside pool of size {self.size}")
        with self._lock:
            if worker_id in self._leased:
                raise RuntimeError(f"Tagger slot {worker_id} is already leased")
            self._leased.add(worker_id)
            adapter = self._adapters.get(worker_id)
        if adapter is None:
            # Construction happens outside the lock; the slot is already reserved.
            try:
                adapter = self._factory()
            except BaseException:
                self._release(worker_id)
                raise
            with self._lock:
                self._adapters[worker_id] = adapter
        return adapter

    def _release(self, worker_id: int) -> None:
        with self._lock:
            self._leased.discard(worker_id)

    @contextmanager
    def lease(self, worker_id: int) -> Iterator[TokenizerAdapter]:
        """Hold worker ``worker_id``'s adapter for the duration of the block."""
        adapter = self._checkout(worker_id)
        try:
            yield adapter
        finally:
            self._release(worker_id)

    def is_leased(self, worker_id: int) -> bool:
        with self._lock:
            return worker_id in self._leased


__all__ = ["AdapterFactory", "TaggerPool"]
