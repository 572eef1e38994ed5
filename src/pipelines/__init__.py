"""Record, shard and corpus level orchestration of the frequency count."""

from .driver import default_adapter_factory, run_corpus
from .record_runner import process_fragment, process_record
from .shard_runner import run_shard

__all__ = [
    "default_adapter_factory",
    "process_fragment",
    "process_record",
    "run_corpus",
    "run_shard",
]
