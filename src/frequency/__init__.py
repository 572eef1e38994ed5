"""Frequency tables, their merge and the surface script filter."""

from .filters import is_japanese_surface
from .records import SurfaceFrequency
from .tables import FrequencyTable, merge_into, reduce_tables

__all__ = [
    "FrequencyTable",
    "SurfaceFrequency",
    "is_japanese_surface",
    "merge_into",
    "reduce_tables",
]
