"""MeCab-backed tokenization: feature layouts, the adapter and the worker pool."""

from .pool import AdapterFactory, TaggerPool
from .registry import REGISTRY, DictionaryLayout, get_layout
from .tagger import TaggerInitError, TokenizerAdapter, parse_features
from .tokens import VERB_POS, Token

__all__ = [
    "AdapterFactory",
    "DictionaryLayout",
    "REGISTRY",
    "TaggerInitError",
    "TaggerPool",
    "Token",
    "TokenizerAdapter",
    "VERB_POS",
    "get_layout",
    "parse_features",
]
