"""Adapter turning MeCab node chains into Token sequences."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Protocol

from .registry import DictionaryLayout, get_layout, tagger_args
from .tokens import Token

# Sentinel node states emitted by MeCab around every parse.
MECAB_BOS_NODE = 2
MECAB_EOS_NODE = 3
SENTINEL_STATES = frozenset({MECAB_BOS_NODE, MECAB_EOS_NODE})


class TaggerInitError(RuntimeError):
    """MeCab or its dictionary package could not be loaded."""


class NodeTagger(Protocol):
    """The slice of ``MeCab.Tagger`` the adapter relies on."""

    def parseToNode(self, text: str) -> Any: ...


def parse_features(surface: str, feature: str, layout: DictionaryLayout) -> Token:
    """Build a Token from a surface and its comma-separated feature string."""
    fields = feature.split(",")
    pos = fields[layout.pos_field] if layout.pos_field < len(fields) else ""
    lemma = fields[layout.lemma_field] if layout.lemma_field < len(fields) else ""
    return Token(surface=surface, pos=pos, lemma=lemma)


def iter_nodes(head: Any) -> Iterator[Any]:
    """Walk a MeCab node chain, skipping the BOS/EOS sentinels."""
    node = head
    while node is not None:
        if node.stat not in SENTINEL_STATES:
            yield node
        node = node.next


class TokenizerAdapter:
    """
    Owns one stateful MeCab tagger and exposes ``parse(fragment) -> List[Token]``.

    A tagger is not reentrant, so an adapter must only ever be driven by one
    worker at a time; see ``TaggerPool`` for how workers obtain one.
    """

    def __init__(self, tagger: NodeTagger, layout: DictionaryLayout) -> None:
        self._tagger = tagger
        self.layout = layout

    @classmethod
    def from_dictionary(cls, dictionary: str = "ipadic", extra_args: Optional[str] = None) -> "TokenizerAdapter":
        """Instantiate a fresh MeCab tagger for the named dictionary layout."""
        layout = get_layout(dictionary)
        try:
            import MeCab

            args = " ".join(part for part in (tagger_args(layout), extra_args or "") if part)
            tagger = MeCab.Tagger(args)
        except (ImportError, RuntimeError) as exc:
            raise TaggerInitError(f"Cannot start MeCab with the {dictionary} dictionary: {exc}") from exc
        return cls(tagger, layout)

    def parse(self, fragment: str) -> List[Token]:
        if not fragment:
            return []
        head = self._tagger.parseToNode(fragment)
        return [parse_features(node.surface, node.feature, self.layout) for node in iter_nodes(head)]


__all__ = [
    "MECAB_BOS_NODE",
    "MECAB_EOS_NODE",
    "NodeTagger",
    "TaggerInitError",
    "TokenizerAdapter",
    "iter_nodes",
    "parse_features",
]
