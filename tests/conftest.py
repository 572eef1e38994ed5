"""Shared fakes standing in for MeCab so the suite runs without the analyzer."""

from __future__ import annotations

import threading
from pathlib import Path
import sys
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.morphology.registry import get_layout
from src.morphology.tagger import MECAB_BOS_NODE, MECAB_EOS_NODE, TokenizerAdapter

NodeSpec = Tuple[str, str]

VERB = "動詞,自立,*,*,一段,連用形,{lemma},*,*"
AUX = "助動詞,*,*,*,特殊,基本形,{lemma},*,*"
NOUN = "名詞,一般,*,*,*,*,{lemma},*,*"

# Fragment -> analyzer output, in IPADIC feature layout.
LEXICON: Dict[str, List[NodeSpec]] = {
    "食べませんでした": [
        ("食べ", VERB.format(lemma="食べる")),
        ("ませ", AUX.format(lemma="ます")),
        ("ん", AUX.format(lemma="ん")),
        ("でし", AUX.format(lemma="です")),
        ("た", AUX.format(lemma="た")),
    ],
    "見られないだ": [
        ("見", VERB.format(lemma="見る")),
        ("られ", AUX.format(lemma="られる")),
        ("ない", AUX.format(lemma="ない")),
        ("だ", AUX.format(lemma="だ")),
    ],
    "猫が走った": [
        ("猫", NOUN.format(lemma="猫")),
        ("が", "助詞,格助詞,一般,*,*,*,が,ガ,ガ"),
        ("走っ", VERB.format(lemma="走る")),
        ("た", AUX.format(lemma="た")),
    ],
    "DLした": [
        ("DL", NOUN.format(lemma="DL")),
        ("し", VERB.format(lemma="する")),
        ("た", AUX.format(lemma="た")),
    ],
    "ググった": [
        ("ググっ", VERB.format(lemma="ググる")),
        ("た", AUX.format(lemma="た")),
    ],
    "run2した": [
        ("run2し", VERB.format(lemma="run2する")),
        ("た", AUX.format(lemma="た")),
    ],
    "走る": [("走る", "動詞,自立,*,*,五段・ラ行,基本形,走る,ハシル,ハシル")],
    "走る名": [("走る", "名詞,固有名詞")],
}


class FakeNode:
    def __init__(self, surface: str, feature: str, stat: int = 0) -> None:
        self.surface = surface
        self.feature = feature
        self.stat = stat
        self.next: Optional["FakeNode"] = None


def build_chain(specs: Sequence[NodeSpec]) -> FakeNode:
    """BOS -> nodes -> EOS, like ``MeCab.Tagger.parseToNode``."""
    head = FakeNode("", "BOS/EOS,*,*,*,*,*,*,*,*", stat=MECAB_BOS_NODE)
    tail = head
    for surface, feature in specs:
        tail.next = FakeNode(surface, feature)
        tail = tail.next
    tail.next = FakeNode("", "BOS/EOS,*,*,*,*,*,*,*,*", stat=MECAB_EOS_NODE)
    return head


class FakeTagger:
    """Looks fragments up in LEXICON; unknown fragments become one noun."""

    def __init__(self, lexicon: Optional[Dict[str, List[NodeSpec]]] = None, fail_on: Optional[str] = None) -> None:
        self.lexicon = LEXICON if lexicon is None else lexicon
        self.fail_on = fail_on
        self.threads: Set[int] = set()
        self.calls = 0

    def parseToNode(self, text: str) -> FakeNode:
        self.threads.add(threading.get_ident())
        self.calls += 1
        if self.fail_on is not None and text == self.fail_on:
            raise RuntimeError(f"analyzer failure on {text!r}")
        specs = self.lexicon.get(text, [(text, NOUN.format(lemma=text))])
        return build_chain(specs)


@pytest.fixture
def fake_adapter() -> TokenizerAdapter:
    return TokenizerAdapter(FakeTagger(), get_layout("ipadic"))


@pytest.fixture
def adapter_factory() -> Callable[..., Callable[[], TokenizerAdapter]]:
    """Returns ``make(**tagger_kwargs)``; every adapter built is kept on ``make.built``."""

    def make(**tagger_kwargs: object) -> Callable[[], TokenizerAdapter]:
        built: List[TokenizerAdapter] = []

        def factory() -> TokenizerAdapter:
            adapter = TokenizerAdapter(FakeTagger(**tagger_kwargs), get_layout("ipadic"))  # type: ignore[arg-type]
            built.append(adapter)
            return adapter

        factory.built = built  # type: ignore[attr-defined]
        return factory

    return make
