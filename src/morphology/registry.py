"""Dictionary registry for the MeCab feature layouts we understand.

MeCab reports each token's features as one comma-separated string whose field
order depends on the installed dictionary. Each entry here records where the
coarse part of speech and the dictionary form live so the tagger adapter can
stay layout-agnostic.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.corpus.config import DictionaryName


@dataclass(frozen=True)
class DictionaryLayout:
    """Field positions inside a MeCab feature string."""

    name: DictionaryName
    pos_field: int
    lemma_field: int


REGISTRY: dict[DictionaryName, DictionaryLayout] = {
    # 品詞,品詞細分類1,品詞細分類2,品詞細分類3,活用型,活用形,原形,読み,発音
    "ipadic": DictionaryLayout(name="ipadic", pos_field=0, lemma_field=6),
    # pos1..pos4,cType,cForm,lForm,lemma,orth,pron,orthBase,...
    "unidic": DictionaryLayout(name="unidic", pos_field=0, lemma_field=10),
}


def get_layout(name: str) -> DictionaryLayout:
    """Return the DictionaryLayout registered under ``name``."""
    try:
        return REGISTRY[name]  # type: ignore[index]
    except KeyError as exc:
        raise ValueError(f"Unknown dictionary '{name}'. Available: {list(REGISTRY)}") from exc


def tagger_args(layout: DictionaryLayout) -> str:
    """MeCab command-line arguments selecting the dictionary for ``layout``."""
    if layout.name == "ipadic":
        import ipadic

        return ipadic.MECAB_ARGS
    import unidic_lite

    dicdir = unidic_lite.DICDIR
    return f'-r "{dicdir}/mecabrc" -d "{dicdir}"'
