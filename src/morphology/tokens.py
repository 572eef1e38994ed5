from dataclasses import dataclass

VERB_POS = "動詞"


@dataclass(frozen=True)
class Token:
    """Single analyzer token (or merged verb form) within one fragment."""

    surface: str
    pos: str
    lemma: str

    @property
    def is_verb(self) -> bool:
        return self.pos == VERB_POS
