from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from nlp_enrich.core.config import settings


def _to_set(x: Iterable[str] | None) -> FrozenSet[str]:
    if isinstance(x, str):
        x = [x]
    return frozenset(map(str, x or []))


@dataclass(frozen=True)
class StopWordConfig:
    language: str = "english"  # fallback when the model config has none
    add_stops: FrozenSet[str] = field(default_factory=frozenset)  # extra stop words
    excl_stops: FrozenSet[str] = field(
        default_factory=frozenset
    )  # never stop words, wins over add_stops
    lowercase: bool = True
    min_token_len: int = 1  # shorter tokens are annotated False without lookup

    def __post_init__(self):
        # accept lists/sets from callers, store frozensets
        object.__setattr__(self, "add_stops", _to_set(self.add_stops))
        object.__setattr__(self, "excl_stops", _to_set(self.excl_stops))

    @classmethod
    def from_settings(cls, **overrides) -> "StopWordConfig":
        values = {
            "language": settings.STOPWORDS_LANGUAGE,
            "min_token_len": settings.STOPWORDS_MIN_TOKEN_LEN,
        }
        values.update(overrides)
        return cls(**values)
