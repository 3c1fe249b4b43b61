from __future__ import annotations
from typing import Any, FrozenSet, Iterable, Optional

from nlp_enrich.core.stopword_enrichment.base import StopWordSource
from nlp_enrich.messages import stopword_messages as msg
from nlp_enrich.utils.exceptions import ConfigurationError


def normalize(text: Any, lowercase: bool = True) -> str:
    """Lookup key for both dictionary entries and token texts."""
    if text is None:
        return ""
    s = str(text).strip()
    return s.lower() if lowercase else s


class StopWordDictionary:
    """
    Effective stop-word set: (base | additions) - exclusions.

    Built once and never mutated. Exclusion is applied last, so a word listed in
    both `additions` and `exclusions` is not a stop word.
    """

    def __init__(
        self,
        base: Iterable[str],
        additions: Optional[Iterable[str]] = None,
        exclusions: Optional[Iterable[str]] = None,
        lowercase: bool = True,
    ):
        self.lowercase = lowercase
        self._base = self._normalize_all(base)
        self._additions = self._normalize_all(additions)
        self._exclusions = self._normalize_all(exclusions)
        self._effective = (self._base | self._additions) - self._exclusions

    @classmethod
    def from_source(
        cls,
        source: StopWordSource,
        language: str,
        additions: Optional[Iterable[str]] = None,
        exclusions: Optional[Iterable[str]] = None,
        lowercase: bool = True,
    ) -> "StopWordDictionary":
        base = source.load(language)
        if not base:
            raise ConfigurationError(
                code="STOPWORDS_RESOURCE_EMPTY",
                message=msg.RESOURCE_EMPTY.format(language=language),
            )
        return cls(base, additions, exclusions, lowercase=lowercase)

    def _normalize_all(self, words: Optional[Iterable[str]]) -> FrozenSet[str]:
        out = {normalize(w, self.lowercase) for w in (words or ())}
        out.discard("")
        return frozenset(out)

    def normalize(self, text: Any) -> str:
        return normalize(text, self.lowercase)

    def is_stop_word(self, normalized_text: str) -> bool:
        return normalized_text in self._effective

    @property
    def base(self) -> FrozenSet[str]:
        return self._base

    @property
    def additions(self) -> FrozenSet[str]:
        return self._additions

    @property
    def exclusions(self) -> FrozenSet[str]:
        return self._exclusions

    @property
    def effective(self) -> FrozenSet[str]:
        return self._effective

    def __contains__(self, word: object) -> bool:
        return self.is_stop_word(self.normalize(word))

    def __len__(self) -> int:
        return len(self._effective)

    def __repr__(self) -> str:
        return (
            f"StopWordDictionary(base={len(self._base)}, "
            f"additions={len(self._additions)}, exclusions={len(self._exclusions)}, "
            f"effective={len(self._effective)})"
        )
