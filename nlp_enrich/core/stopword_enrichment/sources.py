from __future__ import annotations
import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Mapping, Optional

import nltk
from nltk.corpus import stopwords as nltk_stopwords

from nlp_enrich.core.config import settings
from nlp_enrich.core.stopword_enrichment.base import StopWordSource
from nlp_enrich.messages import stopword_messages as msg
from nlp_enrich.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PACKAGED_STOPWORDS_DIR = Path(__file__).resolve().parents[2] / "resources" / "stopwords"


def parse_word_list(lines: Iterable[str]) -> FrozenSet[str]:
    """One word per line; blank lines and `#` comments are ignored."""
    words = set()
    for line in lines:
        w = line.strip()
        if not w or w.startswith("#"):
            continue
        words.add(w)
    return frozenset(words)


class FileStopWordSource(StopWordSource):
    """Adapter: versioned word lists stored as `<directory>/<language>.txt`."""

    def __init__(self, directory: str | Path | None = None):
        self.directory = Path(directory) if directory else PACKAGED_STOPWORDS_DIR

    def path_for(self, language: str) -> Path:
        # language names select a file, never a path
        if not language or Path(language).name != language:
            raise ConfigurationError(
                code="STOPWORDS_RESOURCE_UNAVAILABLE",
                message=msg.RESOURCE_NOT_FOUND.format(language=language),
            )
        return self.directory / f"{language}.txt"

    def load(self, language: str) -> FrozenSet[str]:
        path = self.path_for(language)
        if not path.is_file():
            raise ConfigurationError(
                code="STOPWORDS_RESOURCE_UNAVAILABLE",
                message=msg.RESOURCE_NOT_FOUND.format(language=language),
            )
        try:
            with path.open("r", encoding="utf-8") as f:
                words = parse_word_list(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                code="STOPWORDS_RESOURCE_UNAVAILABLE",
                message=msg.RESOURCE_UNREADABLE.format(language=language),
            ) from e
        logger.info("Loaded %d stop words from %s", len(words), path)
        return words


class NltkStopWordSource(StopWordSource):
    """Adapter: NLTK `stopwords` corpus."""

    def __init__(self, auto_download: bool = False):
        self.auto_download = auto_download

    def _ensure_corpus(self) -> None:
        try:
            nltk.data.find("corpora/stopwords")
        except LookupError:
            if not self.auto_download:
                raise ConfigurationError(
                    code="STOPWORDS_RESOURCE_UNAVAILABLE",
                    message=msg.NLTK_CORPUS_MISSING,
                )
            logger.info("Downloading NLTK stopwords corpus")
            nltk.download("stopwords", quiet=True)

    def load(self, language: str) -> FrozenSet[str]:
        self._ensure_corpus()
        try:
            words = nltk_stopwords.words(language)
        except (LookupError, OSError) as e:
            raise ConfigurationError(
                code="STOPWORDS_RESOURCE_UNAVAILABLE",
                message=msg.RESOURCE_NOT_FOUND.format(language=language),
            ) from e
        return frozenset(words)


class InMemoryStopWordSource(StopWordSource):
    """Adapter: caller supplied word lists, keyed by language."""

    def __init__(self, words_by_language: Mapping[str, Iterable[str]]):
        self._words = {
            lang: frozenset(words) for lang, words in words_by_language.items()
        }

    def load(self, language: str) -> FrozenSet[str]:
        try:
            return self._words[language]
        except KeyError:
            raise ConfigurationError(
                code="STOPWORDS_RESOURCE_UNAVAILABLE",
                message=msg.RESOURCE_NOT_FOUND.format(language=language),
            ) from None


def build_stopword_source(name: Optional[str] = None) -> StopWordSource:
    name = (name or settings.STOPWORDS_SOURCE).lower()
    if name == "file":
        return FileStopWordSource(settings.STOPWORDS_DIR)
    if name == "nltk":
        return NltkStopWordSource(auto_download=settings.NLTK_AUTO_DOWNLOAD)
    raise ConfigurationError(
        code="UNKNOWN_STOPWORD_SOURCE", message=msg.UNKNOWN_SOURCE.format(name=name)
    )
