from __future__ import annotations
import dataclasses
import logging
from typing import Any, Iterable, MutableSequence, Optional

from nlp_enrich.core.stopword_enrichment.base import StopWordSource, TokenEnricher
from nlp_enrich.core.stopword_enrichment.config import StopWordConfig
from nlp_enrich.core.stopword_enrichment.dictionary import StopWordDictionary
from nlp_enrich.core.stopword_enrichment.sources import build_stopword_source
from nlp_enrich.messages import stopword_messages as msg
from nlp_enrich.models.model_config import ModelConfig
from nlp_enrich.models.token import Token
from nlp_enrich.utils.exceptions import NotStartedError, PreconditionError

logger = logging.getLogger(__name__)


class StopWordsTokenEnricher(TokenEnricher):
    """
    Sets `Token.is_stop_word` from a base dictionary adjusted by additions and
    exclusions.
    - The dictionary is built by `on_start` for the config's language
    - `enrich` only reads the frozen dictionary, so one instance can serve
      concurrent requests
    - `on_stop` never raises
    """

    def __init__(
        self,
        add_stops: Optional[Iterable[str]] = None,
        excl_stops: Optional[Iterable[str]] = None,
        *,
        source: StopWordSource | None = None,
        config: StopWordConfig | None = None,
    ):
        cfg = config or StopWordConfig.from_settings()
        if add_stops is not None:
            cfg = dataclasses.replace(cfg, add_stops=add_stops)
        if excl_stops is not None:
            cfg = dataclasses.replace(cfg, excl_stops=excl_stops)
        if cfg.min_token_len < 1:
            raise PreconditionError(
                code="INVALID_MIN_TOKEN_LEN",
                message=msg.INVALID_MIN_TOKEN_LEN.format(value=cfg.min_token_len),
            )
        self.cfg = cfg
        self.source = source or build_stopword_source()
        self._dictionary: StopWordDictionary | None = None

    @property
    def dictionary(self) -> StopWordDictionary | None:
        return self._dictionary

    @property
    def is_started(self) -> bool:
        return self._dictionary is not None

    def on_start(self, config: ModelConfig) -> None:
        if config is None:
            raise PreconditionError(
                code="MODEL_CONFIG_REQUIRED", message=msg.MODEL_CONFIG_REQUIRED
            )
        language = getattr(config, "language", None) or self.cfg.language
        self._dictionary = None
        try:
            dictionary = StopWordDictionary.from_source(
                self.source,
                language,
                additions=self.cfg.add_stops,
                exclusions=self.cfg.excl_stops,
                lowercase=self.cfg.lowercase,
            )
        except Exception:
            logger.error(
                "Stop-word dictionary for %r (language=%s) failed to load",
                getattr(config, "id", config),
                language,
            )
            raise
        self._dictionary = dictionary
        logger.info("%s %r", msg.ENRICHER_STARTED, dictionary)

    def _classify(self, dictionary: StopWordDictionary, text: Any) -> bool:
        key = dictionary.normalize(text)
        if len(key) < self.cfg.min_token_len:
            return False
        return dictionary.is_stop_word(key)

    def enrich(
        self, request: Any, config: ModelConfig, tokens: MutableSequence[Token]
    ) -> None:
        if config is None:
            raise PreconditionError(
                code="MODEL_CONFIG_REQUIRED", message=msg.MODEL_CONFIG_REQUIRED
            )
        dictionary = self._dictionary
        if dictionary is None:
            raise NotStartedError(message=msg.ENRICHER_NOT_STARTED)

        for tok in tokens:
            try:
                tok.is_stop_word = self._classify(dictionary, tok.text)
            except Exception as e:
                logger.warning(
                    "Skipping token at index %s: %s: %s",
                    getattr(tok, "index", "?"),
                    type(e).__name__,
                    e,
                )

    def on_stop(self, config: ModelConfig) -> None:
        self._dictionary = None
        try:
            self.source.close()
        except Exception as e:
            logger.warning("Stop-word source cleanup failed: %s", e)
            return
        logger.info(msg.ENRICHER_STOPPED)
