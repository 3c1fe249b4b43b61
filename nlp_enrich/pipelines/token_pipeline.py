from __future__ import annotations
import logging
from typing import Any, List, MutableSequence, Sequence

from nlp_enrich.core.stopword_enrichment.base import TokenEnricher
from nlp_enrich.messages import stopword_messages as msg
from nlp_enrich.models.model_config import ModelConfig
from nlp_enrich.models.token import Token
from nlp_enrich.utils.exceptions import NotStartedError, PreconditionError
from nlp_enrich.utils.telemetry import step

logger = logging.getLogger(__name__)


class TokenPipeline:
    """
    Drives a sequence of enrichers for one model config:
    start() -> process() per request -> stop().
    Callers must not run process() concurrently with start()/stop().
    """

    def __init__(self, config: ModelConfig, enrichers: Sequence[TokenEnricher]):
        if config is None:
            raise PreconditionError(
                code="MODEL_CONFIG_REQUIRED", message=msg.MODEL_CONFIG_REQUIRED
            )
        self.config = config
        self.enrichers: List[TokenEnricher] = list(enrichers)
        self._started: List[TokenEnricher] = []
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        for enricher in self.enrichers:
            try:
                with step("enricher.start", enricher=type(enricher).__name__):
                    enricher.on_start(self.config)
            except Exception:
                logger.error(
                    "Enricher %s failed to start, rolling back",
                    type(enricher).__name__,
                )
                self._stop_started()
                raise
            self._started.append(enricher)
        self._running = True
        logger.info("%s config=%s", msg.PIPELINE_STARTED, self.config.id)

    def process(self, request: Any, tokens: MutableSequence[Token]) -> MutableSequence[Token]:
        if not self._running:
            raise NotStartedError(
                code="PIPELINE_NOT_STARTED", message=msg.PIPELINE_NOT_STARTED
            )
        for enricher in self.enrichers:
            name = type(enricher).__name__
            with step(f"enrich.{name}", config=self.config.id, tokens=len(tokens)):
                enricher.enrich(request, self.config, tokens)
        return tokens

    def _stop_started(self) -> None:
        # reverse order of start
        while self._started:
            enricher = self._started.pop()
            try:
                enricher.on_stop(self.config)
            except Exception as e:
                logger.warning("Enricher %s failed to stop: %s", type(enricher).__name__, e)

    def stop(self) -> None:
        self._stop_started()
        if self._running:
            self._running = False
            logger.info("%s config=%s", msg.PIPELINE_STOPPED, self.config.id)

    def __enter__(self) -> "TokenPipeline":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
