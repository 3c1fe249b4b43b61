from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, FrozenSet, MutableSequence

from nlp_enrich.models.model_config import ModelConfig
from nlp_enrich.models.token import Token


class TokenEnricher(ABC):
    """Port: annotate tokens in place without changing their identity, span or text."""

    def on_start(self, config: ModelConfig) -> None:
        """Called once before any `enrich` call for `config`."""

    @abstractmethod
    def enrich(
        self, request: Any, config: ModelConfig, tokens: MutableSequence[Token]
    ) -> None: ...

    def on_stop(self, config: ModelConfig) -> None:
        """Called once when `config` is torn down. Must not raise."""


class StopWordSource(ABC):
    """Port: supply the base stop-word list for a language."""

    @abstractmethod
    def load(self, language: str) -> FrozenSet[str]:
        """
        Returns the raw base words for `language`.
        Raises ConfigurationError when the resource cannot be loaded.
        """
        ...

    def close(self) -> None:
        """Release anything held by the source (no-op by default)."""
