import pytest

from nlp_enrich.core.stopword_enrichment.config import StopWordConfig
from nlp_enrich.core.stopword_enrichment.enricher import StopWordsTokenEnricher
from nlp_enrich.core.stopword_enrichment.sources import InMemoryStopWordSource
from nlp_enrich.models.model_config import ModelConfig
from nlp_enrich.models.request import Request
from nlp_enrich.models.token import Token

BASE_WORDS = {"the", "a", "of", "is"}


def make_tokens(*texts):
    tokens = []
    pos = 0
    for i, text in enumerate(texts):
        length = len(text or "")
        tokens.append(Token(text=text, index=i, start_char=pos, end_char=pos + length))
        pos += length + 1
    return tokens


@pytest.fixture
def source():
    return InMemoryStopWordSource({"english": BASE_WORDS})


@pytest.fixture
def model_config():
    return ModelConfig(id="test.model", name="Test model", language="english")


@pytest.fixture
def request_obj():
    return Request(text="The dog is a Foo")


@pytest.fixture
def make_enricher(source):
    def _make(add_stops=None, excl_stops=None, **cfg):
        return StopWordsTokenEnricher(
            add_stops, excl_stops, source=source, config=StopWordConfig(**cfg)
        )

    return _make


@pytest.fixture
def started_enricher(make_enricher, model_config):
    enricher = make_enricher(add_stops={"foo"}, excl_stops={"a"})
    enricher.on_start(model_config)
    yield enricher
    enricher.on_stop(model_config)
