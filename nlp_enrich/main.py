# nlp_enrich/main.py
"""
Command line entry point: annotate pre-tokenized text, one token per line.

    python -m nlp_enrich.main tokens.txt --add foo --exclude a
"""
import argparse
import logging
import sys

from nlp_enrich.core.logging import setup_logging
from nlp_enrich.core.stopword_enrichment.config import StopWordConfig
from nlp_enrich.core.stopword_enrichment.enricher import StopWordsTokenEnricher
from nlp_enrich.core.stopword_enrichment.sources import build_stopword_source
from nlp_enrich.models.model_config import ModelConfig
from nlp_enrich.models.request import Request
from nlp_enrich.models.token import Token
from nlp_enrich.pipelines.token_pipeline import TokenPipeline
from nlp_enrich.utils.exceptions import EnrichmentError
from nlp_enrich.utils.telemetry import setup_telemetry

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mark stop words in a token list")
    parser.add_argument(
        "file_input", type=str, help="Path to a file with one token per line, or '-'"
    )
    parser.add_argument("--language", type=str, default=None)
    parser.add_argument("--source", type=str, default=None, help="'file' or 'nltk'")
    parser.add_argument("--add", action="append", default=[], help="Extra stop word")
    parser.add_argument(
        "--exclude", action="append", default=[], help="Never a stop word"
    )
    parser.add_argument("--min-token-len", type=int, default=None)
    return parser


def read_tokens(lines) -> list:
    tokens = []
    pos = 0
    for i, line in enumerate(lines):
        text = line.rstrip("\n")
        tokens.append(Token(text=text, index=i, start_char=pos, end_char=pos + len(text)))
        pos += len(text) + 1
    return tokens


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # ✅ SETUP LOGGING FIRST
    setup_logging()
    setup_telemetry()

    overrides = {"add_stops": args.add, "excl_stops": args.exclude}
    if args.language:
        overrides["language"] = args.language
    if args.min_token_len is not None:
        overrides["min_token_len"] = args.min_token_len
    cfg = StopWordConfig.from_settings(**overrides)

    if args.file_input == "-":
        tokens = read_tokens(sys.stdin)
    else:
        with open(args.file_input, "r", encoding="utf-8") as f:
            tokens = read_tokens(f)

    try:
        enricher = StopWordsTokenEnricher(
            source=build_stopword_source(args.source), config=cfg
        )
        model = ModelConfig(id="cli", name="command line", language=cfg.language)
        request = Request(text=" ".join(t.text for t in tokens))
        with TokenPipeline(model, [enricher]) as pipeline:
            pipeline.process(request, tokens)
    except EnrichmentError as e:
        logger.error("Enrichment failed: %s", e)
        return 1

    for t in tokens:
        print(f"{t.text}\t{t.is_stop_word}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
