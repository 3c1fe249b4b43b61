# nlp_enrich/core/logging.py

import logging
import sys
import requests
from nlp_enrich.core.config import settings


class BetterStackHandler(logging.Handler):
    def __init__(self, api_key: str, host: str = "https://in.logs.betterstack.com"):
        super().__init__()
        self.api_key = api_key
        self.host = host

    def emit(self, record):
        log_entry = self.format(record)
        try:
            response = requests.post(
                self.host,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json={
                    "dt": record.created,
                    "message": log_entry,
                },
                timeout=3,
            )
            if response.status_code not in (200, 202):
                sys.stderr.write(f"BetterStack logging failed: {response.text}\n")
        except requests.RequestException as e:
            sys.stderr.write(f"Exception while logging to BetterStack: {e}\n")


def setup_logging(level: str | None = None):
    """Configure the root logger. Called once by the entry point (`nlp_enrich.main`)."""
    logger = logging.getLogger()
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    logger.handlers = []

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if settings.is_production and settings.BETTERSTACK_API_KEY:
        shipping_handler = BetterStackHandler(
            settings.BETTERSTACK_API_KEY,
            host=settings.BETTERSTACK_HOST or "https://in.logs.betterstack.com",
        )
        shipping_handler.setFormatter(formatter)
        logger.addHandler(shipping_handler)

    logger.info("✅ Logging system initialized")
    return logger
