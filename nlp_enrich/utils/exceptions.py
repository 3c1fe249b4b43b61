from typing import Optional


class EnrichmentError(Exception):
    """Base error carrying a stable code and a human readable message."""

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        self.message = message or "An error occurred"
        super().__init__(f"{self.code}: {self.message}")


class ConfigurationError(EnrichmentError):
    """Stop-word resource missing, unreadable or unusable."""


class PreconditionError(EnrichmentError, ValueError):
    """Caller bug: the operation was invoked with invalid arguments."""


class NotStartedError(PreconditionError):
    """Enrichment requested before a successful `on_start`."""

    def __init__(self, code: str = "ENRICHER_NOT_STARTED", message: Optional[str] = None):
        super().__init__(code=code, message=message)
