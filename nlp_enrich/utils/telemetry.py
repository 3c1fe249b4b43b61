# nlp_enrich/utils/telemetry.py
"""Tracing helpers. `setup_telemetry()` is called once by the entry point (`nlp_enrich.main`)."""
from __future__ import annotations
import contextlib, time
import logging
from typing import Any, Iterator

from opentelemetry import trace, metrics
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SimpleSpanProcessor

from nlp_enrich.core.config import settings

logger = logging.getLogger("nlp_enrich.obs")

_tracer = trace.get_tracer(__name__)
_step_hist = None


def _build_resource() -> Resource:
    return Resource.create(
        {
            "service.name": settings.OTEL_SERVICE_NAME or settings.SERVICE_NAME,
            "service.version": settings.OTEL_SERVICE_VERSION or "unknown",
            "deployment.environment": settings.ENV,
        }
    )


def setup_telemetry(*, console_export: bool | None = None) -> TracerProvider:
    if console_export is None:
        console_export = settings.OTEL_CONSOLE_EXPORT

    tp = TracerProvider(resource=_build_resource())
    if console_export:
        tp.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(tp)

    global _step_hist
    meter = metrics.get_meter("nlp_enrich.obs")
    _step_hist = meter.create_histogram(
        "nlp_enrich.step.duration", unit="ms", description="Enrichment step duration"
    )
    logger.info("Telemetry initialized (console_export=%s)", console_export)
    return tp


# helpers
@contextlib.contextmanager
def step(name: str, **attrs: Any) -> Iterator[None]:
    start = time.perf_counter()
    with _tracer.start_as_current_span(name) as span:
        for k, v in attrs.items():
            if v is not None:
                span.set_attribute(f"nlp_enrich.{k}", v)
        try:
            yield
            span.set_attribute("nlp_enrich.success", True)
        except Exception as e:
            span.record_exception(e)
            span.set_attribute("nlp_enrich.success", False)
            span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
            raise
        finally:
            if _step_hist:
                _step_hist.record((time.perf_counter() - start) * 1000, {"step": name})
