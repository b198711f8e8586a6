"""Prometheus instrumentation for outgoing requests."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNTER = Counter(
    "webservice_client_requests_total",
    "HTTP attempts made by web service clients",
    ["method", "status"],
)
RETRY_COUNTER = Counter(
    "webservice_client_retries_total",
    "Attempts repeated after a server error",
    ["method"],
)
REQUEST_LATENCY = Histogram(
    "webservice_client_request_latency_seconds",
    "Latency of a single HTTP attempt",
    ["method"],
)


def record_attempt(method: str, status: str, elapsed: float) -> None:
    REQUEST_COUNTER.labels(method=method, status=status).inc()
    REQUEST_LATENCY.labels(method=method).observe(elapsed)


def record_retry(method: str) -> None:
    RETRY_COUNTER.labels(method=method).inc()


__all__ = ["REQUEST_COUNTER", "RETRY_COUNTER", "REQUEST_LATENCY", "record_attempt", "record_retry"]
