"""Prometheus metrics for monitoring quota status, processed calls and request latency"""

from prometheus_client import Counter, Histogram

# Usage metrics
usage_status_counter = Counter(
    "voxa_usage_calculations_total",
    "Usage calculations by resulting quota status",
    ["status"],  # normal | warning | danger | exceeded
)

calls_processed_histogram = Histogram(
    "voxa_calls_per_request",
    "Call records received per calculation request",
    ["endpoint"],
    buckets=[0, 10, 50, 100, 500, 1000, 5000, 10000],
)

# Rejections
rejected_request_counter = Counter(
    "voxa_rejected_requests_total",
    "Calculation requests rejected by input validation",
    ["reason"],  # plan_mismatch | call_ownership | invalid_period
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_usage(status: str, call_count: int) -> None:
    """Record usage metrics for monitoring how close clients run to their allowance"""
    usage_status_counter.labels(status=status).inc()
    calls_processed_histogram.labels(endpoint="usage").observe(call_count)


def record_calls_processed(endpoint: str, call_count: int) -> None:
    calls_processed_histogram.labels(endpoint=endpoint).observe(call_count)
