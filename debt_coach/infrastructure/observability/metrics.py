"""Prometheus metrics for coach traffic and tracked debts"""

from prometheus_client import Counter, Histogram, Gauge

# Coach metrics
coach_request_counter = Counter(
    "debt_coach_coach_requests_total",
    "Coach requests by endpoint and outcome",
    ["endpoint", "outcome"],  # chat | explain ; ok | blocked | provider_error | needs_debts
)

coach_latency_histogram = Histogram(
    "debt_coach_coach_latency_seconds",
    "Completion provider response time",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

# Store metrics
debts_tracked_gauge = Gauge(
    "debt_coach_debts_tracked",
    "Debts currently held in memory",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_coach_outcome(endpoint: str, outcome: str) -> None:
    """Count one coach request outcome"""
    coach_request_counter.labels(endpoint=endpoint, outcome=outcome).inc()


def record_debt_count(count: int) -> None:
    debts_tracked_gauge.set(count)
