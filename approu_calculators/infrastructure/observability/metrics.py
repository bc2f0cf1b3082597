"""Prometheus metrics for calculator usage, input failures and rate maintenance"""

from prometheus_client import Counter, Histogram

# Calculator metrics
calculation_counter = Counter(
    "approu_calculation_total",
    "Calculator invocations",
    ["calculator", "outcome"],  # outcome: ok | invalid | error
)

affordability_price_histogram = Histogram(
    "approu_affordability_max_home_price_dollars",
    "Maximum home price returned by the affordability calculator",
    buckets=[100_000, 250_000, 500_000, 750_000, 1_000_000, 1_500_000, 2_500_000],
)

# Posted-rate maintenance
rate_change_counter = Counter(
    "approu_rate_change_total",
    "Posted mortgage rate changes",
    ["action"],  # created | updated | deleted
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculator: str, outcome: str) -> None:
    """Count a calculator call by outcome"""
    calculation_counter.labels(calculator=calculator, outcome=outcome).inc()
