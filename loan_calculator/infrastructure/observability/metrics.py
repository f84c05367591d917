"""Prometheus metrics for monitoring offers, credit outcomes and refusal reasons"""

from decimal import Decimal

from prometheus_client import Counter, Histogram

# Offer metrics
offers_counter = Counter(
    "loan_offers_generated_total",
    "Total offer lists generated",
)

# Credit metrics
credit_decision_counter = Counter(
    "credit_decision_total",
    "Total credit calculations",
    ["outcome"],  # approved | refused | error
)

refusal_counter = Counter(
    "credit_refusal_total",
    "Credit refusals by rule",
    ["reason"],
)

credit_rate_histogram = Histogram(
    "credit_rate_percent",
    "Final annual rate of approved credits",
    buckets=[2, 4, 6, 8, 10, 12, 14, 16, 18, 20, 25],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_offers() -> None:
    offers_counter.inc()


def record_credit_decision(approved: bool, rate: Decimal | None = None, refusal_code: str | None = None) -> None:
    """Record credit outcome for monitoring approval rates and rate distribution"""
    outcome = "approved" if approved else "refused"
    credit_decision_counter.labels(outcome=outcome).inc()

    if approved and rate is not None:
        credit_rate_histogram.observe(float(rate))
    if refusal_code is not None:
        refusal_counter.labels(reason=refusal_code).inc()


def record_credit_error() -> None:
    credit_decision_counter.labels(outcome="error").inc()
