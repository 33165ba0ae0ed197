"""Prometheus metrics for monitoring approval rates, approved amounts and rejection reasons"""

from prometheus_client import Counter, Histogram

# Decision metrics
decision_counter = Counter(
    "loan_decision_total",
    "Total loan decisions made",
    ["outcome"],  # approved | rejected | error
)

rejection_counter = Counter(
    "loan_rejection_total",
    "Rejected loan requests by reason",
    ["reason"],
)

approved_amount_bucket_counter = Counter(
    "loan_approved_amount_bucket",
    "Approved loan amounts by bucket",
    ["bucket"],  # <=2000, 2001-5000, 5001-9999, 10000
)

period_extension_counter = Counter(
    "loan_period_extension",
    "Approvals where the period was extended beyond the requested one",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def amount_bucket(approved_amount: int) -> str:
    if approved_amount <= 2000:
        bucket = "<=2000"
    elif approved_amount <= 5000:
        bucket = "2001-5000"
    elif approved_amount < 10000:
        bucket = "5001-9999"
    else:
        bucket = "10000"
    return bucket


def record_decision(approved_amount: int, approved_period: int, requested_period: int) -> None:
    """Record approval metrics for monitoring approval rates and amount distribution"""
    decision_counter.labels(outcome="approved").inc()
    approved_amount_bucket_counter.labels(bucket=amount_bucket(approved_amount)).inc()

    if approved_period > requested_period:
        period_extension_counter.inc()


def record_rejection(reason: str) -> None:
    decision_counter.labels(outcome="rejected").inc()
    rejection_counter.labels(reason=reason).inc()


def record_failure() -> None:
    """System faults are counted apart from business rejections"""
    decision_counter.labels(outcome="error").inc()
