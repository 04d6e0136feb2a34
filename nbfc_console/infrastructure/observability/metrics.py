"""Prometheus metrics for monitoring score distribution, access denials, and disbursement retries"""

from prometheus_client import Counter, Histogram

# Scoring metrics
credit_score_counter = Counter(
    "nbfc_credit_score_total",
    "Credit scores calculated",
    ["band"],  # Poor | Fair | Good | Excellent
)

credit_score_histogram = Histogram(
    "nbfc_credit_score_value",
    "Distribution of calculated credit scores",
    buckets=[300, 500, 650, 750, 850],
)

# Access control metrics
permission_check_counter = Counter(
    "nbfc_permission_check_total",
    "Permission checks at view gates",
    ["outcome"],  # granted | denied
)

# Disbursement metrics
disbursement_retry_counter = Counter(
    "nbfc_disbursement_retry_total",
    "Disbursement retries by settled outcome",
    ["outcome"],  # success | failed
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_credit_score(score: int, band: str) -> None:
    credit_score_counter.labels(band=band).inc()
    credit_score_histogram.observe(score)


def record_permission_check(granted: bool) -> None:
    permission_check_counter.labels(outcome="granted" if granted else "denied").inc()


def record_disbursement_retry(status: str) -> None:
    disbursement_retry_counter.labels(outcome=status).inc()
