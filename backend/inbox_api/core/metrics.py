"""Prometheus counters exposed on /metrics."""

from prometheus_client import Counter

MAIL_PAGE_REQUESTS = Counter(
    "inbox_mail_page_requests",
    "Mail page requests by outcome (ok, client_error, server_error)",
    ["outcome"],
)


def record_mail_page_outcome(status_code: int) -> None:
    if status_code < 400:
        outcome = "ok"
    elif status_code < 500:
        outcome = "client_error"
    else:
        outcome = "server_error"
    MAIL_PAGE_REQUESTS.labels(outcome=outcome).inc()
