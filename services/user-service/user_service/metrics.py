"""Prometheus instruments exported on ``/metrics``."""

from __future__ import annotations

from prometheus_client import Counter

USER_CREATION_REQUESTS = Counter(
    "user_creation_requests_total",
    "User creation requests by outcome.",
    ["outcome"],
)


def record_outcome(outcome: str) -> None:
    USER_CREATION_REQUESTS.labels(outcome=outcome).inc()
