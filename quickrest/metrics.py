"""
Prometheus metrics for quickrest

Counters and histograms for outgoing calls.
Host application should expose the prometheus_client registry.
"""

import logging
from typing import Union

from prometheus_client import Counter, Histogram

logger = logging.getLogger("quickrest.metrics")

REQUEST_COUNT = Counter(
    "quickrest_requests_total",
    "Total number of HTTP calls made by quickrest",
    ["method", "code"],
)

REQUEST_LATENCY = Histogram(
    "quickrest_request_latency_seconds",
    "quickrest HTTP call latency in seconds",
    ["method"],
)


def metrics_request(method: str, code: Union[int, str], latency: float) -> None:
    """
    Record metrics for one call.

    Args:
        method: HTTP method (e.g., 'GET')
        code: HTTP status code, or 'error' when the call failed
        latency: Call duration in seconds
    """
    try:
        REQUEST_COUNT.labels(method=method, code=str(code)).inc()
        REQUEST_LATENCY.labels(method=method).observe(latency)
    except Exception as e:
        # Metrics failures should not fail the call
        logger.debug("Failed to record metrics: %s", e)
