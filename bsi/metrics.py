"""Prometheus metrics for outbound BSI API calls.

Collectors are registered once per process through :func:`get_metric` so a
module reload (tests do this) does not raise duplicate-timeseries errors.
Expose them from the host application the usual way, e.g.::

    from prometheus_client import make_asgi_app
    app.mount("/metrics", make_asgi_app())
"""
from __future__ import annotations

from typing import Any, Dict, Tuple, Type

from prometheus_client import Counter, Histogram

__all__ = ["get_metric", "bsi_requests_total", "bsi_latency_seconds"]

_METRICS: Dict[Tuple[Type[Any], str], Any] = {}


def get_metric(cls: Type[Any], name: str, *args, **kwargs):
    key = (cls, name)
    if key in _METRICS:
        return _METRICS[key]
    metric = cls(name, *args, **kwargs)
    _METRICS[key] = metric
    return metric


bsi_requests_total = get_metric(
    Counter, "bsi_http_requests_total",
    "HTTP requests sent to the BSI API",
    ["target", "status"],
)

bsi_latency_seconds = get_metric(
    Histogram, "bsi_http_latency_seconds",
    "Latency of BSI API requests (seconds)",
    ["target"],
    buckets=(0.1, 0.3, 0.5, 1, 2, 5, 10, 30),
)
