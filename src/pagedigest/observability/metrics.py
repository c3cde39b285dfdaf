"""
Defines Prometheus metrics for extraction and summarization.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Histogram as _OrigHistogram

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Re-importing this module (test reloads, multiple entry points) must reuse
# the collectors already registered instead of failing on duplicate names.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing
        try:
            return metric_cls(name, documentation, *args, **kwargs)
        except ValueError:
            # Registration lost the race; use the collector that won.
            return _PROM_REGISTRY._names_to_collectors[name]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)
Histogram = _duplicate_safe_factory(_OrigHistogram)

METRICS: Dict[str, Any] = {
    "extractions_total": Counter(
        "pagedigest_extractions_total",
        "Main-content extractions by outcome (rule, fallback or empty)",
        ["outcome"],
    ),
    "summaries_total": Counter(
        "pagedigest_summaries_total",
        "Summaries produced, by provider and status",
        ["provider", "status"],
    ),
    "stage_duration_seconds": Histogram(
        "pagedigest_stage_duration_seconds",
        "Time spent in a digest pipeline stage",
        ["stage"],
        buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
    ),
}


def increment(name: str, value: float = 1.0, **labels: str) -> None:
    """Increment a counter metric."""
    metric = METRICS[name]
    if labels:
        metric.labels(**labels).inc(value)
    else:
        metric.inc(value)


@contextmanager
def time_stage(stage: str) -> Iterator[None]:
    """Observe the duration of a pipeline stage."""
    start = time.perf_counter()
    try:
        yield
    finally:
        METRICS["stage_duration_seconds"].labels(stage=stage).observe(time.perf_counter() - start)
