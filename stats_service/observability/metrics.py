"""Prometheus metrics for the statistics service.

Every statistic request ends up in exactly one of two counters: computations
(by operation) or rejections (by operation and reason). Input sizes and
computation time are observed for successful requests only.
"""
from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)

COMPUTATIONS_NAME = "stats_service_computations_total"
REJECTIONS_NAME = "stats_service_rejections_total"
INPUT_SIZE_NAME = "stats_service_input_size"
COMPUTE_LATENCY_NAME = "stats_service_compute_duration_seconds"

# Reason label used when the `nums` parameter is absent or empty
MISSING_INPUT = "MissingInput"

COMPUTATIONS = Counter(
    name=COMPUTATIONS_NAME,
    documentation="Statistics requests answered successfully",
    labelnames=["operation"],
)

# reason is the error class name, e.g. ParseError or StatisticsError
REJECTIONS = Counter(
    name=REJECTIONS_NAME,
    documentation="Statistics requests rejected with a 400",
    labelnames=["operation", "reason"],
)

INPUT_SIZE = Histogram(
    name=INPUT_SIZE_NAME,
    documentation="Number of values in an accepted nums list",
    labelnames=["operation"],
    buckets=(1, 2, 5, 10, 50, 100, 1_000, 10_000, 100_000),
)

COMPUTE_LATENCY = Histogram(
    name=COMPUTE_LATENCY_NAME,
    documentation="Time spent computing statistics, in seconds",
    labelnames=["operation"],
)


def observe_computation(operation: str, size: int) -> None:
    COMPUTATIONS.labels(operation).inc()
    INPUT_SIZE.labels(operation).observe(size)


def observe_rejection(operation: str, reason: str) -> None:
    REJECTIONS.labels(operation, reason).inc()


def compute_timer(operation: str):
    """Context manager timing a computation for ``operation``."""
    return COMPUTE_LATENCY.labels(operation).time()


metrics_router = APIRouter()

@metrics_router.get("/metrics", include_in_schema=False)
async def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
