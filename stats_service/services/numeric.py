"""Numeric statistics helpers."""
from __future__ import annotations

import math
from statistics import median as _median
from typing import Sequence

from stats_service.services.errors import EmptyInputError, StatisticsError

__all__: list[str] = [
    "mean",
    "median",
    "mode",
    "summary",
]


def _check(values: Sequence[float]) -> None:
    if not values:
        raise EmptyInputError()


def _finite(operation: str, value: float) -> float:
    if not math.isfinite(value):
        raise StatisticsError(operation)
    return value


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean: sum of the values divided by their count."""
    _check(values)
    return _finite("mean", sum(values) / len(values))


def median(values: Sequence[float]) -> float:
    """
    Middle value of the sorted sequence, or the mean of the two middle
    values when the count is even. The input is not reordered.
    """
    _check(values)
    return _finite("median", _median(values))


def mode(values: Sequence[float]) -> float:
    """
    Most frequent value.

    Ties go to the value that reaches the winning count first when scanning
    left to right, so ``mode([2, 1, 1, 2]) == 1``. This is not the same as
    :func:`statistics.mode`, which prefers the value seen first.
    """
    _check(values)
    counts: dict[float, int] = {}
    best = values[0]
    best_count = 0
    for value in values:
        counts[value] = counts.get(value, 0) + 1
        if counts[value] > best_count:
            best_count = counts[value]
            best = value
    return best


def summary(values: Sequence[float]) -> dict[str, float]:
    """Compute mean, median and mode for a sequence of numbers."""
    return {
        "mean": mean(values),
        "median": median(values),
        "mode": mode(values),
    }
