"""Reducers over values that may be invalid (``None``).

A ``None`` marks a numeric field that failed to parse. Every reducer takes an
``InvalidPolicy`` so the caller decides whether such a value contaminates
the result (``PROPAGATE``) or is left out (``SKIP``).
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import StrEnum


class InvalidPolicy(StrEnum):
    """What a reducer does with invalid inputs."""

    PROPAGATE = "propagate"
    SKIP = "skip"


def _collect(values: Iterable[float | None], policy: InvalidPolicy) -> list[float] | None:
    """Materialize values, or return None if an invalid value propagates."""
    out: list[float] = []
    for v in values:
        if v is None:
            if policy is InvalidPolicy.PROPAGATE:
                return None
            continue
        out.append(v)
    return out


def total(
    values: Iterable[float | None], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> float | None:
    """Sum of values. Empty input sums to 0."""
    collected = _collect(values, policy)
    if collected is None:
        return None
    return math.fsum(collected)


def mean(
    values: Iterable[float | None], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> float | None:
    """Arithmetic mean, or None for empty input."""
    collected = _collect(values, policy)
    if not collected:
        return None
    return math.fsum(collected) / len(collected)


def maximum(
    values: Iterable[float | None], policy: InvalidPolicy = InvalidPolicy.PROPAGATE
) -> float | None:
    """Largest value, or None for empty input."""
    collected = _collect(values, policy)
    if not collected:
        return None
    return max(collected)


def or_zero(value: float | None) -> float:
    """Display form of a reduced value: undefined becomes 0."""
    return 0.0 if value is None else value
