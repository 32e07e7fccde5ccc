"""Rabbit population recurrences."""

from __future__ import annotations

from .errors import InvalidArgument


def recurrence_relation(n: int, k: int) -> int:
    """Population after `n` months when every mature pair yields `k` pairs.

    F(1) = F(2) = 1, F(n) = F(n-1) + k * F(n-2).
    """

    if n < 1:
        raise InvalidArgument(f"month amount must be at least 1, got {n}")

    current, previous = 1, 0
    for _ in range(n - 1):
        current, previous = current + k * previous, current
    return current


def recurrence_relation_with_stop(n: int, m: int) -> int:
    """Population after `n` months when each pair lives exactly `m` months."""

    if n < 1:
        raise InvalidArgument(f"month amount must be at least 1, got {n}")
    if m < 1:
        raise InvalidArgument(f"lifetime must be at least 1 month, got {m}")

    # ages[i] holds pairs that are i months old.
    ages = [0] * m
    ages[0] = 1
    for _ in range(n - 1):
        newborns = sum(ages[1:])
        ages = [newborns] + ages[:-1]
    return sum(ages)
