"""Mendelian inheritance."""

from __future__ import annotations

from .errors import InvalidArgument


def dominant_allele_probability(k: int, m: int, n: int) -> float:
    """Probability that two random organisms produce offspring with a dominant allele.

    Args:
        k: Homozygous dominant individuals.
        m: Heterozygous individuals.
        n: Homozygous recessive individuals.
    """

    if min(k, m, n) < 0:
        raise InvalidArgument(f"population counts must be non-negative, got {k} {m} {n}")
    total = k + m + n
    if total < 2:
        raise InvalidArgument(f"population must contain at least two organisms, got {total}")

    pairs = total * (total - 1)
    recessive = n * (n - 1) + n * m + m * (m - 1) / 4
    return 1 - recessive / pairs
