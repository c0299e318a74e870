"""Small numeric helpers: a Fibonacci series and squares."""

from __future__ import annotations


def fibonacci_series(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers starting 1, 1.

    The two seed values are always present, so ``n`` below 2 still yields
    ``[1, 1]``.
    """
    series = [1, 1]
    for _ in range(2, n):
        series.append(series[-2] + series[-1])
    return series


def square(n: int) -> int:
    """Return ``n`` squared."""
    return n * n


def square_plus_one(n: int) -> int:
    """Return ``n`` squared plus one."""
    return n * n + 1