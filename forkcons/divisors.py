"""Largest divisor and greatest common divisor by downward trial division."""

from __future__ import annotations


def nd(a: int) -> int:
    """Return the largest proper divisor of ``a``.

    The search starts at ``abs(a) // 2`` and walks down to 2. A number with no
    divisor in that range (a prime) yields 1. ``1`` yields 1. When the starting
    point is already below 2 (for 0, -1, 2, 3, -2, -3), the starting point
    itself is returned.
    """
    if a == 1:
        return 1
    start = abs(a) // 2
    if start <= 1:
        return start
    return next((d for d in range(start, 1, -1) if a % d == 0), 1)


def nsd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``.

    The search starts at the smaller of the two absolute values and walks down
    to 2; coprime numbers yield 1. When the smaller absolute value is below 2
    it is returned as is, so a zero argument yields 0.
    """
    start = min(abs(a), abs(b))
    if start <= 1:
        return start
    return next(
        (d for d in range(start, 1, -1) if a % d == 0 and b % d == 0),
        1,
    )