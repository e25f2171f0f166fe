"""Answers to puzzles that take a list of values."""

from __future__ import annotations

from collections.abc import Iterable


def polynomial_degree(coefficients: Iterable[int]) -> int:
    """Index of the last non-zero coefficient, or -1 for the zero polynomial."""
    degree = -1
    for index, value in enumerate(coefficients):
        if value != 0:
            degree = index
    return degree


def contest_counts(codes: Iterable[str]) -> tuple[int, int]:
    """Count codes starting with ``S`` and the others, as ``(starters, others)``."""
    starters = 0
    others = 0
    for code in codes:
        if code.startswith("S"):
            starters += 1
        else:
            others += 1
    return starters, others


def divisible_count(values: Iterable[int], k: int) -> int:
    """How many values become a multiple of 7 once ``k`` is added."""
    return sum(1 for value in values if (value + k) % 7 == 0)


def lead_winner(rounds: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Player (1 or 2) who held the largest cumulative lead, and that lead.

    Returns ``(0, 0)`` when no player ever led.
    """
    total1 = 0
    total2 = 0
    winner = 0
    max_lead = 0
    for score1, score2 in rounds:
        total1 += score1
        total2 += score2
        difference = total1 - total2
        lead = abs(difference)
        if lead > max_lead:
            max_lead = lead
            winner = 1 if difference > 0 else 2
    return winner, max_lead


def min_sign_flips(values: Iterable[int]) -> int:
    """Sign flips needed to bring the sum of ±1 values to zero, or -1 if impossible."""
    total = abs(sum(values))
    if total == 0:
        return 0
    if total % 2 != 0:
        return -1
    return total // 2


def max_total_distance(values: Iterable[int], m: int) -> int:
    """Sum of each value's distance to the farther end of the range 1 to ``m``."""
    half = m // 2
    return sum(m - value if value <= half else value - 1 for value in values)