"""Closed-form answers to small counting and arithmetic puzzles."""

from __future__ import annotations


def _ceil_div(numerator: int, denominator: int) -> int:
    """Divide and round up, for a positive denominator."""
    return -(-numerator // denominator)


def catch_time(x: int, y: int) -> int:
    """Minutes for the police at ``x`` to reach the thief at ``y``."""
    return abs(x - y)


def min_card_flips(n: int, x: int) -> int:
    """Fewest flips to make all ``n`` cards face the same way when ``x`` are up."""
    return min(x, n - x)


def max_tastiness_pairs(a: int, b: int, c: int, d: int) -> int:
    """Best sum of one of ``a``/``b`` with one of ``c``/``d``, over all four pairs."""
    return max(a + c, a + d, b + c, b + d)


def bags_needed(n: int, k: int, m: int) -> int:
    """Bags holding ``k`` boxes of ``m`` candies each needed for ``n`` candies."""
    return _ceil_div(n, k * m)


def notebooks(n: int) -> int:
    """Notebooks of 100 each bought with ``n`` thousand."""
    return (n * 1000) // 100


def battle_time(n: int, a: int, b: int) -> int:
    """Time for a knockout of ``n`` teams: ``a`` per round, ``b`` between rounds."""
    rounds = 0
    teams = n
    while teams > 1:
        teams //= 2
        rounds += 1
    return rounds * a + (rounds - 1) * b


def min_attacks(h: int, x: int, y: int) -> int:
    """Fewest attacks to remove ``h`` health: normal ones deal ``x``, one special deals ``y``."""
    normal_only = _ceil_div(h, x)
    remaining = h - y
    after_special = _ceil_div(remaining, x) if remaining > 0 else 0
    return min(normal_only, 1 + after_special)


def max_tastiness(a: int, b: int, c: int, d: int) -> int:
    """Best of ``a``/``b`` plus best of ``c``/``d``."""
    return max(a, b) + max(c, d)


def min_moves(a: int, b: int, k: int) -> int:
    """Steps of at most ``k`` needed to go from ``a`` to ``b``."""
    return _ceil_div(abs(a - b), k)


def team_choices(n: int) -> int:
    """Ordered ways to pick a captain and a vice-captain from ``n`` players."""
    return n * (n - 1)


def blackjack_card(a: int, b: int) -> int:
    """Third card (1 to 10) that makes 21 with ``a`` and ``b``, or -1 if none."""
    required = 21 - (a + b)
    return required if 1 <= required <= 10 else -1


def movie_time(x: int, y: int) -> int:
    """Minutes to watch an ``x``-minute movie with its first ``y`` minutes at double speed."""
    return y // 2 + (x - y)


def max_bathers(x: int, y: int) -> int:
    """People who can bathe from ``x`` litres when each needs ``y`` hot and ``y`` cold."""
    return x // (2 * y)


def sale_price(a: int, b: int, c: int) -> int:
    """Price of three items when the cheapest one is free."""
    return a + b + c - min(a, b, c)


def total_duration(n: int, a: int, b: int) -> int:
    """Total of ``n`` alternating sessions: odd ones take ``b``, even ones ``a``."""
    odd_count = (n + 1) // 2
    even_count = n // 2
    return odd_count * b + even_count * a


def coins_needed(n: int) -> int:
    """Coins paid for ``n`` items when every fifth one is free."""
    return (n // 5) * 4 + n % 5


def plates_needed(x: int, y: int, r: int) -> int:
    """Plates of ``y`` sticks for ``x`` sticks plus one extra per 30 of ``r``."""
    total_sticks = x + r // 30
    return _ceil_div(total_sticks, y)


def apps_to_delete(s: int, x: int, y: int, z: int) -> int:
    """Apps of sizes ``x`` and ``y`` to remove from ``s`` of memory to fit ``z``."""
    unused = s - (x + y)
    if unused >= z:
        return 0
    if unused + x >= z or unused + y >= z:
        return 1
    return 2


def best_score(x: int, y: int) -> int:
    """Best contest score solving a 500 and a 1000 problem taking ``x`` and ``y`` minutes."""
    a_first = (500 - x * 2) + (1000 - (x + y) * 4)
    b_first = (1000 - y * 4) + (500 - (x + y) * 2)
    return max(a_first, b_first)


def months_to_rent(x: int, y: int) -> int:
    """Months a cooler rented for ``x`` can be kept before buying at ``y`` is cheaper."""
    if x >= y:
        return 0
    return (y - 1) // x


def tuesdays(n: int) -> int:
    """Tuesdays among the first ``n`` days of a month that starts on a Monday."""
    count = n // 7
    if n % 7 >= 2:
        count += 1
    return count


def weekly_hours(x: int, y: int) -> int:
    """Hours in a week of four ``x``-hour days and one ``y``-hour day."""
    return 4 * x + y