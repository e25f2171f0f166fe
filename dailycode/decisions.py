"""Yes-or-no answers to small puzzle checks."""

from __future__ import annotations

from math import isqrt

WORLD_CUP_MIN_POINTS = 1
WORLD_CUP_MAX_POINTS = 20
WORLD_CUP_QUALIFYING_POINTS = 12

POINTS_PER_SERVICE_TURN = 2


def can_measure(w: int, x: int, y: int, z: int) -> bool:
    """Whether weight ``w`` equals some non-empty selection of ``x``, ``y`` and ``z``."""
    return w in {x, y, z, x + y, x + z, y + z, x + y + z}


def faster_vehicle(x: int, y: int) -> str:
    """Which trip is quicker: ``"BIKE"`` if ``x`` is smaller, ``"CAR"`` if ``y`` is, else ``"SAME"``."""
    if x < y:
        return "BIKE"
    if x > y:
        return "CAR"
    return "SAME"


def can_score(n: int, x: int, y: int) -> bool:
    """Whether ``y`` points can come from at most ``n`` problems worth ``x`` each."""
    return y % x == 0 and y <= n * x


def all_rules_followed(r1: int, r2: int, r3: int, r4: int) -> bool:
    """Whether no rule was broken, that is, every flag is zero."""
    return not any((r1, r2, r3, r4))


def is_prime(n: int) -> bool:
    """Whether ``n`` is a prime number."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    return all(
        n % i != 0 and n % (i + 2) != 0 for i in range(5, isqrt(n) + 1, 6)
    )


def server(p: int, q: int) -> str:
    """Who serves next after scores ``p`` and ``q``; service changes every two points."""
    total_points = p + q
    turns_played = total_points // POINTS_PER_SERVICE_TURN
    if turns_played % 2 == 0:
        return "Alice"
    return "Bob"


def score_possible(a: int, b: int, c: int, d: int) -> bool:
    """Whether a claimed score ``(a, b)`` fits within the true totals ``(c, d)``."""
    return c >= a and d >= b


def is_good_nibble(n: int) -> bool:
    """Whether ``n`` bits split evenly into nibbles."""
    return n % 4 == 0


def qualifies(x: int, a: int, b: int) -> bool:
    """Whether ``a`` one-point and ``b`` two-point solves reach the cutoff ``x``."""
    return a + 2 * b >= x


def is_cyclic(a: int, b: int, c: int, d: int) -> bool:
    """Whether a quadrilateral with angles ``a``, ``b``, ``c``, ``d`` is cyclic."""
    return a + c == 180 and b + d == 180


def passes(n: int, x: int, p: int) -> bool:
    """Whether ``x`` correct out of ``n`` (+3 each, -1 per wrong) reaches ``p``."""
    return 3 * x - (n - x) >= p


def tower_possible(n: int, x: int) -> bool:
    """Whether ``x`` blocks form complete layers of ``n``."""
    return x % n == 0


def water_filling_time(b1: int, b2: int, b3: int) -> bool:
    """Whether at least two of the three bottles are empty."""
    return [b1, b2, b3].count(0) >= 2


def qualifies_for_world_cup(x: int) -> bool:
    """Whether ``x`` points qualify a team; raises ValueError outside 1 to 20."""
    if not WORLD_CUP_MIN_POINTS <= x <= WORLD_CUP_MAX_POINTS:
        raise ValueError(
            f"points must be between {WORLD_CUP_MIN_POINTS} and "
            f"{WORLD_CUP_MAX_POINTS}, got {x}"
        )
    return x >= WORLD_CUP_QUALIFYING_POINTS


def is_expert(x: int, y: int) -> bool:
    """Whether ``y`` accepted out of ``x`` problems is at least half."""
    return y * 2 >= x


def topic_covered(a: int, b: int, c: int, x: int) -> bool:
    """Whether topic ``x`` is one of the prepared topics ``a``, ``b``, ``c``."""
    return x in (a, b, c)