import itertools

import pytest

from dailycode.arith import (
    apps_to_delete,
    bags_needed,
    battle_time,
    best_score,
    blackjack_card,
    catch_time,
    coins_needed,
    max_bathers,
    max_tastiness,
    max_tastiness_pairs,
    min_attacks,
    min_card_flips,
    min_moves,
    months_to_rent,
    movie_time,
    notebooks,
    plates_needed,
    sale_price,
    team_choices,
    total_duration,
    tuesdays,
    weekly_hours,
)


@pytest.mark.parametrize("x,y", [(1, 3), (7, 2), (5, 5), (100, 1)])
def test_catch_time_is_distance(x, y):
    assert catch_time(x, y) == catch_time(y, x)
    assert catch_time(x, y) + min(x, y) == max(x, y)


@pytest.mark.parametrize("n", range(1, 12))
def test_min_card_flips_invariants(n):
    for x in range(n + 1):
        result = min_card_flips(n, x)
        assert result in (x, n - x)
        assert 2 * result <= n
        assert result == min_card_flips(n, n - x)


def test_tastiness_variants_agree():
    for a, b, c, d in itertools.product(range(1, 5), repeat=4):
        result = max_tastiness_pairs(a, b, c, d)
        assert result == max_tastiness(a, b, c, d)
        assert result >= a + c and result >= b + d


@pytest.mark.parametrize("n,k,m", [(3, 1, 2), (8, 2, 4), (1, 5, 5), (100, 3, 7)])
def test_bags_needed_is_smallest_enough(n, k, m):
    bags = bags_needed(n, k, m)
    assert bags * k * m >= n
    assert (bags - 1) * k * m < n


def test_bags_needed_zero_capacity():
    with pytest.raises(ZeroDivisionError):
        bags_needed(5, 0, 3)


@pytest.mark.parametrize("n", [1, 2, 7, 45])
def test_notebooks(n):
    assert notebooks(n) * 100 == n * 1000


@pytest.mark.parametrize("k", range(1, 7))
def test_battle_time_power_of_two(k):
    assert battle_time(2**k, 5, 0) == 5 * k


def test_battle_time_two_teams_single_round():
    assert battle_time(2, 4, 9) == 4


def test_battle_time_nondecreasing():
    times = [battle_time(n, 3, 2) for n in range(2, 70)]
    assert times == sorted(times)


@pytest.mark.parametrize("h,x", [(10, 3), (7, 7), (1, 2), (50, 4)])
def test_min_attacks_weak_special_changes_nothing(h, x):
    plain = min_attacks(h, x, 0)
    assert plain * x >= h
    for y in range(x + 1):
        assert min_attacks(h, x, y) == plain


def test_min_attacks_strong_special():
    assert min_attacks(100, 1, 100) == min_attacks(1, 1, 1)
    assert min_attacks(9, 1, 0) == 9


@pytest.mark.parametrize("a,b,k", [(1, 10, 3), (10, 1, 3), (4, 4, 2), (0, 9, 9)])
def test_min_moves(a, b, k):
    moves = min_moves(a, b, k)
    assert moves == min_moves(b, a, k)
    assert moves * k >= abs(a - b)
    assert (moves - 1) * k < abs(a - b) or moves == 0
    assert min_moves(a, b, 1) == abs(a - b)


@pytest.mark.parametrize("n", [2, 3, 10, 25])
def test_team_choices(n):
    assert team_choices(n) // n == n - 1
    assert team_choices(n) == team_choices(1 - n)


def test_blackjack_card_makes_21():
    for a, b in itertools.product(range(1, 11), repeat=2):
        card = blackjack_card(a, b)
        if card != -1:
            assert a + b + card == 21
            assert 1 <= card <= 10
        else:
            assert a + b < 11 or a + b > 20


def test_blackjack_card_limits():
    assert blackjack_card(10, 1) == 10
    assert blackjack_card(1, 1) == -1


@pytest.mark.parametrize("x,y", [(100, 20), (50, 50), (9, 0), (60, 10)])
def test_movie_time_even_speedup(x, y):
    assert movie_time(x, y) + y // 2 == x


@pytest.mark.parametrize("x,y", [(10, 1), (10, 5), (3, 2), (101, 7)])
def test_max_bathers(x, y):
    people = max_bathers(x, y)
    assert people * 2 * y <= x < (people + 1) * 2 * y


def test_sale_price():
    for a, b, c in itertools.product(range(1, 6), repeat=3):
        price = sale_price(a, b, c)
        assert price == sum(sorted((a, b, c))[1:])
        assert price == sale_price(c, a, b)
    assert sale_price(7, 7, 7) == 2 * 7


@pytest.mark.parametrize("n", range(1, 10))
def test_total_duration(n):
    assert total_duration(n, 4, 4) == n * 4
    assert total_duration(n, 3, 8) + total_duration(n, 8, 3) == n * (3 + 8)


def test_total_duration_single_session():
    assert total_duration(1, 6, 9) == 9


@pytest.mark.parametrize("n", range(0, 5))
def test_coins_needed(n):
    assert coins_needed(n) == n
    assert coins_needed(n + 5) == coins_needed(n) + 4


@pytest.mark.parametrize("x,y", [(10, 3), (1, 1), (7, 7), (20, 6)])
def test_plates_needed(x, y):
    plates = plates_needed(x, y, 0)
    assert plates * y >= x > (plates - 1) * y
    assert plates_needed(x, y, 29) == plates


@pytest.mark.parametrize("k", range(0, 4))
def test_plates_needed_extra_sticks(k):
    assert plates_needed(5, 1, 30 * k) == 5 + k


def test_apps_to_delete_cases():
    assert apps_to_delete(10, 3, 3, 4) == 0
    assert apps_to_delete(10, 4, 4, 5) == 1
    assert apps_to_delete(10, 2, 2, 20) == 2


def test_apps_to_delete_symmetric():
    for s, x, y, z in itertools.product(range(1, 8), repeat=4):
        assert apps_to_delete(s, x, y, z) == apps_to_delete(s, y, x, z)


def test_best_score():
    assert best_score(0, 0) == 500 + 1000
    for x, y in itertools.product(range(0, 20), repeat=2):
        assert best_score(x, y) >= best_score(x + 1, y)
        assert best_score(x, y) >= best_score(x, y + 1)


@pytest.mark.parametrize("x,y", [(5, 12), (2, 3), (1, 100), (9, 10)])
def test_months_to_rent(x, y):
    months = months_to_rent(x, y)
    assert months * x < y <= (months + 1) * x


@pytest.mark.parametrize("x,y", [(5, 5), (10, 2)])
def test_months_to_rent_cheap_purchase(x, y):
    assert months_to_rent(x, y) == months_to_rent(y, y)


@pytest.mark.parametrize("k", range(0, 5))
def test_tuesdays(k):
    assert tuesdays(7 * k) == k
    assert tuesdays(7 * k + 1) == k
    assert tuesdays(7 * k + 2) == k + 1


@pytest.mark.parametrize("x,y", [(1, 1), (8, 4), (3, 0)])
def test_weekly_hours(x, y):
    assert weekly_hours(x, 0) == 4 * x
    assert weekly_hours(0, y) == y
    assert weekly_hours(x, y) == weekly_hours(x, 0) + y