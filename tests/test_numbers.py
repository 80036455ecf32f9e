from itertools import combinations

import math

import pytest

from cfsolve.numbers import (
    bachgold_split,
    bill_count,
    candies_x,
    candy_ways,
    chess_coloring_turns,
    count_set_bits,
    divisible_number,
    lcm_pair,
    min_steps_multiple,
    moves_to_divisible,
    orac_additions,
    phoenix_balance,
    round_summands,
    shovels_needed,
    stick_game_winner,
    ticket_cost,
)


@pytest.mark.parametrize("a,b", [(10, 4), (13, 9), (100, 13), (123, 456), (92, 46), (7, 7)])
def test_moves_to_divisible_makes_divisible(a, b):
    moves = moves_to_divisible(a, b)
    assert 0 <= moves < b or (a < b and moves == b - a)
    assert (a + moves) % b == 0


@pytest.mark.parametrize("n", range(1, 30))
def test_candy_ways_counts_unequal_splits(n):
    splits = sum(1 for small in range(1, n) if n - small > small)
    assert candy_ways(n) == splits


@pytest.mark.parametrize("n", [2, 4, 6, 8, 10])
def test_phoenix_balance_is_optimal(n):
    coins = [2**i for i in range(1, n + 1)]
    total = sum(coins)
    best = min(abs(total - 2 * sum(pile)) for pile in combinations(coins, n // 2))
    assert phoenix_balance(n) == best


def test_phoenix_balance_rejects_zero():
    with pytest.raises(ValueError):
        phoenix_balance(0)


@pytest.mark.parametrize("n,k", [(5, 1), (8, 2), (3, 4), (9, 3), (35, 5), (49, 2)])
def test_orac_additions_matches_process(n, k):
    value = n
    for _ in range(k):
        value += next(d for d in range(2, value + 1) if value % d == 0)
    assert orac_additions(n, k) == value


@pytest.mark.parametrize("n", [5009, 7, 9876, 10000, 10, 1])
def test_round_summands_sum_and_shape(n):
    parts = round_summands(n)
    assert sum(parts) == n
    assert len(parts) == sum(1 for d in str(n) if d != "0")
    assert all(len(str(p).rstrip("0")) == 1 for p in parts)


def test_round_summands_rejects_negative():
    with pytest.raises(ValueError):
        round_summands(-5)


@pytest.mark.parametrize("l,r", [(1, 1337), (13, 69), (2, 4)])
def test_lcm_pair_in_range(l, r):
    x, y = lcm_pair(l, r)
    assert l <= x < y <= r
    assert l <= math.lcm(x, y) <= r


def test_lcm_pair_none():
    assert lcm_pair(88, 89) is None


@pytest.mark.parametrize("k", range(1, 20))
def test_chess_coloring_turns_step(k):
    assert chess_coloring_turns(2 * k) == chess_coloring_turns(2 * k + 1)
    assert chess_coloring_turns(2 * k + 2) == chess_coloring_turns(2 * k) + 1


@pytest.mark.parametrize("k", range(0, 64, 7))
def test_count_set_bits_powers(k):
    assert count_set_bits(2**k - 1) == k
    assert count_set_bits(2**k) == count_set_bits(1)


def test_count_set_bits_rejects_negative():
    with pytest.raises(ValueError):
        count_set_bits(-1)


def test_bill_count_example():
    assert bill_count(125) == 3


@pytest.mark.parametrize("n", [0, 3, 43, 125, 999])
def test_bill_count_hundreds(n):
    assert bill_count(n + 100) == bill_count(n) + 1
    assert bill_count(100 * (n + 1)) == n + 1


@pytest.mark.parametrize("n", range(5))
def test_bill_count_small(n):
    assert bill_count(n) == n


@pytest.mark.parametrize("n", range(1, 6))
@pytest.mark.parametrize("t", range(2, 11))
def test_divisible_number_valid(n, t):
    if n == 1 and t == 10:
        assert divisible_number(n, t) is None
        return
    result = divisible_number(n, t)
    assert len(result) == n
    assert result[0] != "0"
    assert int(result) % t == 0


@pytest.mark.parametrize("n,m", [(10, 2), (3, 5), (7, 3), (1, 1), (10000, 10)])
def test_min_steps_multiple(n, m):
    result = min_steps_multiple(n, m)
    lowest = (n + 1) // 2
    if result is None:
        assert all(moves % m for moves in range(lowest, n + 1))
    else:
        assert lowest <= result <= n
        assert result % m == 0
        assert result - m < lowest


@pytest.mark.parametrize("k", list(range(1, 40)) + [117, 237, 1000])
@pytest.mark.parametrize("r", range(1, 10))
def test_shovels_needed_is_fewest(k, r):
    count = shovels_needed(k, r)
    assert (k * count) % 10 in (0, r)
    assert all((k * i) % 10 not in (0, r) for i in range(1, count))


def test_shovels_needed_rejects_zero_price():
    with pytest.raises(ValueError):
        shovels_needed(0, 3)


@pytest.mark.parametrize("n", range(2, 40))
def test_bachgold_split(n):
    parts = bachgold_split(n)
    assert sum(parts) == n
    assert len(parts) == n // 2
    assert set(parts) <= {2, 3}


def test_bachgold_split_rejects_one():
    with pytest.raises(ValueError):
        bachgold_split(1)


@pytest.mark.parametrize(
    "n,m,winner",
    [(2, 2, "Malvika"), (2, 3, "Malvika"), (3, 3, "Akshat"), (1, 100, "Akshat")],
)
def test_stick_game_winner(n, m, winner):
    assert stick_game_winner(n, m) == winner


def test_ticket_cost_examples():
    assert ticket_cost(6, 2, 1, 2) == 6
    assert ticket_cost(5, 2, 2, 3) == 8


def test_ticket_cost_singles_when_special_not_cheaper():
    n, m, a, b = 10, 3, 2, 9
    assert ticket_cost(n, m, a, b) == n * a


def test_ticket_cost_one_special_covers_all():
    n, m, a, b = 2, 5, 3, 4
    assert ticket_cost(n, m, a, b) == b


def test_ticket_cost_only_specials_when_single_costs_more():
    n, m, a, b = 6, 3, 5, 4
    assert ticket_cost(n, m, a, b) == b * (n // m)
    assert ticket_cost(n + 1, m, a, b) == ticket_cost(n, m, a, b) + b