"""Puzzles over sequences of numbers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

_GOOD_LIMIT = 1000
_NO_TAXI_TIME = 100000.0
_SMALL_PIECE = 10
_BRUTE_FORCE_LIMIT = 3300
_MINUTES_PER_HOUR = 60
_HOURS_PER_DAY = 24
_PLAYERS = frozenset({1, 2, 3})
_FIRST_SPECTATOR = 3


def good_array(n: int) -> list[int]:
    """Values 1, 3, 5, ... wrapping to even numbers from 2 once past 1000."""
    values = []
    value = 1
    for _ in range(n):
        values.append(value)
        value += 2
        if value > _GOOD_LIMIT:
            value = 2
    return values


def find_three_indices(p: Sequence[int]) -> tuple[int, int, int] | None:
    """1-based indices ``i < j < k`` with ``p[i] < p[j] > p[k]``, or None."""
    values = list(p)
    for j, middle in enumerate(values[1:-1], start=1):
        left = next((i for i, v in enumerate(values[:j]) if v < middle), None)
        if left is None:
            continue
        right = next(
            (k for k, v in enumerate(values[j + 1 :], start=j + 1) if v < middle),
            None,
        )
        if right is not None:
            return left + 1, j + 1, right + 1
    return None


def common_subsequence(a: Iterable[int], b: Iterable[int]) -> int | None:
    """First element of ``a`` that also occurs in ``b``, or None."""
    others = set(b)
    return next((value for value in a if value in others), None)


def _merge_at(values: list[int], index: int) -> None:
    values[index] += values.pop(index + 1)


def shortest_length(a: Iterable[int]) -> int:
    """Length left after repeatedly merging neighbouring unequal values."""
    values = list(a)
    if not values:
        raise ValueError("the array must not be empty")
    best = 0
    pick = 0
    for i, (x, y) in enumerate(zip(values, values[1:])):
        if x != y and x + y > best:
            pick = i
            best = x
    if best != 0:
        _merge_at(values, pick)
        while True:
            index = next(
                (i for i, (x, y) in enumerate(zip(values, values[1:])) if x != y),
                None,
            )
            if index is None:
                break
            _merge_at(values, index)
    return len(values)


def can_remove_all(a: Iterable[int]) -> bool:
    """Whether sorted neighbours never differ by more than one."""
    ordered = sorted(a)
    return all(y - x <= 1 for x, y in zip(ordered, ordered[1:]))


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Dragons among ``1..d`` whose number is divisible by any of k, l, m, n."""
    divisors = (k, l, m, n)
    if any(q <= 0 for q in divisors):
        raise ValueError("divisors must be positive")
    return sum(
        1 for dragon in range(1, d + 1) if any(dragon % q == 0 for q in divisors)
    )


def min_coins_twins(coins: Iterable[int]) -> int:
    """Fewest coins whose sum is strictly more than the sum of the rest."""
    ordered = sorted(coins, reverse=True)
    total = sum(ordered)
    taken = 0
    for count, coin in enumerate(ordered, start=1):
        taken += coin
        if taken > total - taken:
            return count
    raise ValueError("no choice of coins gives a strictly larger share")


def max_ribbon_pieces(n: int, a: int, b: int, c: int) -> int:
    """Most pieces of lengths a, b or c that a ribbon of length ``n`` is cut into."""
    small, middle, large = sorted((a, b, c))
    if small <= 0:
        raise ValueError("piece lengths must be positive")
    first_wins = large <= _SMALL_PIECE or n > _BRUTE_FORCE_LIMIT
    best = 0
    for i in range(n // large + 1):
        for j in range(n // middle + 1):
            rest = n - i * large - j * middle
            if rest < 0:
                break
            if rest % small:
                continue
            total = i + j + rest // small
            if first_wins:
                return total
            best = max(best, total)
    return best


def dragon_duel(s: int, dragons: Iterable[tuple[int, int]]) -> bool:
    """Whether a hero of strength ``s`` defeats every (strength, bonus) dragon."""
    remaining = list(dragons)
    strength = s
    for _ in range(len(remaining)):
        survivors = []
        for power, bonus in remaining:
            if power != 0 and strength > power:
                strength += bonus
            else:
                survivors.append((power, bonus))
        remaining = survivors
        if not remaining:
            return True
    return False


def gravity_flip(columns: Iterable[int]) -> list[int]:
    """Column heights after gravity pulls every cube to the right."""
    return sorted(columns)


def untreated_crimes(events: Iterable[int]) -> int:
    """Crimes (-1) left untreated; positive events hire that many officers."""
    officers = 0
    untreated = 0
    for event in events:
        if event == -1:
            if officers == 0:
                untreated += 1
            else:
                officers -= 1
        else:
            officers += event
    return untreated


def laptop_happy(laptops: Iterable[tuple[int, int]]) -> bool:
    """Whether some (price, quality) pair differs, so Alex is right."""
    return any(price != quality for price, quality in laptops)


def holiday_of_equality(welfare: Iterable[int]) -> int:
    """Money needed to raise every citizen to the richest one's welfare."""
    values = list(welfare)
    top = max([0, *values])
    return sum(top - value for value in values)


def chess_log_valid(winners: Iterable[int]) -> bool:
    """Whether a log of game winners among players 1, 2 and 3 is possible."""
    games = list(winners)
    if not games:
        raise ValueError("the log must hold at least one game")
    for winner in games:
        if winner not in _PLAYERS:
            raise ValueError(f"unknown player: {winner}")
    spectator = _FIRST_SPECTATOR
    for winner in games:
        if winner == spectator:
            return False
        spectator = sum(_PLAYERS) - winner - spectator
    return True


def nearest_minimums(a: Iterable[int]) -> int:
    """Smallest distance between two occurrences of the array's minimum."""
    values = list(a)
    if not values:
        raise ValueError("the array must not be empty")
    low = min(values)
    positions = [i for i, value in enumerate(values) if value == low]
    return min(
        (later - earlier for earlier, later in zip(positions, positions[1:])),
        default=len(values) - 1,
    )


def min_taxi_time(a: float, b: float, taxis: Iterable[tuple[float, float, float]]) -> float:
    """Shortest time for any (x, y, speed) taxi to reach the point (a, b)."""
    best = _NO_TAXI_TIME
    for x, y, speed in taxis:
        if speed <= 0:
            raise ValueError("taxi speed must be positive")
        best = min(best, math.hypot(x - a, y - b) / speed)
    return best


def _is_lucky(hh: int, mm: int) -> bool:
    return "7" in f"{hh:02d}{mm:02d}"


def snooze_presses(x: int, hh: int, mm: int) -> int:
    """Snooze presses of ``x`` minutes each, counted back from hh:mm to a lucky time."""
    if not 1 <= x <= _MINUTES_PER_HOUR:
        raise ValueError("snooze interval must be between 1 and 60 minutes")
    if not (0 <= hh < _HOURS_PER_DAY and 0 <= mm < _MINUTES_PER_HOUR):
        raise ValueError(f"invalid time {hh}:{mm}")
    presses = 0
    while not _is_lucky(hh, mm):
        presses += 1
        mm -= x
        if mm < 0:
            mm += _MINUTES_PER_HOUR
            hh -= 1
            if hh < 0:
                hh = _HOURS_PER_DAY - 1
    return presses