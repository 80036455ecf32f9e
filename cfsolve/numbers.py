"""Puzzles over integers."""

from __future__ import annotations

import math
from itertools import combinations

_BILLS = (100, 20, 10, 5, 1)
_SHOVEL_LIMIT = 1000


def moves_to_divisible(a: int, b: int) -> int:
    """Increments needed to make ``a`` divisible by ``b``."""
    if a < b:
        return b - a
    if a > b:
        remainder = a % b
        return 0 if remainder == 0 else b - remainder
    return 0


def candy_ways(n: int) -> int:
    """Ways to split ``n`` candies so that the first sister gets strictly more."""
    return n - n // 2 - 1


def candies_x(n: int) -> int:
    """Find ``x`` such that ``x * (2**k - 1) == n`` for the smallest ``k > 1``."""
    divisor = 3
    power = 4
    while divisor <= n:
        if n % divisor == 0:
            return n // divisor
        divisor += power
        power *= 2
    raise ValueError(f"no x exists for n={n}")


def phoenix_balance(n: int) -> int:
    """Smallest difference between two equal piles of the coins 2, 4, ..., 2**n."""
    if n < 1:
        raise ValueError("n must be positive")
    heavy = 2**n
    light = 2 ** (n - 1)
    exponents = range(n - 2, 0, -1)
    half = max((n - 2) // 2, 0)
    light += sum(2**e for e in exponents[:half])
    heavy += sum(2**e for e in exponents[half:])
    return heavy - light


def orac_additions(n: int, k: int) -> int:
    """Value after adding the smallest divisor greater than one ``k`` times."""
    if n % 2 == 0:
        return n + 2 * k
    smallest = next(
        (d for d in range(2, math.isqrt(n) + 1) if n % d == 0),
        n,
    )
    return n + smallest + (k - 1) * 2


def round_summands(n: int) -> list[int]:
    """Split ``n`` into round numbers, least significant first."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [
        int(digit) * 10**place
        for place, digit in enumerate(reversed(str(n)))
        if digit != "0"
    ]


def lcm_pair(l: int, r: int) -> tuple[int, int] | None:
    """First pair ``x < y`` in ``[l, r]`` whose lcm also lies in ``[l, r]``."""
    for x, y in combinations(range(l, r + 1), 2):
        if l <= math.lcm(x, y) <= r:
            return x, y
    return None


def chess_coloring_turns(n: int) -> int:
    """Turns needed to colour an ``n`` by ``n`` board in a chess pattern."""
    return n // 2 + 1


def count_set_bits(n: int) -> int:
    """Number of one bits in ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return bin(n).count("1")


def bill_count(n: int) -> int:
    """Fewest bills of 100, 20, 10, 5 and 1 that pay ``n``."""
    count = 0
    for bill in _BILLS:
        used, n = divmod(n, bill)
        count += used
    return count


def divisible_number(n: int, t: int) -> str | None:
    """An ``n``-digit number divisible by ``t``, or None if there is none."""
    if n == 1 and t <= 9:
        return str(t)
    if t > 10 ** (n - 1):
        return None
    if t == 10:
        return "1" * (n - 2) + "10"
    return str(t) * n


def min_steps_multiple(n: int, m: int) -> int | None:
    """Fewest moves of one or two steps to climb ``n`` stairs, a multiple of ``m``."""
    start = n // 2 if n % 2 == 0 else n // 2 + 1
    return next((moves for moves in range(start, n + 1) if moves % m == 0), None)


def shovels_needed(k: int, r: int) -> int | None:
    """Fewest shovels at price ``k`` payable with tens and one ``r`` coin."""
    if k < 1:
        raise ValueError("price must be positive")
    step = 1
    scale = k
    while step <= _SHOVEL_LIMIT:
        if scale < 10:
            if scale == 1:
                return r
            if r == scale:
                return 1
            if r > scale and r % scale == 0:
                return r // scale
            while scale < 10:
                step += 1
                scale *= step
        total = k * step
        if total % 10 == 0 or (total - r) % 10 == 0:
            return step
        step += 1
    return None


def bachgold_split(n: int) -> list[int]:
    """Split ``n`` into the largest number of primes."""
    if n < 2:
        raise ValueError("n must be at least 2")
    count = n // 2
    if n % 2:
        return [2] * (count - 1) + [3]
    return [2] * count


def stick_game_winner(n: int, m: int) -> str:
    """Winner of the grid-stick game on ``n`` by ``m`` sticks."""
    return "Malvika" if min(n, m) % 2 == 0 else "Akshat"


def ticket_cost(n: int, m: int, a: int, b: int) -> int:
    """Cost of ``n`` rides with single tickets at ``a`` and ``m``-ride tickets at ``b``."""
    if b >= a * m:
        return n * a
    full, rest = divmod(n, m)
    if a > b:
        return full * b if rest == 0 else full * b + b
    if m > n and n * a > b:
        return b
    return full * b + rest * a