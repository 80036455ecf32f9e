"""Puzzles over strings and rows of characters."""

from __future__ import annotations

from collections.abc import Iterable

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"
_ROW_WIDTH = 5
_PAIR = "OO"


def cards_digits(s: str) -> list[int]:
    """Digits of the largest number spelled by shuffled "one" and "zero" cards."""
    ones = s.count("n")
    zeros = (len(s) - 3 * ones) // 4
    return [1] * ones + [0] * zeros


def zeros_to_erase(s: str) -> int:
    """Number of zeros to erase so that all ones form one contiguous block."""
    first = s.find("1")
    if first == -1:
        return 0
    last = s.rfind("1")
    return s[first : last + 1].count("0")


def recover_string(b: str) -> str:
    """Rebuild a string from the concatenation of all its length-2 substrings."""
    if not b:
        raise ValueError("encoded string must not be empty")
    return b[0] + b[1::2]


def football_winner(goals: Iterable[str]) -> str:
    """Name of the team that scored more goals; the second team wins a tie."""
    scorers = list(goals)
    if not scorers:
        raise ValueError("at least one goal is required")
    first = scorers[0]
    second = next((team for team in scorers if team != first), "")
    first_count = scorers.count(first)
    second_count = scorers.count(second) if second else 0
    return first if first_count > second_count else second


def _finds_both(s: str, first: str, second: str, second_step: int) -> bool:
    found_first = found_second = False
    i = 0
    while i < len(s):
        if not found_first and s.startswith(first, i):
            found_first = True
            i += len(first)
        elif not found_second and s.startswith(second, i):
            found_second = True
            i += second_step
        else:
            i += 1
    return found_first and found_second


def has_two_substrings(s: str) -> bool:
    """Whether ``s`` holds non-overlapping occurrences of "AB" and "BA"."""
    return (
        _finds_both(s, "BA", "AB", 2)
        or _finds_both(s, "BAB", "BA", 1)
        or _finds_both(s, "ABA", "AB", 2)
    )


def wheel_rotations(s: str) -> int:
    """Fewest wheel steps to print ``s``, starting from 'a' on a circular alphabet."""
    total = 0
    current = 0
    for char in s:
        target = _ALPHABET.find(char)
        if len(char) != 1 or target == -1:
            raise ValueError(f"not a lowercase letter: {char!r}")
        forward = (target - current) % len(_ALPHABET)
        total += min(forward, len(_ALPHABET) - forward)
        current = target
    return total


def seat_buddies(rows: Iterable[str]) -> list[str] | None:
    """Seat two buddies on the first free pair of neighbouring seats.

    Each row is five characters: two seats, a walkway, two seats. Returns the
    rows with the chosen pair marked "++", or None if no pair is free.
    """
    bus = list(rows)
    for row in bus:
        if len(row) != _ROW_WIDTH:
            raise ValueError(f"row must have {_ROW_WIDTH} characters: {row!r}")
    if not any(row[0:2] == _PAIR or row[3:5] == _PAIR for row in bus):
        return None

    result = []
    placed = False
    for row in bus:
        if not placed:
            for start in (0, 3):
                if row[start : start + 2] == _PAIR:
                    row = row[:start] + "++" + row[start + 2 :]
                    placed = True
                    break
        result.append(row)
    return result