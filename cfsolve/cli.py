"""Command-line entry point that solves puzzles read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from cfsolve.arrays import find_three_indices
from cfsolve.numbers import round_summands
from cfsolve.strings import cards_digits


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def _solve_cards(tokens: Iterator[str]) -> Iterator[str]:
    length = _take_int(tokens)
    cards = _take(tokens)[:length]
    yield " ".join(str(digit) for digit in cards_digits(cards))


def _solve_triple(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(_take_int(tokens)):
        size = _take_int(tokens)
        permutation = [_take_int(tokens) for _ in range(size)]
        found = find_three_indices(permutation)
        if found is None:
            yield "NO"
        else:
            yield "YES"
            yield " ".join(str(index) for index in found)


def _solve_round(tokens: Iterator[str]) -> Iterator[str]:
    for _ in range(_take_int(tokens)):
        parts = round_summands(_take_int(tokens))
        yield str(len(parts))
        yield " ".join(str(part) for part in parts)


_SOLVERS: dict[str, Callable[[Iterator[str]], Iterator[str]]] = {
    "cards": _solve_cards,
    "triple": _solve_triple,
    "round": _solve_round,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a puzzle's input from stdin and print its answer."""
    parser = argparse.ArgumentParser(
        prog="cfsolve", description="Solve a puzzle read from standard input."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        lines = list(_SOLVERS[args.problem](tokens))
    except ValueError as exc:
        print(f"cfsolve: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())