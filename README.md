# cfsolve

A collection of answers to short programming-contest puzzles, each written as
an ordinary Python function: it takes the puzzle's input as arguments and
returns the answer instead of printing it.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Using the functions

The puzzles are grouped by what they work on:

- `cfsolve.strings`: puzzles over text: `cards_digits`, `zeros_to_erase`,
  `recover_string`, `football_winner`, `has_two_substrings`,
  `wheel_rotations` and `seat_buddies`.
- `cfsolve.numbers`: puzzles over integers: `moves_to_divisible`,
  `candy_ways`, `candies_x`, `phoenix_balance`, `orac_additions`,
  `round_summands`, `lcm_pair`, `chess_coloring_turns`, `count_set_bits`,
  `bill_count`, `divisible_number`, `min_steps_multiple`, `shovels_needed`,
  `bachgold_split`, `stick_game_winner` and `ticket_cost`.
- `cfsolve.arrays`: puzzles over sequences: `good_array`,
  `find_three_indices`, `common_subsequence`, `shortest_length`,
  `can_remove_all`, `damaged_dragons`, `min_coins_twins`,
  `max_ribbon_pieces`, `dragon_duel`, `gravity_flip`, `untreated_crimes`,
  `laptop_happy`, `holiday_of_equality`, `chess_log_valid`,
  `nearest_minimums`, `min_taxi_time` and `snooze_presses`.

```python
from cfsolve.numbers import bill_count, count_set_bits
from cfsolve.strings import recover_string

bill_count(125)          # 3: one 100, one 20 and one 5
count_set_bits(5)        # 2
recover_string("abbaac") # "abac"
```

Where a puzzle may have no answer, the function returns `None` (for example
`lcm_pair`, `divisible_number`, `find_three_indices`, `seat_buddies`).
Inputs a function cannot work with, such as an empty sequence where one is
required or a non-positive divisor, raise `ValueError`.

## Command line

Installing the package adds a `cfsolve` command. It takes the name of a
puzzle, reads that puzzle's input as whitespace-separated tokens from
standard input and prints the answer:

- `cfsolve cards`: a length and a string of shuffled "one"/"zero" letters;
  prints the digits of the largest number, separated by spaces.
- `cfsolve triple`: a count of test cases, then for each a size and that many
  numbers; prints `NO`, or `YES` followed by three 1-based indices.
- `cfsolve round`: a count of test cases, then one number each; prints how
  many round summands it splits into and the summands, least significant
  first.

```
$ echo "4 ezor" | cfsolve cards
0
$ echo "1 4 2 1 4 3" | cfsolve triple
YES
1 3 4
$ echo "2 5009 7" | cfsolve round
2
9 5000
1
7
```

If the input ends early or holds a token that is not a number where one is
expected, the command prints a message to standard error and exits with
status 1.

`cfsolve --help` lists the puzzle names the command accepts.

## What it does not do

Only the three puzzles above can be run from the command line; every other
puzzle is reachable only by calling its function from Python.