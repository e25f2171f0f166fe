# dailycode

Answers to a set of short contest exercises: card flips, knockout rounds,
primality checks, score leads and the like. Each exercise is a plain Python
function. A command-line solver reads the usual contest input and prints one
answer per line.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

The functions are grouped by the kind of answer they give.

- `dailycode.arith` returns computed numbers, for example `catch_time`,
  `min_card_flips`, `bags_needed`, `battle_time`, `min_attacks`, `tuesdays`
  and `weekly_hours`.
- `dailycode.decisions` returns booleans or labels, for example `is_prime`,
  `can_measure`, `faster_vehicle` (`"BIKE"`, `"CAR"` or `"SAME"`), `server`
  (`"Alice"` or `"Bob"`) and `topic_covered`. `qualifies_for_world_cup`
  raises `ValueError` for points outside 1 to 20.
- `dailycode.sequences` works over iterables of values:
  `polynomial_degree`, `contest_counts`, `divisible_count`, `lead_winner`,
  `min_sign_flips` and `max_total_distance`.

```python
from dailycode.arith import catch_time, bags_needed
from dailycode.decisions import is_prime
from dailycode.sequences import polynomial_degree, lead_winner

catch_time(3, 7)                        # 4
bags_needed(10, 3, 2)                   # bags of 3 boxes of 2 candies: 2
is_prime(7)                             # True
polynomial_degree([0, 1, 0])            # 1
lead_winner([(140, 82), (89, 134)])     # (1, 58)
```

`dailycode.cli.solve(problem, text)` takes a problem code and the complete
input text, and returns the output as a string with one line per case. It
raises `ValueError` for an unknown code or malformed input.

## Command line

```
dailycode PROBLEM [INPUT]
dailycode --list
```

`PROBLEM` is a problem code such as `DPOLY` or `POLTHIEF` (case does not
matter); `--list` prints all known codes. Input is read from the file `INPUT`,
or from standard input when it is omitted or `-`.

Most problems expect a count of test cases followed by each case's values.
`CWC23QUALIF`, `THREETOPICS`, `TLG` and `MOVIE2X` take a single case with no
leading count.

```
$ printf '2\n3 7\n5 5\n' | dailycode POLTHIEF
4
0
```

On malformed input the command prints a message to standard error and exits
with status 1.