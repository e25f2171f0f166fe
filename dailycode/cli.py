"""Command-line runner that answers puzzle input in its contest format."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from dailycode import arith, decisions, sequences

OUT_OF_RANGE_MESSAGE = "outside the range of constraints, invalid input"


class _Tokens:
    """Whitespace-separated words of the input, read one at a time."""

    def __init__(self, text: str) -> None:
        self._words: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]


_Handler = Callable[[_Tokens], str]


@dataclass(frozen=True)
class _Problem:
    handler: _Handler
    repeated: bool = True


def _number(func: Callable[..., int], arity: int) -> _Handler:
    return lambda tokens: str(func(*tokens.integers(arity)))


def _label(func: Callable[..., str], arity: int) -> _Handler:
    return lambda tokens: func(*tokens.integers(arity))


def _verdict(func: Callable[..., bool], arity: int, yes: str, no: str) -> _Handler:
    return lambda tokens: yes if func(*tokens.integers(arity)) else no


def _degree(tokens: _Tokens) -> str:
    count = tokens.integer()
    return str(sequences.polynomial_degree(tokens.integers(count)))


def _contests(tokens: _Tokens) -> str:
    count = tokens.integer()
    starters, others = sequences.contest_counts(tokens.word() for _ in range(count))
    return f"{starters} {others}"


def _divisible(tokens: _Tokens) -> str:
    count, k = tokens.integers(2)
    return str(sequences.divisible_count(tokens.integers(count), k))


def _lead(tokens: _Tokens) -> str:
    count = tokens.integer()
    rounds = [tuple(tokens.integers(2)) for _ in range(count)]
    winner, lead = sequences.lead_winner(rounds)
    return f"{winner} {lead}"


def _sign_flips(tokens: _Tokens) -> str:
    count = tokens.integer()
    return str(sequences.min_sign_flips(tokens.integers(count)))


def _distance(tokens: _Tokens) -> str:
    count, m = tokens.integers(2)
    return str(sequences.max_total_distance(tokens.integers(count), m))


def _world_cup(tokens: _Tokens) -> str:
    points = tokens.integer()
    try:
        qualified = decisions.qualifies_for_world_cup(points)
    except ValueError:
        return OUT_OF_RANGE_MESSAGE
    return "YES" if qualified else "NO"


_PROBLEMS: dict[str, _Problem] = {
    "CWC23QUALIF": _Problem(_world_cup, repeated=False),
    "OFFICE": _Problem(_number(arith.weekly_hours, 2)),
    "THREETOPICS": _Problem(
        _verdict(decisions.topic_covered, 4, "Yes", "No"), repeated=False
    ),
    "WATERFILLING": _Problem(
        _verdict(decisions.water_filling_time, 3, "water filling time", "not now")
    ),
    "AORB": _Problem(_number(arith.best_score, 2)),
    "WATERCOOLER2": _Problem(_number(arith.months_to_rent, 2)),
    "WGHTS": _Problem(_verdict(decisions.can_measure, 4, "YES", "NO")),
    "POLTHIEF": _Problem(_number(arith.catch_time, 2)),
    "FLIPCARDS": _Problem(_number(arith.min_card_flips, 2)),
    "EXPERT": _Problem(_verdict(decisions.is_expert, 2, "YES", "NO")),
    "MAXTASTEPAIRS": _Problem(_number(arith.max_tastiness_pairs, 4)),
    "FILLCANDIES": _Problem(_number(arith.bags_needed, 3)),
    "NOTEBOOK": _Problem(_number(arith.notebooks, 1)),
    "TRAVELFAST": _Problem(_label(decisions.faster_vehicle, 2)),
    "BINBAT": _Problem(_number(arith.battle_time, 3)),
    "CHEFSCORE": _Problem(_verdict(decisions.can_score, 3, "YES", "NO")),
    "CHEFGAMES": _Problem(_verdict(decisions.all_rules_followed, 4, "IN", "OUT")),
    "SINGLEUSE": _Problem(_number(arith.min_attacks, 3)),
    "DPOLY": _Problem(_degree),
    "RECENTCONT": _Problem(_contests),
    "MAXTASTE": _Problem(_number(arith.max_tastiness, 4)),
    "CHN15A": _Problem(_divisible),
    "PRB01": _Problem(_verdict(decisions.is_prime, 1, "yes", "no")),
    "REACHFAST": _Problem(_number(arith.min_moves, 3)),
    "MYSERVE": _Problem(_label(decisions.server, 2)),
    "TRUESCORE": _Problem(
        _verdict(decisions.score_possible, 4, "POSSIBLE", "IMPOSSIBLE")
    ),
    "FIZZBUZZ2303": _Problem(_number(arith.team_choices, 1)),
    "TLG": _Problem(_lead, repeated=False),
    "NIBBLE": _Problem(_verdict(decisions.is_good_nibble, 1, "Good", "Not Good")),
    "BLACKJACK": _Problem(_number(arith.blackjack_card, 2)),
    "QUALIFY": _Problem(_verdict(decisions.qualifies, 3, "Qualify", "NotQualify")),
    "CHEAT": _Problem(_number(arith.tuesdays, 1)),
    "MINFLIPS": _Problem(_sign_flips),
    "FARAWAY": _Problem(_distance),
    "CYCLICQD": _Problem(_verdict(decisions.is_cyclic, 4, "YES", "NO")),
    "MOVIE2X": _Problem(_number(arith.movie_time, 2), repeated=False),
    "BATH": _Problem(_number(arith.max_bathers, 2)),
    "SALE": _Problem(_number(arith.sale_price, 3)),
    "PASSORFAIL": _Problem(_verdict(decisions.passes, 3, "PASS", "FAIL")),
    "CHEFEREN": _Problem(_number(arith.total_duration, 3)),
    "PRESENTS": _Problem(_number(arith.coins_needed, 1)),
    "MOZZ": _Problem(_number(arith.plates_needed, 3)),
    "JENGA": _Problem(_verdict(decisions.tower_possible, 2, "YES", "NO")),
    "CHEFAPPS": _Problem(_number(arith.apps_to_delete, 4)),
}


def solve(problem: str, text: str) -> str:
    """Answer the input ``text`` for the named problem, one line per case.

    Raises ValueError for an unknown problem or malformed input.
    """
    try:
        spec = _PROBLEMS[problem.upper()]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    tokens = _Tokens(text)
    cases = tokens.integer() if spec.repeated else 1
    return "".join(f"{spec.handler(tokens)}\n" for _ in range(cases))


def main(argv: list[str] | None = None) -> int:
    """Read puzzle input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="dailycode", description="Answer a daily puzzle from its input."
    )
    parser.add_argument("problem", nargs="?", help="problem code, e.g. DPOLY")
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or - for standard input"
    )
    parser.add_argument(
        "--list", action="store_true", help="list the known problem codes"
    )
    args = parser.parse_args(argv)

    if args.list:
        for name in sorted(_PROBLEMS):
            print(name)
        return 0
    if args.problem is None:
        parser.error("a problem code is required")
    if args.problem.upper() not in _PROBLEMS:
        parser.error(f"unknown problem {args.problem!r}")

    try:
        text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    except OSError as exc:
        print(f"dailycode: {exc}", file=sys.stderr)
        return 1

    try:
        output = solve(args.problem, text)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"dailycode: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())