"""Small contest problems: isosceles triangles, sandworm beats, majority opinions."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from math import comb
from typing import Optional, TextIO

GUIDING_BEAT = "Guiding Beat"
WARNING_BEAT = "Warning Beat"
RESTING_PHASE = "Resting Phase"


def assembling_triangles(lengths: Iterable[int]) -> int:
    """Count triples of sticks whose two longest sticks are equally long.

    Three equal sticks count once; two equal sticks pair with any shorter one.
    """
    counts = Counter(lengths)
    total = 0
    shorter = 0
    for length in sorted(counts):
        v = counts[length]
        total += comb(v, 3) + comb(v, 2) * shorter
        shorter += v
    return total


def dune_phase(green: int, warning: int, rest: int, time: int) -> str:
    """Return the phase of a repeating green, warning, rest cycle at ``time``."""
    if min(green, warning, rest) < 0:
        raise ValueError("phase lengths must not be negative")
    cycle = green + warning + rest
    if cycle <= 0:
        raise ValueError("the cycle must have positive length")
    if time < 0:
        raise ValueError("time must not be negative")
    t = time % cycle
    if t < green:
        return GUIDING_BEAT
    if t < green + warning:
        return WARNING_BEAT
    return RESTING_PHASE


def majority_opinion(opinions: Sequence[int]) -> list[int]:
    """Return, ascending, the 1-based opinions that can become everyone's.

    An opinion qualifies when it appears twice within any three adjacent
    positions; only opinions from 1 to the number of cows are reported.
    """
    n = len(opinions)
    good = {
        value
        for i, value in enumerate(opinions)
        if (i > 0 and value == opinions[i - 1]) or (i > 1 and value == opinions[i - 2])
    }
    return sorted(value for value in good if 1 <= value <= n)


def _tokens(argv: Optional[Sequence[str]], prog: str) -> Iterator[int]:
    parser = argparse.ArgumentParser(prog=prog, description="Read test cases and print answers.")
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)
    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    return iter(int(token) for token in text.split())


def _cases(tokens: Iterator[int]) -> range:
    try:
        return range(next(tokens))
    except StopIteration:
        raise ValueError("input is empty") from None


def _take(tokens: Iterator[int], count: int) -> list[int]:
    values = [value for _, value in zip(range(count), tokens)]
    if len(values) != count:
        raise ValueError("input ended early")
    return values


def _emit(lines: Iterable[str], out: TextIO) -> None:
    for line in lines:
        out.write(line + "\n")


def triangles_main(argv: Optional[Sequence[str]] = None) -> int:
    """Answer each triangle-counting test case from the input."""
    tokens = _tokens(argv, "solvebook-triangles")
    answers = []
    for _ in _cases(tokens):
        (n,) = _take(tokens, 1)
        answers.append(str(assembling_triangles(_take(tokens, n))))
    _emit(answers, sys.stdout)
    return 0


def dune_main(argv: Optional[Sequence[str]] = None) -> int:
    """Answer each beat-phase test case from the input."""
    tokens = _tokens(argv, "solvebook-dune")
    answers = [dune_phase(*_take(tokens, 4)) for _ in _cases(tokens)]
    _emit(answers, sys.stdout)
    return 0


def majority_main(argv: Optional[Sequence[str]] = None) -> int:
    """Answer each majority-opinion test case from the input; -1 when none qualify."""
    tokens = _tokens(argv, "solvebook-majority")
    answers = []
    for _ in _cases(tokens):
        (n,) = _take(tokens, 1)
        good = majority_opinion(_take(tokens, n))
        answers.append(" ".join(map(str, good)) if good else "-1")
    _emit(answers, sys.stdout)
    return 0