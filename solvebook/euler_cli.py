"""Command line entry point that prints the answers to numbered puzzles."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Optional

from solvebook.euler_basic import (
    even_fibonacci_sum,
    highly_divisible_triangular_number,
    largest_palindrome_product,
    largest_prime_factor,
    lattice_paths,
    longest_collatz_sequence,
    multiples_of_3_and_5,
    nth_prime,
    power_digit_sum,
    smallest_multiple,
    special_pythagorean_triplet,
    sum_square_difference,
    summation_of_primes,
)
from solvebook.euler_data import (
    counting_sundays,
    large_sum,
    largest_product_in_grid,
    largest_product_in_series,
    maximum_path_sum,
)
from solvebook.euler_more import (
    amicable_numbers_sum,
    circular_primes,
    coin_sums,
    consecutive_prime_sum,
    digit_factorials,
    distinct_powers,
    factorial_digit_sum,
    non_abundant_sums,
    number_letter_counts,
    prime_permutations,
)

_PROBLEMS: dict[int, Callable[[], object]] = {
    1: lambda: multiples_of_3_and_5(1000),
    2: lambda: even_fibonacci_sum(4_000_000),
    3: lambda: largest_prime_factor(600851475143),
    4: largest_palindrome_product,
    5: smallest_multiple,
    6: lambda: sum_square_difference(100),
    7: lambda: nth_prime(10000),
    8: lambda: largest_product_in_series(13),
    9: lambda: special_pythagorean_triplet(1000),
    10: lambda: summation_of_primes(2_000_000),
    11: lambda: largest_product_in_grid(4),
    12: lambda: highly_divisible_triangular_number(500),
    13: lambda: large_sum(10),
    14: lambda: longest_collatz_sequence(1_000_001),
    15: lambda: lattice_paths(20),
    16: lambda: power_digit_sum(1000),
    17: number_letter_counts,
    18: maximum_path_sum,
    19: lambda: counting_sundays(1901, 2000),
    20: lambda: factorial_digit_sum(100),
    21: lambda: amicable_numbers_sum(10001),
    23: lambda: non_abundant_sums(28123),
    29: distinct_powers,
    31: lambda: coin_sums(200),
    34: lambda: digit_factorials(999_999),
    35: lambda: circular_primes(1_000_000),
    49: prime_permutations,
    50: lambda: consecutive_prime_sum(1_000_000),
}

_DEFAULT_PROBLEM = 29


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solvebook-euler",
        description="Print the answers to the numbered puzzles, one per line.",
    )
    parser.add_argument(
        "problems",
        nargs="*",
        type=int,
        metavar="N",
        help=f"puzzle numbers to solve (default: {_DEFAULT_PROBLEM})",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="list the available puzzle numbers and exit",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the requested puzzles and print each answer on its own line."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.list:
        print(" ".join(str(number) for number in sorted(_PROBLEMS)))
        return 0
    problems = args.problems or [_DEFAULT_PROBLEM]
    unknown = [number for number in problems if number not in _PROBLEMS]
    if unknown:
        parser.error(f"no solution for puzzle {unknown[0]}")
    for number in problems:
        print(_PROBLEMS[number]())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())