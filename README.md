# solvebook

A collection of solutions to classic algorithm puzzles and number-theory
problems. Each solution is an ordinary Python function that takes ordinary
Python values and returns its answer. The package has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

| Module                  | Contents |
|-------------------------|----------|
| `solvebook.trees`       | `TreeNode`, `height`, `is_balanced`, `inorder`, `balance_bst` |
| `solvebook.text`        | `Trie` (`insert`, `shortest_root`), `replace_words`, `largest_number`, `clear_digits` |
| `solvebook.grids`       | `latest_day_to_cross`, `minimum_area` |
| `solvebook.searching`   | `min_days`, `max_distance`, `minimized_maximum`, `judge_square_sum`, `last_remaining`, `combination_sum` |
| `solvebook.windows`     | `max_satisfied`, `longest_subarray`, `find_winning_player`, `maximum_total_cost`, `results_array`, `check_subarray_sum`, `min_k_bit_flips`, `subarrays_div_by_k`, `number_of_subarrays` |
| `solvebook.counting`    | `height_checker`, `relative_sort_array`, `min_moves_to_seat`, `maximum_importance`, `minimum_average`, `sort_colors`, `max_profit_assignment`, `is_n_straight_hand`, `min_increment_for_unique` |
| `solvebook.primes`      | `sieve`, `sum_proper_divisors` |
| `solvebook.euler_basic` | `multiples_of_3_and_5`, `even_fibonacci_sum`, `largest_prime_factor`, `largest_palindrome_product`, `smallest_multiple`, `sum_square_difference`, `nth_prime`, `special_pythagorean_triplet`, `summation_of_primes`, `highly_divisible_triangular_number`, `longest_collatz_sequence`, `lattice_paths`, `power_digit_sum` |
| `solvebook.euler_more`  | `number_letter_counts`, `factorial_digit_sum`, `amicable_numbers_sum`, `non_abundant_sums`, `distinct_powers`, `coin_sums`, `digit_factorials`, `circular_primes`, `prime_permutations`, `consecutive_prime_sum` |
| `solvebook.euler_data`  | Puzzles over built-in tables: `largest_product_in_series`, `largest_product_in_grid`, `large_sum`, `maximum_path_sum`, `counting_sundays` |
| `solvebook.euler_cli`   | `main`, the `solvebook-euler` command |
| `solvebook.contests`    | `assembling_triangles`, `dune_phase`, `majority_opinion`, and the `triangles_main`, `dune_main`, `majority_main` commands |

Functions raise `ValueError` on input they cannot work with, such as an
empty list where at least one value is needed or lists of mismatched length.

## Examples

```python
from solvebook.text import clear_digits, largest_number
from solvebook.counting import height_checker, min_moves_to_seat, min_increment_for_unique
from solvebook.windows import find_winning_player, max_satisfied, longest_subarray
from solvebook.searching import judge_square_sum, max_distance, minimized_maximum

clear_digits("abc")                          # "abc"
largest_number([3, 30, 34, 5, 9])            # "9534330"

height_checker([1, 1, 4, 2, 1, 3])           # 3
min_moves_to_seat([3, 1, 5], [2, 7, 4])      # 4
min_increment_for_unique([3, 2, 1, 2, 1, 7]) # 6

find_winning_player([4, 2, 6, 3, 9], 2)      # 2
max_satisfied([1, 0, 1, 2, 1, 1, 7, 5],
              [0, 1, 0, 1, 0, 1, 0, 1], 3)   # 16
longest_subarray([8, 2, 4, 7], 4)            # 2

judge_square_sum(5)                          # True
max_distance([1, 2, 3, 4, 7], 3)             # 3
minimized_maximum(6, [11, 6])                # 3
```

Prime helpers:

```python
from solvebook.primes import sieve, sum_proper_divisors

sieve(20)                 # [2, 3, 5, 7, 11, 13, 17, 19]
sum_proper_divisors(28)   # 28
```

Trees are built from `TreeNode` values; `balance_bst` returns a new
height-balanced tree with the same in-order values:

```python
from solvebook.trees import TreeNode, balance_bst, inorder, is_balanced

chain = TreeNode(1, right=TreeNode(2, right=TreeNode(3)))
is_balanced(chain)               # False
balanced = balance_bst(chain)
is_balanced(balanced)            # True
inorder(balanced)                # [1, 2, 3]
```

## Command-line tools

Installing the package provides four commands.

### solvebook-euler

Prints the answers to numbered puzzles, one per line. Give one or more
puzzle numbers; with none it solves puzzle 29.

```
solvebook-euler 1 2 3
solvebook-euler --list
```

`--list` prints the numbers it knows: 1 to 21, 23, 29, 31, 34, 35, 49 and
50. An unknown number is reported as a usage error. Some of the larger
puzzles (for example 10, 14 and 35) do a fair amount of work and take a
moment.

### Contest commands

`solvebook-triangles`, `solvebook-dune` and `solvebook-majority` read
whitespace-separated integers from the file named as their one optional
argument, or from standard input when none is given. The first number is
the count of test cases, and each case follows it. Each prints one line per
case.

- `solvebook-triangles`: each case is a count `n` and then `n` stick lengths.
  It prints how many triples of sticks have their two longest sticks equally
  long.
- `solvebook-dune`: each case is four integers: green, warning and rest
  durations, then a time. It prints the phase at that time:
  `Guiding Beat`, `Warning Beat` or `Resting Phase`.
- `solvebook-majority`: each case is a count `n` and then `n` opinions
  numbered from 1. It prints, in ascending order, the opinions that can
  become everyone's, or `-1` if there are none.

```
printf '1\n3\n2 2 2\n' | solvebook-triangles
```

prints `1`. Input that ends before a case is complete is reported as a
`ValueError`.

## What it does not do

The number-theory puzzles run on fixed parameters and built-in tables; the
`solvebook-euler` command does not take other parameters or data files.
Puzzle 22 and other numbers not listed by `--list` have no solution here.