"""Sorting and counting puzzles over lists of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def height_checker(heights: Sequence[int]) -> int:
    """Return how many positions differ from the sorted order."""
    return sum(a != b for a, b in zip(heights, sorted(heights)))


def relative_sort_array(arr1: Sequence[int], arr2: Sequence[int]) -> list[int]:
    """Order ``arr1`` by the order of ``arr2``; values not in ``arr2`` follow in ascending order."""
    counts = Counter(arr1)
    ordered = [value for value in arr2 for _ in range(counts[value])]
    known = set(arr2)
    ordered.extend(sorted(value for value in arr1 if value not in known))
    return ordered


def min_moves_to_seat(seats: Sequence[int], students: Sequence[int]) -> int:
    """Return the fewest single steps needed to seat every student."""
    if len(seats) != len(students):
        raise ValueError("seats and students must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(seats), sorted(students)))


def maximum_importance(n: int, roads: Iterable[Sequence[int]]) -> int:
    """Return the largest total road importance when cities get the values 1..n."""
    degree: Counter[int] = Counter()
    for a, b in roads:
        degree[a] += 1
        degree[b] += 1
    ranked = sorted(degree.values(), reverse=True)
    return sum(d * value for d, value in zip(ranked, range(n, 0, -1)))


def minimum_average(nums: Sequence[int]) -> float:
    """Return the smallest average of the smallest and largest values paired inward."""
    if not nums:
        raise ValueError("minimum_average needs at least one number")
    ordered = sorted(nums)
    return min((a + b) / 2 for a, b in zip(ordered, reversed(ordered)))


def sort_colors(nums: list[int]) -> None:
    """Sort the list in place."""
    nums.sort()


def max_profit_assignment(
    difficulty: Sequence[int], profit: Sequence[int], worker: Iterable[int]
) -> int:
    """Return the total profit when each worker takes the best job within their ability."""
    if len(difficulty) != len(profit):
        raise ValueError("difficulty and profit must have the same length")
    jobs = sorted(zip(difficulty, profit), key=lambda job: (job[0], -job[1]))
    total = 0
    best = 0
    j = 0
    for ability in sorted(worker):
        while j < len(jobs) and jobs[j][0] <= ability:
            best = max(best, jobs[j][1])
            j += 1
        total += best
    return total


def is_n_straight_hand(hand: Sequence[int], group_size: int) -> bool:
    """Tell whether the cards split into groups of ``group_size`` consecutive values."""
    if group_size <= 0:
        raise ValueError("group_size must be positive")
    if len(hand) % group_size:
        return False
    counts = Counter(hand)
    for card in sorted(counts):
        needed = counts[card]
        if not needed:
            continue
        for value in range(card, card + group_size):
            if counts[value] < needed:
                return False
            counts[value] -= needed
    return True


def min_increment_for_unique(nums: Iterable[int]) -> int:
    """Return the fewest increments by one that make every value distinct."""
    moves = 0
    next_free: int | None = None
    for value in sorted(nums):
        target = value if next_free is None else max(value, next_free)
        moves += target - value
        next_free = target + 1
    return moves