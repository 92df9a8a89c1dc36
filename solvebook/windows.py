"""Subarray puzzles: sliding windows, prefix sums and running streaks."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from itertools import accumulate


def max_satisfied(customers: Sequence[int], grumpy: Sequence[int], minutes: int) -> int:
    """Return the most customers satisfied when the owner stays calm for ``minutes`` in a row.

    Customers are satisfied in minutes where the owner is not grumpy. The calm
    window also satisfies the customers of grumpy minutes inside it.
    """
    if len(customers) != len(grumpy):
        raise ValueError("customers and grumpy must have the same length")
    if minutes < 0:
        raise ValueError("minutes must not be negative")
    base = sum(c for c, g in zip(customers, grumpy) if g == 0)
    lost = [c if g == 1 else 0 for c, g in zip(customers, grumpy)]
    window = sum(lost[:minutes])
    best = window
    for leaving, entering in zip(lost, lost[minutes:]):
        window += entering - leaving
        best = max(best, window)
    return base + best


def longest_subarray(nums: Sequence[int], limit: int) -> int:
    """Return the length of the longest run whose largest and smallest values differ by at most ``limit``."""
    highs: deque[int] = deque()
    lows: deque[int] = deque()
    start = 0
    best = 0
    for end, value in enumerate(nums):
        while highs and highs[-1] < value:
            highs.pop()
        highs.append(value)
        while lows and lows[-1] > value:
            lows.pop()
        lows.append(value)
        while highs[0] - lows[0] > limit:
            leaving = nums[start]
            if highs[0] == leaving:
                highs.popleft()
            if lows[0] == leaving:
                lows.popleft()
            start += 1
        best = max(best, end - start + 1)
    return best


def find_winning_player(skills: Sequence[int], k: int) -> int:
    """Return the index of the first player to win ``k`` games in a row.

    Players queue up by index; the front two play, the winner stays at the
    front and the loser goes to the back. The higher skill wins.
    """
    if not skills:
        raise ValueError("find_winning_player needs at least one player")
    if k >= len(skills):
        return max(range(len(skills)), key=lambda i: (skills[i], -i))
    champion = 0
    wins = 0
    for challenger in range(1, len(skills)):
        if skills[challenger] >= skills[champion]:
            champion = challenger
            wins = 1
        else:
            wins += 1
        if wins >= k:
            return champion
    return champion


def maximum_total_cost(nums: Sequence[int]) -> int:
    """Return the best total cost of splitting ``nums`` into subarrays with alternating signs.

    The cost of a subarray adds its first element, subtracts the second,
    adds the third and so on.
    """
    if not nums:
        raise ValueError("maximum_total_cost needs at least one number")
    before, current = 0, nums[0]
    for previous, value in zip(nums, nums[1:]):
        before, current = current, max(current + value, before + previous - value)
    return current


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Return the power of every window of size ``k``.

    The power is the window's last element when the window climbs by exactly
    one at each step, and -1 otherwise.
    """
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the length of nums")
    results: list[int] = []
    run = 0
    for i, value in enumerate(nums):
        run = run + 1 if i > 0 and value == nums[i - 1] + 1 else 1
        if i >= k - 1:
            results.append(value if run >= k else -1)
    return results


def _truncated_remainder(value: int, divisor: int) -> int:
    """Remainder with the sign of the dividend, as integer division toward zero gives."""
    remainder = abs(value) % abs(divisor)
    return -remainder if value < 0 else remainder


def check_subarray_sum(nums: Sequence[int], k: int) -> bool:
    """Tell whether a run of at least two numbers sums to a multiple of ``k``.

    With ``k`` equal to zero the run must sum to zero.
    """
    first_seen = {0: -1}
    total = 0
    for i, value in enumerate(nums):
        total += value
        if k != 0:
            total = _truncated_remainder(total, k)
        if total in first_seen:
            if i - first_seen[total] > 1:
                return True
        else:
            first_seen[total] = i
    return False


def min_k_bit_flips(nums: Sequence[int], k: int) -> int:
    """Return the fewest flips of ``k`` adjacent bits that turn every bit to 1, or -1."""
    if k < 1:
        raise ValueError("k must be at least 1")
    n = len(nums)
    started: deque[int] = deque()
    flips = 0
    for i, bit in enumerate(nums):
        if started and started[0] <= i - k:
            started.popleft()
        if len(started) % 2 == bit:
            if i + k > n:
                return -1
            started.append(i)
            flips += 1
    return flips


def subarrays_div_by_k(nums: Sequence[int], k: int) -> int:
    """Return how many non-empty runs of ``nums`` sum to a multiple of ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    seen: Counter[int] = Counter({0: 1})
    count = 0
    for prefix in accumulate(nums):
        remainder = prefix % k
        count += seen[remainder]
        seen[remainder] += 1
    return count


def number_of_subarrays(nums: Sequence[int], k: int) -> int:
    """Return how many runs of ``nums`` hold exactly ``k`` odd numbers."""
    prefixes: Counter[int] = Counter([0])
    prefixes.update(accumulate(value & 1 for value in nums))
    return sum(
        count * prefixes.get(odd - k, 0)
        for odd, count in prefixes.items()
        if odd >= k
    )