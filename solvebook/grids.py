"""Grid puzzles: crossing a flooding grid and bounding boxes of ones."""

from __future__ import annotations

from collections.abc import Sequence

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _can_cross(row: int, col: int, flooded: set[tuple[int, int]]) -> bool:
    """Tell whether land connects the top row to the bottom row."""
    frontier = [(0, y) for y in range(col) if (0, y) not in flooded]
    seen = set(frontier)
    while frontier:
        x, y = frontier.pop()
        if x == row - 1:
            return True
        for dx, dy in _DIRECTIONS:
            nxt = (x + dx, y + dy)
            if (
                0 <= nxt[0] < row
                and 0 <= nxt[1] < col
                and nxt not in flooded
                and nxt not in seen
            ):
                seen.add(nxt)
                frontier.append(nxt)
    return False


def latest_day_to_cross(row: int, col: int, cells: Sequence[Sequence[int]]) -> int:
    """Return the last day on which the grid can be walked from top to bottom.

    On day ``i`` the 1-based cell ``cells[i - 1]`` turns to water.
    """
    lo, hi = 0, len(cells)
    best = 0
    while lo <= hi:
        mid = (lo + hi) // 2
        flooded = {(r - 1, c - 1) for r, c in cells[:mid]}
        if _can_cross(row, col, flooded):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return best


def minimum_area(grid: Sequence[Sequence[int]]) -> int:
    """Return the area of the smallest rectangle holding every 1 in the grid.

    A grid without ones yields the area of the whole grid.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    height = len(grid)
    width = len(grid[0])
    rows = [r for r, line in enumerate(grid) if 1 in line[:width]]
    if not rows:
        return height * width
    cols = [c for c in range(width) if any(line[c] == 1 for line in grid)]
    return (rows[-1] - rows[0] + 1) * (cols[-1] - cols[0] + 1)