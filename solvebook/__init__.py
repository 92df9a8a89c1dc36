"""Solutions to classic algorithm puzzles and number-theory problems."""

__version__ = "0.1.0"

__all__ = [
    "trees",
    "text",
    "grids",
    "searching",
    "windows",
    "counting",
    "primes",
    "euler_basic",
    "euler_more",
    "euler_data",
    "euler_cli",
    "contests",
]