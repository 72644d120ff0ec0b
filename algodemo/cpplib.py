"""Small helper functions: a greeting, Fibonacci numbers and a maximum finder."""

from collections.abc import Iterable

__all__ = ["print_hello_world", "fib", "find_max"]

_GREETING = "**** Hello World ****"


def print_hello_world() -> str:
    """Return the greeting banner."""
    return _GREETING


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError(f"fib is undefined for negative n: {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def find_max(inputs: Iterable[int]) -> int:
    """Return the largest value in ``inputs``, or -1 when there are none."""
    return max(inputs, default=-1)