"""Searching sorted sequences: binary, ternary, exponential and threaded binary search.

Every function returns the index of the value in the sequence, or -1 when the
value is not present.
"""

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

__all__ = [
    "binary_search",
    "ternary_search",
    "exponential_search",
    "binary_search_par",
    "DEFAULT_THREADS",
]

DEFAULT_THREADS = 10

NOT_FOUND = -1


def _binary_search_range(nums: Sequence, low: int, high: int, n) -> int:
    """Binary search for ``n`` within the inclusive index range [low, high]."""
    if not nums:
        return NOT_FOUND
    while low <= high:
        mid = low + (high - low) // 2
        value = nums[mid]
        if value == n:
            return mid
        if value > n:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND


def binary_search(nums: Sequence, n) -> int:
    """Classic binary search over the whole of ``nums``."""
    return _binary_search_range(nums, 0, len(nums) - 1, n)


def ternary_search(nums: Sequence, n) -> int:
    """Split the range in three, then finish with binary search in the right third."""
    if not nums:
        return NOT_FOUND
    low, high = 0, len(nums) - 1
    mid1 = low + (high - low) // 3
    mid2 = high - (high - low) // 3

    if nums[mid1] == n:
        return mid1
    if nums[mid2] == n:
        return mid2

    if n < nums[mid1]:
        return _binary_search_range(nums, low, mid1 - 1, n)
    if n > nums[mid2]:
        return _binary_search_range(nums, mid2 + 1, high, n)
    return _binary_search_range(nums, mid1 + 1, mid2 - 1, n)


def exponential_search(nums: Sequence, n) -> int:
    """Double a bound until it passes ``n``, then binary search behind it."""
    if not nums:
        return NOT_FOUND
    size = len(nums)
    bound = 1
    while bound < size and nums[bound] < n:
        bound *= 2
    return _binary_search_range(nums, bound // 2, min(bound + 1, size - 1), n)


def binary_search_par(nums: Sequence, n, number_of_threads: int = DEFAULT_THREADS) -> int:
    """Split ``nums`` into chunks and binary search each chunk in its own thread.

    The result of the earliest chunk that holds ``n`` wins.
    """
    if number_of_threads < 1:
        raise ValueError(f"number_of_threads must be positive, got {number_of_threads}")
    if not nums:
        return NOT_FOUND

    size = len(nums)
    step = -(-size // number_of_threads)
    chunks = [
        (low, min(low + step - 1, size - 1))
        for low in (i * step for i in range(number_of_threads))
        if low <= size - 1
    ]

    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        results = list(
            pool.map(lambda bounds: _binary_search_range(nums, bounds[0], bounds[1], n), chunks)
        )

    return next((r for r in results if r != NOT_FOUND), NOT_FOUND)