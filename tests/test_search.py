import functools
import random

import pytest

from algodemo.search import (
    binary_search,
    binary_search_par,
    exponential_search,
    ternary_search,
)


def _random_sorted(seed, size):
    return sorted(random.Random(seed).sample(range(2**31), size))


def test_empty():
    assert exponential_search([], 10) == -1
    assert binary_search([], 10) == -1
    assert ternary_search([], 10) == -1
    assert binary_search_par([], 10) == -1


def test_single_existing():
    assert exponential_search([3], 3) == 0
    assert binary_search([3], 3) == 0
    assert ternary_search([3], 3) == 0
    assert binary_search_par([3], 3) == 0


def test_single_missing():
    assert exponential_search([3], 4) == -1
    assert binary_search([3], 4) == -1
    assert ternary_search([3], 4) == -1
    assert binary_search_par([3], 4) == -1


@pytest.mark.parametrize("n, expected", [(77, 3), (90, 4), (1, 0), (4, -1)])
def test_small_vector(n, expected):
    data = [1, 3, 5, 77, 90]
    assert exponential_search(data, n) == expected
    assert binary_search(data, n) == expected
    assert ternary_search(data, n) == expected
    assert binary_search_par(data, n) == expected


def test_random_nine_elements_last():
    for seed in range(9):
        data = _random_sorted(seed, 9)
        target = data[8]
        assert exponential_search(data, target) == 8
        assert binary_search(data, target) == 8
        assert ternary_search(data, target) == 8
        assert binary_search_par(data, target) == 8


def test_random_thousand_elements():
    for i in range(1000):
        data = _random_sorted(i, 1000)
        target = data[i]
        assert exponential_search(data, target) == i
        assert binary_search(data, target) == i
        assert ternary_search(data, target) == i
        assert binary_search_par(data, target) == i


def test_very_large_sequence():
    data = range(10_000_000)
    first, last = data[0], data[-1]
    last_index = len(data) - 1

    assert exponential_search(data, first) == 0
    assert exponential_search(data, last) == last_index

    assert binary_search(data, first) == 0
    assert binary_search(data, last) == last_index

    assert ternary_search(data, first) == 0
    assert ternary_search(data, last) == last_index

    assert binary_search_par(data, first) == 0
    assert binary_search_par(data, last) == last_index


@pytest.mark.parametrize("missing", [1001, -3, 5000])
def test_missing_in_larger_sequence(missing):
    data = list(range(0, 2000, 2))
    assert exponential_search(data, missing) == -1
    assert binary_search(data, missing) == -1
    assert ternary_search(data, missing) == -1
    assert binary_search_par(data, missing) == -1


@pytest.mark.parametrize("threads", [1, 2, 3, 7, 10, 64])
def test_binary_search_par_thread_counts(threads):
    data = list(range(0, 300, 3))
    par = functools.partial(binary_search_par, number_of_threads=threads)
    for index, value in enumerate(data):
        assert par(data, value) == index
    assert par(data, 1) == -1


def test_binary_search_par_more_threads_than_items():
    assert binary_search_par([5, 6], 6, number_of_threads=10) == 1


@pytest.mark.parametrize("threads", [0, -2])
def test_binary_search_par_rejects_bad_thread_count(threads):
    with pytest.raises(ValueError):
        binary_search_par([1, 2, 3], 2, number_of_threads=threads)