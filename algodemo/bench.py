"""Micro-benchmarks for the string, arithmetic and search routines.

Each benchmark runs a callable a fixed number of times and reports the mean wall
and CPU time per call. The command prints the results as a console table or as
CSV.
"""

from __future__ import annotations

import argparse
import csv
import re
import sys
import time
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, replace
from typing import Any

from algodemo.search import binary_search, binary_search_par, exponential_search

__all__ = [
    "BenchmarkResult",
    "some_function",
    "add_by_value",
    "increment",
    "sorted_data",
    "range_args",
    "run_benchmark",
    "main",
]

_ULONG_MASK = (1 << 64) - 1
_DEFAULT_REPEAT = 10
_SEARCH_INDEX = 100
_PAR_THREADS = 2
_CSV_HEADER = ("name", "iterations", "real_time", "cpu_time", "time_unit", "items_per_second")


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing of one benchmark: how many calls were made and how long they took."""

    name: str
    iterations: int
    total_seconds: float
    cpu_seconds: float = 0.0
    items_processed: int = 0

    @property
    def seconds_per_iteration(self) -> float:
        return self.total_seconds / self.iterations if self.iterations else 0.0

    @property
    def cpu_seconds_per_iteration(self) -> float:
        return self.cpu_seconds / self.iterations if self.iterations else 0.0

    @property
    def items_per_second(self) -> float:
        """Items processed per wall-clock second, or 0.0 when nothing was measured."""
        if not self.items_processed or self.total_seconds <= 0:
            return 0.0
        return self.items_processed / self.total_seconds


def some_function(size: int) -> int:
    """Build two equal strings of ``size`` dashes and compare them (-1, 0 or 1)."""
    first = "-" * size
    second = "-" * size
    return (first > second) - (first < second)


def add_by_value(n: int, value: int) -> int:
    """Add ``value`` to a running total ``n`` times, wrapping at 64 bits."""
    total = 0
    for _ in range(n):
        total = (total + value) & _ULONG_MASK
    return total


def increment(n: int) -> int:
    """Increment a counter ``n`` times and return it."""
    counter = 0
    for _ in range(n):
        counter += 1
    return counter


def sorted_data(size: int) -> list[int]:
    """Return the sorted list 0, 1, ..., size - 1."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return list(range(size))


def _range_values(start: int, stop: int, multiplier: int) -> Iterator[int]:
    yield start
    if start == stop:
        return
    power = 1
    while power < stop:
        if power > start:
            yield power
        power *= multiplier
    yield stop


def range_args(start: int, stop: int, multiplier: int) -> list[int]:
    """Return ``start``, the powers of ``multiplier`` strictly between, and ``stop``."""
    if multiplier < 2:
        raise ValueError(f"multiplier must be at least 2, got {multiplier}")
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if start > stop:
        raise ValueError(f"start {start} is greater than stop {stop}")
    return list(_range_values(start, stop, multiplier))


def run_benchmark(
    name: str,
    func: Callable[..., Any],
    args: Sequence[Any] = (),
    repeat: int = _DEFAULT_REPEAT,
) -> BenchmarkResult:
    """Call ``func(*args)`` ``repeat`` times and return the measured times."""
    if repeat < 1:
        raise ValueError(f"repeat must be positive, got {repeat}")
    call_args = tuple(args)
    wall_start = time.perf_counter()
    cpu_start = time.process_time()
    for _ in range(repeat):
        func(*call_args)
    cpu_elapsed = time.process_time() - cpu_start
    wall_elapsed = time.perf_counter() - wall_start
    return BenchmarkResult(
        name=name,
        iterations=repeat,
        total_seconds=wall_elapsed,
        cpu_seconds=cpu_elapsed,
    )


@dataclass(frozen=True)
class _Case:
    name: str
    func: Callable[..., Any]
    make_args: Callable[[], tuple]
    items_per_iteration: int = 0


def _search_args(size: int) -> tuple:
    data = sorted_data(size)
    return data, data[_SEARCH_INDEX]


def _par_args(size: int) -> tuple:
    data = sorted_data(size)
    return data, data[_SEARCH_INDEX], _PAR_THREADS


def _suite() -> Iterator[_Case]:
    for size in range_args(1 << 10, 1 << 20, 2):
        yield _Case(f"BM_SomeFunction/{size}", some_function, lambda s=size: (s,))
    for n in range_args(1 << 8, 1 << 10, 2):
        yield _Case(f"BM_Increment/{n}", increment, lambda v=n: (v,))
    search_sizes = range_args(1 << 15, 1 << 18, 2)
    for size in search_sizes:
        yield _Case(
            f"BM_BinarySearch/{size}", binary_search, lambda s=size: _search_args(s), size
        )
    for size in search_sizes:
        yield _Case(
            f"BM_ExponentialSearch/{size}",
            exponential_search,
            lambda s=size: _search_args(s),
            size,
        )
    for size in search_sizes:
        yield _Case(
            f"BM_BinarySearchPar/{size}/{_PAR_THREADS}",
            binary_search_par,
            lambda s=size: _par_args(s),
            size,
        )


def _measure(case: _Case, repeat: int) -> BenchmarkResult:
    result = run_benchmark(case.name, case.func, case.make_args(), repeat)
    return replace(result, items_processed=result.iterations * case.items_per_iteration)


def _format_items(result: BenchmarkResult) -> str:
    rate = result.items_per_second
    return f"{rate:.6g}" if rate else ""


def _write_csv(results: Iterator[BenchmarkResult], out) -> None:
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(_CSV_HEADER)
    for result in results:
        writer.writerow(
            (
                result.name,
                result.iterations,
                f"{result.seconds_per_iteration * 1e9:.3f}",
                f"{result.cpu_seconds_per_iteration * 1e9:.3f}",
                "ns",
                _format_items(result),
            )
        )


def _write_console(results: Iterator[BenchmarkResult], out) -> None:
    header = f"{'Benchmark':<36}{'Time':>16}{'CPU':>16}{'Iterations':>12}  items/s"
    print(header, file=out)
    print("-" * len(header), file=out)
    for result in results:
        wall = f"{result.seconds_per_iteration * 1e9:.0f} ns"
        cpu = f"{result.cpu_seconds_per_iteration * 1e9:.0f} ns"
        print(
            f"{result.name:<36}{wall:>16}{cpu:>16}{result.iterations:>12}  "
            f"{_format_items(result)}",
            file=out,
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark suite and print the results."""
    parser = argparse.ArgumentParser(prog="algodemo-bench", description=__doc__)
    parser.add_argument(
        "--benchmark_format",
        choices=("console", "csv"),
        default="console",
        help="output format",
    )
    parser.add_argument(
        "--benchmark_filter",
        default=".",
        help="regular expression selecting benchmarks by name",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=_DEFAULT_REPEAT,
        help="calls per benchmark",
    )
    options = parser.parse_args(argv)
    try:
        pattern = re.compile(options.benchmark_filter)
    except re.error as exc:
        parser.error(f"invalid --benchmark_filter: {exc}")
    if options.iterations < 1:
        parser.error("--iterations must be positive")

    selected = (case for case in _suite() if pattern.search(case.name))
    results = (_measure(case, options.iterations) for case in selected)
    if options.benchmark_format == "csv":
        _write_csv(results, sys.stdout)
    else:
        _write_console(results, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())