# algodemo

A small collection of classic algorithms with a lightweight benchmark runner.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Searching

`algodemo.search` finds a value in a sorted sequence. Each function returns
the index of the value, or `-1` if the value is not present.

```python
from algodemo.search import (
    binary_search,
    ternary_search,
    exponential_search,
    binary_search_par,
)

nums = [1, 3, 5, 77, 90]
binary_search(nums, 77)            # 3
ternary_search(nums, 90)           # 4
exponential_search(nums, 4)        # -1
binary_search_par(nums, 77, 2)     # 3, searching chunks in 2 threads
```

- `ternary_search` checks the two points that split the range in three, then
  finishes with a binary search in the third that can hold the value.
- `exponential_search` doubles a bound until it reaches a value not less than
  the target, then binary searches behind it.
- `binary_search_par` splits the sequence into up to `number_of_threads`
  chunks (default `DEFAULT_THREADS`, which is 10), searches each chunk in its
  own thread and returns the hit from the earliest chunk. A
  `number_of_threads` below 1 raises `ValueError`.

## Small utilities

```python
from algodemo.cpplib import print_hello_world, fib, find_max

print_hello_world()    # "**** Hello World ****"
fib(10)                # 55
find_max([3, 9, 2])    # 9
find_max([])           # -1
```

`fib` raises `ValueError` for a negative argument.

## Benchmarks

`algodemo.bench` times small workloads (string comparison, repeated addition,
counting, and the search functions) over a geometric range of input sizes.

```python
from algodemo.bench import range_args, run_benchmark, add_by_value, sorted_data

range_args(8, 64, 2)   # [8, 16, 32, 64]
sorted_data(5)         # [0, 1, 2, 3, 4]

result = run_benchmark("add_by_value", add_by_value, (1000, 3), 5)
result.iterations               # 5
result.seconds_per_iteration    # mean wall-clock seconds per call
result.cpu_seconds_per_iteration
```

`run_benchmark` returns a frozen `BenchmarkResult` with the name, number of
calls, total wall and CPU seconds, and an `items_per_second` rate when items
processed were recorded. `add_by_value` wraps its total at 64 bits.

From the command line:

```
algodemo-bench
algodemo-bench --benchmark_format csv
algodemo-bench --benchmark_filter Search --iterations 5
algodemo-bench --help
```

The suite covers `BM_SomeFunction` (sizes 1024 to 1048576), `BM_Increment`
(256 to 1024), and `BM_BinarySearch`, `BM_ExponentialSearch` and
`BM_BinarySearchPar` with 2 threads (32768 to 262144). Output is a console
table (default) or CSV with columns `name`, `iterations`, `real_time`,
`cpu_time`, `time_unit` and `items_per_second`; times are in nanoseconds per
call.

## What is not included

The package has no sorting algorithms and no sorting benchmarks, and it does
not plot benchmark results; use the CSV output with a tool of your choice.