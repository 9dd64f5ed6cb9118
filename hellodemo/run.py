"""Time the package's sorting routines against the built-in sort."""

import random
import time
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any

from hellodemo import sorts
from hellodemo.utils import is_sorted_strict

SIZE = 1_000_000
LOW = -524_288
HIGH = 1_048_576


@dataclass(frozen=True)
class SortTiming:
    """Outcome of one timed sort."""

    name: str
    millis: float
    correct: bool

    def __str__(self) -> str:
        verdict = "true" if self.correct else "false"
        return f"{self.name:<12} time: {self.millis:.2f} ms | {verdict}"


def _builtin_sort(arr: MutableSequence[Any]) -> None:
    arr.sort()


_SORTERS: tuple[tuple[str, Callable[[MutableSequence[Any]], None]], ...] = (
    ("sorted()", _builtin_sort),
    ("heap_sort()", sorts.heap_sort),
    ("quick_sort()", sorts.quick_sort),
    ("merge_sort()", sorts.merge_sort),
)


def benchmark(values: Sequence[Any]) -> list[SortTiming]:
    """Sort a copy of ``values`` with each routine and report time and correctness."""
    results = []
    for name, sorter in _SORTERS:
        work = list(values)
        start = time.perf_counter()
        sorter(work)
        elapsed = time.perf_counter() - start
        results.append(SortTiming(name, elapsed * 1000.0, is_sorted_strict(values, work)))
    return results


def run(size: int = SIZE) -> list[SortTiming]:
    """Benchmark every sort on ``size`` random integers and print the timings."""
    values = [random.randrange(LOW, HIGH) for _ in range(size)]
    results = benchmark(values)
    for result in results:
        print(result)
    return results