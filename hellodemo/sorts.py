"""In-place sorting algorithms: insertion sort, quicksort, merge sort, heap sort.

Functions taking ``less`` accept a strict ordering predicate: ``less(a, b)``
is true when ``a`` must come before ``b``.
"""

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

Less = Callable[[Any, Any], bool]

RUN = 24


def insertion_sort(
    arr: MutableSequence[Any],
    start: int = 0,
    end: int | None = None,
    less: Less = operator.lt,
) -> None:
    """Sort ``arr[start:end + 1]`` in place by insertion; ``end`` is inclusive."""
    if end is None:
        end = len(arr) - 1
    for i in range(start + 1, end + 1):
        key = arr[i]
        j = i
        while j > start and less(key, arr[j - 1]):
            arr[j] = arr[j - 1]
            j -= 1
        arr[j] = key


def _partition_sort(arr: MutableSequence[Any], left: int, right: int, less: Less) -> None:
    while right - left >= RUN:
        mid = (left + right) >> 1
        if less(arr[right], arr[left]):
            arr[right], arr[left] = arr[left], arr[right]
        if less(arr[mid], arr[left]):
            arr[mid], arr[left] = arr[left], arr[mid]
        if less(arr[mid], arr[right]):
            arr[right], arr[mid] = arr[mid], arr[right]

        pivot = arr[right]
        i, j = left, right
        while True:
            i += 1
            j -= 1
            while less(arr[i], pivot):
                i += 1
            while less(pivot, arr[j]):
                j -= 1
            if i >= j:
                break
            arr[i], arr[j] = arr[j], arr[i]

        arr[i], arr[right] = arr[right], arr[i]

        # Recurse into the smaller side, keep looping on the larger one.
        if i - left < right - i:
            _partition_sort(arr, left, i - 1, less)
            left = i + 1
        else:
            _partition_sort(arr, i + 1, right, less)
            right = i - 1

    insertion_sort(arr, left, right, less)


def quick_sort(arr: MutableSequence[Any], less: Less = operator.lt) -> None:
    """Sort ``arr`` in place with median-of-three Hoare quicksort."""
    if len(arr) < 2:
        return
    _partition_sort(arr, 0, len(arr) - 1, less)


def _merge_into(
    src: list[Any], dst: list[Any], lo: int, mid: int, hi: int, less: Less
) -> None:
    l, r = lo, mid
    for out in range(lo, hi):
        if r >= hi or (l < mid and less(src[l], src[r])):
            dst[out] = src[l]
            l += 1
        else:
            dst[out] = src[r]
            r += 1


def merge_sort(arr: MutableSequence[Any], less: Less = operator.lt) -> None:
    """Sort ``arr`` in place: insertion-sorted runs merged bottom-up."""
    n = len(arr)
    if n <= RUN + 8:
        insertion_sort(arr, 0, n - 1, less)
        return

    for run_start in range(0, n, RUN):
        insertion_sort(arr, run_start, min(run_start + RUN - 1, n - 1), less)

    src = list(arr)
    dst = [None] * n
    width = RUN
    while width < n:
        for lo in range(0, n, width * 2):
            mid = min(lo + width, n)
            hi = min(mid + width, n)
            _merge_into(src, dst, lo, mid, hi, less)
        src, dst = dst, src
        width *= 2

    arr[:] = src


def _sift_down(arr: MutableSequence[Any], n: int, i: int) -> None:
    hole = arr[i]
    parent = i
    child = 2 * i + 1
    while child < n:
        if child + 1 < n and arr[child] < arr[child + 1]:
            child += 1
        if not hole < arr[child]:
            break
        arr[parent] = arr[child]
        parent = child
        child = 2 * child + 1
    arr[parent] = hole


def heap_sort(arr: MutableSequence[Any]) -> None:
    """Sort ``arr`` in place, ascending, with heap sort."""
    n = len(arr)
    if n < 2:
        return
    for i in reversed(range(n // 2)):
        _sift_down(arr, n, i)
    for end in reversed(range(1, n)):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, end, 0)