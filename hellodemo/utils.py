"""Small helpers for checking the output of sorting routines."""

from collections.abc import Sequence
from itertools import pairwise
from typing import Any


def is_sorted(values: Sequence[Any]) -> bool:
    """Return True if ``values`` is in non-decreasing order."""
    return not any(later < earlier for earlier, later in pairwise(values))


def is_sorted_strict(original: Sequence[Any], candidate: Sequence[Any]) -> bool:
    """Return True if ``candidate`` is exactly ``original`` in ascending order.

    This checks both that ``candidate`` is sorted and that it holds the same
    elements, with the same multiplicities, as ``original``.
    """
    if len(original) != len(candidate):
        return False
    return all(a == b for a, b in zip(sorted(original), candidate))