"""Several approaches to detecting a repeated value in a list."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True if any value appears more than once."""
    seen: dict[int, bool] = {}
    for num in nums:
        if seen.get(num, False):
            return True
        seen[num] = True
    return False


def contains_duplicate_flag_map(nums: Sequence[int]) -> bool:
    """Dictionary of flags marking values already seen."""
    flags: dict[int, bool] = {}
    for num in nums:
        if flags.get(num):
            return True
        flags[num] = True
    return False


def contains_duplicate_set(nums: Sequence[int]) -> bool:
    """Set of values already seen."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def contains_duplicate_sorted(nums: Sequence[int]) -> bool:
    """Sort a copy and compare neighbours; the input is left unchanged."""
    if len(nums) <= 1:
        return False
    return any(a == b for a, b in pairwise(sorted(nums)))


def contains_duplicate_sized_set(nums: Sequence[int]) -> bool:
    """Compare the number of distinct values with the length."""
    if len(nums) <= 1:
        return False
    return len(set(nums)) != len(nums)