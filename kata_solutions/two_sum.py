"""Several approaches to finding two indices whose values add up to a target."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with ``nums[i] + nums[j] == target``, or ``[]``."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        if (j := seen.get(target - num)) is not None:
            return [j, i]
        seen[num] = i
    return []


def two_sum_hash_map(nums: Sequence[int], target: int) -> list[int]:
    """Single-pass hash map lookup of each complement."""
    index_of: dict[int, int] = {}
    for i, num in enumerate(nums):
        complement = target - num
        if complement in index_of:
            return [index_of[complement], i]
        index_of[num] = i
    return []


def two_sum_two_pointers(nums: Sequence[int], target: int) -> list[int]:
    """Sort (value, index) pairs and close in from both ends."""
    indexed = sorted(((num, i) for i, num in enumerate(nums)), key=lambda p: p[0])
    left, right = 0, len(indexed) - 1
    while left < right:
        total = indexed[left][0] + indexed[right][0]
        if total == target:
            return sorted((indexed[left][1], indexed[right][1]))
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def two_sum_brute_force(nums: Sequence[int], target: int) -> list[int]:
    """Check every pair in order."""
    for i, first in enumerate(nums):
        for j, second in enumerate(nums[i + 1 :], start=i + 1):
            if first + second == target:
                return [i, j]
    return []


def two_sum_ordered(nums: Sequence[int], target: int) -> list[int]:
    """Hash map lookup that always returns the smaller index first."""
    index_of: dict[int, int] = {}
    for i, num in enumerate(nums):
        complement = target - num
        if complement in index_of:
            return sorted((index_of[complement], i))
        index_of[num] = i
    return []


def two_sum_early_return(nums: Sequence[int], target: int) -> list[int]:
    """Hash map lookup that returns at once for fewer than two numbers."""
    if len(nums) < 2:
        return []
    index_of: dict[int, int] = {}
    for i, num in enumerate(nums):
        complement = target - num
        if complement in index_of:
            return [index_of[complement], i]
        index_of[num] = i
    return []


@dataclass(frozen=True)
class _Seen:
    index: int
    exists: bool = True


def two_sum_record(nums: Sequence[int], target: int) -> list[int]:
    """Hash map lookup storing a small record per seen value."""
    records: dict[int, _Seen] = {}
    for i, num in enumerate(nums):
        info = records.get(target - num)
        if info is not None and info.exists:
            return [info.index, i]
        records[num] = _Seen(index=i)
    return []