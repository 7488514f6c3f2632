import pytest

from kata_solutions.duplicates import (
    contains_duplicate,
    contains_duplicate_flag_map,
    contains_duplicate_set,
    contains_duplicate_sized_set,
    contains_duplicate_sorted,
)

CASES = [
    ([1, 2, 3, 3], True),
    ([1, 2, 3, 4], False),
    ([1], False),
    ([1, 1], True),
    ([1, 1, 1, 3, 3, 4, 3, 2, 4, 2], True),
    ([-1, -2, -1, 3], True),
    ([-1, -2, -3, -4], False),
    ([1000000000, -1000000000, 1000000000], True),
    ([], False),
    ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 1], True),
    ([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], False),
]


@pytest.mark.parametrize("nums, want", CASES)
def test_contains_duplicate(nums, want):
    assert contains_duplicate(list(nums)) is want
    assert contains_duplicate_flag_map(list(nums)) is want
    assert contains_duplicate_set(list(nums)) is want
    assert contains_duplicate_sorted(list(nums)) is want
    assert contains_duplicate_sized_set(list(nums)) is want


def test_large_array_with_one_duplicate():
    nums = list(range(10000))
    nums[9999] = 0
    assert contains_duplicate(nums) is True
    assert contains_duplicate_flag_map(nums) is True
    assert contains_duplicate_set(nums) is True
    assert contains_duplicate_sorted(nums) is True
    assert contains_duplicate_sized_set(nums) is True


def test_sorted_approach_leaves_input_unchanged():
    nums = [3, 1, 2, 1]
    assert contains_duplicate_sorted(nums) is True
    assert nums == [3, 1, 2, 1]