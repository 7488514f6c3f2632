# kata_solutions

Solutions to a handful of classic coding-interview problems. Most problems have several approaches, so you can compare how they work.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Problems

| Module | Problem | Functions |
| --- | --- | --- |
| `kata_solutions.two_sum` | Two Sum | `two_sum`, `two_sum_hash_map`, `two_sum_two_pointers`, `two_sum_brute_force`, `two_sum_ordered`, `two_sum_early_return`, `two_sum_record` |
| `kata_solutions.parentheses` | Valid Parentheses | `is_valid_solution`, `is_valid_optimized`, `is_valid_simple`, `is_matching` |
| `kata_solutions.palindrome` | Valid Palindrome | `is_palindrome` |
| `kata_solutions.duplicates` | Contains Duplicate | `contains_duplicate`, `contains_duplicate_flag_map`, `contains_duplicate_set`, `contains_duplicate_sorted`, `contains_duplicate_sized_set` |
| `kata_solutions.anagram` | Valid Anagram | `is_anagram`, `is_anagram_single_map`, `is_anagram_array`, `is_anagram_sorted`, `is_anagram_double_map`, `is_anagram_bitmask`, `is_anagram_split`, `sort_string` |
| `kata_solutions.group_anagrams` | Group Anagrams | `group_anagrams`, `group_anagrams_sorted`, `group_anagrams_count_string`, `group_anagrams_count_array`, `get_sorted_string`, `get_count_string`, `get_count_array_string`, `format_result` |

## Usage

```python
from kata_solutions.two_sum import two_sum
from kata_solutions.parentheses import is_valid_solution
from kata_solutions.group_anagrams import group_anagrams_sorted, format_result

two_sum([2, 7, 11, 15], 9)          # [0, 1]
is_valid_solution("([{}])")         # True
print(format_result(group_anagrams_sorted(["eat", "tea", "nat", "tan"])))
# [[eat, tea], [nat, tan]]
```

The Two Sum functions return `[]` when no pair is found.

Some approaches only work within certain limits:

- `is_anagram_array`, `get_count_string`, `get_count_array_string` and the two count-based grouping functions accept only lowercase letters `a`–`z`. Any other character raises `ValueError`.
- `is_anagram_bitmask` records which letters appear but not how many times. It is only exact when no letter repeats. A character below `a` raises `ValueError`.
- The count encodings write each count as a single character starting at `0`.
- `is_valid_optimized` treats every character that is not an opening bracket as a closer. `is_valid_solution` and `is_valid_simple` ignore characters that are not brackets.
- `contains_duplicate_sorted` sorts a copy and leaves your list unchanged.

## Helpers

`kata_solutions.helpers` has small utilities for trying solutions out by hand:

- `measure_execution_time(fn)` calls `fn` once and returns the elapsed time in seconds.
- `print_execution_time(duration, function_name)` prints a duration given in seconds, with a unit such as `ms` or `µs`.
- `print_array`, `print_2d_array` and `print_string_array` print sequences in a readable form.
- `format_value` renders lists as `[a b c]`, booleans as `true` / `false` and `None` as `<nil>`.
- `compare_results(got, want, test_name)` prints a got/want report. It returns whether both values render the same under `format_value`.

## Commands

```
kata-solutions 1
```

This prints a banner and the problem number you selected. Run it without an argument to see usage help.

```
kata-group-anagrams
```

This runs every Group Anagrams approach on a fixed set of sample inputs and prints the results.

## What it does not do

`kata-solutions` does not run any solution. It only echoes the problem number it is given. To use the solutions, import the modules listed above.