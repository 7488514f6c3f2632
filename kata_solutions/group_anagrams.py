"""Grouping strings into anagram classes by several canonical forms."""

from __future__ import annotations

import sys
from collections import Counter, defaultdict
from collections.abc import Callable, Sequence

_ALPHABET_SIZE = 26


def _trivial(strs: Sequence[str]) -> list[list[str]] | None:
    if not strs:
        return []
    if len(strs) == 1:
        return [list(strs)]
    return None


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group by comparing each string's character counts with known groups."""
    trivial = _trivial(strs)
    if trivial is not None:
        return trivial
    groups: list[tuple[Counter[str], list[str]]] = []
    for word in strs:
        counts = Counter(word)
        for known, members in groups:
            if known == counts:
                members.append(word)
                break
        else:
            groups.append((counts, [word]))
    return [members for _, members in groups]


def _group_by(strs: Sequence[str], key: Callable[[str], str]) -> list[list[str]]:
    trivial = _trivial(strs)
    if trivial is not None:
        return trivial
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in strs:
        groups[key(word)].append(word)
    return list(groups.values())


def get_sorted_string(s: str) -> str:
    """Return the characters of ``s`` in sorted order."""
    return "".join(sorted(s))


def group_anagrams_sorted(strs: Sequence[str]) -> list[list[str]]:
    """Group by the sorted form of each string."""
    return _group_by(strs, get_sorted_string)


def _letter_counts(s: str) -> list[int]:
    counts = [0] * _ALPHABET_SIZE
    for char in s:
        index = ord(char) - ord("a")
        if not 0 <= index < _ALPHABET_SIZE:
            raise ValueError(f"expected a lowercase ASCII letter, got {char!r}")
        counts[index] += 1
    return counts


def _digit(count: int) -> str:
    return chr(ord("0") + count)


def get_count_string(s: str) -> str:
    """Encode letter counts as e.g. ``a1b2``, omitting absent letters."""
    return "".join(
        chr(ord("a") + index) + _digit(count)
        for index, count in enumerate(_letter_counts(s))
        if count > 0
    )


def group_anagrams_count_string(strs: Sequence[str]) -> list[list[str]]:
    """Group by the compact letter-count encoding."""
    return _group_by(strs, get_count_string)


def get_count_array_string(s: str) -> str:
    """Encode all 26 letter counts separated by ``#``."""
    return "#".join(_digit(count) for count in _letter_counts(s))


def group_anagrams_count_array(strs: Sequence[str]) -> list[list[str]]:
    """Group by the full 26-slot count encoding."""
    return _group_by(strs, get_count_array_string)


def format_result(result: Sequence[Sequence[str]]) -> str:
    """Render groups as ``[[a, b], [c]]``."""
    if not result:
        return "[]"
    return "[" + ", ".join("[" + ", ".join(group) + "]" for group in result) + "]"


_EXAMPLES = [
    ("例1", ["act", "pots", "tops", "cat", "stop", "hat"]),
    ("例2", ["x"]),
    ("例3", [""]),
    ("複数のアナグラムグループ", ["eat", "tea", "ate", "nat", "bat", "tan"]),
]


def main(argv: Sequence[str] | None = None) -> int:
    """Run every grouping approach on the sample inputs and print the results."""
    del argv
    for name, words in _EXAMPLES:
        print(f"=== {name} ===")
        print("入力:", ", ".join(words))
        print("基本実装:", format_result(group_anagrams(words)))
        print("ソート方式:", format_result(group_anagrams_sorted(words)))
        print("文字カウント文字列化:", format_result(group_anagrams_count_string(words)))
        print("文字カウント配列:", format_result(group_anagrams_count_array(words)))
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())