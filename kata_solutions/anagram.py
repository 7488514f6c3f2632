"""Several approaches to deciding whether two strings are anagrams."""

from __future__ import annotations

from collections import Counter

_ALPHABET_SIZE = 26
_MASK_BITS = 32


def _letter_index(char: str) -> int:
    index = ord(char) - ord("a")
    if not 0 <= index < _ALPHABET_SIZE:
        raise ValueError(f"expected a lowercase ASCII letter, got {char!r}")
    return index


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the characters of ``s``."""
    if len(s) != len(t):
        return False
    s_counts = Counter(s)
    t_counts: Counter[str] = Counter()
    for char in t:
        if s_counts[char] == 0:
            return False
        t_counts[char] += 1
    return all(s_counts[char] == t_counts[char] for char in t)


def is_anagram_single_map(s: str, t: str) -> bool:
    """Count up over ``s`` and down over ``t``, failing on any negative count."""
    if len(s) != len(t):
        return False
    counts: Counter[str] = Counter(s)
    for char in t:
        counts[char] -= 1
        if counts[char] < 0:
            return False
    return True


def is_anagram_array(s: str, t: str) -> bool:
    """Fixed 26-slot counter; both strings must hold lowercase letters only."""
    if len(s) != len(t):
        return False
    counts = [0] * _ALPHABET_SIZE
    for char in s:
        counts[_letter_index(char)] += 1
    for char in t:
        index = _letter_index(char)
        counts[index] -= 1
        if counts[index] < 0:
            return False
    return True


def sort_string(s: str) -> str:
    """Return the characters of ``s`` in sorted order."""
    return "".join(sorted(s))


def is_anagram_sorted(s: str, t: str) -> bool:
    """Compare the sorted forms of both strings."""
    if len(s) != len(t):
        return False
    return sort_string(s) == sort_string(t)


def is_anagram_double_map(s: str, t: str) -> bool:
    """Build a counter for each string and compare them."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def _bitmask(s: str) -> int:
    mask = 0
    for char in s:
        shift = ord(char) - ord("a")
        if shift < 0:
            raise ValueError(f"negative shift for character {char!r}")
        if shift < _MASK_BITS:
            mask |= 1 << shift
    return mask


def is_anagram_bitmask(s: str, t: str) -> bool:
    """Compare the sets of letters present; only exact when no letter repeats."""
    if len(s) != len(t):
        return False
    return _bitmask(s) == _bitmask(t)


def is_anagram_split(s: str, t: str) -> bool:
    """Split both strings into characters, sort each list and compare."""
    if len(s) != len(t):
        return False
    return sorted(list(s)) == sorted(list(t))