"""Bracket balance checks using a stack."""

_OPENING = "({["
_CLOSER_FOR = {"(": ")", "{": "}", "[": "]"}
_OPENER_FOR = {")": "(", "}": "{", "]": "["}


def is_matching(open_bracket: str, close_bracket: str) -> bool:
    """Return True if ``close_bracket`` closes ``open_bracket``."""
    return _CLOSER_FOR.get(open_bracket) == close_bracket


def is_valid_solution(s: str) -> bool:
    """Return True if every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif char in _OPENER_FOR:
            if not stack or not is_matching(stack.pop(), char):
                return False
    return not stack


def is_valid_optimized(s: str) -> bool:
    """Stack check treating every non-opening character as a closer."""
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        else:
            if not stack:
                return False
            if _OPENER_FOR.get(char) != stack.pop():
                return False
    return not stack


def is_valid_simple(s: str) -> bool:
    """Stack check that pushes the expected closer for each opener."""
    expected: list[str] = []
    for char in s:
        if char in _CLOSER_FOR:
            expected.append(_CLOSER_FOR[char])
        elif char in _OPENER_FOR:
            if not expected or expected[-1] != char:
                return False
            expected.pop()
    return not expected