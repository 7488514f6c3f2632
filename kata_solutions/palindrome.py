"""Valid palindrome check ignoring case and non-alphanumeric characters."""


def _is_kept(char: str) -> bool:
    return "a" <= char <= "z" or "0" <= char <= "9"


def is_palindrome(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` read the same both ways."""
    chars = [c for c in s.lower() if _is_kept(c)]
    return chars == chars[::-1]