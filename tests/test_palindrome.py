import pytest

from kata_solutions.palindrome import is_palindrome


@pytest.mark.parametrize(
    "s, want",
    [
        ("Was it a car or a cat I saw?", True),
        ("tab a cat", False),
        ("A man, a plan, a canal: Panama", True),
        ("", True),
        ("a", True),
        ("!", True),
        ("!@#$%^&*()", True),
        ("race a car", False),
        ("12321", True),
        ("12345", False),
        ("A1b2C3c2b1a", True),
        ("A1b2C3d2b1a", False),
        ("Never odd or even", True),
        ("Never even or odd", False),
        ("a.", True),
        ("ab", False),
        ("aa", True),
        ("Do geese see God?", True),
        ("Do geese see dogs?", False),
    ],
)
def test_is_palindrome(s, want):
    assert is_palindrome(s) is want