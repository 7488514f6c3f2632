import pytest

from kata_solutions.parentheses import (
    is_matching,
    is_valid_optimized,
    is_valid_simple,
    is_valid_solution,
)


@pytest.mark.parametrize(
    "s, want",
    [
        ("[]", True),
        ("([{}])", True),
        ("[(])", False),
        ("", True),
        ("(", False),
        (")", False),
        ("()", True),
        ("{}", True),
        ("()[]{}", True),
        ("({[]})", True),
        ("((()))", True),
        ("({[()]})", True),
        ("(]", False),
        ("([)]", False),
        ("())", False),
        ("(()", False),
        ("{[}]", False),
        ("(((((())))))", True),
        ("(((((()))))", False),
        ("({[]})[()]{()}", True),
        ("({[]})[()]{()", False),
    ],
)
def test_is_valid_solution(s, want):
    assert is_valid_solution(s) is want


@pytest.mark.parametrize(
    "s",
    [
        "",
        "()",
        "()[]{}",
        "(((((())))))",
        "({[()]})",
        "({[()]})[()]{()}",
        "(",
        ")",
        "(]",
        "([)]",
        "(((((()))))",
        "({[()]})[()]{()",
    ],
)
def test_all_implementations_agree(s):
    result = is_valid_solution(s)
    assert is_valid_optimized(s) is result
    assert is_valid_simple(s) is result


@pytest.mark.parametrize(
    "open_bracket, close_bracket, want",
    [
        ("(", ")", True),
        ("{", "}", True),
        ("[", "]", True),
        ("(", "]", False),
        ("{", ")", False),
        ("x", ")", False),
    ],
)
def test_is_matching(open_bracket, close_bracket, want):
    assert is_matching(open_bracket, close_bracket) is want