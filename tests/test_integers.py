import pytest

from algopractice.integers import (
    closest_primes,
    divide,
    is_palindrome_number,
    num_rolls_to_target,
    num_tilings,
    punishment_number,
    reverse_integer,
)

I32_MAX = 2147483647
I32_MIN = -2147483648


@pytest.mark.parametrize(
    "x, expected",
    [(123, 321), (-321, -123), (I32_MAX, 0), (I32_MIN, 0), (120, 21), (0, 0)],
)
def test_reverse_integer(x, expected):
    assert reverse_integer(x) == expected


@pytest.mark.parametrize(
    "x, expected",
    [(0, True), (10, False), (121, True), (-121, False), (1221, True)],
)
def test_is_palindrome_number(x, expected):
    assert is_palindrome_number(x) is expected


@pytest.mark.parametrize(
    "dividend, divisor, expected",
    [
        (10, 3, 3),
        (6, -3, -2),
        (7, -3, -2),
        (I32_MIN, 1, I32_MIN),
        (I32_MIN, -1, I32_MAX),
        (I32_MAX, -1, -I32_MAX),
        (I32_MAX, 1, I32_MAX),
    ],
)
def test_divide(dividend, divisor, expected):
    assert divide(dividend, divisor) == expected


def test_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        divide(5, 0)


@pytest.mark.parametrize(
    "left, right, expected",
    [(10, 19, [11, 13]), (4, 6, [-1, -1]), (1, 1, [-1, -1]), (2, 3, [2, 3])],
)
def test_closest_primes(left, right, expected):
    assert closest_primes(left, right) == expected


@pytest.mark.parametrize("n, expected", [(2, 1), (10, 182)])
def test_punishment_number(n, expected):
    assert punishment_number(n) == expected


@pytest.mark.parametrize("n, expected", [(1, 1), (3, 5), (30, 312342182)])
def test_num_tilings(n, expected):
    assert num_tilings(n) == expected


@pytest.mark.parametrize(
    "n, k, target, expected",
    [(1, 6, 6, 1), (2, 12, 8, 7), (1, 6, 7, 0), (30, 30, 500, 222616187)],
)
def test_num_rolls_to_target(n, k, target, expected):
    assert num_rolls_to_target(n, k, target) == expected