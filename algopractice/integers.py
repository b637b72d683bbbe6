"""Number and counting problems on integers."""

from __future__ import annotations

from itertools import pairwise

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_MOD = 1_000_000_007


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if _I32_MIN <= result <= _I32_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Whether ``x`` reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def divide(dividend: int, divisor: int) -> int:
    """Truncating 32-bit division by shifts, clamped to the largest 32-bit value."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    negative = (dividend < 0) != (divisor < 0)
    remainder, magnitude = abs(dividend), abs(divisor)
    quotient = 0
    for shift in range(remainder.bit_length() - magnitude.bit_length(), -1, -1):
        if remainder >= magnitude << shift:
            remainder -= magnitude << shift
            quotient |= 1 << shift
    result = -quotient if negative else quotient
    return min(result, _I32_MAX)


def _prime_flags(limit: int) -> list[bool]:
    flags = [True] * (limit + 1)
    flags[: min(2, limit + 1)] = [False] * min(2, limit + 1)
    for number in range(2, int(limit**0.5) + 1):
        if flags[number]:
            flags[number * number::number] = [False] * len(range(number * number, limit + 1, number))
    return flags


def closest_primes(left: int, right: int) -> list[int]:
    """The first pair of consecutive primes in ``[left, right]`` with the smallest gap.

    Returns ``[-1, -1]`` when fewer than two primes lie in the range.
    """
    if right < 2:
        return [-1, -1]
    flags = _prime_flags(right)
    primes = [number for number in range(max(left, 0), right + 1) if flags[number]]
    if len(primes) < 2:
        return [-1, -1]
    low, high = min(pairwise(primes), key=lambda pair: pair[1] - pair[0])
    return [low, high]


def _can_split(digits: str, target: int) -> bool:
    """Whether ``digits`` splits into contiguous numbers that add up to ``target``."""
    if not digits:
        return target == 0
    for cut in range(1, len(digits) + 1):
        value = int(digits[:cut])
        if value > target:
            break
        if _can_split(digits[cut:], target - value):
            return True
    return False


def punishment_number(n: int) -> int:
    """Sum of ``i * i`` for each ``1 <= i <= n`` whose square splits into parts summing to ``i``."""
    return sum(i * i for i in range(1, n + 1) if _can_split(str(i * i), i))


def num_tilings(n: int) -> int:
    """Ways to tile a 2 x n board with dominoes and trominoes, modulo 1e9+7."""
    full, previous_full, partial = 1, 0, 0
    for _ in range(n):
        full, previous_full, partial = (
            (full + previous_full + 2 * partial) % _MOD,
            full,
            (previous_full + partial) % _MOD,
        )
    return full


def num_rolls_to_target(n: int, k: int, target: int) -> int:
    """Ways for ``n`` dice with faces 1..k to add up to ``target``, modulo 1e9+7."""
    ways = [1] + [0] * target
    for _ in range(n):
        ways = [0] + [
            sum(ways[total - face] for face in range(1, min(k, total) + 1)) % _MOD
            for total in range(1, target + 1)
        ]
    return ways[target]