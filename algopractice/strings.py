"""Problems on building, scanning and reshaping strings."""

from __future__ import annotations

import re
from collections import Counter
from functools import lru_cache
from itertools import chain
from typing import Sequence

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_ATOI_PREFIX = re.compile(r" *([+-]?)([0-9]*)")


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters (sliding window)."""
    counts: Counter[str] = Counter()
    left = 0
    best = 0
    for right, char in enumerate(s):
        counts[char] += 1
        while counts[char] > 1:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def length_of_longest_substring_indexed(s: str) -> int:
    """Length of the longest substring without repeated characters (last-seen index)."""
    max_length = 0
    length = 0
    start = 0
    last_seen: dict[str, int] = {}
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        last_seen[char] = index
        if previous is None or previous < start:
            length += 1
        else:
            start = previous + 1
            max_length = max(max_length, length)
            length = index - previous
    return max(max_length, length)


def longest_palindrome(s: str) -> str:
    """The first longest palindromic substring of ``s``."""

    def expand(left: int, right: int) -> tuple[int, int] | None:
        if right >= len(s) or s[left] != s[right]:
            return None
        while left > 0 and right + 1 < len(s) and s[left - 1] == s[right + 1]:
            left -= 1
            right += 1
        return left, right + 1

    best = (0, 0)
    for center in range(len(s)):
        for span in (expand(center, center), expand(center, center + 1)):
            if span is not None and span[1] - span[0] > best[1] - best[0]:
                best = span
    return s[best[0]:best[1]]


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    if num_rows == 0:
        return ""
    if num_rows == 1 or num_rows >= len(s):
        return s
    cycle = 2 * num_rows - 2
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    for index, char in enumerate(s):
        position = index % cycle
        rows[min(position, cycle - position)].append(char)
    return "".join(chain.from_iterable(rows))


def my_atoi(s: str) -> int:
    """Parse a leading signed integer after spaces, clamped to the 32-bit range."""
    match = _ATOI_PREFIX.match(s)
    sign, digits = match.group(1), match.group(2).lstrip("0")
    if not digits:
        return 0
    if len(digits) > 10:
        return _I32_MIN if sign == "-" else _I32_MAX
    value = -int(digits) if sign == "-" else int(digits)
    return max(_I32_MIN, min(_I32_MAX, value))


def frequency_sort(s: str) -> str:
    """Characters ordered by descending frequency, ties by descending character."""
    counts = Counter(s)
    return "".join(sorted(s, key=lambda char: (counts[char], char), reverse=True))


def _encoded_length(run: int) -> int:
    return (run > 0) + (run > 1) + (run > 9) + (run > 99)


def optimal_compression_length(s: str, k: int) -> int:
    """Shortest run-length encoding of ``s`` after deleting at most ``k`` characters.

    At least one character is always kept; raises ValueError for an empty string.
    """
    if not s:
        raise ValueError("string must not be empty")
    size = len(s)

    @lru_cache(maxsize=None)
    def best(index: int, budget: int, tail: tuple[str, int] | None) -> int | None:
        if budget < 0:
            return None
        if index == size:
            return None if tail is None else _encoded_length(tail[1])
        char = s[index]
        if tail is None:
            run, closed = 1, 0
        elif tail[0] == char:
            run, closed = tail[1] + 1, 0
        else:
            run, closed = 1, _encoded_length(tail[1])
        options = [best(index + 1, budget - 1, tail)]
        kept = best(index + 1, budget, (char, run))
        options.append(None if kept is None else kept + closed)
        return min(option for option in options if option is not None)

    result = best(0, k, None)
    best.cache_clear()
    return result


def find_the_string(lcp: Sequence[Sequence[int]]) -> str:
    """The smallest string whose longest-common-prefix matrix is ``lcp``, or ""."""
    n = len(lcp)
    letters: list[str | None] = [None] * n
    code = ord("a")
    for i in range(n):
        if letters[i] is None:
            if code > ord("z"):
                return ""
            for j in range(i, n):
                if lcp[i][j] > 0 and letters[j] is None:
                    letters[j] = chr(code)
            code += 1
    for i in range(n):
        for j in range(i, n):
            following = lcp[i + 1][j + 1] if i + 1 < n and j + 1 < len(lcp[i + 1]) else 0
            expected = following + 1 if letters[i] == letters[j] else 0
            if lcp[i][j] != lcp[j][i] or lcp[i][j] != expected:
                return ""
    return "".join(letters)