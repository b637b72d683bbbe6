"""Pattern matching and comparison problems on strings."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from functools import lru_cache, reduce
from typing import Sequence

_MOD = 1_000_000_007


def _char_matches(pattern_char: str, text_char: str) -> bool:
    return pattern_char == "." or pattern_char == text_char


def is_match(s: str, p: str) -> bool:
    """Whether ``p`` (with ``.`` and ``*``) matches the whole of ``s``, top-down."""

    @lru_cache(maxsize=None)
    def match(i: int, j: int) -> bool:
        if j == len(p):
            return i == len(s)
        first = i < len(s) and _char_matches(p[j], s[i])
        if j + 1 < len(p) and p[j + 1] == "*":
            return match(i, j + 2) or (first and match(i + 1, j))
        return first and match(i + 1, j + 1)

    return match(0, 0)


def is_match_bottom_up(s: str, p: str) -> bool:
    """Whether ``p`` (with ``.`` and ``*``) matches the whole of ``s``, bottom-up.

    Raises ValueError for a pattern that starts with ``*`` when ``s`` is not empty.
    """
    m, n = len(s), len(p)
    dp = [[False] * (n + 1) for _ in range(m + 1)]
    dp[0][0] = True
    for j in range(1, n, 2):
        dp[0][j + 1] = p[j] == "*" and dp[0][j - 1]

    for i, text_char in enumerate(s):
        for j, pattern_char in enumerate(p):
            if pattern_char == "*":
                if j == 0:
                    raise ValueError("pattern must not start with '*'")
                repeated = p[j - 1]
                dp[i + 1][j + 1] = dp[i + 1][j - 1] or (
                    dp[i][j + 1] and _char_matches(repeated, text_char)
                )
            else:
                dp[i + 1][j + 1] = dp[i][j] and _char_matches(pattern_char, text_char)
    return dp[m][n]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def _prefix_function(needle: str) -> list[int]:
    table = [0] * len(needle)
    prefix = 0
    for suffix in range(1, len(needle)):
        char = needle[suffix]
        while prefix > 0 and needle[prefix] != char:
            prefix = table[prefix - 1]
        if needle[prefix] == char:
            prefix += 1
        table[suffix] = prefix
    return table


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack`` or -1 (KMP)."""
    if len(haystack) < len(needle):
        return -1
    _check_needle(needle)
    table = _prefix_function(needle)
    last = len(needle) - 1
    matched = 0
    for index, char in enumerate(haystack):
        while matched > 0 and needle[matched] != char:
            matched = table[matched - 1]
        if needle[matched] == char:
            if matched == last:
                return index - matched
            matched += 1
    return -1


def _digit(char: str) -> int:
    return ord(char) - ord("a")


def _hash(text: str) -> int:
    return reduce(lambda acc, c: (acc * 26 + _digit(c)) % _MOD, text, 0)


def str_str_rolling_hash(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack`` or -1 (rolling hash)."""
    size = len(needle)
    if size > len(haystack):
        return -1
    _check_needle(needle)
    max_weight = pow(26, size, _MOD)
    needle_hash = _hash(needle)
    window_hash = _hash(haystack[:size])
    for start in range(len(haystack) - size + 1):
        if start > 0:
            window_hash = (
                window_hash * 26
                - _digit(haystack[start - 1]) * max_weight
                + _digit(haystack[start + size - 1])
            ) % _MOD
        if window_hash == needle_hash and haystack[start:start + size] == needle:
            return start
    return -1


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Start indices of substrings made of every word exactly once, in any order.

    All words must have the same length; raises ValueError if there are none.
    """
    if not words:
        raise ValueError("words must not be empty")
    word_len = len(words[0])
    total = word_len * len(words)
    if len(s) < total:
        return []
    needed = Counter(words)
    starts = []
    for start in range(len(s) - total + 1):
        used: Counter[str] = Counter()
        for offset in range(start, start + total, word_len):
            word = s[offset:offset + word_len]
            if used[word] >= needed[word]:
                break
            used[word] += 1
        else:
            starts.append(start)
    return starts


def word_pattern(pattern: str, s: str) -> bool:
    """Whether the space-separated words of ``s`` follow ``pattern`` one-to-one."""
    words = s.split(" ")
    if len(pattern) != len(words):
        return False
    mapping: dict[str, str] = {}
    used_words: set[str] = set()
    for char, word in zip(pattern, words):
        known = mapping.get(char)
        if known is None:
            if word in used_words:
                return False
            mapping[char] = word
            used_words.add(word)
        elif known != word:
            return False
    return True


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest common subsequence of two strings."""
    if len(text1) > len(text2):
        text1, text2 = text2, text1
    dp = [0] * len(text1)
    for c2 in text2:
        prev, dp = dp, []
        for i, c1 in enumerate(text1):
            if c1 == c2:
                dp.append(prev[i - 1] + 1 if i else 1)
            else:
                dp.append(max(prev[i], dp[i - 1]) if i else prev[i])
    return dp[-1] if dp else 0


def minimum_score(s: str, t: str) -> int:
    """Shortest span of ``t`` to remove so that the rest is a subsequence of ``s``."""
    n = len(t)
    forward: list[int | None] = [None] * n
    position = 0
    for i, char in enumerate(t):
        found = s.find(char, position)
        if found < 0:
            break
        forward[i] = found
        position = found + 1

    backward: list[int | None] = [None] * n
    end = len(s)
    for i in reversed(range(n)):
        found = s.rfind(t[i], 0, end)
        if found < 0:
            break
        backward[i] = found
        end = found

    def removable(gap: int) -> bool:
        return (
            gap == n
            or forward[n - gap - 1] is not None
            or backward[gap] is not None
            or any(
                left is not None and right is not None and left < right
                for left, right in zip(forward, backward[gap + 1:])
            )
        )

    return bisect_left(range(n), True, key=removable)