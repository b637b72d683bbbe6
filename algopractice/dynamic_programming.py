"""Dynamic programming and greedy problems on arrays and grids."""

from __future__ import annotations

from functools import reduce
from itertools import accumulate
from math import inf
from typing import Iterator, Sequence

_MOD = 1_000_000_007


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached, tracking the furthest reachable index."""
    if not nums:
        raise ValueError("nums must not be empty")
    last = len(nums) - 1
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        if reach >= last:
            return True
        reach = max(reach, index + step)
    return True


def can_jump_scan(nums: Sequence[int]) -> bool:
    """Whether a jump stays available at every position, the last one included.

    A single position always succeeds.
    """
    if len(nums) == 1:
        return True
    remaining = 0
    for step in nums:
        remaining = max(step, remaining) - 1
        if remaining < 0:
            return False
    return True


def can_jump_reach(nums: Sequence[int]) -> bool:
    """Whether the last index can be reached, stopping at the first dead end."""
    if len(nums) == 1:
        return True
    remaining = 0
    for index, step in enumerate(nums):
        distance = max(step, remaining)
        if distance <= 0:
            return False
        remaining = distance - 1
        if index + distance + 1 >= len(nums):
            return True
    return False


def find_paths(m: int, n: int, max_move: int, start_row: int, start_column: int) -> int:
    """Ways to move a ball off an ``m`` x ``n`` grid in at most ``max_move`` moves."""
    if not (0 <= start_row < m and 0 <= start_column < n):
        raise ValueError("start cell lies outside the grid")

    def neighbours(row: int, col: int) -> Iterator[tuple[int, int]]:
        for a, b in ((row - 1, col), (row, col + 1), (row + 1, col), (row, col - 1)):
            if 0 <= a < m and 0 <= b < n:
                yield a, b

    counts = [[0] * n for _ in range(m)]
    counts[start_row][start_column] = 1
    total = 0
    for move in range(1, max_move + 1):
        exits = sum(counts[0]) + sum(counts[-1]) + sum(row[0] + row[-1] for row in counts)
        total = (total + exits) % _MOD
        if move == max_move:
            break
        counts = [
            [sum(counts[a][b] for a, b in neighbours(row, col)) % _MOD for col in range(n)]
            for row in range(m)
        ]
    return total


def find_longest_chain_graph(pairs: Sequence[Sequence[int]]) -> int:
    """Longest chain of pairs ``[a, b]`` with ``b < c`` for each next ``[c, d]``.

    Solved as the longest path in the graph of pairs that may follow each other.
    """
    graph: list[list[int]] = [
        [j for j, b in enumerate(pairs) if a[1] < b[0]] for a in pairs
    ]
    depth: dict[int, int] = {}
    for start in range(len(pairs)):
        stack = [(start, False)]
        while stack:
            node, expanded = stack.pop()
            if node in depth:
                continue
            if expanded:
                depth[node] = max((depth[child] + 1 for child in graph[node]), default=0)
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in graph[node] if child not in depth)
    return max((d + 1 for d in depth.values()), default=0)


def find_longest_chain_dp(pairs: Sequence[Sequence[int]]) -> int:
    """Longest chain of pairs, by quadratic dynamic programming over sorted starts."""
    if not pairs:
        raise ValueError("pairs must not be empty")
    ordered = sorted(pairs, key=lambda pair: pair[0])
    lengths: list[int] = []
    for tail in ordered:
        lengths.append(
            max(
                (length for pair, length in zip(ordered, lengths) if pair[1] < tail[0]),
                default=0,
            )
            + 1
        )
    return max(lengths)


def find_longest_chain_greedy(pairs: Sequence[Sequence[int]]) -> int:
    """Longest chain of pairs, greedily taking the earliest-ending pair that fits."""
    length = 0
    chain_end = -inf
    for start, end in sorted(pairs, key=lambda pair: pair[1]):
        if start > chain_end:
            length += 1
            chain_end = end
    return length


def len_longest_fib_subseq(arr: Sequence[int]) -> int:
    """Length of the longest Fibonacci-like subsequence of a strictly increasing array.

    Returns 0 when no such subsequence of length three or more exists.
    """
    values = set(arr)
    best = 0
    for i in range(1, len(arr)):
        second = arr[i]
        for first in arr[:i]:
            a, b, length = first, second, 2
            while a + b in values:
                a, b = b, a + b
                length += 1
                best = max(best, length)
    return best


def _fall(previous: Sequence[int], row: Sequence[int]) -> list[int]:
    last = len(previous) - 1
    return [
        value + min(previous[max(j - 1, 0)], previous[j], previous[min(j + 1, last)])
        for j, value in enumerate(row)
    ]


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a path going down one row at a time, at most one column aside."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    sums = list(matrix[0])
    for row in matrix[1:]:
        sums = _fall(sums, row)
    return min(sums)


def min_falling_path_sum_reduce(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest falling path sum, folding the rows together with ``reduce``."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    return min(reduce(_fall, matrix[1:], list(matrix[0])))


def mct_from_leaf_values(arr: Sequence[int]) -> int:
    """Smallest sum of inner nodes of a tree whose in-order leaves are ``arr``.

    Each inner node is the product of the largest leaves of its two subtrees.
    """
    n = len(arr)
    if n == 0:
        raise ValueError("arr must not be empty")
    cost = [[0] * n for _ in range(n)]
    largest = [[0] * n for _ in range(n)]
    for i, value in enumerate(arr):
        largest[i][i] = value
    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            largest[i][j] = max(largest[i][j - 1], arr[j])
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + largest[i][k] * largest[k + 1][j]
                for k in range(i, j)
            )
    return cost[0][n - 1]


def min_difficulty(job_difficulty: Sequence[int], num_days: int) -> int:
    """Least total of daily maxima scheduling jobs in order, one or more a day, or -1."""
    n = len(job_difficulty)
    if num_days < 1 or num_days > n:
        return -1
    best = list(accumulate(reversed(job_difficulty), max))[::-1] + [0]
    for days in range(2, num_days + 1):
        current = [inf] * (n + 1)
        for i in range(n - days + 1):
            day_max = 0
            for k in range(i, n - days + 1):
                day_max = max(day_max, job_difficulty[k])
                current[i] = min(current[i], day_max + best[k + 1])
        best = current
    return int(best[0])


def max_dot_product(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Largest dot product of two non-empty subsequences of equal length."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    best = [0] * (len(nums1) + 1)
    max_product = -inf
    for num2 in nums2:
        previous = 0
        for i, num1 in enumerate(nums1):
            product = num1 * num2
            max_product = max(max_product, product)
            value = max(previous + product, best[i], best[i + 1])
            previous = best[i + 1]
            best[i + 1] = value
    answer = best[len(nums1)]
    return answer if answer != 0 else int(max_product)


def min_cost(
    houses: Sequence[int], cost: Sequence[Sequence[int]], m: int, n: int, target: int
) -> int:
    """Least cost to paint the unpainted houses so there are ``target`` neighbourhoods.

    ``houses[i]`` is 0 when unpainted, else its colour 1..n. Returns -1 if impossible.
    """
    if len(houses) != m:
        raise ValueError("houses must hold m entries")
    states: dict[tuple[int, int], int] = {}
    for index, house in enumerate(houses):
        colors = range(n) if house == 0 else (house - 1,)
        following: dict[tuple[int, int], int] = {}
        for color in colors:
            paint = cost[index][color] if house == 0 else 0
            if index == 0:
                options = [(1, 0)]
            else:
                options = [
                    (count if prev_color == color else count + 1, spent)
                    for (prev_color, count), spent in states.items()
                ]
            for count, spent in options:
                if count <= target:
                    key = (color, count)
                    following[key] = min(following.get(key, spent + paint), spent + paint)
        states = following
    return min(
        (spent for (_, count), spent in states.items() if count == target), default=-1
    )


def maximum_score(nums: Sequence[int], multipliers: Sequence[int]) -> int:
    """Best score taking each multiplier in turn times a number from either end."""
    n, m = len(nums), len(multipliers)
    score = [0] * (m + 1)
    for k in reversed(range(m)):
        factor = multipliers[k]
        right_offset = n - k - 1
        for left in range(k + 1):
            score[left] = max(
                factor * nums[left] + score[left + 1],
                factor * nums[left + right_offset] + score[left],
            )
    return score[0]