"""Problems on points, boards and grids."""

from __future__ import annotations

from collections import deque
from itertools import chain
from typing import Iterator, Sequence

_FAR = 2**31 - 1


def max_points(points: Sequence[Sequence[int]]) -> int:
    """Largest number of the given points that lie on one straight line."""
    if len(points) < 3:
        return len(points)
    best = 0
    for i, a in enumerate(points):
        for j in range(i + 1, len(points)):
            b = points[j]
            vx, vy = b[1] - a[1], a[0] - b[0]
            count = sum(
                1
                for c in points[j + 1:]
                if vx * (b[0] - c[0]) + vy * (b[1] - c[1]) == 0
            )
            best = max(best, count)
    return best + 2


def longest_increasing_path(matrix: Sequence[Sequence[int]]) -> int:
    """Length of the longest strictly increasing path moving up, down, left or right."""
    if not matrix:
        raise ValueError("matrix must not be empty")
    rows, cols = len(matrix), len(matrix[0])

    def neighbours(i: int, j: int) -> Iterator[tuple[int, int]]:
        for a, b in ((i - 1, j), (i, j + 1), (i + 1, j), (i, j - 1)):
            if 0 <= a < rows and 0 <= b < cols:
                yield a, b

    level = {
        (i, j)
        for i in range(rows)
        for j in range(cols)
        if all(matrix[a][b] >= matrix[i][j] for a, b in neighbours(i, j))
    }
    length = 0
    while level:
        length += 1
        level = {
            (a, b)
            for i, j in level
            for a, b in neighbours(i, j)
            if matrix[a][b] > matrix[i][j]
        }
    return length


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int:
    """Fewest die rolls to reach the last square of a boustrophedon board, or -1."""
    n = len(board)
    if n == 0:
        raise ValueError("board must not be empty")
    target = n * n

    def destination(square: int) -> int | None:
        row = n - 1 - (square - 1) // n
        offset = (square - 1) % n
        col = offset if (n - row) % 2 == 1 else n - 1 - offset
        value = board[row][col]
        return None if value == -1 else value

    visited = [False] * (target + 1)
    visited[1] = True
    queue: deque[int | None] = deque([1, None])
    moves = 0
    while True:
        square = queue.popleft()
        if square is None:
            if not queue:
                return -1
            queue.append(None)
            moves += 1
            continue
        if square + 6 >= target:
            return moves + 1
        furthest = None
        for nxt in range(square + 1, square + 7):
            if visited[nxt]:
                continue
            visited[nxt] = True
            jump = destination(nxt)
            if jump is None:
                furthest = nxt
            elif jump == target:
                return moves + 1
            else:
                queue.append(jump)
        if furthest is not None:
            queue.append(furthest)


def unique_paths_iii(grid: Sequence[Sequence[int]]) -> int:
    """Walks from the start (1) to an end (2) covering every non-obstacle cell once."""
    rows, cols = len(grid), len(grid[0])
    full = (1 << (rows * cols)) - 1
    blocked = 0
    start = (0, 0)
    for index, value in enumerate(chain.from_iterable(grid)):
        if value == -1:
            blocked |= 1 << index
        elif value == 1:
            start = divmod(index, cols)

    def walk(x: int, y: int, state: int) -> int:
        if not (0 <= x < rows and 0 <= y < cols):
            return 0
        bit = 1 << (x * cols + y)
        if state & bit:
            return 0
        state |= bit
        if grid[x][y] == 2:
            return int(state == full)
        return (
            walk(x - 1, y, state)
            + walk(x, y + 1, state)
            + walk(x + 1, y, state)
            + walk(x, y - 1, state)
        )

    return walk(start[0], start[1], blocked)


def max_distance(grid: Sequence[Sequence[int]]) -> int:
    """Largest Manhattan distance from a water cell to its nearest land, or -1."""
    n = len(grid)
    distances = [[0] * n for _ in range(n)]
    land = 0
    for i in range(n):
        for j in range(n):
            if grid[i][j] == 1:
                land += 1
                continue
            left = distances[i][j - 1] if j > 0 else _FAR
            up = distances[i - 1][j] if i > 0 else _FAR
            distances[i][j] = min(min(left, up) + 1, _FAR)
    if land == 0 or land == n * n:
        return -1

    best = 0
    for i in reversed(range(n)):
        for j in reversed(range(n)):
            if grid[i][j] == 1:
                candidate = 0
            else:
                right = distances[i][j + 1] if j + 1 < n else _FAR
                down = distances[i + 1][j] if i + 1 < n else _FAR
                candidate = min(min(right, down) + 1, _FAR)
            distances[i][j] = min(candidate, distances[i][j])
            best = max(best, distances[i][j])
    return best