"""Problems on ranges, schedules and pairs of neighbours."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from typing import Sequence

_MOD = 1_000_000_007


def find_min_arrow_shots(points: Sequence[Sequence[int]]) -> int:
    """Fewest vertical arrows needed to burst every balloon ``[start, end]``."""
    arrows = 0
    pinch: int | None = None
    for start, end in sorted(points, key=lambda point: point[0]):
        if pinch is not None and start <= pinch:
            pinch = min(pinch, end)
        else:
            arrows += 1
            pinch = end
    return arrows


def connect_sticks(sticks: Sequence[int]) -> int:
    """Least total cost of joining all sticks, paying the sum of each pair joined."""
    heap = list(sticks)
    heapq.heapify(heap)
    total = 0
    while len(heap) > 1:
        cost = heapq.heappop(heap) + heapq.heappop(heap)
        total += cost
        heapq.heappush(heap, cost)
    return total


def get_order(tasks: Sequence[Sequence[int]]) -> list[int]:
    """Order in which a single CPU runs ``[enqueue_time, processing_time]`` tasks.

    Among ready tasks the shortest runs first, ties going to the smaller index.
    """
    arrivals = sorted(range(len(tasks)), key=lambda index: tasks[index][0])
    ready: list[tuple[int, int]] = []
    order = []
    time = 0
    next_arrival = 0
    while next_arrival < len(arrivals) or ready:
        while next_arrival < len(arrivals) and tasks[arrivals[next_arrival]][0] <= time:
            index = arrivals[next_arrival]
            heapq.heappush(ready, (tasks[index][1], index))
            next_arrival += 1
        if ready:
            processing_time, index = heapq.heappop(ready)
            order.append(index)
            time += processing_time
        else:
            time = max(time, tasks[arrivals[next_arrival]][0])
    return order


def count_ways(ranges: Sequence[Sequence[int]]) -> int:
    """Ways to split ranges into two groups keeping overlapping ranges together.

    The answer is 2 to the number of overlap groups, modulo 1e9+7.
    """
    groups = 0
    reach: int | None = None
    for start, end in sorted(ranges):
        if reach is None or start > reach:
            groups += 1
            reach = end
        else:
            reach = max(reach, end)
    return pow(2, groups, _MOD)


def restore_array(adjacent_pairs: Sequence[Sequence[int]]) -> list[int]:
    """Rebuild an array of distinct values from all its pairs of neighbours."""
    if not adjacent_pairs:
        raise ValueError("adjacent_pairs must not be empty")
    adjacency: dict[int, list[int]] = defaultdict(list)
    occurrences: Counter[int] = Counter()
    for a, b in adjacent_pairs:
        adjacency[a].append(b)
        adjacency[b].append(a)
        occurrences.update((a, b))
    endings = [value for value, count in occurrences.items() if count == 1]
    if len(endings) != 2:
        raise ValueError("pairs do not describe a single array")
    result = [endings[0]]
    previous: int | None = None
    while len(result) <= len(adjacent_pairs):
        current = result[-1]
        following = next(v for v in adjacency[current] if v != previous)
        previous = current
        result.append(following)
    return result