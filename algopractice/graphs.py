"""Classic problems on graphs and trees given as edge lists."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from itertools import groupby
from typing import Mapping, Sequence


def _topological_sort(in_degrees: list[int], graph: Mapping[int, set[int]]) -> list[int]:
    """Order nodes by their dependencies; empty if a cycle prevents it."""
    stack = [node for node, degree in enumerate(in_degrees) if degree == 0]
    order = []
    while stack:
        node = stack.pop()
        order.append(node)
        for nxt in graph.get(node, ()):
            in_degrees[nxt] -= 1
            if in_degrees[nxt] == 0:
                stack.append(nxt)
    return order if len(order) == len(in_degrees) else []


def sort_items(
    n: int, m: int, group: Sequence[int], before_items: Sequence[Sequence[int]]
) -> list[int]:
    """Order items so each follows its prerequisites and groups stay contiguous.

    Items in group -1 get a group of their own. Returns an empty list when no
    such order exists.
    """
    groups = []
    for group_id in group:
        if group_id == -1:
            group_id = m
            m += 1
        groups.append(group_id)

    item_graph: dict[int, set[int]] = defaultdict(set)
    item_degrees = [0] * n
    group_graph: dict[int, set[int]] = defaultdict(set)
    group_degrees = [0] * m

    for item, prev_items in enumerate(before_items):
        item_degrees[item] = len(prev_items)
        item_group = groups[item]
        for prev_item in prev_items:
            prev_group = groups[prev_item]
            item_graph[prev_item].add(item)
            if item_group != prev_group and item_group not in group_graph[prev_group]:
                group_graph[prev_group].add(item_group)
                group_degrees[item_group] += 1

    grouped_items: dict[int, list[int]] = defaultdict(list)
    for item in _topological_sort(item_degrees, item_graph):
        grouped_items[groups[item]].append(item)

    return [
        item
        for group_id in _topological_sort(group_degrees, group_graph)
        for item in grouped_items.get(group_id, ())
    ]


def count_sub_trees(n: int, edges: Sequence[Sequence[int]], labels: str) -> list[int]:
    """For each node of a tree rooted at 0, count subtree nodes sharing its label."""
    graph: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)
    result = [0] * n
    counters: Counter[str] = Counter()
    # Entries are (node, parent, count before entering) with count None on entry.
    stack: list[tuple[int, int, int | None]] = [(0, 0, None)]
    while stack:
        node, parent, before = stack.pop()
        label = labels[node]
        if before is None:
            stack.append((node, parent, counters[label]))
            counters[label] += 1
            stack.extend((child, node, None) for child in graph[node] if child != parent)
        else:
            result[node] = counters[label] - before
    return result


def valid_path(n: int, edges: Sequence[Sequence[int]], source: int, destination: int) -> bool:
    """Whether ``destination`` can be reached from ``source`` in an undirected graph."""
    graph: dict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)
    if source != destination and source not in graph:
        return False
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        if node == destination:
            return True
        for nxt in graph.get(node, ()):
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return False


def number_of_good_paths(vals: Sequence[int], edges: Sequence[Sequence[int]]) -> int:
    """Count paths whose two ends share a value no smaller than any value on the path.

    Single nodes count as paths.
    """
    parent = list(range(len(vals)))

    def find(node: int) -> int:
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    sorted_edges = sorted(edges, key=lambda e: max(vals[e[0]], vals[e[1]]))
    edge_iter = iter(sorted_edges)
    pending = next(edge_iter, None)

    nodes_by_value = sorted(range(len(vals)), key=vals.__getitem__)
    total = len(vals)
    for value, nodes in groupby(nodes_by_value, key=vals.__getitem__):
        while pending is not None and max(vals[pending[0]], vals[pending[1]]) <= value:
            root_a, root_b = find(pending[0]), find(pending[1])
            if root_a != root_b:
                parent[root_a] = root_b
            pending = next(edge_iter, None)
        for count in Counter(find(node) for node in nodes).values():
            total += count * (count - 1) // 2
    return total