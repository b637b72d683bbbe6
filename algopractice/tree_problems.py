"""Classic problems on binary trees."""

from __future__ import annotations

from collections import Counter, deque
from typing import Iterator

from .binary_tree import TreeNode

_MOD = 1_000_000_007


def _postorder(root: TreeNode | None) -> Iterator[TreeNode]:
    """Yield nodes left subtree first, then right subtree, then the node itself."""
    if root is None:
        return
    visited = []
    stack = [root]
    while stack:
        node = stack.pop()
        visited.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(visited)


def zigzag_level_order(root: TreeNode | None) -> list[list[int]]:
    """Return level values, alternating left-to-right and right-to-left."""
    levels: list[list[int]] = []
    level = [root] if root is not None else []
    forward = True
    while level:
        values = [node.val for node in level]
        levels.append(values if forward else values[::-1])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        forward = not forward
    return levels


def find_duplicate_subtrees(root: TreeNode | None) -> list[TreeNode]:
    """Return one root for every subtree shape that occurs more than once.

    Roots are reported in post-order, at the second occurrence of each shape.
    """
    shape_of_node: dict[int, int] = {}
    shape_ids: dict[tuple[int, int, int], int] = {}
    counts: Counter[int] = Counter()
    duplicates = []
    for node in _postorder(root):
        left = shape_of_node.get(id(node.left), 0) if node.left is not None else 0
        right = shape_of_node.get(id(node.right), 0) if node.right is not None else 0
        shape = shape_ids.setdefault((left, node.val, right), len(shape_ids) + 1)
        shape_of_node[id(node)] = shape
        if counts[shape] == 1:
            duplicates.append(node)
        counts[shape] += 1
    return duplicates


def _leaves(root: TreeNode | None) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            yield node.val
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def leaf_similar(root1: TreeNode | None, root2: TreeNode | None) -> bool:
    """Whether both trees have the same left-to-right sequence of leaves."""
    return list(_leaves(root1)) == list(_leaves(root2))


def range_sum_bst(root: TreeNode | None, low: int, high: int) -> int:
    """Sum the values of a search tree that lie within ``[low, high]``."""
    total = 0
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        if low <= node.val <= high:
            total += node.val
            stack.extend((node.left, node.right))
        elif node.val < low:
            stack.append(node.right)
        else:
            stack.append(node.left)
    return total


def is_complete_tree(root: TreeNode | None) -> bool:
    """Whether every level is full except the last, which is filled from the left.

    An empty tree is not considered complete.
    """
    if root is None:
        return False
    queue: deque[TreeNode | None] = deque([root])
    seen_gap = False
    while queue:
        node = queue.popleft()
        if node is None:
            seen_gap = True
            continue
        if seen_gap:
            return False
        queue.extend((node.left, node.right))
    return True


def max_product(root: TreeNode | None) -> int:
    """Largest product of the two sums made by cutting one edge, modulo 1e9+7."""
    if root is None:
        return 0
    sums: dict[int, int] = {}
    for node in _postorder(root):
        sums[id(node)] = (
            node.val
            + (sums[id(node.left)] if node.left is not None else 0)
            + (sums[id(node.right)] if node.right is not None else 0)
        )
    tree_sum = sums[id(root)]
    min_diff = min(abs(tree_sum - 2 * subtree) for subtree in sums.values())
    subtree_sum = (tree_sum - min_diff) // 2
    return (subtree_sum % _MOD) * ((tree_sum - subtree_sum) % _MOD) % _MOD