"""Binary tree nodes built from and rendered to level-order notation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator

from .parsing import parse_optional_values

_DISPLAY_LIMIT = 15


def _render(values: Iterable[int | None]) -> str:
    return ",".join("null" if v is None else str(v) for v in values)


@dataclass
class TreeNode:
    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    @classmethod
    def from_str(cls, text: str) -> TreeNode | None:
        """Build a tree from ``[1,null,2]`` level-order notation."""
        return cls.from_list(parse_optional_values(text))

    @classmethod
    def from_list(cls, values: Iterable[int | None]) -> TreeNode | None:
        """Build a tree from level-order values where None marks a missing child."""
        values = list(values)
        if not values:
            return None
        if values[0] is None:
            raise ValueError("Root must have a value.")
        root = cls(values[0])
        parents: deque[TreeNode] = deque([root])
        is_left = True
        for value in values[1:]:
            if not parents:
                raise ValueError("Parent node must exist in the queue.")
            node = None if value is None else cls(value)
            if is_left:
                parents[0].left = node
            else:
                parents.popleft().right = node
            if node is not None:
                parents.append(node)
            is_left = not is_left
        return root

    def iter_bfs(self) -> Iterator[int | None]:
        """Yield level-order values, with None for gaps and no trailing gaps."""
        queue: deque[TreeNode | None] = deque([self])
        remaining = 1
        while remaining:
            node = queue.popleft()
            if node is None:
                yield None
                continue
            queue.extend((node.left, node.right))
            remaining += (node.left is not None) + (node.right is not None) - 1
            yield node.val

    def to_list(self) -> list[int | None]:
        return list(self.iter_bfs())

    def __str__(self) -> str:
        values = list(islice(self.iter_bfs(), _DISPLAY_LIMIT + 1))
        if len(values) > _DISPLAY_LIMIT:
            return "[" + _render(values[:_DISPLAY_LIMIT]) + ",...]"
        return "[" + _render(values) + "]"


def tree_to_str(root: TreeNode | None) -> str:
    """Render a whole tree (or an empty one) in level-order notation."""
    if root is None:
        return "[]"
    return "[" + _render(root.iter_bfs()) + "]"