"""Singly linked list nodes with helpers for building and rendering them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator

from .parsing import parse_values

_DISPLAY_LIMIT = 15


@dataclass
class ListNode:
    val: int
    next: ListNode | None = None

    @classmethod
    def from_str(cls, text: str) -> ListNode | None:
        """Build a list from ``[1,2,3]`` notation."""
        return cls.from_list(parse_values(text))

    @classmethod
    def from_list(cls, values: Iterable[int]) -> ListNode | None:
        head = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    @classmethod
    def from_num(cls, num: int) -> ListNode | None:
        """Digits of ``num``, most significant first; None for non-positive numbers."""
        head = None
        while num > 0:
            num, digit = divmod(num, 10)
            head = cls(digit, head)
        return head

    @classmethod
    def from_num_reversed(cls, num: int) -> ListNode | None:
        """Digits of ``num``, least significant first; None for non-positive numbers."""
        digits = []
        while num > 0:
            num, digit = divmod(num, 10)
            digits.append(digit)
        return cls.from_list(digits)

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def to_list(self) -> list[int]:
        return list(self)

    def __str__(self) -> str:
        values = list(islice(self, _DISPLAY_LIMIT + 1))
        body = ",".join(map(str, values[:_DISPLAY_LIMIT]))
        if len(values) > _DISPLAY_LIMIT:
            body += ",..."
        return "[" + body + "]"


def list_to_str(head: ListNode | None) -> str:
    """Render a whole list (or an empty one) in ``[1,2,3]`` notation."""
    if head is None:
        return "[]"
    return "[" + ",".join(map(str, head)) + "]"


def list_to_num(head: ListNode | None) -> int:
    """Read the list as decimal digits, most significant first."""
    num = 0
    for digit in head or ():
        num = num * 10 + digit
    return num


def list_to_num_reversed(head: ListNode | None) -> int:
    """Read the list as decimal digits, least significant first."""
    return sum(digit * 10**power for power, digit in enumerate(head or ()))