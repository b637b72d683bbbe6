"""Classic problems on singly linked lists."""

from __future__ import annotations

from .linked_list import ListNode


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as least-significant-first digit lists."""
    dummy = ListNode(0)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def _check_group_size(k: int) -> None:
    if k < 1:
        raise ValueError("group size must be positive")


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every full group of ``k`` nodes in place; a short tail stays as is."""
    _check_group_size(k)
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth: ListNode | None = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        prev, node = group_next, group_prev.next
        while node is not group_next:
            node.next, prev, node = prev, node, node.next
        first = group_prev.next
        group_prev.next = kth
        group_prev = first


def reverse_k_group_recursive(head: ListNode | None, k: int) -> ListNode | None:
    """Return a new list with every full group of ``k`` values reversed."""
    _check_group_size(k)
    group = []
    node = head
    while node is not None and len(group) < k:
        group.append(node)
        node = node.next
    if len(group) < k:
        return head
    result = reverse_k_group_recursive(node, k)
    for member in group:
        result = ListNode(member.val, result)
    return result


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Put nodes at odd positions first, then those at even positions."""
    odd_dummy, even_dummy = ListNode(0), ListNode(0)
    odd_tail, even_tail = odd_dummy, even_dummy
    is_odd = True
    while head is not None:
        node, head = head, head.next
        node.next = None
        if is_odd:
            odd_tail.next = node
            odd_tail = node
        else:
            even_tail.next = node
            even_tail = node
        is_odd = not is_odd
    odd_tail.next = even_dummy.next
    return odd_dummy.next


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node (the second one for even lengths)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    return slow


def middle_node_by_count(head: ListNode | None) -> ListNode | None:
    """Return the middle node by counting the nodes first."""
    count = sum(1 for _ in head or ())
    for _ in range(count // 2):
        head = head.next
    return head