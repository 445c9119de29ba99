"""Linked structures: binary-tree level order, cycle detection and node removal."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A binary-tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass(eq=False)
class ListNode:
    """A singly-linked list node. Compared by identity, since lists may be cyclic."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


def level_order(root: TreeNode | None) -> list[list[int]]:
    """Node values level by level, left to right."""
    if root is None:
        return []
    levels: list[list[int]] = []
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        levels.append(level)
    return levels


def has_cycle(head: ListNode | None) -> bool:
    """Whether following ``next`` from ``head`` ever revisits a node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if fast is slow:
            return True
    return False


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the ``n``-th node counted from the end; return the new head."""
    if head is None:
        return None
    if n < 1:
        raise ValueError("n must be a positive integer")
    dummy = ListNode(-1, head)
    slow = fast = dummy
    for _ in range(n):
        fast = fast.next
        if fast is None:
            raise ValueError("n is larger than the length of the list")
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next