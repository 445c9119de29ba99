import pytest

from contestkit.linked import (
    ListNode,
    TreeNode,
    has_cycle,
    level_order,
    remove_nth_from_end,
)


def _build(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def _values(head):
    out = []
    while head is not None:
        out.append(head.val)
        head = head.next
    return out


def test_level_order_example_tree():
    root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
    assert level_order(root) == [[3], [9, 20], [15, 7]]


def test_level_order_empty_tree():
    assert level_order(None) == []


def test_level_order_left_chain_has_one_value_per_level():
    root = TreeNode(1, TreeNode(2, TreeNode(3, TreeNode(4))))
    assert level_order(root) == [[1], [2], [3], [4]]


def test_level_order_single_node():
    assert level_order(TreeNode(42)) == [[42]]


def test_has_cycle_detects_loop_to_middle():
    head = _build([3, 2, 0, -4])
    tail = head.next.next.next
    tail.next = head.next
    assert has_cycle(head) is True


def test_has_cycle_self_loop_of_two():
    head = _build([1, 2])
    head.next.next = head
    assert has_cycle(head) is True


def test_has_cycle_false_for_plain_lists():
    assert has_cycle(None) is False
    assert has_cycle(_build([1])) is False
    assert has_cycle(_build([1, 2, 3, 4, 5])) is False


def test_remove_nth_from_end_middle():
    head = _build([1, 2, 3, 4, 5])
    assert _values(remove_nth_from_end(head, 2)) == [1, 2, 3, 5]


def test_remove_nth_from_end_removes_head():
    head = _build([1, 2, 3])
    new_head = remove_nth_from_end(head, 3)
    assert _values(new_head) == [2, 3]


def test_remove_only_node_leaves_empty_list():
    assert remove_nth_from_end(_build([7]), 1) is None


def test_remove_from_empty_list():
    assert remove_nth_from_end(None, 1) is None


@pytest.mark.parametrize("n", [0, 4])
def test_remove_out_of_range_raises(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(_build([1, 2, 3]), n)