import pytest

from algodrills.structures import (
    ListNode,
    TreeNode,
    has_cycle,
    linked_list,
    list_values,
    reverse_inorder,
    reverse_list,
)


def _bst(values):
    root = None
    for value in values:
        if root is None:
            root = TreeNode(value)
            continue
        node = root
        while True:
            if value < node.val:
                if node.left is None:
                    node.left = TreeNode(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    break
                node = node.right
    return root


def _tail(head):
    while head.next is not None:
        head = head.next
    return head


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, 5, 4, 9, -2]])
def test_linked_list_round_trip(values):
    assert list_values(linked_list(values)) == values


def test_empty_linked_list():
    assert linked_list([]) is None
    assert list_values(None) == []


def test_list_values_rejects_cycle():
    head = linked_list([1, 2, 3])
    _tail(head).next = head
    with pytest.raises(ValueError):
        list_values(head)


def test_has_cycle_false_for_plain_list():
    assert has_cycle(linked_list([3, 2, 0, -4])) is False


def test_has_cycle_false_for_empty_and_single():
    assert has_cycle(None) is False
    assert has_cycle(ListNode(1)) is False


def test_has_cycle_true_for_loop_into_middle():
    head = linked_list([3, 2, 0, -4])
    _tail(head).next = head.next
    assert has_cycle(head) is True


def test_has_cycle_true_for_self_loop():
    node = ListNode(1)
    node.next = node
    assert has_cycle(node) is True


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [1, 2], [7]])
def test_reverse_list(values):
    assert list_values(reverse_list(linked_list(values))) == values[::-1]


def test_reverse_list_twice_restores_order():
    values = [4, 8, 15, 16, 23, 42]
    assert list_values(reverse_list(reverse_list(linked_list(values)))) == values


def test_reverse_empty_list():
    assert reverse_list(None) is None


def test_reverse_inorder_of_bst_is_descending():
    values = [50, 30, 70, 20, 40, 60, 80, 35]
    assert list(reverse_inorder(_bst(values))) == sorted(values, reverse=True)


def test_reverse_inorder_visits_right_then_root_then_left():
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    assert list(reverse_inorder(root)) == [3, 1, 2]


def test_reverse_inorder_of_empty_tree():
    assert list(reverse_inorder(None)) == []