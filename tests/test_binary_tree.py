import pytest

from algopractice.binary_tree import TreeNode, tree_to_str


@pytest.mark.parametrize(
    "numbers",
    [
        [10, 5, 15, 3, 7, 18],
        [10, 5, 15, 3, 7, None, 18],
        [10, 5, 15, 3, 7, 18, 1, None, 6],
    ],
)
def test_to_list_round_trip(numbers):
    assert TreeNode.from_list(numbers).to_list() == numbers


def test_display_does_not_truncate_tree_with_less_than_16_nodes():
    tree = "[1,2,3,4,5,6,7,8,9,10,11,12,13,14,15]"
    assert str(TreeNode.from_str(tree)) == tree


def test_display_truncates_trees_with_over_15_nodes():
    tree = "[1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16]"
    truncated = "[1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,...]"
    assert str(TreeNode.from_str(tree)) == truncated


@pytest.mark.parametrize(
    "tree",
    [
        "[10,5,15,3,7,null,18]",
        "[10,5,15,3,7,13,18,1,null,6]",
        "[1,2,3,4,5,6,7,8,9,10,11,12,13,14,15,16]",
    ],
)
def test_tree_to_str_serializes_properly(tree):
    assert tree_to_str(TreeNode.from_str(tree)) == tree


def test_tree_to_str_serializes_empty_tree():
    assert TreeNode.from_str("[]") is None
    assert tree_to_str(TreeNode.from_str("[]")) == "[]"


def test_structure_follows_level_order():
    root = TreeNode.from_str("[3,9,20,null,null,15,7]")
    assert root.val == 3
    assert root.left.val == 9
    assert root.left.left is None and root.left.right is None
    assert root.right.left.val == 15
    assert root.right.right.val == 7


def test_root_must_have_value():
    with pytest.raises(ValueError):
        TreeNode.from_list([None, 1])


def test_values_without_parent_are_rejected():
    with pytest.raises(ValueError):
        TreeNode.from_list([1, None, None, 4])


def test_equality_is_structural():
    assert TreeNode.from_str("[1,2,3]") == TreeNode.from_str("[1,2,3]")
    assert TreeNode.from_str("[1,2,3]") != TreeNode.from_str("[1,3,2]")