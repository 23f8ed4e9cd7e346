import pytest

from problemset.binary_tree import TreeNode, sample_tree
from problemset.bst import (
    NO_DIFFERENCE,
    convert_bst_to_accumulated_sum,
    convert_to_greater_sum_tree,
    convert_to_gst_sub,
    delete_node,
    find_mode_force,
    get_minimum_difference,
    get_minimum_difference_rec,
    is_valid_bst,
    lowest_common_ancestor,
    lowest_common_ancestor_bst,
    search_bst,
    sorted_array_to_bst,
    trim_bst,
)


def _values(node):
    if node is None:
        return []
    return _values(node.left) + [node.val] + _values(node.right)


def _seven_node_bst():
    return TreeNode(
        10,
        TreeNode(5, TreeNode(3), TreeNode(7)),
        TreeNode(15, TreeNode(12), TreeNode(18)),
    )


def _greater_sum_input():
    return TreeNode(
        4,
        TreeNode(1, TreeNode(0), TreeNode(2, None, TreeNode(3))),
        TreeNode(6, TreeNode(5), TreeNode(7, None, TreeNode(8))),
    )


def _greater_sum_expected():
    return TreeNode(
        30,
        TreeNode(36, TreeNode(36), TreeNode(35, None, TreeNode(33))),
        TreeNode(21, TreeNode(26), TreeNode(15, None, TreeNode(8))),
    )


def test_search_bst_finds_node_by_identity():
    root = _seven_node_bst()
    assert search_bst(root, 12) is root.right.left
    assert search_bst(root, 10) is root


def test_search_bst_missing_value():
    assert search_bst(_seven_node_bst(), 11) is None
    assert search_bst(None, 1) is None


def test_is_valid_bst():
    assert is_valid_bst(_seven_node_bst()) is True
    assert is_valid_bst(None) is True
    assert is_valid_bst(sample_tree()) is False


def test_is_valid_bst_rejects_deep_violation_and_duplicates():
    root = _seven_node_bst()
    root.right.left.val = 9
    assert is_valid_bst(root) is False
    assert is_valid_bst(TreeNode(2, TreeNode(2))) is False


def test_minimum_difference_methods_agree():
    root = _seven_node_bst()
    assert get_minimum_difference(root) == get_minimum_difference_rec(root)


def test_minimum_difference_single_node():
    assert get_minimum_difference_rec(TreeNode(5)) == NO_DIFFERENCE
    assert NO_DIFFERENCE == 2**31 - 1
    assert get_minimum_difference(TreeNode(5)) == 5


def test_minimum_difference_empty():
    assert get_minimum_difference_rec(None) == NO_DIFFERENCE
    assert get_minimum_difference(None) == NO_DIFFERENCE


def test_find_mode_force():
    root = TreeNode(1, None, TreeNode(2, TreeNode(2)))
    assert find_mode_force(root) == [2]
    assert find_mode_force(_seven_node_bst()) == _values(_seven_node_bst())
    assert find_mode_force(None) == []


def test_lowest_common_ancestor_general_tree():
    root = sample_tree()
    six = root.left.right.left
    four = root.left.left
    assert lowest_common_ancestor(root, six, four) is root.left
    nine = root.right.right.left
    assert lowest_common_ancestor(root, six, nine) is root


def test_lowest_common_ancestor_errors():
    root = sample_tree()
    with pytest.raises(ValueError):
        lowest_common_ancestor(root, TreeNode(100), root.left)
    with pytest.raises(ValueError):
        lowest_common_ancestor(root, None, root.left)


def test_lowest_common_ancestor_bst():
    root = _seven_node_bst()
    assert lowest_common_ancestor_bst(root, TreeNode(3), TreeNode(7)) is root.left
    assert lowest_common_ancestor_bst(root, TreeNode(3), TreeNode(18)) is root
    assert lowest_common_ancestor_bst(root, TreeNode(12), TreeNode(15)) is root.right
    with pytest.raises(ValueError):
        lowest_common_ancestor_bst(root, TreeNode(3), None)


@pytest.mark.parametrize("key", [3, 5, 10, 15, 18])
def test_delete_node_keeps_other_values(key):
    expected = [v for v in _values(_seven_node_bst()) if v != key]
    root = delete_node(_seven_node_bst(), key)
    assert _values(root) == expected
    assert is_valid_bst(root)


def test_delete_missing_key_leaves_tree_unchanged():
    assert delete_node(_seven_node_bst(), 11) == _seven_node_bst()
    assert delete_node(None, 1) is None


def test_trim_bst():
    root = trim_bst(_seven_node_bst(), 5, 12)
    original = _values(_seven_node_bst())
    assert _values(root) == [v for v in original if 5 <= v <= 12]
    assert is_valid_bst(root)
    assert trim_bst(_seven_node_bst(), 100, 200) is None


def test_sorted_array_to_bst():
    nums = [-10, -3, 0, 5, 9]
    root = sorted_array_to_bst(nums)
    assert _values(root) == nums
    assert is_valid_bst(root)
    assert root.val == nums[(len(nums) - 1) // 2]
    assert sorted_array_to_bst([]) is None


def test_convert_bst_to_accumulated_sum_example():
    expected = TreeNode(
        70,
        TreeNode(15, TreeNode(3), TreeNode(7)),
        TreeNode(45, TreeNode(12), TreeNode(18)),
    )
    root = _seven_node_bst()
    result = convert_bst_to_accumulated_sum(root)
    assert result is root
    assert result == expected


def test_convert_to_greater_sum_tree_example():
    root = _greater_sum_input()
    result = convert_to_greater_sum_tree(root)
    assert result is root
    assert result == _greater_sum_expected()


def test_convert_to_gst_sub_matches_greater_sum_tree():
    root = _greater_sum_input()
    total = convert_to_gst_sub(root, 0)
    assert root == _greater_sum_expected()
    assert total == max(_values(root))


def test_convert_to_gst_sub_empty_returns_parent_value():
    assert convert_to_gst_sub(None, 7) == 7