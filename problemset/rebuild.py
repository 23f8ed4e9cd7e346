"""Building binary trees from traversals, arrays and other trees."""

from __future__ import annotations

from collections.abc import Sequence

from problemset.binary_tree import TreeNode


def _build(inorder: Sequence[int], postorder: Sequence[int]) -> TreeNode | None:
    if not inorder or not postorder:
        return None
    root = TreeNode(postorder[-1])
    try:
        pos = inorder.index(root.val)
    except ValueError:
        return root
    root.left = _build(inorder[:pos], postorder[:pos])
    root.right = _build(inorder[pos + 1 :], postorder[pos:-1])
    return root


def build_tree(inorder: Sequence[int], postorder: Sequence[int]) -> TreeNode | None:
    """Rebuild a tree from its in-order and post-order values."""
    return _build(list(inorder), list(postorder))


def _max_tree(nums: Sequence[int]) -> TreeNode | None:
    if not nums:
        return None
    # On ties the last maximum becomes the root.
    idx = max(range(len(nums)), key=lambda i: (nums[i], i))
    return TreeNode(nums[idx], _max_tree(nums[:idx]), _max_tree(nums[idx + 1 :]))


def construct_maximum_binary_tree(nums: Sequence[int]) -> TreeNode | None:
    """Build the maximum binary tree of ``nums``.

    The root holds the largest value; the values left of it form the left
    subtree and those right of it the right subtree, built the same way.
    """
    return _max_tree(list(nums))


def merge_trees(root1: TreeNode | None, root2: TreeNode | None) -> TreeNode | None:
    """Overlay ``root2`` onto ``root1``, summing values where both have a node.

    ``root1`` is modified in place and reused; subtrees present only in
    ``root2`` are attached as they are.
    """
    if root1 is None:
        return root2
    if root2 is None:
        return root1
    root1.val += root2.val
    root1.left = merge_trees(root1.left, root2.left)
    root1.right = merge_trees(root1.right, root2.right)
    return root1