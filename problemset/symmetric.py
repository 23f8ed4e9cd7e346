"""Checking whether a binary tree is a mirror image of itself."""

from __future__ import annotations

from problemset.binary_tree import TreeNode


def is_symmetric(root: TreeNode | None) -> bool:
    """Tell whether the tree mirrors itself, using a stack of node pairs."""
    stack: list[tuple[TreeNode | None, TreeNode | None]] = [(root, root)]
    while stack:
        left, right = stack.pop()
        if left is None and right is None:
            continue
        if left is None or right is None or left.val != right.val:
            return False
        stack.append((left.left, right.right))
        stack.append((left.right, right.left))
    return True


def _mirrors(left: TreeNode | None, right: TreeNode | None) -> bool:
    if left is None or right is None:
        return left is None and right is None
    return (
        left.val == right.val
        and _mirrors(left.left, right.right)
        and _mirrors(left.right, right.left)
    )


def is_symmetric_rec(root: TreeNode | None) -> bool:
    """Tell whether the tree mirrors itself, recursively."""
    return _mirrors(root, root)