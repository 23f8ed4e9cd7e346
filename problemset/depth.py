"""Maximum and minimum depth of a binary tree."""

from __future__ import annotations

from problemset.binary_tree import TreeNode


def _next_level(level: list[TreeNode]) -> list[TreeNode]:
    return [
        child
        for node in level
        for child in (node.left, node.right)
        if child is not None
    ]


def max_depth(root: TreeNode | None) -> int:
    """Number of levels in the tree, counted level by level."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        level = _next_level(level)
        depth += 1
    return depth


def max_depth_rec(root: TreeNode | None) -> int:
    """Number of levels in the tree, computed recursively."""
    if root is None:
        return 0
    return 1 + max(max_depth_rec(root.left), max_depth_rec(root.right))


def min_depth(root: TreeNode | None) -> int:
    """Levels down to the nearest leaf, found level by level."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        if any(node.left is None and node.right is None for node in level):
            return depth
        level = _next_level(level)
    return depth


def min_depth_rec(root: TreeNode | None) -> int:
    """Levels down to the nearest leaf, computed recursively."""
    if root is None:
        return 0
    if root.left is not None and root.right is not None:
        return 1 + min(min_depth_rec(root.left), min_depth_rec(root.right))
    if root.left is not None:
        return 1 + min_depth_rec(root.left)
    if root.right is not None:
        return 1 + min_depth_rec(root.right)
    return 1