"""Breadth-first, level-by-level views of a binary tree."""

from __future__ import annotations

from collections.abc import Iterator

from problemset.binary_tree import TreeNode


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order_traversal(root: TreeNode | None) -> list[list[int]]:
    """Values of each level, top to bottom, left to right."""
    return [[node.val for node in level] for level in _levels(root)]


def level_order_traversal_bottom(root: TreeNode | None) -> list[list[int]]:
    """Values of each level, bottom to top, left to right."""
    result = level_order_traversal(root)
    result.reverse()
    return result


def right_side_view(root: TreeNode | None) -> list[int]:
    """The rightmost value of each level."""
    return [level[-1].val for level in _levels(root)]


def average_of_levels(root: TreeNode | None) -> list[float]:
    """The mean value of each level."""
    return [sum(values) / len(values) for values in level_order_traversal(root)]


def level_order_flat(root: TreeNode | None) -> list[int]:
    """All values in breadth-first order, as one list."""
    return [node.val for level in _levels(root) for node in level]