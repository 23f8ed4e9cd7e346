"""Inverting, counting and comparing binary trees."""

from __future__ import annotations

from problemset.binary_tree import TreeNode


def invert_tree(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place, using an explicit stack; return its root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.right, node.left) if child is not None)
    return root


def invert_tree_rec(root: TreeNode | None) -> TreeNode | None:
    """Mirror the tree in place, recursively; return its root."""
    if root is not None:
        root.left, root.right = root.right, root.left
        invert_tree_rec(root.left)
        invert_tree_rec(root.right)
    return root


def count_nodes_iter(root: TreeNode | None) -> int:
    """Number of nodes in the tree, counted with an explicit stack."""
    count = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        count += 1
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return count


def count_nodes_rec(root: TreeNode | None) -> int:
    """Number of nodes in the tree, counted recursively."""
    if root is None:
        return 0
    return 1 + count_nodes_rec(root.left) + count_nodes_rec(root.right)


def is_same_tree(p: TreeNode | None, q: TreeNode | None) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if p is None or q is None:
        return p is None and q is None
    return (
        p.val == q.val
        and is_same_tree(p.left, q.left)
        and is_same_tree(p.right, q.right)
    )