"""Depth-first traversals of a binary tree: in-order, pre-order, post-order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from problemset.binary_tree import TreeNode


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """In-order values, by recursion."""
    return list(_inorder(root))


def inorder_traversal_iteration(root: TreeNode | None) -> list[int]:
    """In-order values, using an explicit stack."""
    result: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        result.append(node.val)
        current = node.right
    return result


def inorder_morris(root: TreeNode | None) -> list[int]:
    """In-order values in constant extra space by temporarily threading the tree.

    The tree is restored to its original shape before returning.
    """
    result: list[int] = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is current:
            result.append(current.val)
            predecessor.right = None
            current = current.right
        else:
            predecessor.right = current
            current = current.left
    return result


def _postorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def postorder_recursive(root: TreeNode | None) -> list[int]:
    """Post-order values, by recursion."""
    return list(_postorder(root))


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Post-order values: a root-right-left walk, reversed."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
        result.append(node.val)
    result.reverse()
    return result


def postorder_two_stacks(root: TreeNode | None) -> list[int]:
    """Post-order values using a work stack and a result stack."""
    support: list[TreeNode | None] = [root] if root is not None else []
    collected: deque[TreeNode] = deque()
    while support:
        node = support.pop()
        if node is not None:
            support.append(node.left)
            support.append(node.right)
            collected.appendleft(node)
    return [node.val for node in collected]


def postorder_stack(root: TreeNode | None) -> list[int]:
    """Post-order values with one stack and the last visited node."""
    result: list[int] = []
    stack: list[TreeNode] = []
    last_visited: TreeNode | None = None
    current = root
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        peek = stack[-1]
        if peek.right is not None and peek.right is not last_visited:
            current = peek.right
        else:
            last_visited = stack.pop()
            result.append(last_visited.val)
    return result


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def preorder_recursive(root: TreeNode | None) -> list[int]:
    """Pre-order values, by recursion."""
    return list(_preorder(root))


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Pre-order values, using an explicit stack."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result