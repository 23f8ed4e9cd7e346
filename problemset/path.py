"""Root-to-leaf paths of a binary tree."""

from __future__ import annotations

from problemset.binary_tree import TreeNode


def _format(path: list[int]) -> str:
    return "->".join(str(value) for value in path)


def binary_tree_paths(root: TreeNode | None) -> list[str]:
    """Every root-to-leaf path as ``"a->b->c"``, left to right, using a stack."""
    paths: list[str] = []
    stack: list[tuple[TreeNode, list[int]]] = []
    if root is not None:
        stack.append((root, []))
    while stack:
        node, prefix = stack.pop()
        path = [*prefix, node.val]
        if node.left is None and node.right is None:
            paths.append(_format(path))
        if node.right is not None:
            stack.append((node.right, path))
        if node.left is not None:
            stack.append((node.left, path))
    return paths


def binary_tree_paths_rec(root: TreeNode | None) -> list[str]:
    """Every root-to-leaf path as ``"a->b->c"``, left to right, recursively."""
    paths: list[str] = []

    def walk(node: TreeNode | None, path: list[int]) -> None:
        if node is None:
            return
        path = [*path, node.val]
        if node.left is None and node.right is None:
            paths.append(_format(path))
            return
        walk(node.left, path)
        walk(node.right, path)

    walk(root, [])
    return paths