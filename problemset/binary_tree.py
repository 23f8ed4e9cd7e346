"""Binary tree nodes and a couple of sample trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A node of a binary tree; equality compares whole subtrees."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def sample_tree() -> TreeNode:
    """Build this tree::

               1
            /     \\
           2       3
          / \\       \\
         4   5       8
            / \\     /
           6   7   9
    """
    return TreeNode(
        1,
        TreeNode(2, TreeNode(4), TreeNode(5, TreeNode(6), TreeNode(7))),
        TreeNode(3, None, TreeNode(8, TreeNode(9))),
    )


def sample_tree2() -> TreeNode:
    """Build this tree::

            1
           / \\
          2   3
           \\
            4
    """
    return TreeNode(1, TreeNode(2, None, TreeNode(4)), TreeNode(3))