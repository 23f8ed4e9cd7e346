"""Searching, validating and reshaping binary search trees."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence

from problemset.binary_tree import TreeNode

# Result reported when no difference between two values exists.
NO_DIFFERENCE = 2**31 - 1


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def search_bst(root: TreeNode | None, val: int) -> TreeNode | None:
    """Return the node holding ``val``, or None if the tree has none."""
    current = root
    while current is not None:
        if current.val == val:
            return current
        current = current.right if current.val < val else current.left
    return None


def _within(node: TreeNode | None, low: int | None, high: int | None) -> bool:
    if node is None:
        return True
    if (low is not None and node.val <= low) or (high is not None and node.val >= high):
        return False
    return _within(node.left, low, node.val) and _within(node.right, node.val, high)


def is_valid_bst(root: TreeNode | None) -> bool:
    """Tell whether every node is strictly between its bounding ancestors."""
    return _within(root, None, None)


def get_minimum_difference_rec(root: TreeNode | None) -> int:
    """Smallest absolute difference between in-order neighbours.

    Returns ``NO_DIFFERENCE`` when the tree has fewer than two nodes.
    """
    values = list(_inorder(root))
    return min(
        (abs(b - a) for a, b in zip(values, values[1:])),
        default=NO_DIFFERENCE,
    )


def get_minimum_difference(root: TreeNode | None) -> int:
    """Smallest absolute difference between in-order neighbours, iteratively.

    The first value visited is measured against zero, and the walk stops
    early as soon as a difference of one is seen.
    """
    stack: list[TreeNode] = []
    current = root
    previous = 0
    min_diff = NO_DIFFERENCE
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        node = stack.pop()
        diff = abs(node.val - previous)
        if diff == 1:
            return diff
        min_diff = min(min_diff, diff)
        previous = node.val
        current = node.right
    return min_diff


def find_mode_force(root: TreeNode | None) -> list[int]:
    """The most frequent values in the tree, in ascending order."""
    counts: Counter[int] = Counter()
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        counts[node.val] += 1
        stack.extend(child for child in (node.left, node.right) if child is not None)
    if not counts:
        return []
    top = max(counts.values())
    return sorted(value for value, freq in counts.items() if freq == top)


def lowest_common_ancestor(
    root: TreeNode | None, p: TreeNode | None, q: TreeNode | None
) -> TreeNode | None:
    """Lowest common ancestor of ``p`` and ``q`` in any binary tree.

    Nodes are located by their values' positions in the in-order walk, so
    values are expected to be distinct.
    """
    if p is None or q is None:
        raise ValueError("both nodes must be given")
    position = {value: index for index, value in enumerate(_inorder(root))}
    try:
        p_pos = position[p.val]
        q_pos = position[q.val]
    except KeyError as exc:
        raise ValueError(f"value {exc.args[0]} is not in the tree") from None

    previous: TreeNode | None = None
    current = root
    while current is not None:
        here = position[current.val]
        if p_pos > here and q_pos > here:
            previous, current = current, current.right
        elif p_pos < here and q_pos < here:
            previous, current = current, current.left
        else:
            return current
    return previous


def lowest_common_ancestor_bst(
    root: TreeNode | None, p: TreeNode | None, q: TreeNode | None
) -> TreeNode | None:
    """Lowest common ancestor of ``p`` and ``q`` in a binary search tree."""
    if p is None or q is None:
        raise ValueError("both nodes must be given")
    current = root
    while current is not None:
        if p.val > current.val and q.val > current.val:
            current = current.right
        elif p.val < current.val and q.val < current.val:
            current = current.left
        else:
            return current
    return None


def delete_node(root: TreeNode | None, key: int) -> TreeNode | None:
    """Remove the node holding ``key`` and return the new root."""
    if root is None:
        return None
    if key > root.val:
        root.right = delete_node(root.right, key)
    elif key < root.val:
        root.left = delete_node(root.left, key)
    else:
        left, right = root.left, root.right
        if left is None:
            root.right = None
            return right
        if right is None:
            root.left = None
            return left
        successor = right
        while successor.left is not None:
            successor = successor.left
        root.val = successor.val
        root.right = delete_node(right, successor.val)
    return root


def trim_bst(root: TreeNode | None, low: int, high: int) -> TreeNode | None:
    """Drop every node whose value lies outside ``[low, high]``."""
    if root is None:
        return None
    if root.val < low:
        return trim_bst(root.right, low, high)
    if root.val > high:
        return trim_bst(root.left, low, high)
    root.left = trim_bst(root.left, low, high)
    root.right = trim_bst(root.right, low, high)
    return root


def _balanced(nums: Sequence[int]) -> TreeNode | None:
    if not nums:
        return None
    mid = (len(nums) - 1) // 2
    return TreeNode(nums[mid], _balanced(nums[:mid]), _balanced(nums[mid + 1 :]))


def sorted_array_to_bst(nums: Sequence[int]) -> TreeNode | None:
    """Build a height-balanced search tree from sorted values."""
    return _balanced(list(nums))


def _accumulate(node: TreeNode | None) -> int:
    if node is None:
        return 0
    node.val += _accumulate(node.left)
    node.val += _accumulate(node.right)
    return node.val


def convert_bst_to_accumulated_sum(root: TreeNode | None) -> TreeNode | None:
    """Replace each value with the sum of its whole subtree, in place."""
    _accumulate(root)
    return root


def convert_to_greater_sum_tree(root: TreeNode | None) -> TreeNode | None:
    """Replace each value with the sum of all values not smaller than it."""
    total = 0

    def walk(node: TreeNode | None) -> None:
        nonlocal total
        if node is None:
            return
        walk(node.right)
        total += node.val
        node.val = total
        walk(node.left)

    walk(root)
    return root


def convert_to_gst_sub(root: TreeNode | None, parent_val: int) -> int:
    """Greater-sum conversion carrying the running sum down the tree.

    Returns the running sum after the subtree has been converted.
    """
    if root is None:
        return parent_val
    if root.left is None and root.right is None:
        root.val += parent_val
        return root.val
    root.val += convert_to_gst_sub(root.right, parent_val)
    return convert_to_gst_sub(root.left, root.val)