"""Problems solved with stacks, queues and heaps."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable

_OPERATORS = {"+", "-", "*", "/"}
_PAIRS = {")": "(", "]": "[", "}": "{"}


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate an integer expression in reverse Polish notation.

    Division truncates toward zero.
    """
    stack: list[int] = []
    for token in tokens:
        if token in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {token!r} is missing an operand")
            right = stack.pop()
            left = stack.pop()
            if token == "+":
                stack.append(left + right)
            elif token == "-":
                stack.append(left - right)
            elif token == "*":
                stack.append(left * right)
            else:
                stack.append(_truncating_div(left, right))
        else:
            stack.append(int(token))
    if not stack:
        raise ValueError("empty expression")
    return stack.pop()


def remove_duplicates(s: str) -> str:
    """Repeatedly remove adjacent pairs of equal characters."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def max_sliding_window_timeout(nums: list[int], k: int) -> list[int]:
    """Maximum of each window of size ``k``, by updating every affected window."""
    if not nums:
        return []
    if k < 1 or k > len(nums):
        raise ValueError(f"window size {k} does not fit {len(nums)} values")
    window_count = len(nums) - k + 1
    result = nums[:window_count]
    for i, cur in enumerate(nums):
        for j in range(max(0, i - k + 1), min(i, window_count)):
            if result[j] < cur:
                result[j] = cur
    return result


def max_sliding_window(nums: list[int], k: int) -> list[int]:
    """Maximum of each window of size ``k``, using a monotonic deque."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(nums):
        if window and window[0] + k < i + 1:
            window.popleft()
        while window and nums[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """The ``k`` most frequent values, most frequent first.

    Ties are broken in favour of the larger value.
    """
    counts = Counter(nums)
    if k > len(counts):
        raise ValueError(f"asked for {k} values but only {len(counts)} are distinct")
    ranked = heapq.nlargest(k, ((freq, num) for num, freq in counts.items()))
    return [num for _, num in ranked]


def is_valid(s: str) -> bool:
    """Check that every closing bracket matches the most recent open one.

    Only bracket characters are accepted; brackets left open at the end
    do not make the string invalid.
    """
    stack: list[str] = []
    for ch in s:
        if ch in "([{":
            stack.append(ch)
        elif ch in _PAIRS:
            if not stack or stack[-1] != _PAIRS[ch]:
                return False
            stack.pop()
        else:
            return False
    return True