"""Assorted array, string and number problems."""

from __future__ import annotations

import bisect
import heapq
import math
from itertools import zip_longest


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings of '0' and '1'."""
    digits: list[str] = []
    carry = 0
    for a_char, b_char in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        if a_char not in "01" or b_char not in "01":
            raise ValueError(f"not a binary digit: {a_char!r} or {b_char!r}")
        total = int(a_char) + int(b_char) + carry
        carry, bit = divmod(total, 2)
        digits.append(str(bit))
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def binary_search(nums: list[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1 if absent."""
    left, right = 0, len(nums)
    while left < right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid
    return -1


def find_median_sorted_arrays(nums1: list[int], nums2: list[int]) -> float:
    """Return the median of the union of two sorted lists."""
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        raise ValueError("cannot take the median of no values")
    mid, odd = divmod(len(merged), 2)
    if odd:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2.0


def group_anagrams(strs: list[str]) -> list[list[str]]:
    """Group words that are anagrams of each other."""
    groups: dict[bytes, list[str]] = {}
    for word in strs:
        key = bytes(sorted(word.encode()))
        groups.setdefault(key, []).append(word)
    return list(groups.values())


def is_palindrome(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    if x < 10:
        return True
    if x % 10 == 0:
        return False

    original = x
    reversed_half = 0
    while reversed_half < original:
        reversed_half = 10 * reversed_half + original % 10
        original //= 10
        if reversed_half == original or original // 10 == reversed_half:
            return True
    return False


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    max_len = 0
    cur_len = 0
    start = 0
    for idx, ch in enumerate(s):
        previous = last_seen.get(ch)
        if previous is not None:
            max_len = max(max_len, cur_len)
            start = max(start, previous)
            cur_len = idx - start
        else:
            cur_len += 1
        last_seen[ch] = idx
    return max(cur_len, max_len)


def permute(nums: list[int]) -> list[list[int]]:
    """Return every permutation of ``nums`` in swap-backtracking order."""
    work = list(nums)
    result: list[list[int]] = []
    size = len(work)

    def backtrack(first: int) -> None:
        if first == size:
            result.append(list(work))
            return
        for i in range(first, size):
            work[i], work[first] = work[first], work[i]
            backtrack(first + 1)
            work[i], work[first] = work[first], work[i]

    backtrack(0)
    return result


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    carry = 1
    result: list[int] = []
    for digit in reversed(digits):
        carry, value = divmod(digit + carry, 10)
        result.append(value)
    if carry == 1:
        result.append(1)
    result.reverse()
    return result


def _invert(x: float) -> float:
    if x == 0:
        return math.copysign(math.inf, x)
    return 1.0 / x


def quick_pow(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring."""
    if n == 0:
        return 1.0
    result = 1.0
    base = x
    exp = n
    if exp < 0:
        base = _invert(base)
        exp = -exp
    while exp > 0:
        if exp % 2 == 1:
            result *= base
        base *= base
        exp //= 2
    return result


def quick_pow_recursive(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by recursive halving."""
    if n == 0:
        return 1.0
    base = x
    exp = n
    if exp < 0:
        base = _invert(base)
        exp = -exp
    half = quick_pow_recursive(base, exp // 2)
    if n % 2 == 0:
        return half * half
    return half * half * base


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    if not matrix:
        raise ValueError("matrix must not be empty")
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]


def search_insert(nums: list[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return bisect.bisect_left(nums, target)


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    if len(nums) == 1:
        return
    left = 0
    right = len(nums)
    i = 0
    while i < right:
        if nums[i] == 1:
            i += 1
        elif nums[i] == 0:
            nums[left], nums[i] = nums[i], nums[left]
            left += 1
            i += 1
        else:
            right -= 1
            nums[right], nums[i] = nums[i], nums[right]