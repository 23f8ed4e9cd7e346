"""Problems solved by walking two indices over a sequence."""

from __future__ import annotations


def four_sum(nums: list[int], target: int) -> list[list[int]]:
    """All distinct quadruplets of ``nums`` whose sum is ``target``.

    Quadruplets come out sorted, in ascending order of their members.
    """
    if len(nums) < 4:
        return []
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            expected = target - values[i] - values[j]
            lo, hi = j + 1, n - 1
            while lo < hi:
                pair = values[lo] + values[hi]
                if pair == expected:
                    result.append([values[i], values[j], values[lo], values[hi]])
                    while lo < n - 1 and values[lo + 1] == values[lo]:
                        lo += 1
                    while hi > 2 and values[hi - 1] == values[hi]:
                        hi -= 1
                    lo += 1
                    hi -= 1
                elif pair < expected:
                    lo += 1
                else:
                    hi -= 1
    return result


def remove_element(nums: list[int], val: int) -> int:
    """Move every element other than ``val`` to the front of ``nums``.

    Works in place by swapping and returns how many elements were kept;
    those occupy the first positions of ``nums``.
    """
    start, end = 0, len(nums)
    while start < end:
        while end > 0 and nums[end - 1] == val:
            end -= 1
        if end == 0:
            return start
        while start < len(nums) and nums[start] != val:
            start += 1
        if start + 1 < end:
            nums[start], nums[end - 1] = nums[end - 1], nums[start]
    return start


def replace_number(chars: list[str], pattern: str) -> None:
    """Replace every numeric character in ``chars`` with ``pattern``, in place.

    An empty pattern leaves ``chars`` untouched.
    """
    if not pattern:
        return
    replacement = list(pattern)
    chars[:] = [
        piece
        for ch in chars
        for piece in (replacement if ch.isnumeric() else (ch,))
    ]


def reverse_words(s: str) -> str:
    """Reverse the order of the space-separated words of ``s``.

    Words come out separated by single spaces with no leading or trailing
    space. A string without any word is returned as it is.
    """
    words = [word for word in s.split(" ") if word]
    if not words:
        return s
    return " ".join(reversed(words))


def three_sum(nums: list[int]) -> list[list[int]]:
    """All distinct triplets of ``nums`` that sum to zero, each sorted."""
    if len(nums) < 3:
        return []
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    if values[0] > 0:
        return result
    for start in range(n - 2):
        if start > 0 and values[start] == values[start - 1]:
            continue
        lo, hi = start + 1, n - 1
        while lo < hi:
            total = values[start] + values[lo] + values[hi]
            if total > 0:
                hi -= 1
            elif total < 0:
                lo += 1
            else:
                result.append([values[start], values[lo], values[hi]])
                while hi > 1 and values[hi - 1] == values[hi]:
                    hi -= 1
                hi -= 1
                while lo < n - 1 and values[lo + 1] == values[lo]:
                    lo += 1
                lo += 1
    return result


def two_sum(nums: list[int], target: int) -> list[int]:
    """Indices of the first pair in ``nums`` summing to ``target``, or []."""
    seen: dict[int, int] = {}
    for idx, value in enumerate(nums):
        other = seen.get(target - value)
        if other is not None:
            return [other, idx]
        seen[value] = idx
    return []