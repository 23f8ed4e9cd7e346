import math

import pytest

from problemset.misc import (
    add_binary,
    binary_search,
    find_median_sorted_arrays,
    group_anagrams,
    is_palindrome,
    length_of_longest_substring,
    permute,
    plus_one,
    quick_pow,
    quick_pow_recursive,
    rotate,
    search_insert,
    sort_colors,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("11", "1", "100"),
        ("1010", "1011", "10101"),
        ("110010", "10111", "1001001"),
        ("0", "0", "0"),
    ],
)
def test_add_binary(a, b, expected):
    assert add_binary(a, b) == expected


def test_add_binary_rejects_non_binary():
    with pytest.raises(ValueError):
        add_binary("12", "1")


@pytest.mark.parametrize(
    "target, expected",
    [(0, -1), (1, 0), (2, -1), (3, 1), (4, -1), (5, 2), (6, -1), (7, 3), (8, -1)],
)
def test_binary_search(target, expected):
    assert binary_search([1, 3, 5, 7], target) == expected


def test_binary_search_empty():
    assert binary_search([], 4) == -1


def test_find_median_odd():
    assert find_median_sorted_arrays([1, 3], [2]) == 2.0


def test_find_median_even():
    assert find_median_sorted_arrays([1, 2], [3, 4]) == 2.5


def test_find_median_one_side_empty():
    assert find_median_sorted_arrays([], [5]) == 5.0


def test_find_median_empty_raises():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


def test_group_anagrams():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    result = group_anagrams(words)
    assert sorted(result) == sorted([["bat"], ["eat", "tea", "ate"], ["tan", "nat"]])


def test_group_anagrams_keeps_first_seen_order():
    assert group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"]) == [
        ["eat", "tea", "ate"],
        ["tan", "nat"],
        ["bat"],
    ]


@pytest.mark.parametrize(
    "x, expected",
    [
        (-121, False),
        (0, True),
        (121, True),
        (120, False),
        (9009, True),
        (90509, True),
        (90519, False),
    ],
)
def test_is_palindrome(x, expected):
    assert is_palindrome(x) is expected


@pytest.mark.parametrize(
    "s, expected",
    [
        ("abcabcbb", 3),
        ("bbbbb", 1),
        ("pwwkew", 3),
        ("dvdf", 3),
        ("abba", 2),
        ("", 0),
    ],
)
def test_length_of_longest_substring(s, expected):
    assert length_of_longest_substring(s) == expected


def test_permute_order():
    assert permute([1, 2, 3]) == [
        [1, 2, 3],
        [1, 3, 2],
        [2, 1, 3],
        [2, 3, 1],
        [3, 2, 1],
        [3, 1, 2],
    ]


def test_permute_leaves_input_untouched():
    nums = [4, 5]
    assert permute(nums) == [[4, 5], [5, 4]]
    assert nums == [4, 5]


def test_permute_empty():
    assert permute([]) == [[]]


@pytest.mark.parametrize(
    "digits, expected",
    [([1, 2, 3], [1, 2, 4]), ([1, 2, 9], [1, 3, 0]), ([9, 9, 9], [1, 0, 0, 0])],
)
def test_plus_one(digits, expected):
    assert plus_one(digits) == expected


@pytest.mark.parametrize("func", [quick_pow, quick_pow_recursive])
@pytest.mark.parametrize(
    "x, n, expected",
    [(2.0, 10, 1024.0), (2.0, -2, 0.25), (3.0, 0, 1.0), (2.0, 1, 2.0)],
)
def test_quick_pow(func, x, n, expected):
    assert func(x, n) == pytest.approx(expected)


def test_quick_pow_zero_negative_exponent():
    assert quick_pow(0.0, -1) == math.inf
    assert quick_pow_recursive(0.0, -1) == math.inf


def test_rotate_four_by_four():
    m = [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]]
    rotate(m)
    assert m == [[15, 13, 2, 5], [14, 3, 4, 1], [12, 6, 8, 9], [16, 7, 10, 11]]


def test_rotate_three_by_three():
    m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotate(m)
    assert m == [[7, 4, 1], [8, 5, 2], [9, 6, 3]]


def test_rotate_four_times_is_identity():
    original = [[1, 2], [3, 4]]
    m = [row[:] for row in original]
    for _ in range(4):
        rotate(m)
    assert m == original


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate([[1, 2, 3], [4, 5, 6]])


def test_search_insert():
    assert search_insert([1, 2, 3], 0) == 0


@pytest.mark.parametrize("target, expected", [(5, 2), (2, 1), (7, 4), (0, 0)])
def test_search_insert_more(target, expected):
    assert search_insert([1, 3, 5, 6], target) == expected


def test_sort_colors():
    nums = [0, 2, 1, 0]
    sort_colors(nums)
    assert nums == [0, 0, 1, 2]


def test_sort_colors_longer():
    nums = [2, 0, 2, 1, 1, 0]
    sort_colors(nums)
    assert nums == [0, 0, 1, 1, 2, 2]


def test_sort_colors_single():
    nums = [2]
    sort_colors(nums)
    assert nums == [2]