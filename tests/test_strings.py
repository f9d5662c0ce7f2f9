from collections import Counter
from itertools import accumulate, permutations

import pytest

from algokit.strings import (
    add_spaces,
    check_inclusion,
    count_consistent_strings,
    is_circular_sentence,
    largest_number,
    longest_diverse_string,
    make_fancy_string,
    maximum_swap,
    min_changes,
    min_length,
    minimum_steps,
    rotate_string,
    shortest_palindrome,
    take_characters,
)


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


def test_add_spaces_splits_words():
    words = ["Leetcode", "Helps", "Me", "Learn"]
    s = "".join(words)
    spaces = list(accumulate(len(w) for w in words[:-1]))
    assert add_spaces(s, spaces) == " ".join(words)


def test_add_spaces_at_start_and_none():
    assert add_spaces("abc", []) == "abc"
    assert add_spaces("abc", [0]) == " " + "abc"


@pytest.mark.parametrize("spaces", [[1], [0, 2, 3], [1, 2, 3, 4]])
def test_add_spaces_preserves_text(spaces):
    result = add_spaces("spacing", spaces)
    assert result.replace(" ", "") == "spacing"
    assert result.count(" ") == len(spaces)


def test_circular_sentence_true_and_false():
    assert is_circular_sentence("leetcode exercises sound delightful") is True
    assert is_circular_sentence("Leetcode is cool") is False
    assert is_circular_sentence("eetcode") is True


def test_circular_sentence_empty_raises():
    with pytest.raises(ValueError):
        is_circular_sentence("")


def test_count_consistent_strings():
    allowed = "ab"
    good = ["a", "b", "ab", "abab"]
    bad = ["ad", "bd", "c"]
    assert count_consistent_strings(allowed, good + bad) == len(good)
    assert count_consistent_strings(allowed, bad) == 0


def test_make_fancy_string_known():
    assert make_fancy_string("leeetcode") == "leetcode"


@pytest.mark.parametrize("s", ["aaabaaaa", "aab", "", "a", "zzzzzzz"])
def test_make_fancy_string_invariants(s):
    result = make_fancy_string(s)
    assert all(not (x == y == z) for x, y, z in zip(result, result[1:], result[2:]))
    assert _is_subsequence(result, s)
    assert set(result) == set(s)
    assert make_fancy_string(result) == result


def test_min_changes():
    assert min_changes("1100") == 0
    assert min_changes("0000") == 0
    s = "10" * 5
    assert min_changes(s) == len(s) // 2


def test_min_length():
    assert min_length("XYZ") == len("XYZ")
    assert min_length("AB" * 5) == 0
    assert min_length("CABD") == 0
    assert min_length("ACBBD") == len("ACBBD")


def test_check_inclusion():
    assert check_inclusion("ab", "eidbaooo") is True
    assert check_inclusion("ab", "eidboaoo") is False
    assert check_inclusion("abcd", "abc") is False
    assert check_inclusion("abc", "xxcab") is True


@pytest.mark.parametrize("s", ["abcde", "aab", "x"])
def test_rotate_string_all_rotations(s):
    for i in range(len(s)):
        assert rotate_string(s, s[i:] + s[:i])


def test_rotate_string_rejects():
    assert rotate_string("abcde", "abced") is False
    assert rotate_string("abc", "abcabc") is False


def test_minimum_steps():
    assert minimum_steps("000111") == 0
    ones, zeros = 3, 4
    assert minimum_steps("1" * ones + "0" * zeros) == ones * zeros


@pytest.mark.parametrize("s", ["abcd", "aacecaaa", "", "a", "abba", "abab"])
def test_shortest_palindrome_invariants(s):
    result = shortest_palindrome(s)
    assert result == result[::-1]
    assert result.endswith(s)
    assert len(result) <= max(2 * len(s) - 1, 0)


def test_shortest_palindrome_known():
    assert shortest_palindrome("abcd") == "dcbabcd"
    assert shortest_palindrome("abba") == "abba"


def _split_ok(s, taken, k):
    for left in range(taken + 1):
        right = taken - left
        picked = Counter(s[:left]) + Counter(s[len(s) - right:] if right else "")
        if all(picked[c] >= k for c in "abc"):
            return True
    return False


@pytest.mark.parametrize("s,k", [("aabaaaacaabc", 2), ("abc", 1), ("cbbac", 1), ("aabbcc", 2)])
def test_take_characters_is_feasible(s, k):
    taken = take_characters(s, k)
    assert 0 <= taken <= len(s)
    assert _split_ok(s, taken, k)
    if taken:
        assert not _split_ok(s, taken - 1, k)


def test_take_characters_edges():
    assert take_characters("a", 1) == -1
    assert take_characters("abc", 0) == 0


def test_largest_number():
    assert largest_number([3, 30, 34, 5, 9]) == "9534330"
    assert largest_number([0, 0]) == "0"


@pytest.mark.parametrize("nums", [[10, 2], [1, 20, 3], [121, 12], [8, 89, 9]])
def test_largest_number_is_best_ordering(nums):
    result = largest_number(nums)
    options = ["".join(map(str, p)) for p in permutations(nums)]
    assert result in options
    assert all(int(result) >= int(o) for o in options)


@pytest.mark.parametrize("a,b,c", [(1, 1, 7), (7, 1, 0), (2, 2, 2), (0, 0, 0)])
def test_longest_diverse_string(a, b, c):
    result = longest_diverse_string(a, b, c)
    counts = Counter(result)
    assert counts["a"] <= a and counts["b"] <= b and counts["c"] <= c
    assert all(not (x == y == z) for x, y, z in zip(result, result[1:], result[2:]))


def test_longest_diverse_string_uses_everything_when_balanced():
    assert len(longest_diverse_string(2, 2, 2)) == 2 + 2 + 2


def test_maximum_swap():
    assert maximum_swap(2736) == 7236
    assert maximum_swap(9973) == 9973


@pytest.mark.parametrize("num", [0, 1993, 98368, 115, 4321])
def test_maximum_swap_invariants(num):
    result = maximum_swap(num)
    assert result >= num
    assert sorted(str(result)) == sorted(str(num))