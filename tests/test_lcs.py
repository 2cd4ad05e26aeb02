import random

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algolab.lcs import (
    LcsResult,
    lcs_bottom_up,
    lcs_divide_and_conquer,
    lcs_top_down,
    random_sequence,
)

small_text = st.text(alphabet="ABC", max_size=6)


def is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(c == s for s in it) for c in sub)


def test_textbook_example_bottom_up():
    result = lcs_bottom_up("ABCBDAB", "BDCABA")
    assert result.sequence == "BCBA"
    assert result.length == len(result.sequence)
    assert result.comparisons == len("ABCBDAB") * len("BDCABA")


def test_textbook_example_top_down_matches_bottom_up():
    bottom = lcs_bottom_up("ABCBDAB", "BDCABA")
    top = lcs_top_down("ABCBDAB", "BDCABA")
    assert top.length == bottom.length
    assert top.sequence == bottom.sequence
    assert top.comparisons <= (len("ABCBDAB") + 1) * (len("BDCABA") + 1)


def test_divide_and_conquer_counts_every_call():
    result = lcs_divide_and_conquer("A", "B")
    assert result.comparisons == 3
    assert result.length == 0
    assert result.sequence == ""


def test_empty_inputs():
    assert lcs_bottom_up("", "ABC") == LcsResult(0, "", 0)
    assert lcs_top_down("ABC", "").length == 0
    assert lcs_top_down("ABC", "").comparisons == 1
    assert lcs_divide_and_conquer("", "").comparisons == 1


def test_identical_inputs_give_whole_sequence():
    for solver in (lcs_bottom_up, lcs_top_down, lcs_divide_and_conquer):
        result = solver("ABCAB", "ABCAB")
        assert result.sequence == "ABCAB"
        assert result.length == 5


def test_list_inputs_give_list_sequence():
    result = lcs_bottom_up([1, 2, 3], [2, 3, 4])
    assert result.sequence == [2, 3]


@settings(max_examples=60)
@given(small_text, small_text)
def test_all_methods_agree(x, y):
    bottom = lcs_bottom_up(x, y)
    top = lcs_top_down(x, y)
    conquer = lcs_divide_and_conquer(x, y)
    assert bottom.length == top.length == conquer.length
    assert bottom.sequence == top.sequence == conquer.sequence
    assert len(bottom.sequence) == bottom.length
    assert is_subsequence(bottom.sequence, x)
    assert is_subsequence(bottom.sequence, y)


@settings(max_examples=60)
@given(small_text, small_text)
def test_step_counts_are_ordered(x, y):
    bottom = lcs_bottom_up(x, y)
    top = lcs_top_down(x, y)
    conquer = lcs_divide_and_conquer(x, y)
    assert bottom.comparisons == len(x) * len(y)
    assert top.comparisons <= (len(x) + 1) * (len(y) + 1)
    assert conquer.comparisons >= top.comparisons


def test_random_sequence_is_reproducible():
    first = random_sequence(30, "ABC", random.Random(7))
    second = random_sequence(30, "ABC", random.Random(7))
    assert first == second
    assert len(first) == 30
    assert set(first) <= set("ABC")


def test_random_sequence_with_list_alphabet():
    drawn = random_sequence(10, [1, 2], random.Random(1))
    assert len(drawn) == 10
    assert set(drawn) <= {1, 2}


def test_random_sequence_rejects_bad_arguments():
    with pytest.raises(ValueError):
        random_sequence(-1, "ABC", random.Random(0))
    with pytest.raises(ValueError):
        random_sequence(3, "", random.Random(0))