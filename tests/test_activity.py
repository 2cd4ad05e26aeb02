import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.activity import greedy_activity_selector, recursive_activity_selector

STARTS = [1, 3, 0, 5, 5, 8]
FINISHES = [2, 4, 6, 7, 9, 9]


def test_greedy_example():
    assert greedy_activity_selector(STARTS, FINISHES) == [1, 2, 4, 6]


def test_recursive_example():
    assert recursive_activity_selector(STARTS, FINISHES) == [1, 2, 4, 6]


def test_empty_input():
    assert greedy_activity_selector([], []) == []
    assert recursive_activity_selector([], []) == []


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        greedy_activity_selector([1, 2], [3])
    with pytest.raises(ValueError):
        recursive_activity_selector([1], [3, 4])


activities = st.lists(
    st.tuples(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=20)),
    max_size=40,
).map(lambda pairs: sorted(((s, s + d) for s, d in pairs), key=lambda a: a[1]))


@given(activities)
def test_selection_is_compatible_and_forms_agree(acts):
    starts = [s for s, _ in acts]
    finishes = [f for _, f in acts]
    greedy = greedy_activity_selector(starts, finishes)
    assert greedy == recursive_activity_selector(starts, finishes)
    for prev, nxt in zip(greedy, greedy[1:]):
        assert prev < nxt
        assert starts[nxt - 1] >= finishes[prev - 1]
    if acts:
        assert greedy[0] == 1