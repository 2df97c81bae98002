"""Tests for bounded rank lookups."""

import pytest

from bp_planner.models.ranks import pick_by_rank, rank_index


@pytest.mark.parametrize("rank, expected", [(0, 0), (2, 2), (3, 3)])
def test_in_range(rank, expected):
    assert rank_index(4, rank) == expected


def test_negative_rank_is_first_slot():
    assert rank_index(4, -1) == 0
    assert rank_index(4, -1, overflow="first") == 0


def test_overflow_last_caps_at_top():
    assert rank_index(4, 4) == 3
    assert rank_index(4, 99) == 3


def test_overflow_first_falls_back():
    assert rank_index(4, 4, overflow="first") == 0


def test_empty_sequence_has_no_slot():
    assert rank_index(0, 0) is None


def test_pick_by_rank():
    costs = (0, 10, 20, 30)
    assert pick_by_rank(costs, 2) == 20
    assert pick_by_rank(costs, 10) == 30
    assert pick_by_rank(costs, 10, overflow="first") == 0


def test_pick_by_rank_empty_default():
    assert pick_by_rank((), 1) is None
    assert pick_by_rank([], 1, default=0) == 0
