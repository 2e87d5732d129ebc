"""Tests for the pure reordering primitives."""

from taskban.model.ordering import move_between, reorder


def test_reorder_forward():
    assert reorder("abcd", 0, 2) == ("b", "c", "a", "d")


def test_reorder_backward():
    assert reorder("abcd", 3, 1) == ("a", "d", "b", "c")


def test_reorder_same_index_is_identity():
    assert reorder([1, 2, 3], 1, 1) == (1, 2, 3)


def test_reorder_does_not_touch_input():
    seq = [1, 2, 3]
    reorder(seq, 0, 2)
    assert seq == [1, 2, 3]


def test_reorder_round_trip():
    """Reordering i->j then j->i restores the sequence."""
    seq = tuple("abcdef")
    for i in range(len(seq)):
        for j in range(len(seq)):
            if i != j:
                assert reorder(reorder(seq, i, j), j, i) == seq


def test_move_between_into_middle():
    source, dest = move_between("abc", "xy", 1, 1)
    assert source == ("a", "c")
    assert dest == ("x", "b", "y")


def test_move_between_append():
    source, dest = move_between("abc", "xy", 0, 2)
    assert source == ("b", "c")
    assert dest == ("x", "y", "a")


def test_move_between_into_empty():
    source, dest = move_between(["only"], [], 0, 0)
    assert source == ()
    assert dest == ("only",)
