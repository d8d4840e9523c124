import os

import pytest

from playerdir.directory import CapacityExceeded, ErrorKind, Ordering, RankedList


def test_lexio_insert_keeps_list_sorted_after_every_insert():
    names = ["mallory", "Bob", "alice", "_guest", "zed", "émile", "Alice", "bob2", "bob"]
    ranked = RankedList(Ordering.LEXIO)

    for name in names:
        ranked.insert(name)
        keys = [os.fsencode(existing) for existing in ranked]
        assert all(left <= right for left, right in zip(keys, keys[1:]))

    assert ranked.names() == sorted(names, key=os.fsencode)
    assert ranked.count == len(names)


def test_lexio_compares_bytes_not_case_folded():
    ranked = RankedList("lexio")
    for name in ["b", "B", "a", "A"]:
        ranked.insert(name)

    assert ranked.names() == ["A", "B", "a", "b"]


def test_lexio_insert_returns_landing_index():
    ranked = RankedList()
    assert ranked.insert("carol") == 0
    assert ranked.insert("alice") == 0
    assert ranked.insert("bob") == 1
    assert ranked.insert("dave") == 3


def test_unordered_appends_in_insertion_order():
    ranked = RankedList(Ordering.UNORDERED)
    for name in ["carol", "alice", "bob"]:
        ranked.insert(name)

    assert ranked.names() == ["carol", "alice", "bob"]
    assert ranked[0] == "carol"
    assert len(ranked) == 3


def test_capacity_violation_is_reported():
    ranked = RankedList(capacity=2)
    ranked.insert("alice")
    ranked.insert("bob")

    with pytest.raises(CapacityExceeded) as excinfo:
        ranked.insert("carol")
    assert excinfo.value.kind is ErrorKind.CAPACITY_EXCEEDED
    assert ranked.names() == ["alice", "bob"]


def test_names_returns_a_copy():
    ranked = RankedList()
    ranked.insert("alice")
    names = ranked.names()
    names.append("mallory")

    assert ranked.names() == ["alice"]


def test_unknown_order_rejected():
    with pytest.raises(ValueError):
        RankedList("reverse")
