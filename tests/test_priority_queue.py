import pytest

from dsakit.priority_queue import AscendingPriorityQueue


def test_worked_example_from_menu_session():
    q = AscendingPriorityQueue()
    for v in [12, 1, 14, 3, 5]:
        q.insert(v)
    assert list(q) == [12, 1, 14, 3, 5]
    assert q.remove() == 1
    assert list(q) == [12, 14, 3, 5]
    assert q.remove() == 3
    assert list(q) == [12, 14, 5]
    assert q.remove() == 5
    assert q.remove() == 12
    assert q.remove() == 14
    assert q.is_empty()


def test_removal_order_is_sorted():
    values = [8, 3, 3, 9, 0, 4]
    q = AscendingPriorityQueue(values)
    removed = [q.remove() for _ in range(len(values))]
    assert removed == sorted(values)
    assert len(q) == 0


def test_remove_from_empty_raises():
    q = AscendingPriorityQueue()
    with pytest.raises(IndexError):
        q.remove()


def test_first_of_equal_minimums_is_removed():
    a, b = (1, "first"), (1, "second")
    q = AscendingPriorityQueue()
    q.insert((2, "x"))
    q.insert(a)
    q.insert(b)
    assert q.remove() == a
    assert list(q) == [(2, "x"), b]


def test_str_and_len():
    q = AscendingPriorityQueue()
    assert str(q) == "Queue empty. No data to display"
    q.insert(12)
    q.insert(1)
    assert str(q) == "12 1"
    assert len(q) == 2
    assert not q.is_empty()