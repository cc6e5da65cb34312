import pytest

from dsakit.circular_doubly_linked_list import CircularDoublyLinkedList

VALUES = [2, 3, 4, 5, 6]


def test_empty_list_has_size_zero():
    assert len(CircularDoublyLinkedList()) == 0


def test_insert_at_head_updates_head_and_size():
    lst = CircularDoublyLinkedList()
    for i, value in enumerate(VALUES):
        lst.insert_at_head(value)
        assert lst.get(0) == value
        assert len(lst) == i + 1


def test_delete_from_head_removes_in_reverse_insertion_order():
    lst = CircularDoublyLinkedList()
    for value in VALUES:
        lst.insert_at_head(value)
    for i in range(4, -1, -1):
        assert lst.get(0) == VALUES[i]
        assert lst.delete_from_head() == VALUES[i]
        assert len(lst) == i


def test_insert_at_tail_keeps_order():
    lst = CircularDoublyLinkedList()
    for i, value in enumerate(VALUES):
        lst.insert_at_tail(value)
        assert lst.get(i) == VALUES[i]
        assert len(lst) == i + 1
    assert list(lst) == VALUES


def test_delete_from_tail_wraps_access_to_head():
    lst = CircularDoublyLinkedList(VALUES)
    for i in range(4, -1, -1):
        assert lst.delete_from_tail() == VALUES[i]
        assert len(lst) == i
        if len(lst):
            assert lst.get(i) == lst.get(0)
    assert list(lst) == []


def test_get_wraps_past_end():
    lst = CircularDoublyLinkedList(VALUES)
    assert lst.get(len(VALUES) + 1) == VALUES[1]


def test_delete_from_empty_list_raises():
    lst = CircularDoublyLinkedList()
    with pytest.raises(IndexError):
        lst.delete_from_head()
    with pytest.raises(IndexError):
        lst.delete_from_tail()


def test_get_rejects_empty_list_and_negative_index():
    with pytest.raises(IndexError):
        CircularDoublyLinkedList().get(0)
    with pytest.raises(IndexError):
        CircularDoublyLinkedList(VALUES).get(-1)


def test_str_joins_with_arrows():
    assert str(CircularDoublyLinkedList([2, 3, 4])) == "2 <-> 3 <-> 4"


def test_mixed_operations_keep_links_consistent():
    lst = CircularDoublyLinkedList([2, 3])
    lst.insert_at_head(1)
    lst.insert_at_tail(4)
    assert list(lst) == [1, 2, 3, 4]
    lst.delete_from_tail()
    lst.delete_from_head()
    assert list(lst) == [2, 3]
    assert lst.get(2) == 2