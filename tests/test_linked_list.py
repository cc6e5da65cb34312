import pytest

from dsakit.linked_list import LinkedList


def test_append_keeps_order():
    values = [3, 1, 2]
    lst = LinkedList()
    for v in values:
        lst.append(v)
    assert list(lst) == values
    assert len(lst) == len(values)


def test_prepend_reverses_order():
    values = [3, 1, 2]
    lst = LinkedList()
    for v in values:
        lst.prepend(v)
    assert list(lst) == list(reversed(values))


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_insert_at_matches_list_insert(position):
    base = [10, 20, 30]
    lst = LinkedList(base)
    lst.insert_at(position, 99)
    expected = list(base)
    expected.insert(position, 99)
    assert list(lst) == expected


def test_insert_at_out_of_range():
    lst = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.insert_at(3, 5)
    with pytest.raises(IndexError):
        lst.insert_at(-1, 5)


def test_pop_front_and_back():
    lst = LinkedList([4, 5, 6])
    assert lst.pop_front() == 4
    assert lst.pop_back() == 6
    assert list(lst) == [5]
    assert lst.pop_back() == 5
    assert len(lst) == 0


def test_pop_from_empty_raises():
    lst = LinkedList()
    with pytest.raises(IndexError):
        lst.pop_front()
    with pytest.raises(IndexError):
        lst.pop_back()
    with pytest.raises(IndexError):
        lst.remove_at(0)


@pytest.mark.parametrize("position", [0, 1, 2, 3])
def test_remove_at_matches_list_pop(position):
    base = [7, 8, 9, 10]
    lst = LinkedList(base)
    expected = list(base)
    removed = expected.pop(position)
    assert lst.remove_at(position) == removed
    assert list(lst) == expected


def test_remove_at_out_of_range():
    lst = LinkedList([1])
    with pytest.raises(IndexError):
        lst.remove_at(1)


def test_search():
    base = [5, 6, 7, 6]
    lst = LinkedList(base)
    assert lst.search(6) == base.index(6)
    assert lst.search(42) is None


def test_sort_in_place():
    base = [9, 2, 7, 2, 5]
    lst = LinkedList(base)
    lst.sort()
    assert list(lst) == sorted(base)
    assert len(lst) == len(base)


def test_str():
    assert str(LinkedList()) == "Empty link list"
    assert str(LinkedList([1, 2])) == "1-> 2-> "