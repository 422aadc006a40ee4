import pytest

from labstructs.indexed_list import SinglyLinkedList


def test_construct_from_items_keeps_order():
    lst = SinglyLinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_new_list_is_empty():
    lst = SinglyLinkedList()
    assert lst.empty()
    assert len(lst) == 0
    assert list(lst) == []


def test_push_front_and_back():
    lst = SinglyLinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert not lst.empty()


def test_pop_front_returns_values_in_order():
    lst = SinglyLinkedList(["a", "b", "c"])
    assert lst.pop_front() == "a"
    assert lst.pop_front() == "b"
    assert list(lst) == ["c"]
    assert len(lst) == 1


def test_pop_back_returns_values_in_reverse():
    lst = SinglyLinkedList([1, 2, 3])
    assert lst.pop_back() == 3
    assert lst.pop_back() == 2
    assert lst.pop_back() == 1
    assert lst.empty()


def test_pop_front_on_empty_raises():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError, match="List is empty"):
        lst.pop_front()
    assert len(lst) == 0
    assert list(lst) == []


def test_pop_back_on_empty_raises():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError, match="List is empty"):
        lst.pop_back()
    assert len(lst) == 0
    assert list(lst) == []


def test_at_returns_each_position():
    items = [10, 20, 30, 40]
    lst = SinglyLinkedList(items)
    assert [lst.at(i) for i in range(len(items))] == items


@pytest.mark.parametrize("index", [4, 5, -1])
def test_at_out_of_range(index):
    lst = SinglyLinkedList([10, 20, 30, 40])
    with pytest.raises(IndexError, match="Index out of range"):
        lst.at(index)


def test_insert_at_every_position():
    lst = SinglyLinkedList([1, 3])
    lst.insert(1, 2)
    lst.insert(0, 0)
    lst.insert(4, 4)
    assert list(lst) == [0, 1, 2, 3, 4]
    assert len(lst) == 5


def test_insert_past_end_raises():
    lst = SinglyLinkedList([1])
    with pytest.raises(IndexError):
        lst.insert(2, 9)
    assert list(lst) == [1]


def test_erase_removes_value_and_returns_it():
    lst = SinglyLinkedList(["x", "y", "z"])
    assert lst.erase(1) == "y"
    assert list(lst) == ["x", "z"]
    assert lst.erase(0) == "x"
    assert list(lst) == ["z"]


def test_erase_out_of_range_raises():
    lst = SinglyLinkedList(["x"])
    with pytest.raises(IndexError, match="Index out of range"):
        lst.erase(1)


def test_contains():
    lst = SinglyLinkedList(["apple", "pear"])
    assert "pear" in lst
    assert "plum" not in lst


def test_str_format():
    assert str(SinglyLinkedList([1, 2])) == "1 -> 2 -> nullptr"
    assert str(SinglyLinkedList()) == "nullptr"


def test_insert_then_erase_round_trip():
    original = [5, 6, 7]
    lst = SinglyLinkedList(original)
    lst.insert(2, 99)
    assert lst.erase(2) == 99
    assert list(lst) == original