import pytest

from dsakit.singly_linked_list import SinglyLinkedList


def make(*items):
    lst = SinglyLinkedList()
    for item in items:
        lst.append(item)
    return lst


def test_append_and_front_back():
    lst = make(10, 20)
    assert lst.front() == 10
    assert lst.back() == 20


def test_prepend():
    lst = SinglyLinkedList()
    lst.prepend(30)
    lst.prepend(20)
    assert lst.front() == 20
    assert lst.back() == 30


def test_is_empty_and_size():
    lst = SinglyLinkedList()
    assert lst.is_empty()
    lst.append(5)
    assert not lst.is_empty()
    assert len(lst) == 1


def test_contains_and_find():
    lst = make(1, 2)
    assert 1 in lst
    assert 3 not in lst
    assert lst.find(2).data == 2
    assert lst.find(9) is None


def test_remove_and_clear():
    lst = make(1, 2)
    lst.remove(1)
    assert 1 not in lst
    lst.clear()
    assert lst.is_empty()
    assert lst.tail is None


def test_reverse():
    lst = make(1, 2, 3)
    lst.reverse()
    assert lst.front() == 3
    assert lst.back() == 1
    assert list(lst) == [3, 2, 1]


def test_empty_accessors_raise():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(IndexError):
        lst.back()
    with pytest.raises(IndexError):
        lst.remove_front()


def test_remove_missing_raises():
    lst = make(1, 2)
    with pytest.raises(ValueError):
        lst.remove(7)
    assert list(lst) == [1, 2]


def test_remove_last_updates_back():
    lst = make(1, 2, 3)
    lst.remove(3)
    assert lst.back() == 2
    lst.append(4)
    assert list(lst) == [1, 2, 4]


def test_remove_front_until_empty_then_append():
    lst = make(1, 2)
    lst.remove_front()
    assert lst.front() == 2
    lst.remove_front()
    assert lst.is_empty()
    lst.append(9)
    assert list(lst) == [9]
    assert lst.back() == 9


def test_insert_after_head_and_tail():
    lst = make(10, 30)
    lst.insert_after(lst.head, 20)
    lst.insert_after(lst.tail, 40)
    assert list(lst) == [10, 20, 30, 40]
    assert lst.back() == 40


def test_insert_after_none_raises():
    with pytest.raises(ValueError):
        make(1).insert_after(None, 2)


def test_remove_after():
    lst = make(1, 2, 3)
    lst.remove_after(lst.head)
    assert list(lst) == [1, 3]
    lst.remove_after(lst.head)
    assert lst.back() == 1
    with pytest.raises(ValueError):
        lst.remove_after(lst.tail)
    with pytest.raises(ValueError):
        lst.remove_after(None)


def test_head_and_tail_nodes():
    lst = make(10, 20, 30)
    assert lst.head.data == 10
    assert lst.tail.data == 30
    assert SinglyLinkedList().head is None


def test_str_and_print(capsys):
    lst = make(10, 20, 30)
    assert str(lst) == "10 -> 20 -> 30 -> None"
    assert str(SinglyLinkedList()) == "None"
    lst.print_list()
    assert capsys.readouterr().out == "10 -> 20 -> 30 -> None\n"