import pytest

from malcolm.linked import LinkedList


def test_items_keep_their_order():
    items = [3, "x", None, 7]
    assert list(LinkedList(items)) == items


def test_empty_list_has_no_length():
    assert len(LinkedList()) == 0
    assert list(LinkedList()) == []


def test_push_front_puts_item_first():
    lst = LinkedList([2, 3])
    lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last() == "only"
    assert list(lst) == ["only"]


def test_append_puts_item_last():
    lst = LinkedList(["a"])
    lst.append("b")
    assert lst.last() == "b"
    assert list(lst) == ["a", "b"]


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


@pytest.mark.parametrize("items", [[], [1], list(range(10))])
def test_length_matches_item_count(items):
    assert len(LinkedList(items)) == len(items)


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["p", "q", "r"]).for_each(seen.append)
    assert seen == ["p", "q", "r"]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped is not original


def test_map_propagates_errors():
    def boom(_):
        raise RuntimeError("fail")

    with pytest.raises(RuntimeError):
        LinkedList([1]).map(boom)


def test_clear_passes_every_item_to_delete():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_without_delete_then_reuse():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.append(5)
    assert list(lst) == [5]
    assert lst.last() == 5