import pytest

from ftkit.linkedlist import LinkedList, Node


def test_new_node_has_content_and_no_next():
    node = Node("x")
    assert node.content == "x"
    assert node.next is None


def test_list_from_items_keeps_order_and_size():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_prepends_and_replaces_link():
    lst = LinkedList([2, 3])
    node = Node(1, next=Node(99))
    lst.add_front(node)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node


def test_add_front_none_is_ignored():
    lst = LinkedList([1])
    lst.add_front(None)
    assert list(lst) == [1]


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = Node("only")
    lst.add_back(node)
    assert lst.head is node
    assert lst.last() is node


def test_add_back_appends_chain():
    lst = LinkedList([1])
    lst.add_back(Node(2, next=Node(3)))
    assert list(lst) == [1, 2, 3]
    assert lst.last().content == 3


def test_add_back_none_changes_nothing():
    lst = LinkedList([1, 2])
    lst.add_back(None)
    assert list(lst) == [1, 2]


def test_node_delete_calls_callback_and_keeps_link():
    released = []
    following = Node("b")
    node = Node("a", next=following)
    node.delete(released.append)
    assert released == ["a"]
    assert node.content is None
    assert node.next is following


def test_node_delete_without_callback_keeps_content():
    node = Node("a")
    node.delete(None)
    assert node.content == "a"


def test_clear_releases_every_content_in_order():
    released = []
    lst = LinkedList(["a", "b", "c"])
    first = lst.head
    lst.clear(released.append)
    assert released == ["a", "b", "c"]
    assert lst.head is None
    assert len(lst) == 0
    assert first.next is None


def test_for_each_visits_all_contents():
    seen = []
    LinkedList([1, 2, 3]).for_each(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda v: v * 10, lambda v: None)
    assert list(mapped) == [10, 20, 30]
    assert list(lst) == [1, 2, 3]
    assert mapped.head is not lst.head


def test_map_without_function_is_empty():
    lst = LinkedList([1, 2])
    assert len(lst.map(None, lambda v: None)) == 0
    assert len(lst.map(lambda v: v, None)) == 0


def test_map_failure_releases_produced_contents():
    released = []

    def f(value):
        return None if value == 3 else value + 100

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(f, released.append)
    assert released == [101, 102]


def test_map_exception_from_function_releases_and_propagates():
    released = []

    def f(value):
        if value == 2:
            raise RuntimeError("boom")
        return value

    with pytest.raises(RuntimeError):
        LinkedList([1, 2]).map(f, released.append)
    assert released == [1]


def test_len_matches_iteration_count():
    items = list(range(17))
    lst = LinkedList(items)
    assert len(lst) == len(list(lst)) == len(items)